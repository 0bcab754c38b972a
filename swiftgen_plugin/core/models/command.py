"""
Command descriptor: the pre-build invocation handed back to the host.

The host owns execution, retries and output-freshness tracking. This
module only describes *what* to run.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class CommandDescriptor(BaseModel):
    """An immutable pre-build command."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    executable: Path
    arguments: tuple[str, ...] = ()
    environment: dict[str, str] = Field(default_factory=dict)
    output_directory: Path

    @property
    def argv(self) -> list[str]:
        """Full argument vector, executable first."""
        return [str(self.executable), *self.arguments]

    def to_dict(self) -> dict:
        return {
            "display_name": self.display_name,
            "executable": str(self.executable),
            "arguments": list(self.arguments),
            "environment": dict(self.environment),
            "output_directory": str(self.output_directory),
        }
