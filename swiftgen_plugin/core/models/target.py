"""
Target model: the host's view of one compilation unit.

Both host flavours (package and IDE project) collapse into this single
shape before planning starts, so the planner never needs to know which
host it is talking to.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class TargetDescriptor(BaseModel):
    """A single target the host is about to build.

    ``module_name`` is the product module name handed to the generator.
    Hosts that cannot name a module for a target leave it empty.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    module_name: str = ""
    directory: Path

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "module_name": self.module_name,
            "directory": str(self.directory),
        }
