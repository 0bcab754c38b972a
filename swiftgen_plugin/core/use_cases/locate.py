"""
Locate use case: report where each target's configuration may live.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from swiftgen_plugin.adapters.base import HostAdapter
from swiftgen_plugin.adapters.registry import AUTO
from swiftgen_plugin.core.config.loader import ConfigError
from swiftgen_plugin.core.models.target import TargetDescriptor
from swiftgen_plugin.core.services.locator import candidate_configurations
from swiftgen_plugin.core.use_cases.common import load_host, select_targets


@dataclass
class TargetConfigurations:
    target: TargetDescriptor
    candidates: list[Path] = field(default_factory=list)

    @property
    def found(self) -> list[Path]:
        return [p for p in self.candidates if p.is_file()]

    def to_dict(self) -> dict:
        return {
            "target": self.target.name,
            "candidates": [
                {"path": str(p), "exists": p.is_file()} for p in self.candidates
            ],
            "found": len(self.found),
        }


@dataclass
class LocateResult:
    """Result of the locate use case."""

    root_directory: Path | None = None
    targets: list[TargetConfigurations] = field(default_factory=list)
    unknown_targets: list[str] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        result: dict = {
            "root_directory": str(self.root_directory),
            "targets": [t.to_dict() for t in self.targets],
        }
        if self.unknown_targets:
            result["unknown_targets"] = self.unknown_targets
        return result


def run_locate(
    config_path: Path | None = None,
    host_name: str = AUTO,
    target_names: list[str] | None = None,
    host: HostAdapter | None = None,
) -> LocateResult:
    """List candidate configuration files for the selected targets."""
    result = LocateResult()

    if host is None:
        try:
            host = load_host(config_path, host_name)
        except ConfigError as e:
            result.error = str(e)
            return result

    result.root_directory = host.root_directory
    targets, result.unknown_targets = select_targets(host, target_names)
    for target in targets:
        result.targets.append(
            TargetConfigurations(
                target=target,
                candidates=candidate_configurations(host.root_directory, target.directory),
            )
        )
    return result
