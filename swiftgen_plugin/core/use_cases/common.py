"""
Shared use-case helpers: host loading and target selection.
"""

from __future__ import annotations

from pathlib import Path

from swiftgen_plugin.adapters.base import HostAdapter
from swiftgen_plugin.adapters.registry import AUTO, HostRegistry
from swiftgen_plugin.core.models.target import TargetDescriptor


def load_host(
    config_path: Path | None = None,
    host_name: str = AUTO,
    tools: dict[str, str] | None = None,
    registry: HostRegistry | None = None,
) -> HostAdapter:
    """Load the build host and apply command-line tool overrides.

    Raises:
        ConfigError: If the manifest cannot be found or loaded.
    """
    registry = registry or HostRegistry.default()
    host = registry.load(config_path, host=host_name)
    host.use_tools(tools or {})
    return host


def select_targets(
    host: HostAdapter,
    target_names: list[str] | None,
) -> tuple[list[TargetDescriptor], list[str]]:
    """Pick the requested targets, preserving the requested order.

    Returns:
        (targets, unknown_names). All targets when no names are given.
    """
    if not target_names:
        return host.targets(), []

    selected: list[TargetDescriptor] = []
    unknown: list[str] = []
    for name in target_names:
        target = host.target(name)
        if target is None:
            unknown.append(name)
        else:
            selected.append(target)
    return selected, unknown
