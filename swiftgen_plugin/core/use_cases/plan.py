"""
Plan use case: create pre-build commands for every target of a host.

Each target is planned independently with its own context and
diagnostics. A fatal error on one target is recorded on that target
and the remaining targets are still planned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from swiftgen_plugin.adapters.base import HostAdapter
from swiftgen_plugin.adapters.registry import AUTO
from swiftgen_plugin.core.config.loader import ConfigError
from swiftgen_plugin.core.diagnostics import Diagnostics
from swiftgen_plugin.core.models.command import CommandDescriptor
from swiftgen_plugin.core.models.target import TargetDescriptor
from swiftgen_plugin.core.services.planner import create_build_commands
from swiftgen_plugin.core.services.tool_resolver import PluginError
from swiftgen_plugin.core.use_cases.common import load_host, select_targets

logger = logging.getLogger(__name__)


@dataclass
class TargetPlan:
    """Planning outcome for one target."""

    target: TargetDescriptor
    commands: list[CommandDescriptor] = field(default_factory=list)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict:
        result: dict = {
            "target": self.target.to_dict(),
            "commands": [c.to_dict() for c in self.commands],
            "diagnostics": [d.to_dict() for d in self.diagnostics.entries],
        }
        if self.error:
            result["error"] = self.error
        return result


@dataclass
class PlanResult:
    """Result of the plan use case."""

    host: str | None = None
    root_directory: Path | None = None
    targets: list[TargetPlan] = field(default_factory=list)
    unknown_targets: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return (
            self.error is None
            and not self.unknown_targets
            and not any(t.failed for t in self.targets)
        )

    @property
    def command_count(self) -> int:
        return sum(len(t.commands) for t in self.targets)

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            return result

        result["host"] = self.host
        result["root_directory"] = str(self.root_directory)
        result["ok"] = self.ok
        result["command_count"] = self.command_count
        result["targets"] = [t.to_dict() for t in self.targets]
        if self.unknown_targets:
            result["unknown_targets"] = self.unknown_targets
        return result


def plan_target(host: HostAdapter, target: TargetDescriptor) -> TargetPlan:
    """Plan one target, capturing a fatal error instead of raising."""
    plan = TargetPlan(target=target)
    try:
        plan.commands = create_build_commands(host.context_for(target), target, plan.diagnostics)
    except PluginError as e:
        logger.error("Planning failed for target %s: %s", target.name, e)
        plan.error = str(e)
    return plan


def run_plan(
    config_path: Path | None = None,
    host_name: str = AUTO,
    target_names: list[str] | None = None,
    tools: dict[str, str] | None = None,
    host: HostAdapter | None = None,
) -> PlanResult:
    """Plan pre-build commands for the selected targets.

    Args:
        config_path: Optional explicit host manifest.
        host_name: Host flavour, or ``auto`` to detect from the manifest.
        target_names: Targets to plan. All targets when empty.
        tools: Extra ``name → path`` tool overrides.
        host: Already-loaded host; skips manifest loading when given.

    Returns:
        PlanResult with one TargetPlan per selected target.
    """
    result = PlanResult()

    if host is None:
        try:
            host = load_host(config_path, host_name, tools)
        except ConfigError as e:
            result.error = str(e)
            return result
    else:
        host.use_tools(tools or {})

    result.host = host.name
    result.root_directory = host.root_directory

    targets, result.unknown_targets = select_targets(host, target_names)
    for name in result.unknown_targets:
        logger.error("Unknown target: %s", name)

    for target in targets:
        result.targets.append(plan_target(host, target))

    return result
