"""
Mock host: in-memory build host for tests.

Targets and directories are supplied directly instead of being read
from a manifest. Every context handed out is recorded.
"""

from __future__ import annotations

from pathlib import Path

from swiftgen_plugin.adapters.base import HostAdapter
from swiftgen_plugin.core.models.context import PluginContext
from swiftgen_plugin.core.models.target import TargetDescriptor
from swiftgen_plugin.core.services.tool_resolver import ToolResolver


class MockHost(HostAdapter):
    """Universal mock host for testing.

    By default each target's work directory is
    ``<work_root>/<target name>``.
    """

    def __init__(
        self,
        root: Path,
        targets: list[TargetDescriptor] | None = None,
        work_root: Path | None = None,
        tool_resolver: ToolResolver | None = None,
        host_name: str = "mock",
    ):
        super().__init__(tool_resolver or ToolResolver(use_path=False))
        self._root = root
        self._targets = list(targets or [])
        self._work_root = work_root or root / ".build" / "plugins"
        self._name = host_name
        self._context_log: list[PluginContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def root_directory(self) -> Path:
        return self._root

    @property
    def context_log(self) -> list[PluginContext]:
        """All contexts this mock has handed out."""
        return self._context_log

    def add_target(self, target: TargetDescriptor) -> None:
        self._targets.append(target)

    def targets(self) -> list[TargetDescriptor]:
        return list(self._targets)

    def work_directory(self, target: TargetDescriptor) -> Path:
        return self._work_root / target.name

    def context_for(self, target: TargetDescriptor) -> PluginContext:
        context = super().context_for(target)
        self._context_log.append(context)
        return context
