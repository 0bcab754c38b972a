"""
Host adapter base: the contract between the planner and a build host.

Each host flavour (package, IDE project) exposes the same capability
surface: a root directory, a per-target work directory, a tool lookup
and a list of targets already reduced to ``TargetDescriptor``. The
planner only ever sees a ``PluginContext`` and a ``TargetDescriptor``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from swiftgen_plugin.core.models.context import PluginContext
from swiftgen_plugin.core.models.target import TargetDescriptor
from swiftgen_plugin.core.services.tool_resolver import ToolResolver

logger = logging.getLogger(__name__)


class HostAdapter(ABC):
    """Abstract base class for build hosts.

    To add a host:
        1. Subclass HostAdapter
        2. Implement name, root_directory, targets, work_directory
        3. Register it in the HostRegistry
    """

    #: Manifest file that identifies this host on disk.
    manifest_file: str = ""

    def __init__(self, tool_resolver: ToolResolver | None = None):
        self._tool_resolver = tool_resolver or ToolResolver()

    @classmethod
    def from_manifest(cls, path: Path) -> HostAdapter:
        """Load the host described by a manifest file.

        Optional. Only hosts with a ``manifest_file`` implement it, and only
        those can be registered in the HostRegistry.
        """
        raise NotImplementedError(f"{cls.__name__} has no manifest format")

    @property
    @abstractmethod
    def name(self) -> str:
        """The host identifier (e.g., 'package', 'xcode')."""

    @property
    @abstractmethod
    def root_directory(self) -> Path:
        """Package root or project directory."""

    @abstractmethod
    def targets(self) -> list[TargetDescriptor]:
        """All targets the host can build, in declaration order."""

    @abstractmethod
    def work_directory(self, target: TargetDescriptor) -> Path:
        """The plugin's scratch directory for ``target``."""

    @property
    def tool_resolver(self) -> ToolResolver:
        return self._tool_resolver

    def use_tools(self, overrides: dict[str, str]) -> None:
        """Layer explicit tool paths over the host's own lookup."""
        if overrides:
            self._tool_resolver = self._tool_resolver.with_overrides(overrides)

    def target(self, name: str) -> TargetDescriptor | None:
        """Look up a target by name."""
        for target in self.targets():
            if target.name == name:
                return target
        return None

    def context_for(self, target: TargetDescriptor) -> PluginContext:
        """Build the planning context for one target.

        The host owns the parent of the plugin's work directory, so it is
        created here, best effort. The work directory itself belongs to
        the plugin.
        """
        work_directory = self.work_directory(target)
        try:
            work_directory.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.debug("Could not create %s: %s", work_directory.parent, e)
        return PluginContext(
            root_directory=self.root_directory,
            plugin_work_directory=work_directory,
            tool_resolver=self._tool_resolver,
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r} root={str(self.root_directory)!r}>"
