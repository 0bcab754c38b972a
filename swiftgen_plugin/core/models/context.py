"""
Plugin context: the ambient build environment for one planning call.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from swiftgen_plugin.core.services.tool_resolver import ToolResolver


@dataclass(frozen=True)
class PluginContext:
    """What the host tells the plugin about where it is running.

    Attributes:
        root_directory: Package root, or the IDE project directory.
        plugin_work_directory: Target-scoped scratch directory owned by
            this plugin. Generated sources are expected to land here.
        tool_resolver: Host tool lookup.
    """

    root_directory: Path
    plugin_work_directory: Path
    tool_resolver: ToolResolver

    def tool(self, name: str) -> Path:
        """Resolve an executable by name.

        Raises:
            ToolNotFoundError: If the host cannot provide the tool.
        """
        return self.tool_resolver.resolve(name)
