"""
Tool resolver: the host's lookup of executables by name.

Resolution order:
    1. Explicit overrides (manifest ``tools:`` or ``--tool NAME=PATH``)
    2. ``SWIFTGEN_PLUGIN_TOOL_<NAME>`` environment variable
    3. Manifest ``tool_paths`` directories
    4. ``PATH`` via ``shutil.which``

A tool that cannot be found is fatal for the planning call.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterable, Mapping
from pathlib import Path

from swiftgen_plugin.core.config.plugin import TOOL_ENV_PREFIX

logger = logging.getLogger(__name__)


class PluginError(Exception):
    """Base class for errors that abort planning for a target."""


class ToolNotFoundError(PluginError):
    """Raised when a named executable cannot be resolved."""

    def __init__(self, name: str, searched: list[str] | None = None):
        self.name = name
        self.searched = searched or []
        detail = f" (searched: {', '.join(self.searched)})" if self.searched else ""
        super().__init__(f"Tool '{name}' not found{detail}")


def env_var_for(name: str) -> str:
    """Environment variable that overrides the path of ``name``."""
    return TOOL_ENV_PREFIX + name.upper().replace("-", "_")


def _is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


class ToolResolver:
    """Resolve executables by name.

    Args:
        overrides: Explicit ``name → path`` mapping. Relative paths are
            resolved against ``base_dir``.
        search_paths: Directories searched before ``PATH``.
        base_dir: Anchor for relative overrides and search paths.
        use_path: Whether to fall back to ``PATH`` lookup.
    """

    def __init__(
        self,
        overrides: Mapping[str, str | Path] | None = None,
        search_paths: Iterable[str | Path] = (),
        base_dir: Path | None = None,
        use_path: bool = True,
    ):
        self._base_dir = base_dir
        self._overrides = {
            name: self._anchor(Path(path)) for name, path in (overrides or {}).items()
        }
        self._search_paths = [self._anchor(Path(p)) for p in search_paths]
        self._use_path = use_path

    def _anchor(self, path: Path) -> Path:
        if self._base_dir is not None and not path.is_absolute():
            return self._base_dir / path
        return path

    def with_overrides(self, overrides: Mapping[str, str | Path]) -> ToolResolver:
        """Return a copy with additional overrides taking precedence."""
        clone = ToolResolver(use_path=self._use_path, base_dir=self._base_dir)
        clone._overrides = {**self._overrides, **{k: Path(v) for k, v in overrides.items()}}
        clone._search_paths = list(self._search_paths)
        return clone

    def resolve(self, name: str) -> Path:
        """Find the executable for ``name``.

        Raises:
            ToolNotFoundError: If no candidate is an executable file.
        """
        searched: list[str] = []

        override = self._overrides.get(name)
        if override is not None:
            if _is_executable(override):
                logger.debug("Resolved %s via override: %s", name, override)
                return override
            searched.append(str(override))

        env_name = env_var_for(name)
        env_value = os.environ.get(env_name)
        if env_value:
            candidate = Path(env_value)
            if _is_executable(candidate):
                logger.debug("Resolved %s via %s: %s", name, env_name, candidate)
                return candidate
            searched.append(f"${env_name}={env_value}")

        for directory in self._search_paths:
            candidate = directory / name
            if _is_executable(candidate):
                logger.debug("Resolved %s in search path: %s", name, candidate)
                return candidate
            searched.append(str(directory))

        if self._use_path:
            found = shutil.which(name)
            if found:
                logger.debug("Resolved %s on PATH: %s", name, found)
                return Path(found)
            searched.append("PATH")

        raise ToolNotFoundError(name, searched)
