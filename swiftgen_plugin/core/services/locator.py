"""
Configuration locator: where a target's swiftgen.yml files live.

The package root is listed before the target directory. When both
exist the host runs two independent generation passes, one per file;
they are never merged.
"""

from __future__ import annotations

import logging
from pathlib import Path

from swiftgen_plugin.core.config.plugin import CONFIG_FILE_NAME

logger = logging.getLogger(__name__)


def candidate_configurations(root_directory: Path, target_directory: Path) -> list[Path]:
    """All places a configuration may live, in search order."""
    return [directory / CONFIG_FILE_NAME for directory in (root_directory, target_directory)]


def locate_configurations(root_directory: Path, target_directory: Path) -> list[Path]:
    """Existing configuration files, root first.

    Missing files are omitted silently.
    """
    found = [
        path
        for path in candidate_configurations(root_directory, target_directory)
        if path.is_file()
    ]
    logger.debug("Configurations under %s / %s: %s", root_directory, target_directory, found)
    return found
