"""
Configuration validator: decide whether a target gets any commands.
"""

from __future__ import annotations

from pathlib import Path

from swiftgen_plugin.core.config.plugin import CONFIG_FILE_NAME
from swiftgen_plugin.core.diagnostics import Diagnostics
from swiftgen_plugin.core.models.target import TargetDescriptor


def missing_configuration_message(target_name: str) -> str:
    return (
        f"No SwiftGen configurations found for target {target_name}. "
        "If you would like to generate sources for this target include a "
        f"`{CONFIG_FILE_NAME}` in the target's source directory, or include a "
        f"shared `{CONFIG_FILE_NAME}` at the package's root."
    )


def validate_configurations(
    configurations: list[Path],
    target: TargetDescriptor,
    diagnostics: Diagnostics,
) -> bool:
    """Return True when planning should proceed.

    An empty list emits one warning naming the target and returns False.
    The build itself carries on without generated sources.
    """
    if not configurations:
        diagnostics.warning(missing_configuration_message(target.name))
        return False
    return True
