"""
Planner: the build-tool plugin entry point.

    locate → validate → resolve generator → reset work dir → build commands

Only generator resolution can fail. It runs before the work
directory is touched, so a failure leaves no partial state and
returns no commands.
"""

from __future__ import annotations

import logging

from swiftgen_plugin.core.config.plugin import GENERATOR_TOOL_NAME
from swiftgen_plugin.core.diagnostics import Diagnostics
from swiftgen_plugin.core.models.command import CommandDescriptor
from swiftgen_plugin.core.models.context import PluginContext
from swiftgen_plugin.core.models.target import TargetDescriptor
from swiftgen_plugin.core.services.invocation import build_command
from swiftgen_plugin.core.services.locator import locate_configurations
from swiftgen_plugin.core.services.validator import validate_configurations
from swiftgen_plugin.core.services.workdir import force_clean

logger = logging.getLogger(__name__)


def create_build_commands(
    context: PluginContext,
    target: TargetDescriptor,
    diagnostics: Diagnostics | None = None,
) -> list[CommandDescriptor]:
    """Plan the pre-build commands for one target.

    Args:
        context: Ambient build environment for this target.
        target: The target about to be built.
        diagnostics: Sink for host-facing messages. A throwaway one is
            used when omitted.

    Returns:
        One command per configuration file, root configuration first.
        Empty when the target has no configuration.

    Raises:
        ToolNotFoundError: If the generator executable cannot be resolved.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    configurations = locate_configurations(context.root_directory, target.directory)
    if not validate_configurations(configurations, target, diagnostics):
        return []

    executable = context.tool(GENERATOR_TOOL_NAME)

    # Clear the plugin's directory in case of dangling files
    force_clean(context.plugin_work_directory)

    commands = [
        build_command(configuration, executable, context, target)
        for configuration in configurations
    ]
    logger.info("Planned %d command(s) for target %s", len(commands), target.name)
    return commands
