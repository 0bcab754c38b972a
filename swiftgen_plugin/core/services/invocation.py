"""
Invocation builder: turn one configuration file into one command.
"""

from __future__ import annotations

from pathlib import Path

from swiftgen_plugin.core.config.plugin import (
    CONFIG_FLAG,
    DISPLAY_NAME,
    ENV_DERIVED_SOURCES_DIR,
    ENV_PRODUCT_MODULE_NAME,
    ENV_PROJECT_DIR,
    ENV_TARGET_NAME,
    GENERATOR_SUBCOMMAND,
)
from swiftgen_plugin.core.models.command import CommandDescriptor
from swiftgen_plugin.core.models.context import PluginContext
from swiftgen_plugin.core.models.target import TargetDescriptor


def generator_arguments(configuration: Path) -> tuple[str, ...]:
    return (*GENERATOR_SUBCOMMAND, CONFIG_FLAG, str(configuration))


def generator_environment(context: PluginContext, target: TargetDescriptor) -> dict[str, str]:
    """The four variables a swiftgen.yml may reference."""
    return {
        ENV_PROJECT_DIR: str(context.root_directory),
        ENV_TARGET_NAME: target.name,
        ENV_PRODUCT_MODULE_NAME: target.module_name,
        ENV_DERIVED_SOURCES_DIR: str(context.plugin_work_directory),
    }


def build_command(
    configuration: Path,
    executable: Path,
    context: PluginContext,
    target: TargetDescriptor,
) -> CommandDescriptor:
    return CommandDescriptor(
        display_name=DISPLAY_NAME,
        executable=executable,
        arguments=generator_arguments(configuration),
        environment=generator_environment(context, target),
        output_directory=context.plugin_work_directory,
    )
