"""
Domain models: Pydantic types for the plugin.

    from swiftgen_plugin.core.models import TargetDescriptor, CommandDescriptor, PluginContext
"""

from swiftgen_plugin.core.models.command import CommandDescriptor
from swiftgen_plugin.core.models.context import PluginContext
from swiftgen_plugin.core.models.manifest import (
    PackageManifest,
    PackageTarget,
    XcodeProduct,
    XcodeProjectManifest,
    XcodeTarget,
)
from swiftgen_plugin.core.models.target import TargetDescriptor

__all__ = [
    "CommandDescriptor",
    "PackageManifest",
    "PackageTarget",
    "PluginContext",
    "TargetDescriptor",
    "XcodeProduct",
    "XcodeProjectManifest",
    "XcodeTarget",
]
