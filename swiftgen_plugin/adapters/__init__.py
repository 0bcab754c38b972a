"""Host adapters: bindings for the supported build hosts.

Public re-exports for convenient access.
"""

from swiftgen_plugin.adapters.base import HostAdapter
from swiftgen_plugin.adapters.mock import MockHost
from swiftgen_plugin.adapters.package import PackageHost
from swiftgen_plugin.adapters.registry import HostRegistry
from swiftgen_plugin.adapters.xcode import XcodeHost

__all__ = [
    "HostAdapter",
    "HostRegistry",
    "MockHost",
    "PackageHost",
    "XcodeHost",
]
