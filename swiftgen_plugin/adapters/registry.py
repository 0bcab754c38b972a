"""
Host registry: pick and load the build host for a directory.

The registry maps host names to adapter classes and knows which
manifest file identifies each one. Detection walks up from the
start directory and takes the first manifest it finds.
"""

from __future__ import annotations

import logging
from pathlib import Path

from swiftgen_plugin.adapters.base import HostAdapter
from swiftgen_plugin.adapters.package import PackageHost
from swiftgen_plugin.adapters.xcode import XcodeHost
from swiftgen_plugin.core.config.loader import ConfigError, find_manifest

logger = logging.getLogger(__name__)

AUTO = "auto"


class HostRegistry:
    """Central registry of host adapter classes."""

    def __init__(self) -> None:
        self._hosts: dict[str, type[HostAdapter]] = {}

    @classmethod
    def default(cls) -> HostRegistry:
        registry = cls()
        registry.register("package", PackageHost)
        registry.register("xcode", XcodeHost)
        return registry

    def register(self, name: str, host_cls: type[HostAdapter]) -> None:
        """Register a manifest-backed host class.

        Raises:
            ValueError: If the class has no manifest file to detect it by.
        """
        if not host_cls.manifest_file:
            raise ValueError(f"{host_cls.__name__} has no manifest file and cannot be registered")
        if name in self._hosts:
            logger.warning("Overwriting existing host: %s", name)
        self._hosts[name] = host_cls
        logger.debug("Registered host: %s", name)

    def unregister(self, name: str) -> None:
        self._hosts.pop(name, None)

    def get(self, name: str) -> type[HostAdapter] | None:
        return self._hosts.get(name)

    def list_hosts(self) -> list[str]:
        return list(self._hosts.keys())

    def host_for_manifest(self, path: Path) -> str | None:
        """Host name owning a manifest file name, if any."""
        for name, host_cls in self._hosts.items():
            if host_cls.manifest_file == path.name:
                return name
        return None

    def find(self, start_dir: Path | None = None, host: str = AUTO) -> Path | None:
        """Locate the manifest for ``host`` (or any host) above ``start_dir``."""
        if host == AUTO:
            names = [c.manifest_file for c in self._hosts.values() if c.manifest_file]
        else:
            host_cls = self._hosts.get(host)
            if host_cls is None:
                raise ConfigError(f"Unknown host '{host}'. Known: {', '.join(self._hosts)}")
            names = [host_cls.manifest_file]
        return find_manifest(start_dir, names)

    def load(self, manifest_path: Path | None = None, host: str = AUTO) -> HostAdapter:
        """Load a host adapter from its manifest.

        Args:
            manifest_path: Explicit manifest. If None, searches upward from cwd.
            host: Host name, or ``auto`` to infer it from the manifest file name.

        Raises:
            ConfigError: If no manifest is found, the host is unknown, or the
                manifest is invalid.
        """
        if manifest_path is None:
            manifest_path = self.find(host=host)
        if manifest_path is None:
            wanted = " or ".join(
                c.manifest_file for n, c in self._hosts.items() if host in (AUTO, n)
            )
            raise ConfigError(f"No {wanted} found. Specify one with --config.")

        name = host if host != AUTO else self.host_for_manifest(manifest_path)
        if name is None:
            raise ConfigError(
                f"Cannot tell which host owns {manifest_path.name}; pass --host explicitly."
            )

        host_cls = self._hosts.get(name)
        if host_cls is None:
            raise ConfigError(f"Unknown host '{name}'. Known: {', '.join(self._hosts)}")

        adapter = host_cls.from_manifest(manifest_path)
        logger.debug("Loaded %r", adapter)
        return adapter
