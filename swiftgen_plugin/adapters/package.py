"""
Package host: targets declared in a Package.yml.

Layout conventions follow the package manager:

    <root>/Sources/<target>                               target sources
    <root>/.build/plugins/outputs/<pkg>/<target>/<plugin> plugin work dir
"""

from __future__ import annotations

import re
from pathlib import Path

from swiftgen_plugin.adapters.base import HostAdapter
from swiftgen_plugin.core.config.loader import (
    PACKAGE_MANIFEST_FILE,
    load_package_manifest,
    manifest_root,
)
from swiftgen_plugin.core.config.plugin import PLUGIN_NAME
from swiftgen_plugin.core.models.manifest import PackageManifest, PackageTarget
from swiftgen_plugin.core.models.target import TargetDescriptor
from swiftgen_plugin.core.services.tool_resolver import ToolResolver

_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_]")


def c99_name(name: str) -> str:
    """Module name the package manager derives from a target name."""
    result = _NON_IDENTIFIER.sub("_", name)
    if result and result[0].isdigit():
        result = "_" + result
    return result


class PackageHost(HostAdapter):
    """A package with source, binary and system targets."""

    manifest_file = PACKAGE_MANIFEST_FILE

    def __init__(
        self,
        manifest: PackageManifest,
        root: Path,
        tool_resolver: ToolResolver | None = None,
    ):
        if tool_resolver is None:
            tool_resolver = ToolResolver(
                overrides=manifest.tools,
                search_paths=manifest.tool_paths,
                base_dir=root,
            )
        super().__init__(tool_resolver)
        self._manifest = manifest
        self._root = root

    @classmethod
    def from_manifest(cls, path: Path) -> PackageHost:
        return cls(load_package_manifest(path), manifest_root(path))

    @property
    def name(self) -> str:
        return "package"

    @property
    def manifest(self) -> PackageManifest:
        return self._manifest

    @property
    def root_directory(self) -> Path:
        return self._root

    def describe(self, target: PackageTarget) -> TargetDescriptor:
        """Reduce a manifest target to the shape the planner consumes.

        Only source-module targets have a module name; binary and system
        targets report an empty one.
        """
        if target.is_source_module:
            module_name = target.module_name or c99_name(target.name)
        else:
            module_name = ""
        return TargetDescriptor(
            name=target.name,
            module_name=module_name,
            directory=self._root / (target.path or f"Sources/{target.name}"),
        )

    def targets(self) -> list[TargetDescriptor]:
        return [self.describe(t) for t in self._manifest.targets]

    def work_directory(self, target: TargetDescriptor) -> Path:
        return (
            self._root / self._manifest.build_dir / "plugins" / "outputs"
            / self._manifest.name / target.name / PLUGIN_NAME
        )
