"""
IDE project host: targets declared in an XcodeProject.yml.

IDE targets are known by display name and may not build a product.
Their sources are assumed to live in a folder named after the target,
next to the project file.
"""

from __future__ import annotations

from pathlib import Path

from swiftgen_plugin.adapters.base import HostAdapter
from swiftgen_plugin.core.config.loader import (
    XCODE_MANIFEST_FILE,
    load_xcode_manifest,
    manifest_root,
)
from swiftgen_plugin.core.config.plugin import PLUGIN_NAME
from swiftgen_plugin.core.models.manifest import XcodeProjectManifest, XcodeTarget
from swiftgen_plugin.core.models.target import TargetDescriptor
from swiftgen_plugin.core.services.tool_resolver import ToolResolver


class XcodeHost(HostAdapter):
    """An IDE project with named targets."""

    manifest_file = XCODE_MANIFEST_FILE

    def __init__(
        self,
        manifest: XcodeProjectManifest,
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
    def from_manifest(cls, path: Path) -> XcodeHost:
        return cls(load_xcode_manifest(path), manifest_root(path))

    @property
    def name(self) -> str:
        return "xcode"

    @property
    def manifest(self) -> XcodeProjectManifest:
        return self._manifest

    @property
    def root_directory(self) -> Path:
        return self._root

    def describe(self, target: XcodeTarget) -> TargetDescriptor:
        return TargetDescriptor(
            name=target.display_name,
            module_name=target.product.name if target.product else "",
            directory=self._root / target.display_name,
        )

    def targets(self) -> list[TargetDescriptor]:
        return [self.describe(t) for t in self._manifest.targets]

    def work_directory(self, target: TargetDescriptor) -> Path:
        return (
            self._root / self._manifest.derived_data / self._manifest.name
            / "SourcePackages" / "plugins" / f"{target.name}.output" / PLUGIN_NAME
        )
