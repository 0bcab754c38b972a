"""
Host manifest models: YAML descriptions of the two supported host layouts.

A package manifest (``Package.yml``) mirrors a package with source
targets. An IDE project manifest (``XcodeProject.yml``) mirrors a
project whose targets are identified by display name and may or may
not build a product.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

# Target kinds that compile sources into a module of their own
SOURCE_MODULE_KINDS = frozenset({"regular", "executable", "test", "macro", "plugin"})

TargetKind = Literal["regular", "executable", "test", "macro", "plugin", "binary", "system"]


class ToolSettings(BaseModel):
    """Where the host looks for executables, shared by both manifests."""

    tools: dict[str, str] = Field(default_factory=dict)   # name → explicit path
    tool_paths: list[str] = Field(default_factory=list)   # extra search dirs


class PackageTarget(BaseModel):
    """A target declared in Package.yml."""

    name: str
    kind: TargetKind = "regular"
    path: str | None = None         # default: Sources/<name>
    module_name: str | None = None  # default: C99 name of the target

    @property
    def is_source_module(self) -> bool:
        return self.kind in SOURCE_MODULE_KINDS


class PackageManifest(ToolSettings):
    """Root of Package.yml."""

    name: str
    build_dir: str = ".build"
    targets: list[PackageTarget] = Field(default_factory=list)

    def get_target(self, name: str) -> PackageTarget | None:
        for target in self.targets:
            if target.name == name:
                return target
        return None


class XcodeProduct(BaseModel):
    """The product an IDE target builds."""

    name: str
    kind: str = "application"


class XcodeTarget(BaseModel):
    """A target declared in XcodeProject.yml."""

    display_name: str
    product: XcodeProduct | None = None


class XcodeProjectManifest(ToolSettings):
    """Root of XcodeProject.yml."""

    name: str
    derived_data: str = "DerivedData"
    targets: list[XcodeTarget] = Field(default_factory=list)

    def get_target(self, display_name: str) -> XcodeTarget | None:
        for target in self.targets:
            if target.display_name == display_name:
                return target
        return None
