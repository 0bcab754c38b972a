"""
Manifest loader: reads host manifests into domain models.

Reads YAML, validates against Pydantic schemas, and returns typed
manifest objects. Two manifest flavours are supported:

    Package.yml        package-based host
    XcodeProject.yml   IDE-project-based host
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from swiftgen_plugin.core.models.manifest import PackageManifest, XcodeProjectManifest

logger = logging.getLogger(__name__)

PACKAGE_MANIFEST_FILE = "Package.yml"
XCODE_MANIFEST_FILE = "XcodeProject.yml"

MANIFEST_FILES = (PACKAGE_MANIFEST_FILE, XCODE_MANIFEST_FILE)

_M = TypeVar("_M", bound=BaseModel)


class ConfigError(Exception):
    """Raised when a host manifest is invalid or missing."""


def find_manifest(
    start_dir: Path | None = None,
    names: Iterable[str] = MANIFEST_FILES,
) -> Path | None:
    """Search for a host manifest starting from the given directory, walking up.

    Within one directory, ``names`` are tried in order.

    Args:
        start_dir: Directory to start searching from (default: cwd).
        names: Manifest file names to look for.

    Returns:
        Path to the manifest, or None if not found.
    """
    names = tuple(names)
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        for name in names:
            candidate = current / name
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def _load_yaml_mapping(path: Path) -> dict:
    if not path.is_file():
        raise ConfigError(f"Manifest not found: {path}")

    logger.debug("Loading manifest from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    return data


def _validate(model: type[_M], data: dict, path: Path) -> _M:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid manifest {path}: {e}") from e


def load_package_manifest(path: Path) -> PackageManifest:
    """Load and validate a Package.yml.

    The YAML may wrap everything under a ``package`` key or be flat.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    data = _load_yaml_mapping(path)
    if isinstance(data.get("package"), dict):
        data = {**data["package"], **{k: v for k, v in data.items() if k != "package"}}

    manifest = _validate(PackageManifest, data, path)
    logger.info("Loaded package '%s' with %d targets", manifest.name, len(manifest.targets))
    return manifest


def load_xcode_manifest(path: Path) -> XcodeProjectManifest:
    """Load and validate an XcodeProject.yml.

    The YAML may wrap everything under a ``project`` key or be flat.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    data = _load_yaml_mapping(path)
    if isinstance(data.get("project"), dict):
        data = {**data["project"], **{k: v for k, v in data.items() if k != "project"}}

    manifest = _validate(XcodeProjectManifest, data, path)
    logger.info("Loaded project '%s' with %d targets", manifest.name, len(manifest.targets))
    return manifest


def manifest_root(manifest_path: Path) -> Path:
    """Get the root directory from a manifest path."""
    return manifest_path.parent.resolve()
