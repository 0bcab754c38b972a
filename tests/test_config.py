"""
Tests for manifest loading: Package.yml / XcodeProject.yml parsing and validation.
"""

import textwrap
from pathlib import Path

import pytest

from swiftgen_plugin.core.config.loader import (
    ConfigError,
    find_manifest,
    load_package_manifest,
    load_xcode_manifest,
    manifest_root,
)


class TestFindManifest:
    def test_in_start_dir(self, package_manifest: Path, repo: Path):
        assert find_manifest(repo) == package_manifest.resolve()

    def test_walks_up(self, package_manifest: Path, repo: Path):
        nested = repo / "Sources" / "Foo"
        nested.mkdir(parents=True)
        assert find_manifest(nested) == package_manifest.resolve()

    def test_name_order(self, package_manifest: Path, xcode_manifest: Path, repo: Path):
        assert find_manifest(repo) == package_manifest.resolve()
        assert find_manifest(repo, ["XcodeProject.yml"]) == xcode_manifest.resolve()

    def test_not_found(self, tmp_path: Path):
        assert find_manifest(tmp_path, ["Nothing-here.yml"]) is None


class TestLoadPackageManifest:
    def test_valid(self, package_manifest: Path):
        manifest = load_package_manifest(package_manifest)
        assert manifest.name == "Demo"
        assert [t.name for t in manifest.targets] == ["Foo", "my-lib", "Vendored"]
        assert manifest.get_target("Vendored").kind == "binary"
        assert manifest.get_target("Vendored").is_source_module is False
        assert manifest.get_target("missing") is None
        assert manifest.build_dir == ".build"
        assert manifest.tool_paths == ["bin"]

    def test_wrapped(self, tmp_path: Path):
        path = tmp_path / "Package.yml"
        path.write_text(textwrap.dedent("""\
            package:
              name: Wrapped
            targets:
              - name: A
        """))
        manifest = load_package_manifest(path)
        assert manifest.name == "Wrapped"
        assert manifest.targets[0].name == "A"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_package_manifest(tmp_path / "Package.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "Package.yml"
        path.write_text("name: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_package_manifest(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "Package.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_package_manifest(path)

    def test_schema_error(self, tmp_path: Path):
        path = tmp_path / "Package.yml"
        path.write_text("targets:\n  - name: A\n")
        with pytest.raises(ConfigError, match="Invalid manifest"):
            load_package_manifest(path)

    def test_unknown_kind(self, tmp_path: Path):
        path = tmp_path / "Package.yml"
        path.write_text("name: P\ntargets:\n  - name: A\n    kind: widget\n")
        with pytest.raises(ConfigError):
            load_package_manifest(path)


class TestLoadXcodeManifest:
    def test_valid(self, xcode_manifest: Path):
        manifest = load_xcode_manifest(xcode_manifest)
        assert manifest.name == "DemoApp"
        assert manifest.get_target("DemoApp").product.name == "DemoAppModule"
        assert manifest.get_target("Scripts").product is None
        assert manifest.derived_data == "DerivedData"


def test_manifest_root(package_manifest: Path, repo: Path):
    assert manifest_root(package_manifest) == repo.resolve()
