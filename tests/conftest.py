"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from swiftgen_plugin.core.models.context import PluginContext
from swiftgen_plugin.core.models.target import TargetDescriptor
from swiftgen_plugin.core.services.tool_resolver import ToolResolver


def write_executable(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(0o755)
    return path


@pytest.fixture(name="write_executable")
def write_executable_fixture():
    """Factory writing a trivial executable script at a path."""
    return write_executable


@pytest.fixture
def fake_swiftgen(tmp_path: Path) -> Path:
    """An executable stand-in for the generator."""
    return write_executable(tmp_path / "bin" / "swiftgen")


@pytest.fixture
def resolver(fake_swiftgen: Path) -> ToolResolver:
    return ToolResolver(overrides={"swiftgen": fake_swiftgen}, use_path=False)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """An empty package root."""
    root = tmp_path / "repo"
    root.mkdir()
    return root


@pytest.fixture
def target(repo: Path) -> TargetDescriptor:
    directory = repo / "Sources" / "Foo"
    directory.mkdir(parents=True)
    return TargetDescriptor(name="Foo", module_name="FooKit", directory=directory)


@pytest.fixture
def context(repo: Path, resolver: ToolResolver) -> PluginContext:
    work_root = repo / ".build" / "plugins"
    work_root.mkdir(parents=True)
    return PluginContext(
        root_directory=repo,
        plugin_work_directory=work_root / "out",
        tool_resolver=resolver,
    )


@pytest.fixture
def package_manifest(repo: Path) -> Path:
    """A Package.yml with one source target, one binary target and a tool path."""
    content = textwrap.dedent("""\
        name: Demo
        tool_paths:
          - bin
        targets:
          - name: Foo
            module_name: FooKit
          - name: my-lib
            path: Libraries/MyLib
          - name: Vendored
            kind: binary
    """)
    path = repo / "Package.yml"
    path.write_text(content)
    write_executable(repo / "bin" / "swiftgen")
    return path


@pytest.fixture
def xcode_manifest(repo: Path) -> Path:
    content = textwrap.dedent("""\
        project:
          name: DemoApp
        targets:
          - display_name: DemoApp
            product:
              name: DemoAppModule
          - display_name: Scripts
    """)
    path = repo / "XcodeProject.yml"
    path.write_text(content)
    return path
