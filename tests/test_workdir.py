"""
Tests for best-effort work directory cleanup.
"""

from pathlib import Path

from swiftgen_plugin.core.services import workdir
from swiftgen_plugin.core.services.workdir import force_clean


class TestForceClean:
    def test_creates_missing_directory(self, tmp_path: Path):
        target = tmp_path / "out"
        assert force_clean(target) is True
        assert target.is_dir()

    def test_removes_existing_contents(self, tmp_path: Path):
        target = tmp_path / "out"
        (target / "nested").mkdir(parents=True)
        (target / "nested" / "Old.swift").write_text("")
        (target / "Top.swift").write_text("")
        assert force_clean(target) is True
        assert list(target.iterdir()) == []

    def test_not_recursive(self, tmp_path: Path):
        target = tmp_path / "a" / "b"
        assert force_clean(target) is False
        assert not (tmp_path / "a").exists()

    def test_removal_failure_is_ignored(self, tmp_path: Path, monkeypatch):
        target = tmp_path / "out"
        target.mkdir()
        (target / "stale").write_text("")

        def refuse(path):
            raise PermissionError("denied")

        monkeypatch.setattr(workdir.shutil, "rmtree", refuse)
        # directory still exists, so creation fails too; neither raises
        assert force_clean(target) is False
        assert (target / "stale").exists()

    def test_file_in_the_way(self, tmp_path: Path):
        target = tmp_path / "out"
        target.write_text("stale")
        assert force_clean(target) is True
        assert target.is_dir()
        assert list(target.iterdir()) == []

    def test_symlink_is_unlinked_not_followed(self, tmp_path: Path):
        real = tmp_path / "real"
        real.mkdir()
        (real / "Keep.swift").write_text("")
        target = tmp_path / "out"
        target.symlink_to(real, target_is_directory=True)
        assert force_clean(target) is True
        assert target.is_dir() and not target.is_symlink()
        assert (real / "Keep.swift").exists()

    def test_dangling_symlink(self, tmp_path: Path):
        target = tmp_path / "out"
        target.symlink_to(tmp_path / "gone")
        assert force_clean(target) is True
        assert target.is_dir()
