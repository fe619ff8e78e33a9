from pathlib import Path
import os

import pytest

from scratchdir.services.remove_tree import remove_tree


def _populate(root: Path) -> None:
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "a.txt").write_text("a")
    (root / "sub" / "b.txt").write_text("b")
    (root / "sub" / "deeper" / "c.txt").write_text("c")


def test_removes_whole_tree(tmp_path: Path):
    root = tmp_path / "root"
    root.mkdir()
    _populate(root)
    assert remove_tree(root) == []
    assert not root.exists()


def test_missing_root_is_reported(tmp_path: Path):
    failures = remove_tree(tmp_path / "gone")
    assert len(failures) == 1
    assert isinstance(failures[0].error, FileNotFoundError)


@pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
def test_symlinks_are_not_followed(tmp_path: Path):
    outside_dir = tmp_path / "outside"
    outside_dir.mkdir()
    (outside_dir / "keep.txt").write_text("keep")
    outside_file = tmp_path / "keep-too.txt"
    outside_file.write_text("keep")

    root = tmp_path / "root"
    root.mkdir()
    (root / "dir_link").symlink_to(outside_dir, target_is_directory=True)
    (root / "file_link").symlink_to(outside_file)

    assert remove_tree(root) == []
    assert not root.exists()
    assert (outside_dir / "keep.txt").read_text() == "keep"
    assert outside_file.read_text() == "keep"


@pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
def test_symlinked_root_is_left_alone(tmp_path: Path):
    target = tmp_path / "target"
    target.mkdir()
    (target / "keep.txt").write_text("keep")
    link = tmp_path / "link"
    link.symlink_to(target, target_is_directory=True)

    failures = remove_tree(link)
    assert failures
    assert (target / "keep.txt").exists()


def test_continues_past_failures(tmp_path: Path, monkeypatch):
    root = tmp_path / "root"
    root.mkdir()
    _populate(root)
    (root / "sub" / "locked.txt").write_text("locked")
    (root / "z.txt").write_text("z")

    real_unlink = os.unlink

    def unlink(path, *args, **kwargs):
        if os.fsdecode(path).endswith("locked.txt"):
            raise PermissionError(13, "Permission denied", os.fsdecode(path))
        return real_unlink(path, *args, **kwargs)

    monkeypatch.setattr(os, "unlink", unlink)
    failures = remove_tree(root)
    monkeypatch.undo()

    assert failures[0].operation == "unlink"
    assert failures[0].path.name == "locked.txt"
    assert isinstance(failures[0].error, PermissionError)
    assert (root / "sub" / "locked.txt").exists()
    assert not (root / "a.txt").exists()
    assert not (root / "z.txt").exists()
    assert not (root / "sub" / "b.txt").exists()
    assert not (root / "sub" / "deeper").exists()
