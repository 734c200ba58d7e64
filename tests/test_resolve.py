"""Tests for destination resolution, path normalization and the tree walk."""

import os

import pytest

from treecopy._copy import (
    CREATED_DIR,
    DestState,
    EntryKind,
    _relative_to,
    _strip_trailing_sep,
    resolve_destination,
    walk_tree,
)


MISSING = DestState()
A_FILE = DestState(exists=True, is_dir=False)
A_DIR = DestState(exists=True, is_dir=True)

SRC = os.path.join("/data", "photos")
DST = os.path.join("/backup", "out")


def resolve(visited, *, source_is_dir, snapshot, current):
    return resolve_destination(
        SRC, DST, visited,
        source_is_dir=source_is_dir, snapshot=snapshot, current=current,
    )


class TestStripTrailingSep:
    def test_no_separator(self):
        assert _strip_trailing_sep("a/b") == "a/b"

    def test_single_trailing(self):
        assert _strip_trailing_sep("a/b/") == "a/b"

    def test_multiple_trailing(self):
        assert _strip_trailing_sep("a/b///") == "a/b"

    def test_root_kept(self):
        assert _strip_trailing_sep("/") == "/"

    def test_pathlike(self, tmp_path):
        assert _strip_trailing_sep(tmp_path) == str(tmp_path)

    def test_empty(self):
        assert _strip_trailing_sep("") == ""


class TestRelativeTo:
    def test_same_path(self):
        assert _relative_to("/a/b", "/a/b") == ""

    def test_nested(self):
        assert _relative_to("/a/b/c/d", "/a/b") == os.path.join("c", "d")

    def test_empty_base(self):
        assert _relative_to("a/b", "") == "a/b"

    def test_root_base(self):
        assert _relative_to("/etc", "/") == "etc"

    def test_sibling_prefix_rejected(self):
        with pytest.raises(ValueError):
            _relative_to("/a/bc", "/a/b")


class TestResolveNonDirectoryDestination:
    def test_file_to_missing(self):
        assert resolve(SRC, source_is_dir=False, snapshot=MISSING, current=MISSING) == DST

    def test_file_to_existing_file(self):
        assert resolve(SRC, source_is_dir=False, snapshot=A_FILE, current=A_FILE) == DST

    def test_dir_root_to_missing(self):
        assert resolve(SRC, source_is_dir=True, snapshot=MISSING, current=MISSING) == DST


class TestResolveDirectoryDestination:
    def test_file_into_dir(self):
        got = resolve(SRC, source_is_dir=False, snapshot=A_DIR, current=A_DIR)
        assert got == os.path.join(DST, "photos")

    def test_dir_into_existing_dir_root(self):
        got = resolve(SRC, source_is_dir=True, snapshot=A_DIR, current=A_DIR)
        assert got == os.path.join(DST, "photos")

    def test_dir_into_existing_dir_child(self):
        visited = os.path.join(SRC, "2024", "img.jpg")
        got = resolve(visited, source_is_dir=True, snapshot=A_DIR, current=A_DIR)
        assert got == os.path.join(DST, "photos", "2024", "img.jpg")

    def test_dir_into_created_dir_child(self):
        visited = os.path.join(SRC, "2024", "img.jpg")
        got = resolve(visited, source_is_dir=True, snapshot=MISSING, current=CREATED_DIR)
        assert got == os.path.join(DST, "2024", "img.jpg")

    def test_dir_into_created_dir_root(self):
        got = resolve(SRC, source_is_dir=True, snapshot=MISSING, current=CREATED_DIR)
        assert got == DST

    def test_relative_source_into_existing_dir(self):
        got = resolve_destination(
            "photos", "out", os.path.join("photos", "a.jpg"),
            source_is_dir=True, snapshot=A_DIR, current=A_DIR,
        )
        assert got == os.path.join("out", "photos", "a.jpg")

    def test_dot_source_into_existing_dir(self, tmp_path, monkeypatch):
        project = tmp_path / "project"
        project.mkdir()
        monkeypatch.chdir(project)
        root = resolve_destination(
            ".", "out", ".", source_is_dir=True, snapshot=A_DIR, current=A_DIR,
        )
        child = resolve_destination(
            ".", "out", os.path.join(".", "a.txt"),
            source_is_dir=True, snapshot=A_DIR, current=A_DIR,
        )
        assert root == os.path.join("out", "project")
        assert child == os.path.join("out", "project", "a.txt")

    def test_dotdot_source_into_existing_dir(self, tmp_path, monkeypatch):
        inner = tmp_path / "project" / "inner"
        inner.mkdir(parents=True)
        monkeypatch.chdir(inner)
        got = resolve_destination(
            "..", "out", os.path.join("..", "inner"),
            source_is_dir=True, snapshot=A_DIR, current=A_DIR,
        )
        assert got == os.path.join("out", "project", "inner")


class TestDestState:
    def test_missing(self, tmp_path):
        assert DestState.classify(str(tmp_path / "nope")) == MISSING

    def test_file(self, tmp_path):
        f = tmp_path / "f"
        f.write_bytes(b"x")
        assert DestState.classify(str(f)) == A_FILE

    def test_dir(self, tmp_path):
        assert DestState.classify(str(tmp_path)) == A_DIR

    def test_immutable(self):
        with pytest.raises(AttributeError):
            MISSING.is_dir = True


class TestWalkTree:
    def test_deep_tree(self, tmp_path):
        root = tmp_path / "deep"
        path = str(root)
        os.mkdir(path)
        for _ in range(1100):
            path = os.path.join(path, "a")
            os.mkdir(path)
        entries = list(walk_tree(str(root)))
        assert len(entries) == 1101
        assert entries[-1].path == path
        assert all(e.kind == EntryKind.DIR for e in entries)

    def test_files_and_dirs_interleaved_by_name(self, tmp_path):
        root = tmp_path / "r"
        (root / "b").mkdir(parents=True)
        (root / "a.txt").write_text("a")
        (root / "b" / "inner.txt").write_text("i")
        (root / "c.txt").write_text("c")
        names = [os.path.relpath(e.path, root) for e in walk_tree(str(root))]
        assert names == [".", "a.txt", "b", os.path.join("b", "inner.txt"), "c.txt"]

    def test_single_file(self, tmp_path):
        f = tmp_path / "one.txt"
        f.write_text("1")
        entries = list(walk_tree(str(f)))
        assert [(e.path, e.kind) for e in entries] == [(str(f), EntryKind.FILE)]

    def test_parents_before_children(self, tree):
        entries = list(walk_tree(str(tree)))
        seen = set()
        for e in entries:
            parent = os.path.dirname(e.path)
            if e.path != str(tree):
                assert parent in seen
            if e.kind == EntryKind.DIR:
                seen.add(e.path)

    def test_sorted_siblings(self, tree):
        entries = list(walk_tree(str(tree)))
        top = [os.path.basename(e.path) for e in entries
               if os.path.dirname(e.path) == str(tree)]
        assert top == sorted(top)

    def test_root_first(self, tree):
        first = next(walk_tree(str(tree)))
        assert first.path == str(tree)
        assert first.kind == EntryKind.DIR

    def test_symlink_not_followed(self, tree):
        os.symlink(tree / "data", tree / "link")
        entries = {e.path: e.kind for e in walk_tree(str(tree))}
        assert entries[str(tree / "link")] == EntryKind.OTHER
        assert str(tree / "link" / "a.bin") not in entries

    def test_missing_root(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list(walk_tree(str(tmp_path / "nope")))
