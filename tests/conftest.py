"""Shared fixtures for treecopy tests."""

import os

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def tree(tmp_path):
    """Create a sample source tree and return its path.

    Tree:
        src/readme.txt, src/empty.txt, src/.hidden,
        src/data/a.bin, src/data/b.bin,
        src/data/nested/deep.txt,
        src/blank/            (empty directory)
    """
    root = tmp_path / "src"
    root.mkdir()
    (root / "readme.txt").write_text("readme\n")
    (root / "empty.txt").write_bytes(b"")
    (root / ".hidden").write_text("hidden")

    data = root / "data"
    data.mkdir()
    (data / "a.bin").write_bytes(os.urandom(1000))
    (data / "b.bin").write_bytes(b"\x00\x01\x02" * 100)
    nested = data / "nested"
    nested.mkdir()
    (nested / "deep.txt").write_text("deep")

    (root / "blank").mkdir()
    return root


@pytest.fixture
def listing():
    """Return a helper that maps a directory to its contents."""
    return _relative_listing


def _relative_listing(base):
    """Return ``{relative_path: is_dir}`` for everything under *base*."""
    result = {}
    for dirpath, dirnames, filenames in os.walk(base):
        for name in dirnames:
            full = os.path.join(dirpath, name)
            result[os.path.relpath(full, base)] = True
        for name in filenames:
            full = os.path.join(dirpath, name)
            result[os.path.relpath(full, base)] = False
    return result
