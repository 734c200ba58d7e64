"""File I/O helpers: materialization, comparison, emptiness."""

from __future__ import annotations

import os
import shutil
from typing import BinaryIO, Callable

from ._types import CopyMode


# ---------------------------------------------------------------------------
# Content strategies
# ---------------------------------------------------------------------------

_COPY_CHUNK_SIZE = 65536


def _stream_content(fin: BinaryIO, fout: BinaryIO) -> None:
    """Copy every byte of *fin* into *fout* and force it to disk."""
    shutil.copyfileobj(fin, fout, _COPY_CHUNK_SIZE)
    fout.flush()
    os.fsync(fout.fileno())


def _discard_content(fin: BinaryIO, fout: BinaryIO) -> None:
    """Leave *fout* empty; the source is opened but never read."""


_MODE_TO_STRATEGY: dict[CopyMode, Callable[[BinaryIO, BinaryIO], None]] = {
    CopyMode.CONTENT: _stream_content,
    CopyMode.SHADOW: _discard_content,
}


# ---------------------------------------------------------------------------
# File materialization
# ---------------------------------------------------------------------------

def materialize_file(source: str, destination: str, *, mode: CopyMode = CopyMode.CONTENT) -> None:
    """Create *destination* from *source* according to *mode*.

    The source must exist and be readable in both modes.  The destination
    is created or truncated.  Both handles are closed on every path; an
    error closing the destination propagates even if the content was
    written.
    """
    strategy = _MODE_TO_STRATEGY[CopyMode(mode)]
    with open(source, "rb") as fin:
        with open(destination, "wb") as fout:
            strategy(fin, fout)


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

def compare_file(file1: str | os.PathLike, file2: str | os.PathLike) -> int:
    """Compare the full contents of two files byte by byte.

    Returns ``-1`` if *file1* sorts before *file2* (including when it is
    a proper prefix), ``0`` if they are identical, ``1`` otherwise.
    Both files are read entirely into memory.  Raises ``OSError`` if
    either cannot be read.
    """
    with open(file1, "rb") as f:
        data1 = f.read()
    with open(file2, "rb") as f:
        data2 = f.read()
    return (data1 > data2) - (data1 < data2)


def is_file_empty(path: str | os.PathLike) -> bool:
    """``True`` if *path* can be stat'ed and has size zero.

    Returns ``False`` when the file is non-empty and also when it cannot
    be stat'ed at all, including for paths the OS rejects outright.
    """
    try:
        return os.stat(path).st_size == 0
    except (OSError, ValueError):
        return False
