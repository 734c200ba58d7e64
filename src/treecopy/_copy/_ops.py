"""Copy, shadow copy, and dry-run operations (internal implementations)."""

from __future__ import annotations

import errno
import os
import stat

from ..exceptions import TypeConflictError
from ._types import (
    CREATED_DIR,
    CopyAction,
    CopyMode,
    CopyReport,
    DestState,
    EntryKind,
)
from ._resolve import _strip_trailing_sep, resolve_destination, walk_tree
from ._io import materialize_file


DEFAULT_DIR_MODE = 0o755


# ---------------------------------------------------------------------------
# Directory creation
# ---------------------------------------------------------------------------

def _make_dir(path: str, dir_mode: int) -> DestState:
    """Create *path* and return its freshly stat'ed classification."""
    os.mkdir(path, dir_mode)
    st = os.stat(path)
    return DestState(exists=True, is_dir=stat.S_ISDIR(st.st_mode))


# ---------------------------------------------------------------------------
# Common walker
# ---------------------------------------------------------------------------

def _copy_tree(
    source: str | os.PathLike,
    destination: str | os.PathLike,
    *,
    mode: CopyMode,
    dir_mode: int = DEFAULT_DIR_MODE,
    dry_run: bool = False,
) -> CopyReport:
    """Walk *source* and reproduce it at *destination*.

    Shared by :func:`copy`, :func:`shadow_copy` and :func:`copy_dry_run`;
    *mode* picks the file content strategy.  The destination is
    classified once up front (the snapshot) and the latest classification
    is threaded through the walk, replaced after each directory created.

    The first error aborts the walk and propagates; whatever was already
    written stays on disk.
    """
    source = _strip_trailing_sep(source)
    destination = _strip_trailing_sep(destination)

    try:
        src_st = os.stat(source)
    except FileNotFoundError:
        raise FileNotFoundError(errno.ENOENT, "Source not found", source) from None
    source_is_dir = stat.S_ISDIR(src_st.st_mode)

    snapshot = DestState.classify(destination)
    if source_is_dir and snapshot.exists and not snapshot.is_dir:
        raise TypeConflictError(source, destination)

    report = CopyReport(mode=CopyMode(mode), dry_run=dry_run)
    current = snapshot
    for entry in walk_tree(source):
        if entry.kind == EntryKind.OTHER:
            continue
        target = resolve_destination(
            source, destination, entry.path,
            source_is_dir=source_is_dir, snapshot=snapshot, current=current,
        )
        if entry.kind == EntryKind.DIR:
            current = CREATED_DIR if dry_run else _make_dir(target, dir_mode)
        elif not dry_run:
            materialize_file(entry.path, target, mode=mode)
        report.actions.append(CopyAction(src=entry.path, dest=target, kind=entry.kind))
    return report


# ---------------------------------------------------------------------------
# Public operations
# ---------------------------------------------------------------------------

def copy(
    source: str | os.PathLike,
    destination: str | os.PathLike,
    *,
    dir_mode: int = DEFAULT_DIR_MODE,
) -> CopyReport:
    """Copy a file or directory tree to *destination*, content included.

    - file → missing or file destination: written at *destination*.
    - file → directory: written at ``destination/<name>``.
    - directory → missing destination: *destination* becomes the copy.
    - directory → directory: copied to ``destination/<name>``.
    - directory → existing non-directory: :class:`TypeConflictError`.

    Directories are created with *dir_mode*; every file is synced to
    disk before the next entry is visited.  Raises ``FileNotFoundError``
    when *source* does not exist, and the first ``OSError`` of the walk
    otherwise.
    """
    return _copy_tree(source, destination, mode=CopyMode.CONTENT, dir_mode=dir_mode)


def shadow_copy(
    source: str | os.PathLike,
    destination: str | os.PathLike,
    *,
    dir_mode: int = DEFAULT_DIR_MODE,
) -> CopyReport:
    """Like :func:`copy`, but every file is created empty.

    Source files must still exist and be readable; their content is
    never read.
    """
    return _copy_tree(source, destination, mode=CopyMode.SHADOW, dir_mode=dir_mode)


def copy_dry_run(
    source: str | os.PathLike,
    destination: str | os.PathLike,
    *,
    mode: CopyMode = CopyMode.CONTENT,
) -> CopyReport:
    """Report what :func:`copy` (or :func:`shadow_copy`) would do.

    Runs the same walk and destination resolution, treating every
    directory as created, but writes nothing.  The up-front checks
    (missing source, type conflict) still raise.
    """
    return _copy_tree(source, destination, mode=mode, dry_run=True)
