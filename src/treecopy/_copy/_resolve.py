"""Path normalization, tree walking, and destination path resolution."""

from __future__ import annotations

import os
from typing import Iterator

from ._types import DestState, EntryKind, WalkEntry


# ---------------------------------------------------------------------------
# Path normalization
# ---------------------------------------------------------------------------

def _strip_trailing_sep(path: str | os.PathLike) -> str:
    """Return *path* as a string without trailing separators.

    A path made only of separators (the filesystem root) is returned as a
    single separator.
    """
    raw = os.fspath(path)
    seps = os.sep + (os.altsep or "")
    stripped = raw.rstrip(seps)
    if not stripped and raw:
        return raw[0]
    return stripped


def _relative_to(path: str, base: str) -> str:
    """Return *path* relative to *base*, or ``""`` when they are equal.

    Walk paths are always built by joining names onto the root, so plain
    prefix arithmetic is exact here.  An empty *base* stands for the
    current directory.
    """
    if not base:
        return path
    if path == base:
        return ""
    prefix = base if base.endswith(os.sep) else base + os.sep
    if not path.startswith(prefix):
        raise ValueError(f"{path!r} is not under {base!r}")
    return path[len(prefix):]


# ---------------------------------------------------------------------------
# Tree walking
# ---------------------------------------------------------------------------

def walk_tree(root: str) -> Iterator[WalkEntry]:
    """Yield *root* and everything under it, parents before children.

    The root is classified with ``os.stat``; descendants are classified
    without following symlinks, so a symlink is reported as
    ``EntryKind.OTHER`` and never descended into.  Siblings are visited
    in sorted name order.  Listing errors propagate.

    Pending directory listings are kept on an explicit stack, so the
    depth of the tree is not bounded by the interpreter's recursion limit.
    """
    kind = EntryKind.from_st_mode(os.stat(root).st_mode)
    yield WalkEntry(root, kind)
    if kind != EntryKind.DIR:
        return
    stack = [iter(_list_children(root))]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        yield entry
        if entry.kind == EntryKind.DIR:
            stack.append(iter(_list_children(entry.path)))


def _list_children(dirpath: str) -> list[WalkEntry]:
    """Classify the entries of *dirpath*, sorted by name."""
    with os.scandir(dirpath) as it:
        entries = sorted(it, key=lambda e: e.name)
    children: list[WalkEntry] = []
    for entry in entries:
        full = os.path.join(dirpath, entry.name)
        if entry.is_dir(follow_symlinks=False):
            children.append(WalkEntry(full, EntryKind.DIR))
        elif entry.is_file(follow_symlinks=False):
            children.append(WalkEntry(full, EntryKind.FILE))
        else:
            children.append(WalkEntry(full, EntryKind.OTHER))
    return children


# ---------------------------------------------------------------------------
# Destination resolution
# ---------------------------------------------------------------------------

def resolve_destination(
    source: str,
    destination: str,
    visited: str,
    *,
    source_is_dir: bool,
    snapshot: DestState,
    current: DestState,
) -> str:
    """Return where *visited* (a path under *source*) lands under *destination*.

    *snapshot* is the destination classification taken before the walk;
    *current* is the latest one, updated after every directory the walk
    creates.

    - *current* not a directory: the destination itself (only the root
      entry reaches this case).
    - source is a file: ``destination/basename(source)``.
    - source is a directory that already existed as a directory
      destination: ``destination/<source name>/...``.
    - source is a directory and the destination was created by the walk:
      ``destination/...``, the source's name is not repeated.
    """
    if not current.is_dir:
        return destination
    name = _source_name(source)
    if not source_is_dir:
        return os.path.join(destination, name)
    rel = _relative_to(visited, source)
    if snapshot.is_dir:
        rel = os.path.join(name, rel) if rel else name
    if not rel:
        return destination
    return os.path.join(destination, rel)


def _source_name(source: str) -> str:
    """Base name of *source*, with ``.`` and ``..`` resolved first."""
    return os.path.basename(os.path.abspath(source))
