"""Recursive copy of files and directory trees on local disk.

A source file or directory is walked parent-before-children and each
entry is placed under the destination according to whether the source
is a directory and whether the destination already existed as one.
Files are materialized either with their content or as empty
placeholders ("shadow" copy).
"""

from ._types import (
    CREATED_DIR,
    CopyAction,
    CopyMode,
    CopyReport,
    DestState,
    EntryKind,
    WalkEntry,
)
from ._resolve import (
    _strip_trailing_sep,
    _relative_to,
    resolve_destination,
    walk_tree,
)
from ._io import (
    compare_file,
    is_file_empty,
    materialize_file,
)
from ._ops import (
    DEFAULT_DIR_MODE,
    copy,
    copy_dry_run,
    shadow_copy,
)

__all__ = [
    # Public types
    "CopyAction", "CopyMode", "CopyReport", "DestState", "EntryKind", "WalkEntry",
    # Public functions
    "copy", "shadow_copy", "copy_dry_run",
    "compare_file", "is_file_empty",
    "materialize_file", "resolve_destination", "walk_tree",
    "DEFAULT_DIR_MODE",
    # Private but used by tests
    "_strip_trailing_sep", "_relative_to", "CREATED_DIR",
]
