from ._copy import copy, shadow_copy, copy_dry_run, compare_file, is_file_empty
from ._copy import CopyReport, CopyAction, CopyMode, DestState, EntryKind
from .exceptions import TypeConflictError

__all__ = [
    "copy", "shadow_copy", "copy_dry_run", "compare_file", "is_file_empty",
    "CopyReport", "CopyAction", "CopyMode", "DestState", "EntryKind",
    "TypeConflictError",
]
