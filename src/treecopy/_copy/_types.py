"""Data structures for copy operations."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from enum import Enum


class EntryKind(str, Enum):
    """Kind of a visited filesystem entry.

    Members: ``DIR``, ``FILE`` (regular file), ``OTHER`` (anything else,
    including symlinks, which the walk never follows).
    """
    DIR = "dir"
    FILE = "file"
    OTHER = "other"

    def __str__(self) -> str:          # noqa: D105
        return self.value

    @classmethod
    def from_st_mode(cls, mode: int) -> EntryKind:
        """Classify an ``st_mode`` value."""
        if stat.S_ISDIR(mode):
            return cls.DIR
        if stat.S_ISREG(mode):
            return cls.FILE
        return cls.OTHER


class CopyMode(str, Enum):
    """How file content is materialized at the destination.

    Members: ``CONTENT`` (copy every byte), ``SHADOW`` (zero-length
    placeholder with the same name).
    """
    CONTENT = "content"
    SHADOW = "shadow"

    def __str__(self) -> str:          # noqa: D105
        return self.value


@dataclass(frozen=True)
class DestState:
    """Classification of the destination root.

    Attributes:
        exists: The path exists.
        is_dir: The path exists and is a directory.
    """
    exists: bool = False
    is_dir: bool = False

    @classmethod
    def classify(cls, path: str) -> DestState:
        """Stat *path* and classify it.  Any stat failure reads as missing."""
        try:
            st = os.stat(path)
        except OSError:
            return cls()
        return cls(exists=True, is_dir=stat.S_ISDIR(st.st_mode))


# A directory created by the walk itself.
CREATED_DIR = DestState(exists=True, is_dir=True)


@dataclass(frozen=True)
class WalkEntry:
    """A path produced by the tree walk, with its :class:`EntryKind`."""
    path: str
    kind: EntryKind


@dataclass
class CopyAction:
    """A single directory creation or file materialization.

    Attributes:
        src: Source path of the visited entry.
        dest: Resolved destination path.
        kind: :class:`EntryKind` of the entry (``DIR`` or ``FILE``).
    """
    src: str
    dest: str
    kind: EntryKind


@dataclass
class CopyReport:
    """Result of a successful copy, shadow copy, or dry run.

    Attributes:
        mode: :class:`CopyMode` the files were materialized with.
        actions: Actions in walk order (parents before children).
        dry_run: ``True`` when nothing was written.
    """
    mode: CopyMode
    actions: list[CopyAction] = field(default_factory=list)
    dry_run: bool = False

    @property
    def dirs(self) -> list[str]:
        """Destination paths of the directories created."""
        return [a.dest for a in self.actions if a.kind == EntryKind.DIR]

    @property
    def files(self) -> list[str]:
        """Destination paths of the files written."""
        return [a.dest for a in self.actions if a.kind == EntryKind.FILE]

    @property
    def total(self) -> int:
        """Number of actions."""
        return len(self.actions)
