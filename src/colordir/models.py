# src/colordir/models.py
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import List, Optional


class Category(IntEnum):
    """File categories; the declaration order is the sort order."""
    PROGRAMMING = 0
    TEXT = 1
    VIDEO = 2
    PICTURE = 3
    EXECUTABLE = 4
    COMPRESSED = 5
    OTHER = 6

    @property
    def key(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class DirectoryEntry:
    """Immutable snapshot of one filesystem node taken during a scan.

    ``mode``, ``size`` and ``mtime`` are ``None`` when the node could not be
    stat'ed (vanished mid-scan, dangling symlink, ...).
    """
    path: Path
    name: str
    is_dir: bool
    mode: Optional[int] = None
    size: Optional[int] = None
    mtime: Optional[float] = None
    total_size: Optional[int] = None

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


@dataclass
class ListingTotals:
    """Running counters shared by every level of one listing."""
    files: int = 0
    dirs: int = 0
    size: int = 0


@dataclass
class ListingResult:
    directories: List[DirectoryEntry] = field(default_factory=list)
    files: List[DirectoryEntry] = field(default_factory=list)
    file_count: int = 0
    dir_count: int = 0
    shown_size: int = 0

    @property
    def entries(self) -> List[DirectoryEntry]:
        return self.directories + self.files


@dataclass(frozen=True)
class RenderContext:
    width: int
    height: int
    recursive: bool = False
    show_total: bool = False
    force_list: bool = False
    force_wide: bool = False
    pause: bool = False


@dataclass(frozen=True)
class Style:
    """Display tag returned by the style lookup."""
    color: str = ""
    icon: str = ""
    reset: str = ""
