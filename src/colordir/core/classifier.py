# src/colordir/core/classifier.py
import os
import stat
from pathlib import Path
from typing import Optional

from colordir.config import (
    COMPRESSED_EXTENSIONS,
    PERMISSION_PLACEHOLDER,
    PICTURE_EXTENSIONS,
    PROGRAMMING_EXTENSIONS,
    TEXT_EXTENSIONS,
    VIDEO_EXTENSIONS,
)
from colordir.models import Category, DirectoryEntry

# First match wins.
EXTENSION_TABLES = (
    (Category.PROGRAMMING, PROGRAMMING_EXTENSIONS),
    (Category.TEXT, TEXT_EXTENSIONS),
    (Category.VIDEO, VIDEO_EXTENSIONS),
    (Category.PICTURE, PICTURE_EXTENSIONS),
    (Category.COMPRESSED, COMPRESSED_EXTENSIONS),
)

_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"), (stat.S_IWUSR, "w"), (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"), (stat.S_IWGRP, "w"), (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"), (stat.S_IWOTH, "w"), (stat.S_IXOTH, "x"),
)


def classify(entry: DirectoryEntry) -> Category:
    """
    Maps an entry to its Category.
    Directories and entries without stat data always land in OTHER.
    """
    if entry.is_dir or entry.mode is None or not stat.S_ISREG(entry.mode):
        return Category.OTHER

    extension = Path(entry.name).suffix.lower()
    for category, extensions in EXTENSION_TABLES:
        if extension in extensions:
            return category

    if entry.mode & stat.S_IXUSR:
        return Category.EXECUTABLE
    return Category.OTHER


def permission_string(mode: Optional[int]) -> str:
    """Renders st_mode as e.g. 'drwxr-xr-x', or the placeholder when unknown."""
    if mode is None:
        return PERMISSION_PLACEHOLDER
    flags = "d" if stat.S_ISDIR(mode) else "-"
    return flags + "".join(char if mode & bit else "-" for bit, char in _PERMISSION_BITS)


def read_permissions(path: Path) -> str:
    try:
        return permission_string(os.stat(path).st_mode)
    except OSError:
        return PERMISSION_PLACEHOLDER
