# src/colordir/core/sorter.py
from typing import Iterable, List, Tuple

from colordir.core.classifier import classify
from colordir.models import DirectoryEntry


def _name_key(entry: DirectoryEntry) -> str:
    return entry.name.casefold()


def _file_key(entry: DirectoryEntry):
    return (classify(entry), entry.name.casefold())


def split_entries(entries: Iterable[DirectoryEntry]) -> Tuple[List[DirectoryEntry], List[DirectoryEntry]]:
    directories, files = [], []
    for entry in entries:
        (directories if entry.is_dir else files).append(entry)
    return directories, files


def sort_directories(directories: Iterable[DirectoryEntry]) -> List[DirectoryEntry]:
    return sorted(directories, key=_name_key)


def sort_files(files: Iterable[DirectoryEntry]) -> List[DirectoryEntry]:
    return sorted(files, key=_file_key)


def sort_entries(entries: Iterable[DirectoryEntry]) -> List[DirectoryEntry]:
    """Directories by name, then files by (category, name); names compare case-folded."""
    directories, files = split_entries(entries)
    return sort_directories(directories) + sort_files(files)
