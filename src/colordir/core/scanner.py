# src/colordir/core/scanner.py
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Tuple, Union

from colordir.core.disk_usage import directory_size
from colordir.core.layout import attributed_size, format_directory_header, render
from colordir.core.pattern import NameMatcher
from colordir.core.sorter import sort_directories, sort_files
from colordir.core.style import StyleTable
from colordir.errors import PathNotFound
from colordir.models import DirectoryEntry, ListingResult, ListingTotals, RenderContext
from colordir.utils.terminal import Output


def read_entry(dir_entry: os.DirEntry) -> DirectoryEntry:
    """
    Snapshots one scandir entry. Symlinks are followed; a failed stat
    leaves mode/size/mtime as None instead of raising.
    """
    try:
        is_dir = dir_entry.is_dir()
    except OSError:
        is_dir = False

    try:
        info = dir_entry.stat()
    except OSError:
        info = None

    mode = size = mtime = None
    if info is not None:
        mode = info.st_mode
        if not is_dir:
            size = info.st_size
            mtime = info.st_mtime

    return DirectoryEntry(
        path=Path(dir_entry.path),
        name=dir_entry.name,
        is_dir=is_dir,
        mode=mode,
        size=size,
        mtime=mtime,
    )


def validate_root(root: Union[str, Path]) -> Path:
    root = Path(root)
    if not root.is_dir():
        raise PathNotFound(root)
    return root


def _identity(path: Path) -> Optional[Tuple[int, int]]:
    try:
        info = path.stat()
    except OSError:
        return None
    return info.st_dev, info.st_ino


class DirectoryLister:
    def __init__(
        self,
        ctx: RenderContext,
        pattern: Optional[str] = None,
        styles: Optional[StyleTable] = None,
        out: Optional[Output] = None,
    ):
        self.ctx = ctx
        self.matcher = NameMatcher(pattern)
        self.styles = styles or StyleTable.ansi()
        self.out = out or Output()
        # Eager subtree totals only outside recursive mode; recursive mode
        # shows each subdirectory's total on its own header instead.
        self.eager_totals = ctx.show_total and not ctx.recursive

    def scan(self, directory: Path) -> ListingResult:
        """
        Reads one directory level: filters by name, partitions, counts and
        sorts. Raises OSError when ``directory`` itself cannot be read.
        """
        result = ListingResult()
        directories, files = [], []

        with os.scandir(directory) as entries:
            for dir_entry in entries:
                if not self.matcher.matches(dir_entry.name):
                    continue

                entry = read_entry(dir_entry)
                if entry.is_dir:
                    result.dir_count += 1
                    if self.eager_totals:
                        entry = replace(entry, total_size=directory_size(entry.path))
                    directories.append(entry)
                else:
                    result.file_count += 1
                    files.append(entry)
                result.shown_size += attributed_size(entry, self.ctx)

        result.directories = sort_directories(directories)
        result.files = sort_files(files)
        return result

    def list(self, root: Union[str, Path], totals: Optional[ListingTotals] = None) -> ListingTotals:
        """
        Lists ``root`` and, in recursive mode, every subdirectory depth-first
        in sorted order. Counters accumulate into ``totals``.
        """
        root = validate_root(root)
        totals = totals if totals is not None else ListingTotals()

        # (directory, print a header before it, identities of the directories above it)
        pending = [(root, False, frozenset())]
        while pending:
            directory, with_header, ancestors = pending.pop()

            # Only a directory that contains itself is a loop; sibling aliases are listed again.
            identity = _identity(directory)
            if identity is not None and identity in ancestors:
                print(f"  > [Warning] Skipping {directory} (already listed above, symlink loop)", file=sys.stderr)
                continue
            if identity is not None:
                ancestors = ancestors | {identity}

            if with_header:
                header_total = directory_size(directory) if self.ctx.show_total else None
                self.out.line(format_directory_header(directory, header_total))

            try:
                result = self.scan(directory)
            except OSError as e:
                print(f"  > [Warning] Skipping {directory} (read error: {e.strerror or e})", file=sys.stderr)
                continue

            totals.files += result.file_count
            totals.dirs += result.dir_count
            totals.size += result.shown_size

            render(result.entries, self.ctx, self.styles, self.out)

            if self.ctx.recursive:
                pending.extend((entry.path, True, ancestors) for entry in reversed(result.directories))

        return totals


def list_directory(
    path: Union[str, Path],
    pattern: Optional[str],
    ctx: RenderContext,
    totals: Optional[ListingTotals] = None,
    styles: Optional[StyleTable] = None,
    out: Optional[Output] = None,
) -> ListingTotals:
    return DirectoryLister(ctx, pattern, styles, out).list(path, totals)
