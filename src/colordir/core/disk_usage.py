# src/colordir/core/disk_usage.py
import os
import stat
from pathlib import Path
from typing import Union


def directory_size(path: Union[str, Path]) -> int:
    """
    Sum of regular-file sizes below ``path``.
    Symlinked directories are not entered; unreadable or vanished
    subtrees are left out of the sum.
    """
    total = 0
    pending = [os.fspath(path)]
    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as entries:
                for entry in entries:
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            pending.append(entry.path)
                            continue
                        info = entry.stat()
                    except OSError:
                        continue
                    if stat.S_ISREG(info.st_mode):
                        total += info.st_size
        except OSError:
            continue
    return total
