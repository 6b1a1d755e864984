# src/colordir/core/layout.py
import math
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from colordir.config import (
    GRID_CELL_WIDTH,
    GRID_MAX_NAME,
    LIST_NAME_WIDTH,
    LIST_SIZE_WIDTH,
    RESERVED_LINES,
    TIMESTAMP_FORMAT,
)
from colordir.core.classifier import classify, permission_string
from colordir.core.disk_usage import directory_size
from colordir.core.style import StyleTable
from colordir.models import DirectoryEntry, ListingTotals, RenderContext
from colordir.utils.size import format_size
from colordir.utils.terminal import Output, normalize_geometry


def use_grid(entry_count: int, ctx: RenderContext) -> bool:
    """Grid when forced, or when the list would scroll past the screen."""
    if ctx.force_list:
        return False
    _, height = normalize_geometry(ctx.width, ctx.height)
    return ctx.force_wide or entry_count > height - RESERVED_LINES


def _style_for(entry: DirectoryEntry, styles: StyleTable):
    return styles.lookup(classify(entry), is_directory=entry.is_dir, is_hidden=entry.is_hidden)


def format_timestamp(mtime: float) -> str:
    return datetime.fromtimestamp(mtime).strftime(TIMESTAMP_FORMAT)


def attributed_size(entry: DirectoryEntry, ctx: RenderContext) -> int:
    """
    Bytes ``entry`` contributes to the summary: a file's own size, or a
    directory's subtree total when totals are shown outside recursive mode.
    """
    if not entry.is_dir:
        return entry.size or 0
    if ctx.show_total and not ctx.recursive:
        return entry.total_size if entry.total_size is not None else directory_size(entry.path)
    return 0


def format_list_line(entry: DirectoryEntry, ctx: RenderContext, styles: StyleTable) -> str:
    style = _style_for(entry, styles)
    parts = [f"{style.icon}{style.color}{entry.name:<{LIST_NAME_WIDTH}}", permission_string(entry.mode)]

    if entry.is_dir:
        if ctx.show_total and not ctx.recursive:
            parts.append(f"{format_size(attributed_size(entry, ctx)):<{LIST_SIZE_WIDTH}} (total)")
    else:
        if entry.size is not None:
            parts.append(f"{format_size(entry.size):<{LIST_SIZE_WIDTH}}")
        else:
            parts.append(f"{'?':<{LIST_SIZE_WIDTH}}")
        if entry.mtime is not None:
            parts.append(format_timestamp(entry.mtime))

    return " ".join(parts) + style.reset


def render_list(entries: Sequence[DirectoryEntry], ctx: RenderContext, styles: StyleTable, out: Output) -> None:
    for entry in entries:
        out.line(format_list_line(entry, ctx, styles))


def grid_shape(entry_count: int, width: int) -> Tuple[int, int]:
    """(columns, rows) for ``entry_count`` cells on a terminal ``width`` wide."""
    width, _ = normalize_geometry(width, 1)
    columns = max(1, width // (GRID_CELL_WIDTH + 1))
    rows = math.ceil(entry_count / columns)
    return columns, rows


def truncate_name(name: str, marker: str = ">") -> str:
    if len(name) > GRID_MAX_NAME:
        return name[:GRID_MAX_NAME - 1] + marker
    return name.ljust(GRID_MAX_NAME)


def format_grid_rows(entries: Sequence[DirectoryEntry], ctx: RenderContext, styles: StyleTable) -> List[str]:
    if not entries:
        return []
    columns, rows = grid_shape(len(entries), ctx.width)
    lines = []
    for row in range(rows):
        cells = []
        for col in range(columns):
            index = row * columns + col
            if index >= len(entries):
                break
            entry = entries[index]
            style = _style_for(entry, styles)
            name = truncate_name(entry.name, styles.truncation_marker)
            cells.append(f"{style.color}{style.icon}{name}{style.reset}")
        # Icon, space and name already fill GRID_CELL_WIDTH + 1 columns.
        lines.append("".join(cells))
    return lines


def render_grid(entries: Sequence[DirectoryEntry], ctx: RenderContext, styles: StyleTable, out: Output) -> None:
    for line in format_grid_rows(entries, ctx, styles):
        out.line(line)


def render(entries: Sequence[DirectoryEntry], ctx: RenderContext, styles: StyleTable, out: Output) -> None:
    """Renders one directory level in the layout picked by ``use_grid``."""
    if not entries:
        return
    if use_grid(len(entries), ctx):
        render_grid(entries, ctx, styles, out)
    else:
        render_list(entries, ctx, styles, out)


def format_directory_header(path: Path, total_size: Optional[int] = None) -> str:
    if total_size is None:
        return f"\n{path}:"
    return f"\n{path}: ({format_size(total_size)} total)"


def format_summary(totals: ListingTotals, styles: StyleTable) -> List[str]:
    summary = f"Total: Files: {totals.files} | Dirs: {totals.dirs} | Size: {format_size(totals.size)}"
    rule = "─" * len(summary)
    return [f"{styles.accent}{rule}{styles.reset}", summary]
