# tests/test_layout.py

import io
import re
import unicodedata
import pytest
from pathlib import Path
from unittest.mock import MagicMock

from colordir.config import TRUNCATION_MARKER
from colordir.core.layout import (
    attributed_size,
    format_directory_header,
    format_grid_rows,
    format_list_line,
    format_summary,
    format_timestamp,
    grid_shape,
    render,
    truncate_name,
    use_grid,
)
from colordir.core.style import StyleTable
from colordir.models import Category, DirectoryEntry, ListingTotals, RenderContext
from colordir.utils.terminal import MORE_PROMPT, Output, OutputClosed, normalize_geometry

PLAIN = StyleTable.plain()
ANSI = re.compile(r"\033\[[0-9;]*[A-Za-z]")


def entries(count: int):
    return [
        DirectoryEntry(path=Path(f"f{i:02}.txt"), name=f"f{i:02}.txt", is_dir=False, mode=0o100644, size=i, mtime=0.0)
        for i in range(count)
    ]

# --- Test 1: Layout selection ---

def test_force_list_never_selects_grid():
    ctx = RenderContext(width=80, height=24, force_list=True, force_wide=True)
    assert use_grid(1000, ctx) is False


def test_force_wide_always_selects_grid():
    ctx = RenderContext(width=80, height=24, force_wide=True)
    assert use_grid(1, ctx) is True


def test_grid_threshold_follows_terminal_height():
    ctx = RenderContext(width=80, height=24)
    assert use_grid(21, ctx) is False  # height - 3
    assert use_grid(22, ctx) is True   # height - 2


def test_unknown_height_uses_default():
    assert normalize_geometry(0, -1) == (80, 24)
    ctx = RenderContext(width=0, height=0)
    assert use_grid(21, ctx) is False
    assert use_grid(22, ctx) is True

# --- Test 2: Grid layout ---

def test_grid_shape():
    assert grid_shape(10, 80) == (4, 3)
    assert grid_shape(4, 80) == (4, 1)
    assert grid_shape(3, 10) == (1, 3)
    assert grid_shape(10, 0) == (4, 3)


def test_grid_is_row_major():
    ctx = RenderContext(width=80, height=24, force_wide=True)
    rows = format_grid_rows(entries(6), ctx, PLAIN)

    assert len(rows) == 2
    assert rows[0].split() == ["f00.txt", "f01.txt", "f02.txt", "f03.txt"]
    assert rows[1].split() == ["f04.txt", "f05.txt"]
    assert len(rows[0]) == 4 * 15


def display_width(text: str) -> int:
    width = 0
    for char in ANSI.sub("", text):
        if char == "\ufe0f":
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def test_ansi_grid_rows_fit_terminal_width():
    dirs = [DirectoryEntry(path=Path(f"d{i}"), name=f"directory_{i}", is_dir=True, mode=0o040755) for i in range(10)]
    ctx = RenderContext(width=90, height=24, force_wide=True)
    rows = format_grid_rows(dirs, ctx, StyleTable.ansi())

    assert len(rows) == 2
    assert display_width(rows[0]) == 90  # five cells of icon, space and 15-column name
    assert all(display_width(row) <= 90 for row in rows)


def test_truncate_name():
    assert truncate_name("short.txt") == "short.txt".ljust(15)
    assert truncate_name("exactly_15_char") == "exactly_15_char"
    assert truncate_name("a_much_longer_file_name.txt") == "a_much_longer_>"
    assert truncate_name("a_much_longer_file_name.txt", TRUNCATION_MARKER).startswith("a_much_longer_\033[1;33m>")


def test_empty_listing_renders_nothing():
    buffer = io.StringIO()
    ctx = RenderContext(width=80, height=24, force_wide=True)
    render([], ctx, PLAIN, Output(stream=buffer))
    assert buffer.getvalue() == ""

# --- Test 3: List layout ---

def test_list_line_for_file():
    entry = DirectoryEntry(path=Path("notes.txt"), name="notes.txt", is_dir=False, mode=0o100644, size=1536, mtime=0.0)
    line = format_list_line(entry, RenderContext(width=80, height=24), PLAIN)

    assert line == f"{'notes.txt':<20} -rw-r--r-- {'1.50 KB':<10} {format_timestamp(0.0)}"


def test_list_line_for_unreadable_file():
    entry = DirectoryEntry(path=Path("gone"), name="gone", is_dir=False)
    line = format_list_line(entry, RenderContext(width=80, height=24), PLAIN)

    assert attributed_size(entry, RenderContext(width=80, height=24)) == 0
    assert line == f"{'gone':<20} ????????? {'?':<10}"


def test_list_line_directory_total_only_outside_recursion():
    entry = DirectoryEntry(path=Path("sub"), name="sub", is_dir=True, mode=0o040755, total_size=1100)

    line = format_list_line(entry, RenderContext(width=80, height=24, show_total=True), PLAIN)
    assert line == f"{'sub':<20} drwxr-xr-x {'1.07 KB':<10} (total)"

    line = format_list_line(entry, RenderContext(width=80, height=24, show_total=True, recursive=True), PLAIN)
    assert line == f"{'sub':<20} drwxr-xr-x"


def test_render_list_writes_one_line_per_entry():
    buffer = io.StringIO()
    render(entries(5), RenderContext(width=80, height=24), PLAIN, Output(stream=buffer))
    assert len(buffer.getvalue().splitlines()) == 5


def test_attributed_size():
    sub = DirectoryEntry(path=Path("sub"), name="sub", is_dir=True, mode=0o040755, total_size=1100)
    assert attributed_size(entries(4)[3], RenderContext(width=80, height=24)) == 3
    assert attributed_size(sub, RenderContext(width=80, height=24)) == 0
    assert attributed_size(sub, RenderContext(width=80, height=24, show_total=True)) == 1100
    assert attributed_size(sub, RenderContext(width=80, height=24, show_total=True, recursive=True)) == 0


def test_ansi_styles_color_hidden_and_directories():
    styles = StyleTable.ansi()
    assert styles.lookup(Category.OTHER, is_directory=True).color == "\033[1;34m"
    hidden = styles.lookup(Category.PROGRAMMING, is_hidden=True)
    assert hidden.color == "\033[1;30m"
    assert hidden.icon == styles.lookup(Category.PROGRAMMING).icon

# --- Test 4: Headers, summary and paging ---

def test_directory_header():
    assert format_directory_header(Path("a/b")) == "\na/b:"
    assert format_directory_header(Path("a/b"), 2048) == "\na/b: (2.00 KB total)"


def test_summary():
    rule, summary = format_summary(ListingTotals(files=3, dirs=2, size=1024), PLAIN)
    assert summary == "Total: Files: 3 | Dirs: 2 | Size: 1.00 KB"
    assert rule == "─" * len(summary)


def test_output_pauses_every_page():
    buffer = io.StringIO()
    reader = MagicMock(side_effect=[" ", "q"])
    out = Output(stream=buffer, page_lines=2, key_reader=reader)

    out.line("one")
    out.line("two")
    assert reader.call_count == 1
    out.line("three")
    with pytest.raises(OutputClosed):
        out.line("four")
    assert buffer.getvalue().count(MORE_PROMPT) == 2


def test_output_without_paging_never_reads_keys():
    reader = MagicMock()
    out = Output(stream=io.StringIO(), key_reader=reader)
    for i in range(100):
        out.line(str(i))
    reader.assert_not_called()
