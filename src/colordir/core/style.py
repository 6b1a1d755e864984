# src/colordir/core/style.py
from types import MappingProxyType
from typing import Mapping

from colordir.config import (
    BRIGHT_YELLOW,
    CATEGORY_COLORS,
    CATEGORY_ICONS,
    DIRECTORY_COLOR,
    DIRECTORY_ICON,
    HIDDEN_COLOR,
    RESET,
    TRUNCATION_MARKER,
)
from colordir.models import Category, Style


class StyleTable:
    """
    Read-only lookup from (category, is_directory, is_hidden) to a display Style.
    Hidden entries keep their icon but take the hidden color.
    """

    def __init__(
        self,
        styles: Mapping[Category, Style],
        directory: Style,
        hidden_color: str = "",
        truncation_marker: str = ">",
        accent: str = "",
        reset: str = "",
    ):
        self._styles = MappingProxyType(dict(styles))
        self.directory = directory
        self.hidden_color = hidden_color
        self.truncation_marker = truncation_marker
        self.accent = accent
        self.reset = reset

    def lookup(self, category: Category, is_directory: bool = False, is_hidden: bool = False) -> Style:
        base = self.directory if is_directory else self._styles[category]
        if is_hidden:
            return Style(color=self.hidden_color, icon=base.icon, reset=base.reset)
        return base

    @classmethod
    def ansi(cls) -> "StyleTable":
        styles = {
            category: Style(CATEGORY_COLORS[category.key], CATEGORY_ICONS[category.key], RESET)
            for category in Category
        }
        return cls(
            styles,
            directory=Style(DIRECTORY_COLOR, DIRECTORY_ICON, RESET),
            hidden_color=HIDDEN_COLOR,
            truncation_marker=TRUNCATION_MARKER,
            accent=BRIGHT_YELLOW,
            reset=RESET,
        )

    @classmethod
    def plain(cls) -> "StyleTable":
        """No colors and no icons, for piping and tests."""
        return cls({category: Style() for category in Category}, directory=Style())
