# src/colordir/core/pattern.py
import os
from typing import Optional

import pathspec

_SEPARATORS = {"/", os.sep}


class NameMatcher:
    """Shell-style wildcard match ('*', '?', '[...]') against a bare entry name."""

    def __init__(self, pattern: Optional[str] = None):
        self.pattern = pattern or ""
        self.match_all = self.pattern in ("", "*")
        self._spec = None
        if not self.match_all:
            # The leading '/' anchors the pattern to the whole name, and also
            # keeps a leading '!' or '#' from being read as negation/comment.
            # Trailing spaces are escaped since gitignore lines drop them.
            stripped = self.pattern.rstrip(" ")
            line = "/" + stripped + "\\ " * (len(self.pattern) - len(stripped))
            self._spec = pathspec.PathSpec.from_lines("gitignore", [line])

    def matches(self, name: str) -> bool:
        # A bare name never contains a separator; '*' must not cross one.
        if any(sep in name for sep in _SEPARATORS):
            return False
        if self.match_all:
            return True
        return self._spec.match_file(name)

    def __repr__(self) -> str:
        return f"NameMatcher({self.pattern!r})"
