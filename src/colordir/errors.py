# src/colordir/errors.py


class ColorDirError(Exception):
    """Base class for errors that end the program with exit code 1."""


class UsageError(ColorDirError):
    """Bad, duplicate or unknown command-line input."""


class PathNotFound(UsageError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Directory does not exist: {path}")
