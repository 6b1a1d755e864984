# src/colordir/config.py

PROGRAMMING_EXTENSIONS = frozenset({
    ".cpp", ".h", ".py", ".java", ".cs", ".js", ".php", ".hs", ".rs", ".clj", ".sh", ".pl", ".lua",
    ".erl", ".ex", ".exs", ".scala", ".d", ".go", ".nim", ".lisp", ".cl", ".f90", ".f95", ".vhdl",
    ".verilog", ".coffee", ".racket", ".dart", ".tcl", ".hlsl",
})

TEXT_EXTENSIONS = frozenset({
    ".txt", ".md", ".rtf", ".log", ".ini", ".conf", ".config", ".nfo", ".readme",
    ".html", ".htm", ".bak", ".asc", ".diff", ".lst", ".srt", ".mdown", ".text",
    ".out", ".memo", ".patch", ".logfile", ".po", ".dat", ".env", ".sh", ".doc",
})

VIDEO_EXTENSIONS = frozenset({
    ".mp4", ".mkv", ".avi", ".mov", ".wmv",
    ".flv", ".webm", ".mpeg", ".mpg", ".m4v",
    ".3gp", ".ogv", ".vob", ".ts", ".m2ts",
    # Less common container formats
    ".divx", ".rm", ".rmvb", ".asf", ".swf",
    ".mxf", ".hevc", ".avchd", ".mts", ".ogm",
    ".amv", ".drc", ".yuv", ".h264", ".h265",
})

PICTURE_EXTENSIONS = frozenset({
    ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".tif", ".webp",
    ".svg", ".ico", ".raw", ".xpm", ".ppm", ".pgm", ".pbm", ".heic", ".heif",
})

# Only the final suffix is ever looked up, so ".tar.gz" resolves through ".gz".
COMPRESSED_EXTENSIONS = frozenset({
    ".zip", ".tar", ".gz", ".bz2", ".xz", ".7z", ".rar", ".zst", ".lz4",
    ".tgz", ".tbz2", ".txz", ".tzst", ".tlz4", ".jar", ".war", ".ear", ".cab", ".deb",
    ".rpm", ".apk", ".dmg", ".iso", ".img", ".appimage",
})

# --- Layout ---
LIST_NAME_WIDTH = 20
LIST_SIZE_WIDTH = 10
GRID_CELL_WIDTH = 17
GRID_MAX_NAME = 15
RESERVED_LINES = 3  # header, prompt and summary

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
PERMISSION_PLACEHOLDER = "?" * 9

# --- ANSI styling ---
RESET = "\033[0m"
RED = "\033[31m"
BRIGHT_YELLOW = "\033[1;33m"

DIRECTORY_COLOR = "\033[1;34m"
HIDDEN_COLOR = "\033[1;30m"

CATEGORY_COLORS = {
    "programming": "\033[0;36m",
    "text": "\033[0;32m",
    "video": "\033[0;35m",
    "picture": "\033[0;33m",
    "executable": "\033[1;36m",
    "compressed": "\033[1;31m",
    "other": RESET,
}

DIRECTORY_ICON = "\U0001F4C2 "
CATEGORY_ICONS = {
    "programming": "\U0001F4BB ",
    "text": "\U0001F4DC ",
    "video": "\U0001F3AC ",
    "picture": "\U0001F5BC️ ",
    "executable": "⚙️ ",
    "compressed": "\U0001F381 ",
    "other": "\U0001F4C4 ",
}

TRUNCATION_MARKER = f"{BRIGHT_YELLOW}>{RESET}"
