# src/colordir/cli.py
import sys
import argparse
from typing import List, Optional, Tuple

# Module imports
from colordir.config import RED, RESET
from colordir.core.layout import format_summary
from colordir.core.scanner import list_directory, validate_root
from colordir.core.style import StyleTable
from colordir.errors import ColorDirError, UsageError
from colordir.models import RenderContext
from colordir.utils.terminal import Output, OutputClosed, terminal_geometry

PROG = "colordir"

ABOUT_TEXT = f"""\
\033[0;31m  ____      _            ____  _      _ 
\033[0;33m / ___|___ | | ___  _ __|  _ \\(_)_ __| |
\033[0;32m| |   / _ \\| |/ _ \\| '__| | | | | '__| |
\033[0;36m| |__| (_) | | (_) | |  | |_| | | |  |_|
\033[1;35m \\____\\___/|_|\\___/|_|  |____/|_|_|  (_)
\033[0;36mColorDir lists directory contents with color coding and icons per file type.

 -l, --list       Force list view.
 -w, --wide       Force columns view.
 -t, --total      Display total size of directories, and subdirectories.
 -r, --recursive  Recursive listing.
 -p, --pause      Pause after each screen of output.
 -h, --help       Display this screen.

Usage: {PROG} [flags] [directory] [pattern, quoted and containing at least one * or ?]
Examples:
1. List all files in the current directory:          {PROG}
2. List all files recursively with detailed listing:  {PROG} -r -l
3. List files in wide format, recursively:            {PROG} -r -w
4. List all .txt files recursively:                   {PROG} -r "*.txt"
5. List .log files in /var/log:                       {PROG} /var/log "*.log"
6. List files in /usr, paused, recursively:           {PROG} -p -r /usr
7. List all files containing an x:                    {PROG} "*[x]*"
8. List files that do not contain a number:           {PROG} "*[!0-9]*"
{RESET}"""


class ArgumentParser(argparse.ArgumentParser):
    """argparse that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def create_arg_parser():
    parser = ArgumentParser(prog=PROG, add_help=False, allow_abbrev=False)
    parser.add_argument("targets", nargs="*", help="Directory and/or wildcard pattern")
    parser.add_argument("-r", "--recursive", action="store_true")
    parser.add_argument("-t", "--total", action="store_true")
    parser.add_argument("-l", "--list", action="store_true")
    parser.add_argument("-w", "--wide", action="store_true")
    parser.add_argument("-p", "--pause", action="store_true")
    parser.add_argument("-h", "--help", action="store_true")
    return parser


def split_targets(targets: List[str]) -> Tuple[str, Optional[str]]:
    """Sorts positionals into (directory, pattern); anything with * or ? is the pattern."""
    directory = pattern = None
    for arg in targets:
        if "*" in arg or "?" in arg:
            if pattern is not None:
                raise UsageError("Multiple patterns are not allowed")
            pattern = arg
        else:
            if directory is not None:
                raise UsageError("Multiple directories are not allowed")
            directory = arg
    return directory or ".", pattern


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = create_arg_parser()
    for arg in argv if argv is not None else sys.argv[1:]:
        if arg == "--":
            break
        # Flags are given one at a time; "-rt" is not "-r -t".
        if arg.startswith("-") and not arg.startswith("--") and len(arg) > 2:
            raise UsageError(f"Unknown flag: {arg}")
    args, extras = parser.parse_known_intermixed_args(argv)
    for arg in extras:
        if arg.startswith("-"):
            raise UsageError(f"Unknown flag: {arg}")
        args.targets.append(arg)
    args.directory, args.pattern = split_targets(args.targets)
    return args


def show_error(message: str):
    print(f"{RED}Error:{RESET} {message}. Try: {PROG} -h")
    sys.exit(1)


def main(argv: Optional[List[str]] = None):
    try:
        # 1. Arguments
        args = parse_args(argv)
        if args.help:
            print(ABOUT_TEXT)
            return

        root = validate_root(args.directory)

        # 2. Render context
        width, height = terminal_geometry()
        ctx = RenderContext(
            width=width,
            height=height,
            recursive=args.recursive,
            show_total=args.total,
            force_list=args.list,
            force_wide=args.wide,
            pause=args.pause and sys.stdin.isatty(),
        )
        # Names scandir could not decode come back as surrogate escapes.
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(errors="surrogateescape")
        out = Output(page_lines=height - 1 if ctx.pause else 0)
        styles = StyleTable.ansi()

        # 3. Listing & summary
        try:
            totals = list_directory(root, args.pattern, ctx, styles=styles, out=out)
            for line in format_summary(totals, styles):
                out.line(line)
        except OutputClosed:
            return

    except ColorDirError as e:
        show_error(str(e))

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
