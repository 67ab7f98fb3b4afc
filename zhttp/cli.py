"""Command-line interface.

Builds the argparse parser for zhttp and validates what it can before any
file is touched.
"""

import argparse
import os
import sys

from zhttp import __version__
from zhttp.engine import DEFAULT_TIMEOUT


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser for the zhttp CLI."""
    parser = argparse.ArgumentParser(
        prog="zhttp",
        description=(
            "zhttp v{ver} — Execute HTTP requests from .http files.\n\n"
            "Requests in a .http file are separated by lines containing only "
            "'###'. zhttp runs the single request whose block contains the "
            "given line and prints the response."
        ).format(ver=__version__),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  zhttp api.http --line 12\n"
            "  zhttp api.http --line 12 --proxy http://127.0.0.1:8080 "
            "--color never\n"
            "  zhttp api.http --line 3 --complete 0\n"
        ),
    )

    parser.add_argument(
        "file",
        help="Path to the .http file.",
    )

    # Required arguments
    required = parser.add_argument_group("required arguments")
    required.add_argument(
        "--line",
        required=True,
        type=int,
        help="1-indexed line number inside the request block to run.",
    )

    # Optional arguments
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT}).",
    )
    parser.add_argument(
        "--proxy",
        default=None,
        help=(
            "Route traffic through a proxy for debugging "
            "(e.g. http://127.0.0.1:8080)."
        ),
    )
    parser.add_argument(
        "--no-follow-redirects",
        action="store_false",
        dest="follow_redirects",
        help="Show 3xx responses instead of following them.",
    )
    parser.add_argument(
        "--color",
        choices=("auto", "always", "never"),
        default="auto",
        help=(
            "Colorize output (default: auto — only when stdout is a "
            "terminal and NO_COLOR is unset)."
        ),
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print progress information to stderr.",
    )
    parser.add_argument(
        "--complete",
        type=int,
        default=None,
        metavar="COLUMN",
        help=(
            "Print completion suggestions for the cursor at COLUMN on "
            "--line instead of running the request."
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def validate_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Validate parsed CLI arguments.

    Raises:
        SystemExit: Through ``parser.error`` on an invalid value.
    """
    if args.line < 1:
        parser.error("--line must be 1 or greater")

    if args.timeout <= 0:
        parser.error("--timeout must be greater than 0")

    if args.complete is not None and args.complete < 0:
        parser.error("--complete column cannot be negative")

    if args.proxy is not None and not args.proxy.strip():
        parser.error("--proxy cannot be empty")


def use_color(choice: str, stream=None) -> bool:
    """Resolve the --color choice against the output stream and NO_COLOR."""
    if choice == "always":
        return True
    if choice == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    stream = stream or sys.stdout
    return hasattr(stream, "isatty") and stream.isatty()


def parse_cli(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse and validate command-line arguments.

    Args:
        argv: Optional list of arguments (defaults to sys.argv).

    Returns:
        Parsed and validated argument namespace.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    validate_args(parser, args)
    return args
