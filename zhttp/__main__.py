"""zhttp — Main entry point.

Ties together the CLI, parser, engine and formatter modules: read the file,
locate and parse one request block, send it, print the response.
"""

import sys

from zhttp.cli import parse_cli, use_color
from zhttp.completion import complete
from zhttp.engine import execute_request
from zhttp.errors import ZhttpError
from zhttp.formatter import ANSI_PALETTE, PLAIN_PALETTE, print_response
from zhttp.parser import (
    find_request_block,
    load_request_file,
    parse_request,
    split_lines,
)


def log(verbose: bool, message: str) -> None:
    if verbose:
        print(message, file=sys.stderr)


def run_completion(content: str, line: int, column: int) -> int:
    lines = split_lines(content)
    line_text = lines[line - 1] if line <= len(lines) else ""
    for item in complete(line_text, column):
        print(item.insert_text)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run zhttp.

    Args:
        argv: Optional argument list (defaults to sys.argv).

    Returns:
        Exit code (0 = an HTTP exchange completed, 1 = error).
    """
    args = parse_cli(argv)
    verbose = args.verbose

    try:
        log(verbose, f"[*] Loading requests from: {args.file}")
        content = load_request_file(args.file)

        if args.complete is not None:
            return run_completion(content, args.line, args.complete)

        log(verbose, f"[*] Locating request block at line {args.line}...")
        block_text = find_request_block(content, args.line)

        log(verbose, "[*] Parsing request block...")
        request = parse_request(block_text)
        log(verbose, f"    Method : {request.method}")
        log(verbose, f"    URL    : {request.url}")
        log(verbose, f"    Headers: {len(request.headers)}")
        log(verbose, f"    Body   : {'Yes' if request.body is not None else 'No'}")

        log(verbose, f"[*] Sending request to {request.url}...")
        if args.proxy:
            log(verbose, f"    Proxy  : {args.proxy}")
        response = execute_request(
            request,
            timeout=args.timeout,
            proxy=args.proxy,
            allow_redirects=args.follow_redirects,
        )
    except ZhttpError as exc:
        print(exc, file=sys.stderr)
        return 1

    palette = ANSI_PALETTE if use_color(args.color) else PLAIN_PALETTE
    print_response(request, response, palette)

    return 0


def cli_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
