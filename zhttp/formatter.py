"""Response rendering.

Turns a request/response pair into colorized terminal text. Rendering is a
pure function of its inputs; ``print_response`` is the only part that
touches stdout.
"""

from __future__ import annotations

import json
import sys
from datetime import timedelta
from typing import TextIO

from zhttp.engine import HttpResponse
from zhttp.parser import RequestBlock


class Palette:
    """Named ANSI codes used by the formatter."""

    __slots__ = ("reset", "dim", "success", "redirect", "error")

    def __init__(
        self,
        reset: str,
        dim: str,
        success: str,
        redirect: str,
        error: str,
    ) -> None:
        self.reset = reset
        self.dim = dim
        self.success = success
        self.redirect = redirect
        self.error = error

    @property
    def enabled(self) -> bool:
        return bool(self.reset)


ANSI_PALETTE = Palette(
    reset="\x1b[0m",
    dim="\x1b[2m",
    success="\x1b[32m",
    redirect="\x1b[33m",
    error="\x1b[31m",
)

PLAIN_PALETTE = Palette(reset="", dim="", success="", redirect="", error="")


def status_color(status: int, palette: Palette = ANSI_PALETTE) -> str:
    """Pick the palette color for an HTTP status code.

    2xx is success, 3xx is redirect, anything else (1xx included) is error.
    """
    if 200 <= status <= 299:
        return palette.success
    if 300 <= status <= 399:
        return palette.redirect
    return palette.error


def format_duration(elapsed: timedelta) -> str:
    """Format a duration as ``"42ms"`` below a second, else ``"1.50s"``."""
    ms = elapsed // timedelta(milliseconds=1)
    if ms < 1000:
        return f"{ms}ms"
    return f"{elapsed.total_seconds():.2f}s"


def render_body(body: bytes) -> str:
    """Pretty-print JSON bodies; pass anything else through.

    The result always ends with exactly one newline added at most.
    """
    text = body.decode("utf-8", errors="replace")
    try:
        value = json.loads(text)
    except (ValueError, RecursionError):
        return text if text.endswith("\n") else text + "\n"
    return json.dumps(value, indent=2, ensure_ascii=False) + "\n"


def request_title(block: RequestBlock) -> str:
    if block.name:
        return block.name
    return f"{block.method} {block.url}"


def format_response(
    block: RequestBlock,
    response: HttpResponse,
    palette: Palette = ANSI_PALETTE,
) -> str:
    """Render the full report for one request/response exchange.

    Args:
        block: The request that was sent.
        response: The response that came back.
        palette: Color codes to use; PLAIN_PALETTE disables styling.

    Returns:
        The text to write to the terminal.
    """
    color = status_color(response.status_code, palette)
    reset = palette.reset
    out: list[str] = []

    title = request_title(block)
    if palette.enabled:
        # Sets the terminal window title rather than printing a line.
        out.append(f"\x1b]2;{title}\x07")
    else:
        out.append(f"{title}\n")

    request_line = f"{block.method} {block.url}"
    if block.http_version:
        request_line += f" {block.http_version}"
    out.append(f"{request_line}\n\n")

    out.append(
        f"{color}{response.http_version} {response.status_code} "
        f"{response.reason}{reset}\n\n"
    )

    for key, value in response.headers:
        out.append(f"{palette.dim}{key}: {value}{reset}\n")
    out.append("\n")

    out.append(render_body(response.body))

    out.append(
        f"\n{color}{response.status_code} {response.reason} · "
        f"{len(response.body)} bytes · {format_duration(response.elapsed)}"
        f"{reset}\n"
    )

    return "".join(out)


def print_response(
    block: RequestBlock,
    response: HttpResponse,
    palette: Palette = ANSI_PALETTE,
    stream: TextIO | None = None,
) -> None:
    """Write the formatted report to ``stream`` (stdout by default)."""
    stream = stream or sys.stdout
    stream.write(format_response(block, response, palette))
    stream.flush()
