"""Error kinds raised by the zhttp pipeline.

Every stage raises one of these instead of printing or exiting; the entry
point reports them as a single line on stderr.
"""

from __future__ import annotations


class ZhttpError(Exception):
    """Base class for all terminal zhttp errors."""


class FileReadError(ZhttpError):
    """The .http file could not be read."""

    def __init__(self, path: str, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading {path}: {cause}")


class NoRequestBlockError(ZhttpError):
    """No request block contains the requested line."""

    def __init__(self, line: int) -> None:
        self.line = line
        super().__init__(f"No request block found at line {line}")


class ParseError(ZhttpError, ValueError):
    """A request block could not be parsed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Parse error: {reason}")


class TransportError(ZhttpError):
    """The HTTP exchange failed below the HTTP layer (DNS, connect, TLS...)."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Transport error: {reason}")
