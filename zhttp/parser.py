"""Request block location and parsing for .http files.

A .http file holds one or more requests separated by lines containing only
``###``. Each block has the shape::

    ### Optional name
    METHOD URL [HTTP-VERSION]
    Header-Name: value

    optional body
"""

from __future__ import annotations

import enum

from zhttp.errors import FileReadError, NoRequestBlockError, ParseError

SEPARATOR = "###"


class RequestBlock:
    """A single parsed request. Immutable once built."""

    __slots__ = ("_name", "_method", "_url", "_http_version", "_headers", "_body")

    def __init__(
        self,
        method: str,
        url: str,
        http_version: str | None = None,
        headers: list[tuple[str, str]] | tuple[tuple[str, str], ...] = (),
        body: str | None = None,
        name: str | None = None,
    ) -> None:
        self._method = method
        self._url = url
        self._http_version = http_version
        self._headers = tuple(headers)
        self._body = body
        self._name = name

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def method(self) -> str:
        return self._method

    @property
    def url(self) -> str:
        return self._url

    @property
    def http_version(self) -> str | None:
        return self._http_version

    @property
    def headers(self) -> tuple[tuple[str, str], ...]:
        return self._headers

    @property
    def body(self) -> str | None:
        return self._body

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequestBlock):
            return NotImplemented
        return (
            self.name,
            self.method,
            self.url,
            self.http_version,
            self.headers,
            self.body,
        ) == (
            other.name,
            other.method,
            other.url,
            other.http_version,
            other.headers,
            other.body,
        )

    def __repr__(self) -> str:
        return (
            f"RequestBlock(method={self.method!r}, url={self.url!r}, "
            f"name={self.name!r}, headers=<{len(self.headers)} headers>, "
            f"body={'<present>' if self.body is not None else '<none>'})"
        )


class ParseState(enum.Enum):
    PREAMBLE = "preamble"
    HEADERS = "headers"
    BODY = "body"


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines the way editors number them.

    Only ``\\n`` ends a line (a trailing ``\\r`` is dropped), so characters
    such as ``\\f`` or U+2028 stay inside their line. A final newline does
    not start an extra empty line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def split_request_blocks(content: str) -> list[tuple[int, int]]:
    """Return the ``(start, end)`` line ranges of every request block.

    Ranges are 0-indexed and half-open over ``split_lines(content)``. A
    separator line is never part of a range, and empty ranges are dropped.
    """
    lines = split_lines(content)
    blocks: list[tuple[int, int]] = []
    block_start = 0

    for i, line in enumerate(lines):
        if line.strip() == SEPARATOR:
            if i > block_start:
                blocks.append((block_start, i))
            block_start = i + 1

    if block_start < len(lines):
        blocks.append((block_start, len(lines)))

    return blocks


def find_request_block(content: str, target_line: int) -> str:
    """Return the text of the request block containing ``target_line``.

    ``target_line`` is 1-indexed. A separator line belongs to the block that
    follows it.

    Raises:
        NoRequestBlockError: If no block contains the line.
    """
    lines = split_lines(content)
    if target_line >= 1:
        for start, end in split_request_blocks(content):
            # 1-indexed line ``start`` is the separator just before the block.
            if start <= target_line <= end:
                return "\n".join(lines[start:end])

    raise NoRequestBlockError(target_line)


def parse_request(block: str) -> RequestBlock:
    """Parse the text of one request block.

    Handles:
      - ``### name`` comments (the first one names the request)
      - ``#`` and ``//`` comments anywhere in the block
      - ``METHOD URL`` and ``METHOD URL VERSION`` request lines
      - ordered headers, duplicates included
      - a body after the first blank line following the headers

    Args:
        block: The raw text of a single request block.

    Returns:
        The parsed RequestBlock.

    Raises:
        ParseError: If no request line could be found.
    """
    name: str | None = None
    method = ""
    url = ""
    http_version: str | None = None
    headers: list[tuple[str, str]] = []
    body_lines: list[str] = []
    state = ParseState.PREAMBLE

    for line in split_lines(block):
        trimmed = line.strip()

        if not trimmed:
            if state is ParseState.HEADERS:
                state = ParseState.BODY
            elif state is ParseState.BODY and body_lines:
                body_lines.append(line)
            continue

        if trimmed.startswith("#") or trimmed.startswith("//"):
            if name is None and trimmed.startswith(SEPARATOR):
                comment_text = trimmed.lstrip("#").strip()
                if comment_text:
                    name = comment_text
            continue

        if state is ParseState.BODY:
            body_lines.append(line)
        elif state is ParseState.PREAMBLE:
            parts = trimmed.split(" ", 2)
            if len(parts) >= 2:
                method = parts[0]
                url = parts[1]
                if len(parts) == 3:
                    http_version = parts[2]
                state = ParseState.HEADERS
        else:
            key, sep, value = trimmed.partition(":")
            if sep:
                headers.append((key.strip(), value.strip()))

    if not method or not url:
        raise ParseError("no METHOD URL found")

    # Blank lines between the body and the next separator are not body text.
    while body_lines and not body_lines[-1].strip():
        body_lines.pop()

    return RequestBlock(
        method=method,
        url=url,
        http_version=http_version,
        headers=headers,
        body="\n".join(body_lines) if body_lines else None,
        name=name,
    )


def load_request_file(filepath: str) -> str:
    """Read and return the contents of a .http file.

    Raises:
        FileReadError: If the file cannot be opened or is not valid UTF-8.
    """
    try:
        with open(filepath, "r", encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(filepath, exc) from exc
