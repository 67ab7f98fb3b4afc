"""Static completion table for editing .http files.

Suggests HTTP methods at the start of a request line and common header
names everywhere else.
"""

from __future__ import annotations

HTTP_METHODS = (
    "GET",
    "POST",
    "PUT",
    "DELETE",
    "PATCH",
    "HEAD",
    "OPTIONS",
    "TRACE",
    "CONNECT",
)

COMMON_HEADERS = (
    ("Accept", "application/json"),
    ("Accept-Encoding", "gzip, deflate, br"),
    ("Accept-Language", "en-US,en;q=0.9"),
    ("Authorization", "Bearer "),
    ("Cache-Control", "no-cache"),
    ("Content-Type", "application/json"),
    ("Content-Type", "application/x-www-form-urlencoded"),
    ("Content-Type", "multipart/form-data"),
    ("Content-Type", "text/plain"),
    ("Cookie", ""),
    ("Host", ""),
    ("Origin", ""),
    ("Referer", ""),
    ("User-Agent", ""),
    ("X-Request-ID", ""),
)


class CompletionItem:
    """One completion suggestion."""

    __slots__ = ("label", "kind", "detail", "insert_text", "sort_text")

    def __init__(
        self,
        label: str,
        kind: str,
        detail: str,
        insert_text: str,
        sort_text: str,
    ) -> None:
        self.label = label
        self.kind = kind
        self.detail = detail
        self.insert_text = insert_text
        self.sort_text = sort_text

    def __repr__(self) -> str:
        return f"CompletionItem(label={self.label!r}, insert_text={self.insert_text!r})"


def is_method_position(line_text: str) -> bool:
    """True when the line is empty or already starts with an HTTP method."""
    trimmed = line_text.strip()
    if not trimmed:
        return True
    upper = trimmed.upper()
    return any(upper.startswith(method) for method in HTTP_METHODS)


def method_completions() -> list[CompletionItem]:
    return [
        CompletionItem(
            label=method,
            kind="method",
            detail="HTTP Method",
            insert_text=f"{method} ",
            sort_text=f"{i:02d}",
        )
        for i, method in enumerate(HTTP_METHODS)
    ]


def header_completions() -> list[CompletionItem]:
    items = []
    for i, (name, default_value) in enumerate(COMMON_HEADERS):
        insert = f"{name}: {default_value}" if default_value else f"{name}: "
        items.append(
            CompletionItem(
                label=name,
                kind="header",
                detail="HTTP Header",
                insert_text=insert,
                sort_text=f"{i:02d}",
            )
        )
    return items


def complete(line_text: str, column: int) -> list[CompletionItem]:
    """Return completion items for the cursor at ``column`` on ``line_text``."""
    if column == 0 or is_method_position(line_text):
        return method_completions()
    return header_completions()
