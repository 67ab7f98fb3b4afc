"""Request execution.

Sends the parsed request exactly once and captures the response together
with the wall-clock time it took. HTTP error statuses are ordinary results;
only transport failures raise.
"""

from __future__ import annotations

import time
from datetime import timedelta

import requests

from zhttp.errors import TransportError
from zhttp.parser import RequestBlock

DEFAULT_TIMEOUT = 30

# urllib3 reports the protocol as an integer (11 == HTTP/1.1)
HTTP_VERSIONS = {
    9: "HTTP/0.9",
    10: "HTTP/1.0",
    11: "HTTP/1.1",
    20: "HTTP/2",
}


class HttpResponse:
    """Container for the outcome of an executed request."""

    __slots__ = (
        "status_code",
        "reason",
        "http_version",
        "headers",
        "body",
        "elapsed",
    )

    def __init__(
        self,
        status_code: int,
        reason: str,
        http_version: str,
        headers: list[tuple[str, str]],
        body: bytes,
        elapsed: timedelta,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.http_version = http_version
        self.headers = headers
        self.body = body
        self.elapsed = elapsed

    def __repr__(self) -> str:
        return (
            f"HttpResponse(status_code={self.status_code!r}, "
            f"reason={self.reason!r}, body=<{len(self.body)} bytes>)"
        )


def build_headers(block: RequestBlock) -> dict[str, bytes]:
    """Collapse the block's ordered headers into the mapping sent on the wire.

    Insertion order is kept; a repeated name replaces the earlier value.
    Values go out as UTF-8 bytes, since http.client would otherwise insist
    on Latin-1.
    """
    headers: dict[str, bytes] = {}
    for key, value in block.headers:
        headers[key] = value.encode("utf-8")
    return headers


def response_version(response: requests.Response) -> str:
    version = getattr(response.raw, "version", None)
    return HTTP_VERSIONS.get(version, "HTTP/1.1")


def execute_request(
    block: RequestBlock,
    timeout: float = DEFAULT_TIMEOUT,
    proxy: str | None = None,
    allow_redirects: bool = True,
) -> HttpResponse:
    """Send the request described by ``block``.

    Args:
        block: The parsed request.
        timeout: Request timeout in seconds.
        proxy: Optional proxy URL applied to both http and https.
        allow_redirects: Whether to follow redirects.

    Returns:
        An HttpResponse for any status code the server sends back.

    Raises:
        TransportError: If no HTTP response could be obtained.
    """
    proxies = None
    if proxy:
        proxies = {"http": proxy, "https": proxy}

    data = block.body.encode("utf-8") if block.body is not None else None

    start = time.perf_counter()
    try:
        response = requests.request(
            method=block.method,
            url=block.url,
            headers=build_headers(block),
            data=data,
            proxies=proxies,
            timeout=timeout,
            allow_redirects=allow_redirects,
        )
    except requests.exceptions.RequestException as exc:
        raise TransportError(str(exc)) from exc
    except ValueError as exc:
        # http.client rejects what it cannot encode (e.g. a non-ASCII method)
        raise TransportError(f"invalid request: {exc}") from exc
    elapsed = timedelta(seconds=time.perf_counter() - start)

    return HttpResponse(
        status_code=response.status_code,
        reason=response.reason or "",
        http_version=response_version(response),
        headers=list(response.headers.items()),
        body=response.content or b"",
        elapsed=elapsed,
    )
