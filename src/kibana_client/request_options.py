"""
Request customizers.

A customizer receives the fully built ``httpx.Request`` before it is sent.
It may mutate the request in place, return a replacement request, or raise
to abort the call. Customizers run in the order they are given.
"""

from typing import Callable, Mapping, Optional
from urllib.parse import quote

import httpx

RequestOption = Callable[[httpx.Request], Optional[httpx.Request]]


def with_header(name: str, value: str) -> RequestOption:
    """Set a single header, replacing any existing value."""

    def apply(request: httpx.Request) -> None:
        request.headers[name] = value

    return apply


def with_headers(headers: Mapping[str, str]) -> RequestOption:
    """Set several headers at once."""

    def apply(request: httpx.Request) -> None:
        request.headers.update(headers)

    return apply


def with_space(space_id: str) -> RequestOption:
    """
    Scope the request to a space.

    Rewrites ``.../api/<path>`` into ``.../s/<space_id>/api/<path>``.
    """

    def apply(request: httpx.Request) -> None:
        raw_path = request.url.raw_path.decode("ascii")
        marker = "/api/"
        index = raw_path.find(marker)
        if index < 0:
            raise ValueError(f"cannot scope {raw_path!r} to a space: no /api/ segment")
        scoped = raw_path[:index] + "/s/" + quote(space_id, safe="") + raw_path[index:]
        request.url = request.url.copy_with(raw_path=scoped.encode("ascii"))

    return apply
