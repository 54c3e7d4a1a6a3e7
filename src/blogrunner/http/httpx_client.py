# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient used for homepage polling."""

from __future__ import annotations

import logging

import httpx

from ..config import HttpSettings, load_http_settings
from .client import HttpClient
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

_FALLBACK_BODY_LIMIT = 16 * 1024 * 1024


def _read_capped(resp: httpx.Response, limit: int) -> tuple[bytes, bool]:
    """Read at most ``limit`` body bytes; the flag says whether the body was cut short."""
    body = bytearray()
    for chunk in resp.iter_bytes():
        room = limit - len(body)
        if len(chunk) > room:
            body.extend(chunk[:room])
            return bytes(body), True
        body.extend(chunk)
    return bytes(body), False


def _decode(body: bytes, encoding: str | None) -> str:
    try:
        return body.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


class HttpxClient(HttpClient):
    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    @property
    def body_limit(self) -> int:
        limit = self.settings.max_body_bytes
        return limit if limit > 0 else _FALLBACK_BODY_LIMIT

    def _headers(self, request: HttpRequest) -> dict[str, str]:
        headers = {"User-Agent": self.settings.user_agent, "Cache-Control": "no-cache"}
        headers.update(request.headers or {})
        return headers

    def request(self, request: HttpRequest) -> HttpResponse:
        limit = self.body_limit
        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=self._headers(request),
                content=request.body,
                timeout=request.timeout if request.timeout is not None else self.settings.timeout,
                follow_redirects=request.allow_redirects,
            ) as resp:
                body, truncated = _read_capped(resp, limit)
                text = _decode(body, resp.encoding)
        except Exception as exc:  # noqa: BLE001
            logger.debug("%s %s raised %s: %s", request.method, request.url, type(exc).__name__, exc)
            return HttpResponse(ok=False, error_message=str(exc), error_type=type(exc).__name__)

        if truncated:
            logger.debug("Body of %s cut at %d bytes", request.url, limit)
        return HttpResponse(
            ok=resp.is_success,
            status_code=resp.status_code,
            headers=dict(resp.headers),
            text=text,
            content=body,
            url=str(resp.url),
            error_message=None if resp.is_success else f"HTTP {resp.status_code}",
            meta={"body_truncated": truncated, "body_bytes_read": len(body), "body_bytes_limit": limit},
        )

    def close(self) -> None:
        self._client.close()
