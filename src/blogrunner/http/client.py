# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""The homepage HTTP seam."""

from __future__ import annotations

from typing import Protocol

from ..config import HttpSettings, load_http_settings
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """
    Fetches blog homepages for the poll loop.

    Implementations report failures through ``HttpResponse.ok`` and
    ``error_message`` rather than raising.
    """

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None: ...


def create_default_http_client(settings: HttpSettings | None = None) -> HttpClient:
    from .httpx_client import HttpxClient

    return HttpxClient(settings if settings is not None else load_http_settings())
