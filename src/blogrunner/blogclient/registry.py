# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Client-type registry: maps a provider's ``clientType`` onto a BlogClient."""

from __future__ import annotations

from collections.abc import Callable

from ..errors import ConfigError
from .client import BlogClient, BlogCredentials
from .metaweblog import MetaWeblogClient, WordPressClient

# (api_url, credentials, blog_id) -> client
ClientTypeFactory = Callable[[str, BlogCredentials, str | None], BlogClient]
# (client_type, api_url, credentials, blog_id) -> client
BlogClientFactory = Callable[[str, str, BlogCredentials, str | None], BlogClient]

CLIENT_TYPES: dict[str, ClientTypeFactory] = {
    "metaweblog": MetaWeblogClient,
    "movabletype": MetaWeblogClient,
    "wordpress": WordPressClient,
}


def register_client_type(name: str, factory: ClientTypeFactory) -> None:
    CLIENT_TYPES[name.strip().lower()] = factory


def create_blog_client(
    client_type: str,
    api_url: str,
    credentials: BlogCredentials,
    blog_id: str | None = None,
) -> BlogClient:
    factory = CLIENT_TYPES.get((client_type or "").strip().lower())
    if factory is None:
        raise ConfigError(f"Unsupported client type: {client_type!r}")
    return factory(api_url, credentials, blog_id)


__all__ = ["BlogClientFactory", "CLIENT_TYPES", "ClientTypeFactory", "create_blog_client", "register_client_type"]
