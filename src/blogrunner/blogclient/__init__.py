# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Blog client exports."""

from .client import BlogClient, BlogCredentials
from .metaweblog import MetaWeblogClient, WordPressClient
from .registry import CLIENT_TYPES, BlogClientFactory, ClientTypeFactory, create_blog_client, register_client_type

__all__ = [
    "BlogClient",
    "BlogClientFactory",
    "BlogCredentials",
    "CLIENT_TYPES",
    "ClientTypeFactory",
    "MetaWeblogClient",
    "WordPressClient",
    "create_blog_client",
    "register_client_type",
]
