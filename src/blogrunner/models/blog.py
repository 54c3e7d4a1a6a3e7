# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configured blogs and providers."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class BlogConfig:
    """
    A test blog hosted by one provider.

    ``blog_id`` may be left unset in configuration; the runner then discovers
    it once through the client's "list my blogs" call. It is the only field
    that changes during a run.
    """

    homepage_url: str
    api_url: str
    username: str = ""
    password: str = ""
    blog_id: str | None = None


@dataclass
class ProviderConfig:
    id: str
    name: str = ""
    client_type: str = ""
    blog: BlogConfig | None = None
    exclude: list[str] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.name or self.id


__all__ = ["BlogConfig", "ProviderConfig"]
