# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Blog client abstraction consumed by probes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..models import BlogPost, BlogPostCategory, BlogSummary


@dataclass(frozen=True)
class BlogCredentials:
    username: str = ""
    password: str = ""

    def __repr__(self) -> str:
        return f"BlogCredentials(username={self.username!r}, password='***')"


class BlogClient(Protocol):
    """
    Remote posting API of one blog provider.

    Implementations raise ``RemoteApiError`` for any failure; probes let those
    propagate to the runner's per-probe boundary and never retry them.
    """

    def create_post(self, blog_id: str | None, post: BlogPost, publish: bool) -> tuple[str | None, BlogPost]: ...

    def fetch_post(self, blog_id: str | None, post_id: str) -> BlogPost: ...

    def delete_post(self, blog_id: str | None, post_id: str, is_page: bool = False) -> None: ...

    def list_categories(self, blog_id: str | None) -> list[BlogPostCategory]: ...

    def list_my_blogs(self) -> list[BlogSummary]: ...


__all__ = ["BlogClient", "BlogCredentials"]
