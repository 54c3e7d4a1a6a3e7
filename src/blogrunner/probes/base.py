# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe protocol, per-run context and the publish/cleanup helpers shared by probe shapes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from ..blogclient import BlogClient
from ..config import RunSettings, load_run_settings
from ..errors import RemoteApiError
from ..http.client import HttpClient
from ..markers import new_marker
from ..models import BlogConfig, BlogPost, ResultSink

logger = logging.getLogger(__name__)

_NAME_SUFFIXES = ("Probe", "Test")


@dataclass(frozen=True)
class RunContext:
    """Values threaded from the runner into every probe invocation."""

    http_client: HttpClient
    clean_up_posts: bool = True
    poll_timeout: float = 120.0
    poll_interval: float = 1.0

    @classmethod
    def from_settings(cls, http_client: HttpClient, settings: RunSettings | None = None) -> RunContext:
        settings = settings or load_run_settings()
        return cls(
            http_client=http_client,
            clean_up_posts=settings.clean_up_posts,
            poll_timeout=settings.poll_timeout,
            poll_interval=settings.poll_interval,
        )


class Probe(Protocol):
    """A single feature probe against one blog."""

    def run(self, blog: BlogConfig, client: BlogClient, context: RunContext) -> ResultSink: ...


def probe_name(probe: object) -> str:
    """Name used in exclusion lists: the class name without a Probe/Test suffix."""
    name = type(probe).__name__
    for suffix in _NAME_SUFFIXES:
        if name.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)]
    return name


def require_blog_and_client(blog: BlogConfig | None, client: BlogClient | None) -> None:
    if blog is None:
        raise ValueError("blog is required")
    if client is None:
        raise ValueError("client is required")


def stamp_title(post: BlogPost) -> str:
    """Prefix the title with a fresh ``<token>:`` so published posts stay traceable."""
    token = new_marker()
    post.title = f"{token}:{post.title}"
    return token


def publish_post(blog: BlogConfig, client: BlogClient, post: BlogPost, publish: bool | None) -> str | None:
    effective = True if publish is None else publish
    post_id, _ = client.create_post(blog.blog_id, post, effective)
    logger.debug("Created post %s on %s (publish=%s): %r", post_id, blog.homepage_url, effective, post.title)
    return post_id


def clean_up_post(
    blog: BlogConfig,
    client: BlogClient,
    post_id: str | None,
    context: RunContext,
    *,
    enabled: bool = True,
    is_page: bool = False,
) -> bool:
    """Delete a published post when an id was returned and cleanup is on; True if deleted."""
    if post_id is None or not enabled or not context.clean_up_posts:
        if post_id is not None:
            logger.info("Leaving post %s on %s", post_id, blog.homepage_url)
        return False
    client.delete_post(blog.blog_id, post_id, is_page)
    logger.debug("Deleted post %s on %s", post_id, blog.homepage_url)
    return True


def require_post_id(post_id: str | None) -> str:
    if post_id is None:
        raise RemoteApiError("create_post", "server did not return a post id")
    return post_id


__all__ = [
    "Probe",
    "RunContext",
    "clean_up_post",
    "probe_name",
    "publish_post",
    "require_blog_and_client",
    "require_post_id",
    "stamp_title",
]
