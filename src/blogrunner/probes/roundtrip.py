# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""API-roundtrip probes: publish, re-fetch the post through the client, inspect it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager

from ..blogclient import BlogClient
from ..models import BlogConfig, BlogPost, ResultSink
from .base import (
    RunContext,
    clean_up_post,
    publish_post,
    require_blog_and_client,
    require_post_id,
    stamp_title,
)


@contextmanager
def roundtrip_via_api(
    blog: BlogConfig,
    client: BlogClient,
    post: BlogPost,
    publish: bool | None,
    context: RunContext,
    *,
    clean_up: bool = True,
) -> Iterator[BlogPost]:
    """
    Publish ``post`` and yield the server's copy of it, fetched by id.

    The published post is deleted on exit (subject to the run's cleanup flag),
    whether or not the block raised.
    """
    post_id = require_post_id(publish_post(blog, client, post, publish))
    try:
        yield client.fetch_post(blog.blog_id, post_id)
    finally:
        clean_up_post(blog, client, post_id, context, enabled=clean_up)


class RoundtripProbe(ABC):
    clean_up_posts: bool = True

    @abstractmethod
    def prepare_post(self, blog: BlogConfig, client: BlogClient, post: BlogPost) -> bool | None: ...

    @abstractmethod
    def handle_result(self, post: BlogPost, results: ResultSink) -> None: ...

    def run(self, blog: BlogConfig, client: BlogClient, context: RunContext) -> ResultSink:
        require_blog_and_client(blog, client)
        results = ResultSink()

        post = BlogPost()
        publish = self.prepare_post(blog, client, post)
        stamp_title(post)

        with roundtrip_via_api(blog, client, post, publish, context, clean_up=self.clean_up_posts) as fetched:
            self.handle_result(fetched, results)
        return results

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}()"


__all__ = ["RoundtripProbe", "roundtrip_via_api"]
