# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Does the server accept a post with an empty title?"""

from __future__ import annotations

import logging

from ...blogclient import BlogClient
from ...errors import RemoteApiError
from ...models import NO, YES, BlogConfig, BlogPost, ResultSink
from ..base import RunContext, clean_up_post, require_blog_and_client

logger = logging.getLogger(__name__)


class SupportsEmptyTitlesProbe:
    """
    Publishes directly through the client. The title is deliberately left
    empty, so this is the one probe whose post carries no ``<token>:`` prefix.
    """

    result_key = "supportsEmptyTitles"
    clean_up_posts = True

    def run(self, blog: BlogConfig, client: BlogClient, context: RunContext) -> ResultSink:
        require_blog_and_client(blog, client)
        results = ResultSink()
        post = BlogPost(title="", contents="foo")

        try:
            post_id, _ = client.create_post(blog.blog_id, post, True)
        except RemoteApiError as exc:
            logger.debug("Empty title rejected by %s: %s", blog.homepage_url, exc)
            results.add_result(self.result_key, NO)
            return results

        results.add_result(self.result_key, YES)
        clean_up_post(blog, client, post_id, context, enabled=self.clean_up_posts)
        return results

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}()"
