# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Does the server keep more than one category on a post?"""

from __future__ import annotations

from ...blogclient import BlogClient
from ...errors import ProbePreconditionError
from ...models import NO, YES, BlogConfig, BlogPost, ResultSink
from ..roundtrip import RoundtripProbe


class SupportsMultipleCategoriesProbe(RoundtripProbe):
    result_key = "supportsMultipleCategories"

    def prepare_post(self, blog: BlogConfig, client: BlogClient, post: BlogPost) -> bool | None:
        categories = client.list_categories(blog.blog_id)
        if len(categories) < 2:
            raise ProbePreconditionError(
                f"Blog {blog.homepage_url} does not have enough categories for the "
                "SupportsMultipleCategories probe to be performed"
            )
        post.title = "Multiple categories test"
        post.contents = "foo bar"
        post.categories = list(categories[:2])
        return None

    def handle_result(self, post: BlogPost, results: ResultSink) -> None:
        results.add_result(self.result_key, YES if len(post.categories) == 2 else NO)
