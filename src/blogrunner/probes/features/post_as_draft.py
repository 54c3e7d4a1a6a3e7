# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Does publish=false keep a post off the homepage?"""

from __future__ import annotations

from ...errors import PollTimeoutError
from ...models import NO, YES, BlogPost, ResultSink
from ..homepage import HomepageProbe


class SupportsPostAsDraftProbe(HomepageProbe):
    result_key = "supportsPostAsDraft"

    def prepare_post(self, post: BlogPost) -> bool | None:
        post.title = "Post as draft test"
        post.contents = "foo bar"
        return False

    def handle_result(self, homepage_html: str, results: ResultSink) -> None:
        # The draft went public.
        results.add_result(self.result_key, NO)

    def handle_timeout(self, error: PollTimeoutError, results: ResultSink) -> bool:
        results.add_result(self.result_key, YES)
        return True
