# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Does a future-dated post show up on the homepage right away?"""

from __future__ import annotations

from datetime import datetime, timedelta

from ...errors import PollTimeoutError
from ...models import NO, YES, BlogPost, ResultSink
from ..homepage import HomepageProbe

FUTURE_OFFSET = timedelta(days=12)


class SupportsFuturePostProbe(HomepageProbe):
    """
    A server that ignores the publish date shows the post immediately, in
    which case editors should warn users before scheduling posts.
    """

    result_key = "futurePublishDateWarning"

    def prepare_post(self, post: BlogPost) -> bool | None:
        post.title = "Future post test"
        post.contents = "foo bar"
        post.date_published_override = datetime.now() + FUTURE_OFFSET
        return None

    def handle_result(self, homepage_html: str, results: ResultSink) -> None:
        results.add_result(self.result_key, YES)

    def handle_timeout(self, error: PollTimeoutError, results: ResultSink) -> bool:
        results.add_result(self.result_key, NO)
        return True
