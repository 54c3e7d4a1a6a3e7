# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Does the server expect post titles to be sent HTML-encoded?"""

from __future__ import annotations

import html

from ...errors import MarkersNotFoundError
from ...markers import new_marker
from ...models import NO, YES, BlogPost, ResultSink, error_value
from ..extract import extract_text_between_markers
from ..homepage import HomepageProbe

TITLE_TEST_STRING = "<b>&amp;&amp;amp;</b>"


def escape_entities(text: str) -> str:
    return html.escape(text, quote=False)


class TitleEncodingProbe(HomepageProbe):
    """
    Sends ``<m1><b>&amp;&amp;amp;</b><m2>`` as the title and looks at the raw
    text the homepage shows between the markers.

    Escaped exactly once: the server stores the title as-is and escapes on
    output, so clients must send HTML titles ("Yes"). Escaped twice: the
    server escapes on input as well ("No").
    """

    result_key = "requiresHtmlTitles"

    def __init__(self):
        self.open_marker: str | None = None
        self.close_marker: str | None = None

    def prepare_post(self, post: BlogPost) -> bool | None:
        self.open_marker = new_marker()
        self.close_marker = new_marker()
        post.title = f"{self.open_marker}{TITLE_TEST_STRING}{self.close_marker}"
        post.contents = "foo"
        return None

    def handle_result(self, homepage_html: str, results: ResultSink) -> None:
        if self.open_marker is None or self.close_marker is None:
            raise RuntimeError(f"{self!r}: handle_result called before prepare_post")
        value = extract_text_between_markers(homepage_html, self.open_marker, self.close_marker)
        if value is None:
            raise MarkersNotFoundError("Title encoding test failed: title was not detected")
        results.add_result(self.result_key, classify_title(value))


def classify_title(value: str) -> str:
    if value == escape_entities(TITLE_TEST_STRING):
        return YES
    if value == escape_entities(escape_entities(TITLE_TEST_STRING)):
        return NO
    return error_value(value)
