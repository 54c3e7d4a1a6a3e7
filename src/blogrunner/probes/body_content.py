# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Homepage probes that inject markup between two markers in the post body."""

from __future__ import annotations

from abc import abstractmethod

from ..markers import new_marker
from ..models import BlogPost, ResultSink
from .extract import extract_between_markers
from .homepage import HomepageProbe


class BodyContentProbe(HomepageProbe):
    """
    Appends ``<br/>\\n<open>{body_content}<close>`` to the post body and hands
    whatever the server rendered between the markers to ``handle_content_result``.
    """

    def __init__(self):
        self.open_marker: str | None = None
        self.close_marker: str | None = None

    @property
    @abstractmethod
    def body_content(self) -> str: ...

    @abstractmethod
    def handle_content_result(self, content: str | None, results: ResultSink) -> None:
        """``content`` is None when the markers were not found on the page."""

    def prepare_post(self, post: BlogPost) -> bool | None:
        self.open_marker = new_marker()
        self.close_marker = new_marker()
        post.contents += f"<br/>\n{self.open_marker}{self.body_content}{self.close_marker}"
        return None

    def handle_result(self, homepage_html: str, results: ResultSink) -> None:
        if self.open_marker is None or self.close_marker is None:
            raise RuntimeError(f"{self!r}: handle_result called before prepare_post")
        content = extract_between_markers(homepage_html, self.open_marker, self.close_marker)
        self.handle_content_result(content, results)


__all__ = ["BodyContentProbe"]
