# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Several homepage probes sharing one published post and one homepage poll."""

from __future__ import annotations

from collections.abc import Iterable

from ..models import BlogPost, ResultSink
from .homepage import HomepageProbe


class CompositePostProbe(HomepageProbe):
    """
    Runs children's hooks in order against the same post and the same page.

    Children must only add to the post (e.g. append their own marker-delimited
    region). There is no per-child error boundary: a child that raises aborts
    the remaining children and fails the whole composite.
    """

    def __init__(self, probes: Iterable[HomepageProbe]):
        self.probes: list[HomepageProbe] = list(probes)

    def prepare_post(self, post: BlogPost) -> bool | None:
        publish: bool | None = None
        for probe in self.probes:
            intent = probe.prepare_post(post)
            if intent is not None:
                publish = intent
        return publish

    def handle_result(self, homepage_html: str, results: ResultSink) -> None:
        for probe in self.probes:
            probe.handle_result(homepage_html, results)

    def __len__(self) -> int:
        return len(self.probes)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"CompositePostProbe({self.probes!r})"


__all__ = ["CompositePostProbe"]
