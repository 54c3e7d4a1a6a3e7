# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Locate marker-delimited content inside fetched HTML."""

from __future__ import annotations

import re
from html.parser import HTMLParser

_SKIPPED_CONTENT_TAGS = {"script", "style"}


def _between_markers_re(open_marker: str, close_marker: str) -> re.Pattern[str]:
    return re.compile(f"{re.escape(open_marker)}(.*?){re.escape(close_marker)}")


def extract_between_markers(html: str, open_marker: str, close_marker: str) -> str | None:
    """
    Return the text rendered between the two markers, exactly as served.

    ``None`` means the markers were not found (the open marker is missing or
    no close marker follows it on the same line).
    """
    match = _between_markers_re(open_marker, close_marker).search(html)
    return match.group(1) if match else None


class _TextRunCollector(HTMLParser):
    """Collects raw (still entity-encoded) text runs that sit between tags."""

    def __init__(self):
        super().__init__(convert_charrefs=False)
        self.runs: list[str] = []
        self._current: list[str] = []
        self._skip_depth = 0

    def _flush(self) -> None:
        if self._current:
            self.runs.append("".join(self._current))
            self._current = []

    def _append(self, text: str) -> None:
        if not self._skip_depth:
            self._current.append(text)

    def handle_starttag(self, tag, attrs):  # noqa: ANN001
        self._flush()
        if tag in _SKIPPED_CONTENT_TAGS:
            self._skip_depth += 1

    def handle_startendtag(self, tag, attrs):  # noqa: ANN001
        self._flush()

    def handle_endtag(self, tag):  # noqa: ANN001
        self._flush()
        if tag in _SKIPPED_CONTENT_TAGS and self._skip_depth:
            self._skip_depth -= 1

    def handle_comment(self, data):  # noqa: ANN001
        self._flush()

    def handle_decl(self, decl):  # noqa: ANN001
        self._flush()

    def handle_pi(self, data):  # noqa: ANN001
        self._flush()

    def handle_data(self, data):  # noqa: ANN001
        self._append(data)

    def handle_entityref(self, name):  # noqa: ANN001
        self._append(f"&{name};")

    def handle_charref(self, name):  # noqa: ANN001
        self._append(f"&#{name};")

    def close(self) -> None:
        super().close()
        self._flush()


def iter_text_runs(html: str) -> list[str]:
    """Split a page into the raw text runs between markup (script/style bodies excluded)."""
    collector = _TextRunCollector()
    collector.feed(html)
    collector.close()
    return collector.runs


def extract_text_between_markers(html: str, open_marker: str, close_marker: str) -> str | None:
    """Like ``extract_between_markers`` but only matches inside a single text run."""
    pattern = _between_markers_re(open_marker, close_marker)
    for run in iter_text_runs(html):
        match = pattern.search(run)
        if match:
            return match.group(1)
    return None


__all__ = ["extract_between_markers", "extract_text_between_markers", "iter_text_runs"]
