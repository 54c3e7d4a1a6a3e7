# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe result collection."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TextIO

from ..errors import DuplicateKeyError

YES = "Yes"
NO = "No"
UNKNOWN = "Unknown"


def error_value(value: str) -> str:
    """Diagnostic result for a probe that captured something it cannot classify."""
    return f"[ERROR] (value was: {value})"


def _sort_key(key: str) -> tuple[str, str]:
    # Tie-break on the raw key so keys differing only by case still order deterministically.
    return (key.casefold(), key)


class ResultSink:
    """Key/value results of one probe, enumerated in case-insensitive key order."""

    def __init__(self):
        self._results: dict[str, str] = {}

    def add_result(self, key: str, value: str) -> None:
        if key in self._results:
            raise DuplicateKeyError(key)
        self._results[key] = value

    def keys(self) -> list[str]:
        return sorted(self._results, key=_sort_key)

    def items(self) -> list[tuple[str, str]]:
        return [(key, self._results[key]) for key in self.keys()]

    def for_each(self, visitor: Callable[[str, str], None]) -> None:
        for key, value in self.items():
            visitor(key, value)

    def dump(self, output: TextIO | None = None) -> str:
        """Render ``key: value`` lines; also written to ``output`` when given."""
        text = "".join(f"{key}: {value}\n" for key, value in self.items())
        if output is not None:
            output.write(text)
        return text

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._results.get(key, default)

    def to_dict(self) -> dict[str, str]:
        return dict(self.items())

    def __contains__(self, key: object) -> bool:
        return key in self._results

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._results)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"ResultSink({self.to_dict()!r})"


__all__ = ["NO", "UNKNOWN", "YES", "ResultSink", "error_value"]
