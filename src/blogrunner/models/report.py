# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclasses summarizing a provider's probe pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import ErrorCategory, error_category_to_reason


@dataclass
class ProbeOutcome:
    probe: str
    results: dict[str, str] = field(default_factory=dict)
    error_category: ErrorCategory = ErrorCategory.NONE
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_category == ErrorCategory.NONE

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"probe": self.probe, "ok": self.ok, "results": dict(self.results)}
        if not self.ok:
            data["error_category"] = self.error_category.value
            data["reason"] = error_category_to_reason(self.error_category)
            data["error_message"] = self.error_message
        return data


@dataclass
class ProviderRunReport:
    provider_id: str
    provider_name: str
    outcomes: list[ProbeOutcome] = field(default_factory=list)

    @property
    def failures(self) -> list[ProbeOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    def to_dict(self) -> dict[str, Any]:
        return {
            "provider_id": self.provider_id,
            "provider_name": self.provider_name,
            "outcomes": [outcome.to_dict() for outcome in self.outcomes],
        }


__all__ = ["ProbeOutcome", "ProviderRunReport"]
