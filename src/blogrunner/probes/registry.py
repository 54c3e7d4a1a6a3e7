# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Default probe set and exclusion filtering."""

from __future__ import annotations

from collections.abc import Iterable

from .base import Probe, probe_name
from .composite import CompositePostProbe
from .features import (
    SupportsEmbedsProbe,
    SupportsEmptyTitlesProbe,
    SupportsFuturePostProbe,
    SupportsMultipleCategoriesProbe,
    SupportsPostAsDraftProbe,
    SupportsScriptsProbe,
    TitleEncodingProbe,
)
from .homepage import HomepageProbe


def _keep(probe: object, excluded: set[str]) -> bool:
    return probe_name(probe) not in excluded


def build_composite(probes: Iterable[HomepageProbe], exclude: Iterable[str] = ()) -> CompositePostProbe | None:
    """Bundle the non-excluded probes into one post; None when nothing is left."""
    excluded = set(exclude)
    kept = [probe for probe in probes if _keep(probe, excluded)]
    return CompositePostProbe(kept) if kept else None


def build_default_probes(exclude: Iterable[str] = ()) -> list[Probe]:
    """Fresh probe instances in run order, minus the excluded ones."""
    excluded = set(exclude)
    probes: list[Probe] = [
        probe
        for probe in (
            SupportsMultipleCategoriesProbe(),
            SupportsPostAsDraftProbe(),
            SupportsFuturePostProbe(),
            SupportsEmptyTitlesProbe(),
        )
        if _keep(probe, excluded)
    ]
    composite = build_composite(
        (TitleEncodingProbe(), SupportsEmbedsProbe(), SupportsScriptsProbe()),
        excluded,
    )
    if composite is not None:
        probes.append(composite)
    return probes


PROBE_NAMES = [
    probe_name(probe)
    for probe in (
        SupportsMultipleCategoriesProbe(),
        SupportsPostAsDraftProbe(),
        SupportsFuturePostProbe(),
        SupportsEmptyTitlesProbe(),
        TitleEncodingProbe(),
        SupportsEmbedsProbe(),
        SupportsScriptsProbe(),
    )
]

__all__ = ["PROBE_NAMES", "build_composite", "build_default_probes"]
