# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Probe framework.

Two probe shapes share the publish/cleanup plumbing in ``base``: homepage
probes poll the blog's public page for the just-published post, roundtrip
probes re-fetch it through the blog API. ``CompositePostProbe`` lets several
homepage probes ride in one post.
"""

from .base import Probe, RunContext, probe_name
from .body_content import BodyContentProbe
from .composite import CompositePostProbe
from .extract import extract_between_markers, extract_text_between_markers
from .homepage import HomepageProbe, fetch_homepage_text, poll_homepage_until_marker
from .registry import PROBE_NAMES, build_composite, build_default_probes
from .roundtrip import RoundtripProbe, roundtrip_via_api

__all__ = [
    "BodyContentProbe",
    "CompositePostProbe",
    "HomepageProbe",
    "PROBE_NAMES",
    "Probe",
    "RoundtripProbe",
    "RunContext",
    "build_composite",
    "build_default_probes",
    "extract_between_markers",
    "extract_text_between_markers",
    "fetch_homepage_text",
    "poll_homepage_until_marker",
    "probe_name",
    "roundtrip_via_api",
]
