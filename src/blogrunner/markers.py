# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Short opaque tokens for tagging published content.

A marker is 128 random bits folded to 64 by XOR-ing the halves, then encoded
as unpadded URL-safe base64 (11 characters). Markers are plain ASCII and never
contain characters that HTML escaping would rewrite, so they survive a round
trip through any blog engine's renderer unchanged.
"""

from __future__ import annotations

import base64
import re
import secrets

MARKER_LENGTH = 11
MARKER_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")


def new_marker() -> str:
    raw = secrets.token_bytes(16)
    folded = bytes(a ^ b for a, b in zip(raw[:8], raw[8:]))
    return base64.urlsafe_b64encode(folded).rstrip(b"=").decode("ascii")


def is_marker(value: str) -> bool:
    return bool(MARKER_RE.match(value or ""))


__all__ = ["MARKER_LENGTH", "MARKER_RE", "is_marker", "new_marker"]
