# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for BlogRunner."""

from .blog import BlogConfig, ProviderConfig
from .post import BlogPost, BlogPostCategory, BlogSummary
from .report import ProbeOutcome, ProviderRunReport
from .results import NO, UNKNOWN, YES, ResultSink, error_value

__all__ = [
    "BlogConfig",
    "BlogPost",
    "BlogPostCategory",
    "BlogSummary",
    "NO",
    "ProbeOutcome",
    "ProviderConfig",
    "ProviderRunReport",
    "ResultSink",
    "UNKNOWN",
    "YES",
    "error_value",
]
