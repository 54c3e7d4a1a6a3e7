# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Blog post models exchanged with blog clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class BlogPostCategory:
    id: str
    name: str = ""


@dataclass
class BlogPost:
    title: str = ""
    contents: str = ""
    categories: list[BlogPostCategory] = field(default_factory=list)
    date_published_override: datetime | None = None
    id: str | None = None


@dataclass(frozen=True)
class BlogSummary:
    """One entry of a "list my blogs" call."""

    id: str
    name: str = ""
    homepage_url: str = ""


__all__ = ["BlogPost", "BlogPostCategory", "BlogSummary"]
