# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Concrete feature probes."""

from .embeds import SupportsEmbedsProbe
from .empty_titles import SupportsEmptyTitlesProbe
from .future_post import SupportsFuturePostProbe
from .multiple_categories import SupportsMultipleCategoriesProbe
from .post_as_draft import SupportsPostAsDraftProbe
from .scripts import SupportsScriptsProbe
from .title_encoding import TitleEncodingProbe

__all__ = [
    "SupportsEmbedsProbe",
    "SupportsEmptyTitlesProbe",
    "SupportsFuturePostProbe",
    "SupportsMultipleCategoriesProbe",
    "SupportsPostAsDraftProbe",
    "SupportsScriptsProbe",
    "TitleEncodingProbe",
]
