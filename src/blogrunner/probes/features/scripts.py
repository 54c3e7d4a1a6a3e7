# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Does the server keep <script> blocks in post bodies?"""

import logging

from ...models import NO, UNKNOWN, YES, ResultSink
from ..body_content import BodyContentProbe

logger = logging.getLogger(__name__)

SCRIPT_MARKUP = "<script language=\"javascript\">document.write('foo!');</script>"


class SupportsScriptsProbe(BodyContentProbe):
    result_key = "supportsScripts"

    @property
    def body_content(self) -> str:
        return SCRIPT_MARKUP

    def handle_content_result(self, content: str | None, results: ResultSink) -> None:
        if content is None:
            # The whole region vanished; we cannot tell scripts apart from the markers' fate.
            logger.warning("Script test markers were not found on the homepage")
            results.add_result(self.result_key, UNKNOWN)
        elif "script" in content.lower():
            results.add_result(self.result_key, YES)
        else:
            results.add_result(self.result_key, NO)
