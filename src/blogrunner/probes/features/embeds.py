# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Does the server keep <embed> tags in post bodies?"""

from ...errors import MarkersNotFoundError
from ...models import NO, YES, ResultSink
from ..body_content import BodyContentProbe

EMBED_MARKUP = (
    '<embed src="http://s3.amazonaws.com/slideshare/ssplayer2.swf?doc=inconvenient-truth-posters1319" '
    'type="application/x-shockwave-flash" allowscriptaccess="always" allowfullscreen="true" '
    'width="425" height="355" />'
)


class SupportsEmbedsProbe(BodyContentProbe):
    result_key = "supportsEmbeds"

    @property
    def body_content(self) -> str:
        return EMBED_MARKUP

    def handle_content_result(self, content: str | None, results: ResultSink) -> None:
        if content is None:
            raise MarkersNotFoundError("Embed test markers were not found")
        results.add_result(self.result_key, YES if "<embed" in content.lower() else NO)
