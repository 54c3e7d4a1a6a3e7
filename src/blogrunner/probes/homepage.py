# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Homepage-scrape probes: publish a post, poll the public homepage for it, inspect the page."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod

from ..blogclient import BlogClient
from ..errors import PollTimeoutError
from ..http import HttpRequest
from ..http.client import HttpClient
from ..models import BlogConfig, BlogPost, ResultSink
from .base import RunContext, clean_up_post, publish_post, require_blog_and_client, stamp_title

logger = logging.getLogger(__name__)


def fetch_homepage_text(http_client: HttpClient, url: str) -> str | None:
    """
    GET the homepage and decode the body as ASCII (non-ASCII bytes become U+FFFD).

    Returns ``None`` when the fetch failed. Markers are pure ASCII, so detection
    is unaffected by the lossy decode.
    """
    response = http_client.request(HttpRequest(url=url, method="GET"))
    if not response.ok:
        logger.debug(
            "Homepage fetch failed for %s: %s (%s)",
            url,
            response.error_message,
            response.error_type or response.status_code,
        )
        return None
    return response.content.decode("ascii", errors="replace")


def poll_homepage_until_marker(
    http_client: HttpClient,
    url: str,
    token: str,
    *,
    timeout: float = 120.0,
    interval: float = 1.0,
) -> str:
    """
    Fetch ``url`` until its body contains ``token`` and return that body.

    Between failed attempts the loop sleeps ``interval`` seconds, then checks the
    deadline (``timeout`` seconds after the first attempt). An attempt that
    starts just before the deadline is still allowed to complete. Raises
    ``PollTimeoutError`` once the deadline has passed.
    """
    deadline = time.monotonic() + timeout
    attempts = 0
    while True:
        attempts += 1
        html = fetch_homepage_text(http_client, url)
        if html is not None and token in html:
            logger.debug("Token %s found on %s after %d attempt(s)", token, url, attempts)
            return html
        time.sleep(interval)
        if time.monotonic() >= deadline:
            raise PollTimeoutError(url, token, timeout, attempts)


class HomepageProbe(ABC):
    """
    Probe that detects features from the rendered homepage.

    Subclasses prepare a blank post, then interpret the homepage once the
    post's title token shows up on it, or decide what a timeout means.
    """

    # Seconds to wait for the post to show up; None uses the run's poll timeout.
    timeout_duration: float | None = None
    clean_up_posts: bool = True

    @abstractmethod
    def prepare_post(self, post: BlogPost) -> bool | None:
        """Fill in ``post``; return an explicit publish flag or None for the default (publish)."""

    @abstractmethod
    def handle_result(self, homepage_html: str, results: ResultSink) -> None: ...

    def handle_timeout(self, error: PollTimeoutError, results: ResultSink) -> bool:
        """Return True when the timeout was handled; False lets it propagate."""
        return False

    def run(self, blog: BlogConfig, client: BlogClient, context: RunContext) -> ResultSink:
        return run_homepage_probe(self, blog, client, context)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}()"


def run_homepage_probe(
    probe: HomepageProbe,
    blog: BlogConfig,
    client: BlogClient,
    context: RunContext,
) -> ResultSink:
    require_blog_and_client(blog, client)
    results = ResultSink()

    post = BlogPost()
    publish = probe.prepare_post(post)
    token = stamp_title(post)

    post_id = publish_post(blog, client, post, publish)
    try:
        timeout = probe.timeout_duration if probe.timeout_duration is not None else context.poll_timeout
        try:
            html = poll_homepage_until_marker(
                context.http_client,
                blog.homepage_url,
                token,
                timeout=timeout,
                interval=context.poll_interval,
            )
        except PollTimeoutError as exc:
            logger.debug("%r: %s", probe, exc)
            if not probe.handle_timeout(exc, results):
                raise
        else:
            probe.handle_result(html, results)
    finally:
        clean_up_post(blog, client, post_id, context, enabled=probe.clean_up_posts)
    return results


__all__ = ["HomepageProbe", "fetch_homepage_text", "poll_homepage_until_marker", "run_homepage_probe"]
