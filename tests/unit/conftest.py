# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

import copy
import html
from datetime import datetime

import pytest

from blogrunner.errors import RemoteApiError
from blogrunner.http import HttpResponse, StubHttpClient
from blogrunner.models import BlogConfig, BlogPostCategory
from blogrunner.probes import RunContext
from blogrunner.probes import homepage as homepage_module


def escape_once(text):
    return html.escape(text, quote=False)


class FakeBlogClient:
    """In-memory blog: keeps created posts and renders the published ones as a homepage."""

    def __init__(self, categories=None, blogs=None):
        self.posts = {}
        self.created = []
        self.deleted = []
        self.categories = list(categories or [])
        self.blogs = list(blogs or [])
        self.fail_on = set()
        self.reject_empty_titles = False
        self.keep_categories = None
        self.show_drafts = False
        self.honor_publish_dates = False
        self.title_filter = escape_once
        self.body_filter = lambda body: body
        self._next_id = 0

    def _maybe_fail(self, method):
        if method in self.fail_on:
            raise RemoteApiError(method, "simulated failure")

    def create_post(self, blog_id, post, publish):
        self._maybe_fail("create_post")
        if self.reject_empty_titles and not post.title:
            raise RemoteApiError("create_post", "title is required")
        self._next_id += 1
        post_id = str(self._next_id)
        stored = copy.deepcopy(post)
        stored.id = post_id
        self.posts[post_id] = (stored, publish)
        self.created.append((blog_id, stored, publish))
        return post_id, stored

    def fetch_post(self, blog_id, post_id):  # noqa: ARG002
        self._maybe_fail("fetch_post")
        stored = copy.deepcopy(self.posts[post_id][0])
        if self.keep_categories is not None:
            stored.categories = stored.categories[: self.keep_categories]
        return stored

    def delete_post(self, blog_id, post_id, is_page=False):  # noqa: ARG002
        self._maybe_fail("delete_post")
        self.deleted.append((post_id, is_page))
        self.posts.pop(post_id, None)

    def list_categories(self, blog_id):  # noqa: ARG002
        return list(self.categories)

    def list_my_blogs(self):
        return list(self.blogs)

    def render_homepage(self):
        parts = ["<html><head><title>Test blog</title></head><body>"]
        for post, publish in self.posts.values():
            if not publish and not self.show_drafts:
                continue
            scheduled = post.date_published_override
            if self.honor_publish_dates and scheduled is not None and scheduled > datetime.now():
                continue
            parts.append(
                f'<div class="post"><h2>{self.title_filter(post.title)}</h2>\n'
                f'<div class="entry">{self.body_filter(post.contents)}</div></div>'
            )
        parts.append("</body></html>")
        return "\n".join(parts)


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def monotonic(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def blog():
    return BlogConfig(
        homepage_url="http://blog.example/",
        api_url="http://blog.example/xmlrpc.php",
        username="tester",
        password="secret",
        blog_id="1",
    )


@pytest.fixture
def fake_client():
    return FakeBlogClient(
        categories=[
            BlogPostCategory(id="1", name="News"),
            BlogPostCategory(id="2", name="Tech"),
            BlogPostCategory(id="3", name="Misc"),
        ]
    )


@pytest.fixture
def homepage(fake_client, blog):
    stub = StubHttpClient()
    stub.add_handler(blog.homepage_url, lambda _request: HttpResponse.from_text(fake_client.render_homepage()))
    return stub


@pytest.fixture
def context(homepage):
    return RunContext(http_client=homepage, poll_timeout=5.0, poll_interval=1.0)


@pytest.fixture
def fake_clock(monkeypatch):
    clock = FakeClock()
    monkeypatch.setattr(homepage_module, "time", clock)
    return clock


@pytest.fixture
def fake_client_class():
    return FakeBlogClient
