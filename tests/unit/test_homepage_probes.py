# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from blogrunner.errors import PollTimeoutError, RemoteApiError
from blogrunner.http import HttpResponse, StubHttpClient
from blogrunner.models import YES, BlogPost
from blogrunner.probes import CompositePostProbe, HomepageProbe, RunContext, poll_homepage_until_marker
from blogrunner.probes.homepage import fetch_homepage_text


class RecordingProbe(HomepageProbe):
    def __init__(self, key="seen", publish=None, handles_timeout=False, calls=None):
        self.key = key
        self.publish = publish
        self.handles_timeout = handles_timeout
        self.result_calls = []
        self.timeout_calls = []
        self.calls = calls if calls is not None else []

    def prepare_post(self, post):
        self.calls.append(("prepare", self.key))
        post.contents += f"[{self.key}]"
        return self.publish

    def handle_result(self, homepage_html, results):
        self.calls.append(("result", self.key))
        self.result_calls.append(homepage_html)
        results.add_result(self.key, YES)

    def handle_timeout(self, error, results):
        self.timeout_calls.append(error)
        if self.handles_timeout:
            results.add_result(self.key, "timeout")
        return self.handles_timeout


def test_poll_finds_token_after_three_misses(fake_clock):
    pages = iter(["<html></html>"] * 3 + ["<html>tok123</html>"])
    stub = StubHttpClient()
    stub.add_handler("http://blog.example/", lambda _request: HttpResponse.from_text(next(pages)))

    html = poll_homepage_until_marker(stub, "http://blog.example/", "tok123", timeout=120, interval=1)

    assert "tok123" in html
    assert len(stub.requests) == 4
    assert fake_clock.sleeps == [1, 1, 1]


def test_poll_times_out_after_deadline(fake_clock):
    stub = StubHttpClient({"http://blog.example/": HttpResponse.from_text("<html>nothing</html>")})

    with pytest.raises(PollTimeoutError) as excinfo:
        poll_homepage_until_marker(stub, "http://blog.example/", "tok123", timeout=3, interval=1)

    assert excinfo.value.attempts == 3
    assert excinfo.value.token == "tok123"
    assert isinstance(excinfo.value, TimeoutError)
    assert fake_clock.now == 3


def test_poll_treats_failed_fetches_as_misses(fake_clock):
    responses = iter([HttpResponse(ok=False, error_message="boom"), HttpResponse.from_text("tok123")])
    stub = StubHttpClient()
    stub.add_handler("http://blog.example/", lambda _request: next(responses))

    assert poll_homepage_until_marker(stub, "http://blog.example/", "tok123", timeout=10, interval=2) == "tok123"
    assert fake_clock.sleeps == [2]


def test_fetch_homepage_decodes_ascii_with_replacement():
    stub = StubHttpClient({"http://x/": HttpResponse(ok=True, status_code=200, content="café ok".encode("utf-8"))})
    text = fetch_homepage_text(stub, "http://x/")
    assert text.startswith("caf")
    assert text.endswith(" ok")
    assert "�" in text
    assert fetch_homepage_text(stub, "http://missing/") is None


def test_homepage_probe_publishes_then_reports_and_cleans_up(blog, fake_client, context, fake_clock):
    probe = RecordingProbe()
    results = probe.run(blog, fake_client, context)

    assert results.to_dict() == {"seen": YES}
    assert len(probe.result_calls) == 1
    assert probe.timeout_calls == []
    assert len(fake_client.created) == 1
    _, post, publish = fake_client.created[0]
    assert publish is True
    assert post.title.endswith(":")
    assert fake_client.deleted == [(post.id, False)]
    assert fake_clock.sleeps == []


def test_homepage_probe_unhandled_timeout_propagates_after_cleanup(blog, fake_client, context, fake_clock):
    probe = RecordingProbe(publish=False)

    with pytest.raises(PollTimeoutError):
        probe.run(blog, fake_client, context)

    assert len(probe.timeout_calls) == 1
    assert probe.result_calls == []
    assert len(fake_client.deleted) == 1
    assert fake_clock.now == context.poll_timeout


def test_homepage_probe_handled_timeout_records_result(blog, fake_client, context, fake_clock):  # noqa: ARG001
    probe = RecordingProbe(publish=False, handles_timeout=True)
    results = probe.run(blog, fake_client, context)
    assert results.to_dict() == {"seen": "timeout"}
    assert len(probe.timeout_calls) == 1


def test_timeout_duration_overrides_run_timeout(blog, fake_client, context, fake_clock):
    probe = RecordingProbe(publish=False, handles_timeout=True)
    probe.timeout_duration = 2
    probe.run(blog, fake_client, context)
    assert probe.timeout_calls[0].attempts == 2
    assert fake_clock.now == 2


def test_cleanup_disabled_in_context_keeps_post(blog, fake_client, homepage, fake_clock):  # noqa: ARG001
    context = RunContext(http_client=homepage, clean_up_posts=False)
    RecordingProbe().run(blog, fake_client, context)
    assert fake_client.deleted == []
    assert len(fake_client.posts) == 1


def test_cleanup_disabled_on_probe_keeps_post(blog, fake_client, context, fake_clock):  # noqa: ARG001
    probe = RecordingProbe()
    probe.clean_up_posts = False
    probe.run(blog, fake_client, context)
    assert fake_client.deleted == []


def test_publish_failure_propagates_without_polling(blog, fake_client, context, homepage):
    fake_client.fail_on.add("create_post")
    with pytest.raises(RemoteApiError):
        RecordingProbe().run(blog, fake_client, context)
    assert homepage.requests == []


def test_missing_blog_or_client_raises_value_error(blog, fake_client, context):
    with pytest.raises(ValueError):
        RecordingProbe().run(None, fake_client, context)
    with pytest.raises(ValueError):
        RecordingProbe().run(blog, None, context)


def test_composite_runs_children_in_order_on_one_post(blog, fake_client, context, fake_clock):  # noqa: ARG001
    calls = []
    first, second, third = (RecordingProbe(key, calls=calls) for key in ("a", "b", "c"))
    composite = CompositePostProbe([first, second, third])

    results = composite.run(blog, fake_client, context)

    assert len(fake_client.created) == 1
    assert fake_client.created[0][1].contents == "[a][b][c]"
    assert calls == [
        ("prepare", "a"),
        ("prepare", "b"),
        ("prepare", "c"),
        ("result", "a"),
        ("result", "b"),
        ("result", "c"),
    ]
    assert results.to_dict() == {"a": YES, "b": YES, "c": YES}
    assert first.result_calls == second.result_calls == third.result_calls
    assert len(composite) == 3


def test_composite_publish_intent_last_explicit_value_wins():
    composite = CompositePostProbe([RecordingProbe("a", publish=False), RecordingProbe("b")])
    assert composite.prepare_post(BlogPost()) is False

    composite = CompositePostProbe([RecordingProbe("a", publish=False), RecordingProbe("b", publish=True)])
    assert composite.prepare_post(BlogPost()) is True

    composite = CompositePostProbe([RecordingProbe("a"), RecordingProbe("b")])
    assert composite.prepare_post(BlogPost()) is None


def test_composite_child_failure_aborts_remaining_children(blog, fake_client, context, fake_clock):  # noqa: ARG001
    class Exploding(RecordingProbe):
        def handle_result(self, homepage_html, results):
            raise RuntimeError("child failed")

    last = RecordingProbe("z")
    composite = CompositePostProbe([RecordingProbe("a"), Exploding("b"), last])

    with pytest.raises(RuntimeError):
        composite.run(blog, fake_client, context)
    assert last.result_calls == []
    assert len(fake_client.deleted) == 1
