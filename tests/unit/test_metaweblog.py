# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

import http.client
import io
import xmlrpc.client
from datetime import datetime

import pytest

from blogrunner.blogclient import (
    BlogCredentials,
    MetaWeblogClient,
    WordPressClient,
    create_blog_client,
    register_client_type,
)
from blogrunner.blogclient import registry
from blogrunner.blogclient.metaweblog import APP_KEY
from blogrunner.errors import ConfigError, RemoteApiError
from blogrunner.models import NO, BlogPost, BlogPostCategory
from blogrunner.probes.features import SupportsEmptyTitlesProbe


class FakeMethod:
    def __init__(self, proxy, name):
        self._proxy = proxy
        self._name = name

    def __getattr__(self, part):
        return FakeMethod(self._proxy, f"{self._name}.{part}")

    def __call__(self, *params):
        self._proxy.calls.append((self._name, params))
        result = self._proxy.results.get(self._name)
        if isinstance(result, Exception):
            raise result
        return result


class FakeProxy:
    def __init__(self, **results):
        self.results = {name.replace("_", "."): value for name, value in results.items()}
        self.calls = []

    def __getattr__(self, part):
        return FakeMethod(self, part)


CREDENTIALS = BlogCredentials("alice", "pw")


def test_create_post_sends_struct_and_publish_flag():
    proxy = FakeProxy(metaWeblog_newPost="17")
    client = MetaWeblogClient("http://x/xmlrpc", CREDENTIALS, "3", proxy=proxy)
    when = datetime(2030, 1, 2, 3, 4, 5)
    post = BlogPost(
        title="t",
        contents="c",
        categories=[BlogPostCategory("1", "News"), BlogPostCategory("2", "")],
        date_published_override=when,
    )

    post_id, created = client.create_post(None, post, False)

    assert post_id == "17"
    assert created.id == "17"
    name, params = proxy.calls[0]
    assert name == "metaWeblog.newPost"
    assert params[:3] == ("3", "alice", "pw")
    assert params[3] == {"title": "t", "description": "c", "categories": ["News", "2"], "dateCreated": when}
    assert params[4] is False


def test_fetch_post_parses_struct():
    proxy = FakeProxy(metaWeblog_getPost={"postid": 5, "title": "T", "description": "D", "categories": ["a", "b"]})
    post = MetaWeblogClient("http://x/", CREDENTIALS, proxy=proxy).fetch_post("1", "5")
    assert post.id == "5"
    assert post.title == "T"
    assert [category.name for category in post.categories] == ["a", "b"]


def test_fault_is_wrapped_as_remote_api_error():
    proxy = FakeProxy(metaWeblog_newPost=xmlrpc.client.Fault(4, "Title required"))
    client = MetaWeblogClient("http://x/", CREDENTIALS, proxy=proxy)
    with pytest.raises(RemoteApiError) as excinfo:
        client.create_post("1", BlogPost(), True)
    assert excinfo.value.method == "metaWeblog.newPost"
    assert "Title required" in str(excinfo.value)


def test_transport_errors_are_wrapped():
    proxy = FakeProxy(blogger_getUsersBlogs=ConnectionRefusedError("refused"))
    with pytest.raises(RemoteApiError):
        MetaWeblogClient("http://x/", CREDENTIALS, proxy=proxy).list_my_blogs()


def test_list_blogs_and_categories():
    proxy = FakeProxy(
        blogger_getUsersBlogs=[{"blogid": "9", "blogName": "Mine", "url": "http://mine/"}],
        metaWeblog_getCategories=[{"categoryId": "1", "title": "News"}, {"description": "Tech"}],
    )
    client = MetaWeblogClient("http://x/", CREDENTIALS, "9", proxy=proxy)

    blogs = client.list_my_blogs()
    assert blogs[0].id == "9"
    assert blogs[0].homepage_url == "http://mine/"
    assert proxy.calls[0] == ("blogger.getUsersBlogs", (APP_KEY, "alice", "pw"))

    categories = client.list_categories(None)
    assert categories == [BlogPostCategory("1", "News"), BlogPostCategory("Tech", "Tech")]


def test_delete_post_and_wordpress_pages():
    proxy = FakeProxy()
    MetaWeblogClient("http://x/", CREDENTIALS, proxy=proxy).delete_post("1", "5", is_page=True)
    assert proxy.calls[-1] == ("blogger.deletePost", (APP_KEY, "5", "alice", "pw", True))

    WordPressClient("http://x/", CREDENTIALS, proxy=proxy).delete_post("1", "6", is_page=True)
    assert proxy.calls[-1] == ("wp.deletePage", ("1", "alice", "pw", "6"))


def test_client_registry(monkeypatch):
    monkeypatch.setattr(registry, "CLIENT_TYPES", dict(registry.CLIENT_TYPES))
    client = create_blog_client(" WordPress ", "http://x/", CREDENTIALS, "2")
    assert isinstance(client, WordPressClient)
    assert client.blog_id == "2"
    assert type(create_blog_client("MovableType", "http://x/", CREDENTIALS)) is MetaWeblogClient

    with pytest.raises(ConfigError):
        create_blog_client("LiveSpaces", "http://x/", CREDENTIALS)

    register_client_type("Custom", lambda api_url, credentials, blog_id: ("custom", api_url, blog_id))
    assert create_blog_client("custom", "http://y/", CREDENTIALS) == ("custom", "http://y/", None)


def test_credentials_repr_masks_password():
    assert "pw" not in repr(CREDENTIALS)


class CannedTransport(xmlrpc.client.Transport):
    """Answers every call with a fixed body, parsed the way a real response would be."""

    def __init__(self, body):
        super().__init__()
        self.body = body

    def request(self, host, handler, request_body, verbose=False):  # noqa: ARG002
        self.verbose = verbose
        return self.parse_response(io.BytesIO(self.body))


def _html_error_page_client():
    proxy = xmlrpc.client.ServerProxy(
        "http://blog.example/xmlrpc.php",
        transport=CannedTransport(b"<html><body><p>Error<br></body></html>"),
    )
    return MetaWeblogClient("http://blog.example/xmlrpc.php", CREDENTIALS, "1", proxy=proxy)


def test_non_xml_response_is_wrapped():
    with pytest.raises(RemoteApiError) as excinfo:
        _html_error_page_client().create_post("1", BlogPost(title="t"), True)
    assert excinfo.value.method == "metaWeblog.newPost"
    assert "malformed response" in str(excinfo.value)


def test_http_layer_errors_are_wrapped():
    proxy = FakeProxy(metaWeblog_getPost=http.client.IncompleteRead(b"<?xml"))
    with pytest.raises(RemoteApiError):
        MetaWeblogClient("http://x/", CREDENTIALS, proxy=proxy).fetch_post("1", "5")


def test_empty_titles_records_no_when_server_answers_garbage(blog, context):
    results = SupportsEmptyTitlesProbe().run(blog, _html_error_page_client(), context)
    assert results.to_dict() == {"supportsEmptyTitles": NO}
