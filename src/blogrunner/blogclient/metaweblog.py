# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""MetaWeblog / WordPress XML-RPC adapter for the BlogClient protocol."""

from __future__ import annotations

import http.client
import logging
import xmlrpc.client
from datetime import datetime
from typing import Any
from xml.parsers.expat import ExpatError

from ..errors import RemoteApiError
from ..models import BlogPost, BlogPostCategory, BlogSummary
from .client import BlogClient, BlogCredentials

logger = logging.getLogger(__name__)

# blogger.* calls require an application key; servers ignore its value.
APP_KEY = "0123456789ABCDEF"


class MetaWeblogClient(BlogClient):
    """Maps BlogClient calls onto the metaWeblog.* and blogger.* XML-RPC methods."""

    def __init__(
        self,
        api_url: str,
        credentials: BlogCredentials,
        blog_id: str | None = None,
        *,
        proxy: Any = None,
    ):
        self.api_url = api_url
        self.credentials = credentials
        self.blog_id = blog_id
        self._proxy = proxy

    def _server(self) -> Any:
        if self._proxy is None:
            self._proxy = xmlrpc.client.ServerProxy(self.api_url, allow_none=True, use_builtin_types=True)
        return self._proxy

    def _call(self, method: str, *params: Any) -> Any:
        logger.debug("XML-RPC %s -> %s", method, self.api_url)
        target = self._server()
        for part in method.split("."):
            target = getattr(target, part)
        try:
            return target(*params)
        except xmlrpc.client.Fault as exc:
            raise RemoteApiError(method, f"fault {exc.faultCode}: {exc.faultString}") from exc
        except (xmlrpc.client.ProtocolError, OSError) as exc:
            raise RemoteApiError(method, str(exc)) from exc
        except (xmlrpc.client.ResponseError, ExpatError, http.client.HTTPException) as exc:
            raise RemoteApiError(method, f"malformed response: {exc}") from exc

    def _blog_id(self, blog_id: str | None) -> str:
        return blog_id if blog_id is not None else (self.blog_id or "")

    def _post_struct(self, post: BlogPost) -> dict[str, Any]:
        struct: dict[str, Any] = {"title": post.title, "description": post.contents}
        if post.categories:
            struct["categories"] = [category.name or category.id for category in post.categories]
        if post.date_published_override is not None:
            struct["dateCreated"] = post.date_published_override
        return struct

    @staticmethod
    def _parse_post(data: Any, post_id: str) -> BlogPost:
        if not isinstance(data, dict):
            raise RemoteApiError("metaWeblog.getPost", f"unexpected response type {type(data).__name__}")
        created = data.get("dateCreated")
        return BlogPost(
            id=str(data.get("postid") or post_id),
            title=str(data.get("title") or ""),
            contents=str(data.get("description") or ""),
            categories=[BlogPostCategory(id=str(name), name=str(name)) for name in data.get("categories") or []],
            date_published_override=created if isinstance(created, datetime) else None,
        )

    def create_post(self, blog_id: str | None, post: BlogPost, publish: bool) -> tuple[str | None, BlogPost]:
        post_id = self._call(
            "metaWeblog.newPost",
            self._blog_id(blog_id),
            self.credentials.username,
            self.credentials.password,
            self._post_struct(post),
            publish,
        )
        post_id = str(post_id) if post_id not in (None, "") else None
        return post_id, BlogPost(
            id=post_id,
            title=post.title,
            contents=post.contents,
            categories=list(post.categories),
            date_published_override=post.date_published_override,
        )

    def fetch_post(self, blog_id: str | None, post_id: str) -> BlogPost:
        data = self._call("metaWeblog.getPost", post_id, self.credentials.username, self.credentials.password)
        return self._parse_post(data, post_id)

    def delete_post(self, blog_id: str | None, post_id: str, is_page: bool = False) -> None:
        self._call(
            "blogger.deletePost",
            APP_KEY,
            post_id,
            self.credentials.username,
            self.credentials.password,
            True,
        )

    def list_categories(self, blog_id: str | None) -> list[BlogPostCategory]:
        data = self._call(
            "metaWeblog.getCategories",
            self._blog_id(blog_id),
            self.credentials.username,
            self.credentials.password,
        )
        categories: list[BlogPostCategory] = []
        for item in data or []:
            if isinstance(item, dict):
                name = str(item.get("title") or item.get("description") or item.get("categoryName") or "")
                category_id = str(item.get("categoryId") or name)
                categories.append(BlogPostCategory(id=category_id, name=name))
            else:
                categories.append(BlogPostCategory(id=str(item), name=str(item)))
        return categories

    def list_my_blogs(self) -> list[BlogSummary]:
        data = self._call("blogger.getUsersBlogs", APP_KEY, self.credentials.username, self.credentials.password)
        return [
            BlogSummary(
                id=str(item.get("blogid") or ""),
                name=str(item.get("blogName") or ""),
                homepage_url=str(item.get("url") or ""),
            )
            for item in data or []
            if isinstance(item, dict)
        ]


class WordPressClient(MetaWeblogClient):
    """MetaWeblog plus the wp.* page calls."""

    def delete_post(self, blog_id: str | None, post_id: str, is_page: bool = False) -> None:
        if not is_page:
            super().delete_post(blog_id, post_id, is_page)
            return
        self._call(
            "wp.deletePage",
            self._blog_id(blog_id),
            self.credentials.username,
            self.credentials.password,
            post_id,
        )


__all__ = ["APP_KEY", "MetaWeblogClient", "WordPressClient"]
