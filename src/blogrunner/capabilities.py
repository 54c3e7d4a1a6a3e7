# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
The provider capability document.

Layout: ``/providers/provider`` elements with ``id``, ``name``, ``clientType``
and an ``options`` element whose children are feature keys. A feature element
carrying the ``readonly`` attribute in the BlogRunner namespace was verified by
hand and is never overwritten by a merge.

``CapabilityDocument`` owns its tree. ``merge`` never touches the receiver; it
returns a new document, so a caller holding the previous one can diff them.
"""

from __future__ import annotations

import copy
import logging
import os
from collections.abc import Iterator, Mapping

from lxml import etree

from .errors import ConfigError
from .models import ResultSink

logger = logging.getLogger(__name__)

BLOGRUNNER_NS = "http://writer.live.com/blogrunner/2007"
READONLY_ATTR = f"{{{BLOGRUNNER_NS}}}readonly"


def _parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, remove_blank_text=True)


def _child_text(element: etree._Element, name: str) -> str | None:
    child = element.find(name)
    if child is None or child.text is None:
        return None
    return child.text.strip()


class CapabilityDocument:
    def __init__(self, root: etree._Element):
        if root.tag != "providers":
            raise ConfigError(f"Expected <providers> root element, found <{root.tag}>")
        self._root = root

    @classmethod
    def parse(cls, data: bytes | str) -> CapabilityDocument:
        if isinstance(data, str):
            data = data.encode("utf-8")
        try:
            root = etree.fromstring(data, _parser())
        except etree.XMLSyntaxError as exc:
            raise ConfigError(f"Malformed provider document: {exc}") from exc
        return cls(root)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> CapabilityDocument:
        try:
            tree = etree.parse(os.fspath(path), _parser())
        except (OSError, etree.XMLSyntaxError) as exc:
            raise ConfigError(f"Cannot read provider document {os.fspath(path)}: {exc}") from exc
        return cls(tree.getroot())

    @property
    def root(self) -> etree._Element:
        return self._root

    def _providers(self) -> Iterator[etree._Element]:
        return iter(self._root.findall("provider"))

    def provider_ids(self) -> list[str]:
        return [pid for pid in (_child_text(el, "id") for el in self._providers()) if pid]

    def find_provider(self, provider_id: str) -> etree._Element | None:
        matches = self._root.xpath("provider[normalize-space(id) = $pid]", pid=provider_id)
        return matches[0] if matches else None

    def _require_provider(self, provider_id: str) -> etree._Element:
        provider = self.find_provider(provider_id)
        if provider is None:
            raise ConfigError(f"Unknown provider ID: {provider_id}")
        return provider

    def provider_name(self, provider_id: str) -> str | None:
        return _child_text(self._require_provider(provider_id), "name")

    def client_type(self, provider_id: str) -> str | None:
        return _child_text(self._require_provider(provider_id), "clientType")

    def options(self, provider_id: str) -> dict[str, str]:
        options_el = self._require_provider(provider_id).find("options")
        if options_el is None:
            return {}
        return {
            el.tag: (el.text or "")
            for el in options_el
            if isinstance(el.tag, str)
        }

    def option(self, provider_id: str, key: str) -> str | None:
        return self.options(provider_id).get(key)

    def is_read_only(self, provider_id: str, key: str) -> bool:
        options_el = self._require_provider(provider_id).find("options")
        if options_el is None:
            return False
        el = options_el.find(key)
        return el is not None and el.get(READONLY_ATTR) is not None

    def merge(self, provider_id: str, results: ResultSink | Mapping[str, str]) -> CapabilityDocument:
        """
        Return a copy with each result written to ``options/<key>`` of the provider.

        Missing ``options``/feature elements are created; read-only features keep
        their value. Merging the same results twice yields the same document.
        """
        merged = CapabilityDocument(copy.deepcopy(self._root))
        provider = merged._require_provider(provider_id)
        if isinstance(results, ResultSink):
            items = results.items()
        else:
            items = sorted(results.items(), key=lambda kv: kv[0].casefold())

        options_el = provider.find("options")
        if options_el is None:
            options_el = etree.SubElement(provider, "options")

        for key, value in items:
            el = options_el.find(key)
            if el is None:
                el = etree.SubElement(options_el, key)
            if el.get(READONLY_ATTR) is not None:
                logger.info("Keeping read-only %s/%s = %r (probe said %r)", provider_id, key, el.text, value)
                continue
            el.text = value
        return merged

    def to_bytes(self) -> bytes:
        root = copy.deepcopy(self._root)
        etree.indent(root, space="\t")
        return etree.tostring(root, xml_declaration=True, encoding="utf-8", pretty_print=True)

    def write(self, path: str | os.PathLike[str]) -> None:
        with open(path, "wb") as fh:
            fh.write(self.to_bytes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CapabilityDocument):
            return NotImplemented
        return etree.tostring(self._root, method="c14n") == etree.tostring(other._root, method="c14n")

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"CapabilityDocument(providers={self.provider_ids()!r})"


__all__ = ["BLOGRUNNER_NS", "READONLY_ATTR", "CapabilityDocument"]
