"""
DOM Service - Document loading and element lookup for Elementsnatch.

Wraps a parsed BeautifulSoup document and exposes the selector,
path and serialization operations against it.
"""

import logging
from pathlib import Path

from bs4 import BeautifulSoup, FeatureNotFound, Tag
from soupsieve import SelectorSyntaxError

from elementsnatch.config import DEFAULT_PARSER
from elementsnatch.dom.ancestry import build_ancestry
from elementsnatch.dom.node import document_body, is_element
from elementsnatch.dom.options import SelectorOptions, SerializeOptions
from elementsnatch.dom.paths import PathPair, paths_between
from elementsnatch.dom.serializer import DOMSerializer, SerializedTree
from elementsnatch.exceptions import DocumentError

logger = logging.getLogger(__name__)


class DomService:
    """
    Parsed document plus the operations the CLI and menu need.

    Usage:
        service = DomService.from_file("page.html")
        target = service.select(".tab-header-group")
        pair = service.paths(service.select(".tab-header"), target)
    """

    def __init__(self, document: BeautifulSoup):
        self._document = document

    @classmethod
    def from_html(cls, html: str, parser: str = DEFAULT_PARSER) -> "DomService":
        try:
            document = BeautifulSoup(html, parser)
        except FeatureNotFound as e:
            raise DocumentError(f"Cannot parse document with {parser!r}: {e}") from e
        return cls(document)

    @classmethod
    def from_file(cls, path: str | Path, parser: str = DEFAULT_PARSER) -> "DomService":
        path = Path(path)
        try:
            html = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise DocumentError(f"Cannot read {path}: {e}") from e
        logger.debug(f"Loaded {path} ({len(html)} chars)")
        return cls.from_html(html, parser)

    @property
    def document(self) -> BeautifulSoup:
        return self._document

    @property
    def body(self) -> Tag:
        """The document <body>, or its first top-level element."""
        first = self._document.find(True)
        if not is_element(first):
            raise DocumentError("Document contains no elements")
        return document_body(first)

    def select(self, selector: str) -> Tag:
        """
        First element matching a CSS selector.

        Raises:
            DocumentError: if the selector is invalid or matches nothing
        """
        try:
            node = self._document.select_one(selector)
        except SelectorSyntaxError as e:
            raise DocumentError(f"Invalid selector {selector!r}: {e}") from e
        if node is None:
            raise DocumentError(f"No element matches {selector!r}")
        return node

    def ancestry(self, target: Tag) -> list[Tag]:
        """Ancestors of target from <body> down to target."""
        return build_ancestry(target, self.body)

    def paths(
        self,
        ancestor: Tag,
        target: Tag,
        options: SelectorOptions | None = None,
    ) -> PathPair:
        return paths_between(ancestor, target, options)

    def serialize(self, root: Tag, options: SerializeOptions | None = None) -> SerializedTree:
        return DOMSerializer(options).serialize(root)
