"""
Elementsnatch - CSS selector paths and nested CSS from HTML documents.

Picks an element, walks its ancestors, and synthesizes either the
selector paths between an ancestor and the element, or a nested,
deduplicated CSS-like serialization of a whole subtree.

Usage:
    from elementsnatch import DomService, SerializeOptions

    service = DomService.from_file("page.html")
    target = service.select(".vertical-tab-header-group")
    ancestor = service.select(".vertical-tab-header")

    pair = service.paths(ancestor, target)
    print(pair.descendant)  # .vertical-tab-header .vertical-tab-header-group
    print(pair.child)       # .vertical-tab-header > .vertical-tab-header-group

    tree = service.serialize(ancestor, SerializeOptions(max_nodes=500))
    print(tree.text)
"""

__version__ = "0.1.0"

from elementsnatch.clipboard import Noticer, copy_text
from elementsnatch.dom import (
    DomService,
    DOMSerializer,
    PathPair,
    SelectorOptions,
    SerializedTree,
    SerializeOptions,
    build_ancestry,
    paths_between,
    selector_for,
    serialize,
)
from elementsnatch.highlight import Highlighter
from elementsnatch.logging import logger, setup_logging
from elementsnatch.menu import Menu, MenuItem, build_menu

__all__ = [
    "__version__",
    "DomService",
    "DOMSerializer",
    "SerializedTree",
    "SelectorOptions",
    "SerializeOptions",
    "PathPair",
    "build_ancestry",
    "paths_between",
    "selector_for",
    "serialize",
    "Menu",
    "MenuItem",
    "build_menu",
    "Highlighter",
    "Noticer",
    "copy_text",
    "setup_logging",
    "logger",
]
