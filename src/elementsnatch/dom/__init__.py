"""
Elementsnatch DOM Module.

Provides selector tokens, ancestor chains, selector paths and nested
subtree serialization over a BeautifulSoup tree.
"""

from elementsnatch.dom.ancestry import build_ancestry
from elementsnatch.dom.options import SelectorOptions, SerializeOptions
from elementsnatch.dom.paths import ChainResult, PathPair, paths_between, resolve_chain
from elementsnatch.dom.selector import css_escape, label_for, selector_for
from elementsnatch.dom.serializer import DOMSerializer, SerializedTree, serialize
from elementsnatch.dom.service import DomService

__all__ = [
    "DomService",
    "DOMSerializer",
    "SerializedTree",
    "SelectorOptions",
    "SerializeOptions",
    "PathPair",
    "ChainResult",
    "build_ancestry",
    "paths_between",
    "resolve_chain",
    "selector_for",
    "label_for",
    "css_escape",
    "serialize",
]
