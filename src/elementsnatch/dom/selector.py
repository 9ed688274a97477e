"""
Selector Builder - One CSS selector token per element.

Precedence: id, then the full class list, then tag name (or `*`),
optionally followed by an :nth-child() qualifier.
"""

import logging
import re

from bs4 import Tag

from elementsnatch.config import LABEL_MAX_CLASSES
from elementsnatch.dom.node import (
    class_list,
    element_id,
    is_element,
    parent_element,
    sibling_position,
)
from elementsnatch.dom.options import SelectorOptions

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9_-]")

DEFAULT_SELECTOR_OPTIONS = SelectorOptions()


def _hex_escape(value: str) -> str:
    return _UNSAFE_CHARS.sub(lambda m: "\\" + format(ord(m.group(0)), "x") + " ", value)


def _cssom_escape(value: str) -> str:
    """CSSOM "serialize an identifier", the algorithm behind CSS.escape()."""
    out = []
    length = len(value)
    first = value[0] if value else ""
    for i, ch in enumerate(value):
        code = ord(ch)
        if code == 0:
            out.append("\ufffd")
        elif 0x01 <= code <= 0x1F or code == 0x7F:
            out.append("\\" + format(code, "x") + " ")
        elif i == 0 and 0x30 <= code <= 0x39:
            out.append("\\" + format(code, "x") + " ")
        elif i == 1 and 0x30 <= code <= 0x39 and first == "-":
            out.append("\\" + format(code, "x") + " ")
        elif i == 0 and ch == "-" and length == 1:
            out.append("\\" + ch)
        elif code >= 0x80 or ch in "-_" or ch.isascii() and ch.isalnum():
            out.append(ch)
        else:
            out.append("\\" + ch)
    return "".join(out)


_ESCAPERS = {
    "cssom": _cssom_escape,
    "hex": _hex_escape,
}


def css_escape(value: str, mode: str = "cssom") -> str:
    """
    Escape an identifier for use in a selector.

    Unknown modes fall back to the hex escaper, which rewrites every
    character outside [A-Za-z0-9_-] as backslash + lowercase hex + space.
    """
    escaper = _ESCAPERS.get(mode)
    if escaper is None:
        logger.debug(f"Unknown escape mode {mode!r}, using hex fallback")
        escaper = _hex_escape
    return escaper(str(value))


def selector_for(node: Tag, options: SelectorOptions | None = None) -> str:
    """Build the selector token for a single element."""
    opts = options or DEFAULT_SELECTOR_OPTIONS

    if not is_element(node):
        return "*"

    sel = ""
    node_id = element_id(node)
    if opts.use_ids and node_id:
        sel = "#" + css_escape(node_id, opts.escape_mode)

    if not sel and opts.use_classes:
        classes = class_list(node)
        if classes:
            sel = "." + ".".join(css_escape(c, opts.escape_mode) for c in classes)

    if not sel:
        name = (node.name or "").lower()
        sel = name if opts.include_tag_if_no_classes and name else "*"

    if opts.include_nth_child and parent_element(node) is not None:
        sel += f":nth-child({sibling_position(node)})"

    return sel


def label_for(node: Tag, max_classes: int = LABEL_MAX_CLASSES, include_tag: bool = True) -> str:
    """Human-readable label: tag#id.class1.class2 [+N]."""
    name = (node.name or "").lower()
    tag = name if include_tag else ""
    node_id = element_id(node)
    classes = class_list(node)
    shown = classes[:max_classes]
    extra = len(classes) - len(shown)

    base = tag + ("#" + node_id if node_id else "") + ("." + ".".join(shown) if shown else "")
    more = f" [+{extra}]" if extra > 0 else ""
    return (base or name) + more
