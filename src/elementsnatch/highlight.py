"""
Highlighter - Visual emphasis for elements in a parsed document.

Boosts an element's contrast through its inline `filter` style and marks
it with an overlay attribute. Previous inline styles are kept in a mapping
owned by the highlighter, keyed by element identity; nothing is stored on
the element itself.
"""

import logging
import re

from bs4 import Tag

from elementsnatch.dom.node import is_element

logger = logging.getLogger(__name__)

CONTRAST_FILTER = "contrast(1.25)"
OVERLAY_ATTRIBUTE = "data-esc-hi"

_FILTER_DECL = re.compile(r"(?:^|;)\s*filter\s*:\s*([^;]*)", re.IGNORECASE)


def _inline_filter(style: str) -> str:
    match = _FILTER_DECL.search(style)
    return match.group(1).strip() if match else ""


def _with_filter(style: str, value: str) -> str:
    declarations = [
        decl.strip()
        for decl in style.split(";")
        if decl.strip() and not decl.strip().lower().startswith("filter")
    ]
    declarations.append(f"filter: {value}")
    return "; ".join(declarations)


class Highlighter:
    """
    Applies and restores element highlights.

    Usage:
        hi = Highlighter()
        hi.highlight(el, True)
        ...
        hi.clear()
    """

    def __init__(self):
        # id(element) -> (element, previous style attribute or None)
        self._saved: dict[int, tuple[Tag, str | None]] = {}
        self._target: Tag | None = None

    @property
    def target(self) -> Tag | None:
        """Element currently covered by the overlay marker."""
        return self._target

    def is_highlighted(self, el: Tag) -> bool:
        return id(el) in self._saved

    def highlight(self, el: Tag, on: bool) -> None:
        """Turn the highlight for one element on or off."""
        if not is_element(el):
            return

        if on:
            self.mark_overlay(el)
            if id(el) not in self._saved:
                self._saved[id(el)] = (el, el.get("style"))
            style = el.get("style") or ""
            current = _inline_filter(style)
            if "contrast(" not in current:
                value = f"{current} {CONTRAST_FILTER}" if current else CONTRAST_FILTER
                el["style"] = _with_filter(style, value)
            return

        if self._target is el:
            el.attrs.pop(OVERLAY_ATTRIBUTE, None)
            self._target = None

        saved = self._saved.pop(id(el), None)
        if saved is not None:
            _, previous = saved
            if previous is None:
                el.attrs.pop("style", None)
            else:
                el["style"] = previous

    def mark_overlay(self, el: Tag) -> None:
        """Move the overlay marker to `el`."""
        if self._target is not None and self._target is not el:
            self._target.attrs.pop(OVERLAY_ATTRIBUTE, None)
        el[OVERLAY_ATTRIBUTE] = "true"
        self._target = el

    def clear(self) -> None:
        """Restore every highlighted element and drop the overlay."""
        for el, _ in list(self._saved.values()):
            self.highlight(el, False)
        if self._target is not None:
            self._target.attrs.pop(OVERLAY_ATTRIBUTE, None)
            self._target = None
        logger.debug("Highlights cleared")
