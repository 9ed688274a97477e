"""
Ancestor Menu - Pick an ancestor of a target element.

Lists the target's ancestors from <body> down to the target itself.
Choosing an item either copies selector paths from that ancestor to the
target ("path" mode) or serializes the ancestor's whole subtree ("css"
mode).
"""

import logging

from bs4 import Tag
from pydantic import BaseModel, ConfigDict, Field

from elementsnatch.config import LABEL_MAX_CLASSES, MenuMode
from elementsnatch.dom.ancestry import build_ancestry
from elementsnatch.dom.node import document_body, is_element
from elementsnatch.dom.options import SerializeOptions
from elementsnatch.dom.paths import paths_between
from elementsnatch.dom.selector import label_for, selector_for
from elementsnatch.dom.serializer import DOMSerializer
from elementsnatch.highlight import Highlighter

logger = logging.getLogger(__name__)

MENU_TITLES = {
    "path": "Copy selector path from ancestor to target",
    "css": "Copy nested CSS for ancestor subtree",
}


class MenuItem(BaseModel):
    """One selectable ancestor."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    index: int
    label: str
    title: str = ""
    element: Tag = Field(exclude=True)


class Menu(BaseModel):
    """Ancestor menu for one target element."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    mode: MenuMode
    title: str
    target: Tag = Field(exclude=True)
    items: list[MenuItem] = Field(default_factory=list)
    serialize_options: SerializeOptions = Field(default_factory=SerializeOptions)

    def item(self, index: int) -> MenuItem:
        """Item by index; negative indexes count from the target end."""
        return self.items[index]

    def hover(self, highlighter: Highlighter, index: int, on: bool = True) -> None:
        highlighter.highlight(self.item(index).element, on)

    def choose(self, index: int, highlighter: Highlighter | None = None) -> str:
        """
        Run the menu action for one item.

        Returns:
            Path text ("descendant\\nchild\\n") in path mode, nested CSS in css mode
        """
        if highlighter is not None:
            highlighter.clear()

        element = self.item(index).element
        if self.mode == "path":
            return paths_between(element, self.target, self.serialize_options).to_clipboard_text()
        return DOMSerializer(self.serialize_options).serialize(element).text


def build_menu(
    target: Tag,
    mode: MenuMode = "path",
    options: SerializeOptions | None = None,
    stop_at: Tag | None = None,
) -> Menu | None:
    """
    Build the ancestor menu for a target element.

    Args:
        target: Element the user picked
        mode: "path" or "css"
        options: Options used for item previews and the chosen action
        stop_at: Top of the menu; defaults to the document <body>

    Returns:
        Menu, or None when target is not an element
    """
    if not is_element(target):
        return None

    opts = options or SerializeOptions()
    chain = build_ancestry(target, stop_at if stop_at is not None else document_body(target))

    items = []
    for index, element in enumerate(chain):
        if mode == "path":
            pair = paths_between(element, target, opts)
            title = pair.descendant + "\n" + pair.child
        else:
            title = selector_for(element, opts)
        items.append(
            MenuItem(
                index=index,
                label=label_for(element, LABEL_MAX_CLASSES, True),
                title=title,
                element=element,
            )
        )

    logger.debug(f"Menu ({mode}): {len(items)} ancestors")
    return Menu(
        mode=mode,
        title=MENU_TITLES[mode],
        target=target,
        items=items,
        serialize_options=opts,
    )

