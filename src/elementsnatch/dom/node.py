"""
DOM Node helpers - Element access over a BeautifulSoup tree.

bs4 Tags compare by structure, so everything here works on object
identity. Two sibling <li> elements with the same markup are == but
never `is`.
"""

from collections.abc import Iterator

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString


def is_element(node: object) -> bool:
    """True for element nodes; the BeautifulSoup document object is not one."""
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)


def parent_element(node: Tag) -> Tag | None:
    """Parent element, or None at the top of the document."""
    parent = getattr(node, "parent", None)
    return parent if is_element(parent) else None


def element_children(node: Tag) -> Iterator[Tag]:
    """Child elements in document order."""
    for child in node.children:
        if is_element(child):
            yield child


def direct_text_nodes(node: Tag) -> Iterator[str]:
    """Direct (non-descendant) text children, excluding comments, CDATA and doctypes."""
    for child in node.children:
        if isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            yield str(child)


def tag_name(node: Tag) -> str:
    """Upper-cased tag name, matching DOM Element.tagName for HTML."""
    return (node.name or "").upper()


def element_id(node: Tag) -> str:
    value = node.get("id")
    if isinstance(value, list):
        value = " ".join(value)
    return value or ""


def class_list(node: Tag) -> list[str]:
    """Class names in declared order; empty entries dropped, duplicates kept."""
    value = node.get("class")
    if not value:
        return []
    if isinstance(value, str):
        value = value.split()
    return [c for c in value if c]


def index_of(chain: list[Tag], node: Tag) -> int:
    """Identity-based list.index; -1 when absent."""
    for i, item in enumerate(chain):
        if item is node:
            return i
    return -1


def sibling_position(node: Tag) -> int:
    """1-based position among the parent's element children."""
    position = 1
    sibling = node.previous_sibling
    while sibling is not None:
        if is_element(sibling):
            position += 1
        sibling = sibling.previous_sibling
    return position


def top_element(node: Tag) -> Tag:
    current = node
    while (parent := parent_element(current)) is not None:
        current = parent
    return current


def document_body(node: Tag) -> Tag:
    """The <body> of the node's document, else its top-most element."""
    top = top_element(node)
    if top.name == "body":
        return top
    body = top.find("body")
    return body if is_element(body) else top
