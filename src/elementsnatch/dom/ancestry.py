"""
Ancestry Walker - Element chains from a boundary down to a node.
"""

from bs4 import Tag

from elementsnatch.config import ANCESTRY_GUARD
from elementsnatch.dom.node import is_element, parent_element


def build_ancestry(
    node: Tag | None,
    stop_at: Tag | None = None,
    guard: int = ANCESTRY_GUARD,
) -> list[Tag]:
    """
    Build the ancestry chain for a node, boundary first.

    Walks parent references until `stop_at` (inclusive) or the top of the
    document, whichever comes first.

    Args:
        node: Element to start from
        stop_at: Boundary element; None walks to the top element
        guard: Hard iteration ceiling

    Returns:
        Elements ordered boundary -> ... -> node, or [] if node is not an element
    """
    chain: list[Tag] = []
    current = node
    steps = 0
    while current is not None and is_element(current) and steps < guard:
        steps += 1
        chain.append(current)
        if current is stop_at:
            break
        current = parent_element(current)
    chain.reverse()
    return chain
