"""
Path Synthesizer - Selector paths from an ancestor down to a target.

Produces the same token chain in two notations:
- descendant: ".a .b .c"
- child:      ".a > .b > .c"
"""

import logging
from typing import Literal

from bs4 import Tag
from pydantic import BaseModel, ConfigDict, Field

from elementsnatch.config import PATH_GUARD
from elementsnatch.dom.ancestry import build_ancestry
from elementsnatch.dom.node import document_body, index_of, is_element, parent_element
from elementsnatch.dom.options import SelectorOptions
from elementsnatch.dom.selector import selector_for

logger = logging.getLogger(__name__)

ChainStatus = Literal["found", "reconstructed", "not_found"]


class PathPair(BaseModel):
    """Descendant and child selector paths for one ancestor -> target pair."""

    descendant: str = ""
    child: str = ""

    @property
    def token_count(self) -> int:
        if not self.descendant:
            return 0
        return len(self.child.split(" > "))

    def to_clipboard_text(self) -> str:
        return self.descendant + "\n" + self.child + "\n"


class ChainResult(BaseModel):
    """Ancestor-first element chain and how it was obtained."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: ChainStatus
    chain: list[Tag] = Field(default_factory=list)


def resolve_chain(ancestor: Tag, target: Tag, guard: int = PATH_GUARD) -> ChainResult:
    """
    Resolve the element chain from ancestor down to target.

    If the ancestor is not on the target's parent chain (the document may
    have changed since it was chosen), the chain is rebuilt from the
    document body and sliced at the ancestor. If that fails too, the chain
    degrades to the target alone.
    """
    chain: list[Tag] = []
    current: Tag | None = target
    steps = 0
    while current is not None and is_element(current) and steps < guard:
        steps += 1
        chain.append(current)
        if current is ancestor:
            break
        current = parent_element(current)

    if chain and chain[-1] is ancestor:
        chain.reverse()
        return ChainResult(status="found", chain=chain)

    full = build_ancestry(target, document_body(target))
    idx = index_of(full, ancestor)
    if idx >= 0:
        return ChainResult(status="reconstructed", chain=full[idx:])

    return ChainResult(status="not_found", chain=[target])


def join_paths(tokens: list[str]) -> PathPair:
    return PathPair(descendant=" ".join(tokens), child=" > ".join(tokens))


def paths_between(
    ancestor: Tag | None,
    target: Tag | None,
    options: SelectorOptions | None = None,
) -> PathPair:
    """
    Build descendant and child paths from ancestor (inclusive) to target (inclusive).

    Returns two empty strings when either end is missing or not an element.
    """
    if not is_element(ancestor) or not is_element(target):
        return PathPair()

    result = resolve_chain(ancestor, target)
    pair = join_paths([selector_for(node, options) for node in result.chain])
    if result.status != "found":
        logger.debug(
            f"Ancestor chain {result.status} ({len(result.chain)} elements)",
            extra={"selector": pair.descendant},
        )
    return pair
