"""
Subtree Serializer - Nested CSS-like rendering of an element subtree.

Each block opens with the element's selector token and lists two
`content:` lines (descendant path and child path from the root), then the
element's own text, then nested child blocks:

    .menu {
      content: ".menu";
      content: ".menu";
      content: "";
      .item { /* 3 times */
        content: ".menu .item";
        content: ".menu > .item";
        content: "Home";
        content: "About";
        content: "Contact";
      }
    }

Sibling elements whose structure-only (canonical) rendering is identical
are collapsed into one representative block, with every member's text kept
as its own content line.
"""

import logging
import re
from collections.abc import Iterator

from bs4 import Tag
from pydantic import BaseModel

from elementsnatch.config import TEXT_ELLIPSIS, TEXT_MAX_LENGTH, TRUNCATION_MARKER
from elementsnatch.dom.node import direct_text_nodes, element_children, is_element, tag_name
from elementsnatch.dom.options import SerializeOptions
from elementsnatch.dom.selector import selector_for

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Collapse whitespace, truncate, and escape for a double-quoted string."""
    text = _WHITESPACE.sub(" ", text).strip()
    if len(text) > TEXT_MAX_LENGTH:
        text = text[:TEXT_MAX_LENGTH] + TEXT_ELLIPSIS
    return text.replace("\\", "\\\\").replace('"', '\\"')


def own_texts(node: Tag) -> list[str]:
    """Normalized direct text of a node, empty fragments dropped."""
    texts = []
    for raw in direct_text_nodes(node):
        text = normalize_text(raw)
        if text:
            texts.append(text)
    return texts


def primary_text(node: Tag) -> str:
    """First non-empty direct text of a node, or ""."""
    texts = own_texts(node)
    return texts[0] if texts else ""


class SerializedTree(BaseModel):
    """Result of serializing one subtree."""

    text: str = ""
    truncated: bool = False
    node_count: int = 0
    group_count: int = 0


class DOMSerializer:
    """
    Serializes an element subtree into nested blocks.

    Rendering is two-pass: a canonical pass (structure only, no text)
    decides which siblings group together, and a final pass emits the
    blocks. Both passes walk the tree with an explicit stack, so document
    depth is bounded only by max_depth.

    The canonical pass interns each element's structure as a shape id:
    its selector token plus the shape ids of its rendered children. Two
    siblings share a path prefix, so equal shape ids mean equal
    structure-only renderings. Each element costs one visit against
    max_nodes.
    """

    def __init__(self, options: SerializeOptions | None = None):
        self.options = options or SerializeOptions()
        self._reset()

    def _reset(self) -> None:
        self._shape_of: dict[int, int] = {}
        self._shapes: dict[tuple, int] = {}
        self._node_count = 0
        self._group_count = 0
        self._truncated = False

    def serialize(self, root: Tag | None) -> SerializedTree:
        """
        Serialize the subtree rooted at `root`.

        Returns:
            SerializedTree; empty text if root is not an element
        """
        if not is_element(root):
            logger.warning("serialize called without a valid element")
            return SerializedTree()

        self._reset()
        root_token = selector_for(root, self.options)
        lines: list[str] = []
        # the root counts as the first visit
        if self._canonical_pass(root, root_token) is not None:
            self._final_pass(root, root_token, lines)

        if self._truncated:
            lines.append(TRUNCATION_MARKER)
            logger.debug(f"Truncated at {self.options.max_nodes} nodes")

        text = "".join(line + "\n" for line in lines)
        result = SerializedTree(
            text=text,
            truncated=self._truncated,
            node_count=self._node_count,
            group_count=self._group_count,
        )
        self._shape_of = {}
        self._shapes = {}
        return result

    # ── helpers ──────────────────────────────────────────────────────────────

    def _pad(self, depth: int) -> str:
        return self.options.indent * depth

    def _children(self, node: Tag) -> list[Tag]:
        skip = self.options.skip_tag_names
        return [child for child in element_children(node) if tag_name(child) not in skip]

    def _path_lines(self, depth: int, path_tokens: list[str]) -> list[str]:
        pad = self._pad(depth + 1)
        return [
            f'{pad}content: "{" ".join(path_tokens)}";',
            f'{pad}content: "{" > ".join(path_tokens)}";',
        ]

    def _depth_exceeded(self, depth: int) -> bool:
        max_depth = self.options.max_depth
        return max_depth is not None and depth > max_depth

    def _visit(self, depth: int) -> bool:
        """Claim one node from the budget. False means the node is not rendered."""
        if self._depth_exceeded(depth) or self._truncated:
            return False
        if self._node_count >= self.options.max_nodes:
            self._truncated = True
            return False
        self._node_count += 1
        return True

    # ── canonical pass ───────────────────────────────────────────────────────

    def _canonical_pass(self, root: Tag, root_token: str) -> int | None:
        """
        Assign shape ids bottom-up over the subtree.

        A node that is not visited (too deep, or past the node budget) gets
        no shape id and is left out of its parent's shape. Once the budget
        runs out, the remaining siblings of every open node are skipped.

        Returns:
            Shape id of the root, or None if the root was not visited
        """
        if not self._visit(0):
            return None

        # frame: node, depth, its token, child shape ids so far, pending children
        stack = [(root, 0, root_token, [], iter(self._children(root)))]
        while stack:
            node, depth, token, child_shapes, pending = stack[-1]
            child = None if self._truncated else next(pending, None)
            if child is None:
                stack.pop()
                shape = self._intern(token, child_shapes)
                self._shape_of[id(node)] = shape
                if stack:
                    stack[-1][3].append(shape)
                continue
            if self._visit(depth + 1):
                child_token = selector_for(child, self.options)
                stack.append((child, depth + 1, child_token, [], iter(self._children(child))))

        return self._shape_of[id(root)]

    def _intern(self, token: str, child_shapes: list[int]) -> int:
        key = (token, tuple(child_shapes))
        return self._shapes.setdefault(key, len(self._shapes))

    # ── final pass ───────────────────────────────────────────────────────────

    def _final_pass(self, root: Tag, root_token: str, lines: list[str]) -> None:
        stack = [self._open_block(root, 0, [root_token], lines=lines)]
        while stack:
            depth, pending = stack[-1]
            entry = next(pending, None)
            if entry is None:
                stack.pop()
                lines.append(f"{self._pad(depth)}}}")
                continue
            stack.append(self._open_block(*entry, lines=lines))

    def _open_block(
        self,
        node: Tag,
        depth: int,
        path_tokens: list[str],
        override_texts: list[str] | None = None,
        occurrences: int = 1,
        *,
        lines: list[str],
    ) -> tuple[int, Iterator[tuple]]:
        """
        Emit a block's opener, path lines and text lines.

        Returns:
            (depth, pending child blocks) for the caller's stack; the caller
            closes the block once the pending blocks are emitted
        """
        pad = self._pad(depth)
        inner = self._pad(depth + 1)

        opener = f"{pad}{path_tokens[-1]} {{"
        if occurrences > 1:
            opener += f" /* {occurrences} times */"
        lines.append(opener)
        lines.extend(self._path_lines(depth, path_tokens))

        texts = own_texts(node) if override_texts is None else override_texts
        for text in texts or [""]:
            lines.append(f'{inner}content: "{text}";')

        # group children by shape, in first-occurrence order
        groups: dict[int, list[Tag]] = {}
        for child in self._children(node):
            shape = self._shape_of.get(id(child))
            if shape is None:
                if self._truncated:
                    break
                continue
            groups.setdefault(shape, []).append(child)

        blocks = []
        for members in groups.values():
            first = members[0]
            first_tokens = path_tokens + [selector_for(first, self.options)]
            if len(members) > 1:
                self._group_count += 1
                texts = [primary_text(member) for member in members]
                blocks.append((first, depth + 1, first_tokens, texts, len(members)))
            else:
                blocks.append((first, depth + 1, first_tokens))
        return depth, iter(blocks)


def serialize(root: Tag | None, options: SerializeOptions | None = None) -> str:
    """Serialize a subtree and return only the text."""
    return DOMSerializer(options).serialize(root).text
