"""Build a heading hierarchy tree from a normalized token stream."""

import weakref
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .normalize import tokenize
from .tokens import Token, TokenKind

ROOT_LABEL = "H0"


@dataclass(eq=False)
class HTree:
    """
    A node in the heading tree.

    The synthetic root has no heading token and level 0. Every other node
    owns its heading token, the non-heading tokens collected while it was
    the active node, and its child headings in document order. The parent
    link is weak so children never keep their ancestors alive.
    """
    heading_token: Optional[Token] = None
    contents: list[Token] = field(default_factory=list)
    children: list["HTree"] = field(default_factory=list)
    _parent_ref: Optional[weakref.ref] = field(default=None, repr=False)

    @property
    def parent(self) -> Optional["HTree"]:
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def is_root(self) -> bool:
        return self.heading_token is None

    @property
    def level(self) -> int:
        return 0 if self.heading_token is None else self.heading_token.level

    @property
    def label(self) -> str:
        return ROOT_LABEL if self.heading_token is None else self.heading_token.label

    @property
    def title_token(self) -> Optional[Token]:
        """The token right after the separating space of the heading marker."""
        if self.is_root or len(self.contents) < 2:
            return None
        if self.contents[0].kind is not TokenKind.EMPTY:
            return None
        if self.contents[1].kind in (TokenKind.EMPTY, TokenKind.NEWLINE):
            return None
        return self.contents[1]

    @property
    def title(self) -> str:
        token = self.title_token
        return token.text if token is not None else ""

    @property
    def body_tokens(self) -> list[Token]:
        """Contents without the separator and title tokens."""
        if self.title_token is None:
            return list(self.contents)
        return self.contents[2:]

    @property
    def heading_line(self) -> str:
        """The heading as written, e.g. ``## Install``; empty for the root."""
        if self.is_root:
            return ""
        if not self.title:
            return self.heading_token.text
        return f"{self.heading_token.text} {self.title}"

    def add_child(self, child: "HTree") -> "HTree":
        child._parent_ref = weakref.ref(self)
        self.children.append(child)
        return child


def build_heading_tree(tokens: Iterable[Token]) -> HTree:
    """
    Build the tree in one pass over normalized tokens.

    Non-heading tokens (including inert headings deeper than level 5) go to
    the active node. A structural heading of level n attaches to the nearest
    node on the active node's ancestor chain whose level is below n, then
    becomes the active node. Stops at the EOF sentinel.
    """
    root = HTree()
    active = root

    for token in tokens:
        if token.kind is TokenKind.EOF:
            break
        if not token.is_structural_heading():
            active.contents.append(token)
            continue

        parent = active
        while parent.level >= token.level:
            parent = parent.parent
        active = parent.add_child(HTree(heading_token=token))

    return root


def parse_document(text: str) -> HTree:
    """Lex, normalize and build the heading tree for one document."""
    return build_heading_tree(tokenize(text))


def flatten_tree(node: HTree, depth: int = 0) -> list[tuple[HTree, int]]:
    """
    Flatten a tree to a pre-order list of (node, depth) tuples.

    The root itself is included at depth 0.
    """
    result: list[tuple[HTree, int]] = [(node, depth)]
    for child in node.children:
        result.extend(flatten_tree(child, depth + 1))
    return result


def get_heading_path(node: HTree) -> list[HTree]:
    """Nodes from the root down to ``node``, inclusive."""
    path: list[HTree] = []
    current: Optional[HTree] = node
    while current is not None:
        path.insert(0, current)
        current = current.parent
    return path


def render_tree(node: HTree, depth: int = 0) -> str:
    """
    Dump the tree as text.

    Each node prints ``'#' * depth`` + its kind label + title, then one
    ``'-' * depth + '=>'`` line per body token, then its children one
    level deeper.
    """
    lines = [f"{'#' * depth}{node.label} {node.title}"]
    for token in node.body_tokens:
        lines.append(f"{'-' * depth}=>{token.text}")
    for child in node.children:
        lines.append(render_tree(child, depth + 1))
    return "\n".join(lines)


def tree_to_dict(node: HTree) -> dict:
    """Convert a node and its descendants to a JSON-able outline."""
    return {
        "level": node.level,
        "label": node.label,
        "title": node.title,
        "heading": node.heading_line,
        "path": [n.title for n in get_heading_path(node)[1:]],
        "token_count": len(node.contents),
        "children": [tree_to_dict(child) for child in node.children],
    }
