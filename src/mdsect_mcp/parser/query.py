"""Path queries over a heading tree."""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from .hierarchy import HTree

logger = logging.getLogger(__name__)

WILDCARD_PATTERNS = {"", "*", ".*"}

DOCUMENT_SEPARATOR = "======================"
TITLE_SEPARATOR = "----------------------"
LINE_BREAK = "\r\n"


@dataclass(frozen=True)
class QueryStep:
    """One level of a path query. Its depth is its position in the query."""
    pattern: str
    _regex: Optional[re.Pattern] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.is_wildcard:
            return
        try:
            regex = re.compile(self.pattern)
        except re.error:
            logger.debug("Invalid regex %r, matching it literally", self.pattern)
            regex = re.compile(re.escape(self.pattern))
        object.__setattr__(self, "_regex", regex)

    @property
    def is_wildcard(self) -> bool:
        return self.pattern is None or self.pattern.strip() in WILDCARD_PATTERNS

    def matches(self, node: HTree) -> bool:
        if self.is_wildcard or node.is_root:
            return True
        return self._regex.search(node.title) is not None


def parse_steps(patterns: Iterable[Optional[str]]) -> list[QueryStep]:
    """Build query steps from raw patterns (``None`` means match anything)."""
    return [QueryStep(pattern if pattern is not None else "*") for pattern in patterns]


def heading_steps(patterns: Iterable[Optional[str]]) -> list[QueryStep]:
    """Query steps for heading patterns from level 1 down, with the root step prepended."""
    return [QueryStep("*")] + parse_steps(patterns)


def serialize_subtree(node: HTree) -> str:
    """
    Serialize a node's heading, its content and all descendants.

    Blocks (heading line, body, each child) are separated by a blank line.
    """
    blocks: list[str] = []
    if node.heading_line:
        blocks.append(node.heading_line)
    body = "".join(token.text for token in node.body_tokens).strip("\n")
    if body:
        blocks.append(body)
    for child in node.children:
        child_text = serialize_subtree(child)
        if child_text:
            blocks.append(child_text)
    return "\n\n".join(blocks)


def _walk(node: HTree, steps: Sequence[QueryStep]) -> str:
    step = steps[0]
    if not step.matches(node):
        return ""
    if len(steps) == 1:
        return serialize_subtree(node)
    results = [_walk(child, steps[1:]) for child in node.children]
    return "\n\n".join(result for result in results if result)


def query_tree(root: HTree, steps: Sequence[QueryStep]) -> str:
    """
    Serialize every subtree reached by walking ``steps`` from the root.

    Step 0 is the root and always matches; step i is matched against the
    titles of nodes at depth i. Returns an empty string when nothing matches
    or when there are no steps.
    """
    if not steps:
        return ""
    return _walk(root, list(steps))


def document_title(root: HTree) -> str:
    """Title of the document's first top-level heading, or empty string."""
    return root.children[0].title if root.children else ""


def format_results(documents: Iterable[tuple[str, str]]) -> str:
    """
    Frame per-document (title, content) results for display.

    Documents whose content is blank are dropped.
    """
    blocks = []
    for title, content in documents:
        if not content.strip():
            continue
        blocks.append(LINE_BREAK.join([DOCUMENT_SEPARATOR, title, TITLE_SEPARATOR, content]))
    return LINE_BREAK.join(blocks)
