"""Tools to inspect the heading tree of a single document."""

import logging
from pathlib import Path
from typing import Optional

from ..parser.hierarchy import HTree, flatten_tree, parse_document, render_tree, tree_to_dict
from ..parser.query import document_title
from ..parser.tokens import UnscannableInputError

logger = logging.getLogger(__name__)


def read_document(file_path: str) -> str:
    """Read a document as text, replacing undecodable bytes."""
    return Path(file_path).read_text(encoding='utf-8', errors='replace')


def load_tree(file_path: str) -> tuple[Optional[HTree], Optional[dict]]:
    """Read and parse a file. Returns (tree, error_dict)."""
    path = Path(file_path)
    if not path.is_file():
        return None, {"error": f"File not found: {file_path}"}
    try:
        content = read_document(file_path)
    except OSError as e:
        logger.warning("Could not read %s: %s", file_path, e)
        return None, {"error": f"Could not read {file_path}: {e}"}
    try:
        return parse_document(content), None
    except UnscannableInputError as e:
        logger.error("Could not parse %s: %s", file_path, e)
        return None, {"error": str(e)}


def get_outline(file_path: str) -> dict:
    """
    Get the heading outline of a document.

    Args:
        file_path: Path to a markdown file

    Returns:
        Dict with the document title and nested outline
    """
    tree, err = load_tree(file_path)
    if err:
        return err

    return {
        "file": file_path,
        "title": document_title(tree),
        "section_count": len(flatten_tree(tree)) - 1,
        "outline": [tree_to_dict(child) for child in tree.children],
    }


def dump_tree(file_path: str) -> dict:
    """
    Get the full text dump of a document's heading tree.

    Args:
        file_path: Path to a markdown file

    Returns:
        Dict with the rendered tree
    """
    tree, err = load_tree(file_path)
    if err:
        return err

    return {
        "file": file_path,
        "tree": render_tree(tree),
    }
