"""Tool to pull matching sections out of a set of documents."""

import logging
from typing import Optional

from ..parser.hierarchy import parse_document
from ..parser.query import document_title, format_results, heading_steps, query_tree
from ..parser.tokens import UnscannableInputError
from .get_outline import read_document

logger = logging.getLogger(__name__)


def query_content(content: str, patterns: list[Optional[str]]) -> tuple[str, str]:
    """
    Query one document's text.

    Args:
        content: Full document text
        patterns: Title patterns for heading depth 1, 2, ... (root step is implied)

    Returns:
        Tuple of (document title, matched text)
    """
    tree = parse_document(content)
    return document_title(tree), query_tree(tree, heading_steps(patterns))


def query_files(
    file_paths: list[str],
    patterns: list[Optional[str]],
) -> dict:
    """
    Query several documents with the same heading path.

    Args:
        file_paths: Paths of markdown files
        patterns: Title patterns for heading depth 1, 2, ... ("*" or ".*" match anything)

    Returns:
        Dict with the framed result text, matched files and per-file errors
    """
    documents: list[tuple[str, str]] = []
    matched: list[str] = []
    errors = []

    for file_path in file_paths:
        try:
            content = read_document(file_path)
        except OSError as e:
            logger.warning("Could not read %s: %s", file_path, e)
            errors.append({"file": file_path, "error": str(e)})
            continue

        try:
            title, text = query_content(content, patterns)
        except UnscannableInputError as e:
            logger.error("Could not parse %s: %s", file_path, e)
            errors.append({"file": file_path, "error": str(e)})
            continue

        if text.strip():
            matched.append(file_path)
        else:
            logger.debug("No matching section in %s", file_path)
        documents.append((title, text))

    return {
        "query": list(patterns),
        "document_count": len(file_paths),
        "matched_files": matched,
        "result": format_results(documents),
        "errors": errors if errors else None,
    }
