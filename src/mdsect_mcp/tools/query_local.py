"""Tool to query every document under a local directory."""

import logging
from pathlib import Path
from typing import Optional

from ..discovery import discover_doc_files
from .query_files import query_files

logger = logging.getLogger(__name__)


def query_local(
    path: str,
    patterns: list[Optional[str]],
    max_depth: int = 5,
    include_hidden: bool = False,
    follow_symlinks: bool = False,
    extra_ignore_patterns: Optional[list[str]] = None,
) -> dict:
    """
    Query all markdown documents found under a directory.

    Args:
        path: Directory to search
        patterns: Title patterns for heading depth 1, 2, ...
        max_depth: Maximum directory depth to crawl
        include_hidden: Whether to include hidden directories
        follow_symlinks: Whether to follow symbolic links (default False)
        extra_ignore_patterns: Additional gitignore-style patterns to exclude

    Returns:
        Dict with the framed result text and the files searched
    """
    base_path = Path(path).resolve()

    try:
        doc_files = discover_doc_files(
            str(base_path),
            max_depth=max_depth,
            include_hidden=include_hidden,
            follow_symlinks=follow_symlinks,
            extra_ignore_patterns=extra_ignore_patterns,
        )
    except ValueError as e:
        return {
            "success": False,
            "error": str(e),
            "path": str(base_path),
        }

    if not doc_files:
        return {
            "success": False,
            "error": "No documentation files found",
            "path": str(base_path),
            "searched_depth": max_depth,
        }

    logger.info("Querying %d documents under %s", len(doc_files), base_path)
    result = query_files([str(base_path / f) for f in doc_files], patterns)

    result["matched_files"] = [Path(f).relative_to(base_path).as_posix() for f in result["matched_files"]]
    for error in result["errors"] or []:
        error["file"] = Path(error["file"]).relative_to(base_path).as_posix()
    return {
        "success": True,
        "path": str(base_path),
        "files": doc_files,
        **result,
    }
