"""Tool to query a markdown file stored in a GitHub repository."""

import logging
import os
import re
from typing import Optional

import httpx

from ..parser.query import format_results
from ..parser.tokens import UnscannableInputError
from .query_files import query_content

logger = logging.getLogger(__name__)


def is_local_only() -> bool:
    return os.environ.get('MDSECT_LOCAL_ONLY', '').lower() in ('true', '1', 'yes')


def parse_github_url(url: str) -> tuple[str, str]:
    """Extract owner and repo name from a GitHub URL or owner/repo string."""
    patterns = [
        r"github\.com/([^/]+)/([^/]+)",
        r"^([^/]+)/([^/]+)$",
    ]

    for pattern in patterns:
        match = re.search(pattern, url.strip().rstrip('/'))
        if match:
            return match.group(1), match.group(2).removesuffix('.git')

    raise ValueError(f"Could not parse GitHub URL: {url}")


async def fetch_file_content(
    owner: str,
    repo: str,
    path: str,
    token: Optional[str] = None,
) -> str:
    """Fetch raw content of a file from GitHub."""
    headers = {
        "Accept": "application/vnd.github.v3.raw",
        "User-Agent": "mdsect-mcp",
    }
    if token:
        headers["Authorization"] = f"token {token}"

    url = f"https://api.github.com/repos/{owner}/{repo}/contents/{path.lstrip('/')}"

    async with httpx.AsyncClient(timeout=30.0) as client:
        response = await client.get(url, headers=headers)
        response.raise_for_status()
        return response.text


async def query_remote(
    url: str,
    file_path: str,
    patterns: list[Optional[str]],
    github_token: Optional[str] = None,
) -> dict:
    """
    Fetch one document from GitHub and query it.

    Args:
        url: GitHub repository URL or owner/repo string
        file_path: Path of the file within the repository (e.g. "docs/guide.md")
        patterns: Title patterns for heading depth 1, 2, ...
        github_token: GitHub personal access token (for private repos)

    Returns:
        Dict with the framed result text
    """
    if is_local_only():
        return {
            "success": False,
            "error": "Remote queries disabled in local-only mode. Set MDSECT_LOCAL_ONLY=false or unset to enable.",
        }

    try:
        owner, repo = parse_github_url(url)
    except ValueError as e:
        return {"success": False, "error": str(e)}

    token = github_token or os.environ.get("GITHUB_TOKEN")

    try:
        content = await fetch_file_content(owner, repo, file_path, token)
    except httpx.HTTPStatusError as e:
        logger.warning("GitHub returned %s for %s/%s:%s", e.response.status_code, owner, repo, file_path)
        return {
            "success": False,
            "error": f"HTTP {e.response.status_code} fetching {file_path}",
            "repo": f"{owner}/{repo}",
        }
    except httpx.HTTPError as e:
        logger.warning("Request failed for %s/%s:%s: %s", owner, repo, file_path, e)
        return {
            "success": False,
            "error": f"Request failed: {e}",
            "repo": f"{owner}/{repo}",
        }

    # Match local reads, which decode with universal newlines
    content = content.replace("\r\n", "\n")

    try:
        title, text = query_content(content, patterns)
    except UnscannableInputError as e:
        return {"success": False, "error": str(e), "repo": f"{owner}/{repo}"}

    return {
        "success": True,
        "repo": f"{owner}/{repo}",
        "file": file_path,
        "title": title,
        "matched": bool(text.strip()),
        "result": format_results([(title, text)]),
    }
