"""Find markdown documents under a local directory."""

import fnmatch
import logging
from pathlib import Path
from typing import Optional

import pathspec

logger = logging.getLogger(__name__)

# Directories never worth descending into
SKIP_DIRS = {
    '.git',
    'node_modules',
    '__pycache__',
    '.venv',
    'venv',
    'dist',
    'build',
    'target',
    '.idea',
    '.vscode',
    '.pytest_cache',
    '.mypy_cache',
    '.tox',
    'htmlcov',
}

DOC_EXTENSIONS = ('.md', '.markdown', '.mdx', '.txt')

# Filenames that may hold credentials; never read them
SENSITIVE_FILES = {'.env', '.env.local', '.env.production', '.netrc', '.npmrc', '.pypirc'}
SENSITIVE_PATTERNS = ['*.pem', '*.key', 'id_rsa*', 'id_ed25519*', 'secrets.*', 'credentials.*']


def is_sensitive_filename(filename: str) -> bool:
    """Check if a filename looks like it stores secrets."""
    basename = Path(filename).name.lower()
    if basename in SENSITIVE_FILES:
        return True
    return any(fnmatch.fnmatch(basename, pattern) for pattern in SENSITIVE_PATTERNS)


def is_within(resolved_path: Path, base_path: Path) -> bool:
    """Check that a resolved path stays inside the base directory."""
    try:
        resolved_path.relative_to(base_path)
        return True
    except ValueError:
        return False


def _ignore_spec(base: Path, extra_patterns: Optional[list[str]]) -> Optional[pathspec.GitIgnoreSpec]:
    """Combine the base .gitignore with extra gitignore-style patterns."""
    lines: list[str] = []
    gitignore_path = base / '.gitignore'
    if gitignore_path.is_file():
        try:
            lines.extend(gitignore_path.read_text(encoding='utf-8').splitlines())
        except OSError:
            logger.warning("Could not read %s", gitignore_path)
    if extra_patterns:
        lines.extend(extra_patterns)
    if not lines:
        return None
    return pathspec.GitIgnoreSpec.from_lines(lines)


def discover_doc_files(
    base_path: str,
    max_depth: int = 5,
    include_hidden: bool = False,
    follow_symlinks: bool = False,
    extra_ignore_patterns: Optional[list[str]] = None,
) -> list[str]:
    """
    List markdown documents under a directory.

    Args:
        base_path: Directory to crawl
        max_depth: Maximum directory depth to descend
        include_hidden: Whether to enter hidden directories (starting with .)
        follow_symlinks: Whether to follow symbolic links that stay inside base_path
        extra_ignore_patterns: Additional gitignore-style patterns to exclude

    Returns:
        Sorted relative POSIX paths

    Raises:
        ValueError: If base_path is missing or not a directory
    """
    base = Path(base_path).resolve()
    if not base.exists():
        raise ValueError(f"Path does not exist: {base_path}")
    if not base.is_dir():
        raise ValueError(f"Path is not a directory: {base_path}")

    spec = _ignore_spec(base, extra_ignore_patterns)
    found: list[str] = []

    def ignored(rel_path: str) -> bool:
        return spec is not None and spec.match_file(rel_path)

    def crawl(current: Path, depth: int) -> None:
        if depth > max_depth:
            return
        try:
            entries = list(current.iterdir())
        except OSError:
            logger.debug("Cannot list %s", current)
            return

        for item in entries:
            if item.is_symlink() and not follow_symlinks:
                logger.debug("Skipping symlink: %s", item)
                continue
            try:
                resolved = item.resolve()
            except OSError:
                continue
            if not is_within(resolved, base):
                logger.warning("Path escapes base directory, skipping: %s -> %s", item, resolved)
                continue

            rel_path = item.relative_to(base).as_posix()
            if item.is_dir():
                if item.name in SKIP_DIRS:
                    continue
                if not include_hidden and item.name.startswith('.'):
                    continue
                if ignored(rel_path + '/'):
                    logger.debug("Skipping ignored directory: %s", rel_path)
                    continue
                crawl(item, depth + 1)
            elif item.is_file() and item.suffix.lower() in DOC_EXTENSIONS:
                if is_sensitive_filename(rel_path):
                    logger.info("Skipping sensitive file: %s", rel_path)
                    continue
                if ignored(rel_path):
                    logger.debug("Skipping ignored file: %s", rel_path)
                    continue
                found.append(rel_path)

    crawl(base, 0)
    found.sort()
    return found
