"""Shared test fixtures for mdsect MCP tests."""

import pytest


@pytest.fixture
def sample_markdown():
    """Return sample markdown content with multiple heading levels."""
    return """Intro before any heading.

# Guide

Welcome to the documentation.

## Installation

Install with pip:

    pip install my-package

## Configuration

### Basic

Set `API_KEY` and `DEBUG`.

### Advanced

For production use, configure the server.

###### Footnote

Six hashes are not a section.

# Reference

## Authentication

Use Bearer tokens.

#### Endpoints

GET /users returns a list of users.
"""


@pytest.fixture
def nested_markdown():
    """Return the A/B/C document used to pin down heading placement."""
    return "# A\n## B\n# C\n"


@pytest.fixture
def sample_doc_dir(tmp_path):
    """Create a temporary directory with sample documentation files."""
    docs = tmp_path / "docs"
    docs.mkdir()

    (tmp_path / "README.md").write_text("# Project\n\nWelcome.\n\n## Features\n\nGreat features.\n")
    (docs / "guide.md").write_text("# Guide\n\n## Getting Started\n\nStart here.\n\n## Advanced\n\nAdvanced topics.\n")
    (docs / "api.md").write_text("# API\n\n## Endpoints\n\n### GET /users\n\nList users.\n")

    (tmp_path / ".gitignore").write_text("drafts/\n*.log\n")

    # Ignored through .gitignore
    drafts = tmp_path / "drafts"
    drafts.mkdir()
    (drafts / "wip.md").write_text("# Draft\n\n## Getting Started\n\nNot yet.\n")

    # Never descended into
    build = tmp_path / "build"
    build.mkdir()
    (build / "output.md").write_text("# Build Output\n\nThis should be ignored.\n")

    # Sensitive file
    (tmp_path / ".env").write_text("SECRET_KEY=abc123\n")

    return tmp_path
