"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from terminal_blog.adapters.content.static_content_adapter import StaticContentAdapter
from terminal_blog.use_cases.content.list_entries import ListEntriesUseCase
from terminal_blog.use_cases.content.read_post import ReadPostUseCase
from terminal_blog.use_cases.terminal.session import TerminalSession

HELLO_POST = """---
title: "Hi"
date: 2024-01-02
---
Body **bold** and *em*
"""


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def blog_files() -> dict[str, str]:
    """A small blog tree: one post, one draft folder, one root file."""
    return {
        "about.md": "# About\n\nHello.",
        "_posts/2024-01-02-hello-world.md": HELLO_POST,
        "_posts/drafts/wip.md": "not yet",
        "_posts/2023-12-31-my-second-post.md": "No frontmatter here.",
    }


@pytest.fixture
def content_store(blog_files, mock_logger):
    return StaticContentAdapter(blog_files, logger=mock_logger)


@pytest.fixture
def session(content_store, mock_logger):
    """A started session over the static blog tree."""
    s = TerminalSession(
        ListEntriesUseCase(content_store, logger=mock_logger),
        ReadPostUseCase(content_store, logger=mock_logger),
        logger=mock_logger,
    )
    s.start()
    return s


@pytest.fixture
def posts_tree(tmp_path: Path) -> Path:
    """
    Create a temporary repository with an HTML posts folder.

    Returns:
        Path to the repository root
    """
    posts = tmp_path / "posts"
    (posts / "tech").mkdir(parents=True)
    (posts / "tech" / "b.html").write_text(
        '<html><head><meta name="date" content="2024-05-01"></head>'
        "<body><h1>Beta <em>post</em></h1></body></html>",
        encoding="utf-8",
    )
    (posts / "tech" / "a.html").write_text(
        '<html><head><meta name="date" content="2024-05-02"></head>'
        "<body><h1>Alpha</h1></body></html>",
        encoding="utf-8",
    )
    return tmp_path
