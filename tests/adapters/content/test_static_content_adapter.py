"""
Tests for the StaticContentAdapter.
"""

import pytest

from terminal_blog.adapters.content.static_content_adapter import (
    StaticContentAdapter,
    default_tree,
)
from terminal_blog.entities.entry import Entry, EntryKind
from terminal_blog.exceptions import ContentUnreachableError


class TestStaticContentAdapter:
    """Test cases for the StaticContentAdapter."""

    def test_root_listing_derives_directories(self, content_store):
        entries = list(content_store.list_entries(""))

        assert [(e.name, e.kind) for e in entries] == [
            ("about.md", EntryKind.FILE),
            ("_posts", EntryKind.DIRECTORY),
        ]

    def test_nested_listing(self, content_store):
        entries = list(content_store.list_entries("_posts/"))

        assert [e.path for e in entries] == [
            "_posts/2024-01-02-hello-world.md",
            "_posts/drafts",
            "_posts/2023-12-31-my-second-post.md",
        ]

    def test_unknown_path_is_empty(self, content_store):
        assert list(content_store.list_entries("missing")) == []

    def test_read_content(self, content_store):
        entry = Entry("about.md", EntryKind.FILE, path="about.md")

        assert content_store.read_content(entry) == "# About\n\nHello."

    def test_read_unknown_file(self, content_store):
        with pytest.raises(ContentUnreachableError, match="Not in the static table"):
            content_store.read_content(Entry("x.md", EntryKind.FILE, path="x.md"))

    def test_default_tree_has_a_post(self):
        adapter = StaticContentAdapter()

        names = [e.name for e in adapter.list_entries("_posts")]

        assert names == ["2024-01-01-welcome.md"]
        assert "latest-post.txt" in default_tree()
