"""
Tests for the SessionRegistry.
"""

import pytest

from terminal_blog.exceptions import SessionNotFoundError
from terminal_blog.use_cases.content.list_entries import ListEntriesUseCase
from terminal_blog.use_cases.content.read_post import ReadPostUseCase
from terminal_blog.use_cases.terminal.registry import SessionRegistry
from terminal_blog.use_cases.terminal.session import TerminalSession


@pytest.fixture
def factory(content_store):
    return lambda: TerminalSession(
        ListEntriesUseCase(content_store), ReadPostUseCase(content_store)
    )


class TestSessionRegistry:
    """Test cases for SessionRegistry."""

    def test_create_and_get(self, factory, mock_logger):
        registry = SessionRegistry(factory, logger=mock_logger)

        session_id, session = registry.create()

        assert registry.get(session_id) is session
        assert len(registry) == 1

    def test_remove_unknown_session(self, factory, mock_logger):
        registry = SessionRegistry(factory, logger=mock_logger)

        with pytest.raises(SessionNotFoundError, match="Unknown session: nope"):
            registry.remove("nope")

    def test_creating_past_limit_evicts_oldest(self, factory, mock_logger):
        registry = SessionRegistry(factory, max_sessions=2, logger=mock_logger)
        first, _ = registry.create()
        second, _ = registry.create()

        third, _ = registry.create()

        assert len(registry) == 2
        with pytest.raises(SessionNotFoundError):
            registry.get(first)
        registry.get(second)
        registry.get(third)

    def test_recent_use_protects_from_eviction(self, factory, mock_logger):
        registry = SessionRegistry(factory, max_sessions=2, logger=mock_logger)
        first, _ = registry.create()
        second, _ = registry.create()
        registry.get(first)

        registry.create()

        registry.get(first)
        with pytest.raises(SessionNotFoundError):
            registry.get(second)

    def test_unbounded_by_default(self, factory, mock_logger):
        registry = SessionRegistry(factory, logger=mock_logger)

        for _ in range(50):
            registry.create()

        assert len(registry) == 50

    def test_limit_must_be_positive(self, factory):
        with pytest.raises(ValueError):
            SessionRegistry(factory, max_sessions=0)
