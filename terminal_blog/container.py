"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from terminal_blog.adapters.content.http_content_adapter import HttpContentAdapter
from terminal_blog.adapters.content.static_content_adapter import (
    StaticContentAdapter,
    default_tree,
)
from terminal_blog.config.settings import Settings
from terminal_blog.config.settings import settings as default_settings
from terminal_blog.ports.content.content_store_port import ContentStorePort
from terminal_blog.use_cases.content.list_entries import ListEntriesUseCase
from terminal_blog.use_cases.content.read_post import ReadPostUseCase
from terminal_blog.use_cases.terminal.registry import SessionRegistry
from terminal_blog.use_cases.terminal.session import TerminalSession
from terminal_blog.utils.markdown import MarkdownRenderer


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._instances = {}
        self.settings = settings or default_settings
        self._logger = logging.getLogger(__name__)

    def get_content_store(self) -> ContentStorePort:
        """
        Get content store adapter instance.

        Returns:
            ContentStorePort implementation selected by BLOG_CONTENT_BACKEND
        """
        if "content_store" not in self._instances:
            s = self.settings
            if s.content_backend == "static":
                store: ContentStorePort = StaticContentAdapter(
                    default_tree(s.posts_dir), logger=self._logger
                )
            else:
                store = HttpContentAdapter(
                    s.content_api_url,
                    timeout=s.http_timeout,
                    token=s.content_token,
                    logger=self._logger,
                )
            self._instances["content_store"] = store
        return self._instances["content_store"]

    def get_markdown_renderer(self) -> MarkdownRenderer:
        if "markdown_renderer" not in self._instances:
            self._instances["markdown_renderer"] = MarkdownRenderer()
        return self._instances["markdown_renderer"]

    def get_list_entries_use_case(self) -> ListEntriesUseCase:
        """
        Get list entries use case with injected dependencies.

        Returns:
            Configured ListEntriesUseCase
        """
        if "list_entries_use_case" not in self._instances:
            self._instances["list_entries_use_case"] = ListEntriesUseCase(
                self.get_content_store(), self.settings.posts_dir, self._logger
            )
        return self._instances["list_entries_use_case"]

    def get_read_post_use_case(self) -> ReadPostUseCase:
        """
        Get read post use case with injected dependencies.

        Returns:
            Configured ReadPostUseCase
        """
        if "read_post_use_case" not in self._instances:
            self._instances["read_post_use_case"] = ReadPostUseCase(
                self.get_content_store(), self.settings.posts_dir, self._logger
            )
        return self._instances["read_post_use_case"]

    def create_session(self) -> TerminalSession:
        """
        Build a fresh, not yet started, terminal session.

        Sessions are never cached: each one owns its own log and directory.
        """
        s = self.settings
        return TerminalSession(
            self.get_list_entries_use_case(),
            self.get_read_post_use_case(),
            renderer=self.get_markdown_renderer(),
            posts_dir=s.posts_dir,
            user=s.prompt_user,
            host=s.prompt_host,
            logger=self._logger,
        )

    def get_session_registry(self) -> SessionRegistry:
        if "session_registry" not in self._instances:
            self._instances["session_registry"] = SessionRegistry(
                self.create_session,
                max_sessions=self.settings.max_sessions,
                logger=self._logger,
            )
        return self._instances["session_registry"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
