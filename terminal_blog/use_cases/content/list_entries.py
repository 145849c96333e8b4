"""
Use case for listing the working directory (ls).
"""

import logging
from typing import Optional

from terminal_blog.entities.working_directory import WorkingDirectory
from terminal_blog.exceptions import ContentStoreError, ContentUnreachableError
from terminal_blog.ports.content.content_store_port import ContentStorePort

EMPTY_LISTING = "(empty)"


class ListEntriesUseCase:
    """Use case for listing a working directory as display lines."""

    def __init__(
        self,
        content_store: ContentStorePort,
        posts_dir: str = "_posts",
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            content_store: Store holding the blog tree
            posts_dir: Store name of the posts folder
            logger: Logger instance to use for logging
        """
        self._content_store = content_store
        self._posts_dir = posts_dir
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, cwd: WorkingDirectory) -> list[str]:
        """
        List the entries of a working directory.

        Directories gain a trailing ``/``; inside the posts folder, post
        files are shown by title (date prefix and extension stripped).

        Args:
            cwd: Directory to list

        Returns:
            Display names in store order, or ``["(empty)"]``

        Raises:
            ContentUnreachableError: If the listing cannot be retrieved
        """
        path = cwd.store_path(self._posts_dir)
        in_posts = cwd is WorkingDirectory.POSTS
        try:
            self._logger.info(f"Listing directory: /{path}")
            names = [
                entry.display_name(in_posts)
                for entry in self._content_store.list_entries(path)
            ]
            self._logger.info(f"Found {len(names)} entries")
        except ContentStoreError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise ContentUnreachableError(f"Failed to list /{path}: {str(e)}")
        return names or [EMPTY_LISTING]
