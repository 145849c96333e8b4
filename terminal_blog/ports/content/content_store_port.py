"""
Content store port interface defining the contract for reading the blog tree.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from terminal_blog.entities.entry import Entry


class ContentStorePort(ABC):
    """Port interface for a hierarchical, read-only content tree."""

    @abstractmethod
    def list_entries(self, path: str) -> Iterable[Entry]:
        """
        List the entries directly under a path.

        Args:
            path: Store path to list ("" for the tree root)

        Returns:
            Entries in the store's natural order

        Raises:
            ContentUnreachableError: If the listing cannot be retrieved
        """
        pass

    @abstractmethod
    def read_content(self, entry: Entry) -> str:
        """
        Read the full text of a file entry.

        Args:
            entry: A file entry previously returned by list_entries

        Returns:
            The raw file content

        Raises:
            ContentUnreachableError: If the content cannot be retrieved
        """
        pass
