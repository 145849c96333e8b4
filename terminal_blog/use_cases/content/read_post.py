"""
Use case for reading a post by name (cat).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from terminal_blog.entities.entry import Entry
from terminal_blog.entities.post import PostDocument
from terminal_blog.exceptions import ContentStoreError
from terminal_blog.ports.content.content_store_port import ContentStorePort
from terminal_blog.utils.frontmatter import parse_post


class ReadFailure(Enum):
    NOT_FOUND = "not_found"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class Ok:
    post: PostDocument
    entry: Entry


@dataclass(frozen=True)
class Err:
    failure: ReadFailure
    message: str = ""


ReadResult = Union[Ok, Err]


class ReadPostUseCase:
    """Use case resolving a name inside the posts folder and fetching it.

    Resolution is two-phase because the store can only enumerate folders:
    list the posts folder, pick the matching entry, then fetch its content.
    """

    def __init__(
        self,
        content_store: ContentStorePort,
        posts_dir: str = "_posts",
        logger: Optional[logging.Logger] = None,
    ):
        self._content_store = content_store
        self._posts_dir = posts_dir
        self._logger = logger or logging.getLogger(__name__)

    def find_entry(self, identifier: str) -> Optional[Entry]:
        """
        First file in the posts folder whose raw name contains the
        identifier or whose title name equals it.

        Raises:
            ContentStoreError: If the listing cannot be retrieved
        """
        for entry in self._content_store.list_entries(self._posts_dir):
            if entry.matches(identifier):
                return entry
        return None

    def execute(self, identifier: str) -> ReadResult:
        """
        Read and parse a post.

        Args:
            identifier: Name typed after cat

        Returns:
            Ok with the parsed post, or Err(NOT_FOUND | UNREACHABLE)
        """
        self._logger.info(f"Resolving post: {identifier}")
        try:
            entry = self.find_entry(identifier)
        except ContentStoreError as e:
            self._logger.error(f"Error listing posts: {e}")
            return Err(ReadFailure.UNREACHABLE, str(e))
        except Exception as e:
            self._logger.error(f"Unexpected error listing posts: {e}")
            return Err(ReadFailure.UNREACHABLE, str(e))

        if entry is None:
            self._logger.info(f"No post matches: {identifier}")
            return Err(ReadFailure.NOT_FOUND, identifier)

        try:
            raw = self._content_store.read_content(entry)
        except ContentStoreError as e:
            self._logger.error(f"Error reading {entry.path}: {e}")
            return Err(ReadFailure.UNREACHABLE, str(e))
        except Exception as e:
            self._logger.error(f"Unexpected error reading {entry.path}: {e}")
            return Err(ReadFailure.UNREACHABLE, str(e))

        self._logger.info(f"Read {len(raw)} characters from {entry.path}")
        return Ok(post=parse_post(raw), entry=entry)
