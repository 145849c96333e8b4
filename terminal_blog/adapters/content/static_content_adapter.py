"""
In-memory content adapter used when no remote listing is configured.
"""

import logging
from typing import Iterator, Mapping, Optional

from typing_extensions import override

from terminal_blog.entities.entry import Entry, EntryKind
from terminal_blog.exceptions import ContentUnreachableError
from terminal_blog.ports.content.content_store_port import ContentStorePort

WELCOME_POST = """---
title: "Welcome to my Terminal Blog"
date: 2024-01-01
---
# Welcome

This is where I post my *thoughts*, **ideas**, and code experiments.

Stay tuned!
"""


def default_tree(posts_dir: str = "_posts") -> dict[str, str]:
    """The built-in table: file path -> content."""
    return {
        "latest-post.txt": (
            "Welcome to my Terminal Blog.\n"
            "This is where I post my thoughts, ideas, and code experiments.\n"
            "Stay tuned!"
        ),
        f"{posts_dir}/2024-01-01-welcome.md": WELCOME_POST,
    }


class StaticContentAdapter(ContentStorePort):
    """Content store over a constant table of file paths.

    Directories are implied by the paths; listing an unknown path yields
    nothing.
    """

    def __init__(
        self,
        files: Optional[Mapping[str, str]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._files = dict(files if files is not None else default_tree())
        self._logger = logger or logging.getLogger(__name__)

    @override
    def list_entries(self, path: str) -> Iterator[Entry]:
        prefix = path.strip("/")
        prefix = f"{prefix}/" if prefix else ""
        seen: set[str] = set()
        for file_path in self._files:
            if not file_path.startswith(prefix):
                continue
            head, sep, _ = file_path[len(prefix):].partition("/")
            if head in seen:
                continue
            seen.add(head)
            kind = EntryKind.DIRECTORY if sep else EntryKind.FILE
            yield Entry(
                name=head,
                kind=kind,
                path=f"{prefix}{head}",
                download_url=None,
            )

    @override
    def read_content(self, entry: Entry) -> str:
        try:
            return self._files[entry.path]
        except KeyError:
            raise ContentUnreachableError(f"Not in the static table: {entry.path}")
