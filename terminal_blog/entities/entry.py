"""
Content entry domain entity.
"""

import re
from dataclasses import dataclass
from enum import Enum

DATE_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}-")
POST_EXTENSIONS = (".md", ".markdown", ".html")


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "dir"


@dataclass(frozen=True)
class Entry:
    """One item (file or directory) of a content listing."""

    name: str
    kind: EntryKind
    path: str = ""
    download_url: str | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def is_post(self) -> bool:
        return not self.is_dir and self.name.lower().endswith(POST_EXTENSIONS)

    def title_name(self) -> str:
        """
        Name with the leading date prefix and the extension removed.

        Only post files are transformed; anything else keeps its raw name.
        """
        if not self.is_post():
            return self.name
        stem = self.name.rsplit(".", 1)[0]
        return DATE_PREFIX_RE.sub("", stem)

    def display_name(self, in_posts: bool = False) -> str:
        """Name as printed by ls."""
        if self.is_dir:
            return f"{self.name}/"
        if in_posts:
            return self.title_name()
        return self.name

    def matches(self, identifier: str) -> bool:
        """Whether cat <identifier> selects this entry."""
        if self.is_dir or not identifier:
            return False
        return identifier in self.name or self.title_name() == identifier
