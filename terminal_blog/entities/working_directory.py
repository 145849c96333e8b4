"""
Working directory domain entity.
"""

from enum import Enum


class WorkingDirectory(Enum):
    """The locations a session can stand in."""

    ROOT = "root"
    POSTS = "posts"

    def store_path(self, posts_dir: str) -> str:
        """Path of this location inside the content store."""
        return "" if self is WorkingDirectory.ROOT else posts_dir

    def label(self, posts_dir: str) -> str:
        """Path shown in the prompt."""
        return "~" if self is WorkingDirectory.ROOT else f"~/{posts_dir}"
