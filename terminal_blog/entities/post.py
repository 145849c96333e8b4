"""
Post document domain entity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PostDocument:
    """A post split into its frontmatter fields and its body."""

    raw_content: str
    title: str = ""
    date: str = ""
    body: str = ""
