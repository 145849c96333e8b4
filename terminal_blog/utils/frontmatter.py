"""
Frontmatter splitting for post files.
"""

import re

from terminal_blog.entities.post import PostDocument

DELIMITER_RE = re.compile(r"^---[ \t]*\r?$", re.MULTILINE)
TITLE_RE = re.compile(r"^title:[ \t]*[\"']?(.*?)[\"']?[ \t]*\r?$", re.MULTILINE)
DATE_RE = re.compile(r"^date:[ \t]*[\"']?(\d{4}-\d{2}-\d{2})", re.MULTILINE)


def parse_post(raw_content: str) -> PostDocument:
    """
    Split raw file content into frontmatter fields and a body.

    The content is cut on the first two ``---`` lines. With fewer than two
    delimiters the whole content is the body and no metadata is read.

    Args:
        raw_content: File text as fetched from the store

    Returns:
        PostDocument with title/date left empty when absent
    """
    delimiters = list(DELIMITER_RE.finditer(raw_content))
    if len(delimiters) < 2:
        return PostDocument(raw_content=raw_content, body=raw_content)

    first, second = delimiters[0], delimiters[1]
    meta = raw_content[first.end() : second.start()]
    body = raw_content[second.end() :].lstrip("\r\n")

    title_match = TITLE_RE.search(meta)
    date_match = DATE_RE.search(meta)
    return PostDocument(
        raw_content=raw_content,
        title=title_match.group(1) if title_match else "",
        date=date_match.group(1) if date_match else "",
        body=body,
    )
