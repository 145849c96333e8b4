"""
Use case for building the JSON index of HTML posts.
"""

from __future__ import annotations

import json
import logging
import re
import subprocess
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from selectolax.parser import HTMLParser

from terminal_blog.entities.post_index import PostIndexEntry
from terminal_blog.exceptions import PostIndexError

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
NAME_DATE_RE = re.compile(r"(\d{4}-\d{2}-\d{2})")
COMMENT_DATE_RE = re.compile(r"<!--\s*date:\s*(\d{4}-\d{2}-\d{2})\s*-->", re.IGNORECASE)
DEFAULT_CATEGORY = "General"


class PostIndexBuilder:
    """Scan a posts folder for ``*.html`` files and describe each one.

    Dates come from the first source that yields one: ``<meta name="date">``,
    ``<time datetime>``, a ``<!-- date: ... -->`` comment, the file name,
    the last git commit touching the file, then today.
    """

    def __init__(
        self,
        repo_root: Path,
        posts_dir: Path,
        logger: Optional[logging.Logger] = None,
        today: Callable[[], date] = date.today,
    ):
        self._repo_root = Path(repo_root).resolve()
        posts_dir = Path(posts_dir)
        if not posts_dir.is_absolute():
            posts_dir = self._repo_root / posts_dir
        self._posts_dir = posts_dir.resolve()
        self._logger = logger or logging.getLogger(__name__)
        self._today = today

    # ---------------- scanning ----------------
    def collect_html_files(self) -> list[Path]:
        if not self._posts_dir.is_dir():
            raise PostIndexError(f"Posts directory does not exist: {self._posts_dir}")
        return sorted(p for p in self._posts_dir.rglob("*.html") if p.is_file())

    def build(self) -> list[PostIndexEntry]:
        """
        Describe every post, newest first, ties broken by title.

        Raises:
            PostIndexError: If the posts folder cannot be scanned or read
        """
        try:
            files = self.collect_html_files()
            posts = [self.describe(path) for path in files]
        except PostIndexError:
            raise
        except Exception as e:
            raise PostIndexError(f"Failed to scan {self._posts_dir}: {str(e)}")

        self._logger.info(f"Indexed {len(posts)} posts from {self._posts_dir}")
        posts.sort(key=lambda p: p.title)
        posts.sort(key=lambda p: p.date, reverse=True)
        return posts

    def describe(self, path: Path) -> PostIndexEntry:
        content = path.read_text(encoding="utf-8")
        relative = path.relative_to(self._posts_dir).as_posix()
        parts = relative.split("/")
        category = parts[0] if len(parts) > 1 else DEFAULT_CATEGORY
        tree = HTMLParser(content)
        return PostIndexEntry(
            title=self.extract_title(tree, path.stem),
            date=self.extract_date(tree, content, path),
            category=category,
            file=relative,
        )

    # ---------------- metadata ----------------
    def extract_title(self, tree: HTMLParser, fallback: str) -> str:
        h1 = tree.css_first("h1")
        if h1 is None:
            return fallback
        return h1.text(deep=True).strip() or fallback

    def extract_date_from_content(self, tree: HTMLParser, content: str) -> Optional[str]:
        for node in tree.css("meta"):
            if (node.attributes.get("name") or "").lower() != "date":
                continue
            value = (node.attributes.get("content") or "").strip()
            if ISO_DATE_RE.match(value):
                return value

        for node in tree.css("time"):
            value = (node.attributes.get("datetime") or "").strip()
            if ISO_DATE_RE.match(value):
                return value

        m = COMMENT_DATE_RE.search(content)
        return m.group(1) if m else None

    def git_date(self, path: Path) -> Optional[str]:
        try:
            relative = path.relative_to(self._repo_root).as_posix()
        except ValueError:
            relative = path.as_posix()
        try:
            out = subprocess.run(
                ["git", "log", "-1", "--format=%cs", "--", relative],
                cwd=self._repo_root,
                capture_output=True,
                text=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as e:
            self._logger.warning(f"Failed to read git date for {relative}: {e}")
            return None
        value = out.stdout.strip()
        return value or None

    def extract_date(self, tree: HTMLParser, content: str, path: Path) -> str:
        found = self.extract_date_from_content(tree, content)
        if found:
            return found
        m = NAME_DATE_RE.search(path.name)
        if m:
            return m.group(1)
        found = self.git_date(path)
        if found:
            return found
        return self._today().isoformat()


def write_index(posts: list[PostIndexEntry], output: Path) -> None:
    payload = json.dumps([p.to_dict() for p in posts], ensure_ascii=False, indent=2)
    output.write_text(f"{payload}\n", encoding="utf-8")
