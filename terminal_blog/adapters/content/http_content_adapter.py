"""
Remote content listing adapter (GitHub contents API shaped).
"""

from __future__ import annotations

import http.client
import json
import logging
import re
import urllib.error
import urllib.request
from typing import Any, Iterator, Optional
from urllib.parse import quote, urlparse

from typing_extensions import override

from terminal_blog.entities.entry import Entry, EntryKind
from terminal_blog.exceptions import ContentUnreachableError
from terminal_blog.ports.content.content_store_port import ContentStorePort

DEFAULT_USER_AGENT = "terminal-blog/0.1 (+https://bigdaditor.github.io)"


class HttpContentAdapter(ContentStorePort):
    """Content store backed by a remote directory-listing endpoint.

    A GET on ``<api_url>/<path>`` returns a JSON array of
    ``{name, type, download_url}`` objects; a GET on ``download_url``
    returns the raw file text.
    """

    def __init__(
        self,
        api_url: str,
        timeout: float = 10.0,
        token: Optional[str] = None,
        user_agent: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._validate_url(api_url)
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._token = token
        self._user_agent = user_agent or DEFAULT_USER_AGENT
        self._logger = logger or logging.getLogger(__name__)

    # ---------------- private helpers ----------------
    def _validate_url(self, url: str) -> None:
        p = urlparse(url)
        if p.scheme not in ("http", "https"):
            raise ContentUnreachableError(f"Only http/https URLs are supported: {url}")
        if not p.netloc:
            raise ContentUnreachableError(f"Invalid URL: missing host: {url}")

    def _listing_url(self, path: str) -> str:
        path = path.strip("/")
        if not path:
            return f"{self._api_url}/"
        return f"{self._api_url}/{quote(path)}"

    def _fetch(self, url: str, accept: str) -> str:
        headers = {"User-Agent": self._user_agent, "Accept": accept}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        req = urllib.request.Request(url, headers=headers, method="GET")
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as resp:  # nosec - configured URL
                raw = resp.read()
                charset = self._get_charset(resp.headers.get("Content-Type", ""))
                try:
                    return raw.decode(charset or "utf-8", errors="replace")
                except LookupError:
                    return raw.decode("utf-8", errors="replace")
        except urllib.error.HTTPError as e:
            raise ContentUnreachableError(f"HTTP error {e.code}: {e.reason}")
        except urllib.error.URLError as e:
            raise ContentUnreachableError(f"URL error: {e.reason}")
        except (OSError, ValueError, http.client.HTTPException) as e:
            raise ContentUnreachableError(f"Fetch failed: {e}")

    def _get_charset(self, content_type: str) -> Optional[str]:
        m = re.search(r"charset=([\w\-]+)", content_type or "", re.IGNORECASE)
        return m.group(1) if m else None

    def _to_entry(self, item: Any, parent: str) -> Entry:
        if not isinstance(item, dict) or not isinstance(item.get("name"), str):
            raise ContentUnreachableError(f"Malformed listing item: {item!r}")
        name = item["name"]
        kind = EntryKind.DIRECTORY if item.get("type") == "dir" else EntryKind.FILE
        path = item.get("path") or (f"{parent}/{name}" if parent else name)
        download_url = item.get("download_url")
        return Entry(
            name=name,
            kind=kind,
            path=str(path),
            download_url=download_url if isinstance(download_url, str) else None,
        )

    def _iter_entries(self, items: list[Any], parent: str) -> Iterator[Entry]:
        for item in items:
            yield self._to_entry(item, parent)

    # ---------------- port ----------------
    @override
    def list_entries(self, path: str) -> Iterator[Entry]:
        url = self._listing_url(path)
        self._logger.info(f"Fetching listing: {url}")
        body = self._fetch(url, "application/vnd.github+json, application/json")
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise ContentUnreachableError(f"Invalid JSON from {url}: {e}")
        if not isinstance(data, list):
            # A file path or an error object: nothing to list
            self._logger.warning(f"Listing at {url} is not an array")
            return iter(())
        return self._iter_entries(data, path.strip("/"))

    @override
    def read_content(self, entry: Entry) -> str:
        if entry.is_dir:
            raise ContentUnreachableError(f"{entry.name} is a directory")
        if not entry.download_url:
            raise ContentUnreachableError(f"No download URL for {entry.name}")
        self._logger.info(f"Fetching content: {entry.download_url}")
        return self._fetch(entry.download_url, "text/plain, */*")
