"""
Markdown subset to HTML rendering for post bodies.

Only a small, fixed grammar is supported: fenced and inline code, ``#`` to
``###`` headers, bold, italic, links and paragraph/line breaks. Rules run
in a fixed order; code is swapped out for placeholders first so later
rules never touch it.
"""

from __future__ import annotations

import html
import re

FENCE_RE = re.compile(r"```[^\n`]*\n?(.*?)```", re.DOTALL)
INLINE_CODE_RE = re.compile(r"`([^`\n]+)`")
PLACEHOLDER_RE = re.compile(r"\x00(\d+)\x00")

# Order matters: longest header prefix first, bold before italic.
INLINE_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"^###[ \t]+(.*?)[ \t]*$", re.MULTILINE), r"<h3>\1</h3>"),
    (re.compile(r"^##[ \t]+(.*?)[ \t]*$", re.MULTILINE), r"<h2>\1</h2>"),
    (re.compile(r"^#[ \t]+(.*?)[ \t]*$", re.MULTILINE), r"<h1>\1</h1>"),
    (re.compile(r"\*\*(.+?\**)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.+?)\*"), r"<em>\1</em>"),
    (
        re.compile(r"\[([^\]\n]+)\]\(([^)\s]+)\)"),
        r'<a href="\2" target="_blank" rel="noopener">\1</a>',
    ),
]


class MarkdownRenderer:
    """Pure markdown-subset renderer producing HTML markup."""

    def render(self, body: str) -> str:
        """
        Render a post body (frontmatter already removed) to HTML.

        Args:
            body: Markdown text

        Returns:
            HTML markup; empty string for an empty body
        """
        text = body.replace("\r\n", "\n").strip("\n")
        if not text.strip():
            return ""

        stash: list[str] = []
        blocks: set[int] = set()

        def _stash(markup: str, block: bool = False) -> str:
            stash.append(markup)
            if block:
                blocks.add(len(stash) - 1)
            return f"\x00{len(stash) - 1}\x00"

        def _fence(m: re.Match[str]) -> str:
            code = html.escape(m.group(1).rstrip("\n"))
            return _stash(f"<pre><code>{code}</code></pre>", block=True)

        text = FENCE_RE.sub(_fence, text)
        text = INLINE_CODE_RE.sub(
            lambda m: _stash(f"<code>{html.escape(m.group(1))}</code>"), text
        )

        for pattern, replacement in INLINE_RULES:
            text = pattern.sub(replacement, text)

        text = self._breaks(text, blocks)
        return PLACEHOLDER_RE.sub(lambda m: stash[int(m.group(1))], text)

    def _breaks(self, text: str, blocks: set[int]) -> str:
        block = r"<h[1-3]>.*?</h[1-3]>"
        for i in sorted(blocks):
            block += "|" + re.escape(f"\x00{i}\x00")
        # Block elements close the running paragraph and open the next one
        text = re.sub(rf"\n*({block})\n*", r"</p>\1<p>", text)
        text = re.sub(r"\n[ \t]*\n\s*", "</p><p>", text)
        text = text.replace("\n", "<br>")
        return f"<p>{text}</p>".replace("<p></p>", "")
