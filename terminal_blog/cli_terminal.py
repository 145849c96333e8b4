from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from rich import box
from rich.console import Console
from rich.markdown import Markdown
from rich.padding import Padding
from rich.panel import Panel
from rich.text import Text

from terminal_blog.container import container
from terminal_blog.entities.output import BlockKind, OutputBlock
from terminal_blog.exceptions import BaseAppError


def render_block(console: Console, block: OutputBlock, *, plain: bool = False) -> None:
    """Print one output block. Echo blocks are skipped: the user just typed them."""
    if block.kind is BlockKind.ECHO:
        return
    if block.kind is BlockKind.INTRO:
        console.print(
            Panel(
                Text(block.text),
                title="Terminal Blog",
                border_style="cyan",
                box=box.ROUNDED,
            )
        )
        return
    if block.kind is BlockKind.ERROR:
        console.print(Text(block.text, style="red"))
        return
    if block.kind is BlockKind.LISTING:
        for line in block.lines:
            style = "bold blue" if line.endswith("/") else ""
            console.print(Text(line, style=style))
        return
    if block.kind is BlockKind.POST and block.post is not None:
        post = block.post
        header = post.title or block.text
        if post.date:
            header = f"{header} ({post.date})" if header else post.date
        if plain:
            if header:
                console.print(Text(header, style="bold"))
            console.print(Text(block.plain_text()))
            return
        console.print(
            Panel(
                Padding(Markdown(post.body), (0, 1)),
                title=header or None,
                box=box.ROUNDED,
                border_style="magenta",
                expand=True,
            )
        )
        return
    console.print(Text(block.plain_text()))


def interactive_main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="blog-terminal",
        description="Browse the blog from a simulated terminal.",
    )
    parser.add_argument(
        "--backend",
        choices=["http", "static"],
        default=None,
        help="Content backend (default: BLOG_CONTENT_BACKEND or http)",
    )
    parser.add_argument(
        "--api-url", default=None, help="Directory-listing endpoint for the http backend"
    )
    parser.add_argument(
        "--posts-dir", default=None, help="Name of the posts folder (default: _posts)"
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Render posts as plain text (no Markdown/Panel)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    s = container.settings
    if args.backend:
        s.content_backend = args.backend
    if args.api_url:
        s.content_api_url = args.api_url.rstrip("/")
    if args.posts_dir:
        s.posts_dir = args.posts_dir.strip("/")

    try:
        session = container.create_session()
    except BaseAppError as e:
        print(f"Failed to start: {e}", file=sys.stderr)
        return 2

    console = Console(highlight=False, soft_wrap=True)
    for block in session.start():
        render_block(console, block, plain=args.plain)

    while True:
        try:
            console.print(Text(session.prompt, style="bold green"), end="")
            line = input()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            break

        turn = session.run_turn(line)
        if turn.cleared:
            console.clear()
        for block in turn.blocks:
            render_block(console, block, plain=args.plain)

    return 0


def main(argv: Optional[list[str]] = None) -> int:  # pragma: no cover
    return interactive_main(argv)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
