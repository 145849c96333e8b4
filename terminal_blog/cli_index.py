import argparse
import logging
import os
from pathlib import Path

from terminal_blog.exceptions import PostIndexError
from terminal_blog.use_cases.index.build_post_index import PostIndexBuilder, write_index

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="blog-index",
        description="Scan a folder of HTML posts and write a JSON index, newest first.",
    )
    parser.add_argument(
        "--repo-root", default=".", help="Repository root (default: current directory)"
    )
    parser.add_argument(
        "--posts-dir", default="posts", help="Posts folder, relative to the repo root"
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Output file (default: <repo-root>/posts.json)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    repo_root = Path(args.repo_root)
    output = Path(args.output) if args.output else repo_root / "posts.json"
    builder = PostIndexBuilder(repo_root, Path(args.posts_dir))
    try:
        posts = builder.build()
        write_index(posts, output)
    except (PostIndexError, OSError) as e:
        logger.error(f"Failed to build post index: {e}")
        return 1

    logger.info(f"Wrote {len(posts)} posts to {output}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
