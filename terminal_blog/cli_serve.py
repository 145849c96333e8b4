"""
blog-serve: run the terminal session API under uvicorn.

Flags override the HOST, PORT and RELOAD environment variables.
"""

import argparse
import os

import uvicorn


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="blog-serve",
        description="Serve the terminal blog session API.",
    )
    parser.add_argument(
        "--host",
        default=os.getenv("HOST", "127.0.0.1"),
        help="Interface to bind (default: HOST or 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", "8000")),
        help="Port to listen on (default: PORT or 8000)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        default=os.getenv("RELOAD", "0") in {"1", "true", "True"},
        help="Restart on code changes (default: RELOAD)",
    )
    args = parser.parse_args(argv)

    uvicorn.run("terminal_blog.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
