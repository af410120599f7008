"""
Server entry point.

Usage:
    python -m sage.api.run
    python -m sage.api.run --port 8000 --catalog hemp

For auto-reload during development, use uvicorn directly:
    uvicorn sage.api.app:create_app --factory --reload --port 8000
"""

from __future__ import annotations

import argparse
import os

import uvicorn

from sage.api.app import create_app
from sage.config import CATALOG_NAME, configure_logging
from sage.data.catalog import CATALOGS


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Sage API server")
    parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    parser.add_argument(
        "--port", type=int,
        default=int(os.getenv("PORT", "8000")),
        help="Port (defaults to PORT env var, then 8000)",
    )
    parser.add_argument(
        "--catalog",
        type=str.lower,
        choices=sorted(CATALOGS),
        default=CATALOG_NAME,
        help="Product catalog to serve (defaults to SAGE_CATALOG)",
    )
    args = parser.parse_args(argv)

    # argparse does not check defaults against choices
    if args.catalog not in CATALOGS:
        parser.error(
            f"SAGE_CATALOG={args.catalog!r} is not a known catalog "
            f"(choose from {', '.join(sorted(CATALOGS))})"
        )

    configure_logging()

    app = create_app(args.catalog)
    uvicorn.run(app, host=args.host, port=args.port, log_level="info")


if __name__ == "__main__":
    main()
