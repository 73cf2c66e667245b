"""
QuickNotes Backend: Command-Line Entry Point
===============================================

Usage:
    python -m quicknotes [--addr HOST:PORT]
    quicknotes [--addr HOST:PORT]

The flag overrides the ADDR setting (default ":80").
"""

import argparse
import logging
from typing import List, Optional

import uvicorn

from quicknotes.config import settings, split_addr
from quicknotes.main import app, setup_logging

logger = logging.getLogger("quicknotes")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quicknotes", description="Run the QuickNotes HTTP API.")
    parser.add_argument(
        "--addr",
        default=settings.addr,
        help=f"Address to run API HTTP server on (default: {settings.addr})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        host, port = split_addr(args.addr)
    except ValueError as e:
        parser.error(str(e))

    setup_logging()
    logger.info("Starting HTTP server on %s", args.addr)
    uvicorn.run(app, host=host, port=port, log_config=None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
