#!/usr/bin/env python3
# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Run the FolioGuard REST API. Serves /api/cards/*, /api/view/* and /health."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

repo_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(repo_root))

from dotenv import load_dotenv

load_dotenv(repo_root / ".env")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run FolioGuard API server")
    parser.add_argument("--host", default="127.0.0.1", help="Bind host")
    parser.add_argument("--port", type=int, default=8000, help="Port")
    args = parser.parse_args()

    import uvicorn

    from app.core.settings import load_config

    config = load_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    from app.api.server import app

    uvicorn.run(app, host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
