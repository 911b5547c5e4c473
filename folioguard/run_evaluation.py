#!/usr/bin/env python3
# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""
FolioGuard Evaluation CLI.

Reads a JSON snapshot of diagnostics (and optional recommendations and
dismissed alert keys) and prints the dashboard view: card severities, the
priority action plan and the Shock Watch alert.

Usage:
    python run_evaluation.py snapshot.json
    python run_evaluation.py snapshot.json --max-items 3 --pretty
    cat snapshot.json | python run_evaluation.py -

Snapshot format:
    {"diagnostics": [{"id": "costAnalysis", "status": "RED", "score": 30,
                      "details": {"weightedExpenseRatioPct": "0.95%"}}],
     "recommendations": [{"id": "cut-fees", "title": "Cut fees", "priority": 1,
                          "category": "costAnalysis"}],
     "dismissed": []}
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _read_snapshot(source: str) -> Dict[str, Any]:
    if source == "-":
        data = json.load(sys.stdin)
    else:
        with open(source, "r", encoding="utf-8") as f:
            data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("snapshot must be a JSON object")
    return data


def main() -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="FolioGuard Evaluation CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("snapshot", help="Path to snapshot JSON, or '-' for stdin")
    parser.add_argument(
        "--max-items",
        type=int,
        default=None,
        help="Action plan length cap (default: config action_plan.max_items)",
    )
    parser.add_argument("--pretty", action="store_true", help="Indent JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    args = parser.parse_args()

    load_dotenv(Path(__file__).resolve().parent / ".env")

    from app.core.cards.models import Diagnostic, Recommendation
    from app.core.settings import load_config
    from app.ui_contracts.view_builders import build_dashboard_view

    config = load_config()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        snapshot = _read_snapshot(args.snapshot)
        diagnostics = [Diagnostic.from_dict(d) for d in snapshot.get("diagnostics") or []]
        recommendations = [Recommendation.from_dict(r) for r in snapshot.get("recommendations") or []]
    except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        logger.error("Invalid snapshot %s: %s", args.snapshot, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    view = build_dashboard_view(
        diagnostics,
        recommendations,
        dismissed=snapshot.get("dismissed") or [],
        max_items=args.max_items,
    )
    print(json.dumps(view.to_dict(), indent=2 if args.pretty else None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
