# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Metric extraction from untyped diagnostic detail bags.

Upstream field names have drifted over time (``maxDrawdownPct`` vs
``maxDrawdown`` vs ``drawdownPct``), so callers pass an explicit ordered list
of synonyms and the first one that yields a finite number wins.
"""

from __future__ import annotations

import math
import numbers
import re
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional

_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def as_number(value: Any) -> Optional[float]:
    """Convert a detail value to a finite float; return None if not numeric.

    Strings are cleaned of everything except digits, '.' and '-' first, so
    "25%" -> 25.0 and "$1,234.5" -> 1234.5. Booleans are not numbers.
    Values too large for a float are not present either.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (numbers.Real, Decimal)):
        try:
            number = float(value)
        except (OverflowError, ValueError):
            return None
        return number if math.isfinite(number) else None
    if isinstance(value, str):
        cleaned = _NON_NUMERIC.sub("", value)
        if not cleaned:
            return None
        try:
            number = float(cleaned)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def extract_metric(
    details: Optional[Mapping[str, Any]],
    candidate_keys: Iterable[str],
) -> Optional[float]:
    """Return the first candidate key whose value parses to a finite number."""
    if not isinstance(details, Mapping):
        return None
    for key in candidate_keys:
        if key not in details:
            continue
        number = as_number(details[key])
        if number is not None:
            return number
    return None


__all__ = ["as_number", "extract_metric"]
