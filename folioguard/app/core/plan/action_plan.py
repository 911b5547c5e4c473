# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Priority Action Plan: select and order recommendations across all cards.

The plan is recomputed from the current card set on every evaluation; nothing
is persisted and recommendations are never mutated.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from app.core.cards.models import CardContract, Recommendation

logger = logging.getLogger(__name__)

URGENCY_HIGH = "High"
URGENCY_MEDIUM = "Medium"
URGENCY_LOW = "Low"


def urgency_label(priority: int) -> str:
    """Map a recommendation priority to its display urgency.

    Priorities 1 and 2 both read "High"; 3 is "Medium"; 4 and above "Low".
    """
    if priority <= 2:
        return URGENCY_HIGH
    if priority == 3:
        return URGENCY_MEDIUM
    return URGENCY_LOW


def _impact_length(rec: Recommendation) -> int:
    return len(rec.impact or "")


def build_action_plan(
    cards: Iterable[CardContract],
    max_items: Optional[int] = None,
) -> List[Recommendation]:
    """Build the ranked action plan from the cards' recommendations.

    Parameters
    ----------
    cards:
        Card contracts; their ``recommendations`` are collected in card order.
    max_items:
        Plan length cap. Defaults to the configured action_plan.max_items.

    Ordering
    --------
    1. De-duplicate by id: a later duplicate replaces the earlier value but
       keeps the earlier position.
    2. Priority ascending (1 = most urgent).
    3. Longer impact text first (stable for equal lengths).
    """
    if max_items is None:
        from app.core.settings import get_plan_max_items
        max_items = get_plan_max_items()

    by_id: Dict[str, Recommendation] = {}
    for card in cards:
        for rec in card.recommendations:
            by_id[rec.id] = rec

    ranked = sorted(by_id.values(), key=lambda r: (r.priority, -_impact_length(r)))
    plan = ranked[: max(0, max_items)]
    logger.info(
        "[ACTION_PLAN] %d recommendation(s) -> %d planned (cap=%d)",
        len(by_id), len(plan), max_items,
    )
    return plan


__all__ = [
    "URGENCY_HIGH",
    "URGENCY_LOW",
    "URGENCY_MEDIUM",
    "build_action_plan",
    "urgency_label",
]
