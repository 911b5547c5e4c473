# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Shock Watch detection over the current card set.

Rules
-----
- EXTREME: two or more EXTREME cards, or two or more RED cards.
- ELEVATED: one EXTREME or RED card, or two or more YELLOW cards whose lowest
  score is at or below the configured yellow threshold (60).
- NORMAL: no alert.

EXTREME is kept rare on purpose; single red flags only elevate.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from app.core.cards.models import CardAction, CardContract, CardSeverity, DiagnosticStatus
from app.core.settings import ShockConfig, get_shock_config
from app.core.shock.models import ShockAlert, ShockSeverity, ShockSignal
from app.core.shock.synthesizer import synthesize_shock_alert

logger = logging.getLogger(__name__)

_TITLES: Dict[ShockSeverity, str] = {
    ShockSeverity.EXTREME: "Shock Watch: High Fragility Detected",
    ShockSeverity.ELEVATED: "Shock Watch: Elevated Risk Signals",
}

_MESSAGES: Dict[ShockSeverity, str] = {
    ShockSeverity.EXTREME: (
        "Your portfolio shows extreme fragility signals. In a sudden market move, "
        "these can force painful decisions. Address the top drivers below first."
    ),
    ShockSeverity.ELEVATED: (
        "Your portfolio shows elevated risk signals. Consider small, high-impact "
        "adjustments to reduce downside exposure."
    ),
}


def compute_shock_severity(
    cards: Sequence[CardContract],
    elevated_yellow_score: float = 60.0,
) -> ShockSeverity:
    extreme_count = sum(1 for c in cards if c.severity is CardSeverity.EXTREME)
    red_count = sum(1 for c in cards if c.status is DiagnosticStatus.RED)
    yellow_scores = [
        c.score for c in cards if c.status is DiagnosticStatus.YELLOW and c.score is not None
    ]

    if extreme_count >= 2 or red_count >= 2:
        return ShockSeverity.EXTREME
    if extreme_count >= 1 or red_count >= 1:
        return ShockSeverity.ELEVATED
    if len(yellow_scores) >= 2 and min(yellow_scores) <= elevated_yellow_score:
        return ShockSeverity.ELEVATED
    return ShockSeverity.NORMAL


def driver_line(card: CardContract) -> str:
    """Short, human driver text: "<title>: <finding>"."""
    base = card.title or str(card.id)
    if card.key_finding:
        return f"{base}: {card.key_finding}"
    if card.headline_metric:
        return f"{base}: {card.headline_metric}"
    return base


def merge_actions(cards: Sequence[CardContract], limit: int) -> Tuple[CardAction, ...]:
    """Card actions in order, de-duplicated on (kind, deep_link, label)."""
    seen = set()
    merged: List[CardAction] = []
    for card in cards:
        for action in card.actions:
            key = (action.kind, action.deep_link or "", action.label)
            if key in seen:
                continue
            seen.add(key)
            merged.append(action)
    return tuple(merged[: max(0, limit)])


def detect_shock_alert(
    cards: Sequence[CardContract],
    config: Optional[ShockConfig] = None,
) -> Optional[ShockAlert]:
    """Return a ShockAlert when the card set warrants one, else None."""
    if not cards:
        return None
    cfg = config or get_shock_config()

    severity = compute_shock_severity(cards, cfg.elevated_yellow_score)
    if severity is ShockSeverity.NORMAL:
        logger.debug("[SHOCK] no shock across %d cards", len(cards))
        return None

    extreme_cards = [c for c in cards if c.severity is CardSeverity.EXTREME]
    red_cards = [c for c in cards if c.status is DiagnosticStatus.RED]
    source = extreme_cards or red_cards

    # unscored cards rank after scored ones
    ranked = sorted(source, key=lambda c: (c.score is None, c.score or 0.0))
    drivers = [driver_line(c) for c in ranked[: max(0, cfg.max_drivers)]]

    return synthesize_shock_alert(
        ShockSignal(
            severity=severity,
            title=_TITLES[severity],
            message=_MESSAGES[severity],
            drivers=drivers,
            actions=merge_actions(source, cfg.max_actions),
        )
    )


__all__ = ["compute_shock_severity", "detect_shock_alert", "driver_line", "merge_actions"]
