# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Build card contracts from upstream diagnostics. Deterministic; no I/O."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from app.core.cards.copy import (
    ICON_NAMES,
    default_actions_for,
    subtitle_for,
    title_for,
    why_it_matters_for,
)
from app.core.cards.models import CardContract, CardSeverity, Diagnostic, Recommendation
from app.core.cards.severity_policy import compute_severity

logger = logging.getLogger(__name__)

DiagnosticInput = Union[Diagnostic, Mapping[str, Any]]
RecommendationInput = Union[Recommendation, Mapping[str, Any]]


def _as_diagnostic(item: DiagnosticInput) -> Diagnostic:
    if isinstance(item, Diagnostic):
        return item
    return Diagnostic.from_dict(item)


def _as_recommendation(item: RecommendationInput) -> Recommendation:
    if isinstance(item, Recommendation):
        return item
    return Recommendation.from_dict(item)


def build_card_contract(
    diagnostic: Diagnostic,
    recommendations: Sequence[Recommendation] = (),
) -> CardContract:
    """One CardContract; recommendations are filtered to this card's category."""
    card_id = diagnostic.id
    return CardContract(
        id=card_id,
        title=title_for(card_id),
        subtitle=subtitle_for(card_id),
        icon_name=ICON_NAMES.get(card_id),
        why_it_matters=why_it_matters_for(card_id),
        status=diagnostic.status,
        score=diagnostic.score,
        severity=compute_severity(diagnostic),
        key_finding=diagnostic.key_finding,
        headline_metric=diagnostic.headline_metric,
        details=diagnostic.details,
        recommendations=tuple(r for r in recommendations if r.category == card_id),
        actions=default_actions_for(card_id),
    )


def build_card_contracts(
    diagnostics: Iterable[DiagnosticInput],
    recommendations: Iterable[RecommendationInput] = (),
) -> List[CardContract]:
    """Build card contracts in input order.

    Parameters
    ----------
    diagnostics:
        Diagnostic records or their dict form ({id, status, score, details}).
    recommendations:
        Upstream recommendations; each lands on the card whose id matches its
        ``category``. Uncategorised recommendations are attached to no card.
    """
    recs = [_as_recommendation(r) for r in recommendations]
    cards = [build_card_contract(_as_diagnostic(d), recs) for d in diagnostics]
    extreme = sum(1 for c in cards if c.severity is CardSeverity.EXTREME)
    logger.debug("[CARDS] built %d cards (%d EXTREME)", len(cards), extreme)
    return cards


def get_card_by_id(cards: Iterable[CardContract], card_id: Optional[str]) -> Optional[CardContract]:
    if not card_id:
        return None
    for card in cards:
        if str(card.id) == str(card_id):
            return card
    return None


__all__ = ["build_card_contract", "build_card_contracts", "get_card_by_id"]
