# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Severity policy: decide whether a diagnostic card is in an EXTREME state.

Metric rules are kind-specific and take precedence. The status/score heuristic
is a single last-resort branch for cards whose details carry no usable metric.

Thresholds (v1):
- riskDiversification: top holding >= 25%
- costAnalysis: weighted expense ratio >= 0.80%
- downsideResilience: max drawdown <= -25% OR downside capture >= 120
- performanceOptimization: alpha <= -3%
- taxEfficiency: tax drag >= 1.0%
- lifetimeIncomeSecurity: funded ratio < 80%
Fallback: RED with score <= 35.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from app.core.cards.metrics import extract_metric
from app.core.cards.models import CardSeverity, DiagnosticStatus, coerce_status

logger = logging.getLogger(__name__)

FALLBACK_MAX_SCORE = 35.0

_COMPARATORS: Dict[str, Callable[[float, float], bool]] = {
    ">=": operator.ge,
    "<=": operator.le,
    "<": operator.lt,
}


@dataclass(frozen=True)
class MetricRule:
    """One row of the severity table: EXTREME when `value <op> threshold`."""

    card_id: str
    name: str
    candidate_keys: Tuple[str, ...]
    op: str
    threshold: float

    def evaluate(self, details: Optional[Mapping[str, Any]]) -> Optional[float]:
        """Return the metric value if it crosses the threshold, else None."""
        value = extract_metric(details, self.candidate_keys)
        if value is None:
            return None
        if _COMPARATORS[self.op](value, self.threshold):
            return value
        return None


SEVERITY_RULES: Tuple[MetricRule, ...] = (
    MetricRule(
        card_id="riskDiversification",
        name="top_holding",
        candidate_keys=("topHoldingPct", "topHoldingPercent", "concentrationTopPct"),
        op=">=",
        threshold=25.0,
    ),
    MetricRule(
        card_id="costAnalysis",
        name="expense_ratio",
        candidate_keys=("weightedExpenseRatioPct", "expenseRatioPct", "feesPct"),
        op=">=",
        threshold=0.8,
    ),
    MetricRule(
        card_id="downsideResilience",
        name="max_drawdown",
        candidate_keys=("maxDrawdownPct", "maxDrawdown", "drawdownPct"),
        op="<=",
        threshold=-25.0,
    ),
    MetricRule(
        card_id="downsideResilience",
        name="downside_capture",
        candidate_keys=("downsideCapture", "downsideCapturePct"),
        op=">=",
        threshold=120.0,
    ),
    MetricRule(
        card_id="performanceOptimization",
        name="alpha",
        candidate_keys=("alphaPct", "alpha", "underperformancePct"),
        op="<=",
        threshold=-3.0,
    ),
    MetricRule(
        card_id="taxEfficiency",
        name="tax_drag",
        candidate_keys=("taxDragPct", "taxCostPct", "afterTaxGapPct"),
        op=">=",
        threshold=1.0,
    ),
    MetricRule(
        card_id="lifetimeIncomeSecurity",
        name="funded_ratio",
        candidate_keys=("fundedRatioPct", "incomeFundedPct", "coveragePct"),
        op="<",
        threshold=80.0,
    ),
)


def rules_for(card_id: str) -> Tuple[MetricRule, ...]:
    """Metric rules for a diagnostic kind, in evaluation order."""
    return tuple(rule for rule in SEVERITY_RULES if rule.card_id == card_id)


def _field(card: Any, name: str, default: Any = None) -> Any:
    if isinstance(card, Mapping):
        return card.get(name, default)
    return getattr(card, name, default)


def _is_fallback_extreme(status: Any, score: Any) -> bool:
    try:
        is_red = coerce_status(status) is DiagnosticStatus.RED
    except ValueError:
        return False
    if isinstance(score, bool):
        return False
    try:
        return is_red and float(score) <= FALLBACK_MAX_SCORE
    except (TypeError, ValueError):
        return False


def compute_severity(card: Any) -> CardSeverity:
    """Classify a diagnostic as EXTREME or NORMAL.

    ``card`` may be a Diagnostic/CardContract, any object with ``id``,
    ``status``, ``score`` and ``details`` attributes, or a mapping with those
    keys. Missing or malformed fields never raise; they fall through to the
    status/score heuristic.
    """
    card_id = str(_field(card, "id", "") or "")
    details = _field(card, "details")

    for rule in rules_for(card_id):
        value = rule.evaluate(details)
        if value is not None:
            logger.debug(
                "[SEVERITY] %s EXTREME via %s=%s (%s %s)",
                card_id, rule.name, value, rule.op, rule.threshold,
            )
            return CardSeverity.EXTREME

    if _is_fallback_extreme(_field(card, "status"), _field(card, "score")):
        logger.debug("[SEVERITY] %s EXTREME via RED/low-score fallback", card_id)
        return CardSeverity.EXTREME
    return CardSeverity.NORMAL


classify = compute_severity


__all__ = [
    "FALLBACK_MAX_SCORE",
    "MetricRule",
    "SEVERITY_RULES",
    "classify",
    "compute_severity",
    "rules_for",
]
