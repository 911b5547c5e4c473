# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Tests for the card severity policy (metric thresholds + RED/low-score fallback)."""

from __future__ import annotations

from decimal import Decimal
from types import SimpleNamespace

import pytest

from app.core.cards.models import CardSeverity, Diagnostic, DiagnosticStatus
from app.core.cards.severity_policy import (
    SEVERITY_RULES,
    classify,
    compute_severity,
    rules_for,
)

EXTREME = CardSeverity.EXTREME
NORMAL = CardSeverity.NORMAL


def _card(card_id, details=None, status="GREEN", score=90):
    return Diagnostic(id=card_id, status=status, score=score, details=details)


# (card_id, field, value at boundary, value one unit past it on the safe side)
BOUNDARIES = [
    ("riskDiversification", "topHoldingPct", 25, 24),
    ("costAnalysis", "weightedExpenseRatioPct", 0.8, 0.7),
    ("downsideResilience", "maxDrawdownPct", -25, -24),
    ("downsideResilience", "downsideCapture", 120, 119),
    ("performanceOptimization", "alphaPct", -3, -2),
    ("taxEfficiency", "taxDragPct", 1.0, 0.9),
    ("lifetimeIncomeSecurity", "fundedRatioPct", 79, 80),
]


@pytest.mark.parametrize("card_id, field, at_boundary, safe", BOUNDARIES)
def test_threshold_boundary_is_extreme(card_id, field, at_boundary, safe):
    assert compute_severity(_card(card_id, {field: at_boundary})) is EXTREME


@pytest.mark.parametrize("card_id, field, at_boundary, safe", BOUNDARIES)
def test_past_boundary_falls_back_to_status_heuristic(card_id, field, at_boundary, safe):
    """Below the threshold the metric rule is silent; the fallback decides."""
    assert compute_severity(_card(card_id, {field: safe}, status="GREEN", score=90)) is NORMAL
    assert compute_severity(_card(card_id, {field: safe}, status="RED", score=30)) is EXTREME
    assert compute_severity(_card(card_id, {field: safe}, status="RED", score=36)) is NORMAL


def test_funded_ratio_threshold_is_strict():
    assert compute_severity(_card("lifetimeIncomeSecurity", {"fundedRatioPct": 79.99})) is EXTREME
    assert compute_severity(_card("lifetimeIncomeSecurity", {"fundedRatioPct": 80})) is NORMAL


@pytest.mark.parametrize(
    "card_id, field",
    [
        ("riskDiversification", "topHoldingPercent"),
        ("riskDiversification", "concentrationTopPct"),
        ("costAnalysis", "expenseRatioPct"),
        ("costAnalysis", "feesPct"),
        ("downsideResilience", "maxDrawdown"),
        ("downsideResilience", "drawdownPct"),
        ("downsideResilience", "downsideCapturePct"),
        ("performanceOptimization", "alpha"),
        ("performanceOptimization", "underperformancePct"),
        ("taxEfficiency", "taxCostPct"),
        ("taxEfficiency", "afterTaxGapPct"),
        ("lifetimeIncomeSecurity", "incomeFundedPct"),
        ("lifetimeIncomeSecurity", "coveragePct"),
    ],
)
def test_every_synonym_is_recognised(card_id, field):
    rule = next(r for r in rules_for(card_id) if field in r.candidate_keys)
    assert compute_severity(_card(card_id, {field: rule.threshold - 1 if rule.op == "<" else rule.threshold})) is EXTREME


def test_first_listed_candidate_wins():
    """topHoldingPct=10 is evaluated, topHoldingPercent=30 is ignored."""
    card = _card("riskDiversification", {"topHoldingPct": 10, "topHoldingPercent": 30})
    assert compute_severity(card) is NORMAL


def test_unparseable_first_candidate_falls_through_to_next():
    card = _card("riskDiversification", {"topHoldingPct": "n/a", "topHoldingPercent": "30%"})
    assert compute_severity(card) is EXTREME


def test_string_metrics_are_cleaned():
    assert compute_severity(_card("riskDiversification", {"topHoldingPct": "25%"})) is EXTREME
    assert compute_severity(_card("costAnalysis", {"feesPct": "0.85 %"})) is EXTREME
    assert compute_severity(_card("downsideResilience", {"maxDrawdownPct": "-30%"})) is EXTREME


def test_downside_resilience_rules_are_or():
    mild_dd_bad_capture = {"maxDrawdownPct": -10, "downsideCapture": 130}
    assert compute_severity(_card("downsideResilience", mild_dd_bad_capture)) is EXTREME
    deep_dd_good_capture = {"maxDrawdownPct": -40, "downsideCapture": 80}
    assert compute_severity(_card("downsideResilience", deep_dd_good_capture)) is EXTREME
    both_fine = {"maxDrawdownPct": -10, "downsideCapture": 80}
    assert compute_severity(_card("downsideResilience", both_fine)) is NORMAL


def test_unknown_id_uses_fallback():
    assert compute_severity(_card("crossAccountConcentration", status="RED", score=30)) is EXTREME
    assert compute_severity(_card("crossAccountConcentration", status="RED", score=40)) is NORMAL


def test_fallback_boundary_is_inclusive():
    assert compute_severity(_card("summary", status="RED", score=35)) is EXTREME
    assert compute_severity(_card("summary", status="YELLOW", score=10)) is NORMAL


def test_metric_rule_wins_over_green_status():
    """A metric breach is EXTREME even when status/score look healthy."""
    card = _card("costAnalysis", {"weightedExpenseRatioPct": 1.2}, status="GREEN", score=95)
    assert compute_severity(card) is EXTREME


def test_missing_or_empty_details_never_raise():
    assert compute_severity(_card("taxEfficiency", None)) is NORMAL
    assert compute_severity(_card("taxEfficiency", {})) is NORMAL
    assert compute_severity({"id": "taxEfficiency"}) is NORMAL
    assert compute_severity({"id": "taxEfficiency", "details": "garbage", "status": "PURPLE", "score": "x"}) is NORMAL
    assert compute_severity(SimpleNamespace()) is NORMAL


def test_fields_of_other_kinds_do_not_leak():
    """coveragePct belongs to lifetimeIncomeSecurity; it must not affect other kinds."""
    details = {"coveragePct": 10, "feesPct": 5, "taxDragPct": 4}
    assert compute_severity(_card("riskDiversification", details)) is NORMAL
    assert compute_severity(_card("lifetimeIncomeSecurity", {"feesPct": 5})) is NORMAL


def test_accepts_mappings_and_plain_objects():
    as_dict = {"id": "riskDiversification", "status": "GREEN", "score": 80, "details": {"topHoldingPct": 26}}
    assert compute_severity(as_dict) is EXTREME
    as_obj = SimpleNamespace(id="summary", status=DiagnosticStatus.RED, score=20, details={})
    assert compute_severity(as_obj) is EXTREME


def test_classify_is_idempotent():
    card = _card("performanceOptimization", {"alphaPct": "-3.5"}, status="YELLOW", score=55)
    first = classify(card)
    second = classify(card)
    assert first is second is EXTREME
    assert dict(card.details) == {"alphaPct": "-3.5"}


def test_rule_table_is_ordered_data():
    ids = [r.card_id for r in SEVERITY_RULES]
    assert ids.count("downsideResilience") == 2
    assert [r.name for r in rules_for("downsideResilience")] == ["max_drawdown", "downside_capture"]
    assert rules_for("riskAdjusted") == ()


def test_huge_and_decimal_metrics():
    """Oversized integers never raise; Decimal values are real metrics."""
    huge = _card("riskDiversification", {"topHoldingPct": 10**400}, status="GREEN", score=90)
    assert compute_severity(huge) is NORMAL
    assert compute_severity(_card("taxEfficiency", {"taxDragPct": Decimal("1.25")})) is EXTREME


def test_missing_score_still_classified_by_metric():
    assert compute_severity({"id": "costAnalysis", "status": "RED", "score": None, "details": {"feesPct": 0.9}}) is EXTREME
    assert compute_severity(_card("summary", status="RED", score=None)) is NORMAL
