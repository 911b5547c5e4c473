# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Diagnostic cards: models, metric extraction, severity policy, card contracts."""

from app.core.cards.build_cards import build_card_contracts, get_card_by_id
from app.core.cards.metrics import as_number, extract_metric
from app.core.cards.models import (
    CardAction,
    CardActionKind,
    CardContract,
    CardSeverity,
    Diagnostic,
    DiagnosticStatus,
    Recommendation,
)
from app.core.cards.severity_policy import SEVERITY_RULES, classify, compute_severity

__all__ = [
    "CardAction",
    "CardActionKind",
    "CardContract",
    "CardSeverity",
    "Diagnostic",
    "DiagnosticStatus",
    "Recommendation",
    "SEVERITY_RULES",
    "as_number",
    "build_card_contracts",
    "classify",
    "compute_severity",
    "extract_metric",
    "get_card_by_id",
]
