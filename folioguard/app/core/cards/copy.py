# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Display copy per diagnostic kind: titles, "why it matters", default actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from app.core.cards.models import CardAction, CardActionKind

DIAGNOSTIC_KINDS: Tuple[str, ...] = (
    "riskDiversification",
    "downsideResilience",
    "performanceOptimization",
    "costAnalysis",
    "taxEfficiency",
    "riskAdjusted",
    "planningGaps",
    "lifetimeIncomeSecurity",
    "performanceMetrics",
    "summary",
)


@dataclass(frozen=True)
class CardCopy:
    title: str
    subtitle: Optional[str] = None


CARD_COPY: Dict[str, CardCopy] = {
    "riskDiversification": CardCopy(
        "Diversification Check", "Are you too concentrated in one stock, fund, or sector?"
    ),
    "downsideResilience": CardCopy(
        "Market Drop Risk", "How much could your portfolio fall in a bad market?"
    ),
    "performanceOptimization": CardCopy(
        "Performance vs Benchmark", "Are you keeping up with the market for your risk level?"
    ),
    "costAnalysis": CardCopy("Fees & Fund Costs", "How much fees may be quietly costing you"),
    "taxEfficiency": CardCopy("Tax Efficiency", "Are you paying more taxes than you need to?"),
    "riskAdjusted": CardCopy("Risk vs Return", "Are you being rewarded for the risk you're taking?"),
    "planningGaps": CardCopy("Planning Checklist", "Common money basics that protect your plan"),
    "lifetimeIncomeSecurity": CardCopy(
        "Retirement Readiness", "Will your assets support your spending for life?"
    ),
    "performanceMetrics": CardCopy(
        "Performance Details", "Returns, volatility, and drawdowns in one place"
    ),
    "summary": CardCopy("Your Portfolio Snapshot", "Biggest risks first, then quick wins"),
}

# Title only, for kinds without a full CARD_COPY entry
FALLBACK_TITLES: Dict[str, str] = {
    "crossAccountConcentration": "Cross-Account Risk",
}

ICON_NAMES: Dict[str, str] = {
    "riskDiversification": "PieChart",
    "downsideResilience": "ShieldAlert",
    "performanceOptimization": "TrendingUp",
    "costAnalysis": "Percent",
    "taxEfficiency": "Receipt",
    "riskAdjusted": "Activity",
    "planningGaps": "ClipboardList",
    "lifetimeIncomeSecurity": "Wallet",
    "performanceMetrics": "BarChart",
    "crossAccountConcentration": "Layers",
}

DEFAULT_WHY = "This diagnostic highlights a portfolio health dimension."

WHY_IT_MATTERS: Dict[str, str] = {
    "riskDiversification": (
        "Spreading your money across different investments helps protect you if one drops sharply."
    ),
    "downsideResilience": (
        "Understanding how much you could lose in a bad market helps you avoid "
        "panic-selling at the worst time."
    ),
    "performanceOptimization": (
        "Comparing your returns to the market shows whether your investments are "
        "working as hard as they could."
    ),
    "costAnalysis": (
        "Investment fees add up over time. Even small reductions can mean thousands more in your pocket."
    ),
    "taxEfficiency": (
        "Keeping more of what you earn by reducing unnecessary taxes is one of the "
        "easiest wins in investing."
    ),
    "riskAdjusted": (
        "This checks if the ups and downs you're experiencing are worth the returns you're getting."
    ),
    "planningGaps": (
        "Having basics like an emergency fund and insurance in place protects your "
        "investments from life surprises."
    ),
    "lifetimeIncomeSecurity": (
        "Knowing your retirement income is secure lets you enjoy your savings without worry."
    ),
    "performanceMetrics": (
        "These numbers help you understand your portfolio's behavior in a consistent, comparable way."
    ),
    "crossAccountConcentration": (
        "Hidden overlap increases risk because one company or investment can quietly "
        "drive your entire outcome across all accounts."
    ),
}

_DEFAULT_ACTIONS: Dict[str, Tuple[CardAction, ...]] = {
    "riskDiversification": (
        CardAction("Review concentration & allocation", CardActionKind.DIVERSIFY, "/portfolio"),
    ),
    "downsideResilience": (
        CardAction("Stress test and reduce tail risk", CardActionKind.RISK_REDUCE, "/portfolio"),
    ),
    "performanceOptimization": (
        CardAction("Compare performance vs benchmark", CardActionKind.BENCHMARK, "/dashboard"),
    ),
    "costAnalysis": (
        CardAction("Find high-fee holdings", CardActionKind.REDUCE_FEES, "/holdings"),
    ),
    "taxEfficiency": (
        CardAction("Improve tax location and harvesting", CardActionKind.TAX_OPTIMIZE, "/advisor"),
    ),
    "riskAdjusted": (
        CardAction("Improve risk-adjusted returns", CardActionKind.RISK_REDUCE, "/dashboard"),
    ),
    "planningGaps": (
        CardAction("Close planning checklist gaps", CardActionKind.LEARN, "/planning"),
    ),
    "lifetimeIncomeSecurity": (
        CardAction("Review income coverage", CardActionKind.LEARN, "/income"),
    ),
    "performanceMetrics": (
        CardAction("Review performance metrics detail", CardActionKind.BENCHMARK, "/dashboard"),
    ),
    "crossAccountConcentration": (
        CardAction("Reduce overlap", CardActionKind.DIVERSIFY, "/holdings"),
        CardAction("Balance exposures", CardActionKind.REBALANCE, "/holdings"),
    ),
}

_LEARN_MORE: Tuple[CardAction, ...] = (CardAction("Learn more", CardActionKind.LEARN),)


def title_for(card_id: str) -> str:
    copy = CARD_COPY.get(card_id)
    if copy is not None:
        return copy.title
    return FALLBACK_TITLES.get(card_id, str(card_id))


def subtitle_for(card_id: str) -> Optional[str]:
    copy = CARD_COPY.get(card_id)
    return copy.subtitle if copy is not None else None


def why_it_matters_for(card_id: str) -> str:
    return WHY_IT_MATTERS.get(card_id, DEFAULT_WHY)


def default_actions_for(card_id: str) -> Tuple[CardAction, ...]:
    """Default suggested actions; unknown kinds get an informational "Learn more"."""
    return _DEFAULT_ACTIONS.get(card_id, _LEARN_MORE)


__all__ = [
    "CARD_COPY",
    "DIAGNOSTIC_KINDS",
    "CardCopy",
    "default_actions_for",
    "subtitle_for",
    "title_for",
    "why_it_matters_for",
]
