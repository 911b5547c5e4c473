# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""View builders: pure functions that build UI view models from engine output."""

from __future__ import annotations

import logging
from typing import Any, AbstractSet, Callable, Iterable, Optional, Sequence, Union

from app.core.cards.build_cards import build_card_contracts
from app.core.cards.models import CardAction, CardContract, CardSeverity, Recommendation
from app.core.plan.action_plan import build_action_plan, urgency_label
from app.core.shock.detector import detect_shock_alert
from app.core.shock.fingerprint import alert_key, dismissal_snapshot
from app.core.shock.models import ShockAlert
from app.ui_contracts.view_models import (
    ActionPlanItemView,
    ActionPlanView,
    AlertActionView,
    CardView,
    DashboardView,
    ShockAlertView,
)

logger = logging.getLogger(__name__)

NO_CRITICAL_ACTIONS_MESSAGE = (
    "No critical actions detected right now. "
    "Review diagnostics below for optimization opportunities."
)


def build_card_view(card: CardContract) -> CardView:
    return CardView(
        id=card.id,
        title=card.title,
        subtitle=card.subtitle,
        status=card.status.value,
        score=card.score,
        severity=card.severity.value,
        needs_attention=card.severity is CardSeverity.EXTREME,
        key_finding=card.key_finding,
        headline_metric=card.headline_metric,
        why_it_matters=card.why_it_matters,
    )


def build_action_plan_view(recommendations: Sequence[Recommendation]) -> ActionPlanView:
    """Number recommendations from 1 in the order given; never re-sorts."""
    if not recommendations:
        return ActionPlanView(items=[], empty_message=NO_CRITICAL_ACTIONS_MESSAGE)
    items = [
        ActionPlanItemView(
            number=idx,
            id=rec.id,
            title=rec.title,
            priority=rec.priority,
            urgency=urgency_label(rec.priority),
            description=rec.description or None,
            impact=rec.impact or None,
        )
        for idx, rec in enumerate(recommendations, start=1)
    ]
    return ActionPlanView(items=items)


def build_shock_alert_view(
    alert: Optional[ShockAlert],
    dismissed: Optional[AbstractSet[str]] = None,
) -> Optional[ShockAlertView]:
    """Build the Shock Watch view, or None if there is no alert or it was dismissed.

    Empty drivers/actions leave their section out entirely.
    """
    if alert is None:
        return None
    key = alert_key(alert)
    if dismissed and key in dismissed:
        logger.debug("[SHOCK] alert %s dismissed by caller", key[:12])
        return None
    actions = [
        AlertActionView(
            key=f"{a.kind}-{idx}",
            label=a.label,
            kind=a.kind,
            deep_link=a.deep_link,
        )
        for idx, a in enumerate(alert.actions)
    ]
    return ShockAlertView(
        key=key,
        severity=alert.severity.value,
        emphasized=alert.is_extreme,
        title=alert.title,
        message=alert.message,
        drivers=list(alert.drivers) or None,
        actions=actions or None,
    )


def invoke_alert_action(
    action: Union[CardAction, AlertActionView],
    navigate: Callable[[str], Any],
) -> bool:
    """Navigate to the action's deep link, passed through unmodified.

    Returns True if navigation happened. Actions without a deep link are
    informational only and never call ``navigate``.
    """
    target = getattr(action, "deep_link", None)
    if not target:
        return False
    navigate(target)
    return True


def build_dashboard_view(
    diagnostics: Iterable[Any],
    recommendations: Iterable[Any] = (),
    dismissed: Optional[Iterable[str]] = None,
    max_items: Optional[int] = None,
) -> DashboardView:
    """Full evaluation pass: cards -> action plan -> shock alert."""
    cards = build_card_contracts(diagnostics, recommendations)
    plan = build_action_plan(cards, max_items=max_items)
    alert = detect_shock_alert(cards)
    return DashboardView(
        cards=[build_card_view(c) for c in cards],
        action_plan=build_action_plan_view(plan),
        shock_alert=build_shock_alert_view(alert, dismissal_snapshot(dismissed)),
    )


__all__ = [
    "NO_CRITICAL_ACTIONS_MESSAGE",
    "build_action_plan_view",
    "build_card_view",
    "build_dashboard_view",
    "build_shock_alert_view",
    "invoke_alert_action",
]
