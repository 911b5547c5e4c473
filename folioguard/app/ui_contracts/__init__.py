# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""UI data contracts and read-model views.

Stable, denormalized view models for dashboard/UI consumption.
No classification logic; pure builders and serialization.
"""

from app.ui_contracts.view_models import (
    ActionPlanItemView,
    ActionPlanView,
    AlertActionView,
    CardView,
    DashboardView,
    ShockAlertView,
)
from app.ui_contracts.view_builders import (
    NO_CRITICAL_ACTIONS_MESSAGE,
    build_action_plan_view,
    build_card_view,
    build_dashboard_view,
    build_shock_alert_view,
    invoke_alert_action,
)

__all__ = [
    "ActionPlanItemView",
    "ActionPlanView",
    "AlertActionView",
    "CardView",
    "DashboardView",
    "ShockAlertView",
    "NO_CRITICAL_ACTIONS_MESSAGE",
    "build_action_plan_view",
    "build_card_view",
    "build_dashboard_view",
    "build_shock_alert_view",
    "invoke_alert_action",
]
