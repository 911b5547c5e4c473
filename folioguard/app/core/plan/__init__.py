# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Action plan selection and urgency labels."""

from app.core.plan.action_plan import build_action_plan, urgency_label

__all__ = ["build_action_plan", "urgency_label"]
