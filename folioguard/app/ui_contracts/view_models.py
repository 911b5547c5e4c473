# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""UI view models: JSON-serializable read contracts for the dashboard."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class CardView:
    """What the UI needs for one diagnostic card."""

    id: str
    title: str
    subtitle: Optional[str]
    status: str  # GREEN | YELLOW | RED
    score: Optional[float]
    severity: str  # NORMAL | EXTREME
    needs_attention: bool
    key_finding: str
    headline_metric: str
    why_it_matters: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ActionPlanItemView:
    """One numbered plan row."""

    number: int  # 1-based, in given order
    id: str
    title: str
    priority: int
    urgency: str  # High | Medium | Low
    description: Optional[str] = None
    impact: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ActionPlanView:
    """Either a neutral empty-state message or a numbered list, never both."""

    items: List[ActionPlanItemView] = field(default_factory=list)
    empty_message: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_dict(self) -> Dict[str, Any]:
        if self.is_empty:
            return {"is_empty": True, "message": self.empty_message}
        return {"is_empty": False, "items": [i.to_dict() for i in self.items]}


@dataclass(frozen=True)
class AlertActionView:
    """Alert button. navigable is False when there is no deep link."""

    key: str  # "<kind>-<index>"
    label: str
    kind: str
    deep_link: Optional[str] = None

    @property
    def navigable(self) -> bool:
        return bool(self.deep_link)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["navigable"] = self.navigable
        return d


@dataclass(frozen=True)
class ShockAlertView:
    """Shock Watch card. drivers/actions are None (section absent) when empty."""

    key: str
    severity: str
    emphasized: bool  # EXTREME only
    message: str
    title: Optional[str] = None
    drivers: Optional[List[str]] = None
    actions: Optional[List[AlertActionView]] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "key": self.key,
            "severity": self.severity,
            "emphasized": self.emphasized,
            "title": self.title,
            "message": self.message,
        }
        if self.drivers:
            d["drivers"] = list(self.drivers)
        if self.actions:
            d["actions"] = [a.to_dict() for a in self.actions]
        return d


@dataclass(frozen=True)
class DashboardView:
    """Cards, priority action plan and (undismissed) shock alert."""

    cards: List[CardView]
    action_plan: ActionPlanView
    shock_alert: Optional[ShockAlertView] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cards": [c.to_dict() for c in self.cards],
            "action_plan": self.action_plan.to_dict(),
            "shock_alert": self.shock_alert.to_dict() if self.shock_alert else None,
        }
