# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Card models: diagnostic records, recommendations, card actions and contracts.

All models are immutable value objects. ``details`` bags are wrapped in a
read-only mapping so a card handed to presentation can never be edited in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

EMPTY_DETAILS: Mapping[str, Any] = MappingProxyType({})


class DiagnosticStatus(str, Enum):
    """Three-level health state. GREEN < YELLOW < RED."""

    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"

    @property
    def rank(self) -> int:
        return _STATUS_RANK[self]


_STATUS_RANK = {
    DiagnosticStatus.GREEN: 0,
    DiagnosticStatus.YELLOW: 1,
    DiagnosticStatus.RED: 2,
}


class CardSeverity(str, Enum):
    NORMAL = "NORMAL"
    EXTREME = "EXTREME"


class CardActionKind(str, Enum):
    LEARN = "LEARN"
    REBALANCE = "REBALANCE"
    REDUCE_FEES = "REDUCE_FEES"
    DIVERSIFY = "DIVERSIFY"
    RISK_REDUCE = "RISK_REDUCE"
    TAX_OPTIMIZE = "TAX_OPTIMIZE"
    BENCHMARK = "BENCHMARK"
    TACTICAL = "TACTICAL"


def freeze_details(details: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    """Return a read-only copy of a details bag. None / non-mappings become empty."""
    if not isinstance(details, Mapping) or not details:
        return EMPTY_DETAILS
    return MappingProxyType(dict(details))


def coerce_status(value: Union[str, DiagnosticStatus]) -> DiagnosticStatus:
    if isinstance(value, DiagnosticStatus):
        return value
    return DiagnosticStatus(str(value).strip().upper())


@dataclass(frozen=True)
class Diagnostic:
    """One risk/quality check as produced by upstream metric computation.

    Attributes
    ----------
    id:
        Diagnostic kind (e.g. "costAnalysis"). Unknown kinds are accepted.
    status:
        GREEN | YELLOW | RED.
    score:
        0-100, higher is healthier. None when upstream could not score the
        check; metric rules still apply, the RED/low-score fallback does not.
    details:
        Untyped field bag; shape varies by kind and data availability.
    key_finding, headline_metric:
        Upstream display copy, passed through untouched.
    """

    id: str
    status: DiagnosticStatus
    score: Optional[float]
    details: Mapping[str, Any] = field(default_factory=lambda: EMPTY_DETAILS)
    key_finding: str = ""
    headline_metric: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", coerce_status(self.status))
        if self.score is not None:
            object.__setattr__(self, "score", float(self.score))
        object.__setattr__(self, "details", freeze_details(self.details))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Diagnostic":
        return cls(
            id=str(data["id"]),
            status=data.get("status", DiagnosticStatus.GREEN),
            score=data.get("score"),
            details=data.get("details"),
            key_finding=str(data.get("keyFinding") or data.get("key_finding") or ""),
            headline_metric=str(data.get("headlineMetric") or data.get("headline_metric") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "status": self.status.value,
            "score": self.score,
            "details": dict(self.details),
            "key_finding": self.key_finding,
            "headline_metric": self.headline_metric,
        }


@dataclass(frozen=True)
class Recommendation:
    """One actionable item in the plan. priority >= 1, lower is more urgent."""

    id: str
    title: str
    priority: int
    description: Optional[str] = None
    impact: Optional[str] = None
    category: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.priority, bool) or not isinstance(self.priority, int):
            raise ValueError(f"Recommendation {self.id!r}: priority must be an integer, got {self.priority!r}")
        if self.priority < 1:
            raise ValueError(f"Recommendation {self.id!r}: priority must be >= 1, got {self.priority}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Recommendation":
        return cls(
            id=str(data["id"]),
            title=str(data.get("title") or ""),
            priority=data.get("priority", 1),
            description=data.get("description"),
            impact=data.get("impact"),
            category=data.get("category"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "priority": self.priority,
            "description": self.description,
            "impact": self.impact,
            "category": self.category,
        }


@dataclass(frozen=True)
class CardAction:
    """Suggested action. No deep_link means informational only.

    ``kind`` only feeds list keys, so kinds outside CardActionKind are kept
    as plain upper-case strings instead of being rejected.
    """

    label: str
    kind: str
    deep_link: Optional[str] = None

    def __post_init__(self) -> None:
        kind = getattr(self.kind, "value", self.kind)
        object.__setattr__(self, "kind", str(kind or CardActionKind.LEARN.value).strip().upper())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CardAction":
        link = data.get("deepLink", data.get("deep_link"))
        return cls(
            label=str(data.get("label") or ""),
            kind=data.get("kind", CardActionKind.LEARN),
            deep_link=str(link) if link else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "kind": self.kind, "deep_link": self.deep_link}


@dataclass(frozen=True)
class CardContract:
    """Everything presentation needs for one diagnostic card."""

    id: str
    title: str
    why_it_matters: str
    status: DiagnosticStatus
    score: Optional[float]
    severity: CardSeverity
    key_finding: str = ""
    headline_metric: str = ""
    subtitle: Optional[str] = None
    icon_name: Optional[str] = None
    details: Mapping[str, Any] = field(default_factory=lambda: EMPTY_DETAILS)
    recommendations: Tuple[Recommendation, ...] = field(default_factory=tuple)
    actions: Tuple[CardAction, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "subtitle": self.subtitle,
            "icon_name": self.icon_name,
            "why_it_matters": self.why_it_matters,
            "status": self.status.value,
            "score": self.score,
            "severity": self.severity.value,
            "key_finding": self.key_finding,
            "headline_metric": self.headline_metric,
            "details": dict(self.details),
            "recommendations": [r.to_dict() for r in self.recommendations],
            "actions": [a.to_dict() for a in self.actions],
        }


__all__ = [
    "CardAction",
    "CardActionKind",
    "CardContract",
    "CardSeverity",
    "Diagnostic",
    "DiagnosticStatus",
    "Recommendation",
    "coerce_status",
    "freeze_details",
]
