# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Shock Watch models: severity tiers, incoming signals, outgoing alerts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

from app.core.cards.models import CardAction


class ShockSeverity(str, Enum):
    """Alert tiers. Only EXTREME gets distinct treatment downstream."""

    NORMAL = "NORMAL"
    ELEVATED = "ELEVATED"
    EXTREME = "EXTREME"


def coerce_shock_severity(value: Any) -> ShockSeverity:
    """Raise ValueError for unknown tiers."""
    if isinstance(value, ShockSeverity):
        return value
    return ShockSeverity(str(value).strip().upper())


@dataclass(frozen=True)
class ShockSignal:
    """What shock detection hands to the synthesizer.

    drivers/actions may be empty; entries may be raw strings / dicts as
    received from upstream.
    """

    severity: Any
    message: str
    title: Optional[str] = None
    drivers: Sequence[Any] = ()
    actions: Sequence[Any] = ()


@dataclass(frozen=True)
class ShockAlert:
    """Time-sensitive notification. Ephemeral; dismissal is caller-owned."""

    severity: ShockSeverity
    message: str
    title: Optional[str] = None
    drivers: Tuple[str, ...] = field(default_factory=tuple)
    actions: Tuple[CardAction, ...] = field(default_factory=tuple)

    @property
    def is_extreme(self) -> bool:
        return self.severity is ShockSeverity.EXTREME

    def to_dict(self) -> Dict[str, Any]:
        return {
            "severity": self.severity.value,
            "title": self.title,
            "message": self.message,
            "drivers": list(self.drivers),
            "actions": [a.to_dict() for a in self.actions],
        }


__all__ = ["ShockAlert", "ShockSeverity", "ShockSignal", "coerce_shock_severity"]
