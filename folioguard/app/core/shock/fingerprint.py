# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Stable alert keys for caller-owned dismissal sets.

The engine never stores dismissals. Callers keep a set of alert keys and pass
a frozen snapshot of it back in on each evaluation.
"""

from __future__ import annotations

import hashlib
import json
from typing import AbstractSet, Iterable, Optional

from app.core.shock.models import ShockAlert


def alert_key(alert: ShockAlert) -> str:
    """SHA256 of the alert's content. Same content -> same key."""
    key_data = {
        "severity": alert.severity.value,
        "title": alert.title,
        "message": alert.message,
        "drivers": list(alert.drivers),
        "actions": [[a.kind, a.deep_link or "", a.label] for a in alert.actions],
    }
    json_str = json.dumps(key_data, sort_keys=True)
    return hashlib.sha256(json_str.encode()).hexdigest()


def dismissal_snapshot(keys: Optional[Iterable[str]]) -> frozenset:
    """Freeze a caller's dismissed-key collection for one evaluation."""
    if not keys:
        return frozenset()
    return frozenset(str(k) for k in keys if k)


def is_dismissed(alert: ShockAlert, dismissed: AbstractSet[str]) -> bool:
    return bool(dismissed) and alert_key(alert) in dismissed


__all__ = ["alert_key", "dismissal_snapshot", "is_dismissed"]
