# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Shock Watch: detection, alert synthesis and dismissal keys."""

from app.core.shock.detector import detect_shock_alert
from app.core.shock.fingerprint import alert_key, dismissal_snapshot
from app.core.shock.models import ShockAlert, ShockSeverity, ShockSignal
from app.core.shock.synthesizer import synthesize_shock_alert

__all__ = [
    "ShockAlert",
    "ShockSeverity",
    "ShockSignal",
    "alert_key",
    "detect_shock_alert",
    "dismissal_snapshot",
    "synthesize_shock_alert",
]
