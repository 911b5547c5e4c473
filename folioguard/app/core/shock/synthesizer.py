# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Assemble a ShockAlert from a shock signal.

Message, drivers and severity come from shock detection; this module owns the
alert object contract: immutable, ordered drivers/actions, blanks dropped.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Tuple, Union

from app.core.cards.models import CardAction
from app.core.shock.models import ShockAlert, ShockSignal, coerce_shock_severity

logger = logging.getLogger(__name__)

SignalInput = Union[ShockSignal, Mapping[str, Any]]


def _clean_drivers(drivers: Union[str, Iterable[Any]]) -> Tuple[str, ...]:
    # a bare string is one driver, not a sequence of characters
    if isinstance(drivers, str):
        drivers = (drivers,)
    out = []
    for d in drivers or ():
        if d is None:
            continue
        text = str(d).strip()
        if text:
            out.append(text)
    return tuple(out)


def _clean_actions(actions: Union[CardAction, Mapping[str, Any], Iterable[Any]]) -> Tuple[CardAction, ...]:
    if isinstance(actions, (CardAction, Mapping)):
        actions = (actions,)
    out = []
    for a in actions or ():
        if isinstance(a, CardAction):
            action = a
        elif isinstance(a, Mapping):
            action = CardAction.from_dict(a)
        else:
            continue
        if action.label.strip():
            out.append(action)
    return tuple(out)


def synthesize_shock_alert(signal: SignalInput) -> ShockAlert:
    """Build the ShockAlert for a detected shock.

    Parameters
    ----------
    signal:
        ShockSignal or mapping with ``severity`` and ``message`` (required),
        ``title``, ``drivers`` and ``actions`` (optional). Action mappings
        accept ``deepLink`` or ``deep_link``.

    Raises
    ------
    ValueError
        If the severity tier is unknown.
    """
    if isinstance(signal, Mapping):
        signal = ShockSignal(
            severity=signal.get("severity"),
            message=signal.get("message") or "",
            title=signal.get("title"),
            drivers=signal.get("drivers") or (),
            actions=signal.get("actions") or (),
        )

    alert = ShockAlert(
        severity=coerce_shock_severity(signal.severity),
        message=str(signal.message or ""),
        title=signal.title or None,
        drivers=_clean_drivers(signal.drivers),
        actions=_clean_actions(signal.actions),
    )
    logger.info(
        "[SHOCK] alert severity=%s drivers=%d actions=%d",
        alert.severity.value, len(alert.drivers), len(alert.actions),
    )
    return alert


synthesize = synthesize_shock_alert


__all__ = ["synthesize", "synthesize_shock_alert"]
