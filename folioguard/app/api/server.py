# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""FastAPI server for the dashboard frontend: severities, action plan, Shock Watch.

Stateless: every request carries the current diagnostics / recommendations /
dismissed-alert keys, and the response is computed from those alone.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping

from dotenv import load_dotenv


def _load_env() -> None:
    # Project root .env (folioguard/.env) first, then the working directory's.
    env_file = Path(__file__).resolve().parents[2] / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    load_dotenv()


_load_env()

from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.cards.build_cards import build_card_contracts
from app.core.cards.models import Diagnostic, Recommendation
from app.core.cards.severity_policy import compute_severity
from app.core.settings import load_config
from app.core.shock.fingerprint import dismissal_snapshot
from app.core.shock.synthesizer import synthesize_shock_alert
from app.ui_contracts.view_builders import (
    build_action_plan_view,
    build_dashboard_view,
    build_shock_alert_view,
)

logger = logging.getLogger(__name__)

_PUBLIC_PATHS = frozenset({"/health"})

app = FastAPI(title="FolioGuard API", version="0.1.0")


@app.middleware("http")
async def api_key_middleware(request: Request, call_next):
    """Require X-API-Key for all non-health routes when FOLIOGUARD_API_KEY is set."""
    api_key = load_config().api.api_key
    path = request.url.path.rstrip("/") or request.url.path
    if not api_key or path in _PUBLIC_PATHS:
        return await call_next(request)
    key = request.headers.get("X-API-Key") or request.headers.get("x-api-key")
    if key != api_key:
        return JSONResponse(
            status_code=401,
            content={"detail": "Missing or invalid X-API-Key"},
            headers={"WWW-Authenticate": "ApiKey"},
        )
    return await call_next(request)


app.add_middleware(
    CORSMiddleware,
    allow_origins=list(load_config().api.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _list_field(payload: Mapping[str, Any], name: str) -> List[Any]:
    value = payload.get(name)
    if value is None:
        return []
    if not isinstance(value, list):
        raise HTTPException(status_code=422, detail=f"'{name}' must be a list")
    return value


def _parse_diagnostics(payload: Mapping[str, Any]) -> List[Diagnostic]:
    try:
        return [Diagnostic.from_dict(d) for d in _list_field(payload, "diagnostics")]
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(status_code=422, detail=f"Invalid diagnostic: {e}") from e


def _parse_recommendations(payload: Mapping[str, Any]) -> List[Recommendation]:
    try:
        return [Recommendation.from_dict(r) for r in _list_field(payload, "recommendations")]
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(status_code=422, detail=f"Invalid recommendation: {e}") from e


@app.get("/health")
def health() -> Dict[str, Any]:
    """Health check. No auth required."""
    return {"ok": True, "status": "healthy"}


@app.post("/api/cards/severity")
def api_card_severity(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    """Classify each diagnostic as EXTREME or NORMAL."""
    diagnostics = _parse_diagnostics(payload)
    items = [{"id": d.id, "severity": compute_severity(d).value} for d in diagnostics]
    logger.info("[API] severity for %d diagnostic(s)", len(items))
    return {"items": items}


@app.post("/api/cards")
def api_cards(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    """Full card contracts (copy, severity, recommendations, default actions)."""
    cards = build_card_contracts(_parse_diagnostics(payload), _parse_recommendations(payload))
    return {"cards": [c.to_dict() for c in cards]}


@app.post("/api/view/action-plan")
def api_action_plan_view(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    """Render an already-ranked recommendation sequence (order kept)."""
    return build_action_plan_view(_parse_recommendations(payload)).to_dict()


@app.post("/api/view/shock-alert")
def api_shock_alert_view(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    """Build the Shock Watch view for a shock signal; null when dismissed."""
    try:
        alert = synthesize_shock_alert(payload)
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(status_code=422, detail=f"Invalid shock signal: {e}") from e
    view = build_shock_alert_view(alert, dismissal_snapshot(_list_field(payload, "dismissed")))
    return {"alert": view.to_dict() if view else None}


@app.post("/api/view/dashboard")
def api_dashboard_view(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    """Cards, action plan and detected shock alert in one pass."""
    view = build_dashboard_view(
        _parse_diagnostics(payload),
        _parse_recommendations(payload),
        dismissed=_list_field(payload, "dismissed"),
    )
    return view.to_dict()
