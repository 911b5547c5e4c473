# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Centralized configuration loader for FolioGuard.

Loads config.yaml from the project root and provides typed access to settings.
Falls back to sensible defaults if config.yaml is missing or incomplete.
Environment variables override config.yaml values.

Severity thresholds are deliberately not configurable here; they live in the
severity policy table.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

_CONFIG_CACHE: Optional["FolioGuardConfig"] = None

DEFAULT_CORS_ORIGINS = ("http://localhost:5173",)


def _repo_root() -> Path:
    """Return the project root (folioguard/)."""
    # app/core/settings.py -> folioguard/
    return Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class ActionPlanConfig:
    """Action plan selection."""
    max_items: int


@dataclass(frozen=True)
class ShockConfig:
    """Shock detection limits."""
    max_drivers: int
    max_actions: int
    elevated_yellow_score: float


@dataclass(frozen=True)
class ApiConfig:
    """HTTP surface settings."""
    cors_origins: Tuple[str, ...]
    api_key: str


@dataclass(frozen=True)
class FolioGuardConfig:
    """Root configuration object."""
    action_plan: ActionPlanConfig
    shock: ShockConfig
    api: ApiConfig
    log_level: str


def _config_path() -> Path:
    override = (os.getenv("FOLIOGUARD_CONFIG") or "").strip()
    if override:
        return Path(override)
    return _repo_root() / "config.yaml"


def _load_yaml_config() -> dict:
    """Load config.yaml. Returns empty dict if not found or unreadable."""
    config_path = _config_path()
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("[CONFIG] Could not read %s: %s; using defaults", config_path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("[CONFIG] %s is not a mapping; using defaults", config_path)
        return {}
    return data


def _int_setting(env_name: str, section: dict, key: str, default: int) -> int:
    raw: Any = os.getenv(env_name)
    if raw is None or not str(raw).strip():
        raw = section.get(key, default)
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning("[CONFIG] Invalid %s=%r; using %s", env_name, raw, default)
        return default


def _float_setting(env_name: str, section: dict, key: str, default: float) -> float:
    raw: Any = os.getenv(env_name)
    if raw is None or not str(raw).strip():
        raw = section.get(key, default)
    try:
        return float(raw)
    except (TypeError, ValueError):
        logger.warning("[CONFIG] Invalid %s=%r; using %s", env_name, raw, default)
        return default


def load_config(*, reload: bool = False) -> FolioGuardConfig:
    """Load and return the FolioGuard configuration.

    Priority order (highest to lowest):
    1. Environment variables (FOLIOGUARD_PLAN_MAX_ITEMS, FOLIOGUARD_SHOCK_MAX_DRIVERS, etc.)
    2. config.yaml values
    3. Built-in defaults

    Parameters
    ----------
    reload : bool
        If True, force reload from disk. Otherwise use cached config.
    """
    global _CONFIG_CACHE

    if _CONFIG_CACHE is not None and not reload:
        return _CONFIG_CACHE

    raw = _load_yaml_config()

    plan_raw = raw.get("action_plan", {}) or {}
    action_plan = ActionPlanConfig(
        max_items=max(1, _int_setting("FOLIOGUARD_PLAN_MAX_ITEMS", plan_raw, "max_items", 6)),
    )

    shock_raw = raw.get("shock", {}) or {}
    shock = ShockConfig(
        max_drivers=max(0, _int_setting("FOLIOGUARD_SHOCK_MAX_DRIVERS", shock_raw, "max_drivers", 3)),
        max_actions=max(0, _int_setting("FOLIOGUARD_SHOCK_MAX_ACTIONS", shock_raw, "max_actions", 4)),
        elevated_yellow_score=_float_setting(
            "FOLIOGUARD_SHOCK_ELEVATED_YELLOW_SCORE", shock_raw, "elevated_yellow_score", 60.0
        ),
    )

    api_raw = raw.get("api", {}) or {}
    origins_raw = os.getenv("FOLIOGUARD_CORS_ORIGINS")
    if origins_raw is not None and origins_raw.strip():
        origins = tuple(o.strip() for o in origins_raw.split(",") if o.strip())
    else:
        origins = tuple(str(o).strip() for o in (api_raw.get("cors_origins") or []) if str(o).strip())
    api = ApiConfig(
        cors_origins=origins or DEFAULT_CORS_ORIGINS,
        api_key=(os.getenv("FOLIOGUARD_API_KEY") or str(api_raw.get("api_key") or "")).strip(),
    )

    app_raw = raw.get("app", {}) or {}
    log_level = (os.getenv("FOLIOGUARD_LOG_LEVEL") or str(app_raw.get("log_level") or "INFO")).strip().upper()

    config = FolioGuardConfig(
        action_plan=action_plan,
        shock=shock,
        api=api,
        log_level=log_level,
    )

    _CONFIG_CACHE = config
    return config


def get_plan_max_items() -> int:
    """Convenience: return the action plan length cap."""
    return load_config().action_plan.max_items


def get_shock_config() -> ShockConfig:
    """Convenience: return shock detection limits."""
    return load_config().shock


__all__ = [
    "ActionPlanConfig",
    "ApiConfig",
    "FolioGuardConfig",
    "ShockConfig",
    "get_plan_max_items",
    "get_shock_config",
    "load_config",
]
