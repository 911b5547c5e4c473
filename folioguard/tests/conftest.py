# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Shared fixtures: isolated configuration for every test."""

from __future__ import annotations

import pytest

from app.core import settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config at an empty temp path and clear FOLIOGUARD_* overrides."""
    for name in (
        "FOLIOGUARD_PLAN_MAX_ITEMS",
        "FOLIOGUARD_SHOCK_MAX_DRIVERS",
        "FOLIOGUARD_SHOCK_MAX_ACTIONS",
        "FOLIOGUARD_SHOCK_ELEVATED_YELLOW_SCORE",
        "FOLIOGUARD_LOG_LEVEL",
        "FOLIOGUARD_API_KEY",
        "FOLIOGUARD_CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("FOLIOGUARD_CONFIG", str(tmp_path / "config.yaml"))
    monkeypatch.setattr(settings, "_CONFIG_CACHE", None)
    yield tmp_path
    settings._CONFIG_CACHE = None
