# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""Tests for the run_evaluation CLI."""

from __future__ import annotations

import json
import sys

import run_evaluation


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["run_evaluation.py", *argv])
    return run_evaluation.main()


def test_prints_dashboard_view(tmp_path, monkeypatch, capsys):
    snapshot = tmp_path / "snapshot.json"
    snapshot.write_text(
        json.dumps(
            {
                "diagnostics": [
                    {"id": "costAnalysis", "status": "RED", "score": 30, "details": {"weightedExpenseRatioPct": "0.95%"}},
                    {"id": "taxEfficiency", "status": "RED", "score": 45},
                ],
                "recommendations": [
                    {"id": "cut-fees", "title": "Cut fees", "priority": 1, "category": "costAnalysis"},
                    {"id": "harvest", "title": "Harvest losses", "priority": 2, "category": "taxEfficiency"},
                ],
            }
        ),
        encoding="utf-8",
    )
    assert _run(monkeypatch, str(snapshot), "--max-items", "1") == 0
    out = json.loads(capsys.readouterr().out)
    assert [c["severity"] for c in out["cards"]] == ["EXTREME", "NORMAL"]
    assert [i["id"] for i in out["action_plan"]["items"]] == ["cut-fees"]
    assert out["shock_alert"]["severity"] == "EXTREME"


def test_invalid_snapshot_returns_1(tmp_path, monkeypatch, capsys):
    snapshot = tmp_path / "bad.json"
    snapshot.write_text("[1, 2]", encoding="utf-8")
    assert _run(monkeypatch, str(snapshot)) == 1
    assert "Error" in capsys.readouterr().err


def test_missing_file_returns_1(tmp_path, monkeypatch):
    assert _run(monkeypatch, str(tmp_path / "missing.json")) == 1
