# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the goodwin command-line interface."""

import csv
import json
import sys

import pytest

from goodwin.cli import format_summary, main, run
from goodwin.domain.simulation import SimulationConfig


class TestCliRun:

    def test_defaults(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, 'argv', ['goodwin', '--t-max', '100'])
        main()
        out = capsys.readouterr().out
        assert "v*=1.0" in out
        assert "u*=0.964" in out
        assert "Samples: 1001" in out

    def test_writes_json_and_csv(self, tmp_path, capsys, monkeypatch):
        json_path = tmp_path / "result.json"
        csv_path = tmp_path / "traj.csv"
        monkeypatch.setattr(sys, 'argv', [
            'goodwin', '--t-max', '50', '-o', str(json_path), '--export-csv', str(csv_path),
        ])
        main()

        record = json.loads(json_path.read_text(encoding='utf-8'))
        assert len(record['t']) == 501
        with open(csv_path, newline='', encoding='utf-8') as f:
            assert len(list(csv.reader(f))) == 502

        out = capsys.readouterr().out
        assert str(json_path) in out
        assert str(csv_path) in out

    def test_params_file_with_override(self, tmp_path, monkeypatch):
        request = tmp_path / "request.json"
        request.write_text(json.dumps({'rho': 0.05, 't_max': 20}), encoding='utf-8')
        out_path = tmp_path / "result.json"
        monkeypatch.setattr(sys, 'argv', [
            'goodwin', '--params-file', str(request), '--rho', '0.08', '-o', str(out_path),
        ])
        main()

        record = json.loads(out_path.read_text(encoding='utf-8'))
        assert record['v_eq'] == pytest.approx(0.04 / 0.08)
        assert len(record['t']) == 201

    def test_custom_dt(self, tmp_path, monkeypatch):
        out_path = tmp_path / "result.json"
        monkeypatch.setattr(sys, 'argv', [
            'goodwin', '--t-max', '10', '--dt', '0.5', '-o', str(out_path),
        ])
        main()
        record = json.loads(out_path.read_text(encoding='utf-8'))
        assert len(record['t']) == 21


class TestCliErrors:

    def test_zero_sigma(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, 'argv', ['goodwin', '--sigma', '0'])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "sigma" in capsys.readouterr().err

    def test_negative_horizon(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, 'argv', ['goodwin', '--t-max', '-5'])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "t_max" in capsys.readouterr().err

    def test_step_ceiling(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, 'argv', ['goodwin', '--max-steps', '100'])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "limit 100" in capsys.readouterr().err

    def test_overflowing_horizon(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, 'argv', ['goodwin', '--t-max', '1e308'])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert err.startswith("Error:")
        assert "non-finite number of steps" in err

    def test_missing_params_file(self, tmp_path, capsys, monkeypatch):
        missing = str(tmp_path / "missing.json")
        monkeypatch.setattr(sys, 'argv', ['goodwin', '--params-file', missing])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err.lower()


class TestFormatSummary:

    def test_reports_period_when_resolved(self):
        result = run({'sigma': 3.0, 'alpha': 0.02, 'beta': 0.01, 'gamma': 0.03,
                      'rho': 0.1, 'v0': 0.51, 'u0': 0.91, 't_max': 300.0})
        text = format_summary(result)
        assert "Cycle period:" in text
        assert "upward crossings" in text

    def test_reports_unresolved_period(self):
        result = run({'t_max': 10.0}, config=SimulationConfig())
        assert "not resolved" in format_summary(result)
