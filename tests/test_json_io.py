# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the JSON request/record adapter."""

import json

import pytest

from goodwin import InvalidParameterError, ModelParameters, simulate
from goodwin.adapters.json_io import (
    DEFAULT_REQUEST,
    JsonResultExporter,
    SimulationRequest,
    parse_request,
    read_request,
    result_to_record,
    run_request,
)
from goodwin.ports import ResultExporter


@pytest.fixture
def reference_result():
    params = ModelParameters(sigma=0.9, alpha=0.02, beta=0.02, gamma=0.02, rho=0.04)
    return simulate(params, 0.9, 0.7, 20.0)


class TestParseRequest:

    def test_empty_payload_uses_defaults(self):
        request = parse_request({})
        assert isinstance(request, SimulationRequest)
        assert request.parameters == ModelParameters(
            sigma=0.9, alpha=0.02, beta=0.02, gamma=0.02, rho=0.04,
        )
        assert (request.v0, request.u0, request.t_max) == (0.9, 0.7, 200.0)

    def test_overrides(self):
        request = parse_request({'sigma': 2.5, 'beta': 0.01, 't_max': 300})
        assert request.parameters.sigma == 2.5
        assert request.parameters.beta == 0.01
        assert request.parameters.alpha == DEFAULT_REQUEST['alpha']
        assert request.t_max == 300.0
        assert isinstance(request.t_max, float)

    def test_unknown_key_rejected(self):
        with pytest.raises(InvalidParameterError, match="tmax"):
            parse_request({'tmax': 100})

    @pytest.mark.parametrize("value", ["0.9", None, True, [0.9]])
    def test_non_numeric_rejected(self, value):
        with pytest.raises(InvalidParameterError, match="sigma"):
            parse_request({'sigma': value})

    def test_non_object_rejected(self):
        with pytest.raises(InvalidParameterError):
            parse_request([0.9, 0.02])  # type: ignore[arg-type]


class TestResultToRecord:

    def test_fields(self, reference_result):
        record = result_to_record(reference_result)
        assert set(record) == {'t', 'v', 'u', 'profits', 'v_eq', 'u_eq'}

    def test_series_lengths(self, reference_result):
        record = result_to_record(reference_result)
        n = len(record['t'])
        assert n == 201
        assert len(record['v']) == len(record['u']) == len(record['profits']) == n

    def test_values(self, reference_result):
        record = result_to_record(reference_result)
        assert record['t'][0] == 0.0
        assert record['v'][0] == 0.9
        assert record['u'][0] == 0.7
        assert record['profits'][0] == 1.0 - 0.7
        assert record['v_eq'] == pytest.approx(1.0)
        assert record['u_eq'] == pytest.approx(0.964)

    def test_json_serializable(self, reference_result):
        text = json.dumps(result_to_record(reference_result))
        assert json.loads(text)['v_eq'] == pytest.approx(1.0)


class TestRunRequest:

    def test_default_request(self):
        record = run_request({})
        assert len(record['t']) == 2001
        assert record['u_eq'] == pytest.approx(0.964)

    def test_invalid_sigma_propagates(self):
        with pytest.raises(InvalidParameterError):
            run_request({'sigma': 0.0})

    def test_negative_horizon_propagates(self):
        with pytest.raises(InvalidParameterError):
            run_request({'t_max': -5.0})


class TestReadRequest:

    def test_reads_object(self, tmp_path):
        path = tmp_path / "request.json"
        path.write_text(json.dumps({'rho': 0.05}), encoding='utf-8')
        assert read_request(str(path)) == {'rho': 0.05}

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "request.json"
        path.write_text("{not json", encoding='utf-8')
        with pytest.raises(InvalidParameterError, match="Malformed"):
            read_request(str(path))

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "request.json"
        path.write_text("[1, 2]", encoding='utf-8')
        with pytest.raises(InvalidParameterError):
            read_request(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_request(str(tmp_path / "missing.json"))


class TestJsonResultExporter:

    def test_implements_port(self):
        assert isinstance(JsonResultExporter(), ResultExporter)

    def test_writes_record(self, reference_result, tmp_path):
        path = tmp_path / "result.json"
        n = JsonResultExporter().export(reference_result, str(path))
        assert n == 201

        data = json.loads(path.read_text(encoding='utf-8'))
        assert data == result_to_record(reference_result)
