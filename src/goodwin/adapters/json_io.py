# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON request/record adapter.

Turns a JSON-style request payload into a simulate() call and a
SimulationResult back into the flat record served to frontends:

    {"t": [...], "v": [...], "u": [...], "profits": [...],
     "v_eq": float, "u_eq": float}
"""
import json
import logging
from dataclasses import dataclass
from typing import Any

from goodwin.domain.errors import InvalidParameterError
from goodwin.domain.parameters import ModelParameters
from goodwin.domain.simulation import SimulationConfig, SimulationResult, simulate
from goodwin.ports import ResultExporter

logger = logging.getLogger(__name__)


DEFAULT_REQUEST: dict[str, float] = {
    'sigma': 0.9,
    'alpha': 0.02,
    'beta': 0.02,
    'gamma': 0.02,
    'rho': 0.04,
    'v0': 0.9,
    'u0': 0.7,
    't_max': 200.0,
}


@dataclass(frozen=True)
class SimulationRequest:
    """The eight scalar inputs of one simulation request."""
    parameters: ModelParameters
    v0: float
    u0: float
    t_max: float


def _as_number(key: str, value: Any) -> float:
    # bool is an int subclass; true/false are not model inputs
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(
            f"'{key}' must be a number, got {type(value).__name__} {value!r}"
        )
    return float(value)


def parse_request(payload: dict[str, Any]) -> SimulationRequest:
    """
    Build a SimulationRequest from a decoded JSON object.

    Missing keys take their DEFAULT_REQUEST value.

    Raises:
        InvalidParameterError: Payload is not an object, has unknown keys,
            or carries non-numeric values.
    """
    if not isinstance(payload, dict):
        raise InvalidParameterError(
            f"Request must be a JSON object, got {type(payload).__name__}"
        )
    unknown = sorted(set(payload) - set(DEFAULT_REQUEST))
    if unknown:
        raise InvalidParameterError(f"Unknown request field(s): {', '.join(unknown)}")

    values = {key: _as_number(key, payload.get(key, default))
              for key, default in DEFAULT_REQUEST.items()}
    return SimulationRequest(
        parameters=ModelParameters(
            sigma=values['sigma'],
            alpha=values['alpha'],
            beta=values['beta'],
            gamma=values['gamma'],
            rho=values['rho'],
        ),
        v0=values['v0'],
        u0=values['u0'],
        t_max=values['t_max'],
    )


def result_to_record(result: SimulationResult) -> dict[str, Any]:
    """Flat record of a result: time index, three series, equilibrium pair."""
    return {
        't': list(result.times),
        'v': list(result.employment),
        'u': list(result.wage_share),
        'profits': list(result.profit_share),
        'v_eq': result.equilibrium.employment,
        'u_eq': result.equilibrium.wage_share,
    }


def run_request(
    payload: dict[str, Any],
    config: SimulationConfig | None = None,
) -> dict[str, Any]:
    """Parse a request payload, simulate, and return the result record."""
    request = parse_request(payload)
    logger.info(
        "Simulating with sigma=%s, alpha=%s, beta=%s, gamma=%s, rho=%s, "
        "v0=%s, u0=%s, t_max=%s",
        *request.parameters.as_tuple(), request.v0, request.u0, request.t_max,
    )
    result = simulate(
        request.parameters, request.v0, request.u0, request.t_max, config=config,
    )
    return result_to_record(result)


def read_request(path: str) -> dict[str, Any]:
    """Load a request payload from a JSON file."""
    with open(path, encoding='utf-8') as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidParameterError(f"Malformed request file {path}: {e}") from e
    if not isinstance(payload, dict):
        raise InvalidParameterError(
            f"Request file {path} must hold a JSON object, got {type(payload).__name__}"
        )
    return payload


class JsonResultExporter(ResultExporter):
    """Writes the result record to a JSON file."""

    def export(self, result: SimulationResult, path: str) -> int:
        record = result_to_record(result)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(record, f, indent=2)
        logger.debug("Wrote %d samples to %s", len(record['t']), path)
        return len(record['t'])
