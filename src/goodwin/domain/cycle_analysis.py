# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Growth-cycle diagnostics for simulated Goodwin trajectories.

The Goodwin system is of Lotka-Volterra type and has the first integral

    H(v, u) = rho*v - (alpha + gamma)*ln(v) + u/sigma - (1/sigma - (alpha + beta))*ln(u)

which is constant along exact orbits in the positive quadrant. Its drift
along a numerical trajectory measures integration error. Linearizing
about the equilibrium gives the small-amplitude period

    T = 2*pi / sqrt((1/sigma - (alpha + beta)) * (alpha + gamma))
"""

import math
from dataclasses import dataclass

import numpy as np

from goodwin.domain.parameters import ModelParameters
from goodwin.domain.simulation import SimulationResult


@dataclass(frozen=True)
class CycleSummary:
    """Amplitude, period and conservation diagnostics of one trajectory."""
    employment_min: float
    employment_max: float
    wage_share_min: float
    wage_share_max: float
    upward_crossings: int
    mean_period: float | None
    first_integral_drift: float


def first_integral(state: tuple[float, float], params: ModelParameters) -> float:
    """Conserved quantity H(v, u) of the Goodwin system.

    Raises:
        ValueError: If v or u is not positive.
    """
    v, u = state
    if v <= 0.0 or u <= 0.0:
        raise ValueError(f"First integral needs v > 0 and u > 0, got v={v}, u={u}")
    inv_sigma = 1.0 / params.sigma
    growth = inv_sigma - (params.alpha + params.beta)
    decay = params.alpha + params.gamma
    return params.rho * v - decay * math.log(v) + u * inv_sigma - growth * math.log(u)


def linearized_period(params: ModelParameters) -> float:
    """Period of small oscillations about the equilibrium.

    Raises:
        ValueError: If the equilibrium is not a centre (product <= 0).
    """
    growth = 1.0 / params.sigma - (params.alpha + params.beta)
    decay = params.alpha + params.gamma
    product = growth * decay
    if product <= 0.0:
        raise ValueError(
            f"No closed orbits: (1/sigma - (alpha+beta)) * (alpha+gamma) = {product}"
        )
    return 2.0 * math.pi / math.sqrt(product)


def _upward_crossing_times(
    times: np.ndarray, values: np.ndarray, level: float,
) -> np.ndarray:
    below = values[:-1] < level
    above = values[1:] >= level
    idx = np.nonzero(below & above)[0]
    # Linear interpolation inside each bracketing interval
    frac = (level - values[idx]) / (values[idx + 1] - values[idx])
    return times[idx] + frac * (times[idx + 1] - times[idx])


def summarize_cycle(result: SimulationResult) -> CycleSummary:
    """Summarize the growth cycle traced by a simulation result.

    The period is the mean spacing of upward crossings of the equilibrium
    employment rate; None with fewer than two crossings. The first-integral
    drift is max |H - H0| / |H0| and is NaN when the orbit leaves the
    positive quadrant.
    """
    times = np.array(result.times, dtype=np.float64)
    v = np.array(result.employment, dtype=np.float64)
    u = np.array(result.wage_share, dtype=np.float64)

    crossings = _upward_crossing_times(times, v, result.equilibrium.employment)
    mean_period = float(np.mean(np.diff(crossings))) if len(crossings) >= 2 else None

    if np.all(v > 0.0) and np.all(u > 0.0):
        params = result.parameters
        h = np.array([first_integral((a, b), params) for a, b in zip(v, u)])
        h0 = h[0]
        scale = abs(h0) if h0 != 0.0 else 1.0
        drift = float(np.max(np.abs(h - h0)) / scale)
    else:
        drift = float('nan')

    return CycleSummary(
        employment_min=float(np.min(v)),
        employment_max=float(np.max(v)),
        wage_share_min=float(np.min(u)),
        wage_share_max=float(np.max(u)),
        upward_crossings=int(len(crossings)),
        mean_period=mean_period,
        first_integral_drift=drift,
    )
