# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Single entry point for Goodwin growth-cycle simulations.

Validates inputs, integrates the model with fixed-step RK4 from t = 0 to
t_max, computes the equilibrium and derives the profit series. Failures
are raised as SimulationError subclasses; no fallback output is ever
returned in place of a result.
"""

import logging
import math
from dataclasses import dataclass

import numpy as np

from goodwin.domain.equilibrium import EquilibriumPoint, equilibrium_point
from goodwin.domain.errors import (
    InvalidParameterError,
    NumericalInstabilityError,
    ResourceBoundError,
)
from goodwin.domain.integration import (
    Trajectory,
    first_non_finite,
    solve_fixed_step,
)
from goodwin.domain.parameters import ModelParameters, TimeSpan
from goodwin.domain.vector_field import goodwin_field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """Integration settings for simulate().

    dt: fixed RK4 step size (model time units)
    max_steps: ceiling on ceil(t_max / dt), checked before integrating
    """
    dt: float = 0.1
    max_steps: int = 100_000


@dataclass(frozen=True)
class SimulationResult:
    """Complete result of one simulation request."""
    parameters: ModelParameters
    trajectory: Trajectory
    profit_share: tuple[float, ...]
    profit_rate: tuple[float, ...]
    equilibrium: EquilibriumPoint

    @property
    def times(self) -> tuple[float, ...]:
        return self.trajectory.times

    @property
    def employment(self) -> tuple[float, ...]:
        return self.trajectory.employment

    @property
    def wage_share(self) -> tuple[float, ...]:
        return self.trajectory.wage_share

    def phase_portrait(self) -> tuple[tuple[float, float], ...]:
        """(wage_share, employment) pairs, x = u and y = v."""
        return tuple(zip(self.trajectory.wage_share, self.trajectory.employment))


def _check_config(config: SimulationConfig) -> None:
    if not (math.isfinite(config.dt) and config.dt > 0.0):
        raise ValueError(f"Step size must be positive and finite, got {config.dt}")
    if config.max_steps < 1:
        raise ValueError(f"max_steps must be at least 1, got {config.max_steps}")


def simulate(
    params: ModelParameters,
    v0: float,
    u0: float,
    t_max: float,
    config: SimulationConfig | None = None,
) -> SimulationResult:
    """Integrate the Goodwin model over [0, t_max].

    Args:
        params: Model parameters.
        v0: Initial employment rate.
        u0: Initial workers' share.
        t_max: Simulation horizon (> 0).
        config: Step size and step ceiling; defaults to SimulationConfig().

    Returns:
        SimulationResult with ceil(t_max / dt) + 1 samples per series.

    Raises:
        InvalidParameterError: sigma or rho zero, non-finite inputs,
            t_max <= 0.
        ResourceBoundError: Step count above config.max_steps, or t_max / dt
            not finite.
        NumericalInstabilityError: State became non-finite.
    """
    if config is None:
        config = SimulationConfig()
    _check_config(config)

    params.validate()
    for name, value in (("v0", v0), ("u0", u0), ("t_max", t_max)):
        if not math.isfinite(value):
            raise InvalidParameterError(f"{name} must be finite, got {value!r}")
    if t_max <= 0.0:
        raise InvalidParameterError(f"t_max must be positive, got {t_max}")

    span = TimeSpan(t_start=0.0, t_end=float(t_max))
    ratio = span.duration / config.dt
    if not (math.isfinite(ratio) and ratio <= config.max_steps):
        needed = math.ceil(ratio) if math.isfinite(ratio) else None
        count = f"{needed} steps" if needed is not None else "a non-finite number of steps"
        raise ResourceBoundError(
            f"t_max={t_max} with dt={config.dt} needs {count} "
            f"(limit {config.max_steps})",
            n_steps=needed,
            max_steps=config.max_steps,
        )
    n_steps = span.n_steps(config.dt)

    logger.debug(
        "Simulating sigma=%s alpha=%s beta=%s gamma=%s rho=%s v0=%s u0=%s "
        "t_max=%s (%d steps of %s)",
        *params.as_tuple(), v0, u0, t_max, n_steps, config.dt,
    )

    with np.errstate(over='ignore', invalid='ignore'):
        trajectory = solve_fixed_step(
            goodwin_field(params), (float(v0), float(u0)), span, config.dt,
        )

    bad = first_non_finite(trajectory)
    if bad is not None:
        t_bad = trajectory.times[bad]
        raise NumericalInstabilityError(
            f"State diverged to non-finite values at t={t_bad:g} (sample {bad})",
            time=t_bad,
        )

    u = np.array(trajectory.wage_share, dtype=np.float64)
    profit_share = 1.0 - u
    profit_rate = profit_share / params.sigma

    eq = equilibrium_point(params)
    logger.debug(
        "Simulation finished: %d samples, equilibrium v*=%.6g u*=%.6g",
        len(trajectory), eq.employment, eq.wage_share,
    )

    return SimulationResult(
        parameters=params,
        trajectory=trajectory,
        profit_share=tuple(profit_share.tolist()),
        profit_rate=tuple(profit_rate.tolist()),
        equilibrium=eq,
    )
