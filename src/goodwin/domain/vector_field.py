# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Goodwin (1967) growth-cycle vector field.

    dv/dt = v * ((1/sigma - (alpha + beta)) - u/sigma)
    du/dt = u * (rho*v - (alpha + gamma))

v is the employment rate, u the workers' share of output.
"""

from typing import Protocol, runtime_checkable

from goodwin.domain.parameters import ModelParameters


@runtime_checkable
class VectorField(Protocol):
    """Structural typing port for f(t, state) -> d(state)/dt."""

    def __call__(self, t: float, state: tuple[float, ...]) -> tuple[float, ...]: ...


def goodwin_derivatives(
    t: float,
    state: tuple[float, float],
    params: ModelParameters,
) -> tuple[float, float]:
    """Right-hand side of the Goodwin equations.

    The system is autonomous; ``t`` is accepted for integrator
    compatibility and ignored.

    Args:
        t: Current time.
        state: (employment, wage_share).
        params: Model parameters.

    Returns:
        (dv/dt, du/dt)
    """
    v, u = state
    inv_sigma = 1.0 / params.sigma

    dv = v * ((inv_sigma - (params.alpha + params.beta)) - u * inv_sigma)
    du = u * (params.rho * v - (params.alpha + params.gamma))
    return (dv, du)


def goodwin_field(params: ModelParameters) -> VectorField:
    """Bind parameters into an f(t, state) callable for the integrator."""

    def field(t: float, state: tuple[float, ...]) -> tuple[float, ...]:
        return goodwin_derivatives(t, (state[0], state[1]), params)

    return field
