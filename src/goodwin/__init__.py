# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Goodwin

Simulate the Goodwin (1967) growth-cycle model of employment and the
workers' share of output. Fixed-step RK4 integration, closed-form
equilibrium, profit series and cycle diagnostics.
"""

from goodwin.domain.errors import (
    SimulationError,
    InvalidParameterError,
    NumericalInstabilityError,
    ResourceBoundError,
)
from goodwin.domain.parameters import (
    ModelParameters,
    TimeSpan,
)
from goodwin.domain.vector_field import (
    VectorField,
    goodwin_derivatives,
    goodwin_field,
)
from goodwin.domain.integration import (
    TrajectorySample,
    Trajectory,
    rk4_step,
    solve_fixed_step,
)
from goodwin.domain.equilibrium import (
    EquilibriumPoint,
    equilibrium_point,
)
from goodwin.domain.simulation import (
    SimulationConfig,
    SimulationResult,
    simulate,
)
from goodwin.domain.cycle_analysis import (
    CycleSummary,
    first_integral,
    linearized_period,
    summarize_cycle,
)

__all__ = [
    "SimulationError",
    "InvalidParameterError",
    "NumericalInstabilityError",
    "ResourceBoundError",
    "ModelParameters",
    "TimeSpan",
    "VectorField",
    "goodwin_derivatives",
    "goodwin_field",
    "TrajectorySample",
    "Trajectory",
    "rk4_step",
    "solve_fixed_step",
    "EquilibriumPoint",
    "equilibrium_point",
    "SimulationConfig",
    "SimulationResult",
    "simulate",
    "CycleSummary",
    "first_integral",
    "linearized_period",
    "summarize_cycle",
]
