# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Error taxonomy for Goodwin simulations.

All errors subclass ValueError so callers that already guard numeric
input with ``except ValueError`` keep working.
"""


class SimulationError(ValueError):
    """Base class for failures of a simulation request."""


class InvalidParameterError(SimulationError):
    """Raised for parameters or inputs the model cannot be evaluated with.

    Covers zero capital-output ratio or wage sensitivity (both divisors),
    non-finite values and a non-positive time horizon.
    """


class NumericalInstabilityError(SimulationError):
    """Raised when the integrated state leaves the finite floats."""

    def __init__(self, message: str, time: float | None = None) -> None:
        super().__init__(message)
        self.time = time


class ResourceBoundError(SimulationError):
    """Raised when a request implies more integration steps than allowed.

    n_steps is None when t_max / dt overflows to infinity.
    """

    def __init__(self, message: str, n_steps: int | None, max_steps: int) -> None:
        super().__init__(message)
        self.n_steps = n_steps
        self.max_steps = max_steps
