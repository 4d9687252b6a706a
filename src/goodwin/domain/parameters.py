# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Value types of the Goodwin growth-cycle model.

State ordering is employment first, wage share second: every tuple
handed to the integrator is ``(v, u)``.
"""

import math
from dataclasses import dataclass

from goodwin.domain.errors import InvalidParameterError


@dataclass(frozen=True)
class ModelParameters:
    """Goodwin model parameters.

    sigma: capital-output ratio
    alpha: labour productivity growth rate
    beta: labour force growth rate
    gamma: constant in the wage adjustment (Phillips) curve
    rho: sensitivity of wages to employment
    """
    sigma: float
    alpha: float
    beta: float
    gamma: float
    rho: float

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        return (self.sigma, self.alpha, self.beta, self.gamma, self.rho)

    def validate(self) -> None:
        """Reject values the vector field or equilibrium cannot be computed with.

        Economic ranges are not enforced; only non-finite values and the
        two divisors (sigma, rho) being zero.

        Raises:
            InvalidParameterError: On the first offending field.
        """
        for name, value in zip(("sigma", "alpha", "beta", "gamma", "rho"), self.as_tuple()):
            if not math.isfinite(value):
                raise InvalidParameterError(f"{name} must be finite, got {value!r}")
        if self.sigma == 0.0:
            raise InvalidParameterError("sigma (capital-output ratio) must be non-zero")
        if self.rho == 0.0:
            raise InvalidParameterError("rho (wage sensitivity) must be non-zero")


@dataclass(frozen=True)
class TimeSpan:
    """Closed integration interval [t_start, t_end]."""
    t_start: float
    t_end: float

    @property
    def duration(self) -> float:
        return self.t_end - self.t_start

    def n_steps(self, dt: float) -> int:
        """Number of uniform intervals: ceil((t_end - t_start) / dt)."""
        if dt <= 0.0:
            raise ValueError(f"Step size must be positive, got {dt}")
        if not self.t_end > self.t_start:
            raise ValueError(
                f"t_end must be greater than t_start, got [{self.t_start}, {self.t_end}]"
            )
        return int(math.ceil(self.duration / dt))
