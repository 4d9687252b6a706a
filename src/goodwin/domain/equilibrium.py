# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Closed-form interior equilibrium of the Goodwin model."""

from dataclasses import dataclass

from goodwin.domain.parameters import ModelParameters


@dataclass(frozen=True)
class EquilibriumPoint:
    """Centre of the closed Goodwin orbits."""
    employment: float
    wage_share: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.employment, self.wage_share)

    def rounded(self, digits: int = 4) -> "EquilibriumPoint":
        return EquilibriumPoint(
            employment=round(self.employment, digits),
            wage_share=round(self.wage_share, digits),
        )


def equilibrium_point(params: ModelParameters) -> EquilibriumPoint:
    """Interior fixed point where both derivatives vanish.

    v* = (alpha + gamma) / rho
    u* = (1/sigma - (alpha + beta)) / (1/sigma)

    Values outside [0, 1] are returned unguarded.
    """
    inv_sigma = 1.0 / params.sigma
    v_eq = (params.alpha + params.gamma) / params.rho
    u_eq = (inv_sigma - (params.alpha + params.beta)) / inv_sigma
    return EquilibriumPoint(employment=v_eq, wage_share=u_eq)
