# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Fixed-step RK4 integration over a closed time span.

Classical 4-stage Runge-Kutta step plus a driver that records the full
trajectory. No step-size adaptation and no blow-up detection: non-finite
input yields non-finite output.
"""

import math
from dataclasses import dataclass
from typing import Callable

import numpy as np

from goodwin.domain.parameters import TimeSpan


@dataclass(frozen=True)
class TrajectorySample:
    """Single (t, v, u) sample of a trajectory."""
    time: float
    employment: float
    wage_share: float


@dataclass(frozen=True)
class Trajectory:
    """Trajectory of a two-state system on a uniform time grid.

    The three series share one index; ``len(times) == n_steps + 1``.
    """
    times: tuple[float, ...]
    employment: tuple[float, ...]
    wage_share: tuple[float, ...]
    dt: float

    def __len__(self) -> int:
        return len(self.times)

    def __getitem__(self, index: int) -> TrajectorySample:
        return TrajectorySample(
            time=self.times[index],
            employment=self.employment[index],
            wage_share=self.wage_share[index],
        )

    @property
    def n_steps(self) -> int:
        return len(self.times) - 1

    @property
    def final_state(self) -> tuple[float, float]:
        return (self.employment[-1], self.wage_share[-1])


# --- RK4 integrator ---

def rk4_step(
    t: float,
    state: tuple[float, ...],
    h: float,
    deriv_fn: Callable[[float, tuple[float, ...]], tuple[float, ...]],
) -> tuple[float, tuple[float, ...]]:
    """Single 4th-order Runge-Kutta integration step.

    Args:
        t: Current time.
        state: Current state vector.
        h: Step size.
        deriv_fn: Derivative function f(t, state) -> d(state)/dt.

    Returns:
        (t_new, state_new)
    """
    sv = np.array(state, dtype=np.float64)
    k1 = np.array(deriv_fn(t, state))
    s1 = tuple((sv + 0.5 * h * k1).tolist())

    k2 = np.array(deriv_fn(t + 0.5 * h, s1))
    s2 = tuple((sv + 0.5 * h * k2).tolist())

    k3 = np.array(deriv_fn(t + 0.5 * h, s2))
    s3 = tuple((sv + h * k3).tolist())

    k4 = np.array(deriv_fn(t + h, s3))

    state_new_arr = sv + (h / 6.0) * (k1 + 2.0 * k2 + 2.0 * k3 + k4)
    state_new = tuple(float(x) for x in state_new_arr)
    return (t + h, state_new)


# --- Fixed-step driver ---

def solve_fixed_step(
    deriv_fn: Callable[[float, tuple[float, ...]], tuple[float, ...]],
    initial_state: tuple[float, float],
    span: TimeSpan,
    dt: float,
) -> Trajectory:
    """Integrate a two-state system from span.t_start to span.t_end.

    1. n_steps = ceil((t_end - t_start) / dt)
    2. Time grid is linspace(t_start, t_end, n_steps + 1)
    3. Each RK4 step advances the state by exactly dt; the last step may
       overshoot t_end, the recorded grid does not
    4. Sample 0 is (t_start, v0, u0) unchanged

    Args:
        deriv_fn: Derivative function f(t, state) -> d(state)/dt.
        initial_state: (v0, u0).
        span: Integration interval.
        dt: Fixed step size.

    Raises:
        ValueError: If dt <= 0 or t_end <= t_start.
    """
    n_steps = span.n_steps(dt)
    times = np.linspace(span.t_start, span.t_end, n_steps + 1)

    v0, u0 = float(initial_state[0]), float(initial_state[1])
    employment = [v0]
    wage_share = [u0]

    state: tuple[float, ...] = (v0, u0)
    for i in range(n_steps):
        _, state = rk4_step(float(times[i]), state, dt, deriv_fn)
        employment.append(state[0])
        wage_share.append(state[1])

    return Trajectory(
        times=tuple(times.tolist()),
        employment=tuple(employment),
        wage_share=tuple(wage_share),
        dt=dt,
    )


def first_non_finite(trajectory: Trajectory) -> int | None:
    """Index of the first sample with a non-finite state, or None."""
    for i, (v, u) in enumerate(zip(trajectory.employment, trajectory.wage_share)):
        if not (math.isfinite(v) and math.isfinite(u)):
            return i
    return None
