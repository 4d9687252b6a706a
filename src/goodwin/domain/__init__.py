# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Numerical core: vector field, RK4 solver, equilibrium, simulation facade."""
