# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for simulation result export.

Adapters implement this to write results in different file formats.
"""
from typing import Protocol, runtime_checkable

from goodwin.domain.simulation import SimulationResult


@runtime_checkable
class ResultExporter(Protocol):
    """Port for exporting a simulation result to file."""

    def export(self, result: SimulationResult, path: str) -> int:
        """
        Write a simulation result to a file.

        Args:
            result: SimulationResult from simulate().
            path: Output file path.

        Returns:
            Number of trajectory samples written.
        """
        ...
