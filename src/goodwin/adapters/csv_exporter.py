# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV trajectory exporter.

Exports one row per trajectory sample with the derived profit series.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging

from goodwin.domain.simulation import SimulationResult
from goodwin.ports import ResultExporter

logger = logging.getLogger(__name__)


_HEADER = ['t', 'v', 'u', 'profit_share', 'profit_rate']


class CsvTrajectoryExporter(ResultExporter):
    """Exports a simulated trajectory to CSV."""

    def __init__(self, precision: int = 10) -> None:
        self._fmt = f'{{:.{precision}g}}'

    def export(self, result: SimulationResult, path: str) -> int:
        fmt = self._fmt
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)
            rows = zip(
                result.times,
                result.employment,
                result.wage_share,
                result.profit_share,
                result.profit_rate,
            )
            count = 0
            for row in rows:
                writer.writerow([fmt.format(x) for x in row])
                count += 1

        logger.debug("Exported %d samples to %s", count, path)
        return count
