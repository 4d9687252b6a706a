# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for request parsing and result export.

External dependencies (json, csv, file I/O) are confined to this layer.
"""
from goodwin.adapters.csv_exporter import CsvTrajectoryExporter
from goodwin.adapters.json_io import (
    DEFAULT_REQUEST,
    JsonResultExporter,
    SimulationRequest,
    parse_request,
    read_request,
    result_to_record,
    run_request,
)

__all__ = [
    "CsvTrajectoryExporter",
    "DEFAULT_REQUEST",
    "JsonResultExporter",
    "SimulationRequest",
    "parse_request",
    "read_request",
    "result_to_record",
    "run_request",
]
