# Copyright (c) 2026 The goodwin developers. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for Goodwin growth-cycle simulations.

Usage:
    # Default parameters (sigma=0.9, alpha=beta=gamma=0.02, rho=0.04)
    goodwin

    # Override parameters and horizon
    goodwin --sigma 2.5 --beta 0.01 --gamma 0.03 --t-max 400

    # Request payload from JSON, explicit flags win
    goodwin --params-file request.json --rho 0.05

    # Write the result record and a CSV of the trajectory
    goodwin -o result.json --export-csv trajectory.csv
"""
import argparse
import logging
import sys

from goodwin.adapters.csv_exporter import CsvTrajectoryExporter
from goodwin.adapters.json_io import (
    DEFAULT_REQUEST,
    JsonResultExporter,
    parse_request,
    read_request,
)
from goodwin.domain.cycle_analysis import summarize_cycle
from goodwin.domain.simulation import SimulationConfig, SimulationResult, simulate

logger = logging.getLogger(__name__)

_PARAM_FLAGS = (
    ('sigma', '--sigma', "Capital-output ratio"),
    ('alpha', '--alpha', "Labour productivity growth rate"),
    ('beta', '--beta', "Labour force growth rate"),
    ('gamma', '--gamma', "Wage adjustment constant"),
    ('rho', '--rho', "Wage sensitivity to employment"),
    ('v0', '--v0', "Initial employment rate"),
    ('u0', '--u0', "Initial workers' share"),
    ('t_max', '--t-max', "Simulation horizon"),
)


def run(
    payload: dict,
    config: SimulationConfig | None = None,
) -> SimulationResult:
    """Parse a request payload and run the simulation."""
    request = parse_request(payload)
    return simulate(
        request.parameters, request.v0, request.u0, request.t_max, config=config,
    )


def format_summary(result: SimulationResult) -> str:
    """Human-readable equilibrium and cycle summary."""
    eq = result.equilibrium.rounded(4)
    summary = summarize_cycle(result)
    lines = [
        f"Samples: {len(result.trajectory)} (dt={result.trajectory.dt:g})",
        f"Equilibrium: v*={eq.employment} u*={eq.wage_share}",
        f"Employment range: [{summary.employment_min:.4f}, {summary.employment_max:.4f}]",
        f"Wage share range: [{summary.wage_share_min:.4f}, {summary.wage_share_max:.4f}]",
    ]
    if summary.mean_period is not None:
        lines.append(
            f"Cycle period: {summary.mean_period:.2f} "
            f"({summary.upward_crossings} upward crossings of v*)"
        )
    else:
        lines.append("Cycle period: not resolved (fewer than two crossings of v*)")
    lines.append(f"First-integral drift: {summary.first_integral_drift:.3e}")
    return "\n".join(lines)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Simulate the Goodwin (1967) growth-cycle model with RK4",
    )
    param_group = parser.add_argument_group("model parameters")
    for key, flag, text in _PARAM_FLAGS:
        param_group.add_argument(
            flag, dest=key, type=float, default=None,
            help=f"{text} (default: {DEFAULT_REQUEST[key]})",
        )
    parser.add_argument(
        '--params-file',
        help="JSON request payload; explicit parameter flags override it",
    )
    parser.add_argument(
        '--dt', type=float, default=SimulationConfig.dt,
        help=f"Fixed RK4 step size (default: {SimulationConfig.dt})",
    )
    parser.add_argument(
        '--max-steps', type=int, default=SimulationConfig.max_steps,
        help=f"Reject runs needing more steps (default: {SimulationConfig.max_steps})",
    )
    parser.add_argument('--output', '-o', help="Write the result record as JSON")
    parser.add_argument('--export-csv', help="Export the trajectory to CSV")
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        payload = read_request(args.params_file) if args.params_file else {}
        for key, _, _ in _PARAM_FLAGS:
            value = getattr(args, key)
            if value is not None:
                payload[key] = value

        config = SimulationConfig(dt=args.dt, max_steps=args.max_steps)
        result = run(payload, config=config)
        print(format_summary(result))

        if args.output:
            n = JsonResultExporter().export(result, args.output)
            print(f"Wrote {n} samples to {args.output}")

        if args.export_csv:
            n = CsvTrajectoryExporter().export(result, args.export_csv)
            print(f"Exported {n} samples to {args.export_csv}")

    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        logger.debug("Simulation rejected", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
