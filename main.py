#!/usr/bin/env python3
# warehouse-fulfillment/main.py
"""
Command-Line Interface for the Warehouse Order-Fulfillment Simulation.

Reads a command file, runs the simulation and prints the chronologically
sorted event log to stdout.

Usage:
    python main.py orders.txt               # Print the event log
    python main.py orders.txt --summary     # Also print a KPI table (stderr)
    python main.py orders.txt --verbose     # Log bundling decisions (stderr)

Exit Codes:
    0: Success
    1: Input file missing or unreadable
    2: Invalid arguments
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from fulfillment import utils
from fulfillment.simulation import Simulation


def print_results_table(results: Dict[str, Any], file=None) -> None:
    """
    Print a formatted table of KPI results.

    Args:
        results: Output of Simulation.get_results()
        file: Stream to print to (default stderr)
    """
    if file is None:
        file = sys.stderr

    rows = [
        ("Orders Received", results["orders_received"]),
        ("Orders Fulfilled", results["orders_fulfilled"]),
        ("Orders Queued", results["orders_queued"]),
        ("Bundles Sealed", results["bundles_sealed"]),
        ("Orders/Bundle", f"{results['avg_orders_per_bundle']:.2f}"),
        ("Max Fulfillment Time", utils.format_time_duration(results["max_fulfillment_time_min"])),
        ("Avg Processing Time", f"{results['avg_processing_time_min']:.2f} min"),
        ("Workers Used", f"{results['workers_used']}/{results['total_workers']}"),
        ("Skipped Lines", results["skipped_lines"]),
    ]

    print("\n" + "=" * 44, file=file)
    print("  SIMULATION SUMMARY", file=file)
    print("=" * 44, file=file)
    for label, value in rows:
        print(f"| {label:<24} | {str(value):>13} |", file=file)

    print("|" + "-" * 26 + "|" + "-" * 15 + "|", file=file)
    for worker, trips in results["trips_per_worker"].items():
        print(f"| {'Trips: ' + worker:<24} | {trips:>13} |", file=file)
    print("=" * 44 + "\n", file=file)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="Warehouse Order-Fulfillment Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input commands (one per line):
  CustomerOrder <HHMM> <customerId> <bookCount> <electronicsCount>
  PrintAvailableWorkerList <HHMM>
  PrintWorkerAssignmentList <HHMM>
  PrintMaxFulfillmentTime <HHMM>
        """
    )

    parser.add_argument(
        "input_file",
        help="File of simulation commands"
    )

    parser.add_argument(
        "--summary", "-s",
        action="store_true",
        help="Print a KPI summary to stderr after the event log"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log bundling decisions to stderr"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    try:
        commands, skipped = Simulation.load_commands(args.input_file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        return 1

    sim = Simulation()
    for event in sim.run(commands, skipped_lines=skipped):
        print(event)

    if args.summary:
        print_results_table(sim.get_results())

    return 0


if __name__ == "__main__":
    sys.exit(main())
