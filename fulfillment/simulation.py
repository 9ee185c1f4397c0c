# warehouse-fulfillment/fulfillment/simulation.py
"""
Simulation Engine for the Warehouse Order-Fulfillment Simulation.

This module implements the scheduler that drives a simulated warehouse shift.
Key responsibilities:
- Time management (the clock is carried by the input commands)
- Order intake and hand-off to the Bundle Manager
- Sealing bundles whose bundling window has elapsed
- Recording output events and answering print queries
- KPI calculation and reporting

The simulation is a deterministic fold over the command sequence: there is no
real-time waiting and no concurrency. All mutable state lives on one
Simulation object so independent runs never interfere.
"""

from __future__ import annotations

import logging
import os
import statistics
from typing import Any, Dict, Iterable, List, Optional, Tuple

from . import config
from .bundling import BundleManager
from .commands import CommandReader
from .events import EventLog
from .models import Command, CommandType, CustomerOrder, Event, EventKind, SealedBundle
from .workers import WorkerPool

logger = logging.getLogger(__name__)


class Simulation:
    """
    Command-driven simulation of warehouse order fulfillment.

    For every command:
    1. CustomerOrder: log the order and hand it to the Bundle Manager
    2. Anything else: seal elapsed bundles first, then answer the query

    At end of input every remaining bundle is flushed and the log is sorted.

    Attributes:
        pool: The worker pool
        bundles: The Bundle Manager
        log: Recorded events
        max_fulfillment_time: Largest processing time of any sealed bundle
        sealed_bundles: Every sealed bundle, in sealing order
    """

    def __init__(
        self,
        roster: Optional[Iterable[str]] = None,
        window_mins: Optional[int] = None,
        capacity: Optional[int] = None,
        allow_bundling: bool = True,
    ) -> None:
        """
        Initialize a fresh simulation.

        Args:
            roster: Worker names in hand-out order (default from config)
            window_mins: Bundling window (default from config)
            capacity: Items per bundle (default from config)
            allow_bundling: When False every order gets its own worker trip
        """
        self.pool = WorkerPool(roster)
        self.bundles = BundleManager(
            self.pool,
            window_mins=window_mins,
            capacity=capacity,
            allow_bundling=allow_bundling,
        )
        self.log = EventLog()
        self.end_of_day: str = config.END_OF_DAY

        self.max_fulfillment_time: int = 0
        self.sealed_bundles: List[SealedBundle] = []

        # KPI Tracking
        self.orders_received: int = 0
        self.commands_processed: int = 0
        self.skipped_lines: int = 0
        self.current_time: Optional[str] = None

    @staticmethod
    def load_commands(input_file: str) -> Tuple[List[Command], int]:
        """
        Read and parse a command file.

        Args:
            input_file: Path to the command file

        Returns:
            Tuple of (commands, number of malformed lines skipped)

        Raises:
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
        """
        if not os.path.exists(input_file):
            raise FileNotFoundError(f"Input file not found: {input_file}")

        with open(input_file, "r") as f:
            reader = CommandReader(f)
            commands = list(reader)
        return commands, reader.skipped

    def process(self, command: Command) -> None:
        """Apply a single command to the simulation state."""
        self.commands_processed += 1
        self.current_time = command.time

        if command.kind == CommandType.CUSTOMER_ORDER:
            self._handle_order(command.order)
            return

        self.finalize(command.time)

        if command.kind == CommandType.PRINT_AVAILABLE_WORKER_LIST:
            self.log.record(command.time, EventKind.AVAILABLE_WORKER_LIST, " ".join(self.pool.available))
        elif command.kind == CommandType.PRINT_WORKER_ASSIGNMENT_LIST:
            assignments = [str(b) for b in self.bundles.open_bundles if b.orders]
            self.log.record(command.time, EventKind.WORKER_ASSIGNMENT_LIST, " ".join(assignments))
        elif command.kind == CommandType.PRINT_MAX_FULFILLMENT_TIME:
            self.log.record(command.time, EventKind.MAX_FULFILLMENT_TIME, str(self.max_fulfillment_time))

    def _handle_order(self, order: CustomerOrder) -> None:
        self.orders_received += 1
        self.log.record(
            order.arrival_time,
            EventKind.CUSTOMER_ORDER,
            f"{order.customer_id} {order.book_count} {order.electronics_count}",
        )
        self.bundles.submit(order)

    def _record_sealed(self, sealed: SealedBundle) -> None:
        self.log.record(sealed.assignment_time, EventKind.WORKER_ASSIGNMENT, f"{sealed.worker} {sealed.customer_list}")
        self.log.record(sealed.completion_time, EventKind.ORDER_COMPLETION, sealed.customer_list)
        self.max_fulfillment_time = max(self.max_fulfillment_time, sealed.processing_time)
        self.sealed_bundles.append(sealed)

    def finalize(self, current_time: str, force: bool = False) -> List[SealedBundle]:
        """
        Seal bundles whose window has elapsed and record their events.

        Calling this again at the same time with no new orders records nothing
        for bundles that were already sealed.

        Args:
            current_time: HHMM time of the triggering command
            force: Seal every open bundle regardless of its window

        Returns:
            Bundles sealed by this call
        """
        sealed = self.bundles.finalize(current_time, force=force)
        for s in sealed:
            self._record_sealed(s)
        return sealed

    def flush(self) -> None:
        """
        Seal everything still open at end of input.

        Queued orders drained into new bundles during the flush are sealed
        on the next pass, so this loops until nothing is open or waiting.
        """
        while self.bundles.open_bundles or self.bundles.pending:
            self.finalize(self.end_of_day, force=True)

    def run(self, commands: Iterable[Command], skipped_lines: int = 0) -> List[Event]:
        """
        Run the full simulation.

        Args:
            commands: Parsed commands in input order
            skipped_lines: Malformed input lines dropped before parsing (reported in KPIs)

        Returns:
            All recorded events sorted by time
        """
        self.skipped_lines += skipped_lines
        logger.info("======== Starting Simulation ========")

        for command in commands:
            self.process(command)

        self.flush()
        logger.info(
            f"Simulation complete: {self.orders_received} orders, "
            f"{len(self.sealed_bundles)} bundles, max fulfillment {self.max_fulfillment_time}m"
        )
        return self.log.sorted_events()

    def run_lines(self, lines: Iterable[str]) -> List[Event]:
        """Parse raw input lines and run them, counting malformed lines."""
        reader = CommandReader(lines)
        events = self.run(reader)
        self.skipped_lines += reader.skipped
        return events

    def get_results(self) -> Dict[str, Any]:
        """
        Calculate and return KPI results for the run so far.

        Returns:
            Dictionary of KPIs, including trips per worker
        """
        trips_per_worker: Dict[str, int] = {w: 0 for w in self.pool.roster}
        for s in self.sealed_bundles:
            trips_per_worker[s.worker] += 1

        processing_times = [s.processing_time for s in self.sealed_bundles]
        orders_fulfilled = sum(s.num_orders for s in self.sealed_bundles)
        bundles_sealed = len(self.sealed_bundles)
        workers_used = sum(1 for trips in trips_per_worker.values() if trips > 0)

        if processing_times:
            avg_processing = statistics.mean(processing_times)
            min_processing = min(processing_times)
        else:
            avg_processing = 0
            min_processing = 0

        return {
            "orders_received": self.orders_received,
            "orders_fulfilled": orders_fulfilled,
            "orders_queued": self.bundles.orders_queued,
            "bundles_sealed": bundles_sealed,
            "avg_orders_per_bundle": round(orders_fulfilled / bundles_sealed, 2) if bundles_sealed else 0,
            "max_fulfillment_time_min": self.max_fulfillment_time,
            "avg_processing_time_min": round(avg_processing, 2),
            "min_processing_time_min": min_processing,
            "workers_used": workers_used,
            "total_workers": len(self.pool),
            "trips_per_worker": trips_per_worker,
            "commands_processed": self.commands_processed,
            "skipped_lines": self.skipped_lines,
        }
