# warehouse-fulfillment/fulfillment/bundling.py
"""
Bundle Manager for the Warehouse Order-Fulfillment Simulation.

This module decides, for every incoming order, whether it joins an open bundle,
opens a new bundle for a free worker, or waits in the global FIFO queue. It also
seals bundles once their bundling window has elapsed.

Bundling rules (all must hold for an order to join a bundle):
1. **Compatibility**: same category profile as the bundle's first order
   (books-only, electronics-only, mixed, or empty).
2. **Window**: arrived within BUNDLE_WINDOW_MINS of the bundle's first order.
3. **Capacity**: bundle items plus the order's items stay within BUNDLE_CAPACITY.

Queue discipline: once an order has been queued, every later order is queued
behind it until finalization drains the queue. A newly arrived order never
overtakes an older queued one, even if a worker is free at that instant.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, List, Optional, Tuple

from . import config, utils
from .models import Bundle, CustomerOrder, SealedBundle
from .workers import WorkerPool

logger = logging.getLogger(__name__)


def calculate_processing_time(
    total_books: int,
    total_electronics: int,
    window_mins: Optional[int] = None,
) -> int:
    """
    Calculate the minutes a worker spends on a bundle.

    The trip is timed from the start of the bundling window:
    window + travel to first category + 1 min per book + travel between
    categories (mixed bundles only) + 1 min per electronics item + return.
    An empty bundle costs only the window.

    Args:
        total_books: Books across all orders in the bundle
        total_electronics: Electronics items across all orders in the bundle
        window_mins: Bundling window (default from config)

    Returns:
        Processing time in minutes

    Example:
        >>> calculate_processing_time(3, 2)
        25  # 5 + 5 + 3 + 5 + 2 + 5
    """
    if window_mins is None:
        window_mins = config.BUNDLE_WINDOW_MINS

    minutes = window_mins
    if total_books == 0 and total_electronics == 0:
        return minutes

    minutes += config.TRAVEL_TO_FIRST_CATEGORY_MINS
    if total_books > 0:
        minutes += total_books * config.MINS_PER_ITEM
    if total_electronics > 0:
        if total_books > 0:
            minutes += config.TRAVEL_BETWEEN_CATEGORIES_MINS
        minutes += total_electronics * config.MINS_PER_ITEM
    minutes += config.RETURN_TO_STATION_MINS
    return minutes


class BundleManager:
    """
    Groups pending orders into worker trips.

    Attributes:
        pool: Worker pool that bundles draw workers from
        window_mins: Bundling window in minutes
        capacity: Maximum items per bundle
        allow_bundling: When False, every order gets its own trip
        orders_queued: Number of orders that had to wait for a worker
    """

    def __init__(
        self,
        pool: WorkerPool,
        window_mins: Optional[int] = None,
        capacity: Optional[int] = None,
        allow_bundling: bool = True,
    ) -> None:
        self.pool = pool
        self.window_mins: int = config.BUNDLE_WINDOW_MINS if window_mins is None else window_mins
        self.capacity: int = config.BUNDLE_CAPACITY if capacity is None else capacity
        self.allow_bundling = allow_bundling

        # Open bundles keyed by worker, in the order they were opened
        self._open: Dict[str, Bundle] = {}
        self._queue: Deque[CustomerOrder] = deque()
        self.orders_queued: int = 0

    @property
    def open_bundles(self) -> Tuple[Bundle, ...]:
        """Open bundles in the order they were opened."""
        return tuple(self._open.values())

    @property
    def pending(self) -> Tuple[CustomerOrder, ...]:
        """Orders waiting for a worker, oldest first."""
        return tuple(self._queue)

    def bundle_for(self, worker: str) -> Optional[Bundle]:
        return self._open.get(worker)

    def can_add_to_bundle(self, bundle: Bundle, order: CustomerOrder) -> bool:
        """
        Check the compatibility, window and capacity rules for an order.

        An empty bundle accepts any order.
        """
        first = bundle.first_order
        if first is None:
            return True
        if not first.is_compatible_with(order):
            return False
        if utils.time_difference(first.arrival_time, order.arrival_time) > self.window_mins:
            return False
        return bundle.total_items + order.total_items <= self.capacity

    def submit(self, order: CustomerOrder) -> Optional[Bundle]:
        """
        Hand a newly arrived order to the manager.

        Returns:
            The bundle that took the order, or None if it was queued
        """
        if self._queue or not self.pool.has_available:
            self._queue.append(order)
            self.orders_queued += 1
            logger.debug(f"[{order.arrival_time}] Queued {order.customer_id} ({len(self._queue)} waiting)")
            return None
        return self._place(order)

    def _place(self, order: CustomerOrder) -> Bundle:
        """Extend the first accepting open bundle, else open one for a new worker."""
        if self.allow_bundling:
            for bundle in self._open.values():
                if self.can_add_to_bundle(bundle, order):
                    bundle.orders.append(order)
                    logger.debug(f"[{order.arrival_time}] Bundled {order.customer_id} with {bundle}")
                    return bundle

        worker = self.pool.acquire()
        bundle = Bundle(worker=worker, orders=[order])
        self._open[worker] = bundle
        logger.debug(f"[{order.arrival_time}] Opened bundle {bundle}")
        return bundle

    def _drain_queue(self) -> None:
        """Move queued orders into bundles, oldest first, while workers are free."""
        while self._queue and self.pool.has_available:
            self._place(self._queue.popleft())

    def _seal(self, bundle: Bundle) -> SealedBundle:
        processing_time = calculate_processing_time(
            bundle.total_books, bundle.total_electronics, self.window_mins
        )
        assignment_time = utils.add_minutes_to_time(bundle.last_order.arrival_time, self.window_mins)
        completion_time = utils.add_minutes_to_time(assignment_time, processing_time - self.window_mins)
        return SealedBundle(
            worker=bundle.worker,
            customers=tuple(bundle.customers),
            total_books=bundle.total_books,
            total_electronics=bundle.total_electronics,
            processing_time=processing_time,
            assignment_time=assignment_time,
            completion_time=completion_time,
        )

    def finalize(self, current_time: str, force: bool = False) -> List[SealedBundle]:
        """
        Seal every bundle whose window has elapsed as of current_time.

        A bundle is due once current_time is at least window_mins away from its
        last order's arrival. Sealed workers are released and the queue is then
        drained into the bundling logic while workers remain available.

        Args:
            current_time: HHMM time of the command being processed
            force: Seal every open bundle regardless of its window

        Returns:
            Sealed bundles, in the order their bundles were opened
        """
        sealed: List[SealedBundle] = []
        for worker, bundle in list(self._open.items()):
            if not bundle.orders:
                continue
            elapsed = utils.time_difference(bundle.last_order.arrival_time, current_time)
            if force or elapsed >= self.window_mins:
                sealed.append(self._seal(bundle))
                del self._open[worker]
                self.pool.release(worker)
                logger.debug(f"[{current_time}] Sealed {bundle}")

        self._drain_queue()
        return sealed
