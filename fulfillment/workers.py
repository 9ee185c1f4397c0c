# warehouse-fulfillment/fulfillment/workers.py
"""
Worker pool for the Warehouse Order-Fulfillment Simulation.

Workers are handed out first-in first-out and returned to the back of the
queue when their bundle seals, so the available list always reflects the
order in which workers became free.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Iterable, Optional, Tuple

from . import config
from .exceptions import NoWorkerAvailable, WorkerPoolError
from .models import WorkerStatus

logger = logging.getLogger(__name__)


class WorkerPool:
    """
    FIFO pool of named workers.

    Attributes:
        roster: Every worker known to the pool, in hand-out order
    """

    def __init__(self, roster: Optional[Iterable[str]] = None) -> None:
        if roster is None:
            roster = config.WORKER_ROSTER
        self.roster: Tuple[str, ...] = tuple(roster)
        if not self.roster:
            raise ValueError("Worker roster is empty")
        if len(set(self.roster)) != len(self.roster):
            raise ValueError(f"Duplicate worker names in roster: {self.roster}")
        self._available: Deque[str] = deque(self.roster)

    def acquire(self) -> str:
        """
        Take the next available worker.

        Raises:
            NoWorkerAvailable: If every worker is busy
        """
        if not self._available:
            raise NoWorkerAvailable("All workers are busy")
        worker = self._available.popleft()
        logger.debug(f"Acquired worker {worker}")
        return worker

    def release(self, worker: str) -> None:
        """
        Return a worker to the back of the available queue.

        Raises:
            WorkerPoolError: If the worker is unknown or already available
        """
        if worker not in self.roster:
            raise WorkerPoolError(f"Unknown worker: {worker}")
        if worker in self._available:
            raise WorkerPoolError(f"Worker {worker} is already available")
        self._available.append(worker)
        logger.debug(f"Released worker {worker}")

    def status(self, worker: str) -> WorkerStatus:
        if worker not in self.roster:
            raise WorkerPoolError(f"Unknown worker: {worker}")
        return WorkerStatus.AVAILABLE if worker in self._available else WorkerStatus.BUSY

    @property
    def available(self) -> Tuple[str, ...]:
        """Available workers in pool order."""
        return tuple(self._available)

    @property
    def busy(self) -> Tuple[str, ...]:
        """Busy workers in roster order."""
        return tuple(w for w in self.roster if w not in self._available)

    @property
    def has_available(self) -> bool:
        return bool(self._available)

    def __len__(self) -> int:
        return len(self.roster)

    def __repr__(self) -> str:
        return f"WorkerPool(available={list(self._available)}, busy={list(self.busy)})"
