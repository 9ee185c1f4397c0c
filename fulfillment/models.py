# warehouse-fulfillment/fulfillment/models.py
"""
Core domain models for the Warehouse Order-Fulfillment Simulation.

This module defines the fundamental data structures used throughout the simulation:
- CustomerOrder: A customer's request for books and/or electronics
- Bundle: A group of compatible orders being collected for one worker trip
- SealedBundle: A finished bundle with its computed timings
- Event: A timestamped line of the simulation's output log
- Command: A parsed line of simulation input
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class WorkerStatus(Enum):
    """
    States for a worker in the pool.

    The worker state machine:
    - AVAILABLE: Waiting at the packing station, can open a new bundle
    - BUSY: Holds exactly one open bundle until it is sealed
    """
    AVAILABLE = "AVAILABLE"
    BUSY = "BUSY"


class EventKind(Enum):
    """Kinds of output events. The value is the keyword printed in the log."""
    CUSTOMER_ORDER = "CustomerOrder"
    WORKER_ASSIGNMENT = "WorkerAssignment"
    ORDER_COMPLETION = "OrderCompletion"
    AVAILABLE_WORKER_LIST = "AvailableWorkerList"
    WORKER_ASSIGNMENT_LIST = "WorkerAssignmentList"
    MAX_FULFILLMENT_TIME = "MaxFulfillmentTime"


class CommandType(Enum):
    """Input command keywords."""
    CUSTOMER_ORDER = "CustomerOrder"
    PRINT_AVAILABLE_WORKER_LIST = "PrintAvailableWorkerList"
    PRINT_WORKER_ASSIGNMENT_LIST = "PrintWorkerAssignmentList"
    PRINT_MAX_FULFILLMENT_TIME = "PrintMaxFulfillmentTime"


@dataclass(frozen=True)
class CustomerOrder:
    """
    Represents a customer order placed at the warehouse.

    Attributes:
        arrival_time: HHMM time the order was placed
        customer_id: Customer name, echoed in assignment and completion events
        book_count: Number of books ordered
        electronics_count: Number of electronics items ordered
    """
    arrival_time: str
    customer_id: str
    book_count: int
    electronics_count: int

    @property
    def total_items(self) -> int:
        return self.book_count + self.electronics_count

    @property
    def has_books(self) -> bool:
        return self.book_count > 0

    @property
    def has_electronics(self) -> bool:
        return self.electronics_count > 0

    @property
    def category_profile(self) -> Tuple[bool, bool]:
        """(has_books, has_electronics). Orders bundle only with an equal profile."""
        return (self.has_books, self.has_electronics)

    def is_compatible_with(self, other: CustomerOrder) -> bool:
        """Whether both orders contain the same kinds of items."""
        return self.category_profile == other.category_profile

    def __repr__(self) -> str:
        return f"CustomerOrder({self.arrival_time}, {self.customer_id}, {self.book_count}, {self.electronics_count})"


@dataclass
class Bundle:
    """
    An open group of compatible orders assigned to a single worker trip.

    Attributes:
        worker: The worker who will fulfill the bundle
        orders: Orders in the order they joined
    """
    worker: str
    orders: List[CustomerOrder] = field(default_factory=list)

    @property
    def first_order(self) -> Optional[CustomerOrder]:
        return self.orders[0] if self.orders else None

    @property
    def last_order(self) -> Optional[CustomerOrder]:
        return self.orders[-1] if self.orders else None

    @property
    def first_order_time(self) -> Optional[str]:
        return self.orders[0].arrival_time if self.orders else None

    @property
    def customers(self) -> List[str]:
        """Returns customer IDs in the order they joined."""
        return [o.customer_id for o in self.orders]

    @property
    def total_books(self) -> int:
        return sum(o.book_count for o in self.orders)

    @property
    def total_electronics(self) -> int:
        return sum(o.electronics_count for o in self.orders)

    @property
    def total_items(self) -> int:
        return self.total_books + self.total_electronics

    def __str__(self) -> str:
        return f"{self.worker}:{','.join(self.customers)}"


@dataclass(frozen=True)
class SealedBundle:
    """
    A bundle that has been sealed, with its trip timings.

    Attributes:
        worker: Worker who fulfilled the trip
        customers: Customer IDs in bundle order
        total_books: Books picked on the trip
        total_electronics: Electronics items picked on the trip
        processing_time: Minutes from the start of the bundling window to completion
        assignment_time: HHMM time the assignment was made (last order + window)
        completion_time: HHMM time the trip finished
    """
    worker: str
    customers: Tuple[str, ...]
    total_books: int
    total_electronics: int
    processing_time: int
    assignment_time: str
    completion_time: str

    @property
    def num_orders(self) -> int:
        return len(self.customers)

    @property
    def customer_list(self) -> str:
        """Comma-joined customer IDs as they appear in the output."""
        return ",".join(self.customers)


@dataclass(frozen=True)
class Event:
    """
    A single line of the simulation's output log.

    Events compare on time only, so sorting is stable for equal timestamps.
    """
    time: str
    kind: EventKind
    payload: str

    def __lt__(self, other: Event) -> bool:
        return self.time < other.time

    def __str__(self) -> str:
        return f"{self.kind.value} {self.time} {self.payload}"


@dataclass(frozen=True)
class Command:
    """
    A parsed input line.

    Attributes:
        kind: Which command this is
        time: HHMM timestamp carried by the command
        order: The new order, for CustomerOrder commands only
    """
    kind: CommandType
    time: str
    order: Optional[CustomerOrder] = None
