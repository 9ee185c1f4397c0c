# warehouse-fulfillment/fulfillment/__init__.py

from .models import (
    CustomerOrder,
    Bundle,
    SealedBundle,
    Event,
    EventKind,
    Command,
    CommandType,
    WorkerStatus,
)
from .config import (
    BUNDLE_WINDOW_MINS,
    BUNDLE_CAPACITY,
    WORKER_ROSTER,
    END_OF_DAY,
)
from .exceptions import FulfillmentError, NoWorkerAvailable, WorkerPoolError, MalformedCommand
from .workers import WorkerPool
from .bundling import BundleManager, calculate_processing_time
from .events import EventLog
from .commands import CommandReader, parse_command, iter_commands
from .simulation import Simulation
from .utils import time_difference, add_minutes_to_time

__version__ = "1.0.0"

__all__ = [
    # Models
    "CustomerOrder",
    "Bundle",
    "SealedBundle",
    "Event",
    "EventKind",
    "Command",
    "CommandType",
    "WorkerStatus",
    # Errors
    "FulfillmentError",
    "NoWorkerAvailable",
    "WorkerPoolError",
    "MalformedCommand",
    # Core
    "Simulation",
    "WorkerPool",
    "BundleManager",
    "EventLog",
    "CommandReader",
    # Functions
    "calculate_processing_time",
    "parse_command",
    "iter_commands",
    "time_difference",
    "add_minutes_to_time",
    # Config
    "BUNDLE_WINDOW_MINS",
    "BUNDLE_CAPACITY",
    "WORKER_ROSTER",
    "END_OF_DAY",
]
