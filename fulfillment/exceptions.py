# warehouse-fulfillment/fulfillment/exceptions.py
"""Exceptions raised by the fulfillment simulation."""


class FulfillmentError(Exception):
    """Base class for all simulation errors."""


class NoWorkerAvailable(FulfillmentError):
    """Raised by the worker pool when every worker is busy."""


class WorkerPoolError(FulfillmentError):
    """Raised when a worker is released twice or was never part of the roster."""


class MalformedCommand(FulfillmentError, ValueError):
    """
    Raised when an input line cannot be parsed into a command.

    The simulation skips such lines; this never aborts a run.
    """

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason
