# warehouse-fulfillment/fulfillment/commands.py
"""
Input parsing for the Warehouse Order-Fulfillment Simulation.

Each input line is one whitespace-separated command:

    CustomerOrder <HHMM> <customerId> <bookCount> <electronicsCount>
    PrintAvailableWorkerList <HHMM>
    PrintWorkerAssignmentList <HHMM>
    PrintMaxFulfillmentTime <HHMM>

Lines that do not match are skipped without stopping the simulation.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator

from . import utils
from .exceptions import MalformedCommand
from .models import Command, CommandType, CustomerOrder

logger = logging.getLogger(__name__)

# Expected token count per command, keyword included
TOKEN_COUNTS: Dict[CommandType, int] = {
    CommandType.CUSTOMER_ORDER: 5,
    CommandType.PRINT_AVAILABLE_WORKER_LIST: 2,
    CommandType.PRINT_WORKER_ASSIGNMENT_LIST: 2,
    CommandType.PRINT_MAX_FULFILLMENT_TIME: 2,
}


def _parse_count(line: str, token: str, name: str) -> int:
    try:
        count = int(token)
    except ValueError:
        raise MalformedCommand(line, f"{name} is not an integer")
    if count < 0:
        raise MalformedCommand(line, f"{name} is negative")
    return count


def parse_command(line: str) -> Command:
    """
    Parse a single input line.

    Args:
        line: Raw input line

    Returns:
        The parsed command

    Raises:
        MalformedCommand: Unknown keyword, wrong token count, bad time or bad counts
    """
    parts = line.split()
    if not parts:
        raise MalformedCommand(line, "Empty line")

    try:
        kind = CommandType(parts[0])
    except ValueError:
        raise MalformedCommand(line, f"Unknown command {parts[0]!r}")

    if len(parts) != TOKEN_COUNTS[kind]:
        raise MalformedCommand(line, f"{kind.value} expects {TOKEN_COUNTS[kind]} tokens, got {len(parts)}")

    time = parts[1]
    if not utils.is_valid_time(time):
        raise MalformedCommand(line, f"Invalid time {time!r}")

    if kind != CommandType.CUSTOMER_ORDER:
        return Command(kind=kind, time=time)

    order = CustomerOrder(
        arrival_time=time,
        customer_id=parts[2],
        book_count=_parse_count(line, parts[3], "bookCount"),
        electronics_count=_parse_count(line, parts[4], "electronicsCount"),
    )
    return Command(kind=kind, time=time, order=order)


class CommandReader:
    """
    Iterates over the valid commands in a stream of lines.

    Blank lines are ignored. Malformed lines are logged and counted in
    `skipped`, never raised.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = lines
        self.skipped: int = 0

    def __iter__(self) -> Iterator[Command]:
        for line_no, line in enumerate(self._lines, start=1):
            if not line.strip():
                continue
            try:
                yield parse_command(line)
            except MalformedCommand as e:
                self.skipped += 1
                logger.debug(f"Skipping line {line_no}: {e}")


def iter_commands(lines: Iterable[str]) -> Iterator[Command]:
    """Yield the valid commands in `lines`, skipping malformed ones."""
    return iter(CommandReader(lines))
