# warehouse-fulfillment/fulfillment/generator.py
"""
Random command streams for benchmarks and the dashboard.

Orders arrive as a Poisson process (exponential inter-arrival gaps). Each
order is books-only, electronics-only or mixed according to the scenario's
category mix, with item counts drawn uniformly.
"""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Tuple

from . import utils

# Default probability of each category profile
DEFAULT_CATEGORY_MIX: Dict[str, float] = {
    "books": 0.45,
    "electronics": 0.35,
    "mixed": 0.20,
}


def _draw_items(rng: random.Random, profile: str, max_items: int) -> Tuple[int, int]:
    if profile == "books":
        return rng.randint(1, max_items), 0
    if profile == "electronics":
        return 0, rng.randint(1, max_items)
    books = rng.randint(1, max(1, max_items - 1))
    return books, rng.randint(1, max(1, max_items - books))


def generate_command_lines(
    seed: int = 42,
    start_time: str = "0800",
    end_time: str = "1700",
    orders_per_hour: float = 30.0,
    max_items: int = 5,
    category_mix: Optional[Dict[str, float]] = None,
    query_every_mins: int = 60,
) -> List[str]:
    """
    Generate a command file's worth of lines.

    Args:
        seed: Random seed, so runs are reproducible
        start_time: First possible order time (HHMM)
        end_time: Last possible order time (HHMM)
        orders_per_hour: Mean arrival rate
        max_items: Maximum items of each category per order
        category_mix: Probabilities for 'books', 'electronics', 'mixed'
        query_every_mins: Interval between Print* queries (0 disables them)

    Returns:
        Input lines in chronological order
    """
    if orders_per_hour <= 0:
        raise ValueError("orders_per_hour must be positive")
    if category_mix is None:
        category_mix = DEFAULT_CATEGORY_MIX

    rng = random.Random(seed)
    start = utils.time_to_minutes(start_time)
    end = utils.time_to_minutes(end_time)
    profiles = list(category_mix.keys())
    weights = list(category_mix.values())

    lines: List[str] = []
    next_query = start + query_every_mins if query_every_mins > 0 else None
    minute = float(start)
    order_no = 0

    while True:
        minute += rng.expovariate(orders_per_hour / 60.0)
        arrival = int(minute)
        if arrival > end:
            break

        while next_query is not None and next_query <= arrival:
            hhmm = utils.minutes_to_time(next_query)
            lines.append(f"PrintAvailableWorkerList {hhmm}")
            lines.append(f"PrintWorkerAssignmentList {hhmm}")
            next_query += query_every_mins

        order_no += 1
        profile = rng.choices(profiles, weights=weights)[0]
        books, electronics = _draw_items(rng, profile, max_items)
        lines.append(f"CustomerOrder {utils.minutes_to_time(arrival)} C{order_no:04d} {books} {electronics}")

    lines.append(f"PrintMaxFulfillmentTime {utils.minutes_to_time(end)}")
    return lines
