# warehouse-fulfillment/fulfillment/config.py
"""
Configuration parameters for the Warehouse Order-Fulfillment Simulation.

This module centralizes all tunable parameters, making it easy to:
- Adjust the bundling rules (window and capacity)
- Tune the trip timing model
- Change the worker roster

The Simulation reads these values when it is constructed, so changing them
at runtime (e.g. from the dashboard) only affects simulations created afterwards.
"""

from typing import Final, Tuple

# =============================================================================
# CLOCK
# =============================================================================

END_OF_DAY: Final[str] = "2359"
"""Time used to flush every open bundle once the input is exhausted."""

MINUTES_PER_DAY: Final[int] = 24 * 60

# =============================================================================
# WORKER ROSTER
# =============================================================================

WORKER_ROSTER: Tuple[str, ...] = ("Alice", "Bob", "Carol", "David", "Emily")
"""Workers in the order they are handed out. All start available."""

# =============================================================================
# BUNDLING PARAMETERS
# =============================================================================

BUNDLE_WINDOW_MINS: int = 5
"""
Bundling window in whole minutes.

An order may join a bundle only if it arrived within this many minutes of the
bundle's first order, and a bundle seals once this many minutes have passed
since its last order.
"""

BUNDLE_CAPACITY: int = 10
"""Maximum total items (books + electronics) a single worker trip can carry."""

# =============================================================================
# TRIP TIMING
# =============================================================================
# A sealed bundle's processing time is:
#   window + travel to first category + picks + travel between categories
#   + picks + return to station
# Travel legs are skipped for empty bundles and for categories with no items.

TRAVEL_TO_FIRST_CATEGORY_MINS: int = 5
"""Walk from the packing station to the first shelf category."""

TRAVEL_BETWEEN_CATEGORIES_MINS: int = 5
"""Walk from the books shelves to the electronics shelves (mixed bundles only)."""

RETURN_TO_STATION_MINS: int = 5
"""Walk back to the packing station."""

MINS_PER_ITEM: int = 1
"""Time to pick a single book or electronics item."""
