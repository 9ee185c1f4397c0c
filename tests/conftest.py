from typing import Callable, List

import pytest

from fulfillment.models import CustomerOrder
from fulfillment.simulation import Simulation


@pytest.fixture
def sim() -> Simulation:
    return Simulation()


@pytest.fixture
def run_lines() -> Callable[[List[str]], List[str]]:
    """Run raw input lines through a fresh simulation and return output lines."""
    def _run(lines: List[str], **kwargs) -> List[str]:
        return [str(e) for e in Simulation(**kwargs).run_lines(lines)]
    return _run


@pytest.fixture
def make_order() -> Callable[..., CustomerOrder]:
    def _make(time: str, customer: str, books: int = 0, electronics: int = 0) -> CustomerOrder:
        return CustomerOrder(arrival_time=time, customer_id=customer, book_count=books, electronics_count=electronics)
    return _make
