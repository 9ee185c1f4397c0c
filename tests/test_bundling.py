import pytest

from fulfillment.bundling import BundleManager, calculate_processing_time
from fulfillment.models import Bundle
from fulfillment.workers import WorkerPool


@pytest.fixture
def manager() -> BundleManager:
    return BundleManager(WorkerPool(["W1", "W2"]))


@pytest.mark.parametrize(
    "books, electronics, expected",
    [
        (0, 0, 5),
        (3, 2, 25),
        (4, 0, 19),
        (0, 4, 19),
        (6, 0, 21),
    ],
)
def test_processing_time(books, electronics, expected):
    assert calculate_processing_time(books, electronics) == expected


def test_empty_bundle_accepts_anything(manager, make_order):
    assert manager.can_add_to_bundle(Bundle(worker="W1"), make_order("0900", "A", 1, 1))


def test_window_is_measured_from_first_order(manager, make_order):
    bundle = Bundle(worker="W1", orders=[make_order("0900", "A", 1)])
    assert manager.can_add_to_bundle(bundle, make_order("0905", "B", 1))
    assert not manager.can_add_to_bundle(bundle, make_order("0906", "C", 1))


def test_capacity_counts_the_candidate(manager, make_order):
    bundle = Bundle(worker="W1", orders=[make_order("0900", "A", 6)])
    assert manager.can_add_to_bundle(bundle, make_order("0901", "B", 4))
    assert not manager.can_add_to_bundle(bundle, make_order("0901", "C", 5))


def test_mixed_orders_never_join_single_category_bundles(manager, make_order):
    bundle = Bundle(worker="W1", orders=[make_order("0900", "A", 2, 0)])
    assert not manager.can_add_to_bundle(bundle, make_order("0900", "B", 1, 1))


def test_compatible_orders_share_a_worker(manager, make_order):
    first = manager.submit(make_order("0900", "A", 1))
    second = manager.submit(make_order("0902", "B", 2))
    assert first is second
    assert first.customers == ["A", "B"]
    assert manager.pool.available == ("W2",)


def test_incompatible_order_opens_new_bundle(manager, make_order):
    manager.submit(make_order("0900", "A", 1))
    manager.submit(make_order("0900", "B", 0, 1))
    assert [str(b) for b in manager.open_bundles] == ["W1:A", "W2:B"]


def test_orders_queue_when_no_worker_is_free(manager, make_order):
    manager.submit(make_order("0900", "A", 1))
    manager.submit(make_order("0900", "B", 0, 1))
    assert manager.submit(make_order("0901", "C", 1, 1)) is None
    # Compatible with W1's bundle, but still waits behind C
    assert manager.submit(make_order("0901", "D", 1)) is None
    assert [o.customer_id for o in manager.pending] == ["C", "D"]
    assert manager.orders_queued == 2


def test_finalize_waits_for_window_after_last_order(manager, make_order):
    manager.submit(make_order("0900", "A", 1))
    manager.submit(make_order("0903", "B", 1))
    assert manager.finalize("0907") == []
    sealed = manager.finalize("0908")
    assert len(sealed) == 1
    assert sealed[0].customers == ("A", "B")
    assert sealed[0].assignment_time == "0908"
    assert sealed[0].processing_time == 17
    assert sealed[0].completion_time == "0920"
    assert manager.open_bundles == ()
    assert manager.pool.available == ("W2", "W1")


def test_finalize_drains_queue_in_fifo_order(manager, make_order):
    manager.submit(make_order("0900", "A", 1))
    manager.submit(make_order("0900", "B", 0, 1))
    manager.submit(make_order("0901", "C", 1, 1))
    manager.submit(make_order("0901", "D", 1))

    sealed = manager.finalize("0905")

    assert [s.worker for s in sealed] == ["W1", "W2"]
    assert manager.pending == ()
    assert [str(b) for b in manager.open_bundles] == ["W1:C", "W2:D"]


def test_new_order_waits_behind_queue_even_if_worker_is_free(make_order):
    pool = WorkerPool(["W1", "W2"])
    borrowed = pool.acquire()
    manager = BundleManager(pool)

    manager.submit(make_order("0900", "A", 1))
    manager.submit(make_order("0900", "B", 0, 1))
    pool.release(borrowed)

    # C fits A's bundle and W1 is free, but B arrived first
    assert manager.submit(make_order("0901", "C", 1)) is None
    assert [o.customer_id for o in manager.pending] == ["B", "C"]

    manager.finalize("0905")
    assert manager.pending == ()
    assert [str(b) for b in manager.open_bundles] == ["W1:B", "W2:C"]


def test_queued_order_can_join_open_bundle_during_drain(make_order):
    manager = BundleManager(WorkerPool(["W1"]))
    manager.submit(make_order("0900", "A", 1))
    manager.submit(make_order("0901", "B", 0, 2))
    manager.submit(make_order("0902", "C", 0, 3))

    manager.finalize("0905")

    assert [str(b) for b in manager.open_bundles] == ["W1:B,C"]


def test_force_seals_regardless_of_window(manager, make_order):
    manager.submit(make_order("2358", "Z", 1))
    assert manager.finalize("2359") == []
    sealed = manager.finalize("2359", force=True)
    assert sealed[0].assignment_time == "0003"
    assert sealed[0].completion_time == "0014"


def test_bundling_can_be_disabled(make_order):
    manager = BundleManager(WorkerPool(["W1", "W2"]), allow_bundling=False)
    manager.submit(make_order("0900", "A", 1))
    manager.submit(make_order("0900", "B", 1))
    assert [str(b) for b in manager.open_bundles] == ["W1:A", "W2:B"]


def test_bundle_invariants_hold_under_load(make_order):
    manager = BundleManager(WorkerPool(["W1", "W2", "W3"]))
    profiles = [(1, 0), (0, 2), (3, 3), (4, 0), (0, 0), (2, 0)]
    for i in range(60):
        minute = i // 2
        books, electronics = profiles[i % len(profiles)]
        manager.submit(make_order(f"09{minute:02d}", f"C{i}", books, electronics))
        if i % 4 == 0:
            manager.finalize(f"09{minute:02d}")

        workers = [b.worker for b in manager.open_bundles]
        assert len(workers) == len(set(workers))
        assert not set(workers) & set(manager.pool.available)
        for bundle in manager.open_bundles:
            first = bundle.first_order
            assert bundle.total_items <= manager.capacity
            for order in bundle.orders:
                assert order.is_compatible_with(first)
                assert int(order.arrival_time) - int(first.arrival_time) <= manager.window_mins
