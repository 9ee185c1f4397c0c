from fulfillment.commands import parse_command
from fulfillment.models import Command, CommandType, EventKind
from fulfillment.simulation import Simulation


def _order(time, customer, books, electronics):
    return parse_command(f"CustomerOrder {time} {customer} {books} {electronics}")


def test_single_order_end_to_end(run_lines):
    output = run_lines([
        "CustomerOrder 0900 Alice 3 2",
        "PrintMaxFulfillmentTime 0930",
    ])
    assert output == [
        "CustomerOrder 0900 Alice 3 2",
        "WorkerAssignment 0905 Alice Alice",
        "OrderCompletion 0925 Alice",
        "MaxFulfillmentTime 0930 25",
    ]


def test_single_order_flushed_at_end_of_input(run_lines):
    output = run_lines(["CustomerOrder 0900 Alice 3 2"])
    assert output == [
        "CustomerOrder 0900 Alice 3 2",
        "WorkerAssignment 0905 Alice Alice",
        "OrderCompletion 0925 Alice",
    ]


def test_six_compatible_orders_share_one_trip(run_lines):
    lines = [f"CustomerOrder 0900 C{i} 1 0" for i in range(1, 7)]
    lines += ["PrintWorkerAssignmentList 0901", "PrintAvailableWorkerList 0901"]
    output = run_lines(lines)
    assert output[6:] == [
        "WorkerAssignmentList 0901 Alice:C1,C2,C3,C4,C5,C6",
        "AvailableWorkerList 0901 Bob Carol David Emily",
        "WorkerAssignment 0905 Alice C1,C2,C3,C4,C5,C6",
        "OrderCompletion 0921 C1,C2,C3,C4,C5,C6",
    ]


def test_busy_pool_queues_orders_until_workers_free(run_lines):
    output = run_lines([
        "CustomerOrder 0900 C1 1 0",
        "CustomerOrder 0900 C2 0 1",
        "CustomerOrder 0900 C3 1 1",
        "CustomerOrder 0900 C4 0 0",
        "CustomerOrder 0900 C5 10 0",
        "CustomerOrder 0901 C6 1 0",
        "CustomerOrder 0902 C7 1 0",
        "PrintWorkerAssignmentList 0903",
        "PrintAvailableWorkerList 0905",
        "PrintWorkerAssignmentList 0905",
        "PrintMaxFulfillmentTime 0906",
    ])
    assert output == [
        "CustomerOrder 0900 C1 1 0",
        "CustomerOrder 0900 C2 0 1",
        "CustomerOrder 0900 C3 1 1",
        "CustomerOrder 0900 C4 0 0",
        "CustomerOrder 0900 C5 10 0",
        "CustomerOrder 0901 C6 1 0",
        "CustomerOrder 0902 C7 1 0",
        "WorkerAssignmentList 0903 Alice:C1 Bob:C2 Carol:C3 David:C4 Emily:C5",
        "WorkerAssignment 0905 Alice C1",
        "WorkerAssignment 0905 Bob C2",
        "WorkerAssignment 0905 Carol C3",
        "WorkerAssignment 0905 David C4",
        "OrderCompletion 0905 C4",
        "WorkerAssignment 0905 Emily C5",
        "AvailableWorkerList 0905 Bob Carol David Emily",
        "WorkerAssignmentList 0905 Alice:C6,C7",
        "MaxFulfillmentTime 0906 25",
        "WorkerAssignment 0907 Alice C6,C7",
        "OrderCompletion 0916 C1",
        "OrderCompletion 0916 C2",
        "OrderCompletion 0919 C6,C7",
        "OrderCompletion 0922 C3",
        "OrderCompletion 0925 C5",
    ]


def test_queued_orders_are_never_overtaken(run_lines):
    lines = [f"CustomerOrder 0900 W{i} {i} 0" for i in range(6, 11)]
    lines += ["CustomerOrder 0901 Q1 0 1", "CustomerOrder 0902 Q2 1 0"]
    output = run_lines(lines, roster=["Alice", "Bob", "Carol", "David", "Emily"])

    assignments = [line for line in output if line.startswith("WorkerAssignment ")]
    customers = [line.split()[-1] for line in assignments]
    assert customers.index("Q1") < customers.index("Q2")


def test_queue_left_at_end_of_input_is_flushed():
    sim = Simulation(roster=["W1"])
    events = sim.run_lines([
        "CustomerOrder 0900 A 1 0",
        "CustomerOrder 0900 B 0 1",
    ])
    assignments = [str(e) for e in events if e.kind is EventKind.WORKER_ASSIGNMENT]
    assert assignments == ["WorkerAssignment 0905 W1 A", "WorkerAssignment 0905 W1 B"]
    assert sim.bundles.open_bundles == ()
    assert sim.bundles.pending == ()


def test_finalize_is_idempotent(sim):
    sim.process(_order("0900", "A", 2, 0))
    first = sim.finalize("0910")
    count = len(sim.log)
    second = sim.finalize("0910")
    assert len(first) == 1
    assert second == []
    assert len(sim.log) == count


def test_print_commands_seal_elapsed_bundles_first(sim):
    sim.process(_order("0900", "A", 1, 0))
    sim.process(Command(CommandType.PRINT_AVAILABLE_WORKER_LIST, "0904"))
    sim.process(Command(CommandType.PRINT_AVAILABLE_WORKER_LIST, "0905"))
    lists = [e.payload for e in sim.log.by_kind(EventKind.AVAILABLE_WORKER_LIST)]
    assert lists == ["Bob Carol David Emily", "Bob Carol David Emily Alice"]


def test_empty_assignment_list(run_lines):
    assert run_lines(["PrintWorkerAssignmentList 0800"]) == ["WorkerAssignmentList 0800 "]


def test_max_fulfillment_starts_at_zero(run_lines):
    assert run_lines(["PrintMaxFulfillmentTime 0800"]) == ["MaxFulfillmentTime 0800 0"]


def test_malformed_lines_are_skipped_without_finalizing():
    sim = Simulation()
    events = sim.run_lines([
        "CustomerOrder 0900 A 1 0",
        "Garbage 0930",
        "PrintAvailableWorkerList",
        "PrintAvailableWorkerList 0901",
    ])
    assert [str(e) for e in events][:2] == [
        "CustomerOrder 0900 A 1 0",
        "AvailableWorkerList 0901 Bob Carol David Emily",
    ]
    assert sim.get_results()["skipped_lines"] == 2


def test_independent_runs_do_not_share_state(run_lines):
    lines = ["CustomerOrder 0900 A 1 0", "PrintMaxFulfillmentTime 0910"]
    assert run_lines(lines) == run_lines(lines)


def test_results_summarize_the_run():
    sim = Simulation()
    sim.run_lines([
        "CustomerOrder 0900 A 1 0",
        "CustomerOrder 0901 B 2 0",
        "CustomerOrder 0902 C 0 1",
    ])
    results = sim.get_results()
    assert results["orders_received"] == 3
    assert results["orders_fulfilled"] == 3
    assert results["bundles_sealed"] == 2
    assert results["avg_orders_per_bundle"] == 1.5
    assert results["max_fulfillment_time_min"] == 18
    assert results["workers_used"] == 2
    assert results["trips_per_worker"] == {"Alice": 1, "Bob": 1, "Carol": 0, "David": 0, "Emily": 0}


def test_custom_window_and_capacity(run_lines):
    output = run_lines(
        ["CustomerOrder 0900 A 2 0", "CustomerOrder 0901 B 2 0"],
        capacity=3,
    )
    assert "WorkerAssignment 0905 Alice A" in output
    assert "WorkerAssignment 0906 Bob B" in output
