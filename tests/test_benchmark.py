import json

import pytest

import benchmark
from fulfillment.commands import CommandReader
from fulfillment.generator import generate_command_lines
from fulfillment.simulation import Simulation


def test_generated_stream_is_reproducible_and_valid():
    lines = generate_command_lines(seed=3, start_time="0900", end_time="1100", orders_per_hour=40)
    assert lines == generate_command_lines(seed=3, start_time="0900", end_time="1100", orders_per_hour=40)

    reader = CommandReader(lines)
    commands = list(reader)
    assert reader.skipped == 0
    times = [c.time for c in commands]
    assert times == sorted(times)
    assert lines[-1] == "PrintMaxFulfillmentTime 1100"


def test_generator_respects_category_mix():
    lines = generate_command_lines(seed=1, orders_per_hour=60, category_mix={"electronics": 1.0})
    orders = [line.split() for line in lines if line.startswith("CustomerOrder")]
    assert orders
    assert all(o[3] == "0" and int(o[4]) > 0 for o in orders)


def test_generator_rejects_non_positive_rate():
    with pytest.raises(ValueError):
        generate_command_lines(orders_per_hour=0)


def test_every_generated_order_is_fulfilled():
    sim = Simulation()
    sim.run_lines(generate_command_lines(seed=11, orders_per_hour=90))
    results = sim.get_results()
    assert results["orders_fulfilled"] == results["orders_received"]


def test_bundling_needs_fewer_trips_than_single_dispatch():
    scenario = {"name": "Test", "orders_per_hour": 90, "max_items": 3, "seed": 5,
                "category_mix": {"books": 1.0}}
    result = benchmark.calculate_comparison_stats(benchmark.run_scenario(scenario))
    single = result["strategies"]["single"]
    bundled = result["strategies"]["bundled"]
    assert single["bundles_sealed"] == single["orders_received"]
    assert bundled["bundles_sealed"] < single["bundles_sealed"]
    assert bundled["is_improvement"]["bundles_sealed"]


def test_benchmark_writes_result_files(tmp_path, monkeypatch):
    monkeypatch.setattr(benchmark, "SCENARIOS", benchmark.SCENARIOS[:1])
    benchmark.main(output_dir=str(tmp_path))

    files = sorted(p.name for p in tmp_path.iterdir())
    assert any(name.startswith("SUMMARY_") for name in files)
    json_file = next(p for p in tmp_path.iterdir() if p.suffix == ".json")
    data = json.loads(json_file.read_text())
    assert data[0]["scenario"] == benchmark.SCENARIOS[0]["name"]
