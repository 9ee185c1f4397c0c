# warehouse-fulfillment/benchmark.py
"""
Benchmark script for the Warehouse Order-Fulfillment Simulation.
Runs generated order streams with and without bundling and writes CSV/JSON
files comparing each strategy to the single-order baseline.
"""

import csv
import json
import os
from datetime import datetime

from fulfillment.generator import generate_command_lines
from fulfillment.simulation import Simulation

# Define all test scenarios
SCENARIOS = [
    {
        "name": "Quiet_Morning",
        "orders_per_hour": 12,
        "max_items": 4,
        "seed": 7,
    },
    {
        "name": "Normal_Day",
        "orders_per_hour": 30,
        "max_items": 5,
        "seed": 42,
    },
    {
        "name": "Rush_Hour",
        "orders_per_hour": 90,
        "max_items": 5,
        "seed": 1234,
    },
    {
        "name": "Books_Only_Rush",
        "orders_per_hour": 90,
        "max_items": 3,
        "seed": 99,
        "category_mix": {"books": 1.0},
    },
]

# Strategy name -> Simulation keyword arguments
STRATEGIES = {
    "single": {"allow_bundling": False},
    "bundled": {"allow_bundling": True},
}

BASELINE = "single"

CSV_KPIS = [
    "orders_received",
    "orders_fulfilled",
    "orders_queued",
    "bundles_sealed",
    "avg_orders_per_bundle",
    "max_fulfillment_time_min",
    "avg_processing_time_min",
    "min_processing_time_min",
    "workers_used",
]

# Metrics where LOWER is better (for highlighting improvements)
LOWER_IS_BETTER = [
    "orders_queued",
    "bundles_sealed",
    "max_fulfillment_time_min",
    "avg_processing_time_min",
    "min_processing_time_min",
]


def run_scenario(scenario: dict, strategies_to_run: list = None) -> dict:
    """Run every strategy on one generated order stream and return results."""
    if strategies_to_run is None:
        strategies_to_run = list(STRATEGIES)

    print(f"\n{'='*60}")
    print(f"SCENARIO: {scenario['name']}")
    print(f"Rate: {scenario['orders_per_hour']} orders/hour, seed {scenario['seed']}")
    print(f"{'='*60}")

    lines = generate_command_lines(
        seed=scenario["seed"],
        orders_per_hour=scenario["orders_per_hour"],
        max_items=scenario["max_items"],
        category_mix=scenario.get("category_mix"),
    )

    scenario_results = {
        "scenario": scenario["name"],
        "orders_per_hour": scenario["orders_per_hour"],
        "seed": scenario["seed"],
        "input_lines": len(lines),
        "strategies": {},
    }

    for strategy in strategies_to_run:
        sim = Simulation(**STRATEGIES[strategy])
        sim.run_lines(lines)
        results = sim.get_results()
        scenario_results["strategies"][strategy] = results

        print(f"    {strategy}: {results['bundles_sealed']} trips, "
              f"max {results['max_fulfillment_time_min']} min, "
              f"avg {results['avg_processing_time_min']:.2f} min")

    return scenario_results


def calculate_comparison_stats(results: dict, baseline_key: str = BASELINE) -> dict:
    """Calculate comparison statistics vs baseline for each strategy."""
    if baseline_key not in results["strategies"]:
        return results

    baseline = results["strategies"][baseline_key]

    for strategy, data in results["strategies"].items():
        comparison = {}
        comparison_pct = {}
        is_improvement = {}

        for kpi in CSV_KPIS:
            baseline_val = baseline.get(kpi, 0) or 0
            strategy_val = data.get(kpi, 0) or 0

            diff = strategy_val - baseline_val
            comparison[kpi] = round(diff, 4)

            if baseline_val != 0:
                comparison_pct[kpi] = round((diff / abs(baseline_val)) * 100, 2)
            else:
                comparison_pct[kpi] = 0

            if strategy == baseline_key:
                is_improvement[kpi] = False
            elif kpi in LOWER_IS_BETTER:
                is_improvement[kpi] = diff < 0
            else:
                is_improvement[kpi] = diff > 0

        data["vs_baseline"] = comparison
        data["vs_baseline_pct"] = comparison_pct
        data["is_improvement"] = is_improvement

    return results


def save_scenario_csv(results: dict, output_dir: str, timestamp: str) -> str:
    """Save a CSV for one scenario: one row per KPI, one column per strategy."""
    filename = f"{output_dir}/{results['scenario']}_{timestamp}.csv"
    strategies = list(results["strategies"].keys())

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        header = ["kpi"] + strategies
        header += [f"{s}_vs_{BASELINE}_pct" for s in strategies if s != BASELINE]
        writer.writerow(header)

        for kpi in CSV_KPIS:
            row = [kpi] + [results["strategies"][s].get(kpi, "") for s in strategies]
            row += [
                results["strategies"][s].get("vs_baseline_pct", {}).get(kpi, "")
                for s in strategies if s != BASELINE
            ]
            writer.writerow(row)

    print(f"✓ Saved scenario CSV: {filename}")
    return filename


def save_summary_csv(all_results: list, output_dir: str, timestamp: str) -> str:
    """Save one flat row per (scenario, strategy)."""
    filename = f"{output_dir}/SUMMARY_{timestamp}.csv"

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["scenario", "strategy"] + CSV_KPIS)
        for result in all_results:
            for strategy, data in result["strategies"].items():
                writer.writerow([result["scenario"], strategy] + [data.get(kpi, "") for kpi in CSV_KPIS])

    print(f"✓ Saved summary CSV: {filename}")
    return filename


def main(output_dir: str = "results"):
    """Run the full benchmark suite."""
    print("=" * 60)
    print("WAREHOUSE FULFILLMENT BENCHMARK SUITE")
    print("=" * 60)

    os.makedirs(output_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    all_results = []
    for scenario in SCENARIOS:
        result = calculate_comparison_stats(run_scenario(scenario))
        all_results.append(result)
        save_scenario_csv(result, output_dir, timestamp)

    save_summary_csv(all_results, output_dir, timestamp)

    json_file = f"{output_dir}/benchmark_{timestamp}.json"
    with open(json_file, "w") as f:
        json.dump(all_results, f, indent=2, default=str)
    print(f"✓ Saved JSON: {json_file}")

    print(f"\n{'='*60}")
    print("BENCHMARK COMPLETE")
    print(f"{'='*60}")
    return all_results


if __name__ == "__main__":
    main()
