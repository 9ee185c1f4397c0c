"""
Warehouse Fulfillment - Operations Dashboard
============================================

Dashboard for running the order-fulfillment simulation interactively.

Features:
- Upload a command file or generate a random order stream
- Adjustable bundling window and capacity
- KPI cards, sorted event log and sealed-bundle table
- Trips per worker chart
"""

from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
import streamlit as st

from fulfillment import config
from fulfillment.generator import generate_command_lines
from fulfillment.simulation import Simulation

# =============================================================================
# PAGE CONFIG
# =============================================================================

st.set_page_config(
    page_title="Warehouse Fulfillment",
    page_icon="📦",
    layout="wide",
    initial_sidebar_state="expanded"
)

# =============================================================================
# CUSTOM STYLING
# =============================================================================

st.markdown("""
<style>
    .main .block-container {
        padding-top: 2rem;
        padding-bottom: 2rem;
    }

    .kpi-card {
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        border-radius: 16px;
        padding: 1.5rem;
        color: white;
        text-align: center;
        box-shadow: 0 10px 40px rgba(102, 126, 234, 0.3);
    }

    .kpi-card.green {
        background: linear-gradient(135deg, #11998e 0%, #38ef7d 100%);
    }

    .kpi-card.orange {
        background: linear-gradient(135deg, #f093fb 0%, #f5576c 100%);
    }

    .kpi-value {
        font-size: 2.5rem;
        font-weight: 800;
        margin: 0.5rem 0;
    }

    .kpi-label {
        font-size: 0.9rem;
        opacity: 0.9;
        text-transform: uppercase;
        letter-spacing: 1px;
    }

    .section-header {
        font-size: 1.5rem;
        font-weight: 700;
        color: #1a1a2e;
        margin: 2rem 0 1rem 0;
        padding-bottom: 0.5rem;
        border-bottom: 3px solid #667eea;
    }

    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}
</style>
""", unsafe_allow_html=True)


# =============================================================================
# SIMULATION
# =============================================================================

def run_simulation(lines: List[str], window_mins: int, capacity: int) -> Simulation:
    """Run a fresh simulation over raw input lines."""
    sim = Simulation(window_mins=window_mins, capacity=capacity)
    sim.run_lines(lines)
    return sim


def events_frame(sim: Simulation) -> pd.DataFrame:
    """Sorted event log as a DataFrame."""
    return pd.DataFrame(
        [{"Time": e.time, "Event": e.kind.value, "Details": e.payload} for e in sim.log.sorted_events()],
        columns=["Time", "Event", "Details"],
    )


def bundles_frame(sim: Simulation) -> pd.DataFrame:
    """One row per sealed bundle."""
    return pd.DataFrame(
        [
            {
                "Worker": s.worker,
                "Customers": s.customer_list,
                "Orders": s.num_orders,
                "Books": s.total_books,
                "Electronics": s.total_electronics,
                "Assigned": s.assignment_time,
                "Completed": s.completion_time,
                "Processing (min)": s.processing_time,
            }
            for s in sim.sealed_bundles
        ],
        columns=["Worker", "Customers", "Orders", "Books", "Electronics",
                 "Assigned", "Completed", "Processing (min)"],
    )


# =============================================================================
# SIDEBAR
# =============================================================================

def render_sidebar() -> Optional[Tuple[List[str], int, int]]:
    """Render the sidebar configuration panel."""
    st.sidebar.markdown("## 🎛️ Configuration")
    st.sidebar.markdown("---")

    st.sidebar.markdown("### 📄 Input")
    source = st.sidebar.radio("Order source", options=["Generate", "Upload"], index=0)

    lines: Optional[List[str]] = None
    if source == "Upload":
        uploaded = st.sidebar.file_uploader("Command file", type=["txt"])
        if uploaded is not None:
            lines = uploaded.getvalue().decode("utf-8").splitlines()
    else:
        rate = st.sidebar.slider("Orders per hour", min_value=5, max_value=120, value=30, step=5)
        seed = st.sidebar.number_input("Random seed", min_value=0, value=42, step=1)
        lines = generate_command_lines(seed=int(seed), orders_per_hour=float(rate))

    st.sidebar.markdown("---")
    st.sidebar.markdown("### ⚙️ Bundling")

    window = st.sidebar.slider(
        "Bundling window (minutes)",
        min_value=1,
        max_value=15,
        value=int(config.BUNDLE_WINDOW_MINS),
        help="Orders within this many minutes of a bundle's first order may join it"
    )

    capacity = st.sidebar.slider(
        "Bundle capacity (items)",
        min_value=1,
        max_value=30,
        value=int(config.BUNDLE_CAPACITY),
        help="Maximum items a worker can carry on one trip"
    )

    st.sidebar.markdown("---")
    run_clicked = st.sidebar.button("🚀 Run Simulation", use_container_width=True)

    if run_clicked and lines:
        return lines, window, capacity
    if run_clicked:
        st.sidebar.error("Upload a command file first")
    return None


# =============================================================================
# KPI DISPLAY
# =============================================================================

def render_kpi_row(results: Dict[str, Any]) -> None:
    """Render the top KPI cards."""
    col1, col2, col3, col4 = st.columns(4)

    cards = [
        (col1, "", "Orders Fulfilled", f"{results['orders_fulfilled']}/{results['orders_received']}"),
        (col2, "green", "Worker Trips", results["bundles_sealed"]),
        (col3, "orange", "Max Fulfillment", f"{results['max_fulfillment_time_min']}m"),
        (col4, "", "Orders / Trip", f"{results['avg_orders_per_bundle']:.2f}"),
    ]
    for col, style, label, value in cards:
        with col:
            st.markdown(f"""
            <div class="kpi-card {style}">
                <div class="kpi-label">{label}</div>
                <div class="kpi-value">{value}</div>
            </div>
            """, unsafe_allow_html=True)


# =============================================================================
# MAIN APPLICATION
# =============================================================================

def main():
    """Main application entry point."""
    st.markdown("""
    <div style="text-align: center; padding: 1rem 0 2rem 0;">
        <h1 style="font-size: 3rem; font-weight: 800; margin-bottom: 0.5rem;">
            Warehouse Fulfillment
        </h1>
        <p style="font-size: 1.2rem; color: #666;">
            Order bundling and worker assignment simulation
        </p>
    </div>
    """, unsafe_allow_html=True)

    sidebar_result = render_sidebar()
    if sidebar_result is not None:
        lines, window, capacity = sidebar_result
        with st.spinner("Running simulation..."):
            st.session_state["simulation"] = run_simulation(lines, window, capacity)

    sim: Optional[Simulation] = st.session_state.get("simulation")
    if sim is None:
        st.info("👈 Choose an order source and click **Run Simulation**.")
        return

    results = sim.get_results()
    render_kpi_row(results)

    if results["skipped_lines"]:
        st.warning(f"Skipped {results['skipped_lines']} malformed input lines")

    st.markdown('<div class="section-header">👷 Trips per Worker</div>', unsafe_allow_html=True)
    trips = pd.DataFrame(
        {"Trips": list(results["trips_per_worker"].values())},
        index=list(results["trips_per_worker"].keys()),
    )
    st.bar_chart(trips)

    st.markdown('<div class="section-header">📦 Sealed Bundles</div>', unsafe_allow_html=True)
    st.dataframe(bundles_frame(sim), use_container_width=True, hide_index=True)

    st.markdown('<div class="section-header">🕒 Event Log</div>', unsafe_allow_html=True)
    log_df = events_frame(sim)
    kinds = st.multiselect("Event types", options=sorted(log_df["Event"].unique()), default=[])
    if kinds:
        log_df = log_df[log_df["Event"].isin(kinds)]
    st.dataframe(log_df, use_container_width=True, hide_index=True)

    st.download_button(
        "Download event log",
        data="\n".join(str(e) for e in sim.log.sorted_events()) + "\n",
        file_name="events.txt",
        mime="text/plain",
    )


if __name__ == "__main__":
    main()
