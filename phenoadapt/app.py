"""
phenoadapt Streamlit UI
=======================

Streamlit dashboard for profiling a child against the demo family network,
adapting an in-memory interface and inspecting what the learning tracker
has picked up. Also interprets an editable 7x7 motion grid.

Everything runs locally in the browser session; nothing is persisted.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Dict, Iterable, List

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from phenoadapt.adaptation import AdaptationRuleEngine
from phenoadapt.family import FamilyNetwork, Individual
from phenoadapt.genes import compute_distance
from phenoadapt.genome import DISTANCE_WINDOW, EXPRESSION_WEIGHT, NeurodivergenceProfile
from phenoadapt.logging_config import setup_logging
from phenoadapt.motion import GRID_SIZE, MotionGridInterpreter
from phenoadapt.surface import InMemoryUI

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEMO_UNIONS = [
    ("MF1", ("M1", ["A1", "A2", "A3"]), ("F1", ["B1", "B2", "B3"])),
    ("MF2", ("M2", ["C1", "C2", "C3"]), ("F2", ["D1", "D2", "D3"])),
]
DEMO_CHILD_MARKERS = "A1, B2, C2, A3"
DEMO_MOTION_GRID = [
    [0, 0, 0, 0.8, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0],
    [0.9, 0, 0, 0, 0, 0, 0.7],
    [0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0.6, 0, 0, 0],
]


# ---------------------------------------------------------------------------
# Streamlit page configuration
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="phenoadapt – Phenotype-driven UI adaptation",
    layout="wide",
    initial_sidebar_state="expanded",
)


def build_demo_network() -> FamilyNetwork:
    network = FamilyNetwork()
    for union_id, (mother_id, mother_markers), (father_id, father_markers) in DEMO_UNIONS:
        network.register_union(
            union_id,
            Individual.from_markers(mother_id, mother_markers),
            Individual.from_markers(father_id, father_markers),
        )
    return network


def parse_markers(text: str) -> List[str]:
    return [tok.strip() for tok in text.replace(";", ",").split(",") if tok.strip()]


def distances_to_dataframe(
    child_markers: Iterable[str], relatives: Iterable[Individual]
) -> pd.DataFrame:
    """One row per relative with its distance, correlation and contribution."""
    child = frozenset(child_markers)
    low, high = DISTANCE_WINDOW
    rows: List[Dict[str, float | int | str | bool]] = []
    for relative in relatives:
        result = compute_distance(child, relative.markers)
        in_window = low <= result.distance <= high
        rows.append(
            {
                "relative": relative.id,
                "markers": ", ".join(sorted(relative.markers)),
                "shared": ", ".join(sorted(result.shared_traits)),
                "distance": int(result.distance),
                "correlation": float(result.correlation_score),
                "in_window": in_window,
                "contribution": (
                    float(result.correlation_score * EXPRESSION_WEIGHT) if in_window else 0.0
                ),
            }
        )
    return pd.DataFrame(rows)


def observations_to_dataframe(engine: AdaptationRuleEngine) -> pd.DataFrame:
    rows = []
    for i, obs in enumerate(engine.tracker.observations):
        row = {"observation": i + 1, "timestamp": obs.timestamp}
        row.update(asdict(obs.interaction_metrics))
        rows.append(row)
    return pd.DataFrame(rows)


def motion_heatmap(grid: pd.DataFrame) -> go.Figure:
    """Heatmap of the motion grid, row 0 at the top."""
    fig = go.Figure(
        go.Heatmap(
            z=grid.values.astype(float),
            x=list(range(GRID_SIZE)),
            y=list(range(GRID_SIZE)),
            zmin=0.0,
            zmax=1.0,
            colorscale="Viridis",
            hovertemplate="row %{y}, col %{x}: %{z:.2f}<extra></extra>",
        )
    )
    fig.update_layout(
        template="plotly_dark",
        yaxis=dict(autorange="reversed"),
        margin=dict(l=20, r=20, t=30, b=20),
    )
    return fig


def main() -> None:
    """Entry point for the Streamlit app."""
    setup_logging()

    # One engine, tracker and UI per browser session
    if "network" not in st.session_state:
        st.session_state["network"] = build_demo_network()
    if "engine" not in st.session_state:
        st.session_state["engine"] = AdaptationRuleEngine()
    if "ui" not in st.session_state:
        st.session_state["ui"] = InMemoryUI()

    network: FamilyNetwork = st.session_state["network"]
    engine: AdaptationRuleEngine = st.session_state["engine"]
    ui: InMemoryUI = st.session_state["ui"]

    # Sidebar controls
    with st.sidebar:
        st.markdown("## 🧬 phenoadapt")
        marker_text = st.text_input("Child markers", DEMO_CHILD_MARKERS)
        satisfaction = st.slider("Reported satisfaction", 0.0, 1.0, 0.9, step=0.05)
        cognitive_load = st.slider("Cognitive load estimate", 0.0, 1.0, 0.4, step=0.05)
        run_pass = st.button("🎛 Run adaptation pass")
        if st.button("♻ Reset session"):
            for key in ("engine", "ui"):
                st.session_state.pop(key, None)
            st.rerun()
        st.info(
            "Toy heuristic for interface personalisation, not a diagnostic tool.",
            icon="ℹ️",
        )

    child_markers = parse_markers(marker_text)
    profile: NeurodivergenceProfile = network.predict_neurodivergence(child_markers)

    st.title("Phenotype-driven UI adaptation")
    st.caption("Family marker overlap → phenotype profile → interface directives.")

    c1, c2, c3 = st.columns(3)
    c1.metric("Spectrum position", f"{profile.spectrum_position:.3f}")
    c2.metric("Neurodivergent", "yes" if profile.is_neurodivergent else "no")
    c3.metric("Primary traits", len(profile.primary_traits))
    if profile.primary_traits:
        st.write(" · ".join(profile.primary_traits))

    # Distance table and contributions
    st.markdown("---")
    st.subheader("Family correlation")
    df = distances_to_dataframe(child_markers, network.relatives())
    table_col, chart_col = st.columns([3, 2])
    with table_col:
        st.dataframe(df, height=220)
    with chart_col:
        if not df.empty:
            fig_bar = px.bar(
                df,
                x="relative",
                y="contribution",
                color="in_window",
                hover_data=["distance", "correlation", "shared"],
                title="Expression contribution per relative",
            )
            fig_bar.update_layout(template="plotly_dark", margin=dict(l=20, r=20, t=50, b=20))
            st.plotly_chart(fig_bar, theme="streamlit")

    # Adaptation and learning
    st.markdown("---")
    st.subheader("Adaptation")
    if run_pass:
        ui.set_metrics(satisfaction=satisfaction, cognitive_load=cognitive_load)
        engine.adapt(profile, ui)
        st.success(f"Adaptation pass complete ({len(engine.tracker.observations)} observations)")

    state_col, calls_col, memory_col = st.columns(3)
    with state_col:
        st.markdown("**Current UI state**")
        st.json(ui.get_current_state())
    with calls_col:
        st.markdown("**Capability call log**")
        st.dataframe(pd.DataFrame(ui.calls, columns=["call", "value"]), height=200)
    with memory_col:
        st.markdown("**Adaptation memory**")
        st.dataframe(pd.DataFrame([asdict(r) for r in engine.adaptation_memory]), height=200)

    obs_df = observations_to_dataframe(engine)
    if not obs_df.empty:
        fig_obs = px.line(
            obs_df,
            x="observation",
            y=["user_satisfaction", "cognitive_load", "navigation_efficiency"],
            markers=True,
            title="Interaction metrics per observation",
        )
        fig_obs.update_layout(template="plotly_dark", margin=dict(l=20, r=20, t=50, b=20))
        st.plotly_chart(fig_obs, theme="streamlit")

    # ranked_states() reads the index; analyze_pattern() would count the window again on every rerun
    patterns_col, index_col = st.columns(2)
    with patterns_col:
        st.markdown("**Learned patterns**")
        st.json(engine.tracker.ranked_states())
    with index_col:
        st.markdown("**Success index**")
        success = pd.DataFrame(
            list(engine.tracker.success_index.items()), columns=["ui_state", "count"]
        )
        st.dataframe(success.sort_values("count", ascending=False, kind="stable"), height=200)

    # Motion grid
    st.markdown("---")
    st.subheader("Motion grid")
    grid_col, heat_col = st.columns([1, 1])
    with grid_col:
        grid = st.data_editor(pd.DataFrame(DEMO_MOTION_GRID, dtype=float), key="motion_grid")
    with heat_col:
        st.plotly_chart(motion_heatmap(grid), theme="streamlit")
    actions = MotionGridInterpreter().interpret(grid.values, profile)
    st.write("Detected actions:", actions or "none")

    # Export data
    st.markdown("---")
    with st.expander("Export session data"):
        data_json = json.dumps(
            {
                "profile": asdict(profile),
                "distances": df.to_dict(orient="records"),
                "observations": obs_df.to_dict(orient="records"),
                "success_index": engine.tracker.success_index,
            },
            indent=2,
        )
        st.download_button(
            "Download JSON",
            data=data_json,
            file_name="phenoadapt_session.json",
            mime="application/json",
        )


if __name__ == "__main__":
    main()
