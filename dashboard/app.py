"""Endurance Fuel Strategy Dashboard.

Interactive front end built with Streamlit and Plotly.  Collects a race
configuration, shows the optimal stint plan and lets the strategist drag
each pit stop; fuel numbers are recomputed on every edit.

Launch with::

    streamlit run dashboard/app.py
"""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from fuel_engine.config import load_presets
from fuel_engine.core.calculator import parse_configuration
from fuel_engine.core.errors import FuelEngineError
from fuel_engine.core.formatting import format_fuel, format_lap_range
from fuel_engine.core.race import RaceConfiguration, RaceMode
from fuel_engine.core.session import StrategySession
from fuel_engine.core.stint import StintCalculation

_CUSTOM: str = "Custom"

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _preset_defaults(config: RaceConfiguration | None) -> dict[str, str]:
    """Form values for a preset, or blank values for a custom race."""
    if config is None:
        return {
            "mode": RaceMode.LAPS.value,
            "race_length": "",
            "average_lap_time": "",
            "tank_capacity": "",
            "fuel_per_lap": "",
            "buffer_laps": "0",
        }
    lap_time = config.average_lap_time
    return {
        "mode": RaceMode(config.mode).value,
        "race_length": f"{config.race_length:g}",
        "average_lap_time": f"{lap_time:g}" if lap_time is not None else "",
        "tank_capacity": f"{config.tank_capacity:g}",
        "fuel_per_lap": f"{config.fuel_per_lap:g}",
        "buffer_laps": str(config.buffer_laps),
    }


def _stint_rows(stints: tuple[StintCalculation, ...]) -> list[dict]:
    return [
        {
            "Stint": s.stint_number,
            "Laps": format_lap_range(s.start_lap, s.end_lap),
            "Lap count": s.lap_count,
            "Fuel": format_fuel(s.fuel_amount),
            "Buffer": "yes" if s.includes_buffer else "",
        }
        for s in stints
    ]


def _fuel_chart(stints: tuple[StintCalculation, ...], tank_capacity: float) -> go.Figure:
    fig = go.Figure(
        go.Bar(
            x=[f"Stint {s.stint_number}" for s in stints],
            y=[s.fuel_amount for s in stints],
            text=[format_fuel(s.fuel_amount) for s in stints],
            marker_color="#e10600",
        )
    )
    fig.add_hline(y=tank_capacity, line_dash="dash", annotation_text="Tank capacity")
    fig.update_layout(
        title="Fuel per stint",
        yaxis_title="Litres",
        height=380,
    )
    return fig


# ---------------------------------------------------------------------------
# Streamlit app
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the Streamlit dashboard."""
    st.set_page_config(page_title="Endurance Fuel Strategy", layout="wide")
    st.title("Endurance Fuel Strategy")

    # ── Sidebar ──────────────────────────────────────────────────────────
    st.sidebar.header("Race Parameters")

    presets = load_presets()
    preset_name: str = st.sidebar.selectbox(
        "Preset", options=[_CUSTOM, *presets], index=0
    )
    defaults = _preset_defaults(presets.get(preset_name))

    mode: str = st.sidebar.radio(
        "Race length mode",
        options=[RaceMode.LAPS.value, RaceMode.TIME.value],
        index=0 if defaults["mode"] == RaceMode.LAPS.value else 1,
        horizontal=True,
    )
    length_label = "Race length (laps)" if mode == RaceMode.LAPS else "Race length (s)"
    raw: dict[str, str] = {
        "mode": mode,
        "race_length": st.sidebar.text_input(length_label, defaults["race_length"]),
    }
    if mode == RaceMode.TIME:
        raw["average_lap_time"] = st.sidebar.text_input(
            "Average lap time (mm:ss or seconds)", defaults["average_lap_time"]
        )
    raw["tank_capacity"] = st.sidebar.text_input(
        "Tank capacity (L)", defaults["tank_capacity"]
    )
    raw["fuel_per_lap"] = st.sidebar.text_input(
        "Fuel per lap (L)", defaults["fuel_per_lap"]
    )
    raw["buffer_laps"] = st.sidebar.text_input("Buffer laps", defaults["buffer_laps"])

    if st.sidebar.button("Calculate Fuel Requirements"):
        try:
            session = StrategySession(parse_configuration(raw))
            session.calculate()
        except FuelEngineError as exc:
            st.error(str(exc))
        else:
            # Slider state belongs to the previous strategy.
            for key in [k for k in st.session_state if str(k).startswith("pit_")]:
                del st.session_state[key]
            st.session_state["session"] = session

    # Guard: only show results if available
    if "session" not in st.session_state:
        st.info(
            "Enter race parameters in the sidebar, then press "
            '"Calculate Fuel Requirements".'
        )
        return

    session: StrategySession = st.session_state["session"]

    # ── Pit stop editing ─────────────────────────────────────────────────
    st.header("Pit Stops")
    result = session.result
    assert result is not None
    if not result.strategy.pit_laps:
        st.success("One tank covers the whole race: no pit stops needed.")

    for i, (min_lap, max_lap) in enumerate(session.bounds()):
        current_lap = session.result.strategy.pit_laps[i]
        if min_lap == max_lap:
            st.caption(f"Pit {i + 1}: lap {current_lap} (fixed)")
            continue
        lap: int = st.slider(
            f"Pit {i + 1}",
            min_value=min_lap,
            max_value=max_lap,
            value=current_lap,
            key=f"pit_{i}",
        )
        if lap != current_lap:
            try:
                session.edit_pit_lap(i, lap)
            except (FuelEngineError, IndexError):
                st.error(session.last_error or "Pit stop edit rejected")
            else:
                # Later sliders were built from the pre-edit bounds.
                st.rerun()

    # ── Stint table and chart ────────────────────────────────────────────
    result = session.result
    summary = session.summary()
    st.header("Fuel Requirements")

    col_total, col_stops, col_laps = st.columns(3)
    col_total.metric("Total fuel", format_fuel(summary.total_fuel))
    col_stops.metric("Pit stops", summary.pit_stops)
    col_laps.metric("Race laps", summary.final_lap)

    st.dataframe(_stint_rows(result.stints), hide_index=True, use_container_width=True)
    st.plotly_chart(
        _fuel_chart(result.stints, session.config.tank_capacity),
        use_container_width=True,
    )


if __name__ == "__main__":
    main()
