# charts.py
"""
Plotly figures for the page replacement visualizer.

Each builder takes engine output and returns a ``go.Figure`` (or plain
rows for ``st.table``); nothing here touches Streamlit, so the figures can
be checked without a running app.
"""

from typing import Dict, List, Optional, Sequence

import plotly.graph_objects as go

from config import FAULT_COLOR, HIT_COLOR
from engine import ExecutionStep, SimulationResult
from utils import frame_state, get_color, hit_ratio


def frames_figure(step: Optional[ExecutionStep], frame_count: int) -> go.Figure:
    """
    Bar chart of the physical frames at one step.

    Every slot gets a bar of equal height, labelled with the page it holds
    (or 'Free') and coloured by its state: empty, filled, or the slot just
    hit / faulted in.

    Args:
        step (Optional[ExecutionStep]): Step to draw, None for empty memory
        frame_count (int): Number of frame slots to draw

    Returns:
        go.Figure: The frames figure
    """
    x = []
    y = []
    text = []
    colors = []

    for i in range(frame_count):
        page = step.frames[i] if step is not None and i < len(step.frames) else None
        text.append(f"F{i}: " + (f"P{page}" if page is not None else "Free"))
        colors.append(get_color(frame_state(step, i)))
        x.append(i)
        y.append(1)

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=x,
        y=y,
        text=text,
        marker_color=colors,
        hovertext=text,
        hoverinfo='text',
    ))
    fig.update_layout(
        height=150,
        showlegend=False,
        yaxis=dict(showticklabels=False),
        xaxis=dict(title="Frame", tickmode="linear"),
    )
    return fig


def performance_figure(steps: Sequence[ExecutionStep], upto: int) -> go.Figure:
    """Cumulative faults and hits for steps[0..upto]."""
    shown = steps[:upto + 1]
    x = [s.step for s in shown]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=x, y=[s.faults for s in shown], mode="lines+markers",
        name="Page Faults", line=dict(color=FAULT_COLOR, width=2),
    ))
    fig.add_trace(go.Scatter(
        x=x, y=[s.hits for s in shown], mode="lines+markers",
        name="Page Hits", line=dict(color=HIT_COLOR, width=2),
    ))
    fig.update_layout(height=300, title="Performance Over Time", xaxis_title="Step")
    return fig


def comparison_figure(results: Dict[str, SimulationResult]) -> go.Figure:
    names = list(results)
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=names, y=[results[n].faults for n in names],
        name="Faults", marker_color=FAULT_COLOR,
    ))
    fig.add_trace(go.Bar(
        x=names, y=[results[n].hits for n in names],
        name="Hits", marker_color=HIT_COLOR,
    ))
    fig.update_layout(height=300, title="Algorithm Comparison", barmode="group")
    return fig


def comparison_rows(results: Dict[str, SimulationResult]) -> List[dict]:
    """Summary rows (policy, faults, hits, hit ratio %) for a table."""
    rows = []
    for name, result in results.items():
        rows.append({
            "policy": name,
            "faults": result.faults,
            "hits": result.hits,
            "hit_ratio": hit_ratio(result.hits, result.total_refs),
        })
    return rows
