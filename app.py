"""
Page Replacement Visualizer — FIFO, LRU & Optimal

This application provides an interactive, step-by-step visualization of the
classic Operating System page replacement algorithms:
    - FIFO (First In, First Out)
    - LRU (Least Recently Used)
    - Optimal (Belady's algorithm)

The simulation itself lives in engine.py and runs to completion before
anything is drawn; this module only plays back the finished trace.

Built with Streamlit for the web interface and Plotly for visualizations.
Run with:  streamlit run app.py
"""

# =============================================================================
# IMPORTS
# =============================================================================

import logging
import time

import streamlit as st

from charts import comparison_figure, comparison_rows, frames_figure, performance_figure
from config import (
    DEFAULT_FRAME_COUNT,
    DEFAULT_REFERENCE_STRING,
    DEFAULT_SPEED,
    EVENT_LOG_LENGTH,
    LOG_FORMAT,
    LOG_LEVEL,
    MAX_FRAMES,
    MAX_SPEED,
    MIN_FRAMES,
    MIN_SPEED,
)
from engine import HIT, ReplacementPolicy, compare_policies, simulate
from utils import clamp_frame_count, hit_ratio, is_thrashing, miss_ratio, parse_reference_string

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# Configure the Streamlit page
st.set_page_config(page_title="Page Replacement Visualizer", layout="wide")

# -----------------------------------------------------------------------------
# SIDEBAR NAVIGATION
# -----------------------------------------------------------------------------

# Page selector for switching between Simulator and Concepts views
page = st.sidebar.radio("Choose View", ["Simulator", "Concepts"])

st.title("Page Replacement Visualizer — FIFO, LRU & Optimal")

# =============================================================================
# CONCEPTS PAGE - Educational Content
# =============================================================================

if page == "Concepts":
    st.header("Operating System Concepts Used in This Project")
    st.markdown(
        """
        ## 📘 Key Concepts

        ### **1. Pages and Frames**
        - Virtual memory is split into fixed-size *pages*; physical memory into *frames* of the same size.
        - A frame holds at most one page at a time.

        ### **2. Page Fault**
        - Occurs when a referenced page is not in any frame.
        - The OS loads the page; if every frame is occupied it must first evict one.

        ### **3. Reference String**
        - The ordered list of page numbers a program touches, e.g. `7,0,1,2,0,3`.

        ### **4. Page Replacement Algorithms**

        #### **FIFO (First In First Out)**
        - Evict the page that entered memory earliest. Hits do not change the order.
        - Simple, but can suffer from **Belady's anomaly**.

        #### **LRU (Least Recently Used)**
        - Evict the page that has gone unused the longest.
        - Never shows Belady's anomaly.

        #### **Optimal (Belady's Algorithm)**
        - Evict the page whose next use is farthest in the future (or never comes).
        - Needs knowledge of the future, so it is a benchmark rather than a real policy.
        - No algorithm produces fewer faults for the same input.

        ### **5. Belady's Anomaly**
        - Adding frames makes FIFO fault *more* for some inputs,
          e.g. `1,2,3,4,1,2,5,1,2,3,4,5` gives 9 faults with 3 frames but 10 with 4.

        ### **6. Thrashing**
        - When the miss ratio stays very high the system spends its time paging instead of working.
        """
    )
    st.stop()  # Stop rendering - don't show simulator on Concepts page

# =============================================================================
# SIMULATOR PAGE - Main Interactive Interface
# =============================================================================

# -----------------------------------------------------------------------------
# SIDEBAR - Simulation Settings
# -----------------------------------------------------------------------------

st.sidebar.header("Simulation Settings")

policy = st.sidebar.selectbox("Replacement Policy", options=list(ReplacementPolicy.ALL))

frame_count = clamp_frame_count(st.sidebar.number_input(
    "Number of frames",
    min_value=MIN_FRAMES,
    max_value=MAX_FRAMES,
    value=DEFAULT_FRAME_COUNT,
    step=1,
))

reference_input = st.sidebar.text_area(
    "Reference string (comma separated page numbers)",
    value=DEFAULT_REFERENCE_STRING,
)

# Playback speed control for animation
run_speed = st.sidebar.slider(
    "Playback speed (steps/sec)",
    min_value=MIN_SPEED,
    max_value=MAX_SPEED,
    value=DEFAULT_SPEED,
)

# -----------------------------------------------------------------------------
# SESSION STATE - Trace and playback position persist across reruns
# -----------------------------------------------------------------------------

st.session_state.setdefault("result", None)
st.session_state.setdefault("result_frames", DEFAULT_FRAME_COUNT)
st.session_state.setdefault("result_policy", None)
st.session_state.setdefault("current_step", 0)
st.session_state.setdefault("playing", False)
st.session_state.setdefault("comparison", None)

st.sidebar.markdown("---")

if st.sidebar.button("Run Simulation", key="run"):
    references = parse_reference_string(reference_input)
    if not references:
        st.sidebar.warning("No valid page numbers in the reference string")
    else:
        try:
            st.session_state.result = simulate(policy, references, frame_count)
            st.session_state.result_frames = frame_count
            st.session_state.result_policy = policy
            st.session_state.current_step = 0
            st.session_state.playing = False
        except ValueError as e:
            logger.warning("Simulation rejected: %s", e)
            st.sidebar.error(str(e))

if st.sidebar.button("Compare All Algorithms", key="compare"):
    references = parse_reference_string(reference_input)
    if not references:
        st.sidebar.warning("No valid page numbers in the reference string")
    else:
        try:
            st.session_state.comparison = compare_policies(references, frame_count)
        except ValueError as e:
            logger.warning("Comparison rejected: %s", e)
            st.sidebar.error(str(e))

# Reset button to clear simulation state
if st.sidebar.button("Reset Simulation", key="reset_all"):
    st.session_state.result = None
    st.session_state.comparison = None
    st.session_state.current_step = 0
    st.session_state.playing = False
    st.sidebar.success("Simulation reset")

result = st.session_state.result

# =============================================================================
# MAIN CONTENT AREA - Two Column Layout
# =============================================================================

if result is None:
    st.info("Enter a reference string and click **Run Simulation** to start.")
else:
    steps = result.steps
    last = len(steps) - 1
    current = min(st.session_state.current_step, last)
    step = steps[current]

    col1, col2 = st.columns([1, 2])

    # -------------------------------------------------------------------------
    # LEFT COLUMN - Playback Controls and Event Log
    # -------------------------------------------------------------------------

    with col1:
        st.subheader("Playback")
        b1, b2, b3 = st.columns(3)

        if b1.button("Pause" if st.session_state.playing else "Play", key="play"):
            st.session_state.playing = not st.session_state.playing
            st.rerun()

        if b2.button("Step", key="step", disabled=current >= last):
            st.session_state.current_step = current + 1
            st.rerun()

        if b3.button("Reset", key="rewind"):
            st.session_state.current_step = 0
            st.session_state.playing = False
            st.rerun()

        st.write(f"**{st.session_state.result_policy} — Step: {current + 1} / {len(steps)}**")

        # ----- Current step explanation -----
        verdict = "HIT" if step.status == HIT else "FAULT"
        st.subheader(f"Current Page: {step.page} — {verdict}")
        if step.status == HIT:
            st.success(step.explanation)
        else:
            st.error(step.explanation)

        # Event log: explanations so far, newest first
        st.subheader("Event Log")
        for s in steps[:current + 1][-EVENT_LOG_LENGTH:][::-1]:
            st.write(f"{s.step}. {s.explanation}")

    # -------------------------------------------------------------------------
    # RIGHT COLUMN - Visualizations
    # -------------------------------------------------------------------------

    with col2:
        st.subheader("Memory Frames")
        st.plotly_chart(frames_figure(step, st.session_state.result_frames), use_container_width=True)

        # ----- Statistics Display -----
        st.subheader("Statistics")
        total = current + 1
        hit_pct = hit_ratio(step.hits, total)
        miss_pct = miss_ratio(step.hits, total)

        m1, m2, m3, m4 = st.columns(4)
        m1.metric("Page Faults", step.faults)
        m2.metric("Page Hits", step.hits)
        m3.metric("Hit Ratio", f"{hit_pct:.2f}%")
        m4.metric("Miss Ratio", f"{miss_pct:.2f}%")
        if is_thrashing(miss_pct):
            st.warning("⚠ Thrashing Risk: miss ratio is very high")

        st.plotly_chart(performance_figure(steps, current), use_container_width=True)

    # Auto-play: advance one step per rerun until the end of the trace
    if st.session_state.playing:
        if current < last:
            time.sleep(1.0 / run_speed)
            st.session_state.current_step = current + 1
            st.rerun()
        else:
            st.session_state.playing = False

# -----------------------------------------------------------------------------
# ALGORITHM COMPARISON
# -----------------------------------------------------------------------------

comparison = st.session_state.comparison
if comparison is not None:
    st.markdown("---")
    head, close = st.columns([5, 1])
    head.subheader("Algorithm Comparison")
    if close.button("Close", key="close_comparison"):
        st.session_state.comparison = None
        st.rerun()

    st.plotly_chart(comparison_figure(comparison), use_container_width=True)
    st.table(comparison_rows(comparison))

# =============================================================================
# FOOTER - Usage Tips and Examples
# =============================================================================

st.markdown("---")
st.markdown(
    "**Usage tips**:\n"
    "- Enter a comma separated reference string and click **Run Simulation**, then step or play through it.\n"
    "- Invalid tokens in the reference string are ignored.\n"
    "- Use **Compare All Algorithms** to see FIFO, LRU and Optimal side by side."
)

st.markdown("---")
st.markdown(
    "**Instructor examples**:\n"
    "1) Classic: 3 frames, `7,0,1,2,0,3,0,4,2,3,0,3,2` (FIFO 10, LRU 9, Optimal 7 faults).\n"
    "2) Belady's anomaly: FIFO on `1,2,3,4,1,2,5,1,2,3,4,5` with 3 frames, then 4 frames."
)
