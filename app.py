"""
Paged Memory Allocation Visualizer — First-Fit Contiguous Placement

Interactive front end for the paging simulator in engine.py:
    - Random process sizes drawn from a seeded stream
    - Pages needed per process (ceil of size / page size)
    - Contiguous first-fit placement until memory is full
    - Internal fragmentation per process and overall

Built with Streamlit for the web interface and Plotly for visualizations.
Run with:  streamlit run app.py
"""

# =============================================================================
# IMPORTS
# =============================================================================

import streamlit as st                       # Web application framework
import plotly.graph_objects as go            # Interactive plotting library

from engine import FREE, PagingSimulator, SimulatorConfig
from report import build_report
from utils import get_color, parse_seed


# =============================================================================
# STREAMLIT UI - Web Application Interface
# =============================================================================

st.set_page_config(page_title="Paged Memory Allocation Visualizer", layout="wide")

page = st.sidebar.radio("Choose View", ["Simulator", "Concepts"])

st.title("Paged Memory Allocation Visualizer — First-Fit Placement")

# =============================================================================
# CONCEPTS PAGE - Educational Content
# =============================================================================

if page == "Concepts":
    st.header("Operating System Concepts Used in This Project")
    st.markdown(
        """
        ## 📘 Key Concepts

        ### **1. Paging**
        - Physical memory is divided into fixed-size *pages*.
        - A process always receives a whole number of pages.

        ### **2. Page Table**
        - Maps each page index to the process that owns it (0 = free).

        ### **3. First-Fit Placement**
        - Scan memory from the lowest address and take the first contiguous
          run of free pages large enough for the request.
        - With no deallocation, memory fills strictly left to right.

        ### **4. Internal Fragmentation**
        - A 240MB process in 160MB pages needs 2 pages (320MB): 80MB unused.
        - Unused space per process is always less than one page.

        ### **5. Rejected Requests**
        - Near the end of memory, a generated process may need more pages
          than remain. It is discarded and a new size is drawn.
        - A one-page process always fits, so the run always completes.
        """
    )
    st.stop()

# =============================================================================
# SIMULATOR PAGE - Main Interactive Interface
# =============================================================================

# -----------------------------------------------------------------------------
# SIDEBAR - Simulation Settings
# -----------------------------------------------------------------------------

st.sidebar.header("Memory Layout")

total_pages = st.sidebar.number_input("Number of pages", min_value=1, max_value=1000, value=100)
page_size = st.sidebar.number_input("Page size (MB)", min_value=1, value=160, step=16)
base_address = st.sidebar.number_input("Starting address", min_value=0, value=2000)

st.sidebar.header("Process Sizes")

size_unit = st.sidebar.number_input("Size unit (MB)", min_value=1, value=80, step=16)
min_units, max_units = st.sidebar.slider("Units per process", 1, 100, (1, 30))

seed_input = st.sidebar.text_input("Seed (blank = time based)", value="42")

# -----------------------------------------------------------------------------
# SESSION STATE - Simulator Persistence
# -----------------------------------------------------------------------------

try:
    config = SimulatorConfig(
        total_pages=int(total_pages),
        page_size=int(page_size),
        size_unit=int(size_unit),
        min_units=int(min_units),
        max_units=int(max_units),
        base_address=int(base_address),
    )
except ValueError as e:
    st.sidebar.error(str(e))
    st.stop()

# Rebuild only when the settings change; a blank seed keeps the first time seed
settings = (config, seed_input.strip())
if st.session_state.get("settings") != settings:
    st.session_state.settings = settings
    st.session_state.sim = PagingSimulator(parse_seed(seed_input.strip() or None), config)

sim: PagingSimulator = st.session_state.sim

st.sidebar.markdown("---")
st.sidebar.caption(f"Seed in use: {sim.seed}")

if st.sidebar.button("Reset Simulation"):
    sim.reset()
    st.sidebar.success("Simulation reset")

# =============================================================================
# MAIN CONTENT AREA - Two Column Layout
# =============================================================================

col1, col2 = st.columns([1, 2])

# -----------------------------------------------------------------------------
# LEFT COLUMN - Controls and Event Log
# -----------------------------------------------------------------------------

with col1:
    st.subheader("Controls")

    if st.button("Allocate Next"):
        record = sim.allocate_next()
        if record is None:
            st.warning("Memory is full")
        else:
            st.success(
                f"P{record.pid}: {record.process_size}MB -> "
                f"{record.pages_allocated} pages at {record.start_address}"
            )

    if st.button("Run to Completion"):
        sim.run()
        st.success("All pages allocated")

    st.subheader("Event Log")
    for ev in sim.event_log[-20:][::-1]:
        st.write(ev)

# -----------------------------------------------------------------------------
# RIGHT COLUMN - Visualizations
# -----------------------------------------------------------------------------

with col2:
    # ----- Page Map Visualization -----
    st.subheader("Page Map")

    x = []
    text = []
    colors = []
    for i, owner in enumerate(sim.page_table):
        label = f"Page {i}: " + (f"P{owner}" if owner != FREE else "Free")
        x.append(i)
        text.append(label)
        colors.append(get_color(owner))

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=x,
        y=[1] * len(x),
        marker_color=colors,
        hovertext=text,
        hoverinfo="text",
    ))
    fig.update_layout(
        height=150,
        showlegend=False,
        bargap=0.05,
        yaxis=dict(showticklabels=False),
    )
    st.plotly_chart(fig, use_container_width=True)

    # ----- Allocation Table -----
    st.subheader("Allocations")
    if len(sim.allocations) == 0:
        st.write("No processes allocated yet")
    else:
        st.table([
            {
                "pid": a.pid,
                "start_address": a.start_address,
                "size_mb": a.process_size,
                "pages": a.pages_allocated,
                "unused_mb": a.unused,
            }
            for a in sim.allocations
        ])

    # ----- Statistics Display -----
    st.subheader("Statistics")
    stats = sim.get_stats()
    frag = sim.get_fragmentation_metrics()

    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Processes", stats["processes"])
    m2.metric("Free Pages", stats["pages_free"])
    m3.metric("Rejected Sizes", stats["rejected"])
    m4.metric("Internal Fragmentation", frag["internal"])

    # ----- Unused Space per Process -----
    if sim.allocations:
        fig2 = go.Figure()
        fig2.add_trace(go.Bar(
            x=[f"P{a.pid}" for a in sim.allocations],
            y=[a.unused for a in sim.allocations],
            marker_color=[get_color(a.pid) for a in sim.allocations],
        ))
        fig2.update_layout(height=300, title="Unused Space per Process (MB)")
        st.plotly_chart(fig2, use_container_width=True)

    # ----- Text Report -----
    if sim.is_full:
        st.subheader("Report")
        st.code(build_report(sim), language="text")

# =============================================================================
# FOOTER - Usage Tips
# =============================================================================

st.markdown("---")
st.markdown(
    "**Usage tips**:\n"
    "- Click **Allocate Next** to place one process, or **Run to Completion** to fill memory.\n"
    "- Keep the seed fixed to reproduce a run; clear it for a new time-based seed.\n"
    "- Raise the unit size above the page size to see the configuration rejected."
)
