import io
import random
import time

import pandas as pd
import streamlit as st

from examslots.config import ALGORITHMS, DEFAULT_TRIALS
from examslots.graph_build import build_conflict_graph_from_students, build_conflict_graph_from_edges
from examslots.io_utils import load_registrations, load_edge_list_csv, schedule_frame
from examslots.scheduler import Scheduler
from examslots.scheduling.evaluation import summary
from examslots.trials import run_trials

# ---------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------
st.set_page_config(page_title="ExamSlots – Scheduler", layout="wide")
st.title("ExamSlots – Conflict-Free Exam Slots")


# ---------------------------------------------------------------------
# Caching
# ---------------------------------------------------------------------
@st.cache_data
def load_students_cached(reg_bytes: bytes):
    return load_registrations(io.BytesIO(reg_bytes))


@st.cache_data
def load_edges_cached(edges_bytes: bytes):
    return load_edge_list_csv(io.BytesIO(edges_bytes))


# ---------------------------------------------------------------------
# UI
# ---------------------------------------------------------------------
st.subheader("Inputs")
mode = st.radio("Input mode", ["Registrations", "Edge list CSV", "Sample"], horizontal=True)

with st.form("controls"):
    if mode == "Registrations":
        upload = st.file_uploader("Registration file (STUDENT|C1,C2,...)", type=["txt", "csv"])
    elif mode == "Edge list CSV":
        upload = st.file_uploader("Edge list CSV (u,v)", type=["csv"])
    else:
        upload = None

    c1, c2, c3 = st.columns(3)
    algo = c1.selectbox("Algorithm", list(ALGORITHMS), index=0)
    trials = c2.number_input("Trials", 1, 10_000, 1, step=1,
                             help=f"Keep the fewest slots over several runs (e.g. {DEFAULT_TRIALS} with a random first pick)")
    seed = c3.number_input("Seed", 0, 2**31 - 1, 42, step=1)
    random_first = st.checkbox("Random first pick", value=False,
                               help="Applies to the single run and to every trial")

    submitted = st.form_submit_button("Run Scheduler")

# ---------------------------------------------------------------------
# Run on Submit
# ---------------------------------------------------------------------
if submitted:
    t_total0 = time.perf_counter()

    if mode == "Registrations":
        if upload is None:
            st.error("Please upload a registration file.")
            st.stop()
        try:
            students = load_students_cached(upload.getvalue())
        except OSError as e:
            st.error(f"Could not read {upload.name}: {e}")
            st.stop()
        G = build_conflict_graph_from_students(students)
    elif mode == "Edge list CSV":
        if upload is None:
            st.error("Please upload an edge list CSV.")
            st.stop()
        try:
            edges = load_edges_cached(upload.getvalue())
        except OSError as e:
            st.error(f"Could not read {upload.name}: {e}")
            st.stop()
        G = build_conflict_graph_from_edges(edges)
    else:
        G = Scheduler.sample().graph

    t_algo0 = time.perf_counter()
    if trials > 1:
        report = run_trials(G, int(trials), seed=int(seed), algo=algo, random_first=random_first)
        colors = report.best_colors
        st.caption(f"Slot counts over {int(trials)} trials")
        st.bar_chart(pd.Series(report.slot_counts).value_counts().sort_index())
    else:
        sched = Scheduler(G, algo=algo, rng=random.Random(int(seed)), random_first=random_first)
        colors = sched.color_graph()
    t_algo1 = time.perf_counter()

    # -----------------------------------------------------------------
    # UI Output
    # -----------------------------------------------------------------
    st.subheader("Summary")
    st.text(summary(G, colors))
    st.caption(f"Coloring time: {t_algo1 - t_algo0:.3f}s · Total time: {time.perf_counter() - t_total0:.3f}s")

    df = schedule_frame(colors)
    by_slot = df.groupby("slot")["course_id"].apply(", ".join).reset_index(name="courses")
    st.dataframe(by_slot, use_container_width=True)

    st.download_button("Download schedule.csv", df[["course_id", "slot"]].to_csv(index=False),
                       file_name="schedule.csv", mime="text/csv")
    st.success("Scheduling complete.")
