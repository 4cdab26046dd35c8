"""Streamlit UI for JobHub: search jobs, then inspect one in detail."""
from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from jobhub.config import load_settings
from jobhub.errors import ConfigError
from jobhub.hub import JobHub
from jobhub.log import get_logger
from jobhub.presenter import detail_card, summary_card
from jobhub.view import View

log = get_logger(__name__)

# ── Helpers ──────────────────────────────────────────────────────────────


@st.cache_resource
def _executor() -> ThreadPoolExecutor:
    """Worker pool shared by every session for the life of the server."""
    return ThreadPoolExecutor(thread_name_prefix="jobhub")


def _hub() -> JobHub | None:
    """One JobHub per browser session; the initial search runs on creation."""
    if "hub" not in st.session_state:
        try:
            settings = load_settings()
        except ConfigError as exc:
            st.error(f"{exc}. Copy `.env.example` to `.env` and add your RapidAPI key.")
            return None
        hub = JobHub(settings, executor=_executor())
        hub.start().result()
        st.session_state["hub"] = hub
        st.session_state["query"] = settings.default_query
    return st.session_state["hub"]


def _on_select(hub: JobHub, job_id: str) -> None:
    hub.select_job(job_id)
    st.session_state["job_id_input"] = job_id


def _on_tab(hub: JobHub) -> None:
    hub.show(st.session_state["active_tab"])


# ── Tabs ─────────────────────────────────────────────────────────────────


def tab_search(hub: JobHub) -> None:
    st.subheader("Search Jobs")
    st.caption("Find your dream job with our comprehensive search")

    with st.form("search"):
        query = st.text_input("Search", key="query", placeholder="e.g. developer jobs in kerala")
        submitted = st.form_submit_button("Search", type="primary")
    if submitted:
        with st.spinner("Searching…"):
            hub.search(query)

    state = hub.search_state
    if state.is_error:
        st.error(state.message)
        return
    if state.is_loading:
        st.info("Searching…")
        return
    if state.is_success and not hub.jobs:
        st.info("No jobs found. Try a different search.")
        return

    for job in hub.jobs:
        card = summary_card(job)
        with st.container(border=True):
            st.markdown(f"### {card['title']}")
            st.markdown(f"**{card['employer']}**")
            c1, c2, c3 = st.columns(3)
            c1.caption(f"📍 {card['location']}")
            c2.caption(f"💰 {card['salary']}")
            c3.caption(f"📅 {card['posted']}")
            if card["employment_type"]:
                st.markdown(f"`{card['employment_type']}`")
            st.write(card["description"])
            b1, b2 = st.columns(2)
            if card["apply_link"]:
                b1.link_button("Apply Now", card["apply_link"])
            b2.button(
                "View Details",
                key=f"select_{card['id']}",
                on_click=_on_select,
                args=(hub, card["id"]),
            )


def tab_details(hub: JobHub) -> None:
    st.subheader("Job Details")
    st.caption("Get detailed information about a specific job")

    st.session_state.setdefault("job_id_input", hub.view.selected_job_id)
    with st.form("details"):
        job_id = st.text_input("Job ID", key="job_id_input", placeholder="Enter job ID")
        submitted = st.form_submit_button("Get Details", type="primary")
    if submitted:
        hub.view.set_selected_job_id(job_id)
        with st.spinner("Loading job details…"):
            hub.fetch_detail()

    state = hub.detail_state
    if state.is_error:
        st.error(state.message)
        return
    if state.is_loading:
        st.info("Loading job details…")
        return
    if not state.is_success:
        return
    if hub.detail is None:
        st.warning("No job found with that ID.")
        return

    card = detail_card(hub.detail)
    st.markdown(f"## {card['title']}")
    st.markdown(f"**{card['employer']}** · {card['location']}")

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Salary", card["salary"])
    c2.metric("Type", card["employment_type"] or "—")
    c3.metric("Posted", card["posted"])
    c4.metric("Experience", card["experience"])

    b1, b2 = st.columns(2)
    if card["apply_link"]:
        b1.link_button("Apply for this job", card["apply_link"])
    if card["google_link"]:
        b2.link_button("View on Google", card["google_link"])

    for title, items in card["highlights"].items():
        with st.expander(title, expanded=True):
            st.markdown("\n".join(f"- {item}" for item in items))

    if card["description"]:
        st.markdown("#### Job Description")
        st.write(card["description"])


# ── Main ─────────────────────────────────────────────────────────────────


def main() -> None:
    st.set_page_config(page_title="JobHub", page_icon="💼", layout="wide")
    st.title("JobHub")
    st.caption("Your comprehensive job search companion")

    hub = _hub()
    if hub is None:
        return

    st.session_state["active_tab"] = hub.view.active_view.value
    st.radio(
        "View",
        options=[View.SEARCH.value, View.DETAIL.value],
        format_func=lambda v: "🔍 Job Search" if v == View.SEARCH.value else "📄 Job Details",
        key="active_tab",
        horizontal=True,
        label_visibility="collapsed",
        on_change=_on_tab,
        args=(hub,),
    )

    if hub.view.active_view is View.SEARCH:
        tab_search(hub)
    else:
        tab_details(hub)


main()
