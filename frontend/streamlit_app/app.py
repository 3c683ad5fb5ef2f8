"""
Journal UI
----------

Quick start:
1) Install the project from the repository root (makes `frontend.streamlit_app` importable):
   pip install -e .

2) Start the API:
   uvicorn backend.app.main:app --reload

3) Run the UI:
   streamlit run frontend/streamlit_app/app.py

Set API_URL if the API is not on http://localhost:8000.
"""

import os
from datetime import date, datetime, time, timezone

import streamlit as st

from frontend.streamlit_app.api import EntryApiError, EntryClient, parse_timestamp
from frontend.streamlit_app.state import EntryStore

API = os.getenv("API_URL", "http://localhost:8000")
TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))

DARK_CSS = """
<style>
.stApp { background-color: #1f2937; color: #f9fafb; }
.stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label { color: #f9fafb; }
</style>
"""

st.set_page_config(page_title="Journal", layout="centered")


def get_store() -> EntryStore:
    if "store" not in st.session_state:
        store = EntryStore(EntryClient(API, timeout=TIMEOUT))
        try:
            store.refresh()
        except EntryApiError as e:
            st.error(f"Could not load entries: {e.msg}")
        st.session_state.store = store
    return st.session_state.store


def navigate(view: str, entry_id: int | None = None) -> None:
    st.query_params.clear()
    st.query_params["view"] = view
    if entry_id is not None:
        st.query_params["id"] = str(entry_id)
    st.rerun()


def to_date(value: str) -> date:
    return parse_timestamp(value).astimezone(timezone.utc).date()


def at_midnight(day: date) -> datetime:
    return datetime.combine(day, time(), tzinfo=timezone.utc)


def theme_toggle() -> None:
    _, right = st.columns([4, 1])
    with right:
        st.toggle("Dark", key="dark_mode")
    if st.session_state.get("dark_mode"):
        st.markdown(DARK_CSS, unsafe_allow_html=True)


def nav_bar() -> None:
    left, right = st.columns(2)
    if left.button("All entries", use_container_width=True):
        navigate("list")
    if right.button("New entry", use_container_width=True):
        navigate("create")


def all_entries(store: EntryStore) -> None:
    st.subheader("Entries")
    if st.button("Refresh"):
        try:
            store.refresh()
        except EntryApiError as e:
            st.error(f"Refresh failed: {e.msg}")
    if not store.entries:
        st.info("No entries yet.")
        return
    for entry in list(store.entries):
        with st.container(border=True):
            st.markdown(f"### {entry['title'] or '(untitled)'}")
            st.write(entry["description"])
            st.caption(
                f"Created {to_date(entry['created_at'])} · "
                f"Scheduled {to_date(entry['scheduled_at'])}"
            )
            edit_col, delete_col = st.columns(2)
            if edit_col.button("Edit", key=f"edit-{entry['id']}"):
                navigate("edit", entry["id"])
            if delete_col.button("Delete", key=f"delete-{entry['id']}"):
                try:
                    store.delete_entry(entry["id"])
                except EntryApiError as e:
                    st.error(f"Delete failed: {e.msg}")
                else:
                    st.rerun()


def new_entry(store: EntryStore) -> None:
    st.subheader("New entry")
    with st.form("create"):
        title = st.text_input("Title")
        description = st.text_area("Description")
        created = st.date_input("Created", value=date.today())
        scheduled = st.date_input("Scheduled", value=date.today())
        if st.form_submit_button("Create"):
            try:
                store.create_entry({
                    "title": title,
                    "description": description,
                    "created_at": at_midnight(created),
                    "scheduled_at": at_midnight(scheduled),
                })
            except EntryApiError as e:
                st.error(f"Create failed: {e.msg}")
            else:
                navigate("list")


def edit_entry(store: EntryStore, entry_id: int) -> None:
    entry = store.find(entry_id)
    if entry is None:
        st.error(f"Entry {entry_id} is not loaded.")
        return
    st.subheader("Edit entry")
    with st.form("edit"):
        title = st.text_input("Title", value=entry["title"])
        description = st.text_area("Description", value=entry["description"])
        created = st.date_input("Created", value=to_date(entry["created_at"]))
        scheduled = st.date_input("Scheduled", value=to_date(entry["scheduled_at"]))
        if st.form_submit_button("Update"):
            changes = {}
            if title != entry["title"]:
                changes["title"] = title
            if description != entry["description"]:
                changes["description"] = description
            if created != to_date(entry["created_at"]):
                changes["created_at"] = at_midnight(created)
            if scheduled != to_date(entry["scheduled_at"]):
                changes["scheduled_at"] = at_midnight(scheduled)
            try:
                store.update_entry(entry_id, changes)
            except EntryApiError as e:
                st.error(f"Update failed: {e.msg}")
            else:
                navigate("list")


theme_toggle()
st.title("Journal")
nav_bar()

store = get_store()
view = st.query_params.get("view", "list")
if view == "create":
    new_entry(store)
elif view == "edit":
    raw_id = st.query_params.get("id", "")
    if raw_id.isdigit():
        edit_entry(store, int(raw_id))
    else:
        st.error("Missing or invalid entry id.")
else:
    all_entries(store)
