"""
Meowa — Streamlit UI entry point. Run with `streamlit run app.py`.
"""

import streamlit as st

# Load .env first so CAT_API_* overrides are seen by the client
from meowa.utils.config import load_config, breeds_endpoint
load_config()

from meowa.infrastructure.cat_api_client import CatApiClient
from meowa.services.catalog_store import BreedCatalogStore
from meowa.utils.logger import setup_logger, get_logger
from meowa.ui.breed_display import (
    APP_TITLE,
    QUERY_STATE_KEY,
    empty_state_message,
    render_breed_details,
    render_breed_list,
    render_empty_state,
    render_search_box,
)

setup_logger("meowa")
log = get_logger()

st.set_page_config(page_title=APP_TITLE, page_icon="🐱", layout="centered")


@st.cache_resource
def get_cat_api_client():
    return CatApiClient()


if "catalog" not in st.session_state:
    st.session_state.catalog = BreedCatalogStore(client=get_cat_api_client())
if QUERY_STATE_KEY not in st.session_state:
    st.session_state[QUERY_STATE_KEY] = ""
if "selected_breed_id" not in st.session_state:
    st.session_state.selected_breed_id = None

store = st.session_state.catalog

with st.sidebar:
    st.header("Settings")
    st.caption(f"Source: `{breeds_endpoint()}`")
    if st.button("Reload breeds", use_container_width=True):
        with st.spinner("Fetching breeds…"):
            store.reload()
        st.session_state.selected_breed_id = None
        st.rerun()

if store.snapshot().is_loading:
    with st.spinner("Fetching breeds…"):
        store.ensure_loaded()

snapshot = store.snapshot()

selected_id = st.session_state.selected_breed_id
selected = store.get(selected_id) if selected_id else None

if selected is not None:
    if render_breed_details(selected):
        st.session_state.selected_breed_id = None
        st.rerun()
else:
    st.title(APP_TITLE)
    query = render_search_box(st.session_state)
    results = store.search(query)

    empty = empty_state_message(snapshot, query, results)
    if empty:
        title, body = empty
        if render_empty_state(title, body, retry=snapshot.failed and not snapshot.breeds):
            with st.spinner("Fetching breeds…"):
                store.reload()
            st.rerun()
    else:
        opened = render_breed_list(results)
        if opened:
            log.info("Opening breed %s", opened)
            st.session_state.selected_breed_id = opened
            st.rerun()
