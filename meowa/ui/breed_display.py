"""Streamlit UI helpers for the breed list, breed details and empty states.

Text is built by plain functions (`breed_detail_lines`, `empty_state_message`)
so it can be tested without Streamlit; the `render_*` functions take the
Streamlit module as an argument for the same reason.
"""

from __future__ import annotations

from typing import Any, Sequence

import streamlit as st

from meowa.domain.breed import Breed
from meowa.services.catalog_store import CatalogSnapshot
from meowa.utils.logger import get_logger

logger = get_logger()

APP_TITLE = "Meowa"
SEARCH_PROMPT = "Search for a cat"
THUMBNAIL_PX = 100
DETAIL_IMAGE_PX = 350
NO_IMAGE_ICON = "🖼️"
QUERY_STATE_KEY = "breed_query"


def breed_detail_lines(breed: Breed) -> list[str]:
    """Labelled facts shown under the description on the detail view."""
    return [
        f"Temperament: {breed.temperament}",
        f"From: {breed.origin}",
        f"Weight(kg): {breed.weight.metric}",
        f"Life Span(years): {breed.life_span}",
    ]


def empty_state_message(snapshot: CatalogSnapshot, query: str, results: Sequence[Breed]) -> tuple[str, str] | None:
    """
    Title and body for the empty-state panel, or None when there is a list to show.

    A failed fetch and a search with no matches are reported differently.
    """
    if results:
        return None
    if snapshot.failed and not snapshot.breeds:
        return (
            "Couldn't load breeds",
            f"Something went wrong while fetching the breed list: {snapshot.error}",
        )
    if query:
        return ("Cat missing!", f"No results for **{query}**")
    return ("No breeds yet", "The breed list is empty.")


def render_search_box(state: Any, st: Any = st) -> str:
    """
    Draw the search box and return the query.

    The query lives in `state[QUERY_STATE_KEY]`, not in the widget's own state,
    so it survives runs where the detail view replaces the list.
    """
    query = st.text_input(
        SEARCH_PROMPT,
        value=state.get(QUERY_STATE_KEY, ""),
        placeholder=SEARCH_PROMPT,
        label_visibility="collapsed",
    )
    state[QUERY_STATE_KEY] = query
    return query


def render_breed_row(breed: Breed, st: Any = st) -> bool:
    """Render one list row (thumbnail, name, temperament). Returns True if the row was opened."""
    col1, col2 = st.columns([1, 4])
    with col1:
        url = breed.image_url
        if url:
            st.image(url, width=THUMBNAIL_PX)
        else:
            st.markdown(f"### {NO_IMAGE_ICON}")
    with col2:
        opened = st.button(breed.name, key=f"breed_{breed.id}")
        st.caption(breed.temperament)
    return bool(opened)


def render_breed_list(breeds: Sequence[Breed], st: Any = st) -> str | None:
    """Render the list; return the id of the breed the user opened, if any."""
    selected: str | None = None
    for breed in breeds:
        if render_breed_row(breed, st=st) and selected is None:
            selected = breed.id
    return selected


def render_breed_details(breed: Breed, st: Any = st) -> bool:
    """Render the detail view. Returns True if the user asked to go back."""
    back = st.button("← All breeds", key="back_to_list")
    url = breed.image_url
    if url:
        st.image(url, width=DETAIL_IMAGE_PX)
    else:
        st.info(f"{NO_IMAGE_ICON} No photo available for this breed.")
    st.title(breed.name)
    st.markdown(breed.description)
    for line in breed_detail_lines(breed):
        st.markdown(line)
    if breed.wikipedia_url:
        st.caption(f"[Wikipedia]({breed.wikipedia_url})")
    return bool(back)


def render_empty_state(title: str, body: str, retry: bool = False, st: Any = st) -> bool:
    """Render the empty-state panel. With retry=True shows a retry button and returns whether it was clicked."""
    st.subheader(f"🔍 {title}")
    st.markdown(body)
    if retry:
        return bool(st.button("Try again", key="retry_load"))
    return False
