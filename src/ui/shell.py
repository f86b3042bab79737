import html

import streamlit as st

from src.clock import format_date, format_time, render_clock_svg, weekday_label
from src.locations import LOCATIONS
from src.ui.readouts import modal_title
from src.ui_state import METRIC_MENU, CloseModal, OpenModal, SelectLocation, ToggleDropdown, UIState


def render_header_strip(content_html: str):
    st.markdown(f"<div class='header-strip'>{content_html}</div>", unsafe_allow_html=True)


def render_location_dropdown(state: UIState, location_name: str) -> list:
    events = []
    if st.button(f"{location_name} ▼", key="location_dropdown", width="stretch"):
        events.append(ToggleDropdown())
    if state.dropdown_open:
        for location in LOCATIONS:
            if st.button(location.name, key=f"location_{location.id}", width="stretch"):
                events.append(SelectLocation(location.id))
    return events


def render_metric_menu() -> list:
    events = []
    for title, tag in METRIC_MENU:
        if st.button(title, key=f"menu_{tag}", width="stretch"):
            events.append(OpenModal(title, tag))
    return events


def render_clock(now):
    st.markdown(
        f"""
        <div class="clock">
          {render_clock_svg(now)}
          <div class="clock-digital">
            <div class="date-display">{weekday_label(now)} {format_date(now)}</div>
            <div class="time-display">{format_time(now)}</div>
          </div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_left_rail(state: UIState, location_name: str, now) -> list:
    """Draw the sidebar and return the UI events raised by this run's clicks."""
    with st.sidebar:
        events = render_location_dropdown(state, location_name)
        st.divider()
        events += render_metric_menu()
        st.divider()
        render_clock(now)
    return events


def render_detail_panel(state: UIState, location_name: str, body_renderer) -> list:
    if state.modal is None:
        return []
    events = []
    with st.container(border=True):
        title_col, close_col = st.columns([6, 1])
        with title_col:
            st.markdown(f"#### {html.escape(modal_title(location_name, state.modal.title))}")
        with close_col:
            if st.button("×", key="modal_close"):
                events.append(CloseModal())
        body_renderer(state.modal)
    return events


def render_main_layout():
    top_left, top_right = st.columns([3, 2], gap="large")
    bottom_left, bottom_right = st.columns([3, 2], gap="large")
    return (top_left, top_right), (bottom_left, bottom_right)
