import streamlit as st
from streamlit_autorefresh import st_autorefresh

from src.clock import CLOCK_TICK_SECONDS, local_now
from src.controller import RefreshController
from src.locations import default_location, get_location
from src.ui.apply_styles import apply_styles
from src.ui.charts import bar_chart, placeholder_history_frame
from src.ui.components.cards import icon_card, metric_card, pm25_card, status_line
from src.ui.readouts import (
    DATA_SOURCE_NOTE,
    HEADER_TITLE,
    READOUTS,
    modal_loading_text,
    readout,
    readout_with_unit,
    status_lines,
)
from src.ui.shell import render_detail_panel, render_header_strip, render_left_rail, render_main_layout
from src.ui_state import SelectLocation, Tick, UIState, reduce

st.set_page_config(
    page_title=HEADER_TITLE,
    layout="wide",
)

apply_styles()

# ------------------------
# Clock tick (one rerun per tick; the poll cycle rides on it)
# ------------------------
if CLOCK_TICK_SECONDS > 0:
    st_autorefresh(
        interval=CLOCK_TICK_SECONDS * 1000,
        key="clock_autorefresh",
    )

if "ui_state" not in st.session_state:
    st.session_state.ui_state = UIState(location_id=default_location().id, now=local_now())
if "controller" not in st.session_state:
    st.session_state.controller = RefreshController(location=default_location())

controller: RefreshController = st.session_state.controller


def dispatch(events) -> bool:
    state = st.session_state.ui_state
    for event in events:
        previous_location = state.location_id
        state = reduce(state, event)
        if isinstance(event, SelectLocation) and state.location_id != previous_location:
            controller.select_location(get_location(state.location_id))
    st.session_state.ui_state = state
    return bool(events)


dispatch([Tick(local_now())])
controller.pump()

ui_state: UIState = st.session_state.ui_state
snapshot = controller.snapshot
location = controller.location

render_header_strip(HEADER_TITLE)

events = render_left_rail(ui_state, location.name, ui_state.now)


def detail_body(modal):
    st.write(modal_loading_text(modal.title))
    st.altair_chart(bar_chart(placeholder_history_frame(), height=180), width="stretch")
    st.markdown(f"<p class='chart-footer'>{DATA_SOURCE_NOTE}</p>", unsafe_allow_html=True)


events += render_detail_panel(ui_state, location.name, detail_body)

(top_left, top_right), (bottom_left, bottom_right) = render_main_layout()

with top_left:
    pm25_card(readout(snapshot, "pm25"), READOUTS["pm25"][1], controller.insight)
with top_right:
    for tag in ("temperature", "sunlight", "windspeed", "humidity"):
        metric_card(READOUTS[tag][0], readout_with_unit(snapshot, tag))

with bottom_left:
    for tag in ("co2", "tvoc", "electricity"):
        metric_card(READOUTS[tag][0], readout_with_unit(snapshot, tag), css_class="metric-card connected-card")
with bottom_right:
    metric_card(READOUTS["precipitation"][0], f"{readout(snapshot, 'precipitation')}%", css_class="metric-card small-card")
    icon_card("☀️")

for line in status_lines(controller.updated_at, controller.last_error):
    status_line(line)

if dispatch(events):
    st.rerun()
