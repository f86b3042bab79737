from dataclasses import dataclass, replace
from datetime import datetime

METRIC_MENU = [
    ("溫度", "temperature"),
    ("日照", "sunlight"),
    ("風速", "windspeed"),
    ("濕度", "humidity"),
    ("碳排放", "co2"),
    ("有機物", "tvoc"),
    ("PM2.5", "pm25"),
    ("用電量", "electricity"),
]


@dataclass(frozen=True)
class Modal:
    title: str
    tag: str


@dataclass(frozen=True)
class UIState:
    location_id: str
    dropdown_open: bool = False
    modal: Modal | None = None
    now: datetime | None = None


@dataclass(frozen=True)
class ToggleDropdown:
    pass


@dataclass(frozen=True)
class SelectLocation:
    location_id: str


@dataclass(frozen=True)
class OpenModal:
    title: str
    tag: str


@dataclass(frozen=True)
class CloseModal:
    pass


@dataclass(frozen=True)
class Tick:
    now: datetime


def reduce(state: UIState, event) -> UIState:
    """Return the state that follows `event`; `state` itself is never modified."""
    if isinstance(event, ToggleDropdown):
        return replace(state, dropdown_open=not state.dropdown_open)
    if isinstance(event, SelectLocation):
        return replace(state, location_id=event.location_id, dropdown_open=False)
    if isinstance(event, OpenModal):
        return replace(state, modal=Modal(event.title, event.tag))
    if isinstance(event, CloseModal):
        return replace(state, modal=None)
    if isinstance(event, Tick):
        return replace(state, now=event.now)
    raise TypeError(f"unknown UI event: {event!r}")
