import math
import os
import random
from dataclasses import dataclass

import requests

from src.applog import log
from src.locations import Location

SENSOR_HTTP_TIMEOUT = int(os.getenv("SENSOR_HTTP_TIMEOUT", "8"))

# snapshot field -> (upstream key, default when not provided)
SENSOR_FIELDS = {
    "pm25": ("s_d0", 0.0),
    "temperature": ("s_t0", 24.5),
    "humidity": ("s_h0", 65.0),
    "co2": ("s_g1", 420.0),
    "tvoc": ("s_g0", 0.15),
}


@dataclass(frozen=True)
class EnvironmentSnapshot:
    pm25: float
    temperature: float
    humidity: float
    co2: float
    tvoc: float
    windspeed: float
    sunlight: float
    electricity: float
    precipitation: int


@dataclass(frozen=True)
class PollResult:
    location_id: str
    snapshot: EnvironmentSnapshot | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.snapshot is not None


def to_float(x):
    """Return a finite, non-zero float or None when the value counts as not provided."""
    if x is None or isinstance(x, bool):
        return None
    try:
        value = float(x)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(value) or value == 0:
        return None
    return value


def simulate_extras(rng: random.Random) -> dict:
    # No upstream source for these yet.
    return {
        "windspeed": rng.random() * 5,
        "sunlight": 450 + rng.random() * 100,
        "electricity": 12.4 + rng.random(),
        "precipitation": math.floor(rng.random() * 30),
    }


def normalize_payload(payload, rng: random.Random | None = None) -> EnvironmentSnapshot:
    rng = rng or random.Random()
    if not isinstance(payload, dict):
        payload = {}
    values = {}
    for field, (key, default) in SENSOR_FIELDS.items():
        value = to_float(payload.get(key))
        values[field] = default if value is None else value
    values.update(simulate_extras(rng))
    return EnvironmentSnapshot(**values)


def fetch_payload(url: str, timeout: int = SENSOR_HTTP_TIMEOUT):
    resp = requests.get(url, timeout=timeout, headers={"accept": "application/json"})
    resp.raise_for_status()
    return resp.json()


def refresh(location: Location, rng: random.Random | None = None, timeout: int = SENSOR_HTTP_TIMEOUT) -> PollResult:
    """
    Fetch the latest sensor payload for a location and normalize it.

    Never raises: transport, HTTP and JSON errors come back as a failed
    PollResult so the caller can keep the previous snapshot on screen.
    """
    try:
        payload = fetch_payload(location.api_url, timeout=timeout)
    except (requests.RequestException, ValueError) as exc:
        log(f"poll failed for {location.id} ({location.name}): {exc!r}")
        return PollResult(location.id, error=str(exc) or exc.__class__.__name__)
    if not isinstance(payload, dict):
        log(f"poll for {location.id} returned {type(payload).__name__}, using defaults")
    return PollResult(location.id, snapshot=normalize_payload(payload, rng))
