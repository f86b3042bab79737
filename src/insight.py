import os
from dataclasses import dataclass

from src.applog import log
from src.locations import Location
from src.poller import EnvironmentSnapshot

INSIGHT_MODEL = os.getenv("INSIGHT_MODEL", "gpt-4o-mini")
INSIGHT_TIMEOUT_SECONDS = float(os.getenv("INSIGHT_TIMEOUT_SECONDS", "20"))

INSIGHT_PLACEHOLDER_TEXT = "正在分析環境數據..."
INSIGHT_EMPTY_TEXT = "數據更新中..."
INSIGHT_FALLBACK_TEXT = "環境品質良好，適宜活動。"


@dataclass(frozen=True)
class InsightResult:
    text: str
    ok: bool = True
    error: str | None = None


def build_prompt(location: Location, snapshot: EnvironmentSnapshot) -> str:
    return (
        f"Based on these metrics at {location.name}:\n"
        f"PM2.5: {snapshot.pm25:g}μg/m³,\n"
        f"Temp: {snapshot.temperature:g}°C,\n"
        f"CO2: {snapshot.co2:g}ppm.\n"
        "Provide a very short (1 sentence) friendly health advice or status in Traditional Chinese (Taiwan)."
    )


def call_openai(prompt: str) -> str | None:
    import openai

    client = openai.OpenAI(timeout=INSIGHT_TIMEOUT_SECONDS, max_retries=1)
    resp = client.chat.completions.create(
        model=INSIGHT_MODEL,
        messages=[{"role": "user", "content": prompt}],
    )
    if not resp.choices:
        return None
    return resp.choices[0].message.content


def request_insight(location: Location, snapshot: EnvironmentSnapshot, complete=None) -> InsightResult:
    """
    Ask the completion service for a one-sentence advisory.

    Any failure of the completion call is logged and mapped to the static
    fallback sentence; an empty answer maps to the "updating" phrase.
    """
    complete = complete or call_openai
    prompt = build_prompt(location, snapshot)
    try:
        text = (complete(prompt) or "").strip()
    except Exception as exc:
        log(f"insight failed for {location.id} ({location.name}): {exc!r}")
        return InsightResult(INSIGHT_FALLBACK_TEXT, ok=False, error=str(exc) or exc.__class__.__name__)
    if not text:
        return InsightResult(INSIGHT_EMPTY_TEXT)
    return InsightResult(text)


def generate(location: Location, snapshot: EnvironmentSnapshot, complete=None) -> str:
    return request_insight(location, snapshot, complete=complete).text
