import math
import os
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

LOCAL_TZ = os.getenv("LOCAL_TZ", "Asia/Taipei")
CLOCK_TICK_SECONDS = int(os.getenv("CLOCK_TICK_SECONDS", "1"))

WEEKDAY_LABELS = ["星期一", "星期二", "星期三", "星期四", "星期五", "星期六", "星期日"]


def local_now(tz_name: str = LOCAL_TZ) -> datetime:
    try:
        tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        tz = ZoneInfo("UTC")
    return datetime.now(tz)


def clock_hands(now: datetime) -> dict:
    hours = now.hour % 12
    return {
        "hour": hours * 30 + now.minute * 0.5,
        "minute": now.minute * 6,
        "second": now.second * 6,
    }


def weekday_label(now: datetime) -> str:
    return WEEKDAY_LABELS[now.weekday()]


def format_date(now: datetime) -> str:
    return f"{now.year}/{now.month}/{now.day}"


def format_time(now: datetime) -> str:
    return now.strftime("%H:%M:%S")


def tick_positions(radius: float = 38, center: float = 50) -> list[tuple[float, float]]:
    points = []
    for deg in range(0, 360, 30):
        rad = math.radians(deg - 90)
        points.append((round(center + radius * math.cos(rad), 3), round(center + radius * math.sin(rad), 3)))
    return points


def render_clock_svg(now: datetime) -> str:
    hands = clock_hands(now)
    ticks = "".join(f'<circle cx="{x}" cy="{y}" r="2" fill="#fff" />' for x, y in tick_positions())
    return f"""
    <svg viewBox="0 0 100 100" class="clock-face">
      <circle cx="50" cy="50" r="45" fill="none" stroke="#fff" stroke-width="4" />
      {ticks}
      <rect x="48" y="25" width="4" height="25" rx="2" fill="#ddd" transform="rotate({hands['hour']}, 50, 50)" />
      <rect x="48.5" y="18" width="3" height="32" rx="1.5" fill="#fff" transform="rotate({hands['minute']}, 50, 50)" />
      <rect x="49" y="16" width="2" height="34" rx="1" fill="#ff4444" transform="rotate({hands['second']}, 50, 50)" />
      <circle cx="50" cy="50" r="4" fill="#fff" />
    </svg>
    """
