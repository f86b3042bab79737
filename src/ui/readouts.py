from src.poller import EnvironmentSnapshot

HEADER_TITLE = "芳和實驗中學環境現況"
DATA_SOURCE_NOTE = "數據來源：LASS 開源感測網路"

# tag -> (label, unit, format)
READOUTS = {
    "pm25": ("PM2.5", "μg/m³", "{:g}"),
    "temperature": ("溫度", "°C", "{:.1f}"),
    "sunlight": ("日照", "lx", "{:.0f}"),
    "windspeed": ("風速", "m/s", "{:.1f}"),
    "humidity": ("濕度", "%", "{:g}"),
    "co2": ("CO2", "ppm", "{:g}"),
    "tvoc": ("TVOC", "mg/m³", "{:.2f}"),
    "electricity": ("用電", "kW", "{:.1f}"),
    "precipitation": ("降雨機率", "%", "{:d}"),
}


def fmt_value(value, fmt_str="{:.1f}", fallback="--"):
    if value is None:
        return fallback
    try:
        return fmt_str.format(value)
    except Exception:
        return fallback


def readout(snapshot: EnvironmentSnapshot | None, tag: str) -> str:
    _, _, fmt_str = READOUTS[tag]
    value = getattr(snapshot, tag) if snapshot is not None else None
    if tag == "precipitation":
        return fmt_value(value or 0, fmt_str, fallback="0")
    if tag == "pm25" and not value:
        # a zero reading is the "not provided" default upstream
        return "--"
    return fmt_value(value, fmt_str)


def readout_with_unit(snapshot: EnvironmentSnapshot | None, tag: str) -> str:
    unit = READOUTS[tag][1]
    return f"{readout(snapshot, tag)} {unit}"


def modal_title(location_name: str, metric_title: str) -> str:
    return f"{location_name} {metric_title} 歷史數據"


def modal_loading_text(metric_title: str) -> str:
    return f"正在加載 {metric_title} 的歷史統計圖表..."


def status_lines(updated_at, last_error: str | None) -> list[str]:
    lines = []
    if updated_at is not None:
        lines.append(f"更新時間 {updated_at.strftime('%H:%M:%S')}")
    if last_error:
        lines.append(f"感測器連線失敗，顯示上次數據：{last_error}")
    return lines
