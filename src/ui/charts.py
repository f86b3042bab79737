import altair as alt
import pandas as pd

from src.ui.tokens import COLORS

# Static bar heights (percent) shown until a history source exists.
PLACEHOLDER_BAR_HEIGHTS = [40, 70, 50, 90, 60]


def placeholder_history_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "label": [str(i + 1) for i in range(len(PLACEHOLDER_BAR_HEIGHTS))],
            "value": PLACEHOLDER_BAR_HEIGHTS,
        }
    )


def bar_chart(data: pd.DataFrame, height=200, title=None, color=None):
    if color is None:
        color = COLORS["accent2"]
    chart = (
        alt.Chart(data)
        .mark_bar(color=color)
        .encode(
            x=alt.X("label:N", title=None, sort=None, axis=alt.Axis(labels=False, ticks=False)),
            y=alt.Y("value:Q", title=None, scale=alt.Scale(domain=[0, 100])),
        )
        .properties(height=height)
        .configure_axis(labelColor=COLORS["text2"], titleColor=COLORS["text2"], gridColor=COLORS["border"])
        .configure_title(color=COLORS["text2"])
    )
    if title:
        chart = chart.properties(title=title)
    return chart
