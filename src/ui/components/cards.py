import html

import streamlit as st


def metric_card(label: str, value: str, css_class: str = "metric-card"):
    st.markdown(
        f"""
        <div class="card {css_class}">
          <span class="metric-label">{html.escape(label)}</span>
          <span class="metric-value">{html.escape(value)}</span>
        </div>
        """,
        unsafe_allow_html=True,
    )


def pm25_card(value: str, unit: str, insight: str):
    st.markdown(
        f"""
        <div class="card pm25-card">
          <div class="metric-label">PM2.5</div>
          <div class="metric-value">{html.escape(value)} <small>{html.escape(unit)}</small></div>
          <div class="ai-insight">{html.escape(insight)}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def icon_card(icon: str):
    st.markdown(f"<div class=\"card icon-card\">{icon}</div>", unsafe_allow_html=True)


def status_line(text: str):
    st.markdown(f"<div class=\"status-line\">{html.escape(text)}</div>", unsafe_allow_html=True)
