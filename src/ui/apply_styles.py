from pathlib import Path

import streamlit as st

from src.ui.tokens import COLORS, FONTS, RADII, SPACING


def css_variables() -> str:
    lines = [f"--color-{key}: {value};" for key, value in COLORS.items()]
    lines += [f"--space-{key}: {value}px;" for key, value in SPACING.items()]
    lines += [f"--radius-{key}: {value}px;" for key, value in RADII.items()]
    lines += [f"--font-{key}: {value};" for key, value in FONTS.items()]
    return ":root {" + " ".join(lines) + "}"


def apply_styles():
    css_path = Path(__file__).resolve().parent / "styles.css"
    css = css_path.read_text(encoding="utf-8") if css_path.exists() else ""
    st.markdown(f"<style>{css_variables()}\n{css}</style>", unsafe_allow_html=True)
