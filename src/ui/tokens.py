SPACING = {
    "sm": 8,
    "md": 16,
    "lg": 24,
}

RADII = {
    "md": 12,
    "lg": 18,
}

FONTS = {
    "base": '"Noto Sans TC", "Microsoft JhengHei", sans-serif',
    "mono": '"IBM Plex Mono", "Consolas", monospace',
}

COLORS = {
    "bg": "#0f1a14",
    "surface": "#16241c",
    "surface2": "#1d3026",
    "border": "#2a4034",
    "text": "#f3f8f4",
    "text2": "#a8bcb0",
    "accent": "#8fd694",
    "accent2": "#5fb3e6",
    "accent3": "#f2b55b",
    "alarm": "#ff4444",
}
