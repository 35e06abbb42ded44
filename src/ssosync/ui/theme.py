"""Semantic color theme for SSOSYNC console output."""

THEME = {
    "accent": "#5fafff",
    "accent_alt": "blue",
    "text_primary": "default",
    "text_muted": "grey58",
    "border": "grey42",
    "success": "green",
    "warning": "yellow",
    "error": "red",
}


def style(name: str) -> str:
    """Look up a theme color, falling back to the primary text color."""
    return THEME.get(name, THEME["text_primary"])
