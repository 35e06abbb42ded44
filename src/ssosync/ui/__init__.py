"""UI helper exports for the SSOSYNC CLI."""

from .components import console, profile_text, render_profile, render_status

__all__ = [
    "console",
    "profile_text",
    "render_profile",
    "render_status",
]
