"""Rich components for SSOSYNC console output."""

from typing import Mapping, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .theme import style


console = Console(highlight=False)

_LEVELS = {
    "success": ("✔", "success"),
    "warning": ("!", "warning"),
    "error": ("✖", "error"),
    "info": ("•", "accent_alt"),
}


def render_status(message: str, level: str = "info", detail: Optional[str] = None) -> Text:
    """Print a one-line status message colored by severity."""
    icon, color = _LEVELS.get(level, _LEVELS["info"])
    status_text = Text(f"{icon} {message}", style=style(color))
    console.print(status_text)

    if detail:
        console.print(Text(f"  {detail}", style=style("text_muted")))

    return status_text


def profile_text(section: str, values: Mapping[str, str]) -> Text:
    """Format a config section the way it appears in the INI file."""
    text = Text()
    text.append(f"[{section}]", style=f"bold {style('accent')}")
    for key, value in values.items():
        text.append("\n")
        text.append(key, style=style("text_muted"))
        text.append(" = ")
        text.append(value, style=style("text_primary"))
    return text


def render_profile(section: str, values: Mapping[str, str], action: str) -> Panel:
    """Print a profile section that a dry run would add or update."""
    border = style("success") if action == "add" else style("warning")
    panel = Panel(
        profile_text(section, values),
        title=Text(action, style=border),
        title_align="right",
        border_style=border,
        box=box.ROUNDED,
        padding=(0, 1),
        expand=False,
    )
    console.print(panel)
    return panel
