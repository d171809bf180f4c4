"""Shared Rich console and style names for CLI output."""

from rich.console import Console
from rich.theme import Theme

naming_theme = Theme(
    {
        "error": "bold red",
        "header": "bold sky_blue2",
        "label": "bold",
        "value": "green",
        "unresolved": "dim yellow",
    }
)

console = Console(theme=naming_theme)


class Styles:
    """Style names defined by :data:`naming_theme`, for consistent markup."""

    ERROR = "error"

    HEADER = "header"
    LABEL = "label"
    VALUE = "value"
    UNRESOLVED = "unresolved"
