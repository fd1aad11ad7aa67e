"""Console output for the crosspath command line.

Themed Rich output with status lines, key/value rows and tables.
"""

import os
import sys
from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    SUCCESS = ("[✓]", "success", "green")
    ERROR = ("[x]", "error", "red")
    WARNING = ("[!]", "warning", "yellow")
    INFO = ("[!]", "info", "cyan")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    info: str
    warning: str
    error: str
    success: str
    highlight: str
    path: str
    number: str
    dim: str
    heading: str = "bright_yellow"


THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        warning='yellow',
        error='red',
        success='green',
        highlight='bright_cyan',
        path='white',
        number='bright_blue',
        dim='bright_black',
        heading='bright_yellow'
    ),
    'green': ThemeColors(
        info='green',
        warning='yellow',
        error='red',
        success='bright_green',
        highlight='bold green',
        path='bright_green',
        number='green',
        dim='green',
        heading='bright_cyan'
    ),
}


class ConsoleManager:
    """Themed Rich console for command output."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None,
                 force_plain: bool = False):
        """Initialize console.

        Args:
            theme: Theme name from THEMES
            file: Output file (defaults to sys.stdout)
            force_plain: Disable colors and styling
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stdout
        plain = force_plain or bool(os.environ.get('NO_COLOR'))

        self.console = Console(
            theme=self._create_rich_theme(),
            file=self.file,
            no_color=plain,
            highlight=False,
            soft_wrap=True,
        )

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        theme_dict: Dict[str, str] = {
            'info': self.theme_colors.info,
            'warning': self.theme_colors.warning,
            'error': self.theme_colors.error,
            'success': self.theme_colors.success,
            'highlight': self.theme_colors.highlight,
            'path': self.theme_colors.path,
            'number': self.theme_colors.number,
            'dim': self.theme_colors.dim,
            'heading': self.theme_colors.heading,
        }
        return Theme(theme_dict)

    def print(self, *args, **kwargs):
        self.console.print(*args, **kwargs)

    def print_value(self, value: str):
        """Print a bare result without markup interpretation."""
        self.console.print(Text(value))

    def print_status(self, status: StatusType, message: str):
        """Print a status line with icon."""
        icon, _, color = status.value
        status_text = Text()
        status_text.append(f"{icon} ", style=color)
        status_text.append(message)
        self.console.print(status_text)

    def print_error(self, message: str):
        self.print_status(StatusType.ERROR, message)

    def print_success(self, message: str):
        self.print_status(StatusType.SUCCESS, message)

    def print_warning(self, message: str):
        self.print_status(StatusType.WARNING, message)

    def print_info_with_heading(self, heading: str, value: str):
        """Print an info row with a colored heading and plain value."""
        text = Text()
        text.append(heading, style=self.theme_colors.heading)
        text.append(f" {value}", style=self.theme_colors.info)
        self.console.print(text)

    def print_table(self, title: str, rows: Dict[str, Any]):
        """Print a two-column key/value table."""
        table = Table(title=title, show_header=False, title_style=self.theme_colors.heading)
        table.add_column("field", style=self.theme_colors.info)
        table.add_column("value", style=self.theme_colors.path)
        for key, value in rows.items():
            table.add_row(key, "-" if value is None else str(value))
        self.console.print(table)
