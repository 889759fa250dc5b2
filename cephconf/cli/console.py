"""Console utilities for the cephconf CLI.

This module provides a custom console implementation based on Rich's Console
with the message styles used by the cephconf commands.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.theme import Theme


class CephConfConsole(RichConsole):
    """Custom console for the cephconf CLI.

    Extends Rich's Console with a theme and one helper per message kind.
    """

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the console with the cephconf theme.

        Args:
            **kwargs: Additional arguments to pass to the Rich Console
        """
        theme = Theme(
            {
                "info": "blue",
                "warning": "yellow",
                "error": "bold red",
                "success": "green",
                "path": "cyan",
            }
        )

        super().__init__(theme=theme, **kwargs)

    def info(self, message: str) -> None:
        """Print an informational message."""
        self.print(f"[info]{escape(message)}[/]")

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.print(f"[warning]{escape(message)}[/]")

    def error(self, message: str) -> None:
        """Print an error message.

        Args:
            message: The error message to print
        """
        self.print(f"[error]Error:[/] {escape(message)}", highlight=False)

    def success(self, message: str) -> None:
        """Print a success message."""
        self.print(f"[success]{escape(message)}[/]")

    def path(self, path: str) -> None:
        """Print a file path."""
        self.print(f"[path]{escape(path)}[/]")


# Create a default console instance for easy import
console = CephConfConsole()
