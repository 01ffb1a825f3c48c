"""Rich console utilities for diagnostic output.

Standard output carries the generated YAML stream, so every message meant
for the user is printed to standard error.
"""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

PROG_NAME = "ksops-dry-run"

# Custom theme with consistent colors
_THEME = Theme(
    {
        "error": "red bold",
        "muted": "dim",
    }
)

# Shared console instance, bound to stderr
console = Console(theme=_THEME, stderr=True, highlight=False, soft_wrap=True)


def error(message: str) -> None:
    """Print an error message as a single line prefixed with the program name.

    Args:
        message: The message to display. Rich markup in it is not interpreted
            and line breaks are folded into single spaces.

    """
    line = " ".join(message.split())
    console.print(f"[error]{PROG_NAME}:[/error] {escape(line)}")
