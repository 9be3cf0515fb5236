import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.rule import Rule
from rich.theme import Theme

theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "dim": "dim",
        "success": "bold green",
    }
)

console = Console(theme=theme)


def log(message, style="info"):
    console.print(f"[Andes] {message}", style=style, markup=False, highlight=False)


def print_rule(title=""):
    console.print(Rule(title, style="dim"))


def setup_logging(debug=False):
    """Route every Andes.* logger through a rich handler on the shared console."""
    logger = logging.getLogger("Andes")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=debug, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
