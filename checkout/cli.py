"""CLI for the Global Checkout System.

Launches the interactive checkout menu on the terminal.
"""

import sys

import typer
from rich.console import Console

from checkout.config import Config
from checkout.logger import get_logger, setup_logging
from checkout.menu import CheckoutMenu

app = typer.Typer(
    name="checkout-demo",
    help="Global Checkout System - Factory Method payment demo",
    add_completion=False,
)

logger = get_logger(__name__)


@app.command()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug events to stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Run the interactive checkout menu."""
    console = Console(highlight=False)

    if version:
        from checkout import __version__
        console.print(f"Global Checkout System v{__version__}")
        raise typer.Exit()

    setup_logging(level="DEBUG" if verbose else Config.LOG_LEVEL, force=True)
    logger.debug("config_loaded", **Config.get_summary())

    menu = CheckoutMenu(console=console, stdin=sys.stdin)
    menu.run()


if __name__ == "__main__":
    app()
