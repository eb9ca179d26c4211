"""
CLI entry point for cardtrainer.
"""

# Standard library imports
import logging
from pathlib import Path
from typing import Optional

# Third-party imports
import typer
from rich.console import Console
from rich.markup import escape

# Local application imports
from cardtrainer.exceptions import TrainerError
from cardtrainer.cli.trainer_ui import Trainer, TrainerConfig

logger = logging.getLogger(__name__)

# Errors go to stderr so they never mix with the session transcript.
error_console = Console(stderr=True)

app = typer.Typer(
    name="cardtrainer",
    help="Cardtrainer: build a flashcard set and quiz yourself on it.",
    add_completion=False,
)


@app.command()
def train(
    import_from: Optional[Path] = typer.Option(  # noqa: B008
        None,
        "--import_from",
        help="Card-list file to load before the first prompt. "
        "Falls back to CARDTRAINER_IMPORT_FROM env var.",
        envvar="CARDTRAINER_IMPORT_FROM",
    ),
    export_to: Optional[Path] = typer.Option(  # noqa: B008
        None,
        "--export_to",
        help="Card-list file written with all cards on `exit`. "
        "Falls back to CARDTRAINER_EXPORT_TO env var.",
        envvar="CARDTRAINER_EXPORT_TO",
    ),
):
    """
    Start an interactive flashcard session.

    Fatal errors (unreadable card list, failed export or log write,
    non-numeric quiz count) end the session with exit code 1 and skip the
    export to `--export_to`.
    """
    config = TrainerConfig(import_from=import_from, export_to=export_to)
    try:
        Trainer(config=config).run()
    except TrainerError as e:
        logger.error(f"Session aborted: {e}")
        error_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    """
    Run the CLI application.

    If an unexpected exception occurs, print a bold red error message and
    exit the process with status code 1.
    """
    try:
        app()
    except Exception as e:
        error_console.print(
            f"[bold red]UNEXPECTED ERROR: {escape(str(e))}[/bold red]"
        )
        raise SystemExit(1)


if __name__ == "__main__":
    main()
