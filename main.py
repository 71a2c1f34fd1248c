import logging
from typing import Optional

import typer

from bookshelf.library import Library
from bookshelf.scenario import Scenario, ScenarioError, load_scenario
from config import settings
from utils.ui_helpers import (
    set_output_mode,
    print_catalog_result,
    print_operation_results,
    print_score_result,
    print_stats_result,
    print_suggestion_result,
)

APP_NAME = "Genre Library CLI"


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.effective_log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _open_scenario(file_path: str) -> Scenario:
    """Load a scenario or exit with an error message."""
    try:
        return load_scenario(file_path)
    except ScenarioError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=1)


def _build(file_path: str, replay: bool = False) -> Library:
    scenario = _open_scenario(file_path)
    library = scenario.build_library()
    if replay:
        try:
            scenario.run(library)
        except ScenarioError as e:
            print(f"Error: {e}")
            raise typer.Exit(code=1)
    return library


# --- Typer CLI Application ---
app = typer.Typer(help=APP_NAME)

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Global CLI options (e.g. output mode)."""
    _configure_logging()
    if output:
        set_output_mode(output)

@app.command("show")
def cli_show(file_path: str = typer.Argument(..., help="Scenario JSON file")):
    """Show the catalog and registered patrons of a scenario."""
    library = _build(file_path)
    print_catalog_result(library.list_books(), library.list_patrons())

@app.command("suggest")
def cli_suggest(
    file_path: str = typer.Argument(..., help="Scenario JSON file"),
    patron_id: int = typer.Argument(..., help="Patron id"),
    replay: bool = typer.Option(False, "--replay", "-r", help="Replay the scenario's operations first"),
):
    """Suggest the book a patron would enjoy the most."""
    library = _build(file_path, replay=replay)
    book = library.suggest_book_to_patron(patron_id)
    book_id = library.get_book_id(book) if book is not None else None
    print_suggestion_result(patron_id, book_id, book)

@app.command("scores")
def cli_scores(
    file_path: str = typer.Argument(..., help="Scenario JSON file"),
    patron_id: int = typer.Argument(..., help="Patron id"),
):
    """Show how a patron scores every book in the catalog."""
    library = _build(file_path)
    patron = library.get_patron(patron_id)
    if patron is None:
        print(f"Patron with id {patron_id} not found.")
        raise typer.Exit(code=1)
    rows = [
        {"id": i, "title": book.title, "score": patron.get_book_score(book), "enjoys": patron.will_enjoy_book(book)}
        for i, book in library.list_books()
    ]
    print_score_result(patron, rows)

@app.command("run")
def cli_run(file_path: str = typer.Argument(..., help="Scenario JSON file")):
    """Replay a scenario's operations and print each result."""
    scenario = _open_scenario(file_path)
    library = scenario.build_library()
    try:
        results = scenario.run(library)
    except ScenarioError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=1)
    print_operation_results(results)

@app.command("stats")
def cli_stats(file_path: str = typer.Argument(..., help="Scenario JSON file")):
    """Show library statistics after replaying a scenario."""
    library = _build(file_path, replay=True)
    print_stats_result(library.get_statistics())

@app.command("config")
def cli_config():
    """Show the effective settings."""
    for key, value in settings.to_dict().items():
        print(f"{key}: {value}")


if __name__ == "__main__":
    app()
