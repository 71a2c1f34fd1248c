import os
import json
from typing import List, Any, Dict, Optional, Tuple
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()

def _availability(book: Any) -> str:
    return "borrowed" if book.is_borrowed else "available"

def print_catalog_result(books: List[Tuple[int, Any]], patrons: List[Tuple[int, Any]]) -> None:
    """Print the catalog and the patron registry in the current output mode.
    - plain: '<id> - Title by Author [available]' lines, then '<id> - First Last' lines
    - json: object with 'books' and 'patrons' arrays
    - rich: two Rich tables
    """
    mode = get_output_mode()

    if mode == "json":
        payload = {
            "books": [dict(book.to_dict(), id=i) for i, book in books],
            "patrons": [dict(patron.to_dict(), id=i) for i, patron in patrons],
        }
        print(json.dumps(payload, ensure_ascii=False))
        return

    if mode == "rich":
        table = Table(title="📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Comic / Dramatic / Educational", style="white")
        table.add_column("Status", style="green")
        for i, b in books:
            values = f"{b.comic_value} / {b.dramatic_value} / {b.educational_value}"
            status = f"borrowed by {b.current_borrower_id}" if b.is_borrowed else "available"
            table.add_row(str(i), b.title, b.author, values, status)
        _console.print(table)

        patron_table = Table(title="🧑 Patrons", header_style="bold cyan")
        patron_table.add_column("ID", style="magenta", no_wrap=True)
        patron_table.add_column("Name", style="white")
        patron_table.add_column("Threshold", style="white")
        for i, p in patrons:
            patron_table.add_row(str(i), p.string_representation(), str(p.enjoyment_threshold))
        _console.print(patron_table)
        return

    if not books:
        print("No books in library.")
    for i, b in books:
        print(f"{i} - {b.title} by {b.author} [{_availability(b)}]")
    if not patrons:
        print("No registered patrons.")
    for i, p in patrons:
        print(f"{i} - {p.string_representation()}")

def print_suggestion_result(patron_id: int, book_id: Optional[int], book: Optional[Any]) -> None:
    mode = get_output_mode()

    if mode == "json":
        payload = {"patron_id": patron_id, "book_id": book_id, "book": book.to_dict() if book else None}
        print(json.dumps(payload, ensure_ascii=False))
    elif book is None:
        print(f"No suggestion for patron {patron_id}.")
    elif mode == "rich":
        content = f"[bold]{book.title}[/] by {book.author}\n[dim]Book id:[/] {book_id}"
        _console.print(Panel.fit(content, title=f"💡 Suggestion for patron {patron_id}", border_style="green"))
    else:
        print(f"Suggested book for patron {patron_id}: {book_id} - {book.title} by {book.author}")

def print_score_result(patron: Any, rows: List[Dict[str, Any]]) -> None:
    """Print per-book scores for one patron; each row has id, title, score, enjoys."""
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(rows, ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=f"🎯 Scores for {patron.string_representation()}", header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Score", justify="right")
        table.add_column("Enjoys", style="green")
        for row in rows:
            table.add_row(str(row["id"]), row["title"], str(row["score"]), "yes" if row["enjoys"] else "no")
        _console.print(table)
    else:
        if not rows:
            print("No books in library.")
        for row in rows:
            verdict = "enjoys" if row["enjoys"] else "does not enjoy"
            print(f"{row['id']} - {row['title']}: {row['score']} ({verdict})")

def print_operation_results(results: List[Any]) -> None:
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps([r.to_dict() for r in results], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="▶️ Operations", header_style="bold cyan")
        table.add_column("#", style="magenta", no_wrap=True)
        table.add_column("Operation", style="white")
        table.add_column("Result", style="white")
        for n, r in enumerate(results, 1):
            mark = "[green]✓[/]" if r.success else "[red]✗[/]"
            table.add_row(str(n), r.op, f"{mark} {r.message}")
        _console.print(table)
    else:
        if not results:
            print("No operations to run.")
        for n, r in enumerate(results, 1):
            mark = "OK" if r.success else "FAIL"
            print(f"[{n}/{len(results)}] {mark} {r.message}")

def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print statistics in the current output mode.
    - plain: one 'Label: value' line per metric
    - json: JSON object
    - rich: Panel with the main metrics
    """
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]Total Books:[/] {stats['total_books']} / {stats['max_book_capacity']}\n"
            f"[bold]Available:[/] {stats['available_books']}\n"
            f"[bold]Borrowed:[/] {stats['borrowed_books']}\n"
            f"[bold]Patrons:[/] {stats['registered_patrons']} / {stats['max_patron_capacity']}"
        )
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {stats['total_books']}")
        print(f"Available Books: {stats['available_books']}")
        print(f"Borrowed Books: {stats['borrowed_books']}")
        print(f"Registered Patrons: {stats['registered_patrons']}")
