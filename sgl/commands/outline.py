"""Komenda: sgl outline — drzewo nagłówków dokumentów."""

from __future__ import annotations

import argparse

from rich import box
from rich.table import Table
from rich.text import Text

from data_model.documents import Document
from sgl._common import add_source_arguments, console, load_documents_or_exit


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_table(doc: Document) -> None:
    console.print(
        f"[bold]{doc.path}[/bold]  [dim]({doc.language}, "
        f"{len(doc.headings)} nagłówk(ów))[/dim]"
    )
    if not doc.headings:
        console.print("  [yellow]Brak nagłówków.[/yellow]\n")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("LVL",   justify="right", no_wrap=True, style="dim")
    table.add_column("LINIA", justify="right", no_wrap=True)
    table.add_column("TYTUŁ", no_wrap=False, max_width=60)
    table.add_column("SLUG",  no_wrap=True, style="cyan")

    for h in doc.headings:
        indent = "  " * (h.level - 1)
        table.add_row(str(h.level), str(h.line), Text(indent + h.title), "#" + h.slug)

    console.print(table)


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    docs = load_documents_or_exit(args)
    if args.path:
        docs = [d for d in docs if args.path in d.path]

    if not docs:
        console.print("[yellow]Brak dokumentów.[/yellow]")
        return

    for doc in docs:
        _show_table(doc)
    console.print(f"  [dim]{len(docs)} dokument(ów)[/dim]\n")


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "outline",
        help="Wyświetla drzewo nagłówków każdego dokumentu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyświetla nagłówki (poziom, linia, tytuł, slug kotwicy) każdego dokumentu.

Przykłady:
  sgl outline styleguides/
  sgl outline styleguides/ --path python/
        """,
    )
    add_source_arguments(p)
    p.add_argument(
        "--path", "-p",
        metavar="FRAGMENT",
        default=None,
        help="Tylko dokumenty, których ścieżka zawiera FRAGMENT.",
    )
    p.set_defaults(func=run)
