"""Komenda: sgl validate — sprawdza nagłówki i odnośniki dokumentów."""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys

from rich import box
from rich.table import Table
from rich.text import Text

from sgl._common import add_source_arguments, console, load_documents_or_exit
from validator import StructureValidator

CODE_STYLE: dict[str, str] = {
    "HeadingSkipError": "yellow",
    "BrokenLinkError":  "red",
}


def run(args: argparse.Namespace) -> None:
    docs      = load_documents_or_exit(args)
    validator = StructureValidator(check_anchors=not args.no_anchors)
    findings  = validator.validate(docs)

    # --- Wyjście JSON ----------------------------------------------------
    if args.json_output:
        out = {
            "documents_scanned": len(docs),
            "is_valid": not findings,
            "findings": [dataclasses.asdict(f) for f in findings],
        }
        print(json.dumps(out, ensure_ascii=False, indent=2))
        if findings:
            sys.exit(1)
        return

    # --- Wynik na konsoli ------------------------------------------------
    if not findings:
        console.print(
            f"[green]OK[/green]  {len(docs)} dokument(ów) — brak wad struktury."
        )
        return

    console.print(
        f"[red]BŁĄD[/red]  {len(docs)} dokument(ów) — "
        f"{len(findings)} znalezisk(a)."
    )

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Kod",          no_wrap=True)
    table.add_column("Lokalizacja", style="cyan", no_wrap=True)
    table.add_column("Komunikat")
    table.add_column("Poprawka",     style="dim")

    for f in findings:
        table.add_row(
            Text(f.code, style=CODE_STYLE.get(f.code, "")),
            f.location(),
            Text(f.message),
            Text(f.expected_fix),
        )

    console.print(table)
    sys.exit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "validate",
        help="Sprawdza hierarchię nagłówków i odnośniki względne.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
Waliduje strukturę dokumentów Markdown spod katalogu treści:

  A  Hierarchia nagłówków  (poziom rośnie o co najwyżej 1)
  B  Odnośniki względne    (cel musi być wczytanym dokumentem)
  C  Kotwice lokalne       ('#sekcja' musi pasować do nagłówka dokumentu)

Kod wyjścia: 0 — brak wad, 1 — znaleziska, 2 — błąd dostępu.

Przykłady:
  sgl validate styleguides/
  sgl validate styleguides/ --no-anchors
  sgl validate styleguides/ --json-output
        """,
    )
    add_source_arguments(p)
    p.add_argument(
        "--no-anchors",
        action="store_true",
        help="Nie sprawdzaj kotwic '#sekcja' w obrębie dokumentu.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz znaleziska jako JSON na stdout.",
    )
    p.set_defaults(func=run)
