"""Komenda: sgl rules — listowanie zagregowanych reguł wytycznych."""

from __future__ import annotations

import argparse
import dataclasses
import json

from rich import box
from rich.table import Table
from rich.text import Text

from aggregator import Aggregator
from data_model.common import normalize_language
from data_model.rules import RuleEntry, RuleTable
from sgl._common import (
    add_categories_argument,
    add_source_arguments,
    categories_or_exit,
    console,
    load_documents_or_exit,
)

LANGUAGE_STYLE: dict[str, str] = {
    "c":          "cyan",
    "cpp":        "blue",
    "java":       "red",
    "javascript": "yellow",
    "typescript": "bright_blue",
    "python":     "green",
    "general":    "white",
}


def _filter(table: RuleTable, args: argparse.Namespace) -> list[RuleEntry]:
    languages = {normalize_language(lang) for lang in args.language} if args.language else None
    categories = {c.lower() for c in args.category} if args.category else None
    needle = args.search.casefold() if args.search else None

    out: list[RuleEntry] = []
    for language, entries in table.items():
        if languages is not None and language not in languages:
            continue
        for e in entries:
            if categories is not None and e.category not in categories:
                continue
            if needle is not None and needle not in e.text.casefold():
                continue
            out.append(e)
    return out


def _fmt_text(text: str, detail: bool, max_width: int = 100) -> str:
    if detail or len(text) <= max_width:
        return text
    return text[:max_width] + "…"


def _fmt_sources(entry: RuleEntry, detail: bool) -> str:
    if detail:
        return "\n".join(str(s) for s in entry.provenance)
    if entry.is_duplicated:
        return f"{entry.source}  (+{len(entry.provenance) - 1})"
    return str(entry.source)


def run(args: argparse.Namespace) -> None:
    categories = categories_or_exit(args)
    docs       = load_documents_or_exit(args)
    table      = Aggregator(categories).aggregate(docs)
    entries    = _filter(table, args)

    if args.json_output:
        print(json.dumps(
            [dataclasses.asdict(e) for e in entries], ensure_ascii=False, indent=2
        ))
        return

    if not entries:
        console.print("[yellow]Brak reguł spełniających kryteria.[/yellow]")
        return

    out = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    out.add_column("JĘZYK",     no_wrap=True)
    out.add_column("KATEGORIA", no_wrap=True, style="bold")
    out.add_column("SEKCJA",    no_wrap=True, max_width=28)
    out.add_column("REGUŁA",    no_wrap=False, max_width=90)
    out.add_column("ŹRÓDŁO",    no_wrap=True)

    for e in entries:
        out.add_row(
            Text(e.language, style=LANGUAGE_STYLE.get(e.language, "")),
            e.category,
            Text(e.section),
            Text(_fmt_text(e.text, args.detail)),
            _fmt_sources(e, args.detail),
        )

    total = len(entries)
    duplicated = sum(1 for e in entries if e.is_duplicated)
    console.print()
    console.print(out)
    console.print(f"  [dim]{total} reguł(y), w tym {duplicated} scalonych duplikatów[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "rules",
        help="Listuje reguły zebrane z list pod nagłówkami kategorii.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Zbiera elementy list spod nagłówków kategorii (np. "Security",
"Error Handling"), deduplikuje je i listuje per język.

Przykłady:
  sgl rules styleguides/
  sgl rules styleguides/ --language python c
  sgl rules styleguides/ --category security --detail
  sgl rules styleguides/ --search "null pointer"
  sgl rules styleguides/ --categories kategorie.json --json-output
        """,
    )
    add_source_arguments(p)
    add_categories_argument(p)
    p.add_argument(
        "--language", "-l",
        nargs="+",
        metavar="JĘZYK",
        help="Filtruj po języku; aliasy jak w nazwach katalogów (C++, py, js).",
    )
    p.add_argument(
        "--category",
        nargs="+",
        metavar="ZNACZNIK",
        help="Filtruj po znaczniku kategorii (można podać kilka).",
    )
    p.add_argument(
        "--search", "-s",
        metavar="TEKST",
        help="Szukaj w treści reguły (bez wielkości liter).",
    )
    p.add_argument(
        "--detail",
        action="store_true",
        help="Pełna treść reguły i wszystkie źródła (provenance).",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz reguły jako JSON na stdout.",
    )
    p.set_defaults(func=run)
