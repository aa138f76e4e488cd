"""Komenda: sgl check — pełny przebieg: walidacja, agregacja, raport."""

from __future__ import annotations

import argparse
import json
import sys

from rich import box
from rich.table import Table

from aggregator import Aggregator
from report import emit_report, render_text
from sgl._common import (
    add_categories_argument,
    add_source_arguments,
    categories_or_exit,
    console,
    load_documents_or_exit,
)
from validator import StructureValidator


def run(args: argparse.Namespace) -> None:
    categories = categories_or_exit(args)
    docs       = load_documents_or_exit(args)

    findings = StructureValidator(check_anchors=not args.no_anchors).validate(docs)
    table    = Aggregator(categories).aggregate(docs)
    report   = emit_report(len(docs), findings, table)

    if args.json_output:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
        if not report.passed:
            sys.exit(report.exit_code)
        return

    if args.plain:
        print(render_text(report))
        if not report.passed:
            sys.exit(report.exit_code)
        return

    status = "[green]PASS[/green]" if report.passed else "[red]FAIL[/red]"
    console.print(
        f"{status}  {report.documents_scanned} dokument(ów), "
        f"{report.total_findings} znalezisk(a), {report.total_rules} unikalnych reguł."
    )

    summary = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    summary.add_column("Znaleziska", no_wrap=True)
    summary.add_column("Liczba", justify="right")
    for code, n in report.findings_by_kind:
        summary.add_row(str(code), f"[red]{n}[/red]" if n else "0")
    console.print(summary)

    if report.rules_by_language:
        rules = Table(box=box.SIMPLE, show_header=True, header_style="bold")
        rules.add_column("Język", no_wrap=True, style="cyan")
        rules.add_column("Reguły", justify="right")
        for language, n in report.rules_by_language:
            rules.add_row(language, str(n))
        console.print(rules)

    if findings and not args.quiet:
        console.print("[dim]Szczegóły znalezisk: sgl validate[/dim]")
        for f in findings:
            console.print(f"  [yellow]·[/yellow] {f.code}  {f.location()}  ", end="")
            console.print(f.message, markup=False)

    if not report.passed:
        sys.exit(report.exit_code)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check",
        help="Walidacja + agregacja + raport pass/fail.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje dokumenty, sprawdza strukturę (nagłówki, odnośniki), zbiera
reguły i wypisuje podsumowanie: liczba dokumentów, znaleziska według
rodzaju, unikalne reguły według języka.

Kod wyjścia: 0 — PASS, 1 — FAIL (są znaleziska), 2 — błąd dostępu
lub konfiguracji.

Przykłady:
  sgl check styleguides/
  sgl check styleguides/ --json-output
  sgl check --categories kategorie.json
  SGL_ROOT=styleguides sgl check
        """,
    )
    add_source_arguments(p)
    add_categories_argument(p)
    p.add_argument(
        "--no-anchors",
        action="store_true",
        help="Nie sprawdzaj kotwic '#sekcja' w obrębie dokumentu.",
    )
    p.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Bez listy znalezisk pod podsumowaniem.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raport jako JSON na stdout.",
    )
    p.add_argument(
        "--plain",
        action="store_true",
        help="Wypisz raport jako zwykły tekst (bez tabel i kolorów).",
    )
    p.set_defaults(func=run)
