"""
report/emitter.py — podsumowanie wyników walidacji i agregacji.

emit_report(document_count, findings, table) -> Report
render_text(report)                          -> str

Czysta funkcja wejść: brak efektów ubocznych, zapis podsumowania (konsola,
plik, JSON) należy do wywołującego.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from data_model.rules import RuleTable
from validator.types import Finding, FindingCode


@dataclass(frozen=True, slots=True)
class Report:
    """
    Podsumowanie przebiegu.

    - documents_scanned: liczba wczytanych dokumentów
    - findings_by_kind:  FindingCode → liczba (wszystkie kody, także zera)
    - rules_by_language: język → liczba unikalnych reguł (kolejność tabeli)
    - passed:            True gdy brak znalezisk
    """

    documents_scanned: int
    findings_by_kind: tuple[tuple[FindingCode, int], ...]
    rules_by_language: tuple[tuple[str, int], ...]

    @property
    def total_findings(self) -> int:
        return sum(n for _, n in self.findings_by_kind)

    @property
    def total_rules(self) -> int:
        return sum(n for _, n in self.rules_by_language)

    @property
    def passed(self) -> bool:
        return self.total_findings == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "documents_scanned": self.documents_scanned,
            "total_findings": self.total_findings,
            "findings_by_kind": {str(code): n for code, n in self.findings_by_kind},
            "total_rules": self.total_rules,
            "rules_by_language": dict(self.rules_by_language),
        }


def emit_report(
    document_count: int,
    findings: Sequence[Finding],
    table: RuleTable,
) -> Report:
    counts = {code: 0 for code in FindingCode}
    for f in findings:
        counts[f.code] += 1

    return Report(
        documents_scanned=document_count,
        findings_by_kind=tuple(counts.items()),
        rules_by_language=tuple((lang, len(entries)) for lang, entries in table.items()),
    )


def render_text(report: Report) -> str:
    """
    Deterministyczne podsumowanie tekstowe, np.:

        status: FAIL
        documents scanned: 13
        findings: 2
          HeadingSkipError: 1
          BrokenLinkError: 1
        unique rules: 57
          c: 20
          python: 37
    """
    lines = [
        f"status: {'PASS' if report.passed else 'FAIL'}",
        f"documents scanned: {report.documents_scanned}",
        f"findings: {report.total_findings}",
    ]
    lines += [f"  {code}: {n}" for code, n in report.findings_by_kind]
    lines.append(f"unique rules: {report.total_rules}")
    lines += [f"  {lang}: {n}" for lang, n in report.rules_by_language]
    return "\n".join(lines)
