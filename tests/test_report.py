from __future__ import annotations

from aggregator import Aggregator
from loader import load_documents
from report import emit_report, render_text
from validator import Finding, FindingCode, StructureValidator


def _finding(code: FindingCode, path: str = "a.md", line: int = 1) -> Finding:
    return Finding(code=code, path=path, line=line, message="m", expected_fix="f")


def test_empty_run_passes() -> None:
    report = emit_report(0, [], {})

    assert report.passed
    assert report.exit_code == 0
    assert report.documents_scanned == 0
    assert report.total_findings == 0
    assert report.total_rules == 0
    assert dict(report.findings_by_kind) == {
        FindingCode.HEADING_SKIP: 0,
        FindingCode.BROKEN_LINK: 0,
    }
    assert report.rules_by_language == ()


def test_counts_by_kind_and_language(make_doc) -> None:
    findings = [
        _finding(FindingCode.BROKEN_LINK),
        _finding(FindingCode.HEADING_SKIP, line=3),
        _finding(FindingCode.BROKEN_LINK, path="b.md"),
    ]
    table = Aggregator().aggregate([
        make_doc("c/a.md", "## Security\n- One.\n- Two.\n"),
        make_doc("python/a.md", "## Security\n- Three.\n"),
    ])

    report = emit_report(2, findings, table)

    assert not report.passed
    assert report.exit_code == 1
    assert report.findings_by_kind == (
        (FindingCode.HEADING_SKIP, 1),
        (FindingCode.BROKEN_LINK, 2),
    )
    assert report.rules_by_language == (("c", 2), ("python", 1))
    assert report.total_rules == 3


def test_render_text_is_deterministic(make_doc) -> None:
    table = Aggregator().aggregate([make_doc("c/a.md", "## Security\n- One.\n")])
    report = emit_report(1, [_finding(FindingCode.BROKEN_LINK)], table)

    assert render_text(report) == (
        "status: FAIL\n"
        "documents scanned: 1\n"
        "findings: 1\n"
        "  HeadingSkipError: 0\n"
        "  BrokenLinkError: 1\n"
        "unique rules: 1\n"
        "  c: 1"
    )
    assert render_text(report) == render_text(emit_report(1, [_finding(FindingCode.BROKEN_LINK)], table))


def test_to_dict() -> None:
    report = emit_report(3, [_finding(FindingCode.HEADING_SKIP)], {})
    assert report.to_dict() == {
        "passed": False,
        "documents_scanned": 3,
        "total_findings": 1,
        "findings_by_kind": {"HeadingSkipError": 1, "BrokenLinkError": 0},
        "total_rules": 0,
        "rules_by_language": {},
    }


def test_full_pipeline_on_valid_tree(styleguide_root) -> None:
    docs = load_documents(styleguide_root)
    findings = StructureValidator().validate(docs)
    table = Aggregator().aggregate(docs)

    report = emit_report(len(docs), findings, table)

    assert report.passed
    assert report.documents_scanned == 5
    assert report.rules_by_language == (("c", 7), ("python", 3))


def test_full_pipeline_on_empty_root(make_tree) -> None:
    docs = load_documents(make_tree({}))
    report = emit_report(
        len(docs), StructureValidator().validate(docs), Aggregator().aggregate(docs)
    )
    assert report.passed
    assert render_text(report).startswith("status: PASS\ndocuments scanned: 0\nfindings: 0\n")
