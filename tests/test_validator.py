from __future__ import annotations

import pytest

from loader import DocumentLoader, NotFoundError
from validator import DocumentIndex, FindingCode, StructureValidator


# ---------------------------------------------------------------------------
# Hierarchia nagłówków
# ---------------------------------------------------------------------------

def test_well_formed_documents_have_no_findings(make_doc) -> None:
    docs = [
        make_doc("a.md", "# A\n## B\n### C\n# D\n## E\n\n[b](b.md)\n"),
        make_doc("b.md", "## Starts at two\n### Three\n"),
    ]
    assert StructureValidator().validate(docs) == []


def test_heading_skip_is_reported_at_deeper_heading_line(make_tree) -> None:
    root = make_tree({"a.md": "# Title\n\n### Deep\n"})

    findings = StructureValidator().validate(DocumentLoader(root))

    assert len(findings) == 1
    (f,) = findings
    assert f.code is FindingCode.HEADING_SKIP
    assert f.path == "a.md"
    assert f.line == 3
    assert f.details["previous_level"] == 1


def test_heading_skip_compares_with_immediately_preceding_heading(make_doc) -> None:
    doc = make_doc("a.md", "# A\n## B\n#### D\n## E\n#### F\n")
    findings = StructureValidator().validate([doc])
    assert [(f.code, f.line) for f in findings] == [
        (FindingCode.HEADING_SKIP, 3),
        (FindingCode.HEADING_SKIP, 5),
    ]


def test_first_heading_is_never_flagged(make_doc) -> None:
    assert StructureValidator().validate([make_doc("a.md", "### Deep start\n")]) == []


# ---------------------------------------------------------------------------
# Odnośniki
# ---------------------------------------------------------------------------

def test_missing_link_target_is_reported(make_tree) -> None:
    root = make_tree({"a.md": "# A\n\nSee [b](b.md).\n"})

    findings = StructureValidator().validate(DocumentLoader(root))

    assert len(findings) == 1
    (f,) = findings
    assert f.code is FindingCode.BROKEN_LINK
    assert f.path == "a.md"
    assert f.line == 3
    assert f.target == "b.md"


def test_one_finding_per_unresolved_link(make_doc) -> None:
    doc = make_doc(
        "a.md",
        "# A\n[x](x.md) and [y](y.md)\n[ok](a.md)\n[x again](x.md)\n",
    )
    findings = StructureValidator().validate([doc])
    assert [(f.target, f.line) for f in findings] == [
        ("x.md", 2),
        ("y.md", 2),
        ("x.md", 4),
    ]
    assert all(f.code is FindingCode.BROKEN_LINK for f in findings)


def test_relative_links_resolve_against_source_directory(make_doc) -> None:
    docs = [
        make_doc("README.md", "# Index\n"),
        make_doc("c/style.md", "# C\n"),
        make_doc(
            "python/style.md",
            "# Py\n"
            "[c](../c/style.md)\n"
            "[sibling](best.md)\n"
            "[root](/README.md)\n"
            "[dot](./best.md)\n",
        ),
        make_doc("python/best.md", "# Best\n"),
    ]
    assert StructureValidator().validate(docs) == []


def test_links_escaping_root_are_broken(make_doc) -> None:
    doc = make_doc("a.md", "# A\n[out](../a.md)\n")
    (f,) = StructureValidator().validate([doc])
    assert f.target == "../a.md"


def test_directory_links_resolve_to_index_documents(make_doc) -> None:
    docs = [
        make_doc("README.md", "# Index\n[py](python/)\n[js](js)\n"),
        make_doc("python/README.md", "# Python\n"),
        make_doc("js/index.md", "# JS\n"),
    ]
    assert StructureValidator().validate(docs) == []


def test_non_document_targets_are_broken(make_tree) -> None:
    root = make_tree({"a.md": "# A\n[logo](logo.png)\n", "logo.png": b"\x89PNG"})
    (f,) = StructureValidator().validate(DocumentLoader(root))
    assert f.target == "logo.png"


def test_external_links_are_not_checked(make_doc) -> None:
    doc = make_doc(
        "a.md",
        "# A\n[w](https://example.com/x.md)\n[m](mailto:x@y.z)\n[c](//cdn.x/y.md)\n",
    )
    assert StructureValidator().validate([doc]) == []


def test_links_in_code_are_not_checked(make_doc) -> None:
    doc = make_doc("a.md", "# A\n```\n[x](x.md)\n```\n`[y](y.md)`\n")
    assert StructureValidator().validate([doc]) == []


def test_links_in_code_block_inside_list_item_are_not_checked(make_doc) -> None:
    doc = make_doc(
        "c/a.md",
        "## Security\n"
        "1. Escape output:\n"
        "    ```python\n"
        "    - not a rule\n"
        "    [x](nowhere.md)\n"
        "    ```\n",
    )
    assert StructureValidator().validate([doc]) == []


def test_link_with_bracketed_label_is_checked(make_doc) -> None:
    doc = make_doc("a.md", "# A\nSee [the [C] guide](missing.md).\n")
    (f,) = StructureValidator().validate([doc])
    assert f.code is FindingCode.BROKEN_LINK
    assert f.target == "missing.md"


def test_link_target_with_parentheses_resolves(make_tree) -> None:
    root = make_tree({
        "a.md": "# A\n[draft](notes_(draft).md)\n",
        "notes_(draft).md": "# Draft\n",
    })
    assert StructureValidator().validate(DocumentLoader(root)) == []


# ---------------------------------------------------------------------------
# Kotwice
# ---------------------------------------------------------------------------

def test_local_anchors_match_heading_slugs_case_insensitively(make_doc) -> None:
    doc = make_doc(
        "a.md",
        "# Guide\n## Error Handling\n[a](#error-handling)\n[b](#Error-Handling)\n[top](#)\n",
    )
    assert StructureValidator().validate([doc]) == []


def test_unknown_local_anchor_is_broken_link(make_doc) -> None:
    doc = make_doc("a.md", "# Guide\n[a](#missing)\n")
    (f,) = StructureValidator().validate([doc])
    assert f.code is FindingCode.BROKEN_LINK
    assert f.target == "#missing"
    assert f.details["anchor"] == "missing"


def test_anchor_checking_can_be_disabled(make_doc) -> None:
    doc = make_doc("a.md", "# Guide\n[a](#missing)\n")
    assert StructureValidator(check_anchors=False).validate([doc]) == []


def test_cross_document_anchors_are_not_validated(make_doc) -> None:
    docs = [
        make_doc("a.md", "# A\n[b](b.md#does-not-exist)\n"),
        make_doc("b.md", "# B\n"),
    ]
    assert StructureValidator().validate(docs) == []


# ---------------------------------------------------------------------------
# Kolejność, idempotencja, błędy dostępu
# ---------------------------------------------------------------------------

def test_findings_ordered_by_document_then_line(make_tree) -> None:
    root = make_tree({
        "b.md": "# B\n[x](x.md)\n",
        "a.md": "# A\n[y](y.md)\n### Skip\n",
    })
    findings = StructureValidator().validate(DocumentLoader(root))
    assert [(f.path, f.line, f.code) for f in findings] == [
        ("a.md", 2, FindingCode.BROKEN_LINK),
        ("a.md", 3, FindingCode.HEADING_SKIP),
        ("b.md", 2, FindingCode.BROKEN_LINK),
    ]


def test_heading_finding_precedes_link_finding_on_same_line(make_doc) -> None:
    doc = make_doc("a.md", "# A\n### [Deep](missing.md)\n")
    findings = StructureValidator().validate([doc])
    assert [f.code for f in findings] == [FindingCode.HEADING_SKIP, FindingCode.BROKEN_LINK]


def test_validation_is_idempotent(make_tree) -> None:
    root = make_tree({
        "a.md": "# A\n### Skip\n[b](b.md)\n",
        "c/d.md": "# D\n[a](../a.md)\n[z](z.md)\n",
    })
    validator = StructureValidator()
    assert validator.validate(DocumentLoader(root)) == validator.validate(DocumentLoader(root))


def test_access_errors_propagate(tmp_path) -> None:
    with pytest.raises(NotFoundError):
        StructureValidator().validate(DocumentLoader(tmp_path / "missing"))


def test_empty_document_set(make_tree) -> None:
    assert StructureValidator().validate(DocumentLoader(make_tree({}))) == []


# ---------------------------------------------------------------------------
# DocumentIndex
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    ("source_dir", "target", "expected"),
    [
        ("", "a.md", "a.md"),
        ("python", "../a.md", "a.md"),
        ("python", "/a.md", "a.md"),
        ("python", "sub/../../a.md", "a.md"),
        ("", "../a.md", None),
        ("", "missing.md", None),
        ("", "python", "python/README.md"),
    ],
)
def test_document_index_resolve(make_doc, source_dir, target, expected) -> None:
    index = DocumentIndex([
        make_doc("a.md", "# a\n"),
        make_doc("python/README.md", "# py\n"),
    ])
    assert index.resolve(source_dir, target) == expected
