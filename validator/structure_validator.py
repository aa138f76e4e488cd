"""
validator/structure_validator.py — walidator struktury dokumentów.

StructureValidator.validate(documents) -> list[Finding]

Etapy (dla każdego dokumentu):
  A — hierarchia nagłówków  (poziom rośnie o co najwyżej 1 względem
                              bezpośrednio poprzedzającego nagłówka)
  B — odnośniki względne     (cel musi być ścieżką wczytanego dokumentu)
  C — kotwice lokalne        ('#sekcja' musi pasować do sluga nagłówka
                              w tym samym dokumencie, bez wielkości liter)

Kotwice w odnośnikach do innych dokumentów nie są sprawdzane.
"""

from __future__ import annotations

import logging
from typing import Iterable

from data_model.documents import Document, LinkReference
from md_parser.parser import extract_links

from .document_index import DocumentIndex
from .types import Finding, FindingCode

logger = logging.getLogger(__name__)

# Kolejność znalezisk w tej samej linii.
_CODE_ORDER: dict[FindingCode, int] = {code: i for i, code in enumerate(FindingCode)}


class StructureValidator:
    """
    Walidator nagłówków i odnośników zbioru dokumentów.

    Użycie:
        validator = StructureValidator()
        findings  = validator.validate(DocumentLoader("docs"))
        if findings:
            for f in findings:
                print(f.code, f.location(), f.message)

    Błędy treści są zbierane jako Finding i nigdy nie przerywają walidacji.
    Błędy dostępu (NotFoundError, ReadError) z leniwego loadera
    propagują bez zmian.
    """

    def __init__(self, check_anchors: bool = True) -> None:
        self._check_anchors = check_anchors

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def validate(self, documents: Iterable[Document]) -> list[Finding]:
        docs  = list(documents)
        index = DocumentIndex(docs)

        findings: list[Finding] = []
        for doc in docs:
            doc_findings = self.validate_document(doc, index)
            if doc_findings:
                logger.debug("%s: %d znalezisk(a)", doc.path, len(doc_findings))
            findings.extend(doc_findings)

        logger.info(
            "Walidacja: %d dokument(ów), %d znalezisk(a)", len(docs), len(findings)
        )
        return findings

    def validate_document(self, doc: Document, index: DocumentIndex) -> list[Finding]:
        """Znaleziska jednego dokumentu, posortowane po linii."""
        findings: list[Finding] = []

        # A: hierarchia nagłówków
        self._stage_headings(doc, findings)

        # B + C: odnośniki i kotwice
        for link in extract_links(doc.path, doc.text):
            self._check_link(doc, link, index, findings)

        findings.sort(key=lambda f: (f.line, _CODE_ORDER[f.code]))
        return findings

    # ------------------------------------------------------------------
    # Stage A: hierarchia nagłówków
    # ------------------------------------------------------------------

    def _stage_headings(self, doc: Document, findings: list[Finding]) -> None:
        previous = None
        for heading in doc.headings:
            if previous is not None and heading.level > previous.level + 1:
                findings.append(Finding(
                    code=FindingCode.HEADING_SKIP,
                    path=doc.path,
                    line=heading.line,
                    message=(
                        f"Nagłówek '{heading.title}' ma poziom {heading.level}, "
                        f"a poprzedni ('{previous.title}', linia {previous.line}) "
                        f"poziom {previous.level}."
                    ),
                    expected_fix=(
                        f"Zmień poziom nagłówka na co najwyżej {previous.level + 1} "
                        f"lub dodaj brakujące nagłówki pośrednie."
                    ),
                    details={
                        "level": heading.level,
                        "previous_level": previous.level,
                        "previous_line": previous.line,
                    },
                ))
            previous = heading

    # ------------------------------------------------------------------
    # Stage B/C: odnośniki
    # ------------------------------------------------------------------

    def _check_link(
        self,
        doc: Document,
        link: LinkReference,
        index: DocumentIndex,
        findings: list[Finding],
    ) -> None:
        if link.is_external:
            return

        path_part = link.path_part
        if not path_part:
            anchor = link.anchor
            if self._check_anchors and anchor is not None:
                self._check_anchor(doc, link, anchor, findings)
            return

        if index.resolve(doc.directory, path_part) is None:
            findings.append(Finding(
                code=FindingCode.BROKEN_LINK,
                path=doc.path,
                line=link.line,
                message=(
                    f"Odnośnik '{link.target}' nie wskazuje na żaden "
                    f"wczytany dokument."
                ),
                expected_fix=(
                    "Popraw ścieżkę celu (względem katalogu dokumentu) "
                    "lub dodaj brakujący dokument."
                ),
                target=link.target,
                details={"label": link.label},
            ))

    def _check_anchor(
        self,
        doc: Document,
        link: LinkReference,
        anchor: str,
        findings: list[Finding],
    ) -> None:
        # Samo '#' wskazuje początek dokumentu.
        if not anchor or anchor.lower() in doc.anchors:
            return
        findings.append(Finding(
            code=FindingCode.BROKEN_LINK,
            path=doc.path,
            line=link.line,
            message=f"Kotwica '#{anchor}' nie pasuje do żadnego nagłówka dokumentu.",
            expected_fix=(
                "Użyj sluga istniejącego nagłówka, np. "
                f"'#{doc.headings[0].slug}'." if doc.headings
                else "Dodaj nagłówek, na który wskazuje kotwica, lub usuń odnośnik."
            ),
            target=link.target,
            details={"label": link.label, "anchor": anchor},
        ))
