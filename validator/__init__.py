"""
validator — walidator struktury dokumentów Markdown.

Interfejs publiczny:
    StructureValidator — główny walidator (nagłówki, odnośniki, kotwice)
    DocumentIndex      — indeks ścieżek do rozwiązywania odnośników
    Finding, FindingCode — typy wyniku

Typowe użycie:
    from loader import DocumentLoader
    from validator import StructureValidator

    findings = StructureValidator().validate(DocumentLoader("styleguides"))
    for f in findings:
        print(f.code, f.location(), f.message)
"""

from .types import Finding, FindingCode
from .document_index import DocumentIndex
from .structure_validator import StructureValidator

__all__ = [
    "Finding",
    "FindingCode",
    "DocumentIndex",
    "StructureValidator",
]
