"""
loader — wczytywanie dokumentów Markdown z katalogu treści.

Interfejs publiczny:
    DocumentLoader  — leniwa, powtarzalna sekwencja Document
    load_documents  — wczytanie całego zbioru do listy
    AccessError, NotFoundError, ReadError — błędy dostępu (krytyczne)

Typowe użycie:
    from loader import DocumentLoader, NotFoundError

    try:
        docs = list(DocumentLoader("styleguides"))
    except NotFoundError as e:
        print(e.root)
"""

from .errors import AccessError, NotFoundError, ReadError
from .document_loader import DEFAULT_EXTENSIONS, DocumentLoader, load_documents

__all__ = [
    "AccessError",
    "NotFoundError",
    "ReadError",
    "DEFAULT_EXTENSIONS",
    "DocumentLoader",
    "load_documents",
]
