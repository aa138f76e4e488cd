"""
report — podsumowanie pass/fail przebiegu walidacji i agregacji.

Interfejs publiczny:
    Report       — wartość podsumowania (liczniki, status, kod wyjścia)
    emit_report  — (liczba dokumentów, znaleziska, tabela reguł) → Report
    render_text  — Report → deterministyczny tekst
"""

from .emitter import Report, emit_report, render_text

__all__ = ["Report", "emit_report", "render_text"]
