"""
aggregator/schema.py — schemat JSON pliku konfiguracji kategorii.

Przykład pliku:

    {
        "categories": [
            {"name": "Security", "tag": "security"},
            {"name": "Error Handling", "tag": "errors",
             "aliases": ["Exceptions", "Exception Handling"]}
        ]
    }
"""

from __future__ import annotations

from typing import Any

CATEGORY_CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "styleguide-lint category config",
    "type": "object",
    "required": ["categories"],
    "additionalProperties": False,
    "properties": {
        "categories": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "required": ["name"],
                "additionalProperties": False,
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "tag": {
                        "type": "string",
                        "pattern": "^[a-z0-9][a-z0-9_\\-]*$",
                    },
                    "aliases": {
                        "type": "array",
                        "items": {"type": "string", "minLength": 1},
                        "uniqueItems": True,
                    },
                },
            },
        },
    },
}
