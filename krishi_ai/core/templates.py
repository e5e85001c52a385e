"""Read-only localized text tables used by the rule-based fallbacks.

Each table is a JSON document under ``krishi_ai/data``. Leaves that vary by
language are objects keyed by language code (``{"en": ..., "hi": ...}``); the
English entry is mandatory and answers for every language without its own
entry. Tables are parsed once per process and frozen.
"""

import json
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from krishi_ai.models.language import BASELINE_LANGUAGE, coerce_language

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


@lru_cache(maxsize=None)
def load_template_table(name: str) -> Mapping[str, Any]:
    path = DATA_DIR / f"{name}.json"
    with open(path, "r", encoding="utf-8") as f:
        return _freeze(json.load(f))


def localized(entry: Mapping[str, Any], language) -> Any:
    """Pick the language-specific value of a table leaf."""
    code = coerce_language(language).value
    if code in entry:
        return entry[code]
    return entry[BASELINE_LANGUAGE.value]


def resolve(table: Mapping[str, Any], path: str) -> Any:
    node: Any = table
    for part in path.split("."):
        node = node[part]
    return node


def get_label(language, key: str) -> str:
    """Look up ``"<table>.<dotted.path>"`` and return the localized string.

    Unknown keys are a programming error and raise ``KeyError``.
    """
    table_name, _, path = key.partition(".")
    entry = resolve(load_template_table(table_name), path)
    return localized(entry, language)


def format_number(value: float) -> str:
    """Render a reading the way the mobile client shows it: ``7.0`` -> ``"7"``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
