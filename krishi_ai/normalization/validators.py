"""Field acceptance rules for normalized model output.

Every ``accept_*`` function returns the usable (possibly coerced) value, or
``None`` when the field must be filled from the rule-based fallback instead.
"""

import math
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from krishi_ai.normalization.keys import ABSENT, lookup_key

SUMMARY_MIN_LENGTH = 10


def accept_string(value: Any, min_length: int = 1) -> Optional[str]:
    if not isinstance(value, str):
        return None
    text = value.strip()
    if len(text) < min_length:
        return None
    return text


def accept_list(value: Any, min_length: int = 1) -> Optional[List[Any]]:
    if not isinstance(value, list) or len(value) < min_length:
        return None
    return value


def _populated(value: Any) -> bool:
    if value is ABSENT or value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def accept_record_list(
    value: Any, required_any: Sequence[Iterable[str]]
) -> Optional[List[Any]]:
    """A non-empty list whose first element has at least one expected sub-field set.

    ``required_any`` holds one variant tuple per sub-field, e.g.
    ``[("name", "Name"), ("dosage", "Dosage")]``.
    """
    records = accept_list(value)
    if records is None:
        return None
    first = records[0]
    if not isinstance(first, Mapping):
        return None
    if not any(_populated(lookup_key(first, variants)) for variants in required_any):
        return None
    return records


def accept_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def accept_choice(value: Any, choices: Iterable[str]) -> Optional[str]:
    if not isinstance(value, str):
        return None
    wanted = value.strip().lower()
    for choice in choices:
        if choice.lower() == wanted:
            return choice
    return None


def accept_string_list(value: Any, min_length: int = 1) -> Optional[List[str]]:
    """``accept_list`` for lists of prose items; blank and non-scalar items are dropped first."""
    items = accept_list(value)
    if items is None:
        return None
    texts = []
    for item in items:
        if isinstance(item, (str, int, float)) and not isinstance(item, bool):
            text = str(item).strip()
            if text:
                texts.append(text)
    if len(texts) < min_length:
        return None
    return texts
