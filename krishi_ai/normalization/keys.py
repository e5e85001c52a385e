from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Tuple


class _Absent:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


@dataclass(frozen=True)
class FieldSpec:
    """A canonical field name and the spellings a model may use for it, in priority order."""

    name: str
    variants: Tuple[str, ...]


def _squash(key: str) -> str:
    return key.replace("_", "").lower()


def lookup_key(mapping: Mapping[str, Any], variants: Iterable[str]) -> Any:
    if not isinstance(mapping, Mapping):
        return ABSENT
    keys = [key for key in mapping.keys() if isinstance(key, str)]
    for variant in variants:
        if mapping.get(variant) is not None:
            return mapping[variant]
        lowered = variant.lower()
        for key in keys:
            if key.lower() == lowered and mapping[key] is not None:
                return mapping[key]
        squashed = _squash(variant)
        for key in keys:
            if _squash(key) == squashed and mapping[key] is not None:
                return mapping[key]
    return ABSENT


def normalize_keys(value: Any, specs: Iterable[FieldSpec]) -> Dict[str, Any]:
    """Map ``value``'s keys onto canonical names; unmatched names map to ``ABSENT``."""
    return {spec.name: lookup_key(value, spec.variants) for spec in specs}
