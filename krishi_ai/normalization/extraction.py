"""Pull a JSON value out of free-form model output.

Models asked for "JSON only" still wrap answers in markdown fences, lead with
prose, or leave trailing commas. ``extract_json`` tries, in order:

1. the body of the first fenced code block (optionally tagged ``json``);
2. a bracket-balanced ``[...]`` slice, when the first ``[`` comes before any ``{``;
3. a brace-balanced ``{...}`` slice, retried once with trailing commas removed.
4. the ``[...]`` slice after all, when a ``{`` in prose came first and did
   not parse.

Failing every step is an ordinary outcome and yields ``None``.

Known limitation: the balance scan counts every bracket character, including
ones inside JSON string literals, so a value such as ``"see [note]"`` can
shift the detected end of the slice.
"""

import json
import logging
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?\s*\n?([\s\S]*?)\n?```")
_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")

_NOT_PARSED = object()


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, ValueError, RecursionError):
        # RecursionError: nesting deeper than the decoder stack.
        return _NOT_PARSED


def _balanced_end(text: str, start: int, opener: str, closer: str) -> Optional[int]:
    """Index just past the closer matching ``text[start]``, or None if unbalanced."""
    depth = 0
    for i in range(start, len(text)):
        ch = text[i]
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return i + 1
    return None


def strip_trailing_commas(text: str) -> str:
    return _TRAILING_COMMA_RE.sub(r"\1", text)


def _array_slice(text: str, start: int) -> Any:
    end = _balanced_end(text, start, "[", "]")
    if end is None:
        return _NOT_PARSED
    return _loads(text[start:end])


def _object_slice(text: str, start: int) -> Any:
    end = _balanced_end(text, start, "{", "}")
    if end is None:
        return _NOT_PARSED
    candidate = text[start:end]
    parsed = _loads(candidate)
    if parsed is _NOT_PARSED:
        parsed = _loads(strip_trailing_commas(candidate))
    return parsed


def extract_json(raw: object) -> Optional[Any]:
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    if not text:
        return None

    fence = _FENCE_RE.search(text)
    if fence and fence.group(1).strip():
        parsed = _loads(fence.group(1).strip())
        if parsed is not _NOT_PARSED:
            return parsed

    obj_start = text.find("{")
    arr_start = text.find("[")
    array_first = arr_start != -1 and (obj_start == -1 or arr_start < obj_start)

    if array_first:
        parsed = _array_slice(text, arr_start)
        if parsed is not _NOT_PARSED:
            return parsed

    if obj_start != -1:
        parsed = _object_slice(text, obj_start)
        if parsed is not _NOT_PARSED:
            return parsed

    # A stray brace in prose ahead of the real array.
    if arr_start != -1 and not array_first:
        parsed = _array_slice(text, arr_start)
        if parsed is not _NOT_PARSED:
            return parsed

    logger.debug("No JSON value found in model output (length=%d)", len(text))
    return None
