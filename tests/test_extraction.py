from krishi_ai.normalization.extraction import extract_json, strip_trailing_commas


def test_plain_object():
    assert extract_json('{"a": 1}') == {"a": 1}


def test_fenced_json_block():
    raw = 'Here you go:\n```json\n{"summary": "ok"}\n```\nThanks'
    assert extract_json(raw) == {"summary": "ok"}


def test_untagged_fence():
    assert extract_json("```\n[1, 2]\n```") == [1, 2]


def test_object_wrapped_in_prose():
    raw = 'Sure! {"status": "GENUINE", "confidence": 80} Hope this helps.'
    assert extract_json(raw) == {"status": "GENUINE", "confidence": 80}


def test_array_wrapped_in_prose():
    raw = 'Alerts: [{"type": "RAIN"}] end'
    assert extract_json(raw) == [{"type": "RAIN"}]


def test_object_containing_arrays_is_returned_whole():
    raw = 'Result: {"crops": ["wheat", "paddy"], "n": 2}'
    assert extract_json(raw) == {"crops": ["wheat", "paddy"], "n": 2}


def test_trailing_commas_are_repaired():
    raw = 'text {"a": [1, 2,], "b": 3,} text'
    assert extract_json(raw) == {"a": [1, 2], "b": 3}


def test_broken_fence_falls_through_to_scan():
    raw = '```json\nnot json\n``` but {"ok": true}'
    assert extract_json(raw) == {"ok": True}


def test_nothing_to_extract():
    assert extract_json("no json here") is None
    assert extract_json("") is None
    assert extract_json("   \n ") is None
    assert extract_json(None) is None
    assert extract_json(42) is None


def test_unbalanced_object():
    assert extract_json('{"a": {"b": 1}') is None


def test_empty_array_is_a_value():
    assert extract_json("[]") == []


def test_extraction_is_idempotent_on_clean_json():
    raw = '{"summary": "Soil is fine", "warnings": []}'
    first = extract_json(raw)
    assert extract_json('{"summary": "Soil is fine", "warnings": []}') == first


def test_brackets_inside_strings_can_misalign_the_scan():
    # A closing brace inside a string ends the slice early; repair cannot save it.
    raw = 'Answer: {"note": "see }", "x": 1}'
    assert extract_json(raw) is None


def test_strip_trailing_commas():
    assert strip_trailing_commas('{"a": 1, }') == '{"a": 1 }'


def test_deeply_nested_input_is_not_parsed():
    assert extract_json("[" * 100000 + "]" * 100000) is None
    assert extract_json('{"a": ' * 100000 + "1" + "}" * 100000) is None


def test_array_after_prose_brace():
    raw = 'Alerts for {Pune}: [{"type": "RAIN", "severity": "HIGH"}]'
    assert extract_json(raw) == [{"type": "RAIN", "severity": "HIGH"}]


def test_leading_object_still_wins_over_later_array():
    raw = 'Result: {"n": 1} and also [2, 3]'
    assert extract_json(raw) == {"n": 1}
