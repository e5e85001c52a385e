import pytest

from krishi_ai.core.ids import CounterIdGenerator, uuid_id_generator
from krishi_ai.core.templates import format_number, get_label, load_template_table
from krishi_ai.models.language import Language, coerce_language

TABLES = (
    "soil_fallback",
    "verification_fallback",
    "advisory_fallback",
    "cost_savings",
    "crop_calendar_fallback",
)


def _leaves_with_languages(node, path=""):
    if hasattr(node, "keys"):
        if "en" in node:
            yield path, node
            return
        for key in node.keys():
            yield from _leaves_with_languages(node[key], f"{path}.{key}")
    elif isinstance(node, tuple):
        for index, item in enumerate(node):
            yield from _leaves_with_languages(item, f"{path}[{index}]")


@pytest.mark.parametrize("name", TABLES)
def test_tables_load_and_are_frozen(name):
    table = load_template_table(name)
    with pytest.raises(TypeError):
        table["extra"] = 1
    assert load_template_table(name) is table


@pytest.mark.parametrize("name", ("soil_fallback", "cost_savings"))
def test_four_language_tables_are_complete(name):
    for path, leaf in _leaves_with_languages(load_template_table(name)):
        assert {"hi", "mr", "gu", "en"} <= set(leaf.keys()), path


def test_get_label_falls_back_to_english():
    assert get_label(Language.TAMIL, "verification_fallback.not_available") == "N/A"
    assert get_label("hi", "verification_fallback.image.safety_check") == "सावधानी से संभालें।"


def test_get_label_unknown_key():
    with pytest.raises(KeyError):
        get_label(Language.ENGLISH, "verification_fallback.nope")


def test_coerce_language():
    assert coerce_language(" MR ") is Language.MARATHI
    assert coerce_language("xx") is Language.ENGLISH
    assert coerce_language(None) is Language.ENGLISH


def test_format_number():
    assert format_number(7.0) == "7"
    assert format_number(6.25) == "6.25"
    assert format_number(300) == "300"


def test_id_generators():
    counter = CounterIdGenerator("tip", start=5)
    assert [counter(), counter()] == ["tip-5", "tip-6"]
    assert uuid_id_generator() != uuid_id_generator()
