from krishi_ai.normalization.keys import ABSENT, FieldSpec, lookup_key, normalize_keys

SPECS = (
    FieldSpec("organic_matter", ("organicMatter", "organic_matter")),
    FieldSpec("ph", ("pH", "ph")),
)


def test_exact_match_wins():
    assert lookup_key({"pH": 6.5, "ph": 7.0}, ("pH", "ph")) == 6.5


def test_case_insensitive_match():
    assert lookup_key({"PH": 6.1}, ("pH",)) == 6.1


def test_underscore_squashed_match():
    assert lookup_key({"Organic_Matter": 1.2}, ("organicMatter",)) == 1.2


def test_none_value_is_unmatched():
    assert lookup_key({"pH": None, "ph": 5.5}, ("pH", "ph")) == 5.5
    assert lookup_key({"pH": None}, ("pH",)) is ABSENT


def test_non_mapping_input():
    assert lookup_key(["pH"], ("pH",)) is ABSENT
    assert normalize_keys("text", SPECS) == {"organic_matter": ABSENT, "ph": ABSENT}


def test_normalize_keys_uses_canonical_names():
    fields = normalize_keys({"organic_matter": 2.0, "Ph": 7}, SPECS)
    assert fields == {"organic_matter": 2.0, "ph": 7}


def test_absent_is_falsy_singleton():
    assert not ABSENT
    assert type(ABSENT)() is ABSENT
