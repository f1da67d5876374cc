import pytest

from phrasetranslate.classes import Category, FormatSlot
from phrasetranslate.errors import ArgumentRangeError, FormatError, KeyNotFoundError
from phrasetranslate.interpolation import format_phrase
from phrasetranslate.parser import parse_slots


def category(phrase: str) -> Category:
    return Category(phrase, parse_slots(phrase))


@pytest.fixture
def categories():
    return {
        "greet": category("Hello {0:t}!"),
        "world": category("World"),
        "player.joined": category("{0} joined the {1:team.name}"),
        "team.name": category("team {0}"),
        "pair": category("{1} before {0}"),
        "gap": category("only {2}"),
        "bad": Category("bad {0:x}", [FormatSlot(0, "x")]),
    }


def test_template_without_markers_is_unchanged(categories):
    assert format_phrase("plain text", categories, []) == "plain text"
    assert format_phrase("", categories, []) == ""


def test_literal_escape_consumes_nothing(categories):
    assert format_phrase("100%%", categories, []) == "100%"
    assert format_phrase("%% %s", categories, ["a"]) == "% a"


def test_argument_directives_are_aliases(categories):
    assert format_phrase("%s %S %n %N", categories, [1, "b", 3.5, None]) == "1 b 3.5 None"


def test_argument_exhaustion(categories):
    with pytest.raises(ArgumentRangeError) as excinfo:
        format_phrase("%s", categories, [])
    assert excinfo.value.index == 0


def test_unknown_key():
    with pytest.raises(KeyNotFoundError) as excinfo:
        format_phrase("%t", {}, ["missing.key"])
    assert excinfo.value.key == "missing.key"


def test_unknown_directive(categories):
    with pytest.raises(FormatError):
        format_phrase("%x", categories, ["a"])


def test_dangling_escape(categories):
    with pytest.raises(FormatError):
        format_phrase("50%", categories, [])


def test_translate_plain_phrase(categories):
    assert format_phrase("<%T>", categories, ["world"]) == "<World>"


def test_nested_translation(categories):
    assert format_phrase("%t", categories, ["greet", "world"]) == "Hello World!"


def test_nested_translation_shares_argument_order(categories):
    result = format_phrase("%t / %s", categories, ["greet", "world", "tail"])
    assert result == "Hello World! / tail"


def test_literal_category_reference(categories):
    result = format_phrase("%t", categories, ["player.joined", "Bob", "red"])
    assert result == "Bob joined the team red"


def test_slots_consume_in_index_order(categories):
    assert format_phrase("%t", categories, ["pair", "a", "b"]) == "b before a"


def test_missing_slot_indices_are_skipped(categories):
    assert format_phrase("%t", categories, ["gap", "x"]) == "only x"


def test_nested_missing_key(categories):
    with pytest.raises(KeyNotFoundError):
        format_phrase("%t", categories, ["greet", "nobody"])


def test_nested_argument_exhaustion(categories):
    with pytest.raises(ArgumentRangeError):
        format_phrase("%t", categories, ["greet"])


def test_invalid_single_character_slot(categories):
    with pytest.raises(FormatError):
        format_phrase("%t", categories, ["bad", "a"])


def test_format_is_deterministic(categories):
    args = ["player.joined", "Ann", "blue"]
    assert format_phrase("%t", categories, args) == format_phrase("%t", categories, args)


def test_self_reference_is_rejected():
    categories = {"loop": category("x {0:loop}")}
    with pytest.raises(FormatError, match="Circular reference"):
        format_phrase("%t", categories, ["loop"])


def test_reference_cycle_is_rejected():
    categories = {"a": category("a {0:b}"), "b": category("b {0:a}")}
    with pytest.raises(FormatError, match="Circular reference"):
        format_phrase("%t", categories, ["a"])


def test_translation_argument_cycle_is_rejected(categories):
    with pytest.raises(FormatError, match="Circular reference"):
        format_phrase("%t", categories, ["greet", "greet"])


def test_repeated_reference_without_cycle(categories):
    categories["both"] = category("{0:world} and {1:world}")
    assert format_phrase("%t", categories, ["both"]) == "World and World"


def test_inserted_text_is_not_rescanned(categories):
    categories["and"] = category("{0} and {1}")
    assert format_phrase("%t", categories, ["and", "{1}", "b"]) == "{1} and b"


def test_nested_phrase_text_is_not_rescanned(categories):
    categories["literal"] = Category("{1}", [])
    categories["outer"] = category("{0:literal} / {1}")
    assert format_phrase("%t", categories, ["outer", "y"]) == "{1} / y"
