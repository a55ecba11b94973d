import pytest

from string_analyzer.exceptions import Unparseable
from string_analyzer.filters import apply_filters, matches
from string_analyzer.models import StringRecord
from string_analyzer.services.nl_query import parse_natural_language_query


@pytest.mark.parametrize(
    "query, expected",
    [
        ("all single word palindromic strings", {"is_palindrome": True, "word_count": 1}),
        ("strings longer than 5", {"min_length": 6}),
        ("strings shorter than 5", {"max_length": 4}),
        ("strings containing the letter z", {"contains_character": "z"}),
        ("strings that contain character q", {"contains_character": "q"}),
        ("words that contains the letter x", {"contains_character": "x"}),
        ("strings shorter than 0", {"max_length": -1}),
        ("two word strings", {"word_count": 2}),
        (
            "palindromic strings that contain the first vowel",
            {"is_palindrome": True, "contains_character": "a"},
        ),
        ("Strings LONGER THAN 10 Characters", {"min_length": 11}),
        ("Palindromes", {"is_palindrome": True}),
    ],
)
def test_parse_natural_language_query(query, expected):
    assert parse_natural_language_query(query).applied() == expected


def test_single_word_takes_priority_over_two_word():
    assert parse_natural_language_query("single word or two words").word_count == 1


def test_first_vowel_overrides_explicit_letter():
    filters = parse_natural_language_query("strings containing the letter z and the first vowel")
    assert filters.contains_character == "a"


@pytest.mark.parametrize("query", ["banana", "", "show me everything", "words longer than ten"])
def test_unrecognised_query_is_unparseable(query):
    with pytest.raises(Unparseable):
        parse_natural_language_query(query)


def test_successful_parse_never_empty():
    assert not parse_natural_language_query("palindrome").is_empty()


def test_shorter_than_zero_matches_nothing():
    filters = parse_natural_language_query("strings shorter than 0")
    assert not matches(StringRecord.from_value("a"), filters)


def test_contradictory_length_bounds_are_kept():
    filters = parse_natural_language_query("strings longer than 5 and shorter than 6")
    assert filters.applied() == {"min_length": 6, "max_length": 5}
    records = [StringRecord.from_value(v) for v in ("hello", "banana", "racecar")]
    assert apply_filters(records, filters) == []
