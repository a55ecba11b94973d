import pytest

from string_analyzer.filters import FilterSet, apply_filters, matches
from string_analyzer.models import StringRecord

VALUES = ["racecar", "hello world", "A man a plan a canal Panama", "noon", "level up", "abc"]


@pytest.fixture
def records():
    return [StringRecord.from_value(v) for v in VALUES]


def values(records):
    return sorted(r.value for r in records)


def test_empty_filter_set_matches_everything(records):
    assert all(matches(r, FilterSet()) for r in records)
    assert FilterSet().is_empty()


def test_palindrome_filter(records):
    assert values(apply_filters(records, FilterSet(is_palindrome=True))) == sorted(
        ["racecar", "A man a plan a canal Panama", "noon"]
    )
    assert values(apply_filters(records, FilterSet(is_palindrome=False))) == sorted(
        ["hello world", "level up", "abc"]
    )


def test_length_bounds_are_inclusive(records):
    result = apply_filters(records, FilterSet(min_length=4, max_length=8))
    assert values(result) == sorted(["racecar", "noon", "level up"])


def test_word_count_is_exact(records):
    assert values(apply_filters(records, FilterSet(word_count=2))) == sorted(["hello world", "level up"])


def test_contains_character_is_case_insensitive(records):
    result = apply_filters(records, FilterSet(contains_character="A"))
    assert values(result) == sorted(["racecar", "A man a plan a canal Panama", "abc"])


def test_filters_combine_with_and(records):
    result = apply_filters(records, FilterSet(is_palindrome=True, word_count=1, contains_character="o"))
    assert values(result) == ["noon"]


def test_contains_character_uses_original_value():
    record = StringRecord.from_value("a.b")
    assert matches(record, FilterSet(contains_character="."))


def test_applied_only_reports_set_fields():
    assert FilterSet(min_length=0, is_palindrome=False).applied() == {
        "is_palindrome": False,
        "min_length": 0,
    }
