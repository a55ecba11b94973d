import logging
import re

from string_analyzer.exceptions import Unparseable
from string_analyzer.filters import FilterSet

logger = logging.getLogger(__name__)

LONGER_THAN = re.compile(r"longer than (\d+)")
SHORTER_THAN = re.compile(r"shorter than (\d+)")
CONTAINS_LETTER = re.compile(r"contain(?:s|ing)? (?:the )?(?:letter|character) ([a-z])")


def parse_natural_language_query(query: str) -> FilterSet:
    """
    Parse natural language query into filter parameters
    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}
    - "palindromic strings that contain the first vowel" -> {is_palindrome: true, contains_character: "a"}

    Raises Unparseable when no known pattern is present.
    """
    text = query.lower()
    filters = FilterSet()

    # Check for palindrome
    if "palindrom" in text:
        filters.is_palindrome = True

    # Check for word count; "single word" wins over "two word"
    if "single word" in text:
        filters.word_count = 1
    elif "two word" in text:
        filters.word_count = 2

    # "longer than X" is strict, so the inclusive bound is X + 1
    length_match = LONGER_THAN.search(text)
    if length_match:
        filters.min_length = int(length_match.group(1)) + 1

    length_match = SHORTER_THAN.search(text)
    if length_match:
        filters.max_length = int(length_match.group(1)) - 1

    letter_match = CONTAINS_LETTER.search(text)
    if letter_match:
        filters.contains_character = letter_match.group(1)

    # Heuristic: "first vowel" always means 'a'
    if "first vowel" in text:
        filters.contains_character = "a"

    if filters.is_empty():
        logger.debug(f"No filters recognised in query: {query!r}")
        raise Unparseable()

    logger.debug(f"Parsed {query!r} -> {filters.applied()}")
    return filters
