import hashlib
import re
from collections import Counter
from typing import Dict

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    # Lone surrogates are hashed as their raw code units instead of failing
    return hashlib.sha256(text.encode("utf-8", errors="surrogatepass")).hexdigest()


def normalize_for_palindrome(text: str) -> str:
    """Drop everything except ASCII letters and digits, then lower-case."""
    return _NON_ALPHANUMERIC.sub("", text).lower()


def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, ignoring punctuation and spaces)"""
    cleaned = normalize_for_palindrome(text)
    return cleaned == cleaned[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count words separated by whitespace"""
    return len(text.split())


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))


def analyze_string(value: str) -> Dict:
    """Analyze a string and return all computed properties"""
    return {
        "length": len(value),
        "is_palindrome": is_palindrome(value),
        "unique_characters": count_unique_characters(value),
        "word_count": count_words(value),
        "sha256_hash": compute_sha256(value),
        "character_frequency_map": get_character_frequency(value),
    }
