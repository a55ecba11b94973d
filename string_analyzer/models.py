from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict

from string_analyzer.utils import analyze_string


@dataclass(frozen=True)
class StringProperties:
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class StringRecord:
    """A stored string and its derived properties. Immutable once created."""

    id: str  # SHA-256 hash of value
    value: str
    properties: StringProperties
    created_at: datetime

    @classmethod
    def from_value(cls, value: str) -> "StringRecord":
        properties = StringProperties(**analyze_string(value))
        return cls(
            id=properties.sha256_hash,
            value=value,
            properties=properties,
            created_at=datetime.now(timezone.utc),
        )
