from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel

from string_analyzer.models import StringRecord


class FilterSet(BaseModel):
    """
    Structured query constraints shared by the query-parameter and
    natural-language filters. A field left as None does not constrain.
    """

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def applied(self) -> Dict[str, Any]:
        """Only the filters that were actually set"""
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.applied()


def matches(record: StringRecord, filters: FilterSet) -> bool:
    """Check if a record satisfies every filter that is set"""
    props = record.properties

    if filters.is_palindrome is not None and props.is_palindrome != filters.is_palindrome:
        return False

    if filters.min_length is not None and props.length < filters.min_length:
        return False

    if filters.max_length is not None and props.length > filters.max_length:
        return False

    if filters.word_count is not None and props.word_count != filters.word_count:
        return False

    if filters.contains_character is not None:
        # Checked against the original value, not the frequency map
        if filters.contains_character.lower() not in record.value.lower():
            return False

    return True


def apply_filters(records: Iterable[StringRecord], filters: FilterSet) -> List[StringRecord]:
    return [record for record in records if matches(record, filters)]
