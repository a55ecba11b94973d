import logging
from typing import List, Tuple

from string_analyzer.exceptions import Conflict, InvalidInput
from string_analyzer.filters import FilterSet, apply_filters
from string_analyzer.models import StringRecord
from string_analyzer.services.nl_query import parse_natural_language_query
from string_analyzer.store import RecordStore

logger = logging.getLogger(__name__)


def create_string(store: RecordStore, value: str) -> StringRecord:
    """Analyze a string and store it. Raises Conflict if it already exists"""
    if not value:
        raise InvalidInput("Missing 'value' field")

    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidInput("'value' must be valid Unicode text")

    # Skip the analysis for values we already hold; insert() re-checks under the write lock
    if value in store:
        logger.info("Rejected duplicate string")
        raise Conflict()

    return store.insert(StringRecord.from_value(value))


def get_string(store: RecordStore, value: str) -> StringRecord:
    """Get string analysis by value"""
    return store.get(value)


def get_all_strings(store: RecordStore, filters: FilterSet) -> List[StringRecord]:
    """Get all strings with optional filters"""
    return apply_filters(store.list(), filters)


def filter_by_natural_language(store: RecordStore, query: str) -> Tuple[List[StringRecord], FilterSet]:
    """Translate a free-text query and return the matching strings with the filters used"""
    if not query or not query.strip():
        raise InvalidInput("Missing 'query' parameter")

    filters = parse_natural_language_query(query)
    return apply_filters(store.list(), filters), filters


def delete_string(store: RecordStore, value: str) -> None:
    """Delete string analysis by value"""
    store.delete(value)
