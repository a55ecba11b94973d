from fastapi import APIRouter, Depends, Query, Response, status
from typing import Optional
from datetime import datetime, timezone
import logging

from string_analyzer import crud
from string_analyzer.filters import FilterSet
from string_analyzer.schemas import (
    HealthResponse,
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
    StringResponse,
)
from string_analyzer.store import RecordStore, get_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringResponse, status_code=status.HTTP_201_CREATED)
def create_string(string_data: StringCreate, store: RecordStore = Depends(get_store)):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    record = crud.create_string(store, string_data.value)
    return StringResponse.model_validate(record)


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: str = Query(..., description="Natural language query"),
    store: RecordStore = Depends(get_store),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    records, filters = crud.filter_by_natural_language(store, query)
    data = [StringResponse.model_validate(r) for r in records]

    return NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query=InterpretedQuery(original=query, parsed_filters=filters.applied()),
    )


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(
    is_palindrome: Optional[bool] = Query(None),
    min_length: Optional[int] = Query(None, ge=0),
    max_length: Optional[int] = Query(None, ge=0),
    word_count: Optional[int] = Query(None, ge=0),
    contains_character: Optional[str] = Query(None, min_length=1, max_length=1),
    store: RecordStore = Depends(get_store),
):
    """
    Get all strings with optional filtering.
    """
    filters = FilterSet(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
    records = crud.get_all_strings(store, filters)
    data = [StringResponse.model_validate(r) for r in records]

    return StringListResponse(data=data, count=len(data), filters_applied=filters.applied())


@router.get("/strings/{string_value}", response_model=StringResponse)
def get_string(string_value: str, store: RecordStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return StringResponse.model_validate(crud.get_string(store, string_value))


@router.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: RecordStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    crud.delete_string(store, string_value)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/health", response_model=HealthResponse)
def health_check(store: RecordStore = Depends(get_store)):
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        total_strings=len(store),
        timestamp=datetime.now(timezone.utc),
    )
