from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List
from datetime import datetime


class StringCreate(BaseModel):
    value: str = Field(..., description="String to analyze")


class StringProperties(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    value: str
    properties: StringProperties
    created_at: datetime


class StringListResponse(BaseModel):
    data: List[StringResponse]
    count: int
    filters_applied: Dict[str, Any] = Field(default_factory=dict)


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringResponse]
    count: int
    interpreted_query: InterpretedQuery


class HealthResponse(BaseModel):
    status: str
    total_strings: int
    timestamp: datetime
