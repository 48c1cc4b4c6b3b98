from typing import List

from pydantic import BaseModel, Field


# --- Request Schema ---
class GenerateSqlRequest(BaseModel):
    api_key: str = Field("", description="Gemini API key; used for this request only")
    db_schema: str = Field("", alias="schema", description="Database schema (DDL)")
    question: str = Field("", description="Natural language question")

    model_config = {"populate_by_name": True}


# --- Response Schemas ---
class GeneratedSqlResponse(BaseModel):
    sql: str
    explanation: str


class ErrorResponse(BaseModel):
    detail: str


class DefaultsResponse(BaseModel):
    schema_text: str = Field(..., serialization_alias="schema")
    examples: List[str]
