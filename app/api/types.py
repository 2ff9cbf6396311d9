"""
API request and response schemas.
What it defines:
- Input payloads
- Response formats
- Validation rules

And, the main purpose:
Ensure structured communication between client and server.
"""


from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Category(str, Enum):
    GENERAL = "General"
    DESIGN = "Design"
    WRITING = "Writing"
    MARKETING = "Marketing"
    PRODUCTIVITY = "Productivity"
    DEVELOPMENT = "Development"
    DATA_ANALYSIS = "Data Analysis"


DEFAULT_CATEGORY = Category.GENERAL


class GenerateRequest(BaseModel):
    description: str = Field(..., description="Free-text project description")
    category: Category = DEFAULT_CATEGORY

    @field_validator("description")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("description must not be empty")
        return v


class ErrorResponse(BaseModel):
    error: str
