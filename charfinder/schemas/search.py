"""Search API schemas."""

from typing import Literal

from pydantic import BaseModel, Field

from charfinder.application.dtos.search import SearchOutcome


class CharNameResponse(BaseModel):
    """Single matched character: code point and canonical name."""

    char: int = Field(..., ge=0, description="Unicode code point")
    name: str = Field(..., min_length=1)


class SearchResponse(BaseModel):
    """Search result body; charNames is null on error."""

    status: Literal["success", "error"]
    message: str
    charNames: list[CharNameResponse] | None = None

    @classmethod
    def from_outcome(cls, outcome: SearchOutcome) -> "SearchResponse":
        return cls.model_validate(outcome.to_dict())
