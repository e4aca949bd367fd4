"""Question-related Pydantic models."""
from pydantic import BaseModel, Field


class QuestionOut(BaseModel):
    """Quiz item as sent to players."""

    word: str
    options: dict[str, str]
    answer: str
    year: int | str | None = None
    term: str = ""
    source: str = ""


class QuestionsResponse(BaseModel):
    """Question set for one play-through."""

    questions: list[QuestionOut]


class GenerationFailedResponse(BaseModel):
    """Returned when AI questions could not be produced."""

    questions: list[QuestionOut] = Field(default_factory=list)
    error: str
    details: str = ""


class ModeOut(BaseModel):
    """Play mode description."""

    id: str
    title: str
    limit: int | None
    generated: bool
