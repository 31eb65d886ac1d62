"""Question data models."""
from enum import Enum
from pydantic import BaseModel


class SearchMode(str, Enum):
    """How much work to spend on a question."""
    FAST = "fast"          # first parsed answer is returned as-is
    ACCURATE = "accurate"  # answer is re-checked by the verification model


class SearchRequest(BaseModel):
    """Search request model."""
    question: str
    mode: SearchMode = SearchMode.FAST
