"""Answer response models."""
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class StructuredAnswer(BaseModel):
    """Structured answer extracted from a model reply."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    answer: str
    supporting_text: str  # Source excerpt, answer span wrapped in **...**
    source: str           # Markdown link: [label](url)

    @field_validator("answer", mode="before")
    @classmethod
    def join_multiple_choices(cls, value: Any) -> Any:
        """Multi-select questions may come back as ["A", "C"]."""
        if isinstance(value, (list, tuple)):
            return ", ".join(str(item) for item in value)
        return value
