"""Response data models."""
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str
