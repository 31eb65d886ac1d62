"""Exception types raised by the answer search pipeline."""
from typing import Optional


class QuizSearchError(Exception):
    """Base error for the search pipeline; error_type selects the fallback message."""
    error_type = "search_error"


class ModelNotConfiguredError(QuizSearchError):
    """A model client is missing its base URL or credentials."""
    error_type = "model_not_configured"


class RetryExhaustedError(QuizSearchError):
    """Answer acquisition ran out of attempts."""
    error_type = "retry_exhausted"
    reason = "exhausted"

    def __init__(self, message: str, attempts: int, last_error: Optional[Exception] = None):
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error


class AcquisitionFailedError(RetryExhaustedError):
    """Every remaining attempt ended in a model call error."""
    error_type = "acquisition_failed"
    reason = "call_errors"


class NoAnswerFoundError(RetryExhaustedError):
    """The model kept replying without an embedded JSON object."""
    error_type = "no_answer_found"
    reason = "empty_extraction"


class VerificationError(QuizSearchError):
    """The verification model's reply contained no JSON object."""
    error_type = "verification_error"


class MalformedAnswerError(QuizSearchError):
    """An extracted object is not valid JSON or not a structured answer."""
    error_type = "malformed_answer"
