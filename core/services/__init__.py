"""Core services package, organized by concern.

Main Services:
- QuizSearchService: answer a quiz question (search model, retries, verification)
- extraction: locate the JSON answer inside free-form model replies
- presentation: markup rendering and the search page view-model
- errors: exception types and user-facing fallback messages

Usage:
    from core.services import QuizSearchService
    from core.models.question import SearchMode

    service = QuizSearchService()
    answer = await service.answer("...", SearchMode.ACCURATE)
"""
from core.services.search import QuizSearchService, RetryController, RetryPolicy
from core.services.extraction import extract_json_string, parse_structured_answer
from core.services.presentation import format_markdown

__all__ = [
    "QuizSearchService",
    "RetryController",
    "RetryPolicy",
    "extract_json_string",
    "parse_structured_answer",
    "format_markdown",
]
