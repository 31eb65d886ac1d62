"""Quiz answer search services.

- QuizSearchService: end-to-end answer for one question
- RetryController / RetryPolicy: bounded acquisition retries
- SearchModelClient / VerificationModelClient: model calls
"""
from core.services.search.model_clients import SearchModelClient, VerificationModelClient
from core.services.search.retry_controller import RetryController, RetryPolicy
from core.services.search.search_service import QuizSearchService

__all__ = [
    "QuizSearchService",
    "RetryController",
    "RetryPolicy",
    "SearchModelClient",
    "VerificationModelClient",
]
