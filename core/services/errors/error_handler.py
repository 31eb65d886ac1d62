"""Error handling utilities."""
from core.services.errors.exceptions import QuizSearchError
from core.services.errors.fallback_responses import FallbackResponses
from core.utils.logger import logger


class ErrorHandler:
    """Centralized conversion of pipeline errors into user-facing messages."""

    @staticmethod
    def handle_search_error(error: Exception, question: str = "") -> str:
        """Log a failed search and return the message shown to the user."""
        language = FallbackResponses.detect_language(question)
        if isinstance(error, QuizSearchError):
            logger.error(f"Search failed ({error.error_type}): {str(error)}")
            return FallbackResponses.get_response(error.error_type, language)

        logger.error(f"Unexpected search error: {type(error).__name__}: {str(error)}", exc_info=True)
        return FallbackResponses.get_response("search_error", language)

    @staticmethod
    def handle_method_not_allowed(method: str) -> str:
        """Handle a request made with anything other than POST."""
        logger.warning(f"Rejected {method} request to search endpoint")
        return FallbackResponses.get_response("method_not_allowed", "english")
