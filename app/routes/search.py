"""Quiz answer search endpoint."""
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from core.models.answer import StructuredAnswer
from core.models.question import SearchRequest
from core.models.response import ErrorResponse
from core.services.errors.error_handler import ErrorHandler
from core.services.search.search_service import QuizSearchService
from core.utils.logger import logger

router = APIRouter()


def get_search_service() -> QuizSearchService:
    """Build a fresh service, and fresh model clients, for every request."""
    return QuizSearchService()


@router.post(
    "/search",
    response_model=StructuredAnswer,
    responses={500: {"model": ErrorResponse}, 405: {"model": ErrorResponse}}
)
async def search(
    request: SearchRequest,
    service: QuizSearchService = Depends(get_search_service)
):
    """
    Answer a quiz question.

    Args:
        request: question text and mode ("fast" or "accurate")

    Returns:
        The structured answer, or {"error": ...} with status 500
    """
    logger.info(f"Search request (mode={request.mode.value}): {request.question[:100]}")
    try:
        return await service.answer(request.question, request.mode)
    except Exception as e:
        message = ErrorHandler.handle_search_error(e, request.question)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=message).model_dump()
        )


@router.api_route(
    "/search",
    methods=["GET", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    include_in_schema=False
)
async def search_method_not_allowed(request: Request):
    """Only POST is accepted."""
    message = ErrorHandler.handle_method_not_allowed(request.method)
    return JSONResponse(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        content=ErrorResponse(error=message).model_dump(),
        headers={"Allow": "POST"}
    )


@router.get("/health")
async def search_health():
    """Health check for the search service."""
    return {"status": "healthy", "service": "search"}
