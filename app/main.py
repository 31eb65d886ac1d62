"""Main FastAPI application entry point."""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import settings
from app.routes import search, web
from core.models.response import ErrorResponse
from core.utils.logger import logger

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    debug=settings.DEBUG
)


@app.on_event("startup")
async def startup_event():
    """Log configuration on startup."""
    logger.info("Quiz Answer Search Starting...")
    logger.info(f"Search model ({settings.KIMI_MODEL}): {'Configured' if settings.KIMI_BASE_URL and settings.KIMI_API_KEY else 'Not Configured'}")
    logger.info(f"Verification model ({settings.OPENAI_MODEL}): {'Configured' if settings.OPENAI_BASE_URL and settings.OPENAI_API_KEY else 'Not Configured'}")
    logger.info(f"Retry policy: max_retries={settings.MAX_RETRIES}, retry_delay={settings.RETRY_DELAY_MS}ms")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies in the same {"error": ...} shape as other failures."""
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', []))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(error=f"Invalid request: {details}").model_dump()
    )


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(search.router, prefix="/api", tags=["Search"])
app.include_router(web.router, tags=["Web"])


@app.get("/api/info")
async def info():
    """Service metadata."""
    return {
        "message": "Quiz Answer Search API",
        "version": settings.API_VERSION,
        "status": "running",
        "endpoints": {
            "search": "POST /api/search",
            "page": "GET /",
            "health": "/health"
        }
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
