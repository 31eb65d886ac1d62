"""Search page: a form posting back to itself and a result panel."""
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from core.models.question import SearchMode
from core.services.presentation.view_model import SearchViewModel, run_search
from core.services.search.search_service import QuizSearchService
from app.routes.search import get_search_service

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Render the empty search page."""
    return templates.TemplateResponse(request, "index.html", {"vm": SearchViewModel()})


@router.post("/", response_class=HTMLResponse)
async def submit(
    request: Request,
    question: str = Form(""),
    mode: SearchMode = Form(SearchMode.FAST),
    service: QuizSearchService = Depends(get_search_service)
):
    """Run a search from the page form and render the outcome."""
    view_model = SearchViewModel(question=question, mode=mode)
    await run_search(view_model, service)
    return templates.TemplateResponse(request, "index.html", {"vm": view_model})
