"""Presentation helpers for the search page."""
from core.services.presentation.markup import format_markdown
from core.services.presentation.view_model import ElapsedTimer, SearchViewModel, run_search

__all__ = ["format_markdown", "ElapsedTimer", "SearchViewModel", "run_search"]
