"""Request-scoped page state for the search page."""
import asyncio
import time
from dataclasses import dataclass, field
from typing import Optional

from markupsafe import Markup

from core.models.answer import StructuredAnswer
from core.models.question import SearchMode
from core.services.errors.error_handler import ErrorHandler
from core.services.presentation.markup import format_markdown
from core.services.search.search_service import QuizSearchService

MODE_LABELS = {
    SearchMode.FAST: "🚀 快速模式",
    SearchMode.ACCURATE: "🎯 精确模式",
}


class ElapsedTimer:
    """Ticks every ``interval`` seconds on the running loop until cancelled."""

    def __init__(self, interval: float = 0.1):
        self.interval = interval
        self.elapsed = 0.0
        self._started_at: Optional[float] = None
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        self.elapsed = 0.0
        self._started_at = time.monotonic()
        self._schedule()

    def _schedule(self) -> None:
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.interval, self._tick)

    def _tick(self) -> None:
        self.elapsed = time.monotonic() - self._started_at
        self._schedule()

    def cancel(self) -> float:
        """Stop ticking and return the final elapsed time in seconds."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self._started_at is not None:
            self.elapsed = time.monotonic() - self._started_at
        return self.elapsed


@dataclass
class SearchViewModel:
    """Everything the page needs to render one search."""
    question: str = ""
    mode: SearchMode = SearchMode.FAST
    is_loading: bool = False
    error: Optional[str] = None
    result: Optional[StructuredAnswer] = None
    elapsed: float = 0.0
    timer: ElapsedTimer = field(default_factory=ElapsedTimer, repr=False)

    @property
    def mode_label(self) -> str:
        return MODE_LABELS[self.mode]

    @property
    def supporting_html(self) -> Markup:
        return format_markdown(self.result.supporting_text if self.result else None)

    @property
    def source_html(self) -> Markup:
        return format_markdown(self.result.source if self.result else None)


async def run_search(view_model: SearchViewModel, service: QuizSearchService) -> SearchViewModel:
    """Run one search, keeping loading flag, timer and outcome on the view-model."""
    view_model.is_loading = True
    view_model.error = None
    view_model.result = None
    view_model.timer.start()
    try:
        view_model.result = await service.answer(view_model.question, view_model.mode)
    except Exception as e:
        view_model.error = ErrorHandler.handle_search_error(e, view_model.question)
    finally:
        view_model.elapsed = view_model.timer.cancel()
        view_model.is_loading = False
    return view_model
