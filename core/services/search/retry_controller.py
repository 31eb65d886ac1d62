"""Bounded retry loop around answer acquisition and extraction."""
import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from app.config import settings
from core.services.errors.exceptions import AcquisitionFailedError, NoAnswerFoundError
from core.services.extraction.json_extractor import extract_json_string
from core.utils.logger import logger

SleepFunc = Callable[[float], Awaitable[None]]
AcquireFunc = Callable[[str], Awaitable[str]]


@dataclass
class RetryPolicy:
    """How many attempts to make and how long to wait between them."""
    max_retries: int = 2
    retry_delay_ms: int = 1000

    @classmethod
    def from_settings(cls) -> "RetryPolicy":
        return cls(max_retries=settings.MAX_RETRIES, retry_delay_ms=settings.RETRY_DELAY_MS)

    @property
    def retry_delay_seconds(self) -> float:
        return self.retry_delay_ms / 1000.0


class RetryController:
    """
    Repeats acquisition + extraction until a JSON object is found.

    Both a model call error and a reply without JSON cost one attempt and are
    followed by the same fixed delay. After ``max_retries`` attempts the
    controller raises AcquisitionFailedError or NoAnswerFoundError depending
    on how the last attempt failed.
    """

    def __init__(
        self,
        acquire: AcquireFunc,
        policy: Optional[RetryPolicy] = None,
        sleep: SleepFunc = asyncio.sleep
    ):
        self.acquire = acquire
        self.policy = policy or RetryPolicy.from_settings()
        self.sleep = sleep

    async def run(self, question: str) -> str:
        """
        Acquire an answer for the question.

        Returns:
            The extracted JSON object text

        Raises:
            AcquisitionFailedError: if the last attempt raised
            NoAnswerFoundError: if the last attempt returned no JSON object
        """
        max_retries = max(1, self.policy.max_retries)

        for attempt in range(1, max_retries + 1):
            logger.info(f"Fetching answer - attempt {attempt}/{max_retries}")
            try:
                raw_answer = await self.acquire(question)
            except Exception as e:
                logger.error(f"Attempt {attempt} failed: {type(e).__name__}: {str(e)}")
                if attempt >= max_retries:
                    raise AcquisitionFailedError(
                        f"Failed to get an answer after {attempt} attempts",
                        attempts=attempt,
                        last_error=e
                    ) from e
                await self.sleep(self.policy.retry_delay_seconds)
                continue

            logger.debug(f"Raw answer: {raw_answer}")
            json_string = extract_json_string(raw_answer)
            if json_string is not None:
                return json_string

            logger.warning(f"Attempt {attempt} returned no usable answer")
            if attempt < max_retries:
                await self.sleep(self.policy.retry_delay_seconds)

        raise NoAnswerFoundError(
            f"No valid answer after {max_retries} attempts",
            attempts=max_retries
        )
