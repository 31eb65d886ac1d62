"""Quiz answer search: acquire, extract, retry, optionally verify."""
from typing import Optional

from core.models.answer import StructuredAnswer
from core.models.question import SearchMode
from core.services.errors.exceptions import VerificationError
from core.services.extraction.json_extractor import extract_json_string, parse_structured_answer
from core.services.search.model_clients import SearchModelClient, VerificationModelClient
from core.services.search.retry_controller import RetryController, RetryPolicy, SleepFunc
from core.utils.logger import logger


class QuizSearchService:
    """Answers one quiz question per call; holds no state between calls."""

    def __init__(
        self,
        search_client: Optional[SearchModelClient] = None,
        verification_client: Optional[VerificationModelClient] = None,
        retry_policy: Optional[RetryPolicy] = None,
        sleep: Optional[SleepFunc] = None
    ):
        self.search_client = search_client or SearchModelClient()
        self.verification_client = verification_client or VerificationModelClient()
        controller_kwargs = {"sleep": sleep} if sleep is not None else {}
        self.retry_controller = RetryController(
            self.search_client.get_answer,
            policy=retry_policy,
            **controller_kwargs
        )

    async def answer(self, question: str, mode: SearchMode = SearchMode.FAST) -> StructuredAnswer:
        """
        Answer a quiz question.

        Args:
            question: Full question text (type, stem and options)
            mode: FAST returns the first parsed answer; ACCURATE re-checks it
                with the verification model

        Returns:
            StructuredAnswer with answer, supporting_text and source

        Raises:
            RetryExhaustedError: if no answer could be acquired
            VerificationError: if the verification reply held no JSON object
            MalformedAnswerError: if an extracted object is not a valid answer
        """
        candidate = await self.retry_controller.run(question)

        if mode == SearchMode.FAST:
            return parse_structured_answer(candidate)

        return await self.verify(question, candidate)

    async def verify(self, question: str, candidate: str) -> StructuredAnswer:
        """Run the single verification pass; extraction misses here are not retried."""
        logger.info("Verifying candidate answer")
        raw_reply = await self.verification_client.verify(question, candidate)
        logger.debug(f"Verification reply: {raw_reply}")

        json_string = extract_json_string(raw_reply)
        if json_string is None:
            raise VerificationError("Verification reply contained no JSON answer")
        return parse_structured_answer(json_string)
