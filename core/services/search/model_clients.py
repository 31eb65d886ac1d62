"""Clients for the search model and the verification model."""
from typing import Any, Optional

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from app.config import settings
from core.services.errors.exceptions import ModelNotConfiguredError
from core.services.prompts.prompt_builder import PromptBuilder
from core.utils.logger import logger


def _extract_content(response: Any) -> str:
    """Extract content from LLM response."""
    if hasattr(response, 'content'):
        content = response.content
        if isinstance(content, list):
            content = "".join(
                item.get("text", "") if isinstance(item, dict) else str(item)
                for item in content
            )
        return str(content) if content else ""
    return str(response)


class SearchModelClient:
    """Asks a search-augmented model (Kimi) for an answer with supporting text and source."""

    def __init__(
        self,
        llm: Optional[ChatOpenAI] = None,
        prompt_builder: Optional[PromptBuilder] = None
    ):
        self.prompt_builder = prompt_builder or PromptBuilder()
        if llm is not None:
            self.llm = llm
        elif not settings.KIMI_API_KEY or not settings.KIMI_BASE_URL:
            logger.warning("Kimi search model credentials not configured")
            self.llm = None
        else:
            default_headers = {}
            if settings.KIMI_REFRESH_TOKEN:
                default_headers["Authorization"] = f"Bearer {settings.KIMI_REFRESH_TOKEN}"
            self.llm = ChatOpenAI(
                model=settings.KIMI_MODEL,
                base_url=settings.KIMI_BASE_URL,
                api_key=settings.KIMI_API_KEY,  # type: ignore
                default_headers=default_headers or None,
                extra_body={"use_search": True},
                timeout=settings.REQUEST_TIMEOUT,
                max_retries=0,
            )

    async def get_answer(self, question: str) -> str:
        """
        Ask the search model a question.

        Args:
            question: Full quiz question as pasted by the user

        Returns:
            Raw reply text; usually prose around a JSON object

        Raises:
            ModelNotConfiguredError: if the client has no credentials
        """
        if not self.llm:
            raise ModelNotConfiguredError("Search model is not configured")

        system_prompt, user_prompt = self.prompt_builder.build_search_prompts(question)
        messages = [
            SystemMessage(content=system_prompt),
            HumanMessage(content=user_prompt)
        ]
        response = await self.llm.ainvoke(messages)
        return _extract_content(response)


class VerificationModelClient:
    """Asks a second model to check a candidate answer and reply with JSON only."""

    def __init__(
        self,
        llm: Optional[ChatOpenAI] = None,
        prompt_builder: Optional[PromptBuilder] = None
    ):
        self.prompt_builder = prompt_builder or PromptBuilder()
        if llm is not None:
            self.llm = llm
        elif not settings.OPENAI_API_KEY or not settings.OPENAI_BASE_URL:
            logger.warning("Verification model credentials not configured")
            self.llm = None
        else:
            self.llm = ChatOpenAI(
                model=settings.OPENAI_MODEL,
                base_url=settings.OPENAI_BASE_URL,
                api_key=settings.OPENAI_API_KEY,  # type: ignore
                timeout=settings.REQUEST_TIMEOUT,
                max_retries=0,
            )

    async def verify(self, question: str, candidate: str) -> str:
        """Return the verification model's raw reply for a candidate answer."""
        if not self.llm:
            raise ModelNotConfiguredError("Verification model is not configured")

        system_prompt, user_prompt = self.prompt_builder.build_verification_prompts(question, candidate)
        messages = [
            SystemMessage(content=system_prompt),
            HumanMessage(content=user_prompt)
        ]
        response = await self.llm.ainvoke(messages)
        return _extract_content(response)
