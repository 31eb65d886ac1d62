"""Tests for the model clients and prompt builder."""
import asyncio

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from app.config import settings
from core.services.errors.exceptions import ModelNotConfiguredError
from core.services.prompts.prompt_builder import PromptBuilder
from core.services.search.model_clients import SearchModelClient, VerificationModelClient


class FakeChatModel:
    """Stands in for ChatOpenAI; records the messages it receives."""

    def __init__(self, content):
        self.content = content
        self.messages = None

    async def ainvoke(self, messages):
        self.messages = messages
        return AIMessage(content=self.content)


class TestPromptBuilder:
    """Test cases for PromptBuilder."""

    def test_search_prompt_demands_three_fields(self):
        system_prompt, user_prompt = PromptBuilder().build_search_prompts("Q1")
        assert user_prompt == "Q1"
        for field in ("answer", "supporting_text", "source"):
            assert f'"{field}"' in system_prompt
        assert "name:" not in system_prompt

    def test_verification_prompt_carries_question_and_candidate(self):
        candidate = '{"answer":"B"}'
        system_prompt, user_prompt = PromptBuilder().build_verification_prompts("Q1", candidate)
        assert "只输出JSON" in system_prompt
        assert user_prompt == f"问题：Q1\n待验证答案：{candidate}"


class TestSearchModelClient:
    """Test cases for SearchModelClient."""

    def test_get_answer_sends_system_and_question(self):
        llm = FakeChatModel("reply text")
        client = SearchModelClient(llm=llm)
        assert asyncio.run(client.get_answer("Q1")) == "reply text"
        assert isinstance(llm.messages[0], SystemMessage)
        assert llm.messages[1] == HumanMessage(content="Q1")

    def test_list_content_is_joined(self):
        llm = FakeChatModel([{"type": "text", "text": "part one "}, {"type": "text", "text": "part two"}])
        client = SearchModelClient(llm=llm)
        assert asyncio.run(client.get_answer("Q1")) == "part one part two"

    def test_unconfigured_client_raises_on_call(self, monkeypatch):
        monkeypatch.setattr(settings, "KIMI_API_KEY", None)
        client = SearchModelClient()
        assert client.llm is None
        with pytest.raises(ModelNotConfiguredError):
            asyncio.run(client.get_answer("Q1"))

    def test_configured_client_enables_search(self, monkeypatch):
        monkeypatch.setattr(settings, "KIMI_BASE_URL", "http://kimi.local/v1")
        monkeypatch.setattr(settings, "KIMI_API_KEY", "key")
        monkeypatch.setattr(settings, "KIMI_REFRESH_TOKEN", "refresh")
        client = SearchModelClient()
        assert client.llm.model_name == "kimi-search"
        assert client.llm.extra_body == {"use_search": True}
        assert client.llm.default_headers == {"Authorization": "Bearer refresh"}
        assert client.llm.request_timeout == settings.REQUEST_TIMEOUT


class TestVerificationModelClient:
    """Test cases for VerificationModelClient."""

    def test_verify_sends_candidate(self):
        llm = FakeChatModel('{"answer":"B"}')
        client = VerificationModelClient(llm=llm)
        assert asyncio.run(client.verify("Q1", "candidate")) == '{"answer":"B"}'
        assert "candidate" in llm.messages[1].content

    def test_unconfigured_client_raises_on_call(self, monkeypatch):
        monkeypatch.setattr(settings, "OPENAI_API_KEY", None)
        with pytest.raises(ModelNotConfiguredError):
            asyncio.run(VerificationModelClient().verify("Q1", "c"))
