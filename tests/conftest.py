"""Shared fixtures for the search pipeline tests."""
import pytest

from core.services.search.retry_controller import RetryPolicy
from core.services.search.search_service import QuizSearchService
from tests.fakes import VALID_REPLY, FakeSearchClient, FakeVerificationClient, RecordingSleep


@pytest.fixture
def no_sleep():
    return RecordingSleep()


@pytest.fixture
def make_service(no_sleep):
    """Build a QuizSearchService around fake clients."""
    def _make(replies, verification_reply=VALID_REPLY):
        search_client = FakeSearchClient(replies)
        verification_client = FakeVerificationClient(verification_reply)
        service = QuizSearchService(
            search_client=search_client,
            verification_client=verification_client,
            retry_policy=RetryPolicy(max_retries=2, retry_delay_ms=1000),
            sleep=no_sleep
        )
        return service, search_client, verification_client
    return _make
