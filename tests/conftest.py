from unittest.mock import MagicMock

import pytest

from bedrock_chat.services.llm.bedrock_adapter import BedrockClaudeAdapter
from bedrock_fakes import TEST_MODEL_ID, TEST_REGION


@pytest.fixture
def bedrock_client():
    """Stand-in for a boto3 ``bedrock-runtime`` client"""
    return MagicMock()


@pytest.fixture
def adapter(bedrock_client):
    return BedrockClaudeAdapter(
        client=bedrock_client,
        model_id=TEST_MODEL_ID,
        region=TEST_REGION,
        anthropic_version="bedrock-2023-05-31",
        max_attempts=3,
    )


@pytest.fixture
def no_sleep(monkeypatch):
    """Skip tenacity backoff waits"""
    monkeypatch.setattr("time.sleep", lambda seconds: None)
