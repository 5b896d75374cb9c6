from unittest.mock import patch

import pytest
from botocore.exceptions import NoRegionError

from bedrock_chat.services.llm.bedrock_adapter import BedrockClaudeAdapter
from bedrock_chat.services.llm.errors import ConfigurationError
from bedrock_chat.services.llm.factory import create_adapter


class TestAdapterFactory:
    def test_arguments_override_settings(self):
        """Explicit region and model id win over settings."""
        with patch("bedrock_chat.services.llm.factory.boto3") as mock_boto3:
            adapter = create_adapter(region="eu-central-1", model_id="anthropic.claude-3-haiku-20240307-v1:0")

        assert isinstance(adapter, BedrockClaudeAdapter)
        assert adapter.region == "eu-central-1"
        assert adapter.model_id == "anthropic.claude-3-haiku-20240307-v1:0"
        assert adapter.client is mock_boto3.client.return_value

        args, kwargs = mock_boto3.client.call_args
        assert args == ("bedrock-runtime",)
        assert kwargs["config"].region_name == "eu-central-1"

    def test_settings_defaults(self):
        with patch("bedrock_chat.services.llm.factory.boto3"), \
                patch("bedrock_chat.services.llm.factory.settings") as mock_settings:
            mock_settings.AWS_REGION = "us-west-2"
            mock_settings.BEDROCK_MODEL_ID = "anthropic.claude-v2"
            mock_settings.ANTHROPIC_VERSION = "bedrock-2023-05-31"
            mock_settings.LLM_CONNECT_TIMEOUT = 5
            mock_settings.LLM_CALL_TIMEOUT = 60
            mock_settings.LLM_MAX_ATTEMPTS = 4
            adapter = create_adapter()

        assert adapter.region == "us-west-2"
        assert adapter.model_id == "anthropic.claude-v2"
        assert adapter.max_attempts == 4

    def test_timeouts_applied_and_sdk_retries_disabled(self):
        with patch("bedrock_chat.services.llm.factory.boto3") as mock_boto3:
            create_adapter(region="us-east-1")
        config = mock_boto3.client.call_args.kwargs["config"]
        assert config.read_timeout > 0
        assert config.connect_timeout > 0
        assert config.retries["total_max_attempts"] == 1

    def test_client_creation_failure_is_configuration_error(self):
        with patch("bedrock_chat.services.llm.factory.boto3") as mock_boto3:
            mock_boto3.client.side_effect = NoRegionError()
            with pytest.raises(ConfigurationError):
                create_adapter(region="us-east-1")
