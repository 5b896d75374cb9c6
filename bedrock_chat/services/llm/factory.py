import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from bedrock_chat.config import settings
from bedrock_chat.services.llm.bedrock_adapter import BedrockClaudeAdapter
from bedrock_chat.services.llm.errors import ConfigurationError

logger = logging.getLogger(__name__)

BEDROCK_RUNTIME_SERVICE_NAME = "bedrock-runtime"


def create_adapter(region: str = None, model_id: str = None) -> BedrockClaudeAdapter:
    """
    Adapter factory: builds a ``bedrock-runtime`` client and wraps it.

    Priority: arguments > environment / .env settings. Credentials come from
    the standard boto3 chain (env vars, shared files, instance role).
    """
    region = region or settings.AWS_REGION
    model_id = model_id or settings.BEDROCK_MODEL_ID

    logger.info(f"[LLMFactory] creating adapter: region={region}, model={model_id}")

    client_config = Config(
        region_name=region,
        connect_timeout=settings.LLM_CONNECT_TIMEOUT,
        read_timeout=settings.LLM_CALL_TIMEOUT,
        # tenacity in the adapter owns retries
        retries={"total_max_attempts": 1, "mode": "standard"},
    )
    try:
        client = boto3.client(BEDROCK_RUNTIME_SERVICE_NAME, config=client_config)
    except BotoCoreError as e:
        raise ConfigurationError(f"Error: failed to load AWS configuration: {e}", e) from e

    return BedrockClaudeAdapter(
        client=client,
        model_id=model_id,
        region=region,
        anthropic_version=settings.ANTHROPIC_VERSION,
        max_attempts=settings.LLM_MAX_ATTEMPTS,
    )
