"""
Anthropic Claude on Amazon Bedrock, called through ``bedrock-runtime``
``InvokeModel`` with the Anthropic messages payload.

Constraints:
1. The payload always carries ``anthropic_version`` (``bedrock-2023-05-31``)
2. SDK-level retries are disabled by the factory; transient errors are
   retried here with tenacity
3. Every failure leaves this module as a ``BedrockChatError`` subclass
"""
import logging

from botocore.exceptions import ClientError, ConnectTimeoutError, ReadTimeoutError
from pydantic import ValidationError
from tenacity import Retrying, retry_if_exception, stop_after_attempt, wait_exponential

from bedrock_chat.config import settings
from bedrock_chat.schemas.claude import (
    ClaudeRequest,
    ClaudeRequestMessage,
    ClaudeResponse,
    StopReason,
    TextContent,
)
from bedrock_chat.services.llm.adapter import BaseLLMAdapter
from bedrock_chat.services.llm.errors import (
    DecodingError,
    EncodingError,
    RequestValidationError,
    classify_invoke_error,
)

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json"

TRANSIENT_ERROR_CODES = frozenset({
    "ThrottlingException",
    "ServiceUnavailableException",
    "ModelNotReadyException",
    "InternalServerException",
    "ModelTimeoutException",
})


def is_transient(exc: BaseException) -> bool:
    """Errors worth another attempt: throttling, timeouts, 5xx-style faults."""
    if isinstance(exc, (ReadTimeoutError, ConnectTimeoutError)):
        return True
    if isinstance(exc, ClientError):
        return exc.response.get("Error", {}).get("Code") in TRANSIENT_ERROR_CODES
    return False


class BedrockClaudeAdapter(BaseLLMAdapter):
    """Claude adapter over a boto3 ``bedrock-runtime`` client."""

    def __init__(self, client, model_id: str, region: str,
                 anthropic_version: str = None, max_attempts: int = 3):
        super().__init__(model_id, region, max_attempts)
        self.client = client
        self.anthropic_version = anthropic_version or settings.ANTHROPIC_VERSION

    def build_request(self, prompt: str, system_instruction: str, max_tokens: int) -> ClaudeRequest:
        if not prompt or not prompt.strip():
            raise RequestValidationError("Error: the prompt must not be empty")
        if max_tokens is None or max_tokens <= 0:
            raise RequestValidationError(
                f"Error: max tokens must be a positive integer, got {max_tokens}"
            )
        try:
            return ClaudeRequest(
                anthropic_version=self.anthropic_version,
                max_tokens=max_tokens,
                system=system_instruction or "",
                messages=[
                    ClaudeRequestMessage(role="user", content=[TextContent(text=prompt)]),
                ],
            )
        except ValidationError as e:
            raise RequestValidationError(f"Error: invalid request: {e}", e) from e

    def generate(self, request: ClaudeRequest) -> ClaudeResponse:
        try:
            body = request.to_body()
        except (TypeError, ValueError) as e:
            # the message may echo unencodable text back
            reason = str(e).encode("utf-8", "backslashreplace").decode("utf-8")
            raise EncodingError(f"Error: failed to encode the request as JSON: {reason}", e) from e

        raw = self._invoke_model(body)

        try:
            response = ClaudeResponse.model_validate_json(raw)
        except ValidationError as e:
            raise DecodingError(f"Error: failed to parse the model response: {e}", e) from e

        logger.info(
            f"[BedrockClaudeAdapter] id={response.id} stop_reason={response.stop_reason} "
            f"input_tokens={response.usage.input_tokens} output_tokens={response.usage.output_tokens}"
        )
        if response.stop_reason == StopReason.MAX_TOKENS.value:
            logger.warning(
                f"[BedrockClaudeAdapter] response truncated at max_tokens={request.max_tokens}"
            )
        return response

    def _invoke_model(self, body: bytes) -> bytes:
        """Blocking ``InvokeModel`` call with bounded retry; returns the raw body."""
        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=2, min=2, max=30),
            retry=retry_if_exception(is_transient),
            before_sleep=lambda state: logger.warning(
                f"[BedrockClaudeAdapter] retry #{state.attempt_number}: {state.outcome.exception()}"
            ),
            reraise=True,
        )
        logger.debug(f"[BedrockClaudeAdapter] invoking model={self.model_id} region={self.region}")
        try:
            for attempt in retrying:
                with attempt:
                    result = self.client.invoke_model(
                        modelId=self.model_id,
                        contentType=CONTENT_TYPE,
                        accept=CONTENT_TYPE,
                        body=body,
                    )
                    return result["body"].read()
        except Exception as e:
            logger.debug(f"[BedrockClaudeAdapter] invoke_model failed: {e!r}")
            raise classify_invoke_error(e, self.model_id, self.region) from e
