"""
Error types raised by the Bedrock client.

Inner code raises these; only the command-line entry point turns them into
a diagnostic line and an exit status. Remote-call failures are classified
from botocore's structured exceptions first and from the error text second,
since some wrapped transport errors only surface the resolver message.
"""
from typing import Optional

from botocore.exceptions import (
    ClientError,
    EndpointConnectionError,
    NoCredentialsError,
    NoRegionError,
    PartialCredentialsError,
    ProfileNotFound,
)

REGIONAL_SERVICES_URL = (
    "https://aws.amazon.com/about-aws/global-infrastructure/regional-product-services/"
)

NO_SUCH_HOST = "no such host"
UNRESOLVED_MODEL = "Could not resolve the foundation model"


class BedrockChatError(Exception):
    """Base error; ``diagnostic`` is the line shown to the user."""

    def __init__(self, diagnostic: str, cause: Optional[BaseException] = None):
        super().__init__(diagnostic)
        self.diagnostic = diagnostic
        self.cause = cause


class ConfigurationError(BedrockChatError):
    pass


class RequestValidationError(BedrockChatError):
    pass


class EncodingError(BedrockChatError):
    pass


class RegionUnavailableError(BedrockChatError):
    def __init__(self, region: Optional[str] = None, cause: Optional[BaseException] = None):
        where = f" ({region})" if region else ""
        super().__init__(
            f"Error: the Bedrock service is not available in the selected region{where}. "
            f"Check regional service availability at {REGIONAL_SERVICES_URL}",
            cause,
        )
        self.region = region


class ModelNotFoundError(BedrockChatError):
    def __init__(self, model_id: str, cause: Optional[BaseException] = None):
        super().__init__(
            f'Error: could not resolve the foundation model from model identifier "{model_id}". '
            "Make sure the model exists and is accessible in the specified region",
            cause,
        )
        self.model_id = model_id


class InvocationError(BedrockChatError):
    def __init__(self, cause: BaseException):
        super().__init__(f"Error: failed to invoke Anthropic Claude: {cause}", cause)


class DecodingError(BedrockChatError):
    pass


class EmptyResponseError(DecodingError):
    def __init__(self):
        super().__init__("Error: the model response contained no content blocks")


_CONFIGURATION_ERRORS = (NoRegionError, NoCredentialsError, PartialCredentialsError, ProfileNotFound)


def _error_code(exc: BaseException) -> str:
    if isinstance(exc, ClientError):
        return exc.response.get("Error", {}).get("Code", "")
    return ""


def classify_invoke_error(exc: BaseException, model_id: str, region: Optional[str] = None) -> BedrockChatError:
    """Map a failed ``invoke_model`` call to a typed error."""
    if isinstance(exc, BedrockChatError):
        return exc

    if isinstance(exc, _CONFIGURATION_ERRORS):
        return ConfigurationError(f"Error: AWS configuration could not be resolved: {exc}", exc)

    message = str(exc)

    # Region availability takes precedence over any other match
    if isinstance(exc, EndpointConnectionError) or NO_SUCH_HOST in message:
        return RegionUnavailableError(region, exc)

    if _error_code(exc) == "ResourceNotFoundException" or UNRESOLVED_MODEL in message:
        return ModelNotFoundError(model_id, exc)

    return InvocationError(exc)
