import logging
from abc import ABC, abstractmethod

from bedrock_chat.schemas.claude import ClaudeRequest, ClaudeResponse

logger = logging.getLogger(__name__)


class BaseLLMAdapter(ABC):
    """LLM adapter base class"""

    def __init__(self, model_id: str, region: str, max_attempts: int = 3):
        self.model_id = model_id
        self.region = region
        self.max_attempts = max(1, max_attempts)

    @abstractmethod
    def build_request(self, prompt: str, system_instruction: str, max_tokens: int) -> ClaudeRequest:
        """Validate inputs and assemble the provider payload"""
        ...

    @abstractmethod
    def generate(self, request: ClaudeRequest) -> ClaudeResponse:
        """Send one request and return the decoded response"""
        ...

    def invoke(self, prompt: str, system_instruction: str, max_tokens: int) -> str:
        """Single-prompt call returning the first text block of the reply"""
        request = self.build_request(prompt, system_instruction, max_tokens)
        response = self.generate(request)
        return response.first_text()
