from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bedrock_chat.services.llm.errors import EmptyResponseError


class StopReason(str, Enum):
    """Known values of ``ClaudeResponse.stop_reason``."""
    END_TURN = "end_turn"
    MAX_TOKENS = "max_tokens"
    STOP_SEQUENCE = "stop_sequence"
    TOOL_USE = "tool_use"


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ClaudeRequestMessage(BaseModel):
    role: Literal["user", "assistant"] = "user"
    content: List[TextContent] = Field(min_length=1)


class ClaudeRequest(BaseModel):
    anthropic_version: str
    max_tokens: int = Field(gt=0)
    system: str = ""
    messages: List[ClaudeRequestMessage] = Field(min_length=1)

    def to_body(self) -> bytes:
        """JSON body for ``InvokeModel``."""
        return self.model_dump_json().encode("utf-8")


class ResponseContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str = "text"
    text: str = ""

    @field_validator("type", "text", mode="before")
    @classmethod
    def _null_as_default(cls, value, info):
        return cls.model_fields[info.field_name].get_default() if value is None else value


class ClaudeUsage(BaseModel):
    input_tokens: int = 0
    output_tokens: int = 0

    @field_validator("input_tokens", "output_tokens", mode="before")
    @classmethod
    def _null_as_zero(cls, value):
        return 0 if value is None else value


class ClaudeResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    type: str = ""
    role: str = ""
    content: List[ResponseContent] = []
    # str rather than StopReason so unknown values still decode
    stop_reason: Optional[str] = None
    stop_sequence: Optional[str] = None
    usage: ClaudeUsage = Field(default_factory=ClaudeUsage)

    # null decodes to the empty value; only content[0].text matters to callers
    @field_validator("id", "type", "role", "content", "usage", mode="before")
    @classmethod
    def _null_as_default(cls, value, info):
        if value is not None:
            return value
        return cls.model_fields[info.field_name].get_default(call_default_factory=True)

    def first_text(self) -> str:
        """Text of the first content block; remaining blocks are ignored."""
        if not self.content:
            raise EmptyResponseError()
        return self.content[0].text
