from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Bedrock endpoint
    AWS_REGION: str = "us-east-1"
    BEDROCK_MODEL_ID: str = "anthropic.claude-3-5-sonnet-20240620-v1:0"
    ANTHROPIC_VERSION: str = "bedrock-2023-05-31"

    # Request defaults, overridable from the command line
    DEFAULT_MAX_TOKENS: int = 1024
    DEFAULT_SYSTEM_PROMPT: str = "Act as a kindergartner."
    DEFAULT_PROMPT: str = "What is the capital of Thailand?"

    # Remote call limits (seconds / attempts)
    LLM_CALL_TIMEOUT: int = 240
    LLM_CONNECT_TIMEOUT: int = 10
    LLM_MAX_ATTEMPTS: int = 3

    # Logs go to stderr; stdout only carries the answer
    LOG_LEVEL: str = "WARNING"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
