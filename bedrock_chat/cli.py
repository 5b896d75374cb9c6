import argparse
import logging
import sys
from typing import Optional, Sequence

from bedrock_chat.config import settings
from bedrock_chat.services.llm.errors import BedrockChatError
from bedrock_chat.services.llm.factory import create_adapter

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bedrock-chat",
        description="Send one prompt to Anthropic Claude on Amazon Bedrock and print the reply",
    )
    parser.add_argument("--prompt", default=settings.DEFAULT_PROMPT)
    parser.add_argument("--system", default=settings.DEFAULT_SYSTEM_PROMPT,
                        help="system instruction")
    parser.add_argument("--max-tokens", type=int, default=settings.DEFAULT_MAX_TOKENS)
    parser.add_argument("--region", default=settings.AWS_REGION)
    parser.add_argument("--model-id", default=settings.BEDROCK_MODEL_ID)
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        default=settings.LOG_LEVEL.upper())
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # stderr only; stdout carries the answer
    logging.basicConfig(
        stream=sys.stderr,
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        adapter = create_adapter(region=args.region, model_id=args.model_id)
        text = adapter.invoke(args.prompt, args.system, args.max_tokens)
    except BedrockChatError as e:
        logger.debug(f"[CLI] {type(e).__name__}: {e.cause!r}")
        print(e.diagnostic, file=sys.stderr)
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
