import sys

from bedrock_chat.cli import main

sys.exit(main())
