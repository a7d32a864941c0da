import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Reply assembly
FOCUS_WINDOW = 3  # most recent user turns folded into the focus digest
FOCUS_SEPARATOR = " • "
IDEA_SAMPLE_SIZE = 2
BULLET = "• "

# UI
SUGGESTION_COUNT = 3
MAX_INPUT_CHARS = 1000

# Logging
LOG_DIR = Path(os.getenv("CHAT_COACH_LOG_DIR", str(Path.home() / ".chat-coach")))
CONSOLE_LOG_LEVEL = os.getenv("CHAT_COACH_LOG_LEVEL", "WARNING").upper()
