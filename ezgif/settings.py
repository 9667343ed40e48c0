"""
Environment configuration for the ezgif client
"""
import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from a .env file if present
load_dotenv()

EZGIF_BASE_URL = os.getenv("EZGIF_BASE_URL", "https://ezgif.com").rstrip("/")

# Seconds, applied to connect/read/write/pool of the httpx client
EZGIF_TIMEOUT = float(os.getenv("EZGIF_TIMEOUT", "30"))

EZGIF_USER_AGENT = os.getenv(
    "EZGIF_USER_AGENT",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0 Safari/537.36",
)


def parse_log_level(value: Optional[str]) -> Optional[int]:
    """Numeric level for a level name or number, None when unset or unknown"""
    if not value:
        return None
    if value.strip().isdigit():
        return int(value)
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else None


# Unset leaves the level of the ezgif logger to the embedding application
EZGIF_LOG_LEVEL = parse_log_level(os.getenv("EZGIF_LOG_LEVEL"))
