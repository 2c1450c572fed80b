import logging
import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

DEFAULT_LOG_LEVEL = "INFO"


def _log_level(value: str) -> str:
    """Upper-cased level name, or INFO when logging does not know it"""
    level = value.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


CATALOG_TITLE = os.getenv("PATTERN_ATLAS_TITLE", "Design Patterns")
LOG_LEVEL = _log_level(os.getenv("PATTERN_ATLAS_LOG_LEVEL", DEFAULT_LOG_LEVEL))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("PATTERN_ATLAS_CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Install a single stream handler on the root logger"""
    level = _log_level(level)
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)
