import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env, then local overrides
load_dotenv()
load_dotenv(".env.local", override=True)

# Logging configuration
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Environment variables
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
SPEECHIFY_API_KEY = os.getenv("SPEECHIFY_API_KEY", "dummy_speechify_key")
SPEECHIFY_VOICE_ID = os.getenv("SPEECHIFY_VOICE_ID", "scott")
SPEECHIFY_BASE_URL = os.getenv("SPEECHIFY_BASE_URL", "https://api.sws.speechify.com")
SPEECHIFY_TIMEOUT = float(os.getenv("SPEECHIFY_TIMEOUT", "120"))


def debug_log(msg: str) -> None:
    """Temporary debug logger, routed through info level."""
    logger.info(f"DEBUG: {msg}")
