"""BZR Savetnik configuration — loads settings from .env file."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root
ROOT_DIR = Path(__file__).parent.parent
DATA_DIR = ROOT_DIR / "data"

# Load .env
load_dotenv(ROOT_DIR / ".env")

# LLM providers (Gemini is primary, the rest are tried when it is not configured)
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY", "")

GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.0-pro")
ANTHROPIC_MODEL = os.getenv("ANTHROPIC_MODEL", "claude-3-sonnet-20240229")
OPENROUTER_MODEL = os.getenv("OPENROUTER_MODEL", "anthropic/claude-3-opus-20240229")

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"

LLM_TEMPERATURE = 0.7
LLM_MAX_TOKENS = 2000
LLM_TIMEOUT = 60  # seconds

# Database
DB_PATH = Path(os.getenv("BZR_DB_PATH", str(DATA_DIR / "bzr.db")))

# Blog relevance policy
DEFAULT_MIN_RELEVANCE_SCORE = 0.3
HIGH_RELEVANCE_SCORE = 0.5
RELAXED_RELEVANCE_SCORE = 0.3
BLOG_POST_THRESHOLD = 3  # this many relevant posts means no new post is needed
MAX_CONTEXT_POSTS = 3

# Subscription tiers
FREE_DAILY_QUESTION_LIMIT = 3
PRO_DAILY_QUESTION_LIMIT = 100  # effectively unlimited

# Blog content
EXCERPT_MAX_LENGTH = 150
SLUG_MAX_LENGTH = 100
DEFAULT_BLOG_TAGS = ["bezbednost", "bzr", "zaštita"]
CALL_TO_ACTION = (
    "Želite li više informacija o bezbednosti i zdravlju na radu? Kontaktirajte nas!"
)
