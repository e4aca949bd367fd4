"""Application configuration and constants."""
import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float_env(name: str, default: float) -> float:
    """Parse float from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# Directories
DATA_DIR = Path(os.environ.get("QUIZ_DATA_DIR", Path.cwd() / "ingestion"))
STATIC_DIR = PROJECT_ROOT / "static"

# Question bank produced by the ingestion pipeline
QUESTION_BANK_PATH = Path(
    os.environ.get("QUESTION_BANK_PATH", DATA_DIR / "data" / "all_questions.json")
)
MANIFEST_PATH = Path(os.environ.get("MANIFEST_PATH", DATA_DIR / "manifest.json"))
PDF_DIR = Path(os.environ.get("PDF_DIR", DATA_DIR / "pdfs"))
PDF_BASE_URL = os.environ.get("PDF_BASE_URL", "https://allarätt.nu/")

# Database
DB_DIR = Path(os.environ.get("DB_DIR", Path.cwd() / "data"))
DB_DIR.mkdir(parents=True, exist_ok=True)
DATABASE_URL = os.environ.get(
    "DATABASE_URL", f"sqlite:///{DB_DIR / 'ordquiz.db'}"
)

# Identity provider tokens
AUTH_SECRET = os.environ.get(
    "AUTH_SECRET",
    "CHANGE_ME_IN_PRODUCTION_USE_openssl_rand_hex_32"
)
AUTH_ALGORITHM = os.environ.get("AUTH_ALGORITHM", "HS256")

# Generative model
GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY", "")
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.0-flash")
GEMINI_PROBE_MODELS = [
    "gemini-2.0-flash",
    "gemini-1.5-flash",
    "gemini-1.5-pro",
    "gemini-pro",
]
INGEST_DELAY_SECONDS = _parse_float_env("INGEST_DELAY_SECONDS", 2.0)

# Quiz limits
DEFAULT_QUESTION_LIMIT = _parse_int_env("DEFAULT_QUESTION_LIMIT", 40)
LEADERBOARD_SIZE = _parse_int_env("LEADERBOARD_SIZE", 20)
AI_DEFAULT_COUNT = _parse_int_env("AI_DEFAULT_COUNT", 10)
AI_MAX_COUNT = _parse_int_env("AI_MAX_COUNT", 50)

# Client
QUIZ_API_URL = os.environ.get("QUIZ_API_URL", "http://127.0.0.1:8000")
HTTP_TIMEOUT_SECONDS = _parse_float_env("HTTP_TIMEOUT_SECONDS", 10.0)
