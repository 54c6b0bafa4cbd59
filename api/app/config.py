import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

APP_NAME = "Third Place API"

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory").strip().lower()
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./thirdplace.db")

_default_candidates = Path(__file__).resolve().parent / "data" / "candidates.json"
CANDIDATE_POOL_PATH = Path(os.getenv("CANDIDATE_POOL_PATH", str(_default_candidates)))

ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
MATCH_MODEL = os.getenv("MATCH_MODEL", "claude-sonnet-4-5-20250929")
MATCH_MAX_TOKENS = int(os.getenv("MATCH_MAX_TOKENS", "4096"))
MATCH_TIMEOUT_SECONDS = float(os.getenv("MATCH_TIMEOUT_SECONDS", "60"))
MATCH_RESPONSE_SHAPE = os.getenv("MATCH_RESPONSE_SHAPE", "multi").strip().lower()

MIN_COMPATIBLE_POOL = int(os.getenv("MIN_COMPATIBLE_POOL", "12"))
GROUP_SIZE = int(os.getenv("GROUP_SIZE", "4"))
if not 3 <= GROUP_SIZE <= 5:
    raise ValueError(f"GROUP_SIZE must be between 3 and 5, got {GROUP_SIZE}")


def _is_label_mapping(value: Any) -> bool:
    if not isinstance(value, dict):
        return False
    return all(
        isinstance(k, str) and isinstance(v, list) and all(isinstance(label, str) for label in v)
        for k, v in value.items()
    )


def load_orientation_labels() -> dict[str, list[str]] | None:
    raw = os.getenv("ORIENTATION_LABELS_JSON", "").strip()
    if not raw:
        return None
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Failed to parse ORIENTATION_LABELS_JSON. Falling back to in-code defaults.")
        return None
    if not _is_label_mapping(parsed):
        logger.warning("Invalid ORIENTATION_LABELS_JSON format; expected an object of string lists. Falling back to in-code defaults.")
        return None
    return parsed


ORIENTATION_LABELS = load_orientation_labels()

CORS_ALLOWED_ORIGINS = [
    o.strip()
    for o in os.getenv(
        "CORS_ALLOWED_ORIGINS",
        "http://localhost:5000,http://127.0.0.1:5000,http://localhost:5173,http://127.0.0.1:5173",
    ).split(",")
    if o.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
