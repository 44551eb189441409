# config.py -- environment-driven settings for the ingredient safety API
import os
from dotenv import load_dotenv
load_dotenv()


def _env_bool(key, default=False):
    raw = (os.environ.get(key) or "").strip().lower()
    if raw in {"1", "true", "yes", "y", "on"}:
        return True
    if raw in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(key, default):
    try:
        return int(os.environ.get(key, default))
    except (TypeError, ValueError):
        return default


def _env_float(key, default):
    try:
        return float(os.environ.get(key, default))
    except (TypeError, ValueError):
        return default


# Remote lookup collaborator (skindeep_scraper.service)
EWG_URL = os.environ.get("EWG_URL", "http://localhost:5001/ewg-search")
EWG_TOKEN = os.environ.get("EWG_TOKEN")
EWG_TIMEOUT = _env_int("EWG_TIMEOUT", 30)
EWG_ENABLED = _env_bool("EWG_ENABLED", True)

# Curated fuzzy match must strictly exceed this similarity
FUZZY_MATCH_THRESHOLD = _env_float("FUZZY_MATCH_THRESHOLD", 0.8)

ANALYZE_WORKERS = max(1, _env_int("ANALYZE_WORKERS", 1))

TESSERACT_CMD = os.environ.get("TESSERACT_CMD")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
