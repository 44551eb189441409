# ocr.py -- ingredient label text extraction (pytesseract) and cleanup
import logging
import re

import pytesseract
from PIL import Image

from . import config

logger = logging.getLogger(__name__)

if config.TESSERACT_CMD:
    pytesseract.pytesseract.tesseract_cmd = config.TESSERACT_CMD

TESSERACT_CONFIG = "--oem 3 --psm 6 -c preserve_interword_spaces=1"

# Packaging boilerplate and noise removed before splitting
REMOVE_PATTERNS = [
    re.compile(r"ingredients:", re.I),
    re.compile(r"contains:", re.I),
    re.compile(r"warning:", re.I),
    re.compile(r"directions:", re.I),
    re.compile(r"how to use:", re.I),
    re.compile(r"manufactured by:", re.I),
    re.compile(r"distributed by:", re.I),
    re.compile(r"made in", re.I),
    re.compile(r"\d+(\.\d+)?%"),
    re.compile(r"\([^)]*\)"),
    re.compile(r"\bmay\s+contain\b.*$", re.I | re.M),
    re.compile(r"best before", re.I),
    re.compile(r"expiry date", re.I),
    re.compile(r"batch no", re.I),
    re.compile(r"mfg date", re.I),
    re.compile(r"www\.\S+"),
    re.compile(r"\d{6,}"),
]

_DELIMITERS = re.compile(r"[,;•|\n]+")
_CONNECTORS = re.compile(r"^(and|or|contains|with)$", re.I)


def clean_ingredient_text(text: str) -> str:
    """Reduce raw OCR output to a ", "-joined ingredient list."""
    if not text:
        return ""
    cleaned = text.lower()
    for pattern in REMOVE_PATTERNS:
        cleaned = pattern.sub("", cleaned)

    out = []
    for token in _DELIMITERS.split(cleaned):
        t = re.sub(r"^[-•*]+", "", token.strip())
        t = re.sub(r"\s+", " ", t).strip()
        t = re.sub(r"^\d+\.\s*", "", t)
        if len(t) <= 1 or t.isdigit() or _CONNECTORS.match(t):
            continue
        out.append(t)
    return ", ".join(out)


def extract_text(image) -> str:
    """Run tesseract over a PIL image (or a path / file object) and return the raw text."""
    if not isinstance(image, Image.Image):
        image = Image.open(image)
    if image.mode not in ("RGB", "L"):
        image = image.convert("RGB")
    text = pytesseract.image_to_string(image, config=TESSERACT_CONFIG)
    return (text or "").strip()


def extract_ingredients(image) -> dict:
    raw = extract_text(image)
    if not raw:
        logger.info("No text was extracted from the image")
    return {"raw": raw, "text": clean_ingredient_text(raw)}
