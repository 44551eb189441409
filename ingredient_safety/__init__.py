"""
Ingredient safety analysis.

- analyzer: resolution pipeline (remote lookup -> curated database -> heuristics)
- knowledge: curated database and heuristic tables loaded from data/
- ocr: label text extraction and cleanup
- main: Flask API
"""

from .analyzer import analyze_ingredients  # noqa: F401
