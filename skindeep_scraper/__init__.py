"""Scraper and HTTP service for EWG Skin Deep ingredient searches."""
