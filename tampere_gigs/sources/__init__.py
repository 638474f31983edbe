"""Listing page scrapers."""
