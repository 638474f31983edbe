"""Tampere gig listing scraper and static page builder."""
