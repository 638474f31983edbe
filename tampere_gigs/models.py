"""Data models for the Tampere gig listing."""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass(frozen=True)
class Concert:
    """A single gig found on the listing page."""
    date: date
    artist: str
    venue: str
    venue_url: Optional[str] = None  # Venue's own events page
    time: Optional[str] = None  # e.g. "19:00", never set by the scraper
    url: Optional[str] = None  # Link to event page/tickets

    @property
    def display_line(self) -> str:
        """Format as 'ARTIST — VENUE' or 'ARTIST — VENUE (TIME)'."""
        line = f"{self.artist} — {self.venue}"
        if self.time:
            line += f" ({self.time})"
        return line


@dataclass
class Section:
    """One venue heading and the text lines collected below it."""
    name: str
    url: Optional[str] = None
    lines: List[str] = field(default_factory=list)
