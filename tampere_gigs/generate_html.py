"""Generate the gig list HTML for the static page."""

import hashlib
from datetime import date, datetime
from typing import List, Optional, Union

from .config import load_venue_icons
from .models import Concert

NO_GIGS_HTML = '<div class="no-gigs">No upcoming gigs found.</div>'


def filter_upcoming(concerts: List[Concert], now: Union[date, datetime]) -> List[Concert]:
    """Drop gigs dated before today. Today's gigs stay."""
    today = now.date() if isinstance(now, datetime) else now
    return [c for c in concerts if c.date >= today]


def format_gigs(concerts: List[Concert], now: Union[date, datetime]) -> str:
    """Render upcoming gigs as date headers followed by gig cards.

    Expects ``concerts`` sorted by date; a new header starts whenever the
    date changes from the previous gig.
    """
    upcoming = filter_upcoming(concerts, now)
    if not upcoming:
        return NO_GIGS_HTML

    parts = []
    last_date: Optional[date] = None

    for gig in upcoming:
        if gig.date != last_date:
            day_name = gig.date.strftime("%A, %-d %b")
            parts.append(f'<div class="date-header">{day_name}</div>')
            last_date = gig.date

        card = f"""
        <div class="gig-card">
            {_venue_icon(gig.venue)}
            <div class="time">{_esc(gig.time or "")}</div>
            <div class="details">
                <div class="artist">{_esc(gig.artist)}</div>
                <div class="venue">{_esc(gig.venue)}</div>
            </div>
        </div>
        """

        if gig.venue_url:
            parts.append(
                f'<a href="{_esc(gig.venue_url)}" target="_blank" rel="noopener noreferrer" '
                f'style="display: block; text-decoration: none; color: inherit;">{card}</a>'
            )
        else:
            parts.append(card)

    return "".join(parts)


def render_page(template: str, content: str, updated_at: datetime) -> str:
    """Fill the page template. Each marker is replaced once, first occurrence only."""
    updated_str = updated_at.strftime("%-d.%-m.%Y %H:%M")
    return (
        template
        .replace("{{CONTENT}}", content, 1)
        .replace("{{UPDATED_AT}}", updated_str, 1)
    )


def _venue_icon(venue: str) -> str:
    """Icon from the venue table, or an initials badge for unknown venues."""
    icon = load_venue_icons().get(venue)
    if icon:
        return f'<div class="venue-icon">{_esc(icon)}</div>'

    initials = "".join(word[0] for word in venue.split()[:2]).upper() or "?"
    # Stable colour per venue name
    hue = int(hashlib.md5(venue.encode("utf-8")).hexdigest()[:6], 16) % 360
    return (
        f'<div class="venue-icon placeholder" style="background: hsl({hue}, 45%, 35%);">'
        f'{_esc(initials)}</div>'
    )


def _esc(text: str) -> str:
    """HTML-escape text."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )
