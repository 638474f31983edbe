"""
Kulttuuritoimitus concert listing scraper.
One long article: an h1 title, then an h3 per venue followed by paragraphs
of "D.M. Artist" lines separated by <br>.

Target: https://kulttuuritoimitus.fi/konsertit-pirkanmaa/
"""

from datetime import date, datetime
from typing import List, Optional, Union
import logging
import re

import requests
from bs4 import BeautifulSoup, Tag

from ..config import ANCHOR_TITLE, HEADERS, HELSINKI_TZ, REQUEST_TIMEOUT, SECTION_TAG, TARGET_URL
from ..date_utils import resolve_date
from ..models import Concert, Section

logger = logging.getLogger("tampere-gigs.kulttuuritoimitus")

BR_RE = re.compile(r'<br\s*/?>', re.IGNORECASE)
LINE_DATE_RE = re.compile(r'^(\d{1,2}\.\d{1,2}\.)')


def fetch_html() -> str:
    """Download the listing page. Network errors are left to the caller."""
    response = requests.get(TARGET_URL, headers=HEADERS, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.text


def parse_concerts(html: str, now: Optional[Union[date, datetime]] = None) -> List[Concert]:
    """Extract every dated line from the page, sorted by date.

    ``now`` is the reference instant used to pick the year of each date.
    """
    if now is None:
        now = datetime.now(HELSINKI_TZ)

    soup = BeautifulSoup(html, "html.parser")
    anchor = _find_anchor(soup)
    if anchor is None:
        logger.warning("Could not find main header")
        return []

    # Headings and paragraphs after the title, in document order
    nodes = anchor.find_all_next([SECTION_TAG, "p"])
    heading_count = sum(1 for node in nodes if node.name == SECTION_TAG)
    logger.debug(f"Found {heading_count} {SECTION_TAG} elements")

    concerts: List[Concert] = []
    section: Optional[Section] = None
    container: Optional[Tag] = None  # parent element of the current heading

    for node in nodes:
        if node.name == SECTION_TAG:
            if section is not None:
                concerts.extend(_section_concerts(section, now))
            section = Section(name=node.get_text().strip())
            container = node.parent
            continue

        # Text before the first venue heading is intro copy
        if section is None:
            continue

        # Left the heading's block (footer, sidebar): the section is over
        if not _is_inside(node, container):
            concerts.extend(_section_concerts(section, now))
            section = None
            continue

        # Usually "Missä? ... | Tapahtumakalenteriin <a href=...>täältä</a>."
        if section.url is None:
            link = node.find("a", href=True)
            if link is not None:
                section.url = link["href"]

        section.lines.extend(_split_lines(node))

    if section is not None:
        concerts.extend(_section_concerts(section, now))

    concerts.sort(key=lambda c: c.date)
    return concerts


def _find_anchor(soup: BeautifulSoup) -> Optional[Tag]:
    """Return the first h1 whose text contains the page title marker."""
    for heading in soup.find_all("h1"):
        title = " ".join(heading.get_text().split())
        if ANCHOR_TITLE in title:
            return heading
    return None


def _is_inside(node: Tag, container: Tag) -> bool:
    return any(parent is container for parent in node.parents)


def _split_lines(paragraph: Tag) -> List[str]:
    """Split a paragraph on <br> tags into non-empty plain-text lines."""
    lines = []
    for fragment in BR_RE.split(paragraph.decode_contents()):
        text = BeautifulSoup(fragment, "html.parser").get_text().strip()
        if text:
            lines.append(text)
    return lines


def _section_concerts(section: Section, now: Union[date, datetime]) -> List[Concert]:
    """Build concerts from a finished section, all sharing its link."""
    concerts = []
    for line in section.lines:
        match = LINE_DATE_RE.match(line)
        if not match:
            continue

        token = match.group(1)
        event_date = resolve_date(token, now)
        if event_date is None:
            logger.debug(f"  Skipping invalid date {token!r} at {section.name}")
            continue

        concerts.append(Concert(
            date=event_date,
            artist=line[len(token):].strip(),
            venue=section.name,
            venue_url=section.url,
        ))
    return concerts
