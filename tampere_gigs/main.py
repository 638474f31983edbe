#!/usr/bin/env python3
"""Tampere Gigs — Main Runner

Fetches the Kulttuuritoimitus concert listing, extracts the gigs, and
writes a static HTML page.

Usage:
    python -m tampere_gigs.main
"""

import sys
import logging
from collections import defaultdict
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .config import HELSINKI_TZ, INDEX_PATH, LOG_DIR, TEMPLATE_PATH
from .generate_html import filter_upcoming, format_gigs, render_page
from .models import Concert
from .sources.kulttuuritoimitus import fetch_html, parse_concerts

logger = logging.getLogger("tampere-gigs")


def setup_logging(log_dir: Path = LOG_DIR) -> None:
    """Log to stdout and to logs/<date>.log."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_date = datetime.now(HELSINKI_TZ).strftime("%Y-%m-%d")
    log_file = log_dir / f"{log_date}.log"

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(sys.stdout),
        ],
    )


def write_output(html: str, path: Path = INDEX_PATH) -> Path:
    """Overwrite the output page, creating its directory if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    return path


def run(now: Optional[datetime] = None, output_path: Path = INDEX_PATH) -> Path:
    """Main pipeline: fetch → parse → format → publish."""
    if now is None:
        now = datetime.now(HELSINKI_TZ)

    logger.info("Fetching data...")
    html = fetch_html()

    logger.info("Parsing concerts...")
    concerts = parse_concerts(html, now)
    logger.info(f"Found {len(concerts)} concerts.")

    upcoming = filter_upcoming(concerts, now)
    dropped = len(concerts) - len(upcoming)
    if dropped:
        logger.info(f"Dropped {dropped} past gig(s)")

    logger.info("Generating HTML...")
    gigs_html = format_gigs(upcoming, now)
    template = TEMPLATE_PATH.read_text(encoding="utf-8")
    page = render_page(template, gigs_html, now)

    write_output(page, output_path)
    logger.info(f"Build complete: {output_path}")

    _log_summary(upcoming)
    return output_path


def _log_summary(concerts: List[Concert]) -> None:
    """Log the upcoming gigs grouped by date."""
    by_date = defaultdict(list)
    for c in concerts:
        by_date[c.date].append(c)

    for d in sorted(by_date.keys()):
        logger.info(f"━━━ {d.strftime('%A, %-d.%-m.').upper()} ━━━")
        for c in by_date[d]:
            logger.info(f"  {c.display_line}")


def main() -> int:
    setup_logging()
    try:
        run()
    except Exception as e:
        logger.exception(f"Build failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
