"""
Scheduled job to refresh the card database.

Fetches every color of every regional card list, merges the cards into the
region's persisted collection and rewrites its JSON files. Runs one fetch at
a time with a fixed pause between fetches to go easy on the server.

Can be run as a standalone script or called from a scheduler.
"""

import logging
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass, field

import httpx

from opcardlist.config import settings
from opcardlist.models.failure import CardlistError, CollectionLoadError
from opcardlist.parsers.cardlist import parse_cards
from opcardlist.scrapers.onepiece import (
    CARD_SOURCES,
    CardSource,
    build_client,
    fetch_cardlist_page,
)
from opcardlist.services.card_store import cache_page, save_output

logger = logging.getLogger(__name__)


@dataclass
class UpdateReport:
    """Outcome per "<region>/<color>" category."""

    completed: dict[str, int] = field(default_factory=dict)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


def update_category(source: CardSource, color: str, client: httpx.Client) -> int:
    """
    Fetch, parse, merge and persist one color of one region.

    Nothing is written to the output directory unless the whole page
    parses and merges.

    Args:
        source: Regional card list
        color: Color filter to fetch
        client: HTTP client for requests

    Returns:
        Number of cards in the region's collection after the merge

    Raises:
        httpx.HTTPError: If the fetch fails
        CardlistError: If the page or the persisted collection cannot be read
        OSError: If writing fails
    """
    html_content = fetch_cardlist_page(source, color, client)
    cache_page(html_content, color, source.region)

    cards = parse_cards(html_content, source.region, merge=True)
    logger.info("Parsed %s %s page, collection now has %d cards", source.region, color, len(cards))

    save_output(cards, source.region)
    return len(cards)


def run_update(
    sources: tuple[CardSource, ...] | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> UpdateReport:
    """
    Run the update for all or the given card sources.

    A failing category is logged and recorded; the next category still runs.
    A corrupt persisted collection stops the rest of that region, since no
    later color could be merged into it either.

    Args:
        sources: Card sources to update. If None, updates all known sources.
        sleep: Pause function called after every fetch attempt

    Returns:
        UpdateReport with card counts and failure reasons per category
    """
    if sources is None:
        sources = CARD_SOURCES

    report = UpdateReport()

    with build_client() as client:
        for source in sources:
            for color in source.colors:
                category = f"{source.region}/{color}"
                try:
                    report.completed[category] = update_category(source, color, client)
                except CollectionLoadError as e:
                    logger.error("Skipping region %s: %s (%s)", source.region, e.message, e.detail)
                    report.failed[category] = e.message
                    break
                except CardlistError as e:
                    logger.error("Error parsing %s: %s", category, e.message)
                    report.failed[category] = e.message
                except httpx.HTTPError as e:
                    logger.error("HTTP error fetching %s: %s", category, e)
                    report.failed[category] = str(e)
                except OSError as e:
                    logger.error("Error writing %s: %s", category, e)
                    report.failed[category] = str(e)
                finally:
                    sleep(settings.request_delay)

    logger.info(
        "Card list update complete. %d categories updated, %d failed",
        len(report.completed),
        len(report.failed),
    )
    return report


def main() -> None:
    """CLI entry point for running the card list update."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    report = run_update()
    if not report.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
