"""
Card collection storage.

Each region keeps three JSON files under <output_dir>/<region>/:
- cards-full.json: every field, read back as the merge base on the next run
- cards.json: public view, effects cleared
- filters.json: filter index rebuilt from the full collection

All three are serialized before any is written, and they are only written
after a page has been parsed and merged in full.
"""

import dataclasses
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from opcardlist.config import (
    FILTERS_FILENAME,
    FULL_CARDS_FILENAME,
    PUBLIC_CARDS_FILENAME,
    settings,
)
from opcardlist.models.card import Card, sort_cards
from opcardlist.models.failure import CollectionLoadError
from opcardlist.models.filters import FilterIndex
from opcardlist.services.filters import build_filters

logger = logging.getLogger(__name__)

_cards_adapter = TypeAdapter(list[Card])
_filters_adapter = TypeAdapter(FilterIndex)


def region_dir(region: str, output_dir: Path | None = None) -> Path:
    return (output_dir or settings.output_dir) / region


def full_cards_path(region: str, output_dir: Path | None = None) -> Path:
    return region_dir(region, output_dir) / FULL_CARDS_FILENAME


def cache_path(color: str, region: str, input_dir: Path | None = None) -> Path:
    """Raw page cache location, e.g. input/cardlist-red-en.html."""
    return (input_dir or settings.input_dir) / f"cardlist-{color.lower()}-{region}.html"


def load_cards(path: Path) -> list[Card]:
    """
    Load a persisted full collection.

    A missing file is an empty collection.

    Raises:
        CollectionLoadError: If the file exists but is not a valid collection
    """
    if not path.exists():
        logger.warning("No card collection at %s, starting empty", path)
        return []

    try:
        return _cards_adapter.validate_json(path.read_bytes())
    except ValidationError as e:
        raise CollectionLoadError(path, detail=str(e)) from e


def public_cards(cards: list[Card]) -> list[Card]:
    """Same cards, same order, with effect text removed."""
    return [dataclasses.replace(card, effects=None) for card in cards]


def save_output(
    cards: list[Card],
    region: str,
    output_dir: Path | None = None,
) -> dict[str, Path]:
    """
    Sort cards and write the full view, public view and filter index.

    Args:
        cards: Merged collection, any order
        region: Region code, names the output subdirectory
        output_dir: Output root. Defaults to settings.output_dir

    Returns:
        Dict mapping file name to the path written
    """
    directory = region_dir(region, output_dir)
    sorted_cards = sort_cards(cards)

    payloads: dict[str, bytes] = {
        FULL_CARDS_FILENAME: _cards_adapter.dump_json(sorted_cards, indent=2),
        PUBLIC_CARDS_FILENAME: _cards_adapter.dump_json(public_cards(sorted_cards), indent=2),
        FILTERS_FILENAME: _filters_adapter.dump_json(build_filters(sorted_cards), indent=2),
    }

    directory.mkdir(parents=True, exist_ok=True)

    written: dict[str, Path] = {}
    for filename, payload in payloads.items():
        path = directory / filename
        path.write_bytes(payload)
        written[filename] = path

    logger.info("Saved %d cards to %s", len(sorted_cards), directory)
    return written


def cache_page(
    html_content: str,
    color: str,
    region: str,
    input_dir: Path | None = None,
) -> Path:
    """Write a fetched card list page verbatim for later inspection."""
    path = cache_path(color, region, input_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html_content, encoding="utf-8")
    return path
