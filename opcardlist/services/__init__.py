"""
opcardlist services.

Merging, filter indexing and persistence of parsed card collections.
"""

from opcardlist.services.card_store import (
    cache_page,
    full_cards_path,
    load_cards,
    public_cards,
    save_output,
)
from opcardlist.services.filters import build_filters
from opcardlist.services.reconciler import find_existing_card, merge_card, merge_cards

__all__ = [
    "build_filters",
    "cache_page",
    "find_existing_card",
    "full_cards_path",
    "load_cards",
    "merge_card",
    "merge_cards",
    "public_cards",
    "save_output",
]
