from opcardlist.parsers.cardlist import (
    image_base_url,
    is_alternate_art,
    parse_cards,
    parse_single_card,
)
from opcardlist.parsers.fields import (
    extract_card_effects,
    normalize_card_sets,
)

__all__ = [
    "extract_card_effects",
    "image_base_url",
    "is_alternate_art",
    "normalize_card_sets",
    "parse_cards",
    "parse_single_card",
]
