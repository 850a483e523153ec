from opcardlist.models.card import (
    NOT_APPLICABLE,
    Card,
    CardEffect,
    CardType,
    Color,
    Rarity,
    sort_cards,
    split_card_number,
)
from opcardlist.models.failure import (
    CardlistError,
    CollectionLoadError,
    FailureKind,
    MissingElementError,
    UnknownValueError,
)
from opcardlist.models.filters import FilterIndex

__all__ = [
    "Card",
    "CardEffect",
    "CardType",
    "CardlistError",
    "CollectionLoadError",
    "Color",
    "FailureKind",
    "FilterIndex",
    "MissingElementError",
    "NOT_APPLICABLE",
    "Rarity",
    "UnknownValueError",
    "sort_cards",
    "split_card_number",
]
