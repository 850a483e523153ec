"""
Filter index builder.

Collects the distinct values of each filterable field across a collection.
Strings sort lexicographically, rarities and card types in declaration
order.
"""

from collections.abc import Iterable
from enum import Enum
from typing import TypeVar

from opcardlist.models.card import Card, CardType, Rarity
from opcardlist.models.filters import FilterIndex

E = TypeVar("E", bound=Enum)


def _distinct(values: Iterable[str]) -> list[str]:
    return sorted(set(values))


def _distinct_members(values: Iterable[E], enum_cls: type[E]) -> list[E]:
    order = list(enum_cls)
    return sorted(set(values), key=order.index)


def build_filters(cards: list[Card]) -> FilterIndex:
    """
    Build the filter index for a collection.

    Attributes, types and card effects are flattened across all cards.

    Args:
        cards: Final collection

    Returns:
        FilterIndex with each field's distinct values sorted
    """
    return FilterIndex(
        card_names=_distinct(card.card_name for card in cards),
        card_numbers=_distinct(card.card_number for card in cards),
        rarities=_distinct_members((card.rarity for card in cards), Rarity),
        card_types=_distinct_members((card.card_type for card in cards), CardType),
        life_values=_distinct(card.life for card in cards),
        cost_values=_distinct(card.cost for card in cards),
        powers=_distinct(card.power for card in cards),
        counters=_distinct(card.counter for card in cards),
        attributes=_distinct(value for card in cards for value in card.attributes),
        types=_distinct(value for card in cards for value in card.types),
        card_effects=_distinct(value for card in cards for value in card.card_effects),
        card_sets=_distinct(card.card_sets for card in cards),
    )
