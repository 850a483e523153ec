"""
Merge freshly parsed cards into a persisted collection.

Cards are matched by image_url, not by set label and number: the image
asset is the one thing that stays put when the vendor corrects a set label
between runs. Nothing is ever removed from the collection.
"""

from opcardlist.models.card import Card


def find_existing_card(cards: list[Card], new_card: Card) -> int | None:
    """Index of the card sharing new_card's image_url, or None."""
    for index, card in enumerate(cards):
        if card.image_url == new_card.image_url:
            return index
    return None


def merge_card(cards: list[Card], new_card: Card) -> list[Card]:
    """
    Replace the matching card wholesale, or append new_card.

    The replaced card keeps its position. Modifies cards in place and
    returns it.
    """
    index = find_existing_card(cards, new_card)
    if index is None:
        cards.append(new_card)
    else:
        cards[index] = new_card
    return cards


def merge_cards(existing: list[Card], new_cards: list[Card]) -> list[Card]:
    """
    Merge new_cards into a copy of existing, one card at a time.

    Args:
        existing: Previously persisted collection (not modified)
        new_cards: Cards parsed from the current page, in page order

    Returns:
        Merged collection
    """
    merged = list(existing)
    for card in new_cards:
        merge_card(merged, card)
    return merged
