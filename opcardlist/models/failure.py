"""
Failure classification for the card list pipeline.

Every failure raised by parsing or loading is a CardlistError carrying a
FailureKind, so the update job can report what went wrong per category.
None of these are retried: an unknown value or a missing element means the
vendor markup changed and the page has to be looked at.

Transport failures are left as httpx.HTTPError and file-system failures as
OSError.
"""

from enum import Enum
from pathlib import Path


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Markup structure failures
    MISSING_ELEMENT = "missing_element"
    UNKNOWN_VALUE = "unknown_value"

    # Persisted state failures
    CORRUPT_COLLECTION = "corrupt_collection"


class CardlistError(Exception):
    """
    Base class for known, explainable pipeline failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        super().__init__(message)


class MissingElementError(CardlistError):
    """A required element of a card fragment is absent."""

    def __init__(self, element: str, detail: str | None = None):
        self.element = element
        super().__init__(
            kind=FailureKind.MISSING_ELEMENT,
            message=f"Missing {element}",
            detail=detail,
        )


class UnknownValueError(CardlistError):
    """
    Text that maps to no member of a closed vocabulary.

    Raised instead of skipping the value, since an unmapped rarity, card type
    or color means the card list format changed upstream.
    """

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(
            kind=FailureKind.UNKNOWN_VALUE,
            message=f"Unknown {field}: {value}",
        )


class CollectionLoadError(CardlistError):
    """A previously persisted collection exists but cannot be decoded."""

    def __init__(self, path: Path, detail: str | None = None):
        self.path = path
        super().__init__(
            kind=FailureKind.CORRUPT_COLLECTION,
            message=f"Cannot read card collection at {path}",
            detail=detail,
        )
