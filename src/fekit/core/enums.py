"""Enumerations shared by the text and comparison helpers."""

from enum import Enum, Flag, IntEnum, auto

__all__ = [
    "NormalizationForm",
    "CompareOptions",
    "Ordering",
]


class NormalizationForm(Enum):
    """Unicode normalization forms accepted by ``string.normalize``."""

    NFC = "NFC"
    NFD = "NFD"
    NFKC = "NFKC"
    NFKD = "NFKD"


class CompareOptions(Flag):
    """Options controlling ``string.locale_compare``.

    Flags can be combined, e.g.
    ``CompareOptions.CASE_INSENSITIVE | CompareOptions.NUMERIC``.
    """

    NONE = 0
    CASE_INSENSITIVE = auto()
    DIACRITIC_INSENSITIVE = auto()
    NUMERIC = auto()
    WIDTH_INSENSITIVE = auto()


class Ordering(IntEnum):
    """Result of a three-way comparison."""

    ASCENDING = -1
    SAME = 0
    DESCENDING = 1

    @classmethod
    def of(cls, a, b) -> "Ordering":
        """Order two mutually comparable values.

        Args:
            a: Left-hand value.
            b: Right-hand value.

        Returns:
            ASCENDING if a < b, DESCENDING if a > b, SAME otherwise.
        """
        if a < b:
            return cls.ASCENDING
        if a > b:
            return cls.DESCENDING
        return cls.SAME
