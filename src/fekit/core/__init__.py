"""Shared configuration, enums and exceptions."""

from fekit.core.enums import CompareOptions, NormalizationForm, Ordering
from fekit.core.errors import URIError

__all__ = [
    "CompareOptions",
    "NormalizationForm",
    "Ordering",
    "URIError",
]
