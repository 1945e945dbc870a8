"""Exceptions raised by fekit helpers."""

__all__ = ["URIError"]


class URIError(ValueError):
    """Raised by strict URI encoding/decoding when the input is malformed.

    Non-strict callers never see this; they receive ``None`` instead.
    """
