"""Percent-encoding helpers matching JavaScript's ``encodeURI`` family.

Two unescaped ("reserved") character sets are used:

    - **URI** (``encode_uri``/``decode_uri``): letters, digits and
      ``; , / ? : @ & = + $ - _ . ! ~ * ' ( ) #``. Meant for whole URIs, so
      the structural delimiters survive encoding.
    - **URI component** (``encode_uri_component``/``decode_uri_component``):
      letters, digits and ``- _ . ! ~ * ' ( )``. Meant for a single query
      value or path segment.

Characters outside the set are UTF-8 encoded and written as ``%XX`` with
upper-case hex digits. ``decode_uri`` leaves escapes of the URI delimiters
(``; / ? : @ & = + $ , #``) untouched so decoding never changes a URI's
structure.

Malformed input (a lone surrogate when encoding, a broken escape or invalid
UTF-8 when decoding) yields ``None``; pass ``strict=True`` to get a
:class:`~fekit.core.errors.URIError` instead.
"""

import re
import typing as tp
from urllib.parse import quote

from fekit.core.errors import URIError
from fekit.logger.logger import logger

__all__ = [
    "encode_uri",
    "encode_uri_component",
    "decode_uri",
    "decode_uri_component",
]

# quote() never escapes ASCII letters, digits and "_.-~"; these are the extras
_URI_SAFE = ";,/?:@&=+$!*'()#"
_COMPONENT_SAFE = "!*'()"

# Escapes decode_uri must keep verbatim
_URI_DELIMITERS = frozenset(";/?:@&=+$,#")

_ESCAPE = re.compile(r"%([0-9A-Fa-f]{2})")


def _fail(message: str, strict: bool) -> None:
    if strict:
        raise URIError(message)
    logger.debug(message)
    return None


def _encode(text: str, safe: str, strict: bool) -> tp.Optional[str]:
    try:
        return quote(text, safe=safe, encoding="utf-8", errors="strict")
    except UnicodeEncodeError:
        return _fail(f"URI malformed: lone surrogate in {text!r}", strict)


def _utf8_length(lead: int) -> int:
    """Total byte count of a UTF-8 sequence given its lead byte (0 if invalid)."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _decode(text: str, preserve: tp.FrozenSet[str], strict: bool) -> tp.Optional[str]:
    out: tp.List[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch != "%":
            out.append(ch)
            i += 1
            continue

        match = _ESCAPE.match(text, i)
        if match is None:
            return _fail(f"URI malformed: bad escape at offset {i} in {text!r}", strict)
        lead = int(match.group(1), 16)
        size = _utf8_length(lead)
        if size == 0:
            return _fail(f"URI malformed: invalid UTF-8 lead byte %{lead:02X}", strict)

        # Gather the continuation escapes of a multi-byte sequence
        raw = bytearray([lead])
        end = match.end()
        for _ in range(size - 1):
            cont = _ESCAPE.match(text, end)
            if cont is None:
                return _fail(
                    f"URI malformed: truncated UTF-8 sequence at offset {i}", strict
                )
            raw.append(int(cont.group(1), 16))
            end = cont.end()

        try:
            decoded = bytes(raw).decode("utf-8")
        except UnicodeDecodeError:
            return _fail(f"URI malformed: invalid UTF-8 at offset {i}", strict)

        out.append(text[i:end] if decoded in preserve else decoded)
        i = end
    return "".join(out)


def encode_uri(text: str, strict: bool = False) -> tp.Optional[str]:
    """Percent-encode ``text`` leaving the URI reserved set unescaped.

    Args:
        text: Text to encode.
        strict: Raise ``URIError`` instead of returning None on failure.

    Returns:
        The encoded string, or None if ``text`` contains a lone surrogate.

    Example:
        >>> encode_uri("https://x.org/a b?q=ü#top")
        'https://x.org/a%20b?q=%C3%BC#top'
    """
    return _encode(text, _URI_SAFE, strict)


def encode_uri_component(text: str, strict: bool = False) -> tp.Optional[str]:
    """Percent-encode ``text`` leaving only the URI component set unescaped.

    Example:
        >>> encode_uri_component("a=1&b=2")
        'a%3D1%26b%3D2'
    """
    return _encode(text, _COMPONENT_SAFE, strict)


def decode_uri(text: str, strict: bool = False) -> tp.Optional[str]:
    """Decode escapes produced by :func:`encode_uri`.

    Escapes of ``; / ? : @ & = + $ , #`` are kept as-is.

    Returns:
        The decoded string, or None when ``text`` is malformed.
    """
    return _decode(text, _URI_DELIMITERS, strict)


def decode_uri_component(text: str, strict: bool = False) -> tp.Optional[str]:
    """Decode every escape in ``text``.

    Returns:
        The decoded string, or None when ``text`` is malformed.
    """
    return _decode(text, frozenset(), strict)
