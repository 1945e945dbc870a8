"""Text helpers modelled on the JavaScript ``String`` API.

Positions and lengths are measured in UTF-16 code units, the unit JavaScript
strings are indexed by. For text made only of Basic Multilingual Plane
characters this is identical to Python's own indexing; a character outside
the BMP (most emoji, for instance) occupies two positions, and slicing
through the middle of it yields a lone surrogate, exactly as in JavaScript.

Lookups that fail return the host's sentinels: ``None`` for ``at`` and the
``*_code*_at`` helpers, ``""`` for ``char_at`` and ``-1`` for the
``*index_of`` searches.

Examples:
    >>> from fekit.functional import string
    >>> string.length("a😀")
    3
    >>> string.code_point_at("a😀", 1)
    128512
    >>> string.pad_start("7", 3, "0")
    '007'
"""

import typing as tp
import unicodedata

import annotated_types as at_
from pydantic import validate_call

from fekit.core.enums import CompareOptions, NormalizationForm, Ordering

__all__ = [
    "from_char_code",
    "from_code_point",
    "length",
    "at",
    "char_at",
    "char_code_at",
    "code_point_at",
    "concat",
    "repeat",
    "starts_with",
    "ends_with",
    "includes",
    "index_of",
    "last_index_of",
    "slice",
    "substring",
    "pad_start",
    "pad_end",
    "trim",
    "trim_start",
    "trim_end",
    "split",
    "to_upper_case",
    "to_lower_case",
    "locale_compare",
    "normalize",
]

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)

# WhiteSpace and LineTerminator code points recognised by String.prototype.trim
_WHITESPACE = "".join(
    chr(c)
    for c in (
        0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x1680,
        *range(0x2000, 0x200B),
        0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF,
    )
)


# =============================================================================
# UTF-16 view
# =============================================================================


def _units(text: str) -> str:
    """Re-express ``text`` with one Python character per UTF-16 code unit."""
    if text.isascii():
        return text
    parts = []
    for ch in text:
        cp = ord(ch)
        if cp < 0x10000:
            parts.append(ch)
        else:
            cp -= 0x10000
            parts.append(chr(0xD800 + (cp >> 10)) + chr(0xDC00 + (cp & 0x3FF)))
    return "".join(parts)


def _text(units: str) -> str:
    """Inverse of :func:`_units`: recombine surrogate pairs, keep lone ones."""
    if units.isascii():
        return units
    return units.encode("utf-16-le", "surrogatepass").decode(
        "utf-16-le", "surrogatepass"
    )


def _clamp(position: int, length: int) -> int:
    return min(max(position, 0), length)


def _relative(position: int, length: int) -> int:
    if position < 0:
        return max(length + position, 0)
    return min(position, length)


# =============================================================================
# Construction
# =============================================================================


def from_char_code(*units: int) -> str:
    """Build a string from UTF-16 code units.

    A high surrogate followed by a low surrogate combines into a single code
    point; values are reduced modulo 2**16 as in JavaScript.
    """
    return _text("".join(chr(u & 0xFFFF) for u in units))


def from_code_point(*points: int) -> str:
    """Build a string from code points, skipping values outside 0..0x10FFFF."""
    return "".join(chr(p) for p in points if 0 <= p <= 0x10FFFF)


# =============================================================================
# Indexing
# =============================================================================


def length(text: str) -> int:
    """Number of UTF-16 code units in ``text``."""
    return len(_units(text))


def at(text: str, index: int) -> tp.Optional[str]:
    """Code unit at ``index`` (negative counts from the end), or None."""
    units = _units(text)
    resolved = len(units) + index if index < 0 else index
    if resolved < 0 or resolved >= len(units):
        return None
    return units[resolved]


def char_at(text: str, index: int = 0) -> str:
    """Code unit at ``index``, or ``""`` when out of range.

    Unlike :func:`at`, negative indices are not resolved from the end.
    """
    units = _units(text)
    if index < 0 or index >= len(units):
        return ""
    return units[index]


def char_code_at(text: str, index: int = 0) -> tp.Optional[int]:
    """UTF-16 code unit value at ``index``, or None when out of range."""
    units = _units(text)
    if index < 0 or index >= len(units):
        return None
    return ord(units[index])


def code_point_at(text: str, index: int = 0) -> tp.Optional[int]:
    """Code point starting at ``index``.

    When ``index`` points at the high half of a surrogate pair the full code
    point is returned; at a low half (or a lone surrogate) the unit itself is
    returned.
    """
    units = _units(text)
    if index < 0 or index >= len(units):
        return None
    first = ord(units[index])
    if first in _HIGH_SURROGATES and index + 1 < len(units):
        second = ord(units[index + 1])
        if second in _LOW_SURROGATES:
            return 0x10000 + ((first - 0xD800) << 10) + (second - 0xDC00)
    return first


# =============================================================================
# Searching
# =============================================================================


def concat(text: str, *strings: tp.Any) -> str:
    return text + "".join(str(s) for s in strings)


@validate_call
def repeat(text: str, count: tp.Annotated[int, at_.Ge(0)]) -> str:
    return text * count


def starts_with(text: str, search: str, position: int = 0) -> bool:
    units = _units(text)
    start = _clamp(position, len(units))
    return units.startswith(_units(search), start)


def ends_with(text: str, search: str, end_position: tp.Optional[int] = None) -> bool:
    """True when ``text[:end_position]`` ends with ``search``.

    ``end_position`` defaults to the length of ``text`` and is clamped to
    ``[0, length]``.
    """
    units = _units(text)
    end = len(units) if end_position is None else _clamp(end_position, len(units))
    return units.endswith(_units(search), 0, end)


def includes(text: str, search: str, position: int = 0) -> bool:
    return index_of(text, search, position) != -1


def index_of(text: str, search: str, position: int = 0) -> int:
    """First position of ``search`` at or after ``position``, else -1."""
    units = _units(text)
    return units.find(_units(search), _clamp(position, len(units)))


def last_index_of(text: str, search: str, position: tp.Optional[int] = None) -> int:
    """Last position of ``search`` that starts at or before ``position``, else -1.

    An empty ``search`` matches at ``min(position, length)``.
    """
    units = _units(text)
    needle = _units(search)
    start = len(units) if position is None else _clamp(position, len(units))
    return units.rfind(needle, 0, start + len(needle))


# =============================================================================
# Extraction and padding
# =============================================================================


def slice(text: str, start: int = 0, end: tp.Optional[int] = None) -> str:
    """Half-open ``[start, end)`` range with negative indices counted from the end."""
    units = _units(text)
    lo = _relative(start, len(units))
    hi = len(units) if end is None else _relative(end, len(units))
    return _text(units[lo:hi]) if lo < hi else ""


def substring(text: str, start: int, end: tp.Optional[int] = None) -> str:
    """Like :func:`slice`, but negative bounds clamp to 0 and swapped bounds are reordered."""
    units = _units(text)
    lo = _clamp(start, len(units))
    hi = len(units) if end is None else _clamp(end, len(units))
    if lo > hi:
        lo, hi = hi, lo
    return _text(units[lo:hi])


def _padding(units: str, target_length: int, pad_string: str) -> str:
    pad = _units(pad_string)
    missing = target_length - len(units)
    if missing <= 0 or not pad:
        return ""
    return (pad * (missing // len(pad) + 1))[:missing]


def pad_start(text: str, target_length: int, pad_string: str = " ") -> str:
    """Left-pad ``text`` with repetitions of ``pad_string`` up to ``target_length`` units."""
    units = _units(text)
    return _text(_padding(units, target_length, pad_string) + units)


def pad_end(text: str, target_length: int, pad_string: str = " ") -> str:
    """Right-pad ``text`` with repetitions of ``pad_string`` up to ``target_length`` units."""
    units = _units(text)
    return _text(units + _padding(units, target_length, pad_string))


def trim(text: str) -> str:
    return text.strip(_WHITESPACE)


def trim_start(text: str) -> str:
    return text.lstrip(_WHITESPACE)


def trim_end(text: str) -> str:
    return text.rstrip(_WHITESPACE)


def split(
    text: str, separator: tp.Optional[str] = None, limit: tp.Optional[int] = None
) -> tp.List[str]:
    """Split on ``separator``.

    No separator gives ``[text]``; an empty separator splits into code units.
    ``limit`` caps the number of returned pieces.
    """
    if separator is None:
        parts = [text]
    elif separator == "":
        parts = [_text(u) for u in _units(text)]
    else:
        parts = text.split(separator)
    return parts if limit is None else parts[: max(limit, 0)]


def to_upper_case(text: str) -> str:
    return text.upper()


def to_lower_case(text: str) -> str:
    return text.lower()


# =============================================================================
# Comparison and normalization
# =============================================================================


def _collation_key(text: str, options: CompareOptions) -> tp.Tuple[tp.Tuple, ...]:
    """Three-level sort key: base letters, then diacritics, then case.

    Primary tokens are ``(rank, number, base)``; rank 0 is punctuation and
    spacing, rank 1 digits, rank 2 everything else. With ``NUMERIC`` a run of
    decimal digits collapses into one token carrying its value.
    """
    if CompareOptions.WIDTH_INSENSITIVE in options:
        text = unicodedata.normalize("NFKC", text)

    # Group each base character with the combining marks that follow it
    elements: tp.List[tp.List[tp.Any]] = []
    for ch in unicodedata.normalize("NFD", text):
        if unicodedata.combining(ch) and elements:
            elements[-1][1] += ch
        else:
            elements.append([ch, ""])

    numeric = CompareOptions.NUMERIC in options
    primary, secondary, tertiary = [], [], []
    i = 0
    while i < len(elements):
        base, marks = elements[i]
        if base.isdecimal():
            j = i + 1
            if numeric:
                while j < len(elements) and elements[j][0].isdecimal():
                    j += 1
            run = elements[i:j]
            value = int("".join(str(unicodedata.decimal(b)) for b, _ in run))
            primary.append((1, value, ""))
            secondary.append("".join(m for _, m in run))
            tertiary.append(0)
            i = j
            continue
        rank = 2 if base.isalpha() else 0
        primary.append((rank, 0, base.casefold()))
        secondary.append(marks)
        tertiary.append(1 if base.isupper() else 0)
        i += 1

    levels: tp.List[tp.Tuple] = [tuple(primary)]
    if CompareOptions.DIACRITIC_INSENSITIVE not in options:
        levels.append(tuple(secondary))
    if CompareOptions.CASE_INSENSITIVE not in options:
        levels.append(tuple(tertiary))
    return tuple(levels)


def locale_compare(
    text: str, other: str, options: CompareOptions = CompareOptions.NONE
) -> Ordering:
    """Compare two strings in dictionary order rather than code-point order.

    Strings are compared first by their base letters (ignoring accents and
    case), then by accents, then by case with lower case sorting first, so
    ``"a" < "B" < "b"`` and ``"cafe" < "café"``.

    Args:
        text: Left-hand string.
        other: Right-hand string.
        options: ``CompareOptions`` flags that drop levels or enable numeric
            ordering of digit runs.

    Returns:
        The ``Ordering`` of ``text`` relative to ``other``.
    """
    return Ordering.of(_collation_key(text, options), _collation_key(other, options))


def normalize(
    text: str, form: tp.Union[NormalizationForm, str] = NormalizationForm.NFC
) -> str:
    """Apply Unicode normalization form ``form`` (NFC, NFD, NFKC or NFKD)."""
    return unicodedata.normalize(NormalizationForm(form).value, text)
