"""Sequence helpers modelled on the JavaScript ``Array`` prototype.

Every helper takes the list it operates on as its first argument. Helpers fall
into two groups:

    - **Copying** helpers (``slice``, ``concat``, ``to_sorted``,
      ``to_spliced``, ``to_reversed``, ``with_`` ...) never touch their input.
    - **Mutating** helpers (``fill``, ``push``, ``pop``, ``shift``,
      ``unshift``, ``splice``, ``sort``, ``reverse``) modify the list passed in
      and nothing else.

Index arithmetic follows the host language: a negative index ``-k`` counts
from the end of the list, and range arguments (``start``/``end``) that fall
outside the list are clamped rather than rejected. Lookups that find nothing
return ``None``.

Examples:
    >>> from fekit.functional import array
    >>> array.at([1, 2, 3], -1)
    3
    >>> items = [1, 2, 3, 4, 5]
    >>> array.splice(items, 1, 2, "a")
    [2, 3]
    >>> items
    [1, 'a', 4, 5]
"""

import functools
import typing as tp

__all__ = [
    "first",
    "at",
    "concat",
    "entries",
    "keys",
    "values",
    "every",
    "some",
    "find",
    "find_index",
    "find_last",
    "find_last_index",
    "filter",
    "map",
    "for_each",
    "flat",
    "flat_map",
    "index_of",
    "last_index_of",
    "includes",
    "join",
    "reduce",
    "reduce_right",
    "slice",
    "fill",
    "push",
    "pop",
    "shift",
    "unshift",
    "splice",
    "sort",
    "to_sorted",
    "reverse",
    "to_reversed",
    "to_spliced",
    "with_",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")

_MISSING = object()


# =============================================================================
# Index arithmetic
# =============================================================================


def _relative_index(index: int, length: int) -> int:
    """Resolve a relative start/end argument and clamp it into ``[0, length]``."""
    if index < 0:
        return max(length + index, 0)
    return min(index, length)


def _same_value_zero(a: tp.Any, b: tp.Any) -> bool:
    # NaN is the only value not equal to itself
    return a == b or (a != a and b != b)


def first(array: tp.Sequence[T]) -> tp.Optional[T]:
    """Return the first element, or None for an empty sequence."""
    return array[0] if array else None


def at(array: tp.Sequence[T], index: int) -> tp.Optional[T]:
    """Return the element at ``index``, counting from the end when negative.

    Args:
        array: Sequence to query.
        index: Position; ``-k`` resolves to ``len(array) - k``.

    Returns:
        The element, or None when the resolved position is out of range.
    """
    length = len(array)
    resolved = length + index if index < 0 else index
    if resolved < 0 or resolved >= length:
        return None
    return array[resolved]


def concat(array: tp.Sequence[T], *others: tp.Any) -> tp.List[T]:
    """Return a new list with ``others`` appended.

    List arguments are spread one level; any other argument is appended as a
    single element.
    """
    result = list(array)
    for other in others:
        if isinstance(other, list):
            result.extend(other)
        else:
            result.append(other)
    return result


def entries(array: tp.Sequence[T]) -> tp.List[tp.Tuple[int, T]]:
    return list(enumerate(array))


def keys(array: tp.Sequence[T]) -> tp.List[int]:
    return list(range(len(array)))


def values(array: tp.Sequence[T]) -> tp.List[T]:
    return list(array)


# =============================================================================
# Predicates and searches
# =============================================================================


def every(array: tp.Iterable[T], predicate: tp.Callable[[T], bool]) -> bool:
    """True when ``predicate`` holds for every element (vacuously True)."""
    return all(predicate(item) for item in array)


def some(array: tp.Iterable[T], predicate: tp.Callable[[T], bool]) -> bool:
    """True when ``predicate`` holds for at least one element."""
    return any(predicate(item) for item in array)


def find(array: tp.Sequence[T], predicate: tp.Callable[[T], bool]) -> tp.Optional[T]:
    for item in array:
        if predicate(item):
            return item
    return None


def find_index(
    array: tp.Sequence[T], predicate: tp.Callable[[T], bool]
) -> tp.Optional[int]:
    for i, item in enumerate(array):
        if predicate(item):
            return i
    return None


def find_last(
    array: tp.Sequence[T], predicate: tp.Callable[[T], bool]
) -> tp.Optional[T]:
    index = find_last_index(array, predicate)
    return None if index is None else array[index]


def find_last_index(
    array: tp.Sequence[T], predicate: tp.Callable[[T], bool]
) -> tp.Optional[int]:
    for i in range(len(array) - 1, -1, -1):
        if predicate(array[i]):
            return i
    return None


def index_of(
    array: tp.Sequence[T], value: T, from_index: int = 0
) -> tp.Optional[int]:
    """Position of the first element equal to ``value``.

    Args:
        array: Sequence to search.
        value: Value to look for (compared with ``==``).
        from_index: Where to start; negative values count from the end.

    Returns:
        The index, or None when ``value`` does not occur.
    """
    for i in range(_relative_index(from_index, len(array)), len(array)):
        if array[i] == value:
            return i
    return None


def last_index_of(
    array: tp.Sequence[T], value: T, from_index: tp.Optional[int] = None
) -> tp.Optional[int]:
    """Position of the last element equal to ``value`` at or before ``from_index``."""
    length = len(array)
    if from_index is None:
        start = length - 1
    elif from_index < 0:
        start = length + from_index
    else:
        start = min(from_index, length - 1)
    for i in range(start, -1, -1):
        if array[i] == value:
            return i
    return None


def includes(array: tp.Sequence[T], value: T, from_index: int = 0) -> bool:
    """Membership test that, unlike ``in``, treats NaN as equal to NaN."""
    return any(
        _same_value_zero(array[i], value)
        for i in range(_relative_index(from_index, len(array)), len(array))
    )


# =============================================================================
# Transformations
# =============================================================================


def filter(array: tp.Iterable[T], predicate: tp.Callable[[T], bool]) -> tp.List[T]:
    return [item for item in array if predicate(item)]


def map(array: tp.Iterable[T], callback: tp.Callable[[T], U]) -> tp.List[U]:
    return [callback(item) for item in array]


def for_each(array: tp.Iterable[T], callback: tp.Callable[[T], tp.Any]) -> None:
    for item in array:
        callback(item)


def flat(array: tp.Sequence[tp.Any], depth: int = 1) -> tp.List[tp.Any]:
    """Flatten nested lists up to ``depth`` levels."""
    result: tp.List[tp.Any] = []
    for item in array:
        if isinstance(item, list) and depth > 0:
            result.extend(flat(item, depth - 1))
        else:
            result.append(item)
    return result


def flat_map(
    array: tp.Iterable[T], callback: tp.Callable[[T], tp.Any]
) -> tp.List[tp.Any]:
    """Map each element, then flatten the results by one level."""
    return flat([callback(item) for item in array], 1)


def _join_part(item: tp.Any) -> str:
    if item is None:
        return ""
    if isinstance(item, list):
        return ",".join(_join_part(x) for x in item)
    return str(item)


def join(array: tp.Iterable[tp.Any], separator: str = ",") -> str:
    """Concatenate the string forms of the elements.

    None renders as an empty string and nested lists render comma-separated.
    """
    return separator.join(_join_part(item) for item in array)


def reduce(
    array: tp.Sequence[T],
    callback: tp.Callable[[tp.Any, T], tp.Any],
    initial: tp.Any = _MISSING,
) -> tp.Any:
    """Fold the elements left to right.

    Raises:
        TypeError: If the sequence is empty and no initial value is given.
    """
    if initial is _MISSING:
        if not array:
            raise TypeError("reduce of empty sequence with no initial value")
        return functools.reduce(callback, array)
    return functools.reduce(callback, array, initial)


def reduce_right(
    array: tp.Sequence[T],
    callback: tp.Callable[[tp.Any, T], tp.Any],
    initial: tp.Any = _MISSING,
) -> tp.Any:
    """Fold the elements right to left."""
    return reduce(list(reversed(array)), callback, initial)


def slice(
    array: tp.Sequence[T], start: int = 0, end: tp.Optional[int] = None
) -> tp.List[T]:
    """Copy the half-open range ``[start, end)``.

    Both bounds accept negative (from-end) values and are clamped to the
    sequence, so out-of-range arguments give a shorter or empty result.
    """
    length = len(array)
    lo = _relative_index(start, length)
    hi = length if end is None else _relative_index(end, length)
    return list(array[lo:hi]) if lo < hi else []


def to_spliced(
    array: tp.Sequence[T],
    start: int,
    delete_count: tp.Optional[int] = None,
    *items: T,
) -> tp.List[T]:
    """Copying counterpart of :func:`splice`; returns the spliced copy."""
    result = list(array)
    splice(result, start, delete_count, *items)
    return result


def to_sorted(
    array: tp.Iterable[T],
    compare: tp.Optional[tp.Callable[[T, T], int]] = None,
    *,
    key: tp.Optional[tp.Callable[[T], tp.Any]] = None,
) -> tp.List[T]:
    """Return a stably sorted copy.

    Args:
        array: Elements to sort.
        compare: Optional three-way comparator returning a negative number,
            zero or a positive number.
        key: Optional key function, used when no comparator is given.
    """
    if compare is not None:
        return sorted(array, key=functools.cmp_to_key(compare))
    return sorted(array, key=key)


def to_reversed(array: tp.Sequence[T]) -> tp.List[T]:
    return list(reversed(array))


def with_(array: tp.Sequence[T], index: int, value: T) -> tp.List[T]:
    """Copy of ``array`` with the element at ``index`` replaced.

    Raises:
        IndexError: If ``index`` does not resolve to an existing position.
    """
    length = len(array)
    resolved = length + index if index < 0 else index
    if resolved < 0 or resolved >= length:
        raise IndexError(f"Index {index} out of range for length {length}")
    result = list(array)
    result[resolved] = value
    return result


# =============================================================================
# Mutating helpers
# =============================================================================


def fill(
    array: tp.MutableSequence[T], value: T, start: int = 0, end: tp.Optional[int] = None
) -> tp.MutableSequence[T]:
    """Overwrite ``[start, end)`` with ``value`` in place and return the list."""
    length = len(array)
    lo = _relative_index(start, length)
    hi = length if end is None else _relative_index(end, length)
    for i in range(lo, hi):
        array[i] = value
    return array


def push(array: tp.MutableSequence[T], *items: T) -> int:
    """Append ``items`` and return the new length."""
    array.extend(items)
    return len(array)


def pop(array: tp.MutableSequence[T]) -> tp.Optional[T]:
    return array.pop() if array else None


def shift(array: tp.MutableSequence[T]) -> tp.Optional[T]:
    return array.pop(0) if array else None


def unshift(array: tp.MutableSequence[T], *items: T) -> int:
    """Prepend ``items`` (keeping their order) and return the new length."""
    array[0:0] = items
    return len(array)


def splice(
    array: tp.MutableSequence[T],
    start: int,
    delete_count: tp.Optional[int] = None,
    *items: T,
) -> tp.List[T]:
    """Remove and/or insert elements in place.

    Args:
        array: List to modify.
        start: Where to start; negative values count from the end and the
            result is clamped to the list.
        delete_count: How many elements to remove. Defaults to everything
            from ``start`` onwards; clamped to what is available.
        *items: Elements to insert at ``start``.

    Returns:
        The removed elements.
    """
    length = len(array)
    lo = _relative_index(start, length)
    if delete_count is None:
        count = length - lo
    else:
        count = min(max(delete_count, 0), length - lo)
    removed = list(array[lo : lo + count])
    array[lo : lo + count] = items
    return removed


def sort(
    array: tp.MutableSequence[T],
    compare: tp.Optional[tp.Callable[[T, T], int]] = None,
    *,
    key: tp.Optional[tp.Callable[[T], tp.Any]] = None,
) -> tp.MutableSequence[T]:
    """Sort in place (stable) and return the same list. See :func:`to_sorted`."""
    array[:] = to_sorted(array, compare, key=key)
    return array


def reverse(array: tp.MutableSequence[T]) -> tp.MutableSequence[T]:
    array.reverse()
    return array
