"""Math helpers modelled on the JavaScript ``Math`` namespace.

The helpers are thin wrappers over NumPy ufuncs, so each accepts either a
scalar (and returns a Python scalar) or an array-like (and returns an
``ndarray``). Domain errors follow JavaScript and produce NaN or infinities
rather than warnings or exceptions, e.g. ``sqrt(-1)`` is NaN and ``log(0)``
is ``-inf``.

``round`` deliberately differs from Python's built-in: halves are rounded
towards positive infinity, so ``round(2.5) == 3`` and ``round(-3.5) == -3``.

Random numbers come from a module-level ``numpy.random.Generator`` seeded from
``settings.RANDOM_SEED`` (unseeded when unset); call :func:`seed` to reseed.
"""

import typing as tp

import numpy as np
import numpy.typing as npt

from fekit.core.config import settings

__all__ = [
    "PI",
    "E",
    "seed",
    "random",
    "random_range",
    "random_int",
    "round",
    "floor",
    "ceil",
    "trunc",
    "abs",
    "min",
    "max",
    "pow",
    "sqrt",
    "sin",
    "cos",
    "tan",
    "log",
]

PI: float = float(np.pi)
E: float = float(np.e)

Numeric = tp.Union[int, float, npt.ArrayLike]

_rng = np.random.default_rng(settings.RANDOM_SEED)


def _scalar(result: tp.Any) -> tp.Any:
    """Unwrap 0-d results into Python scalars; leave arrays untouched."""
    return result.item() if np.ndim(result) == 0 else result


def _integral(result: np.ndarray) -> tp.Any:
    # Finite scalar results become ints; NaN and infinities stay floats
    if np.ndim(result) == 0:
        value = float(result)
        return int(value) if np.isfinite(value) else value
    return result


# =============================================================================
# Random numbers
# =============================================================================


def seed(value: tp.Optional[int] = None) -> None:
    """Replace the module generator with one seeded from ``value``."""
    global _rng
    _rng = np.random.default_rng(value)


def random() -> float:
    """Uniform float in ``[0, 1)``."""
    return float(_rng.random())


def random_range(low: int, high: int) -> int:
    """Uniform integer in ``[low, high)``.

    Raises:
        ValueError: If ``low >= high``.
    """
    return int(_rng.integers(low, high))


def random_int(low: int, high: int) -> int:
    """Uniform integer in ``[low, high]``.

    Raises:
        ValueError: If ``low > high``.
    """
    return int(_rng.integers(low, high, endpoint=True))


# =============================================================================
# Rounding
# =============================================================================


def round(x: Numeric) -> tp.Any:
    """Round to the nearest integer, sending halves towards positive infinity.

    Args:
        x: Scalar or array-like.

    Returns:
        An int for finite scalars (NaN/inf pass through as floats), or a
        float array for array input.

    Example:
        >>> round(3.5), round(-3.5), round(-3.6)
        (4, -3, -4)
    """
    values = np.asarray(x, dtype=float)
    with np.errstate(invalid="ignore"):
        floor_ = np.floor(values)
        # x - floor(x) is exact, unlike floor(x + 0.5) near 0.5 - ulp
        result = np.where(values - floor_ >= 0.5, floor_ + 1, floor_)
    return _integral(result)


def floor(x: Numeric) -> tp.Any:
    return _integral(np.floor(np.asarray(x, dtype=float)))


def ceil(x: Numeric) -> tp.Any:
    return _integral(np.ceil(np.asarray(x, dtype=float)))


def trunc(x: Numeric) -> tp.Any:
    """Drop the fractional part, keeping a float result."""
    return _scalar(np.trunc(np.asarray(x, dtype=float)))


# =============================================================================
# Arithmetic
# =============================================================================


def abs(x: Numeric) -> tp.Any:
    return _scalar(np.abs(x))


def min(*values: float) -> float:
    """Smallest argument; ``inf`` with no arguments, NaN if any argument is NaN."""
    if not values:
        return float("inf")
    return _scalar(np.min(np.asarray(values, dtype=float)))


def max(*values: float) -> float:
    """Largest argument; ``-inf`` with no arguments, NaN if any argument is NaN."""
    if not values:
        return float("-inf")
    return _scalar(np.max(np.asarray(values, dtype=float)))


def pow(base: Numeric, exponent: Numeric) -> tp.Any:
    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        return _scalar(np.power(np.asarray(base, dtype=float), exponent))


def sqrt(x: Numeric) -> tp.Any:
    with np.errstate(invalid="ignore"):
        return _scalar(np.sqrt(np.asarray(x, dtype=float)))


def log(x: Numeric) -> tp.Any:
    """Natural logarithm."""
    with np.errstate(invalid="ignore", divide="ignore"):
        return _scalar(np.log(np.asarray(x, dtype=float)))


# =============================================================================
# Trigonometry (radians)
# =============================================================================


def sin(x: Numeric) -> tp.Any:
    return _scalar(np.sin(np.asarray(x, dtype=float)))


def cos(x: Numeric) -> tp.Any:
    return _scalar(np.cos(np.asarray(x, dtype=float)))


def tan(x: Numeric) -> tp.Any:
    return _scalar(np.tan(np.asarray(x, dtype=float)))
