"""fekit: JavaScript/lodash-style helpers for Python's native types."""

from fekit.functional import array, date, math, number, object, string, uri
from fekit.functional.date import JSDate

__version__ = "0.1.0"

__all__ = [
    "array",
    "date",
    "math",
    "number",
    "object",
    "string",
    "uri",
    "JSDate",
]
