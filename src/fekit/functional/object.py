"""Object helpers modelled on lodash ``assign``."""

import dataclasses
from collections.abc import Mapping, MutableMapping
import typing as tp

from pydantic import BaseModel

__all__ = ["assign"]

T = tp.TypeVar("T")


def _own_fields(source: tp.Any) -> tp.Dict[str, tp.Any]:
    """Public fields of ``source`` as a name -> value mapping."""
    if isinstance(source, Mapping):
        return dict(source)
    if isinstance(source, BaseModel):
        return {name: getattr(source, name) for name in type(source).model_fields}
    if dataclasses.is_dataclass(source):
        return {f.name: getattr(source, f.name) for f in dataclasses.fields(source)}
    return {k: v for k, v in vars(source).items() if not k.startswith("_")}


def assign(target: T, *sources: tp.Any) -> T:
    """Copy the public fields of each source onto ``target``, left to right.

    Mappings are read and written by key, pydantic models by field, dataclasses
    by field and other objects by attribute. Later sources win. None sources
    are skipped.

    Args:
        target: Object or mutable mapping to update in place.
        *sources: Objects or mappings to copy from.

    Returns:
        ``target`` itself.

    Example:
        >>> assign({"a": 1}, {"b": 2}, {"a": 3})
        {'a': 3, 'b': 2}
    """
    for source in sources:
        if source is None:
            continue
        for key, value in _own_fields(source).items():
            if isinstance(target, MutableMapping):
                target[key] = value
            else:
                setattr(target, key, value)
    return target
