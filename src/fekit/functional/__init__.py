"""Functional primitives for fekit.

Each module extends one native type with the helpers its JavaScript
counterpart offers: ``array`` (lists), ``string`` (str), ``uri`` (percent
encoding), ``date`` (epoch-millisecond dates), ``math`` and ``number``
(numerics) and ``object`` (attribute/key copying). Helpers are stateless and
side-effect-free, except for the documented in-place list mutators and the
``JSDate`` setters.
"""
