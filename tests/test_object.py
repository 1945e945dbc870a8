from dataclasses import dataclass

from pydantic import BaseModel
from fekit.functional import object as obj


class Point(BaseModel):
    x: int = 0
    y: int = 0


@dataclass
class Size:
    width: int
    height: int


class Plain:
    def __init__(self, **kwargs):
        self._hidden = "secret"
        for key, value in kwargs.items():
            setattr(self, key, value)


def test_assign_mappings():
    target = {"a": 1}
    result = obj.assign(target, {"b": 2}, {"a": 3})
    assert result is target
    assert target == {"a": 3, "b": 2}


def test_assign_skips_none_sources():
    assert obj.assign({"a": 1}, None, {"b": 2}) == {"a": 1, "b": 2}


def test_assign_from_pydantic_model():
    target = obj.assign({}, Point(x=1, y=2))
    assert target == {"x": 1, "y": 2}


def test_assign_onto_pydantic_model():
    point = Point()
    obj.assign(point, {"x": 5})
    assert point.x == 5
    assert point.y == 0


def test_assign_from_dataclass():
    assert obj.assign({}, Size(3, 4)) == {"width": 3, "height": 4}


def test_assign_plain_objects_copies_public_attributes():
    target = Plain()
    obj.assign(target, Plain(a=1, b=2), {"c": 3})
    assert target.a == 1
    assert target.b == 2
    assert target.c == 3
    assert target._hidden == "secret"


def test_assign_no_sources():
    target = {"a": 1}
    assert obj.assign(target) == {"a": 1}
