"""JSON value model.

A parsed JSON document is a strict tree of the six variants below. The
``JsonValue`` union is closed: serializers and the converter dispatch on
exactly these classes.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Tuple, Union

from ..utils.numbers import format_number


@dataclass(frozen=True)
class JsonNull:
    """The JSON ``null`` literal."""

    def __str__(self) -> str:
        return "null"


@dataclass(frozen=True)
class JsonBool:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class JsonNumber:
    value: float

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValueError(f"JsonNumber requires a number, got {type(self.value).__name__}")
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class JsonString:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class JsonArray:
    """Ordered sequence of JSON values."""
    items: Tuple["JsonValue", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index: int) -> "JsonValue":
        return self.items[index]


@dataclass(frozen=True)
class JsonObject:
    """Read-only mapping from string keys to JSON values, insertion order preserved."""
    members: Mapping[str, "JsonValue"] = field(default_factory=dict)

    def __post_init__(self):
        for key in self.members:
            if not isinstance(key, str):
                raise ValueError(f"JsonObject keys must be strings, got {type(key).__name__}")
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    def __hash__(self) -> int:
        return hash(frozenset(self.members.items()))

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, key: str) -> bool:
        return key in self.members

    def __getitem__(self, key: str) -> "JsonValue":
        return self.members[key]

    def keys(self):
        return self.members.keys()

    def items(self):
        return self.members.items()


JsonValue = Union[JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject]

JSON_NULL = JsonNull()


def from_python(data: Any) -> JsonValue:
    """
    Build a JsonValue tree from plain Python data.

    Accepts ``None``, ``bool``, ``int``, ``float``, ``str``, lists/tuples and
    dicts with string keys.

    Raises:
        ValueError: If data contains a type with no JSON counterpart
    """
    if data is None:
        return JSON_NULL
    if isinstance(data, bool):
        return JsonBool(data)
    if isinstance(data, (int, float)):
        return JsonNumber(data)
    if isinstance(data, str):
        return JsonString(data)
    if isinstance(data, (list, tuple)):
        return JsonArray(tuple(from_python(item) for item in data))
    if isinstance(data, dict):
        return JsonObject({key: from_python(value) for key, value in data.items()})
    raise ValueError(f"Unsupported type for JSON value: {type(data).__name__}")


def to_python(value: JsonValue) -> Any:
    """Convert a JsonValue tree to plain Python data (integral numbers become ints)."""
    if isinstance(value, JsonNull):
        return None
    if isinstance(value, JsonBool):
        return value.value
    if isinstance(value, JsonNumber):
        if value.value.is_integer():
            return int(value.value)
        return value.value
    if isinstance(value, JsonString):
        return value.value
    if isinstance(value, JsonArray):
        return [to_python(item) for item in value.items]
    if isinstance(value, JsonObject):
        return {key: to_python(member) for key, member in value.members.items()}
    raise TypeError(f"Not a JSON value: {type(value).__name__}")
