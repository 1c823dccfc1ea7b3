"""JSON serialization of JsonValue trees."""

from typing import List, Optional

from ..models import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)
from ..utils.numbers import format_number


_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\b": "\\b",
    "\f": "\\f",
}


def escape_json_string(value: str) -> str:
    """Quote a string, escaping quotes, backslashes and control characters."""
    parts = ['"']
    for char in value:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif char < " ":
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)


class JSONWriter:
    """
    Writes JsonValue trees as JSON text.

    Output is compact unless ``indent`` is given, in which case nested
    containers are laid out one member per line.
    """

    def __init__(self, indent: Optional[int] = None):
        """
        Initialize the JSON writer.

        Args:
            indent: Spaces per nesting level, or None for compact output
        """
        if indent is not None and indent < 0:
            raise ValueError("indent must be non-negative")
        self.indent = indent

    def write(self, value: JsonValue) -> str:
        parts: List[str] = []
        self._write_value(value, parts, 0)
        return "".join(parts)

    def _write_value(self, value: JsonValue, parts: List[str], level: int) -> None:
        if isinstance(value, JsonNull):
            parts.append("null")
        elif isinstance(value, JsonBool):
            parts.append("true" if value.value else "false")
        elif isinstance(value, JsonNumber):
            parts.append(format_number(value.value))
        elif isinstance(value, JsonString):
            parts.append(escape_json_string(value.value))
        elif isinstance(value, JsonArray):
            self._write_container("[", "]", value.items, parts, level, self._write_item)
        elif isinstance(value, JsonObject):
            self._write_container("{", "}", list(value.members.items()), parts, level, self._write_member)
        else:
            raise TypeError(f"Not a JSON value: {type(value).__name__}")

    def _write_item(self, item: JsonValue, parts: List[str], level: int) -> None:
        self._write_value(item, parts, level)

    def _write_member(self, member, parts: List[str], level: int) -> None:
        key, value = member
        parts.append(escape_json_string(key))
        parts.append(":" if self.indent is None else ": ")
        self._write_value(value, parts, level)

    def _write_container(self, opener, closer, entries, parts, level, write_entry) -> None:
        parts.append(opener)
        if not entries:
            parts.append(closer)
            return

        if self.indent is None:
            for index, entry in enumerate(entries):
                if index:
                    parts.append(",")
                write_entry(entry, parts, level + 1)
        else:
            inner = "\n" + " " * (self.indent * (level + 1))
            for index, entry in enumerate(entries):
                if index:
                    parts.append(",")
                parts.append(inner)
                write_entry(entry, parts, level + 1)
            parts.append("\n" + " " * (self.indent * level))
        parts.append(closer)


def to_json_string(value: JsonValue, indent: Optional[int] = None) -> str:
    """Serialize a JsonValue tree to JSON text."""
    return JSONWriter(indent=indent).write(value)
