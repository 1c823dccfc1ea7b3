"""Data models for the XML/JSON converter."""

from .json_value import (
    JSON_NULL,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    from_python,
    to_python,
)
from .xml_node import XmlNode

__all__ = [
    "JSON_NULL",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "XmlNode",
    "from_python",
    "to_python",
]
