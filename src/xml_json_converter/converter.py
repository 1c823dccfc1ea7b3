"""Bidirectional structural mapping between XmlNode and JsonValue trees.

Mapping conventions:

- An element becomes ``{tag: value}``.
- Attributes become keys with the attribute prefix (default ``@``) and
  keep their string values.
- Text that sits next to attributes or child elements is stored under the
  text key (default ``#text``).
- Same-tag siblings collapse into one array under the shared tag, in
  document order.
- A text-only leaf becomes a Bool, Null or Number when its text is exactly
  ``true``/``false``, ``null`` or a JSON number; otherwise a String.
- An element with nothing inside maps to ``null``.

In the JSON to XML direction any key starting with the attribute prefix, and
the text key itself, are reserved for these roles.

Arrays repeat their key as the sibling tag: ``{"r": {"a": [1, 2]}}`` gives
``<r><a>1</a><a>2</a></r>``. The root is the exception, since its key
already names the root element: ``{"a": [1, 2]}`` gives
``<a><item>1</item><item>2</item></a>``. A bare array is wrapped the same
way under the root tag.
"""

import logging
from typing import Dict, List, Optional

from .models import (
    JSON_NULL,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    XmlNode,
)
from .serializers.json_writer import to_json_string
from .utils.numbers import format_number, parse_number
from .xml_parser import is_name_char


def coerce_text(text: str) -> JsonValue:
    """Convert leaf text to the JSON scalar it spells, or keep it a string."""
    if text == "true":
        return JsonBool(True)
    if text == "false":
        return JsonBool(False)
    if text == "null":
        return JSON_NULL

    number = parse_number(text)
    if number is not None:
        return JsonNumber(number)
    return JsonString(text)


def stringify_scalar(value: JsonValue) -> str:
    """Canonical text form of a value used as element text or attribute value."""
    if isinstance(value, JsonString):
        return value.value
    if isinstance(value, JsonNumber):
        return format_number(value.value)
    if isinstance(value, JsonBool):
        return "true" if value.value else "false"
    if isinstance(value, JsonNull):
        return ""
    return to_json_string(value)


def sanitize_name(name: str) -> str:
    """Make ``name`` usable as a tag or attribute name."""
    cleaned = "".join(char if is_name_char(char) else "_" for char in name)
    return cleaned or "_"


class Converter:
    """
    Pure structural converter between XML and JSON trees.

    Both directions are total over well-formed trees and never raise on
    content; they only log at DEBUG.
    """

    def __init__(self, attribute_prefix: str = "@", text_key: str = "#text",
                 item_tag: str = "item", default_root_tag: str = "root",
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the converter.

        Args:
            attribute_prefix: Prefix marking attribute keys in JSON objects
            text_key: Key holding element text next to attributes/children
            item_tag: Tag for entries of arrays that are not under a named key
            default_root_tag: Root tag used by json_to_xml when none is given
            logger: Optional logger instance
        """
        if not attribute_prefix:
            raise ValueError("attribute_prefix cannot be empty")
        if not text_key:
            raise ValueError("text_key cannot be empty")
        if text_key.startswith(attribute_prefix):
            raise ValueError("text_key cannot start with the attribute prefix")
        if sanitize_name(item_tag) != item_tag:
            raise ValueError(f"item_tag is not a valid tag name: {item_tag!r}")
        if sanitize_name(default_root_tag) != default_root_tag:
            raise ValueError(f"default_root_tag is not a valid tag name: {default_root_tag!r}")

        self.attribute_prefix = attribute_prefix
        self.text_key = text_key
        self.item_tag = item_tag
        self.default_root_tag = default_root_tag
        self.logger = logger or logging.getLogger(__name__)

    def is_reserved_key(self, key: str) -> bool:
        return key.startswith(self.attribute_prefix) or key == self.text_key

    # ------------------------------------------------------------------
    # XML -> JSON
    # ------------------------------------------------------------------

    def xml_to_json(self, node: XmlNode) -> JsonObject:
        """
        Convert an element tree to ``{root_tag: value}``.

        Args:
            node: Root element

        Returns:
            Single-key JsonObject keyed by the root tag
        """
        result = JsonObject({node.tag: self._element_value(node)})
        self.logger.debug(f"Converted <{node.tag}> to JSON")
        return result

    def _element_value(self, node: XmlNode) -> JsonValue:
        if not node.attributes and not node.children:
            if node.text is None:
                return JSON_NULL
            return coerce_text(node.text)

        members: Dict[str, JsonValue] = {}
        for name, value in node.attributes.items():
            members[self.attribute_prefix + name] = JsonString(value)

        if node.text is not None:
            members[self.text_key] = coerce_text(node.text)

        grouped: Dict[str, List[JsonValue]] = {}
        for child in node.children:
            grouped.setdefault(child.tag, []).append(self._element_value(child))

        for tag, values in grouped.items():
            members[tag] = values[0] if len(values) == 1 else JsonArray(values)

        return JsonObject(members)

    # ------------------------------------------------------------------
    # JSON -> XML
    # ------------------------------------------------------------------

    def json_to_xml(self, value: JsonValue, root_tag: Optional[str] = None) -> XmlNode:
        """
        Convert a JSON value to an element tree.

        A single-key object whose key is not reserved names its own root and
        ``root_tag`` is ignored; anything else is wrapped in ``root_tag``.

        Args:
            value: JSON value to convert
            root_tag: Tag for the root element (defaults to default_root_tag)

        Returns:
            Root XmlNode
        """
        if isinstance(value, JsonObject) and len(value) == 1:
            key, inner = next(iter(value.items()))
            if not self.is_reserved_key(key):
                node = self._build_element(sanitize_name(key), inner)
                self.logger.debug(f"Converted JSON to <{node.tag}> using its own root key")
                return node

        tag = sanitize_name(root_tag or self.default_root_tag)
        node = self._build_element(tag, value)
        self.logger.debug(f"Converted JSON to <{tag}>")
        return node

    def _build_element(self, tag: str, value: JsonValue) -> XmlNode:
        attributes: Dict[str, str] = {}
        children: List[XmlNode] = []
        text: Optional[str] = None

        if isinstance(value, JsonObject):
            for key, member in value.items():
                if key == self.text_key:
                    text = stringify_scalar(member) or None
                elif key.startswith(self.attribute_prefix):
                    name = sanitize_name(key[len(self.attribute_prefix):])
                    attributes[name] = stringify_scalar(member)
                elif isinstance(member, JsonArray):
                    child_tag = sanitize_name(key)
                    for item in member:
                        children.append(self._build_element(child_tag, item))
                else:
                    children.append(self._build_element(sanitize_name(key), member))
        elif isinstance(value, JsonArray):
            for item in value:
                children.append(self._build_element(self.item_tag, item))
        elif not isinstance(value, JsonNull):
            text = stringify_scalar(value) or None

        return XmlNode(tag=tag, attributes=attributes, children=children, text=text)

