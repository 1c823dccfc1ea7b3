"""Library surface: parse, serialize and convert.

The parse functions never raise on malformed input; they return a
ParseResult holding either the tree or the ParseError.
"""

from typing import Optional

from .converter import Converter
from .json_parser import JSONParser
from .models import JsonObject, JsonValue, XmlNode
from .serializers import to_json_string, to_xml_string
from .types import ParseError, ParseResult
from .xml_parser import XMLParser


def parse_json(text: str) -> ParseResult:
    """Parse JSON text into a JsonValue."""
    try:
        return ParseResult.ok(JSONParser().parse(text))
    except ParseError as e:
        return ParseResult.fail(e)


def parse_xml(text: str) -> ParseResult:
    """Parse XML text into an XmlNode."""
    try:
        return ParseResult.ok(XMLParser().parse(text))
    except ParseError as e:
        return ParseResult.fail(e)


def xml_to_json(node: XmlNode, attribute_prefix: str = "@",
                text_key: str = "#text") -> JsonObject:
    """Convert an XmlNode tree to ``{tag: value}``."""
    return Converter(attribute_prefix=attribute_prefix, text_key=text_key).xml_to_json(node)


def json_to_xml(value: JsonValue, root_tag: Optional[str] = "root",
                attribute_prefix: str = "@", text_key: str = "#text") -> XmlNode:
    """Convert a JsonValue tree to an XmlNode rooted at ``root_tag``."""
    return Converter(attribute_prefix=attribute_prefix, text_key=text_key).json_to_xml(value, root_tag)


__all__ = [
    "parse_json",
    "parse_xml",
    "to_json_string",
    "to_xml_string",
    "xml_to_json",
    "json_to_xml",
]
