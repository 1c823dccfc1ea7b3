"""
XML/JSON Converter - Parse XML and JSON and convert losslessly between them.

XML elements map to single-key JSON objects; attributes use the ``@``
prefix and mixed text uses the ``#text`` key.
"""

__version__ = "1.0.0"

from .api import (
    json_to_xml,
    parse_json,
    parse_xml,
    to_json_string,
    to_xml_string,
    xml_to_json,
)
from .converter import Converter
from .json_parser import JSONParser
from .models import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    XmlNode,
)
from .types import ConversionResult, ErrorType, ParseError, ParseResult, SourceFormat
from .xml_json_converter import XMLJSONConverter
from .xml_parser import XMLParser

__all__ = [
    "XMLJSONConverter",
    "Converter",
    "JSONParser",
    "XMLParser",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "XmlNode",
    "ConversionResult",
    "ErrorType",
    "ParseError",
    "ParseResult",
    "SourceFormat",
    "parse_json",
    "parse_xml",
    "to_json_string",
    "to_xml_string",
    "xml_to_json",
    "json_to_xml",
]
