"""Tree-to-text serializers."""

from .json_writer import JSONWriter, escape_json_string, to_json_string
from .xml_writer import XMLWriter, escape_xml, to_xml_string

__all__ = [
    "JSONWriter",
    "XMLWriter",
    "escape_json_string",
    "escape_xml",
    "to_json_string",
    "to_xml_string",
]
