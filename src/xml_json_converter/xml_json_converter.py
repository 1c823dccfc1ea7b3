"""Main XML/JSON converter implementation."""

import logging
from typing import Optional

from .converter import Converter
from .error_handler import ErrorHandler
from .json_parser import JSONParser
from .profiler import PerformanceProfiler
from .serializers import JSONWriter, XMLWriter
from .types import (
    ConversionResult,
    ParseError,
    ParseResult,
    SourceFormat,
)
from .xml_parser import XMLParser


def detect_format(text: str) -> SourceFormat:
    """Guess the format of ``text`` from its first non-whitespace character."""
    stripped = text.lstrip(" \t\n\r\ufeff")
    if stripped.startswith("<"):
        return SourceFormat.XML
    return SourceFormat.JSON


class XMLJSONConverter:
    """
    Text-to-text conversion between XML and JSON documents.

    Wires the parsers, the tree converter and the serializers together and
    reports failures as ConversionResult errors instead of raising.
    """

    def __init__(self, indent: Optional[int] = None,
                 root_tag: str = "root",
                 attribute_prefix: str = "@",
                 text_key: str = "#text",
                 item_tag: str = "item",
                 enable_profiling: bool = True,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the converter.

        Args:
            indent: Indentation for JSON output (None = compact)
            root_tag: Root tag for JSON documents without a single root key
            attribute_prefix: Prefix marking attribute keys in JSON
            text_key: JSON key for element text next to attributes/children
            item_tag: Tag for entries of arrays that are not under a named key
            enable_profiling: Record performance metrics for each conversion
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.root_tag = root_tag

        self.error_handler = ErrorHandler(self.logger)
        self.json_parser = JSONParser(logger=self.logger)
        self.xml_parser = XMLParser(logger=self.logger)
        self.converter = Converter(
            attribute_prefix=attribute_prefix,
            text_key=text_key,
            item_tag=item_tag,
            default_root_tag=root_tag,
            logger=self.logger
        )
        self.json_writer = JSONWriter(indent=indent)
        self.xml_writer = XMLWriter()
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None

    def xml_to_json(self, xml_string: str) -> ConversionResult:
        """
        Convert an XML document to JSON text.

        Args:
            xml_string: XML text with a single root element

        Returns:
            ConversionResult with the JSON text
        """
        return self._run(SourceFormat.XML, xml_string, self._xml_to_json)

    def json_to_xml(self, json_string: str, root_tag: Optional[str] = None) -> ConversionResult:
        """
        Convert a JSON document to XML text.

        Args:
            json_string: JSON text
            root_tag: Root tag override (defaults to the converter's root_tag)

        Returns:
            ConversionResult with the XML text
        """
        return self._run(SourceFormat.JSON, json_string,
                         lambda text: self._json_to_xml(text, root_tag or self.root_tag))

    def convert(self, text: str, root_tag: Optional[str] = None) -> ConversionResult:
        """Convert to the other format, detecting the input format first."""
        if detect_format(text) == SourceFormat.XML:
            return self.xml_to_json(text)
        return self.json_to_xml(text, root_tag)

    def validate(self, text: str, source_format: Optional[SourceFormat] = None) -> ParseResult:
        """
        Parse ``text`` without converting it.

        Args:
            text: Document text
            source_format: Format to parse as (detected when omitted)

        Returns:
            ParseResult holding the parsed tree or the ParseError
        """
        if source_format is None:
            source_format = detect_format(text)
        parser = self.xml_parser if source_format == SourceFormat.XML else self.json_parser

        try:
            return ParseResult.ok(parser.parse(text))
        except ParseError as e:
            self.error_handler.handle_parse_error(e)
            return ParseResult.fail(e)

    def _xml_to_json(self, text: str) -> str:
        node = self.xml_parser.parse(text)
        return self.json_writer.write(self.converter.xml_to_json(node))

    def _json_to_xml(self, text: str, root_tag: str) -> str:
        value = self.json_parser.parse(text)
        return self.xml_writer.write(self.converter.json_to_xml(value, root_tag))

    def _run(self, source_format: SourceFormat, text: str, convert) -> ConversionResult:
        validation = self.error_handler.validate_input(text, source_format)
        if not validation.is_valid:
            return ConversionResult(
                success=False,
                output="",
                source_format=source_format,
                errors=[error.message for error in validation.errors]
            )
        for warning in validation.warnings:
            self.logger.warning(warning)

        operation = f"{source_format.value}_conversion"
        self.logger.info(f"Starting {operation}: {len(text)} characters")

        try:
            if self.profiler:
                with self.profiler.profile_operation(operation, len(text.encode("utf-8", "surrogatepass"))) as profile:
                    output = convert(text)
                    profile.output_size = len(output.encode("utf-8", "surrogatepass"))
            else:
                output = convert(text)
        except ParseError as e:
            response = self.error_handler.handle_parse_error(e)
            return ConversionResult(
                success=False,
                output="",
                source_format=source_format,
                errors=[str(e), response.suggested_action]
            )
        except Exception as e:
            self.logger.error(f"Unexpected error in {operation}: {e}")
            return ConversionResult(
                success=False,
                output="",
                source_format=source_format,
                errors=[f"Unexpected error: {str(e)}"]
            )

        self.logger.info(f"Completed {operation}: {len(output)} characters written")
        return ConversionResult(success=True, output=output, source_format=source_format)
