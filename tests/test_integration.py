"""Integration tests for the XML/JSON converter."""

import json
import logging

import pytest
from xml_json_converter import (
    XMLJSONConverter,
    json_to_xml,
    parse_json,
    parse_xml,
    to_json_string,
    to_xml_string,
    xml_to_json,
)
from xml_json_converter.models import JsonArray, JsonObject, XmlNode
from xml_json_converter.types import ErrorType, ParseError, SourceFormat
from xml_json_converter.xml_json_converter import detect_format


class TestLibraryFunctions:
    """Tests for the module-level library surface."""

    def test_parse_json_success(self):
        result = parse_json("[]")

        assert result.success
        assert result.value == JsonArray([])
        assert result.error is None

    def test_parse_json_failure_is_returned(self):
        result = parse_json('{"a":}')

        assert not result.success
        assert result.value is None
        assert result.error.kind == ErrorType.UNEXPECTED_CHARACTER
        assert result.error.position == 5

    def test_parse_xml_success(self):
        result = parse_xml("<a/>")

        assert result.success
        assert result.value == XmlNode(tag="a")

    def test_parse_xml_failure_is_returned(self):
        result = parse_xml("<a><b></a>")

        assert not result.success
        assert result.error.kind == ErrorType.UNBALANCED_TAGS
        assert (result.error.expected, result.error.found) == ("b", "a")

    def test_person_xml_to_json(self, person_xml, person_json):
        node = parse_xml(person_xml).unwrap()

        assert to_json_string(xml_to_json(node)) == person_json

    def test_person_json_to_xml(self, person_json, person_xml):
        value = parse_json(person_json).unwrap()

        assert to_xml_string(json_to_xml(value, "root")) == person_xml

    def test_json_to_xml_default_root_tag(self):
        node = json_to_xml(parse_json('{"a": 1, "b": 2}').unwrap())

        assert node.tag == "root"

    def test_custom_attribute_prefix(self):
        node = parse_xml('<a id="1"/>').unwrap()
        value = xml_to_json(node, attribute_prefix="_")

        assert value == parse_json('{"a": {"_id": "1"}}').unwrap()
        assert json_to_xml(value, attribute_prefix="_") == node

    def test_deeply_nested_input_is_a_failed_result(self):
        json_result = parse_json("[" * 3000 + "]" * 3000)
        xml_result = parse_xml("<a>" * 3000 + "</a>" * 3000)

        assert not json_result.success
        assert json_result.error.kind == ErrorType.NESTING_TOO_DEEP
        assert not xml_result.success
        assert xml_result.error.kind == ErrorType.NESTING_TOO_DEEP

    def test_unwrap_raises_parse_error(self):
        with pytest.raises(ParseError):
            parse_json("[1,").unwrap()

    @pytest.mark.parametrize("text", [
        '{"a": [1, 2.5, -3e-2], "b": {"c": null, "d": [true, false]}, "e": "x\\ty"}',
        "[[], {}, [[[]]], \"\", 0]",
        '"just a string"',
        "-0.125",
    ])
    def test_json_round_trip_and_idempotence(self, text):
        value = parse_json(text).unwrap()
        first = to_json_string(value)

        assert parse_json(first).unwrap() == value
        assert to_json_string(parse_json(first).unwrap()) == first
        assert json.loads(first) == json.loads(text)

    @pytest.mark.parametrize("text", [
        "<a/>",
        '<a b="1" c=\'2\'><d>text &amp; more</d><d/><e>  </e></a>',
        "<doc>\n  <p>one</p>\n  <p>two <i>2</i> three</p>\n</doc>",
    ])
    def test_xml_round_trip_and_idempotence(self, text):
        node = parse_xml(text).unwrap()
        first = to_xml_string(node)

        assert parse_xml(first).unwrap() == node
        assert to_xml_string(parse_xml(first).unwrap()) == first


class TestDetectFormat:
    """Tests for detect_format."""

    def test_detect(self):
        assert detect_format("  <a/>") == SourceFormat.XML
        assert detect_format('{"a": 1}') == SourceFormat.JSON
        assert detect_format("[1]") == SourceFormat.JSON
        assert detect_format("\ufeff<a/>") == SourceFormat.XML


class TestXMLJSONConverterIntegration:
    """Integration tests for the complete converter."""

    def setup_method(self):
        """Set up test fixtures."""
        self.converter = XMLJSONConverter()

    def test_xml_to_json(self, person_xml, person_json):
        result = self.converter.xml_to_json(person_xml)

        assert result.success
        assert result.output == person_json
        assert result.source_format == SourceFormat.XML
        assert result.errors is None

    def test_json_to_xml(self, person_json, person_xml):
        result = self.converter.json_to_xml(person_json)

        assert result.success
        assert result.output == person_xml
        assert result.source_format == SourceFormat.JSON

    def test_json_to_xml_root_tag_override(self):
        result = self.converter.json_to_xml("[1, 2]", root_tag="numbers")

        assert result.output == "<numbers><item>1</item><item>2</item></numbers>"

    def test_constructor_options(self):
        converter = XMLJSONConverter(indent=2, root_tag="data", attribute_prefix="-",
                                     text_key="_text", item_tag="entry", enable_profiling=False)

        assert converter.xml_to_json('<a x="1"/>').output == '{\n  "a": {\n    "-x": "1"\n  }\n}'
        assert converter.json_to_xml('[{"-k": "v", "_text": "t"}]').output == '<data><entry k="v">t</entry></data>'
        assert converter.profiler is None

    def test_convert_detects_format(self, person_xml, person_json):
        assert self.converter.convert(person_xml).output == person_json
        assert self.converter.convert(person_json).output == person_xml

    def test_invalid_xml_reports_error_and_hint(self):
        result = self.converter.xml_to_json("<a><b></a>")

        assert not result.success
        assert result.output == ""
        assert len(result.errors) == 2
        assert "expected '</b>', found '</a>'" in result.errors[0]
        assert result.errors[1].startswith("Close <b> before </a>.")

    def test_invalid_json_reports_position(self):
        result = self.converter.json_to_xml('{"a":}')

        assert not result.success
        assert "offset 5" in result.errors[0]

    def test_empty_input(self):
        result = self.converter.xml_to_json("   ")

        assert not result.success
        assert result.errors == ["XML input is empty"]

    def test_profiling_records_each_conversion(self, person_xml, person_json):
        self.converter.xml_to_json(person_xml)
        self.converter.json_to_xml(person_json)

        summary = self.converter.profiler.get_performance_summary()
        assert summary["total_operations"] == 2
        assert [op["name"] for op in summary["operations"]] == ["xml_conversion", "json_conversion"]
        assert summary["operations"][0]["output_size"] == len(person_json)

    def test_validate(self):
        ok = self.converter.validate("<a/>")
        assert ok.success
        assert ok.value == XmlNode(tag="a")

        failed = self.converter.validate("[1,", SourceFormat.JSON)
        assert not failed.success
        assert failed.error.kind == ErrorType.UNEXPECTED_END_OF_INPUT

    def test_validate_json_object(self):
        assert self.converter.validate('{"x": {}}').value == JsonObject({"x": JsonObject({})})

    def test_logging(self, caplog, person_xml):
        with caplog.at_level(logging.INFO):
            self.converter.xml_to_json(person_xml)

        assert "Starting xml_conversion" in caplog.text
        assert "Completed xml_conversion" in caplog.text
