"""Recursive-descent JSON parser producing JsonValue trees."""

import logging
from typing import Dict, List, Optional

from .models import (
    JSON_NULL,
    JsonArray,
    JsonBool,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)
from .scanner import MAX_DEPTH, TextScanner
from .types import ErrorType
from .utils.numbers import parse_number


_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
}

_HEX_DIGITS = "0123456789abcdefABCDEF"

_NUMBER_CHARS = "0123456789+-.eE"


class JSONParser:
    """
    JSON parser over a single forward cursor.

    Dispatches on the first non-whitespace character of each value and
    fails fast with a ParseError at the first problem found.
    """

    def __init__(self, max_depth: int = MAX_DEPTH, logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            max_depth: Deepest array/object nesting accepted
            logger: Optional logger instance
        """
        self.max_depth = max_depth
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, text: str) -> JsonValue:
        """
        Parse a complete JSON document.

        Args:
            text: JSON text

        Returns:
            The root JsonValue

        Raises:
            ParseError: If the text is not a single well-formed JSON value
        """
        scanner = TextScanner(text)
        value = self._parse_value(scanner, 0)

        scanner.skip_whitespace()
        if not scanner.at_end():
            scanner.fail(ErrorType.TRAILING_CONTENT,
                         f"Unexpected content after JSON value: '{scanner.peek()}'",
                         found=scanner.peek())

        self.logger.debug(f"Parsed JSON document ({len(text)} characters, root {type(value).__name__})")
        return value

    def _parse_value(self, scanner: TextScanner, depth: int) -> JsonValue:
        scanner.skip_whitespace()
        char = scanner.peek()

        if char in ("{", "["):
            scanner.check_depth(depth + 1, self.max_depth)
            if char == "{":
                return self._parse_object(scanner, depth + 1)
            return self._parse_array(scanner, depth + 1)
        elif char == '"':
            return JsonString(self._parse_string(scanner))
        elif char in ("t", "f"):
            return self._parse_boolean(scanner)
        elif char == "n":
            return self._parse_null(scanner)
        elif char is not None and (char.isdigit() or char == "-"):
            return self._parse_number(scanner)
        else:
            scanner.unexpected("a JSON value")

    def _parse_object(self, scanner: TextScanner, depth: int) -> JsonObject:
        scanner.expect("{")
        members: Dict[str, JsonValue] = {}

        scanner.skip_whitespace()
        if scanner.peek() == "}":
            scanner.advance()
            return JsonObject(members)

        while True:
            scanner.skip_whitespace()
            if scanner.peek() != '"':
                scanner.unexpected("a quoted object key")
            key = self._parse_string(scanner)

            scanner.skip_whitespace()
            scanner.expect(":")
            # Duplicate keys: the last occurrence wins.
            members[key] = self._parse_value(scanner, depth)

            scanner.skip_whitespace()
            char = scanner.peek()
            if char == ",":
                scanner.advance()
            elif char == "}":
                scanner.advance()
                return JsonObject(members)
            else:
                scanner.unexpected("',' or '}'")

    def _parse_array(self, scanner: TextScanner, depth: int) -> JsonArray:
        scanner.expect("[")
        items: List[JsonValue] = []

        scanner.skip_whitespace()
        if scanner.peek() == "]":
            scanner.advance()
            return JsonArray(items)

        while True:
            items.append(self._parse_value(scanner, depth))

            scanner.skip_whitespace()
            char = scanner.peek()
            if char == ",":
                scanner.advance()
            elif char == "]":
                scanner.advance()
                return JsonArray(items)
            else:
                scanner.unexpected("',' or ']'")

    def _parse_string(self, scanner: TextScanner) -> str:
        start = scanner.position
        scanner.expect('"')
        chars: List[str] = []

        while True:
            char = scanner.peek()
            if char is None:
                self._unterminated(scanner, start)
            scanner.advance()

            if char == '"':
                return "".join(chars)
            if char != "\\":
                chars.append(char)
                continue

            escape = scanner.peek()
            if escape is None:
                self._unterminated(scanner, start)
            if escape in _SIMPLE_ESCAPES:
                scanner.advance()
                chars.append(_SIMPLE_ESCAPES[escape])
            elif escape == "u":
                scanner.advance()
                chars.append(self._parse_unicode_escape(scanner))
            else:
                scanner.fail(ErrorType.UNEXPECTED_CHARACTER,
                             f"Invalid escape sequence '\\{escape}'", found=escape)

    def _unterminated(self, scanner: TextScanner, start: int):
        # Reported where input ran out; the opening quote is named in the message.
        scanner.fail(ErrorType.UNTERMINATED_STRING,
                     f"Unterminated string opened at offset {start}",
                     expected='"')

    def _parse_unicode_escape(self, scanner: TextScanner) -> str:
        code = self._read_hex4(scanner)

        # UTF-16 surrogate pair: a high surrogate must be followed by \uDC00-\uDFFF.
        if 0xD800 <= code <= 0xDBFF and scanner.startswith("\\u"):
            scanner.advance()
            scanner.advance()
            low = self._read_hex4(scanner)
            if 0xDC00 <= low <= 0xDFFF:
                return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))
            return chr(code) + chr(low)
        return chr(code)

    def _read_hex4(self, scanner: TextScanner) -> int:
        digits = []
        for _ in range(4):
            char = scanner.peek()
            if char is None:
                scanner.fail(ErrorType.UNEXPECTED_END_OF_INPUT, "Unexpected end of input in \\u escape")
            if char not in _HEX_DIGITS:
                scanner.fail(ErrorType.UNEXPECTED_CHARACTER,
                             f"Invalid hex digit '{char}' in \\u escape", found=char)
            digits.append(scanner.advance())
        return int("".join(digits), 16)

    def _parse_number(self, scanner: TextScanner) -> JsonNumber:
        start = scanner.position
        while scanner.peek() is not None and scanner.peek() in _NUMBER_CHARS:
            scanner.advance()

        lexeme = scanner.text[start:scanner.position]
        value = parse_number(lexeme)
        if value is None:
            scanner.fail(ErrorType.INVALID_NUMBER, f"Invalid number '{lexeme}'",
                         position=start, found=lexeme)
        return JsonNumber(value)

    def _parse_boolean(self, scanner: TextScanner) -> JsonBool:
        if scanner.startswith("true"):
            scanner.position += 4
            return JsonBool(True)
        if scanner.startswith("false"):
            scanner.position += 5
            return JsonBool(False)
        self._invalid_literal(scanner)

    def _parse_null(self, scanner: TextScanner):
        if scanner.startswith("null"):
            scanner.position += 4
            return JSON_NULL
        self._invalid_literal(scanner)

    def _invalid_literal(self, scanner: TextScanner):
        start = scanner.position
        end = start
        while end < scanner.length and scanner.text[end].isalpha():
            end += 1
        found = scanner.text[start:end]
        scanner.fail(ErrorType.INVALID_LITERAL, f"Invalid literal '{found}'",
                     position=start, expected="true, false or null", found=found)
