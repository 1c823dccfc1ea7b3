"""Recursive-descent XML parser producing XmlNode trees."""

import logging
import re
from typing import Dict, List, Optional

from .models import XmlNode
from .scanner import MAX_DEPTH, WHITESPACE, TextScanner
from .types import ErrorType


_NAME_PUNCTUATION = "-_:"

_NAMED_ENTITIES = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
}

_ENTITY_RE = re.compile(r"&(#[0-9]+|#x[0-9a-fA-F]+|[a-zA-Z]+);")


def is_name_char(char: str) -> bool:
    """Characters allowed in tag and attribute names."""
    return char.isalnum() or char in _NAME_PUNCTUATION


def decode_entities(raw: str) -> str:
    """
    Expand the minimal entity set.

    Handles the five predefined entities and numeric character references;
    any other ``&...;`` sequence is left untouched.
    """
    if "&" not in raw:
        return raw

    def replace(match: "re.Match") -> str:
        name = match.group(1)
        if name.startswith("#x"):
            code = int(name[2:], 16)
        elif name.startswith("#"):
            code = int(name[1:])
        else:
            return _NAMED_ENTITIES.get(name, match.group(0))
        if code > 0x10FFFF:
            return match.group(0)
        return chr(code)

    return _ENTITY_RE.sub(replace, raw)


class XMLParser:
    """
    XML parser for a single-rooted element tree.

    Elements are built bottom-up: a node is complete once its matching
    closing tag has been consumed. Namespaces, comments, CDATA sections and
    processing instructions are not supported.
    """

    def __init__(self, max_depth: int = MAX_DEPTH, logger: Optional[logging.Logger] = None):
        """
        Initialize the XML parser.

        Args:
            max_depth: Deepest element nesting accepted
            logger: Optional logger instance
        """
        self.max_depth = max_depth
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, text: str) -> XmlNode:
        """
        Parse a complete XML document.

        Args:
            text: XML text containing exactly one root element

        Returns:
            The root XmlNode

        Raises:
            ParseError: If the text is not a single well-formed element
        """
        scanner = TextScanner(text)
        scanner.skip_whitespace()
        root = self._parse_element(scanner, 1)

        scanner.skip_whitespace()
        if not scanner.at_end():
            scanner.fail(ErrorType.TRAILING_CONTENT,
                         f"Unexpected content after root element '{root.tag}'",
                         found=scanner.peek())

        self.logger.debug(f"Parsed XML document ({len(text)} characters, root <{root.tag}>)")
        return root

    def _parse_element(self, scanner: TextScanner, depth: int) -> XmlNode:
        scanner.check_depth(depth, self.max_depth)
        scanner.expect("<")
        tag = self._parse_name(scanner, "a tag name")

        if scanner.peek() is not None and scanner.peek() not in WHITESPACE + "/>":
            scanner.unexpected("whitespace, '/' or '>' after tag name")

        attributes = self._parse_attributes(scanner)

        if scanner.peek() == "/":
            scanner.advance()
            scanner.expect(">")
            return XmlNode(tag=tag, attributes=attributes)

        scanner.expect(">")
        children, text = self._parse_content(scanner, tag, depth)
        return XmlNode(tag=tag, attributes=attributes, children=children, text=text)

    def _parse_name(self, scanner: TextScanner, what: str) -> str:
        start = scanner.position
        while scanner.peek() is not None and is_name_char(scanner.peek()):
            scanner.advance()

        if scanner.position == start:
            scanner.unexpected(what)
        return scanner.text[start:scanner.position]

    def _parse_attributes(self, scanner: TextScanner) -> Dict[str, str]:
        attributes: Dict[str, str] = {}

        while True:
            separated = scanner.skip_whitespace()
            char = scanner.peek()
            if char in ("/", ">"):
                return attributes
            if char is None:
                scanner.unexpected()
            if not separated:
                scanner.unexpected("whitespace before attribute")

            name = self._parse_name(scanner, "an attribute name")
            scanner.skip_whitespace()
            scanner.expect("=")
            scanner.skip_whitespace()
            # Duplicate attributes: the last occurrence wins.
            attributes[name] = self._parse_attribute_value(scanner)

    def _parse_attribute_value(self, scanner: TextScanner) -> str:
        quote = scanner.peek()
        if quote not in ('"', "'"):
            scanner.unexpected("a quoted attribute value")

        start = scanner.position
        scanner.advance()
        end = scanner.text.find(quote, scanner.position)
        if end == -1:
            scanner.position = scanner.length
            scanner.fail(ErrorType.UNTERMINATED_STRING,
                         f"Unterminated attribute value opened at offset {start}",
                         expected=quote)

        raw = scanner.text[scanner.position:end]
        scanner.position = end + 1
        return decode_entities(raw)

    def _parse_content(self, scanner: TextScanner, tag: str, depth: int):
        children: List[XmlNode] = []
        runs: List[str] = []

        while True:
            char = scanner.peek()
            if char is None:
                scanner.fail(ErrorType.UNEXPECTED_END_OF_INPUT,
                             f"Unexpected end of input, '<{tag}>' is not closed",
                             expected=tag)

            if char != "<":
                runs.append(self._parse_text(scanner))
            elif scanner.peek(1) == "/":
                self._parse_closing_tag(scanner, tag)
                break
            else:
                children.append(self._parse_element(scanner, depth + 1))

        text = "".join(runs)
        if not text or (children and not text.strip(WHITESPACE)):
            # Whitespace between child elements is not content.
            return children, None
        return children, text

    def _parse_text(self, scanner: TextScanner) -> str:
        end = scanner.text.find("<", scanner.position)
        if end == -1:
            end = scanner.length
        raw = scanner.text[scanner.position:end]
        scanner.position = end
        return decode_entities(raw)

    def _parse_closing_tag(self, scanner: TextScanner, tag: str) -> None:
        start = scanner.position
        scanner.expect("<")
        scanner.expect("/")
        name = self._parse_name(scanner, "a closing tag name")

        if name != tag:
            scanner.fail(ErrorType.UNBALANCED_TAGS,
                         f"Mismatched closing tag: expected '</{tag}>', found '</{name}>'",
                         position=start, expected=tag, found=name)

        scanner.skip_whitespace()
        scanner.expect(">")
