"""Forward-only text cursor shared by the JSON and XML parsers."""

from typing import Optional, NoReturn

from .types import ErrorType, ParseError


WHITESPACE = " \t\n\r"

# Deepest container or element nesting either parser accepts; deeper input
# fails with NESTING_TOO_DEEP before the interpreter recursion limit is hit.
MAX_DEPTH = 256


class TextScanner:
    """
    Single forward cursor over an input string.

    Lookahead is limited to ``peek()`` and ``peek(1)``; the cursor never
    moves backwards. One scanner is created per parse call, so parser
    instances hold no per-document state.
    """

    def __init__(self, text: str):
        self.text = text
        self.position = 0
        self.length = len(text)

    def at_end(self) -> bool:
        return self.position >= self.length

    def peek(self, offset: int = 0) -> Optional[str]:
        index = self.position + offset
        if index < self.length:
            return self.text[index]
        return None

    def advance(self) -> str:
        """Consume and return the current character."""
        if self.at_end():
            self.fail(ErrorType.UNEXPECTED_END_OF_INPUT, "Unexpected end of input")
        char = self.text[self.position]
        self.position += 1
        return char

    def startswith(self, literal: str) -> bool:
        return self.text.startswith(literal, self.position)

    def skip_whitespace(self) -> bool:
        """Skip ASCII whitespace; return True if anything was skipped."""
        start = self.position
        while self.position < self.length and self.text[self.position] in WHITESPACE:
            self.position += 1
        return self.position > start

    def expect(self, expected: str) -> None:
        """Consume ``expected`` or fail with the character actually found."""
        char = self.peek()
        if char is None:
            self.fail(ErrorType.UNEXPECTED_END_OF_INPUT,
                      f"Expected '{expected}', found end of input",
                      expected=expected)
        if char != expected:
            self.fail(ErrorType.UNEXPECTED_CHARACTER,
                      f"Expected '{expected}', found '{char}'",
                      expected=expected, found=char)
        self.position += 1

    def check_depth(self, depth: int, max_depth: int) -> None:
        """Fail at the cursor if ``depth`` exceeds ``max_depth``."""
        if depth > max_depth:
            self.fail(ErrorType.NESTING_TOO_DEEP,
                      f"Nesting deeper than {max_depth} levels")

    def unexpected(self, expected: Optional[str] = None) -> NoReturn:
        """Fail on the current character, or on end of input if there is none."""
        char = self.peek()
        if char is None:
            self.fail(ErrorType.UNEXPECTED_END_OF_INPUT, "Unexpected end of input",
                      expected=expected)
        message = f"Unexpected character '{char}'"
        if expected:
            message += f", expected {expected}"
        self.fail(ErrorType.UNEXPECTED_CHARACTER, message, expected=expected, found=char)

    def fail(self, kind: ErrorType, message: str, position: Optional[int] = None,
             expected: Optional[str] = None, found: Optional[str] = None) -> NoReturn:
        """Raise a ParseError at ``position`` (default: the cursor)."""
        if position is None:
            position = min(self.position, self.length)
        line, column = self.line_and_column(position)
        raise ParseError(message, kind, position, line=line, column=column,
                         expected=expected, found=found)

    def line_and_column(self, position: int) -> tuple:
        """1-based line and column for a character offset."""
        line = self.text.count("\n", 0, position) + 1
        last_newline = self.text.rfind("\n", 0, position)
        return line, position - last_newline
