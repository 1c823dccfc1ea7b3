"""Core type definitions for the XML/JSON converter."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class ErrorType(Enum):
    """Enumeration of parse error kinds."""
    UNEXPECTED_CHARACTER = "unexpected_character"
    UNTERMINATED_STRING = "unterminated_string"
    INVALID_NUMBER = "invalid_number"
    INVALID_LITERAL = "invalid_literal"
    UNBALANCED_TAGS = "unbalanced_tags"
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    TRAILING_CONTENT = "trailing_content"
    NESTING_TOO_DEEP = "nesting_too_deep"


class SourceFormat(Enum):
    """Enumeration of supported text formats."""
    JSON = "json"
    XML = "xml"


class ParseError(ValueError):
    """
    Structured failure describing where and why parsing stopped.

    ``position`` is a character offset into the input; ``line`` and
    ``column`` are 1-based and derived from it.
    """

    def __init__(self, message: str, kind: ErrorType, position: int,
                 line: int = 1, column: int = 1,
                 expected: Optional[str] = None,
                 found: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.position = position
        self.line = line
        self.column = column
        self.expected = expected
        self.found = found

    def __str__(self) -> str:
        return f"{self.message} at line {self.line}, column {self.column} (offset {self.position})"

    def __repr__(self) -> str:
        return f"ParseError(kind={self.kind.value!r}, position={self.position}, message={self.message!r})"


@dataclass
class ParseResult:
    """Result of a parse operation: either a value or a ParseError."""
    success: bool
    value: Optional[Any] = None
    error: Optional[ParseError] = None

    @classmethod
    def ok(cls, value: Any) -> "ParseResult":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: ParseError) -> "ParseResult":
        return cls(success=False, error=error)

    def unwrap(self) -> Any:
        """Return the parsed value, re-raising the stored error on failure."""
        if not self.success:
            raise self.error
        return self.value


@dataclass
class ConversionResult:
    """Result of a text-to-text conversion."""
    success: bool
    output: str
    source_format: SourceFormat
    errors: Optional[List[str]] = None


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str
