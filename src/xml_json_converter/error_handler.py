"""Error handling for the XML/JSON converter."""

import logging
from typing import Any, Optional

from .types import (
    ErrorResponse,
    ErrorType,
    ParseError,
    SourceFormat,
    ValidationError,
    ValidationResult,
)


_SUGGESTIONS = {
    ErrorType.UNEXPECTED_CHARACTER: "Check the syntax around the reported position; a delimiter "
                                    "may be missing or misplaced.",
    ErrorType.UNTERMINATED_STRING: "Close the quoted value; the message gives the offset of its "
                                   "opening quote.",
    ErrorType.INVALID_NUMBER: "Numbers must follow JSON syntax: optional '-', no leading zeros, "
                              "digits after '.', and digits after an exponent.",
    ErrorType.INVALID_LITERAL: "Only the lowercase literals true, false and null are allowed.",
    ErrorType.UNBALANCED_TAGS: "Make sure every opening tag is closed by a matching closing tag "
                               "in the right order.",
    ErrorType.UNEXPECTED_END_OF_INPUT: "The document is truncated; check for unclosed containers "
                                       "or elements.",
    ErrorType.TRAILING_CONTENT: "A document holds exactly one root value or element; remove the "
                                "content after it.",
    ErrorType.NESTING_TOO_DEEP: "Reduce how deeply arrays, objects or elements are nested.",
}


class ErrorHandler:
    """
    Validates raw input and turns ParseErrors into actionable responses.

    Parse errors are never recoverable: parsing fails fast and keeps no
    partial results.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: Any, source_format: SourceFormat) -> ValidationResult:
        """
        Check raw input before it reaches a parser.

        Args:
            input_data: Text to validate
            source_format: Expected format of the text

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not isinstance(input_data, str):
            errors.append(ValidationError(
                type=ErrorType.UNEXPECTED_CHARACTER,
                message=f"{source_format.value.upper()} input must be a string, "
                        f"got {type(input_data).__name__}",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if not input_data.strip():
            errors.append(ValidationError(
                type=ErrorType.UNEXPECTED_END_OF_INPUT,
                message=f"{source_format.value.upper()} input is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if input_data.startswith("\ufeff"):
            warnings.append("Input starts with a byte order mark, which is not valid "
                            f"{source_format.value.upper()} content")

        return ValidationResult(is_valid=True, errors=errors, warnings=warnings)

    def handle_parse_error(self, error: ParseError) -> ErrorResponse:
        """
        Log a parse error and suggest how to fix the input.

        Args:
            error: ParseError raised by a parser

        Returns:
            ErrorResponse with a suggested action
        """
        self.logger.error(f"Parse error: {error.kind.value} - {error}")

        suggested_action = _SUGGESTIONS.get(error.kind, "Check the input and retry.")
        if error.kind == ErrorType.UNBALANCED_TAGS and error.expected and error.found:
            suggested_action = (f"Close <{error.expected}> before </{error.found}>. "
                                + suggested_action)

        return ErrorResponse(can_recover=False, suggested_action=suggested_action)
