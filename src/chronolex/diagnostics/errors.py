"""chronolex exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Errors caused by caller-supplied values (ranges, format descriptions, input
text) also derive from ValueError so generic handlers keep working.

Python 3.13+. Zero external dependencies.
"""

from enum import StrEnum

from .codes import Diagnostic
from .templates import ErrorTemplate

__all__ = [
    "ChronoError",
    "ComponentRangeError",
    "FormattingError",
    "FormattingErrorKind",
    "InvalidFormatDescriptionError",
    "InvalidValueError",
    "ParseErrorKind",
    "ParseFailedError",
]


class ChronoError(Exception):
    """Base exception for all chronolex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ChronoError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ComponentRangeError(ChronoError, ValueError):
    """A field was outside its valid range.

    Raised by every fallible constructor and replacer. The conditional
    message, when present, explains that the range depends on other fields
    (e.g. the number of days depends on the month and year).

    Attributes:
        name: Field name ("year", "month", "day", "ordinal", "week", ...)
        value: The rejected value
        minimum: Smallest accepted value
        maximum: Largest accepted value
        conditional_message: Context narrowing the range, or None
    """

    def __init__(
        self,
        name: str,
        value: int,
        minimum: int,
        maximum: int,
        conditional_message: str | None = None,
    ) -> None:
        super().__init__(
            ErrorTemplate.component_out_of_range(
                name, value, minimum, maximum, conditional_message
            )
        )
        self.name = name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        self.conditional_message = conditional_message

    @property
    def is_conditional(self) -> bool:
        """Whether the valid range depends on other fields."""
        return self.conditional_message is not None


class InvalidFormatDescriptionError(ChronoError, ValueError):
    """A format description (bracketed or strftime) could not be compiled.

    The diagnostic carries the source span of the offending text.

    Attributes:
        index: Byte offset where the problem starts, or None
    """

    def __init__(self, message: str | Diagnostic) -> None:
        super().__init__(message)
        span = self.diagnostic.span if self.diagnostic is not None else None
        self.index: int | None = span.start if span is not None else None


class ParseErrorKind(StrEnum):
    """Why parsing text against a format description failed."""

    INVALID_LITERAL = "invalid_literal"
    INVALID_COMPONENT = "invalid_component"
    UNEXPECTED_TRAILING_CHARACTERS = "unexpected_trailing_characters"
    INSUFFICIENT_INFORMATION = "insufficient_information"
    COMPONENT_RANGE = "component_range"


class ParseFailedError(ChronoError, ValueError):
    """Text did not match a format description, or did not form a value.

    Attributes:
        kind: Failure category
        component: Component that failed to parse (INVALID_COMPONENT only)
        position: Byte offset in the input where matching failed
        input_value: The full input that was being parsed
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        kind: ParseErrorKind,
        component: str | None = None,
        position: int | None = None,
        input_value: str = "",
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.component = component
        self.position = position
        self.input_value = input_value


class FormattingErrorKind(StrEnum):
    """Why a value could not be formatted."""

    INSUFFICIENT_TYPE_INFORMATION = "insufficient_type_information"
    INVALID_COMPONENT = "invalid_component"


class FormattingError(ChronoError):
    """A value could not be rendered with a format description.

    Attributes:
        kind: Failure category
        component: Component being formatted when the failure occurred
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        kind: FormattingErrorKind,
        component: str,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.component = component


class InvalidValueError(ChronoError, ValueError):
    """An integer encoding could not be decoded into a date-time.

    Attributes:
        value: The out-of-range integer
    """

    def __init__(self, message: str | Diagnostic, *, value: int) -> None:
        super().__init__(message)
        self.value = value
