"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps every message testable, consistently formatted, and documents
    all error cases in one place.
    """

    # ------------------------------------------------------------------
    # Component range
    # ------------------------------------------------------------------

    @staticmethod
    def component_out_of_range(
        name: str,
        value: int,
        minimum: int,
        maximum: int,
        conditional_message: str | None = None,
    ) -> Diagnostic:
        """Field value outside its valid range.

        Args:
            name: Field name ("year", "day", "ordinal", ...)
            value: The rejected value
            minimum: Smallest accepted value
            maximum: Largest accepted value
            conditional_message: Context that narrowed the range, e.g.
                "for the given month and year"

        Returns:
            Diagnostic for COMPONENT_OUT_OF_RANGE or its conditional variant
        """
        msg = f"{name} must be in the range {minimum}..={maximum}"
        if conditional_message is not None:
            msg = f"{msg} {conditional_message}"
            code = DiagnosticCode.COMPONENT_OUT_OF_RANGE_CONDITIONAL
        else:
            code = DiagnosticCode.COMPONENT_OUT_OF_RANGE
        return Diagnostic(
            code=code,
            message=msg,
            span=None,
            component=name,
            expected=f"{minimum}..={maximum}",
            received=str(value),
        )

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    @staticmethod
    def date_overflow(operation: str) -> Diagnostic:
        """Date arithmetic left the representable range.

        Args:
            operation: What was being computed, e.g. "adding duration to date"

        Returns:
            Diagnostic for DATE_OVERFLOW
        """
        msg = f"overflow {operation}"
        return Diagnostic(
            code=DiagnosticCode.DATE_OVERFLOW,
            message=msg,
            span=None,
            hint="Use checked_add/checked_sub or saturating_add/saturating_sub near Date.MIN/MAX",
        )

    @staticmethod
    def occurrence_count_zero() -> Diagnostic:
        """nth occurrence requested with n == 0.

        Returns:
            Diagnostic for OCCURRENCE_COUNT_ZERO
        """
        return Diagnostic(
            code=DiagnosticCode.OCCURRENCE_COUNT_ZERO,
            message="occurrence count must be at least 1",
            span=None,
            hint="Use n=1 for the first occurrence",
            received="0",
        )

    # ------------------------------------------------------------------
    # Format descriptions
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_format_description(
        code: DiagnosticCode,
        what: str,
        span: SourceSpan | None,
        hint: str | None = None,
    ) -> Diagnostic:
        """Format description could not be compiled.

        Args:
            code: Specific DESCRIPTION_* or STRFTIME_* code
            what: Short description of the problem
            span: Location of the problem in the description
            hint: Suggestion for fixing the description

        Returns:
            Diagnostic for the given code
        """
        if span is not None:
            msg = f"invalid format description: {what} at byte index {span.start}"
        else:
            msg = f"invalid format description: {what}"
        return Diagnostic(code=code, message=msg, span=span, hint=hint)

    @staticmethod
    def invalid_component_name(name: str, span: SourceSpan) -> Diagnostic:
        """Unknown component name inside brackets.

        Args:
            name: The name as written
            span: Location of the name

        Returns:
            Diagnostic for DESCRIPTION_INVALID_COMPONENT_NAME
        """
        return ErrorTemplate.invalid_format_description(
            DiagnosticCode.DESCRIPTION_INVALID_COMPONENT_NAME,
            f"invalid component name '{name}'",
            span,
            hint="Component names are lowercase, e.g. [year], [month], [offset_hour]",
        )

    @staticmethod
    def unknown_modifier(component: str, key: str, span: SourceSpan) -> Diagnostic:
        """Modifier key not accepted by the component.

        Args:
            component: Component the modifier was attached to
            key: The modifier key as written
            span: Location of the key

        Returns:
            Diagnostic for DESCRIPTION_UNKNOWN_MODIFIER
        """
        return ErrorTemplate.invalid_format_description(
            DiagnosticCode.DESCRIPTION_UNKNOWN_MODIFIER,
            f"invalid modifier key '{key}' for component '{component}'",
            span,
        )

    @staticmethod
    def duplicate_modifier(key: str, span: SourceSpan) -> Diagnostic:
        """Modifier key given more than once.

        Args:
            key: The repeated key
            span: Location of the second occurrence

        Returns:
            Diagnostic for DESCRIPTION_DUPLICATE_MODIFIER
        """
        return ErrorTemplate.invalid_format_description(
            DiagnosticCode.DESCRIPTION_DUPLICATE_MODIFIER,
            f"duplicate modifier key '{key}'",
            span,
            hint="Each modifier may appear at most once per component",
        )

    @staticmethod
    def invalid_modifier_value(key: str, value: str, span: SourceSpan) -> Diagnostic:
        """Modifier value not accepted for the key.

        Args:
            key: The modifier key
            value: The rejected value
            span: Location of the value

        Returns:
            Diagnostic for DESCRIPTION_INVALID_MODIFIER_VALUE
        """
        return ErrorTemplate.invalid_format_description(
            DiagnosticCode.DESCRIPTION_INVALID_MODIFIER_VALUE,
            f"invalid modifier value '{value}' for key '{key}'",
            span,
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, span: SourceSpan | None) -> Diagnostic:
        """Nested optional/first blocks exceed the depth limit.

        Args:
            max_depth: The configured limit
            span: Location of the block that crossed the limit

        Returns:
            Diagnostic for DESCRIPTION_NESTING_DEPTH_EXCEEDED
        """
        return ErrorTemplate.invalid_format_description(
            DiagnosticCode.DESCRIPTION_NESTING_DEPTH_EXCEEDED,
            f"nesting depth exceeds the maximum of {max_depth}",
            span,
            hint="Flatten nested [optional] and [first] blocks",
        )

    @staticmethod
    def unsupported_strftime_directive(directive: str, span: SourceSpan) -> Diagnostic:
        """strftime directive with no equivalent component.

        Args:
            directive: The directive as written, e.g. "%Z"
            span: Location of the directive

        Returns:
            Diagnostic for STRFTIME_UNSUPPORTED_DIRECTIVE
        """
        return ErrorTemplate.invalid_format_description(
            DiagnosticCode.STRFTIME_UNSUPPORTED_DIRECTIVE,
            f"unsupported directive '{directive}'",
            span,
            hint="Use '%%' for a literal percent sign",
        )

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @staticmethod
    def parse_invalid_literal(position: int) -> Diagnostic:
        """Input did not match a literal of the description.

        Args:
            position: Byte offset in the input

        Returns:
            Diagnostic for PARSE_INVALID_LITERAL
        """
        msg = f"a character literal was not valid at input position {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INVALID_LITERAL,
            message=msg,
            span=None,
        )

    @staticmethod
    def parse_invalid_component(component: str, position: int) -> Diagnostic:
        """Input did not match a component of the description.

        Args:
            component: Component name that was expected
            position: Byte offset in the input

        Returns:
            Diagnostic for PARSE_INVALID_COMPONENT
        """
        msg = f"the '{component}' component could not be parsed at input position {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INVALID_COMPONENT,
            message=msg,
            span=None,
            component=component,
        )

    @staticmethod
    def parse_unexpected_trailing_characters(position: int) -> Diagnostic:
        """Description fully matched but input remains.

        Args:
            position: Byte offset of the first unconsumed byte

        Returns:
            Diagnostic for PARSE_UNEXPECTED_TRAILING_CHARACTERS
        """
        msg = f"unexpected trailing characters at input position {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_UNEXPECTED_TRAILING_CHARACTERS,
            message=msg,
            span=None,
            hint="Add [end] or more components to consume the remaining input",
        )

    @staticmethod
    def parse_insufficient_information(target: str) -> Diagnostic:
        """Parsed fields do not determine the requested value.

        Args:
            target: Type being assembled ("Date", "Time", ...)

        Returns:
            Diagnostic for PARSE_INSUFFICIENT_INFORMATION
        """
        msg = f"insufficient information to construct a {target}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INSUFFICIENT_INFORMATION,
            message=msg,
            span=None,
        )

    @staticmethod
    def parse_component_range(inner: Diagnostic) -> Diagnostic:
        """Parsed fields were individually valid but do not form a value.

        Args:
            inner: The component-range diagnostic raised during assembly

        Returns:
            Diagnostic for PARSE_COMPONENT_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_COMPONENT_RANGE,
            message=inner.message,
            span=None,
            component=inner.component,
            expected=inner.expected,
            received=inner.received,
        )

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    @staticmethod
    def formatting_insufficient_type_information(component: str) -> Diagnostic:
        """Component needs a value that was not supplied.

        Args:
            component: Component name being formatted

        Returns:
            Diagnostic for FORMATTING_INSUFFICIENT_TYPE_INFORMATION
        """
        msg = f"the format description requires '{component}', which the value does not contain"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_INSUFFICIENT_TYPE_INFORMATION,
            message=msg,
            span=None,
            component=component,
            hint="Format a PrimitiveDateTime or OffsetDateTime instead",
        )

    @staticmethod
    def formatting_invalid_component(component: str) -> Diagnostic:
        """Value cannot be rendered with the component's modifiers.

        Args:
            component: Component name being formatted

        Returns:
            Diagnostic for FORMATTING_INVALID_COMPONENT
        """
        msg = f"the '{component}' component cannot be formatted into the requested format"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_INVALID_COMPONENT,
            message=msg,
            span=None,
            component=component,
        )

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    @staticmethod
    def timestamp_invalid_value(value: int, unit: str, reason: str) -> Diagnostic:
        """Integer timestamp could not be decoded.

        Args:
            value: The offending integer
            unit: Timestamp unit ("second", "millisecond", ...)
            reason: Why the value was rejected

        Returns:
            Diagnostic for TIMESTAMP_INVALID_VALUE
        """
        msg = f"invalid value: integer {value}, expected a Unix timestamp in {unit}s ({reason})"
        return Diagnostic(
            code=DiagnosticCode.TIMESTAMP_INVALID_VALUE,
            message=msg,
            span=None,
            received=str(value),
        )
