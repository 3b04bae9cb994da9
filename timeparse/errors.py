"""Errors raised while resolving input.

Both kinds are terminal: they propagate unchanged to the command line, which
turns them into distinct exit codes.
"""

from timeparse.constants import EXIT_PARSE, EXIT_TZ, INPUT_FORMAT_HINT


class TimeparseError(ValueError):
    """Base error for input resolution."""

    exit_code = 1


class ParseError(TimeparseError):
    """Raised when input is neither a timestamp nor a formatted datetime."""

    exit_code = EXIT_PARSE

    @classmethod
    def invalid_timestamp(cls) -> "ParseError":
        return cls("Invalid unix timestamp")

    @classmethod
    def expected_format(cls) -> "ParseError":
        return cls(f"Expected format: {INPUT_FORMAT_HINT}")


class TimezoneError(TimeparseError):
    """Raised when a local wall time falls in a DST gap or fold."""

    exit_code = EXIT_TZ

    def __init__(
        self, message: str = "Ambiguous or non-existent local time (DST transition)"
    ):
        super().__init__(message)
