"""Error types for the connection probe."""

from typing import Optional

# Exit status used for anything that is not a driver-reported status.
EXIT_FAILURE = -1


class ParseError(Exception):
    """A recognized option was given without a usable value.

    Raised before any network activity.

    Attributes:
        field: Option name as used in the message, e.g. "database" or "hostname"
        message: Human-readable error description
        exit_code: Process exit status the failure maps to
    """

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        self.message = message or f"missing {field} argument"
        self.exit_code = EXIT_FAILURE
        super().__init__(self.message)


def build_parse_error(field: str) -> ParseError:
    """Build the error reported for an option with no usable value."""
    return ParseError(field)
