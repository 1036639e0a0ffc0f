"""Value types passed between the parser, prober and reporter."""

from dataclasses import dataclass, fields
from typing import Optional, Union

from .tokens import trim


@dataclass(frozen=True)
class ConnectionSpec:
    """Validated connection parameters taken from the command line.

    Every field is either ``None`` or a non-empty, already trimmed string.
    The password is never part of this structure; it travels separately
    from the settings layer straight to the prober.
    """

    database: Optional[str] = None
    username: Optional[str] = None
    host: Optional[str] = None
    hostaddr: Optional[str] = None
    port: Optional[str] = None
    timeout: Optional[str] = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if not value or trim(value) != value:
                raise ValueError(f"{f.name} must be a non-empty trimmed string, got {value!r}")

    def is_empty(self) -> bool:
        """True when no option was given at all."""
        return all(getattr(self, f.name) is None for f in fields(self))


# =============================================================================
# PROBE OUTCOMES
# =============================================================================

@dataclass(frozen=True)
class Success:
    """The server accepted the connection."""


@dataclass(frozen=True)
class ConnectionRefused:
    """The server rejected the connection or could not be reached.

    ``status_code`` is the driver's connection status when a handle was
    obtained, ``None`` otherwise.
    """

    message: str
    status_code: Optional[int] = None


@dataclass(frozen=True)
class UnexpectedFailure:
    """Anything that went wrong outside the connection layer."""

    message: str


Outcome = Union[Success, ConnectionRefused, UnexpectedFailure]
