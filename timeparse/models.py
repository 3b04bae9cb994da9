from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Literal

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class TimestampUnit(str, Enum):
    """How the magnitude of a numeric input maps to an instant."""

    SECONDS = "seconds"
    MILLIS = "millis"


class TimezoneChoice(str, Enum):
    """Zone used to interpret input or render output."""

    UTC = "utc"
    LOCAL = "local"

    @property
    def label(self) -> str:
        return "UTC" if self is TimezoneChoice.UTC else "local"


@dataclass(frozen=True)
class Instant:
    """An absolute point in time, stored as an aware UTC datetime."""

    moment: datetime

    def __post_init__(self) -> None:
        if self.moment.tzinfo is None:
            raise ValueError("Instant requires a timezone-aware datetime")
        object.__setattr__(self, "moment", self.moment.astimezone(UTC))

    @classmethod
    def from_unix(cls, seconds: int, nanos: int = 0) -> "Instant":
        """Build an instant from whole seconds past the epoch plus nanoseconds.

        Raises:
            OverflowError: If the result is outside the supported datetime range.
        """
        return cls(EPOCH + timedelta(seconds=seconds, microseconds=nanos // 1000))

    @property
    def unix_seconds(self) -> int:
        return (self.moment - EPOCH) // timedelta(seconds=1)

    @property
    def unix_millis(self) -> int:
        return (self.moment - EPOCH) // timedelta(milliseconds=1)

    def to_datetime(self) -> datetime:
        return self.moment


@dataclass(frozen=True)
class ParsedTimestamp:
    """The input was numeric."""

    unit: TimestampUnit
    raw: int
    kind: Literal["timestamp"] = "timestamp"


@dataclass(frozen=True)
class ParsedFormatted:
    """The input matched the YYYY/MM/DD HH:MM:SS pattern."""

    kind: Literal["formatted"] = "formatted"


ParseOutcome = ParsedTimestamp | ParsedFormatted
