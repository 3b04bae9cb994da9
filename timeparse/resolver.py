import logging
from datetime import UTC, datetime, tzinfo

from timeparse.constants import (
    DATETIME_RE,
    INT64_MAX,
    INT64_MIN,
    MILLIS_THRESHOLD,
    TIMESTAMP_RE,
)
from timeparse.errors import ParseError, TimezoneError
from timeparse.models import (
    Instant,
    ParsedFormatted,
    ParsedTimestamp,
    ParseOutcome,
    TimestampUnit,
    TimezoneChoice,
)

logger = logging.getLogger(__name__)


def detect_unit(raw: int) -> TimestampUnit:
    """Guess whether a numeric timestamp counts seconds or milliseconds.

    Magnitudes of 10^12 and above are milliseconds. Seconds for any date
    between 1970 and roughly 33658 stay below that, while milliseconds for
    dates after 2001-09-09 exceed it.
    """
    if abs(raw) >= MILLIS_THRESHOLD:
        return TimestampUnit.MILLIS
    return TimestampUnit.SECONDS


def parse_int64(text: str) -> int | None:
    """Return ``text`` as a signed 64-bit integer, or None if it isn't one."""
    if not TIMESTAMP_RE.fullmatch(text):
        return None

    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def timestamp_to_instant(
    raw: int, forced_unit: TimestampUnit | None = None
) -> tuple[Instant, TimestampUnit]:
    """Convert a numeric timestamp into an instant.

    Args:
        raw: Seconds or milliseconds since the unix epoch.
        forced_unit: Unit to use instead of autodetection.

    Returns:
        The instant and the unit that was applied.

    Raises:
        ParseError: If the timestamp is outside the representable range.
    """
    unit = forced_unit if forced_unit is not None else detect_unit(raw)
    logger.debug("Interpreting %d as %s (forced: %s)", raw, unit.value, forced_unit)

    if unit is TimestampUnit.SECONDS:
        seconds, nanos = raw, 0
    else:
        # Truncating division; only the magnitude of the remainder is kept.
        seconds = _trunc_div(raw, 1000)
        nanos = abs(raw - seconds * 1000) * 1_000_000

    try:
        instant = Instant.from_unix(seconds, nanos)
    except (OverflowError, ValueError) as e:
        logger.debug("Timestamp %d out of range: %s", raw, e)
        raise ParseError.invalid_timestamp() from e

    return instant, unit


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def parse_civil(text: str) -> datetime:
    """Parse ``YYYY/MM/DD HH:MM:SS`` into a naive datetime.

    Raises:
        ParseError: If the text doesn't match the pattern or a component is
            out of range.
    """
    match = DATETIME_RE.fullmatch(text)
    if match is None:
        raise ParseError.expected_format()

    try:
        return datetime(**{k: int(v) for k, v in match.groupdict().items()})
    except ValueError as e:
        raise ParseError.expected_format() from e


def localize(civil: datetime, local_zone: tzinfo | None = None) -> datetime:
    """Interpret a naive wall time in the local zone and return it in UTC.

    Args:
        civil: Naive wall-clock time.
        local_zone: Zone standing in for the process's local zone. When None,
            the system zone is used.

    Raises:
        TimezoneError: If the wall time is repeated or skipped by a DST
            transition.
        ParseError: If the wall time cannot be represented once shifted to UTC.
    """
    try:
        earlier = _wall_to_utc(civil, 0, local_zone)
        later = _wall_to_utc(civil, 1, local_zone)
    except (OverflowError, OSError, ValueError) as e:
        raise ParseError(f"Cannot represent {civil} in the local zone") from e

    # Both folds agree only when the wall time occurs exactly once.
    if earlier != later:
        logger.debug("Local time %s maps to %s and %s", civil, earlier, later)
        raise TimezoneError()
    return earlier


def _wall_to_utc(civil: datetime, fold: int, zone: tzinfo | None) -> datetime:
    if zone is None:
        return civil.replace(fold=fold).astimezone(UTC)
    return civil.replace(tzinfo=zone, fold=fold).astimezone(UTC)


def resolve(
    text: str,
    input_tz: TimezoneChoice,
    forced_unit: TimestampUnit | None = None,
    *,
    local_zone: tzinfo | None = None,
) -> tuple[Instant, ParseOutcome]:
    """Resolve a timestamp or formatted datetime into an instant.

    Numeric input is treated as a unix timestamp; ``input_tz`` only applies to
    the formatted path.

    Args:
        text: The raw input.
        input_tz: Zone in which a formatted datetime is interpreted.
        forced_unit: Unit for numeric input; autodetected when None.
        local_zone: Zone standing in for the process's local zone.

    Returns:
        The resolved instant and how the input was interpreted.

    Raises:
        ParseError: If the input is malformed or out of range.
        TimezoneError: If a local wall time is ambiguous or non-existent.
    """
    raw = parse_int64(text)
    if raw is not None:
        instant, unit = timestamp_to_instant(raw, forced_unit)
        return instant, ParsedTimestamp(unit=unit, raw=raw)

    civil = parse_civil(text)
    if input_tz is TimezoneChoice.UTC:
        moment = civil.replace(tzinfo=UTC)
    else:
        moment = localize(civil, local_zone)

    logger.debug("Resolved %r in %s zone to %s", text, input_tz.label, moment)
    return Instant(moment), ParsedFormatted()
