import json
import re
from datetime import datetime, tzinfo
from typing import Any

from timeparse.constants import SCHEMA_VERSION
from timeparse.errors import ParseError
from timeparse.models import Instant, ParsedTimestamp, ParseOutcome, TimezoneChoice

# A single strftime directive, so "%%Y" is read as "%%" followed by "Y".
STRFTIME_DIRECTIVE_RE = re.compile(r"%.", re.DOTALL)


def to_zone(
    instant: Instant, output_tz: TimezoneChoice, local_zone: tzinfo | None = None
) -> datetime:
    """Return the wall-clock representation of ``instant`` in ``output_tz``.

    The local offset is the one in force at the instant itself, not at the
    time the process runs.

    Raises:
        ParseError: If the local wall time falls outside the datetime range.
    """
    moment = instant.to_datetime()
    if output_tz is TimezoneChoice.UTC:
        return moment

    try:
        if local_zone is None:
            return moment.astimezone()
        return moment.astimezone(local_zone)
    except (OverflowError, OSError, ValueError) as e:
        raise ParseError(
            f"Cannot represent {to_rfc3339(moment)} in the local zone"
        ) from e


def to_rfc3339(moment: datetime) -> str:
    """Render an aware datetime as RFC 3339 with a numeric offset.

    Sub-second digits are omitted when zero and shortened to milliseconds
    when the value is millisecond-aligned. Offsets are rounded to whole
    minutes, since historical local mean time offsets carry seconds.
    """
    if moment.microsecond == 0:
        timespec = "seconds"
    elif moment.microsecond % 1000 == 0:
        timespec = "milliseconds"
    else:
        timespec = "microseconds"

    minutes = round(moment.utcoffset().total_seconds() / 60)
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)

    wall = moment.replace(tzinfo=None).isoformat(timespec=timespec)
    return f"{wall}{sign}{hours:02d}:{minutes:02d}"


def _strftime(moment: datetime, pattern: str) -> str:
    # glibc doesn't zero-pad %Y below year 1000
    year = f"{moment.year:04d}"
    pattern = STRFTIME_DIRECTIVE_RE.sub(
        lambda m: year if m.group() == "%Y" else m.group(), pattern
    )
    return moment.strftime(pattern)


def format_instant(
    instant: Instant,
    output_tz: TimezoneChoice,
    custom_format: str | None = None,
    *,
    local_zone: tzinfo | None = None,
) -> str:
    """Render an instant as text.

    Args:
        instant: The instant to render.
        output_tz: Zone whose wall-clock time is shown.
        custom_format: ``strftime`` pattern, e.g. ``"%Y/%m/%d %H:%M:%S"``.
            RFC 3339 is used when None.
        local_zone: Zone standing in for the process's local zone.

    Returns:
        The rendered string.

    Raises:
        ParseError: If the instant has no local wall time in the datetime range.
    """
    moment = to_zone(instant, output_tz, local_zone)
    if custom_format is not None:
        return _strftime(moment, custom_format)
    return to_rfc3339(moment)


def build_report(
    text: str,
    instant: Instant,
    outcome: ParseOutcome,
    input_tz: TimezoneChoice,
    output_tz: TimezoneChoice,
    *,
    local_zone: tzinfo | None = None,
) -> dict[str, Any]:
    """Describe a conversion as a JSON-serialisable dict.

    ``ts_unit`` is only set when the input was a numeric timestamp.
    """
    ts_unit = outcome.unit.value if isinstance(outcome, ParsedTimestamp) else None
    return {
        "schema_version": SCHEMA_VERSION,
        "input": text,
        "parsed_as": outcome.kind,
        "ts_unit": ts_unit,
        "input_tz": input_tz.label,
        "output_tz": output_tz.label,
        "unix_seconds": instant.unix_seconds,
        "unix_millis": instant.unix_millis,
        "rfc3339": format_instant(instant, output_tz, local_zone=local_zone),
    }


def render_report(report: dict[str, Any]) -> str:
    return json.dumps(report, indent=2, ensure_ascii=False)
