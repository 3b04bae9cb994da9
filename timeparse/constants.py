import re

# Integer magnitudes at or above this are treated as milliseconds.
MILLIS_THRESHOLD = 1_000_000_000_000

# Signed 64-bit bounds accepted for numeric input.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Numeric timestamp grammar (ASCII digits only, optional sign).
TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")

# The only accepted datetime input: YYYY/MM/DD HH:MM:SS.
DATETIME_RE = re.compile(
    r"(?P<year>[0-9]{4})/(?P<month>[0-9]{2})/(?P<day>[0-9]{2}) "
    r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
)
INPUT_FORMAT_HINT = "YYYY/MM/DD HH:MM:SS"

# Process exit codes for the two error kinds.
EXIT_PARSE = 3
EXIT_TZ = 4

# Version marker of the JSON report layout.
SCHEMA_VERSION = 1

# Environment variables read for option defaults.
ENV_INPUT_TZ = "TIMEPARSE_INPUT_TZ"
ENV_OUTPUT_TZ = "TIMEPARSE_OUTPUT_TZ"
ENV_TS_UNIT = "TIMEPARSE_TS_UNIT"
