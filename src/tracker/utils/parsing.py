import re
from datetime import timedelta
from typing import Tuple

from ..errors import ParseError, StepsError, StringFormatError, TimeError
from ..models.activity import ActivityRecord, ActivityType

FIELD_DELIMITER = ","

# Duration units, in microseconds
DURATION_UNITS = {
    'ns': 0.001,
    'us': 1,
    'µs': 1,  # U+00B5 micro sign
    'μs': 1,  # U+03BC greek mu
    'ms': 1000,
    's': 1000 * 1000,
    'm': 60 * 1000 * 1000,
    'h': 60 * 60 * 1000 * 1000,
}

_NUMBER = r'(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)'
_UNIT = r'(?:ns|us|µs|μs|ms|s|m|h)'
DURATION_PATTERN = re.compile(rf'([+-]?)((?:{_NUMBER}{_UNIT})+)')
DURATION_PART = re.compile(rf'({_NUMBER})({_UNIT})')
STEPS_PATTERN = re.compile(r'[+-]?[0-9]+')

# Values must fit a signed 64-bit integer; durations count nanoseconds in it
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1
MAX_DURATION_MICROS = INT64_MAX / 1000

def parse_duration(text: str) -> timedelta:
    """Parse a compact duration such as "2h30m", "90m" or "1.5h"."""
    if text in ("0", "+0", "-0"):
        return timedelta(0)

    match = DURATION_PATTERN.fullmatch(text)
    if not match:
        raise ParseError(f"invalid duration {text!r}")

    sign, body = match.groups()
    micros = sum(
        float(value) * DURATION_UNITS[unit]
        for value, unit in DURATION_PART.findall(body)
    )
    if micros > MAX_DURATION_MICROS:
        raise ParseError(f"invalid duration {text!r}")

    # Sub-microsecond durations keep their sign instead of collapsing to zero
    if 0 < micros < 1:
        micros = 1
    if sign == "-":
        micros = -micros

    return timedelta(microseconds=micros)

def parse_int(text: str) -> int:
    """Parse a base-10 integer with an optional sign and nothing else around it."""
    if not STEPS_PATTERN.fullmatch(text):
        raise ParseError(f"invalid integer {text!r}")
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ParseError(f"integer out of range {text!r}")
    return value

def _split(data: str, expected: int) -> list:
    fields = data.split(FIELD_DELIMITER)
    if len(fields) != expected:
        raise StringFormatError()
    return fields

def _parse_steps_field(text: str) -> int:
    steps = parse_int(text)
    if steps <= 0:
        raise StepsError()
    return steps

def _parse_duration_field(text: str) -> timedelta:
    duration = parse_duration(text)
    if duration <= timedelta(0):
        raise TimeError()
    return duration

def parse_steps(data: str) -> Tuple[int, timedelta]:
    """Parse a "<steps>,<duration>" record."""
    steps_text, duration_text = _split(data, 2)
    steps = _parse_steps_field(steps_text)
    duration = _parse_duration_field(duration_text)
    return steps, duration

def parse_training(data: str) -> Tuple[int, str, timedelta]:
    """Parse a "<steps>,<label>,<duration>" record.

    The label is returned as-is; resolving it to an ActivityType is left to
    the caller.
    """
    steps_text, label, duration_text = _split(data, 3)
    steps = _parse_steps_field(steps_text)
    duration = _parse_duration_field(duration_text)
    return steps, label, duration

def parse_record(data: str) -> ActivityRecord:
    """Parse either record form into an ActivityRecord."""
    field_count = len(data.split(FIELD_DELIMITER))

    if field_count == 2:
        steps, duration = parse_steps(data)
        return ActivityRecord(steps=steps, duration=duration)

    if field_count == 3:
        steps, label, duration = parse_training(data)
        return ActivityRecord(
            steps=steps,
            activity=ActivityType.from_label(label),
            label=label,
            duration=duration,
        )

    raise StringFormatError()
