"""
Exceptions raised while parsing activity records and computing metrics.

All of them derive from TrackerError, which is itself a ValueError, so callers
that only care about "bad input" can catch the built-in type.
"""

from typing import Optional


class TrackerError(ValueError):
    """Base exception for all tracker errors."""

    kind = "tracker"
    default_message = "invalid activity data"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class StringFormatError(TrackerError):
    """Raised when a record has the wrong number of fields."""

    kind = "string_format"
    default_message = "invalid string format"


class ParseError(TrackerError):
    """Raised when a step count or duration cannot be parsed."""

    kind = "parse"
    default_message = "cannot parse value"


class StepsError(TrackerError):
    kind = "steps"
    default_message = "invalid steps count"


class TimeError(TrackerError):
    kind = "time"
    default_message = "invalid duration"


class WeightError(TrackerError):
    kind = "weight"
    default_message = "invalid weight"


class HeightError(TrackerError):
    kind = "height"
    default_message = "invalid height"


class SpeedError(TrackerError):
    """Logged, never raised, when a computed average speed is not positive."""

    kind = "speed"
    default_message = "invalid speed"


class UnknownTrainingTypeError(TrackerError):
    kind = "unknown_training_type"
    default_message = "unknown training type"
