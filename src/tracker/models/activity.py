# src/tracker/models/activity.py

from datetime import timedelta
from typing import Optional
import enum

from pydantic import BaseModel, ConfigDict

from ..errors import UnknownTrainingTypeError

class ActivityType(enum.Enum):
    RUNNING = "Running"
    WALKING = "Walking"

    @classmethod
    def from_label(cls, label: str) -> "ActivityType":
        """Resolve a record label to an activity type; labels are case-sensitive."""
        for member in cls:
            if member.value == label:
                return member
        raise UnknownTrainingTypeError(f"unknown training type: {label!r}")


class ActivityRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    steps: int
    activity: Optional[ActivityType] = None
    label: Optional[str] = None
    duration: timedelta


class PhysicalProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    weight: float
    height: float


class DerivedMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    distance_km: float
    average_speed_kmh: float
    calories_burned: float
