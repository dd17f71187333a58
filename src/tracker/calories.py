# src/tracker/calories.py

import time
from datetime import timedelta

from .config import settings
from .errors import (
    HeightError,
    SpeedError,
    StepsError,
    TimeError,
    TrackerError,
    WeightError,
)
from .metrics import report_duration, report_errors_total, reports_total
from .models.activity import ActivityType, DerivedMetrics, PhysicalProfile
from .utils.logging import setup_logger
from .utils.parsing import parse_training

logger = setup_logger(__name__, level=settings.log_level)

STEP_LENGTH = 0.65  # average stride, meters
M_IN_KM = 1000
MIN_IN_H = 60
STEP_LENGTH_COEFFICIENT = 0.45  # stride length as a share of height
WALKING_CALORIES_COEFFICIENT = 0.5

TRAINING_REPORT = (
    "Training type: {label}\n"
    "Duration: {hours:.2f} h.\n"
    "Distance: {distance:.2f} km.\n"
    "Speed: {speed:.2f} km/h\n"
    "Calories burned: {calories:.2f}\n"
)

def _hours(duration: timedelta) -> float:
    return duration.total_seconds() / 3600

def _minutes(duration: timedelta) -> float:
    return duration.total_seconds() / 60

def validate(steps: int, weight: float, height: float, duration: timedelta) -> None:
    """Raise the error for the first invalid value, checked in a fixed order."""
    if steps <= 0:
        raise StepsError()
    if duration <= timedelta(0):
        raise TimeError()
    if weight <= 0:
        raise WeightError()
    if height <= 0:
        raise HeightError()

def distance(steps: int, height: float) -> float:
    """Distance in km, using a stride derived from height."""
    stride_length = height * STEP_LENGTH_COEFFICIENT
    return steps * stride_length / M_IN_KM

def mean_speed(steps: int, height: float, duration: timedelta) -> float:
    """Average speed in km/h; 0 for a non-positive duration."""
    if duration <= timedelta(0):
        return 0
    return distance(steps, height) / _hours(duration)

def spent_calories(steps: int, weight: float, height: float, duration: timedelta) -> float:
    validate(steps, weight, height, duration)

    average_speed = mean_speed(steps, height, duration)
    if average_speed <= 0:
        logger.warning(SpeedError())

    return weight * average_speed * _minutes(duration) / MIN_IN_H

def running_spent_calories(steps: int, weight: float, height: float, duration: timedelta) -> float:
    """Calories burned on a run."""
    return spent_calories(steps, weight, height, duration)

def walking_spent_calories(steps: int, weight: float, height: float, duration: timedelta) -> float:
    """Calories burned on a walk: the running figure scaled down."""
    return spent_calories(steps, weight, height, duration) * WALKING_CALORIES_COEFFICIENT

CALORIE_MODELS = {
    ActivityType.RUNNING: running_spent_calories,
    ActivityType.WALKING: walking_spent_calories,
}

def derive_metrics(steps: int, activity: ActivityType, profile: PhysicalProfile,
                   duration: timedelta) -> DerivedMetrics:
    calorie_model = CALORIE_MODELS[activity]
    return DerivedMetrics(
        distance_km=distance(steps, profile.height),
        average_speed_kmh=mean_speed(steps, profile.height, duration),
        calories_burned=calorie_model(steps, profile.weight, profile.height, duration),
    )

def report_training(data: str, weight: float, height: float) -> str:
    """Build a training report from a "<steps>,<label>,<duration>" record.

    Example:
        >>> print(report_training("5000,Running,1h0m", 75, 175), end="")
        Training type: Running
        Duration: 1.00 h.
        Distance: 393.75 km.
        Speed: 393.75 km/h
        Calories burned: 29531.25

    Errors are logged and then re-raised to the caller.
    """
    start_time = time.time()
    try:
        steps, label, duration = parse_training(data)
        validate(steps, weight, height, duration)
        activity = ActivityType.from_label(label)
        metrics = derive_metrics(steps, activity, PhysicalProfile(weight=weight, height=height), duration)
    except TrackerError as e:
        logger.error(f"Failed to build training report for {data!r}: {e}")
        reports_total.labels(report='training', status='error').inc()
        report_errors_total.labels(report='training', kind=e.kind).inc()
        raise

    reports_total.labels(report='training', status='success').inc()
    report_duration.labels(report='training').observe(time.time() - start_time)

    return TRAINING_REPORT.format(
        label=label,
        hours=_hours(duration),
        distance=metrics.distance_km,
        speed=metrics.average_speed_kmh,
        calories=metrics.calories_burned,
    )
