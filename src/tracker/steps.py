# src/tracker/steps.py

import time

from .calories import M_IN_KM, STEP_LENGTH, walking_spent_calories
from .config import settings
from .errors import TrackerError
from .metrics import report_duration, report_errors_total, reports_total
from .utils.logging import setup_logger
from .utils.parsing import parse_steps

logger = setup_logger(__name__, level=settings.log_level)

STEPS_REPORT = (
    "Steps count: {steps}.\n"
    "Distance was {distance:.2f} km.\n"
    "You burned {calories:.2f} kcal.\n"
)

def report_steps(data: str, weight: float, height: float) -> str:
    """Build a daily steps report from a "<steps>,<duration>" record.

    Distance uses the fixed stride; calories follow the walking model. Any
    invalid input is logged and an empty string is returned instead.
    """
    start_time = time.time()
    try:
        steps, duration = parse_steps(data)
        calories = walking_spent_calories(steps, weight, height, duration)
    except TrackerError as e:
        logger.error(f"Failed to build steps report for {data!r}: {e}")
        reports_total.labels(report='steps', status='error').inc()
        report_errors_total.labels(report='steps', kind=e.kind).inc()
        return ""

    distance = steps * STEP_LENGTH / M_IN_KM

    reports_total.labels(report='steps', status='success').inc()
    report_duration.labels(report='steps').observe(time.time() - start_time)

    return STEPS_REPORT.format(steps=steps, distance=distance, calories=calories)
