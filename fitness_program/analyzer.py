"""
Workout metrics analyzer.

Provides pure functions for calculating summary statistics over the
recorded workouts of the program. A record whose time taken does not
parse as whole minutes is logged and left out of every calculation.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from .exceptions import InvalidArgumentError
from .models import TOTAL_PLANNED_WORKOUTS, FitnessSummary, WorkoutRecord


logger = logging.getLogger(__name__)

NO_DATA = "No data available"


def _timed_records(
    records: Iterable[WorkoutRecord],
) -> Iterator[Tuple[WorkoutRecord, int]]:
    """Yield (record, minutes) pairs, skipping records that do not parse."""
    for record in records:
        minutes = record.minutes
        if minutes is None:
            logger.warning(
                f"Error parsing time taken for {record.day}: {record.time_taken!r}"
            )
            continue
        yield record, minutes


def calculate_average_time(records: Iterable[WorkoutRecord]) -> float:
    """Average time in minutes across completed workouts."""
    completed = [
        minutes for record, minutes in _timed_records(records) if record.completed
    ]

    if not completed:
        return 0.0

    return sum(completed) / len(completed)


def calculate_total_time(records: Iterable[WorkoutRecord]) -> int:
    """Total minutes across all workouts, completed or not."""
    return sum(minutes for _, minutes in _timed_records(records))


def calculate_consistency_score(
    records: Iterable[WorkoutRecord], total_planned: int
) -> float:
    """
    Percentage of planned workouts that were completed.

    Raises:
        InvalidArgumentError: If total_planned is not positive.
    """
    if total_planned <= 0:
        raise InvalidArgumentError("Total planned workouts must not be zero")

    completed = sum(1 for record, _ in _timed_records(records) if record.completed)
    return completed / total_planned * 100


def find_personal_best(records: Iterable[WorkoutRecord]) -> Optional[WorkoutRecord]:
    """Record with the longest time taken; the earliest wins a tie."""
    best: Optional[WorkoutRecord] = None
    best_minutes = -1

    for record, minutes in _timed_records(records):
        if minutes > best_minutes:
            best, best_minutes = record, minutes

    return best


def calculate_personal_best(records: Iterable[WorkoutRecord]) -> str:
    """Describe the longest workout, e.g. "60 minutes on Day 3"."""
    best = find_personal_best(records)

    if best is None:
        return NO_DATA

    return f"{best.minutes} minutes on {best.day}"


def calculate_summary(
    records: Iterable[WorkoutRecord], total_planned: int = TOTAL_PLANNED_WORKOUTS
) -> FitnessSummary:
    """Calculate all fitness metrics for the loaded records."""
    # filter once so each unparseable record is reported a single time
    loaded: List[WorkoutRecord] = [record for record, _ in _timed_records(records)]

    return FitnessSummary(
        average_time=calculate_average_time(loaded),
        total_time=calculate_total_time(loaded),
        consistency_score=calculate_consistency_score(loaded, total_planned),
        personal_best=calculate_personal_best(loaded),
    )
