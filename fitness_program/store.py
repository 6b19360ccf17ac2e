"""
Flat-file record store.

Persists the user profile and one workout record per program day as
small text files under a single data directory.
"""

import logging
from pathlib import Path
from typing import List

from .exceptions import (
    InvalidArgumentError,
    StorageIOError,
    StorageNotFoundError,
)
from .models import (
    TOTAL_PLANNED_WORKOUTS,
    Profile,
    WorkoutRecord,
    day_label,
)


logger = logging.getLogger(__name__)

PROFILE_FILENAME = "userProfile.txt"


def workout_filename(day_number: int) -> str:
    """Slot name for a program day, e.g. "day7workout.txt"."""
    return f"day{day_number}workout.txt"


def _check_day(day_number: int) -> None:
    if isinstance(day_number, bool) or not isinstance(day_number, int):
        raise InvalidArgumentError(f"Day number must be an integer, got {day_number!r}")
    if day_number < 1 or day_number > TOTAL_PLANNED_WORKOUTS:
        raise InvalidArgumentError(
            f"Day number must be between 1 and {TOTAL_PLANNED_WORKOUTS}, "
            f"got {day_number}"
        )


class RecordStore:
    """Reads and writes the profile and per-day workout records."""

    def __init__(self, data_dir: Path):
        """Initialize store rooted at the given data directory."""
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def profile_path(self) -> Path:
        return self._data_dir / PROFILE_FILENAME

    def workout_path(self, day_number: int) -> Path:
        """Path of the storage slot for a program day."""
        _check_day(day_number)
        return self._data_dir / workout_filename(day_number)

    def _write_lines(self, filepath: Path, lines: List[str]) -> None:
        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            with open(filepath, "w", encoding="utf-8") as f:
                for line in lines:
                    f.write(line + "\n")
        except OSError as e:
            raise StorageIOError(
                f"An error occurred while saving the data to {filepath}: {e}"
            ) from e

    # -------------------------------------------------------------------------
    # profile
    # -------------------------------------------------------------------------

    def save_profile(self, profile: Profile) -> None:
        """
        Save the profile, overwriting any previous one.

        Raises:
            StorageIOError: If the profile file cannot be written.
        """
        self._write_lines(self.profile_path, profile.to_lines())
        logger.info(f"Saved profile for {profile.full_name} to {self.profile_path}")

    def load_profile(self) -> Profile:
        """
        Load the saved profile.

        Raises:
            StorageNotFoundError: If no profile has been saved.
            StorageIOError: If the profile file cannot be read.
            MalformedDataError: If the file has fewer than five lines or an
                unknown fitness level.
            ParseError: If age or weight is not a number.
        """
        filepath = self.profile_path
        try:
            with open(filepath, encoding="utf-8") as f:
                lines = f.read().splitlines()
        except FileNotFoundError as e:
            raise StorageNotFoundError(f"No profile found at {filepath}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageIOError(
                f"An error occurred while loading the data from {filepath}: {e}"
            ) from e

        return Profile.from_lines(lines)

    def has_profile(self) -> bool:
        return self.profile_path.exists()

    # -------------------------------------------------------------------------
    # workouts
    # -------------------------------------------------------------------------

    def save_workout(self, record: WorkoutRecord, day_number: int) -> None:
        """
        Save a workout record to the slot for the given day.

        Raises:
            InvalidArgumentError: If the day is outside the program.
            StorageIOError: If the slot cannot be written.
        """
        filepath = self.workout_path(day_number)
        self._write_lines(filepath, [record.to_line()])
        logger.debug(f"Saved {record.day} to {filepath}")

    def log_workout(
        self, day_number: int, completed: bool, minutes: int
    ) -> WorkoutRecord:
        """
        Record the outcome of a program day.

        Parameters:
            day_number: Program day, 1 to 30.
            completed: Whether the workout was finished.
            minutes: Time taken in minutes.

        Returns:
            The saved record.
        """
        _check_day(day_number)
        if minutes < 0:
            raise InvalidArgumentError("Time taken must not be negative")

        record = WorkoutRecord(
            day=day_label(day_number), completed=completed, time_taken=str(minutes)
        )
        self.save_workout(record, day_number)
        return record

    def load_workout(self, day_number: int) -> WorkoutRecord:
        """
        Load the workout record for a day.

        Missing, unreadable, or unparseable slots yield the default record
        (not completed, zero minutes). When a slot holds several lines the
        last parseable one wins.
        """
        filepath = self.workout_path(day_number)

        try:
            with open(filepath, encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"No stored workout for day {day_number}: {e}")
            return WorkoutRecord.default(day_number)

        record = None
        for line in lines:
            parsed = WorkoutRecord.from_line(line)
            if parsed is not None:
                record = parsed

        if record is None:
            logger.warning(f"Could not parse workout data in {filepath}, using defaults")
            return WorkoutRecord.default(day_number)

        return record

    def load_all_workouts(
        self, total: int = TOTAL_PLANNED_WORKOUTS
    ) -> List[WorkoutRecord]:
        """Load records for days 1 through total, in day order."""
        return [self.load_workout(day) for day in range(1, total + 1)]

    def has_workout(self, day_number: int) -> bool:
        """Whether a record has ever been saved for the day."""
        return self.workout_path(day_number).exists()
