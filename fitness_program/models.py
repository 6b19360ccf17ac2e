"""Data models for the 30-day fitness program."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .exceptions import InvalidArgumentError, MalformedDataError, ParseError


# number of workouts in the program, one per day
TOTAL_PLANNED_WORKOUTS = 30

# number of lines in a stored profile
PROFILE_LINE_COUNT = 5

MIN_AGE = 1
MAX_AGE = 100

# "Day: <day>, Completed: <bool>, Time Taken: <minutes>"
WORKOUT_LINE_PATTERN = re.compile(
    r"^Day: (?P<day>.*), Completed: (?P<completed>[^,]*), Time Taken: (?P<time_taken>.*)$"
)

# stored times are unpadded digits; entry fields may carry a sign
_MINUTES_PATTERN = re.compile(r"\d+", re.ASCII)
_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def day_label(day_number: int) -> str:
    """Return the display label for a program day, e.g. "Day 7"."""
    return f"Day {day_number}"


def parse_minutes(text: Optional[str]) -> Optional[int]:
    """
    Parse a stored time value as non-negative whole minutes.

    Returns None when the text is not a plain non-negative integer.
    """
    if text is None:
        return None

    if _MINUTES_PATTERN.fullmatch(text) is None:
        return None
    return int(text)


def _parse_integer(text: Optional[str], message: str) -> int:
    """Parse a trimmed, optionally signed run of digits, or raise ParseError."""
    text = (text or "").strip()
    if _INTEGER_PATTERN.fullmatch(text) is None:
        raise ParseError(message)
    return int(text)


def parse_duration(hours_text: str, minutes_text: str) -> int:
    """
    Convert hours and minutes entry fields into total minutes.

    Empty fields count as zero.

    Raises:
        ParseError: If either field is not a whole number.
        InvalidArgumentError: If either field is negative.
    """
    total = 0
    for text, factor in ((hours_text, 60), (minutes_text, 1)):
        if not (text or "").strip():
            continue
        value = _parse_integer(
            text,
            "Invalid number format. Please enter a valid number for hours and minutes.",
        )
        if value < 0:
            raise InvalidArgumentError("Hours and minutes must not be negative.")
        total += value * factor

    return total


def split_duration(minutes: int) -> Tuple[int, int]:
    """Split total minutes into (hours, minutes) entry-field values."""
    return divmod(minutes, 60)


class FitnessLevel(Enum):
    """Self-assessed fitness level, stored by its display label."""

    BEGINNER = "Beginner"
    NOVICE = "Novice"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"

    @classmethod
    def from_label(cls, label: str) -> "FitnessLevel":
        """Look up a fitness level by its display label."""
        for level in cls:
            if level.value == label.strip():
                return level
        raise MalformedDataError(f"Unknown fitness level: {label!r}")


@dataclass
class Profile:
    """The single user's identity and fitness level."""

    first_name: str
    last_name: str
    age: int
    weight: float
    fitness_level: FitnessLevel

    @classmethod
    def from_form(
        cls,
        first_name: str,
        last_name: str,
        age_text: str,
        weight_text: str,
        level_text: Optional[str],
    ) -> "Profile":
        """
        Build a validated profile from raw form input.

        Parameters:
            first_name: First name, must not be blank.
            last_name: Last name, must not be blank.
            age_text: Age as text, a whole number from 1 to 100.
            weight_text: Weight in pounds as text, greater than zero.
            level_text: Fitness level display label.

        Returns:
            The validated profile.

        Raises:
            InvalidArgumentError: If a field is missing or out of range.
            ParseError: If age or weight is not a number.
            MalformedDataError: If the fitness level is not recognised.
        """
        first_name = (first_name or "").strip()
        last_name = (last_name or "").strip()

        if not first_name:
            raise InvalidArgumentError("First name must not be empty")
        if not last_name:
            raise InvalidArgumentError("Last name must not be empty")

        age = _parse_age(age_text)
        weight = _parse_weight(weight_text)

        if not level_text or not level_text.strip():
            raise InvalidArgumentError("Please select a fitness level")

        return cls(
            first_name=first_name,
            last_name=last_name,
            age=age,
            weight=weight,
            fitness_level=FitnessLevel.from_label(level_text),
        )

    def to_lines(self) -> List[str]:
        """Storage lines in fixed field order."""
        return [
            self.first_name,
            self.last_name,
            str(self.age),
            str(self.weight),
            self.fitness_level.value,
        ]

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "Profile":
        """
        Reconstruct a profile from its storage lines.

        Raises:
            MalformedDataError: If fewer than five lines are present or the
                fitness level is unknown.
            ParseError: If age or weight is not a number.
        """
        if len(lines) < PROFILE_LINE_COUNT:
            raise MalformedDataError(
                f"Profile has {len(lines)} lines, expected {PROFILE_LINE_COUNT}"
            )

        first_name, last_name, age_text, weight_text, level_text = lines[
            :PROFILE_LINE_COUNT
        ]

        return cls(
            first_name=first_name,
            last_name=last_name,
            age=_parse_age(age_text),
            weight=_parse_weight(weight_text),
            fitness_level=FitnessLevel.from_label(level_text),
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


def _parse_age(text: str) -> int:
    age = _parse_integer(text, "Age must be a valid integer")

    if age < MIN_AGE or age > MAX_AGE:
        raise InvalidArgumentError(
            f"Age must be a valid integer between {MIN_AGE} and {MAX_AGE}"
        )
    return age


def _parse_weight(text: str) -> float:
    text = (text or "").strip()
    if _DECIMAL_PATTERN.fullmatch(text) is None:
        raise ParseError("Weight must be a valid number")

    weight = float(text)
    if weight <= 0:
        raise InvalidArgumentError("Weight must be a positive number")
    return weight


@dataclass
class WorkoutRecord:
    """Completion status and time taken for one program day."""

    day: str
    completed: bool = False
    time_taken: str = "0"

    @property
    def minutes(self) -> Optional[int]:
        """Time taken as whole minutes, or None if it does not parse."""
        return parse_minutes(self.time_taken)

    @classmethod
    def default(cls, day_number: int) -> "WorkoutRecord":
        """Record for a day that has never been saved."""
        return cls(day=day_label(day_number), completed=False, time_taken="0")

    def to_line(self) -> str:
        """Render the single storage line for this record."""
        completed = "true" if self.completed else "false"
        return f"Day: {self.day}, Completed: {completed}, Time Taken: {self.time_taken}"

    @classmethod
    def from_line(cls, line: str) -> Optional["WorkoutRecord"]:
        """
        Parse a storage line.

        Returns None if the line does not match the expected pattern.
        """
        match = WORKOUT_LINE_PATTERN.match(line.rstrip("\r\n"))
        if match is None:
            return None

        return cls(
            day=match.group("day"),
            completed=match.group("completed").strip().lower() == "true",
            time_taken=match.group("time_taken"),
        )

    def __str__(self) -> str:
        return self.to_line()


@dataclass
class FitnessSummary:
    """Aggregated metrics over the recorded workouts."""

    average_time: float
    total_time: int
    consistency_score: float
    personal_best: str

    def as_display(self) -> Dict[str, str]:
        """Metric values formatted for display."""
        return {
            "Average Time Per Workout": f"{self.average_time:.2f}",
            "Total Time Spent Exercising": str(self.total_time),
            "Consistency Score": f"{self.consistency_score:.2f}",
            "Longest Workout": self.personal_best,
        }
