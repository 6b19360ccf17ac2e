"""
Tests for fitness program models.

Tests parsing functions and model properties.
"""

import pytest

from fitness_program.exceptions import (
    InvalidArgumentError,
    MalformedDataError,
    ParseError,
)
from fitness_program.models import (
    FitnessLevel,
    FitnessSummary,
    Profile,
    WorkoutRecord,
    day_label,
    parse_duration,
    parse_minutes,
    split_duration,
)


class TestParseMinutes:
    """Tests for parse_minutes."""

    def test_valid(self):
        """Test plain integers parse."""
        assert parse_minutes("45") == 45
        assert parse_minutes("0") == 0

    def test_invalid(self):
        """Test non-integers return None."""
        assert parse_minutes("abc") is None
        assert parse_minutes("") is None
        assert parse_minutes("-5") is None
        assert parse_minutes("4.5") is None
        assert parse_minutes("1_0") is None
        assert parse_minutes(" 30 ") is None
        assert parse_minutes("+30") is None
        assert parse_minutes(None) is None


class TestParseDuration:
    """Tests for parse_duration."""

    def test_hours_and_minutes(self):
        """Test hours are converted to minutes."""
        assert parse_duration("1", "15") == 75

    def test_empty_fields_are_zero(self):
        """Test blank fields count as zero."""
        assert parse_duration("", "") == 0
        assert parse_duration("", "40") == 40
        assert parse_duration("2", "") == 120

    def test_invalid_number(self):
        """Test non-numeric input raises ParseError."""
        with pytest.raises(ParseError):
            parse_duration("one", "10")

    def test_negative(self):
        """Test negative input is rejected."""
        with pytest.raises(InvalidArgumentError):
            parse_duration("0", "-10")

    def test_rejects_underscores_and_fractions(self):
        """Test only plain digits are accepted."""
        with pytest.raises(ParseError):
            parse_duration("", "1_0")
        with pytest.raises(ParseError):
            parse_duration("1.5", "")

    def test_trims_entry_fields(self):
        """Test surrounding whitespace in entry fields is ignored."""
        assert parse_duration(" 1 ", " 5 ") == 65


class TestSplitDuration:
    """Tests for split_duration."""

    def test_split(self):
        """Test total minutes split back into hours and minutes."""
        assert split_duration(65) == (1, 5)
        assert split_duration(0) == (0, 0)
        assert split_duration(120) == (2, 0)


class TestFitnessLevel:
    """Tests for FitnessLevel enum."""

    def test_from_label(self):
        """Test mapping display labels."""
        assert FitnessLevel.from_label("Beginner") == FitnessLevel.BEGINNER
        assert FitnessLevel.from_label("Expert") == FitnessLevel.EXPERT
        assert FitnessLevel.from_label(" Novice ") == FitnessLevel.NOVICE

    def test_from_label_unknown(self):
        """Test unknown labels are malformed data."""
        with pytest.raises(MalformedDataError):
            FitnessLevel.from_label("Olympian")


class TestProfile:
    """Tests for Profile model."""

    def test_from_form_valid(self):
        """Test building a profile from form input."""
        profile = Profile.from_form(" Jane ", "Doe", "34", "150.5", "Intermediate")

        assert profile.first_name == "Jane"
        assert profile.last_name == "Doe"
        assert profile.age == 34
        assert profile.weight == 150.5
        assert profile.fitness_level == FitnessLevel.INTERMEDIATE
        assert profile.full_name == "Jane Doe"

    def test_from_form_blank_name(self):
        """Test blank names are rejected."""
        with pytest.raises(InvalidArgumentError):
            Profile.from_form("", "Doe", "34", "150", "Novice")
        with pytest.raises(InvalidArgumentError):
            Profile.from_form("Jane", "  ", "34", "150", "Novice")

    def test_from_form_age(self):
        """Test age parsing and range checks."""
        with pytest.raises(ParseError):
            Profile.from_form("Jane", "Doe", "thirty", "150", "Novice")
        with pytest.raises(InvalidArgumentError):
            Profile.from_form("Jane", "Doe", "0", "150", "Novice")
        with pytest.raises(InvalidArgumentError):
            Profile.from_form("Jane", "Doe", "101", "150", "Novice")

        assert Profile.from_form("Jane", "Doe", "1", "150", "Novice").age == 1
        assert Profile.from_form("Jane", "Doe", "100", "150", "Novice").age == 100

    def test_from_form_age_rejects_underscores(self):
        """Test digit separators are not accepted in the age."""
        with pytest.raises(ParseError):
            Profile.from_form("Jane", "Doe", "3_0", "150", "Novice")

    def test_from_form_weight(self):
        """Test weight parsing and range checks."""
        with pytest.raises(ParseError):
            Profile.from_form("Jane", "Doe", "34", "heavy", "Novice")
        with pytest.raises(ParseError):
            Profile.from_form("Jane", "Doe", "34", "1_50", "Novice")
        with pytest.raises(ParseError):
            Profile.from_form("Jane", "Doe", "34", "nan", "Novice")
        with pytest.raises(InvalidArgumentError):
            Profile.from_form("Jane", "Doe", "34", "0", "Novice")
        with pytest.raises(InvalidArgumentError):
            Profile.from_form("Jane", "Doe", "34", "-12", "Novice")

    def test_from_form_missing_level(self):
        """Test a fitness level must be selected."""
        with pytest.raises(InvalidArgumentError):
            Profile.from_form("Jane", "Doe", "34", "150", None)

    def test_lines_round_trip(self):
        """Test profile survives conversion to and from storage lines."""
        profile = Profile("Jane", "Doe", 34, 150.5, FitnessLevel.ADVANCED)

        lines = profile.to_lines()

        assert lines == ["Jane", "Doe", "34", "150.5", "Advanced"]
        assert Profile.from_lines(lines) == profile

    def test_from_lines_too_short(self):
        """Test fewer than five lines is malformed data."""
        with pytest.raises(MalformedDataError):
            Profile.from_lines(["Jane", "Doe", "34"])
        with pytest.raises(MalformedDataError):
            Profile.from_lines([])

    def test_from_lines_bad_age(self):
        """Test a non-numeric stored age is a parse error."""
        with pytest.raises(ParseError):
            Profile.from_lines(["Jane", "Doe", "x", "150", "Novice"])


class TestWorkoutRecord:
    """Tests for WorkoutRecord model."""

    def test_default(self):
        """Test default record for an unsaved day."""
        record = WorkoutRecord.default(7)

        assert record == WorkoutRecord(day="Day 7", completed=False, time_taken="0")

    def test_to_line(self):
        """Test storage line format."""
        record = WorkoutRecord(day="Day 3", completed=True, time_taken="60")

        assert record.to_line() == "Day: Day 3, Completed: true, Time Taken: 60"
        assert str(record) == record.to_line()

    def test_from_line(self):
        """Test parsing a storage line."""
        record = WorkoutRecord.from_line("Day: Day 3, Completed: false, Time Taken: 25\n")

        assert record == WorkoutRecord(day="Day 3", completed=False, time_taken="25")

    def test_from_line_mismatch(self):
        """Test lines without the expected fields return None."""
        assert WorkoutRecord.from_line("") is None
        assert WorkoutRecord.from_line("garbage") is None
        assert WorkoutRecord.from_line("Day: Day 1, Completed: true") is None

    def test_minutes(self):
        """Test minutes property parses time taken."""
        assert WorkoutRecord("Day 1", True, "42").minutes == 42
        assert WorkoutRecord("Day 1", True, "abc").minutes is None

    def test_day_label(self):
        """Test day label formatting."""
        assert day_label(12) == "Day 12"


class TestFitnessSummary:
    """Tests for FitnessSummary model."""

    def test_as_display(self):
        """Test metric formatting for display."""
        summary = FitnessSummary(
            average_time=45.0,
            total_time=135,
            consistency_score=200 / 30,
            personal_best="60 minutes on Day3",
        )

        display = summary.as_display()

        assert display["Average Time Per Workout"] == "45.00"
        assert display["Total Time Spent Exercising"] == "135"
        assert display["Consistency Score"] == "6.67"
        assert display["Longest Workout"] == "60 minutes on Day3"
