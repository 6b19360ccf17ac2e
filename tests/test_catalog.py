"""
Tests for the program catalog.
"""

from fitness_program.catalog import (
    NO_DESCRIPTION,
    WORKOUT_DESCRIPTIONS,
    describe_workout,
    iter_program,
)
from fitness_program.models import TOTAL_PLANNED_WORKOUTS


class TestCatalog:
    """Tests for workout descriptions."""

    def test_one_description_per_day(self):
        """Test the plan covers every program day."""
        assert len(WORKOUT_DESCRIPTIONS) == TOTAL_PLANNED_WORKOUTS
        assert all(description.strip() for description in WORKOUT_DESCRIPTIONS)

    def test_describe_known_days(self):
        """Test lookups by day number."""
        assert describe_workout(1).startswith("Warm Up: 10 mins")
        assert describe_workout(4) == "Rest or yoga 30 mins. Thats it. You deserved it!"
        assert describe_workout(19) == "60 min jogging or running"
        assert "1 mile Run" in describe_workout(30)

    def test_repeat_days(self):
        """Test the repeat days reuse the day 2 exercises."""
        assert "Repeat Day 2" in describe_workout(18)
        assert describe_workout(18) == describe_workout(27)
        assert "Russian Twist" in describe_workout(2)

    def test_out_of_range(self):
        """Test out-of-range days return the placeholder."""
        assert describe_workout(0) == NO_DESCRIPTION
        assert describe_workout(31) == NO_DESCRIPTION
        assert describe_workout(-3) == NO_DESCRIPTION

    def test_iter_program(self):
        """Test iterating the whole plan."""
        program = list(iter_program())

        assert len(program) == TOTAL_PLANNED_WORKOUTS
        assert program[0] == (1, "Day 1", describe_workout(1))
        assert program[-1][:2] == (30, "Day 30")
