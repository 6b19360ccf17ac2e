"""Shared fixtures for the fitness program tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from fitness_program.models import WorkoutRecord
from fitness_program.store import RecordStore


@pytest.fixture
def store(tmp_path):
    """Record store rooted in a temporary data directory."""
    return RecordStore(tmp_path / "data")


@pytest.fixture
def sample_records():
    """Three records: two completed, one skipped."""
    return [
        WorkoutRecord(day="Day1", completed=True, time_taken="30"),
        WorkoutRecord(day="Day2", completed=False, time_taken="45"),
        WorkoutRecord(day="Day3", completed=True, time_taken="60"),
    ]
