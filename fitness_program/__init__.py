"""
30-day fitness program package.

This package provides tools for storing a user profile and daily
workout records, looking up the day-by-day program, and calculating
fitness metrics over the recorded workouts.
"""

__version__ = "0.1.0"
