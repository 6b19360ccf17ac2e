"""
Program catalog.

The fixed 30-day cross-functional workout plan, indexed by day number.
"""

from typing import Iterator, Tuple

from .models import day_label


NO_DESCRIPTION = "No workout description available."

_EMOM_BLOCK = (
    "   Exercise 1: Air Squat: 20 to 35 reps\n"
    "   Exercise 2: Push Up: 10 to 20 reps\n"
    "   Exercise 3: Reverse lunge: 20 reps (10 reps per side)\n"
    "   Exercise 4: Burpee: 10 to 20 reps\n"
    "   Exercise 5: Russian Twist: 10 to 20 reps\n"
    "   Exercise 6: Jump rope\n"
    "   Exercise 7: V-up: 10 to 20 reps\n\n"
)

_EMOM_REPEAT = (
    "Repeat Day 2 and try to increase counts.\n\n"
    "Warm Up: 10 mins\n\n"
    "EMOM (Every minute on the minute) 35 mins (Workout for 45 sec, 15 sec rest)\n"
    + _EMOM_BLOCK
    + "Stretching: 10 mins"
)

_REST = "Rest or Yoga 30 mins"

WORKOUT_DESCRIPTIONS: Tuple[str, ...] = (
    # day 1
    "Warm Up: 10 mins\n\n"
    "Workout of the Day (WOD):"
    "(Repeat 2 times)\n\n"
    "   Exercise 1: 200m Jumping Jacks\n"
    "   Exercise 2: 40 air squats\n"
    "   Exercise 3: 200m Jumping Jacks\n"
    "   Exercise 4: 30 sit-ups\n"
    "   Exercise 5: 200m Jumping Jacks\n"
    "   Exercise 6: 20 jump squats\n"
    "   Exercise 7: 200m Jumping Jacks\n"
    "   Exercise 8: 10 burpees\n\n"
    "Post-workout stretching: 10 mins.",
    # day 2
    "Warm Up: 10 mins\n\n"
    "EMOM (Every minute on the minute) 35 mins (Workout for 45 sec, 15 sec rest).\n\n"
    + _EMOM_BLOCK
    + "Stretching: 10 mins.",
    # day 3
    "Warm Up: 10 mins\n\n"
    "Workout Of the Day (WOD):\n"
    "Sixteen 2-minute AMRAP(AS MANY ROUNDS AS POSSIBLE) in 32 minutes\n\n"
    "   AMRAP(AS MANY ROUNDS AS POSSIBLE) from 0:00-4:00\n"
    "       20 Jumping Jacks, 16 Burpees\n\n"
    "   AMRAP(AS MANY ROUNDS AS POSSIBLE) from 4:00-8:00:\n"
    "       20 Jumping Jacks, 16 Push-Ups\n\n"
    "   AMRAP(AS MANY ROUNDS AS POSSIBLE) from 8:00-12:00:\n"
    "       20 Jumping Jacks, 16 Air Squats\n\n"
    "   AMRAP(AS MANY ROUNDS AS POSSIBLE) from 12:00-16:00:\n"
    "       20 Jumping Jacks, 16 Mountain Climbers\n\n"
    "   AMRAP(AS MANY ROUNDS AS POSSIBLE) from 16:00-20:00:\n"
    "       20 Jumping Jacks. 16 Jumping Jacks\n\n"
    "   AMRAP(AS MANY ROUNDS AS POSSIBLE) from 20:00-24:00:\n"
    "       20 Jumping Jacks, 16 Jumping Lunges\n\n"
    "   AMRAP(AS MANY ROUNDS AS POSSIBLE) from 24:00-28:00:\n"
    "       20 Jumping Jacks, 16 High Knees\n\n"
    "   AMRAP(AS MANY ROUNDS AS POSSIBLE) from 28:00-32:00:\n"
    "       20 Jumping Jacks, 16 Tuck Jumps\n\n"
    "Stretching: 10 mins.",
    # day 4
    "Rest or yoga 30 mins. Thats it. You deserved it!",
    # day 5
    "Warm Up: 10 mins\n\n\n"
    "Workout Of the Day (WOD):\n\n"
    "   1X: 1mile run, 50 burpees.\n\n"
    "   2X: 800 m run, 25 air squats.\n\n"
    "   3X: 400m run, 15 pushups.\n\n\n"
    "Stretching: 10 mins.",
    # day 6
    "Warm Up: 10 mins\n\n"
    "Practice Wall Walks for 15 mins\n\n"
    "Workout Of the Day:\n\n"
    "   AMRAP(AS MANY ROUNDS AS POSSIBLE) in 30 mins: Burpees\n\n"
    "Stretching: 10 mins.",
    # day 7
    "Warm Up: 10 mins\n\n"
    "Yoga: 20 mins\n\n"
    "Benchmark Test:\n"
    "   400m Run\n"
    "   25 Pushups\n"
    "   50 Air Squat\n"
    "   75 Sit-Ups\n"
    "   400m Run\n\n"
    "Stretching: 10 mins.",
    # day 8
    _REST,
    # day 9
    "Warm Up: Yoga 10 mins\n\n"
    "5K Run Goal: 40 mins or less\n\n"
    "Stretching: 10 mins.",
    # day 10
    "Warm Up: 10 mins\n\n"
    "Workout Of the Day:\n\n"
    "Buy In: \n"
    "   Quarter mile run\n"
    "   40 air squats\n"
    "   30 sit-ups\n"
    "   20 burpees\n"
    "   10 pull-ups\n\n"
    "Cash Out: \n"
    "   Another quarter-mile run\n\n"
    "Stretching: 10 mins.",
    # day 11
    "Warm Up: 10 mins\n\n\n"
    "Practice Wall Walks for 15 mins\n\n"
    "Workout Of the Day:\n\n"
    "   100 lunges\n"
    "   100 jumping squats\n"
    "   150 sit-ups\n"
    "   50 air-squats\n"
    "   50 lunges\n\n\n"
    "Stretching: 10 mins.",
    # day 12
    "Warm Up: 10 mins\n\n"
    "Workout Of the Day:\n"
    "2 rounds:\n\n"
    "   10 push-ups\n"
    "   1 mile run\n"
    "   17 air squats\n\n"
    "Buy out : 58 burpees\n\n"
    "Stretching: 10 mins.",
    # day 13
    "Warm Up: 10 mins\n\n"
    "Workout Of the Day:\n\n"
    "   100 Double-Under\n"
    "       or\n"
    "   300 Single-Under\n"
    "       or\n"
    "   300 Jumping Jacks, 60 squats (with or without weights)\n\n"
    "   100 Double-Under\n"
    "       or\n"
    "   300 Single-Under\n"
    "       or\n"
    "   300 jumping jacks, 60 Push-Ups\n"
    "       or\n"
    "   Hand Release Push-Ups\n\n"
    "Goal: Hard effort\n\n"
    "Stretching: 10 mins.",
    # day 14
    "Warm Up: 10 mins\n\n"
    "Yoga: 15 mins\n\n"
    "Benchmark Test:\n"
    "   800m Run\n"
    "   50 Pushups\n"
    "   75 Air Squat\n"
    "   100 Sit-Ups\n"
    "   800m Run\n\n"
    "Stretching: 10 mins.",
    # day 15
    _REST,
    # day 16
    "Warm Up: 10 mins\n\n"
    "Practice wall walks: 15 mins\n\n"
    "Workout Of the Day:\n\n"
    "Buy-in: 400m run\n"
    "Then (88-66-44)\n\n"
    "   88 Push-ups or hand release push-ups\n"
    "   88 Sit-Ups\n"
    "   66 Push-ups or hand release push-ups\n"
    "   66 Sit-Ups\n"
    "   44 Push-ups or hand release push-ups\n"
    "   44 Sit-Ups\n\n"
    "Cash Out: 400m run\n\n"
    "Stretching: 10 mins",
    # day 17
    "Warm Up: 10 mins\n\n"
    "Workout Of the Day:\n\n"
    "   150 push-ups\n"
    "       Or\n"
    "   75 handstand push-ups\n\n"
    "Every time you break, perform 5 burpees.\n\n"
    "Stretching: 10 mins",
    # day 18
    _EMOM_REPEAT,
    # day 19
    "60 min jogging or running",
    # day 20
    _REST,
    # day 21
    "Warm Up: 10 Min Yoga\n\n"
    "Benchmark Test:\n"
    "   1200m Run\n"
    "   75 Pushups\n"
    "   150 Air Squat\n"
    "   200 Sit-Ups\n"
    "   1200m Run\n\n"
    "Stretching: 10 mins",
    # day 22
    "Warm Up: 10 mins\n\n"
    "Workout Of the Day:\n\n"
    "AMRAP(AS MANY ROUNDS AS POSSIBLE) in 40 mins\n"
    "   4 Wall Walks\n"
    "   14 jumping air squats\n"
    "   24 mountain climbers (each side)\n"
    "   34 jumping jacks\n\n"
    "Stretching: 10 mins",
    # day 23
    "Warm Up: 10 mins\n\n"
    "Workout Of the Day:\n\n"
    "   10 rounds for time\n"
    "   25 air squats\n"
    "   50 jumping jacks\n"
    "   25 V-ups\n\n"
    "Stretching: 10 mins",
    # day 24
    "Warm Up: 10 mins\n\n"
    "Practice wall walks: 15 min\n\n"
    "Workout Of the Day:\n\n"
    "   7 rounds for time:\n"
    "   7 push-ups\n"
    "   7 V-ups\n"
    "   7 mountain climbers (each side)\n"
    "   7 burpees\n"
    "   7 squats\n"
    "   7 Sit-ups\n"
    "   7 jumping jacks\n\n"
    "Stretching: 10 mins",
    # day 25
    "Run 5 miles- (Goal within 60 mins)",
    # day 26
    "Warm Up: 10 mins\n\n"
    "Workout Of the Day:\n\n"
    "AMRAP(AS MANY ROUNDS AS POSSIBLE) in 30 mins\n"
    "   150 jumping jacks\n"
    "   60 plank shoulder taps\n"
    "   15 V-ups\n"
    "   40 plank shoulder taps\n"
    "   15 V-ups\n"
    "   20 plank shoulder taps\n"
    "   15 V-ups\n\n"
    "Stretching: 10 mins",
    # day 27
    _EMOM_REPEAT,
    # day 28
    "Jogging or running for 60 mins",
    # day 29
    "Rest or Yoga for 30 mins",
    # day 30
    "Warm Up: 10 Min Yoga\n\n"
    "Benchmark Test:\n"
    "   1 mile Run\n"
    "   100 Pushups\n"
    "   200 Air Squat\n"
    "   300 Sit-Ups\n"
    "   1 mile run\n\n"
    "Stretching: 10 mins",
)

def describe_workout(day_number: int) -> str:
    """Workout description for a program day, or a placeholder if out of range."""
    if isinstance(day_number, bool) or not isinstance(day_number, int):
        return NO_DESCRIPTION
    if 1 <= day_number <= len(WORKOUT_DESCRIPTIONS):
        return WORKOUT_DESCRIPTIONS[day_number - 1]
    return NO_DESCRIPTION


def iter_program() -> Iterator[Tuple[int, str, str]]:
    """Yield (day number, day label, description) for every program day."""
    for day_number, description in enumerate(WORKOUT_DESCRIPTIONS, start=1):
        yield day_number, day_label(day_number), description
