"""
Main entry point for the fitness program.

Provides a CLI interface for managing the user profile, viewing the
30-day plan, recording workouts, and reviewing fitness metrics.
"""

import sys
import logging
import argparse
from typing import List, Optional

from .config import AppConfig
from .models import (
    FitnessLevel,
    Profile,
    TOTAL_PLANNED_WORKOUTS,
    parse_duration,
    split_duration,
)
from .store import RecordStore
from .analyzer import calculate_summary
from .catalog import describe_workout, iter_program
from .exceptions import FitnessError
from .visualizations import plot_daily_minutes, plot_consistency_progress


logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

METRICS_HELP = (
    "Get to know your fitness summary metrics:\n"
    "----------------------------------\n\n"
    "[1] Average Time Per Workout: Average duration of each completed workout.\n"
    "[2] Total Time Spent Exercising: Total time spent on all workouts.\n"
    "[3] Consistency Score: Percentage of planned workouts that were completed.\n"
    "[4] Longest Workout: Longest time spent on a single workout.\n\n"
    "Note: The metrics are calculated based on the workouts that have been "
    "marked as completed."
)


def print_profile(profile: Profile) -> None:
    """Print the saved user profile."""
    print("\n" + "=" * 60)
    print("USER PROFILE")
    print("=" * 60)
    print(f"   First name: {profile.first_name}")
    print(f"   Last name: {profile.last_name}")
    print(f"   Age: {profile.age}")
    print(f"   Weight (lbs): {profile.weight}")
    print(f"   Fitness level: {profile.fitness_level.value}")
    print("=" * 60)


def cmd_profile(args: argparse.Namespace, config: AppConfig) -> None:
    """Save or show the user profile."""
    store = RecordStore(config.paths.data_dir)

    if args.action == "save":
        profile = Profile.from_form(
            args.first_name, args.last_name, args.age, args.weight, args.level
        )
        store.save_profile(profile)
        print("Data saved successfully")
    else:
        print_profile(store.load_profile())


def cmd_plan(args: argparse.Namespace, config: AppConfig) -> None:
    """Show the workout plan for one day or the whole program."""
    if args.day is not None:
        print(f"\nDay {args.day}\n")
        print(describe_workout(args.day))
        return

    print(f"\n{TOTAL_PLANNED_WORKOUTS} Day Workout Plan")
    for _, label, description in iter_program():
        print("\n" + "-" * 60)
        print(label)
        print("-" * 60)
        print(description)


def cmd_log(args: argparse.Namespace, config: AppConfig) -> None:
    """Record a workout for a day."""
    store = RecordStore(config.paths.data_dir)
    minutes = parse_duration(args.hours, args.minutes)
    record = store.log_workout(args.day, args.completed, minutes)

    if record.completed:
        print(
            f"Awesome job! You've completed the workout for {record.day}. "
            "Keep up the great work!"
        )
    else:
        print(f"Saved {record.day}: {record.time_taken} minutes")


def cmd_status(args: argparse.Namespace, config: AppConfig) -> None:
    """Show the recorded workout for a day."""
    store = RecordStore(config.paths.data_dir)
    record = store.load_workout(args.day)
    status = "completed" if record.completed else "not completed"

    minutes = record.minutes
    if minutes is None:
        logger.warning(f"Error parsing time taken for {record.day}")
        print(f"{record.day}: {status}, time taken: {record.time_taken}")
        return

    hours, minutes = split_duration(minutes)
    print(f"{record.day}: {status}, time taken: {hours} hours {minutes} minutes")


def cmd_summary(args: argparse.Namespace, config: AppConfig) -> None:
    """Show fitness metrics for the recorded workouts."""
    store = RecordStore(config.paths.data_dir)
    records = store.load_all_workouts()
    total_planned = (
        args.planned if args.planned is not None else config.program.total_planned
    )
    summary = calculate_summary(records, total_planned)

    print("\n" + "=" * 60)
    print("FITNESS SUMMARY")
    print("=" * 60)
    for name, value in summary.as_display().items():
        print(f"   {name}: {value}")
    print("=" * 60)

    if args.explain:
        print("\n" + METRICS_HELP)


def cmd_visualize(args: argparse.Namespace, config: AppConfig) -> None:
    """Generate progress charts."""
    store = RecordStore(config.paths.data_dir)
    records = store.load_all_workouts()

    output_dir = config.paths.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    show = not args.no_show

    logger.info("Generating workout visualizations...")
    plot_daily_minutes(records, output_dir / "daily_minutes.png", show)
    plot_consistency_progress(
        records,
        config.program.total_planned,
        output_dir / "consistency.png",
        show,
    )


def _day_number(value: str) -> int:
    try:
        day = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid day number: {value!r}")
    if day < 1 or day > TOTAL_PLANNED_WORKOUTS:
        raise argparse.ArgumentTypeError(
            f"day must be between 1 and {TOTAL_PLANNED_WORKOUTS}"
        )
    return day


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description=f"{TOTAL_PLANNED_WORKOUTS}-day cross-functional fitness program"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # profile command
    profile_parser = subparsers.add_parser("profile", help="Manage the user profile")
    profile_sub = profile_parser.add_subparsers(dest="action", required=True)
    save_parser = profile_sub.add_parser("save", help="Create or replace the profile")
    save_parser.add_argument("--first-name", required=True)
    save_parser.add_argument("--last-name", required=True)
    save_parser.add_argument("--age", required=True, help="Age in years (1-100)")
    save_parser.add_argument("--weight", required=True, help="Weight in lbs")
    save_parser.add_argument(
        "--level",
        required=True,
        choices=[level.value for level in FitnessLevel],
        help="Fitness level",
    )
    profile_sub.add_parser("show", help="Show the saved profile")

    # plan command
    plan_parser = subparsers.add_parser("plan", help="Show the workout plan")
    plan_parser.add_argument("--day", type=int, help="Show a single day")

    # log command
    log_parser = subparsers.add_parser("log", help="Record a workout")
    log_parser.add_argument("day", type=_day_number, help="Program day (1-30)")
    log_parser.add_argument(
        "--completed", action="store_true", help="Mark the workout as complete"
    )
    log_parser.add_argument("--hours", default="", help="Time taken (hours)")
    log_parser.add_argument("--minutes", default="", help="Time taken (minutes)")

    # status command
    status_parser = subparsers.add_parser("status", help="Show a recorded workout")
    status_parser.add_argument("day", type=_day_number, help="Program day (1-30)")

    # summary command
    summary_parser = subparsers.add_parser("summary", help="Show fitness metrics")
    summary_parser.add_argument(
        "--planned", type=int, help="Number of planned workouts"
    )
    summary_parser.add_argument(
        "--explain", action="store_true", help="Explain each metric"
    )

    # visualize command
    viz_parser = subparsers.add_parser("visualize", help="Generate charts")
    viz_parser.add_argument(
        "--no-show", action="store_true", help="Save plots without displaying"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = AppConfig.load()

    commands = {
        "profile": cmd_profile,
        "plan": cmd_plan,
        "log": cmd_log,
        "status": cmd_status,
        "summary": cmd_summary,
        "visualize": cmd_visualize,
    }

    try:
        commands[args.command](args, config)
    except FitnessError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
