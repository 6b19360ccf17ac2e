"""
Workout progress visualization.

Provides functions for charting the recorded workouts of the program
with matplotlib.
"""

import logging
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np

from .analyzer import calculate_average_time
from .models import TOTAL_PLANNED_WORKOUTS, WorkoutRecord


logger = logging.getLogger(__name__)

# plot styling
plt.style.use("seaborn-v0_8-whitegrid")
COLORS = {
    "primary": "#2563eb",
    "secondary": "#64748b",
    "accent": "#f59e0b",
    "success": "#10b981",
}


def _finish(output_path: Optional[Path], show: bool) -> None:
    plt.tight_layout()

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(output_path, dpi=150, bbox_inches="tight")
        logger.info(f"Saved plot to {output_path}")

    if show:
        plt.show()
    else:
        plt.close()


def plot_daily_minutes(
    records: List[WorkoutRecord],
    output_path: Optional[Path] = None,
    show: bool = True,
) -> None:
    """
    Plot minutes recorded per program day.

    Completed days are drawn in the success color, others in gray.
    Days whose time does not parse are drawn as zero.

    Parameters:
        records: Workout records in day order.
        output_path: Optional path to save the figure.
        show: Whether to display the plot.
    """
    if not records:
        logger.warning("No workout data to plot")
        return

    fig, ax = plt.subplots(figsize=(14, 6))

    x = np.arange(1, len(records) + 1)
    minutes = np.array([r.minutes or 0 for r in records])
    colors = [
        COLORS["success"] if r.completed else COLORS["secondary"] for r in records
    ]

    ax.bar(x, minutes, color=colors, alpha=0.8)

    avg = calculate_average_time(records)
    if avg > 0:
        ax.axhline(
            avg,
            color=COLORS["accent"],
            linestyle="--",
            linewidth=2,
            label=f"Average (completed): {avg:.1f} min",
        )
        ax.legend()

    ax.set_xlabel("Day", fontsize=11)
    ax.set_ylabel("Minutes", fontsize=11)
    ax.set_title("Time Spent Per Workout", fontsize=14, fontweight="bold")
    ax.set_xticks(x)
    ax.grid(True, alpha=0.3, axis="y")

    _finish(output_path, show)


def plot_consistency_progress(
    records: List[WorkoutRecord],
    total_planned: int = TOTAL_PLANNED_WORKOUTS,
    output_path: Optional[Path] = None,
    show: bool = True,
) -> None:
    """
    Plot cumulative consistency score across the program days.

    Parameters:
        records: Workout records in day order.
        total_planned: Number of planned workouts.
        output_path: Optional path to save the figure.
        show: Whether to display the plot.
    """
    if not records:
        logger.warning("No workout data to plot")
        return

    fig, ax = plt.subplots(figsize=(12, 6))

    x = np.arange(1, len(records) + 1)
    # days with an unparseable time do not count toward consistency
    completed = np.cumsum(
        [1 if r.completed and r.minutes is not None else 0 for r in records]
    )
    score = completed / total_planned * 100

    ax.plot(x, score, "o-", color=COLORS["primary"], linewidth=2, markersize=5)
    ax.fill_between(x, score, color=COLORS["primary"], alpha=0.15)

    ax.set_xlabel("Day", fontsize=11)
    ax.set_ylabel("Consistency (%)", fontsize=11)
    ax.set_title("Consistency Score Progress", fontsize=14, fontweight="bold")
    ax.set_ylim(0, 100)
    ax.set_xticks(x)
    ax.grid(True, alpha=0.3)

    _finish(output_path, show)
