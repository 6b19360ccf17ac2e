"""Configuration management for the fitness program."""

import os
from pathlib import Path
from dataclasses import dataclass

from dotenv import load_dotenv

from .models import TOTAL_PLANNED_WORKOUTS


# load environment variables from .env file
load_dotenv()


@dataclass(frozen=True)
class PathConfig:
    """File path configuration."""

    base_dir: Path
    data_dir: Path
    output_dir: Path

    @classmethod
    def default(cls) -> "PathConfig":
        """
        Create default path configuration.
        """
        base = Path(__file__).parent.parent
        return cls(
            base_dir=base,
            data_dir=base / "data",
            output_dir=base / "output",
        )

    @classmethod
    def from_env(cls) -> "PathConfig":
        """
        Create path configuration, honouring FITNESS_DATA_DIR and
        FITNESS_OUTPUT_DIR overrides.
        """
        default = cls.default()
        data_dir = os.getenv("FITNESS_DATA_DIR")
        output_dir = os.getenv("FITNESS_OUTPUT_DIR")

        return cls(
            base_dir=default.base_dir,
            data_dir=Path(data_dir).expanduser() if data_dir else default.data_dir,
            output_dir=(
                Path(output_dir).expanduser() if output_dir else default.output_dir
            ),
        )


@dataclass(frozen=True)
class ProgramConfig:
    """Workout program settings."""

    total_planned: int = TOTAL_PLANNED_WORKOUTS

    @classmethod
    def from_env(cls) -> "ProgramConfig":
        """
        Create config from environment variables.
        """
        value = os.getenv("FITNESS_TOTAL_PLANNED")
        if not value:
            return cls()

        try:
            total_planned = int(value)
        except ValueError:
            raise ValueError(
                f"FITNESS_TOTAL_PLANNED must be a whole number, got {value!r}"
            )

        if total_planned <= 0:
            raise ValueError("FITNESS_TOTAL_PLANNED must be greater than zero")

        return cls(total_planned=total_planned)


@dataclass(frozen=True)
class AppConfig:
    """Application-wide configuration."""

    paths: PathConfig
    program: ProgramConfig

    @classmethod
    def load(cls) -> "AppConfig":
        """
        Load full application configuration.
        """
        return cls(paths=PathConfig.from_env(), program=ProgramConfig.from_env())
