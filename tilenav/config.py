"""
Tilenav Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


def _flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


class Config:
    """Application configuration loaded from environment variables."""

    # Search Configuration
    # Cap on node expansions per search. Unset means the search runs until
    # the frontier empties.
    MAX_EXPANSIONS: int | None = _optional_int("TILENAV_MAX_EXPANSIONS")
    DEBUG_SEARCH: bool = _flag("TILENAV_DEBUG_SEARCH")

    # Path following
    DEFAULT_AGGRO_RANGE: float = float(os.getenv("TILENAV_AGGRO_RANGE", "8.0"))

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    MAPS_DIR: Path = Path(os.getenv("TILENAV_MAPS_DIR", str(PROJECT_ROOT / "examples" / "maps")))

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.MAX_EXPANSIONS is not None and cls.MAX_EXPANSIONS <= 0:
            raise ValueError(
                "TILENAV_MAX_EXPANSIONS must be a positive integer when set. "
                "Leave it unset for unbounded searches."
            )

        if cls.DEFAULT_AGGRO_RANGE < 0:
            raise ValueError("TILENAV_AGGRO_RANGE must not be negative")

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        cap = cls.MAX_EXPANSIONS if cls.MAX_EXPANSIONS is not None else "unbounded"
        lines = [
            "Tilenav Configuration:",
            f"  Max Expansions: {cap}",
            f"  Debug Search: {'on' if cls.DEBUG_SEARCH else 'off'}",
            f"  Aggro Range: {cls.DEFAULT_AGGRO_RANGE}",
            f"  Maps Dir: {cls.MAPS_DIR}",
        ]
        return "\n".join(lines)
