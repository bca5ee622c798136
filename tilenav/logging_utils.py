"""Logging utilities for tilenav.

Provides color-coded output to distinguish search diagnostics from agent decisions.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for operation types
    BLUE = "\033[94m"      # Search diagnostics (expansions, frontier)
    YELLOW = "\033[93m"    # Agent decisions (replan, wander, fallback)
    RED = "\033[91m"       # Errors and unreachable targets
    GREEN = "\033[92m"     # Route found / arrival
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if TILENAV_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("TILENAV_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_search(message: str) -> None:
    """Log a search diagnostic (blue)."""
    print(colored(f"{MARK_SEARCH} {message}", Color.BLUE))


def log_agent(message: str) -> None:
    """Log an agent navigation decision (yellow)."""
    print(colored(f"{MARK_AGENT} {message}", Color.YELLOW))


def log_error(message: str) -> None:
    """Log an error or unreachable target (red)."""
    print(colored(f"{MARK_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{MARK_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{MARK_INFO} {message}", Color.CYAN))


# Markers for operation types (color-blind accessible)
MARK_SEARCH = "[•]"    # Search diagnostic
MARK_AGENT = "[>]"     # Agent decision
MARK_ERROR = "[!]"     # Error/unreachable
MARK_SUCCESS = "[✓]"   # Success
MARK_INFO = "[i]"      # Information
