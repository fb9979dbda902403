"""
Error Detail Extraction

flyctl prints progress lines and decorations to stderr before the actual
error, which is usually the last meaningful line. The filter rules are a
policy object so other providers' conventions can be plugged in.
"""

import re
from dataclasses import dataclass
from typing import Iterable

from ambit.constants import FLY_NOISE_LINES, FLY_NOISE_PREFIXES, UNKNOWN_ERROR_DETAIL

ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def strip_ansi(text: str) -> str:
    """Remove ANSI color/style escape sequences."""
    return ANSI_ESCAPE.sub("", text)


@dataclass(frozen=True)
class LineFilter:
    """Which stderr lines count as noise, and what to report when all do."""

    noise_prefixes: tuple[str, ...] = ()
    noise_lines: tuple[str, ...] = ()
    fallback: str = UNKNOWN_ERROR_DETAIL

    def is_noise(self, line: str) -> bool:
        """Check if a cleaned line is decoration rather than an error."""
        if not line:
            return True
        if line in self.noise_lines:
            return True
        return line.startswith(self.noise_prefixes)

    def meaningful_lines(self, lines: Iterable[str]) -> list[str]:
        """Clean every line and keep the ones that are not noise."""
        cleaned = (strip_ansi(line).strip() for line in lines)
        return [line for line in cleaned if not self.is_noise(line)]


FLY_LINE_FILTER = LineFilter(
    noise_prefixes=FLY_NOISE_PREFIXES,
    noise_lines=FLY_NOISE_LINES,
)


def extract_error_detail(stderr: str, policy: LineFilter = FLY_LINE_FILTER) -> str:
    """
    Pull the last meaningful line from a failed command's stderr.

    Args:
        stderr: Raw stderr text, possibly ANSI-colored
        policy: Line filter policy (defaults to flyctl conventions)

    Returns:
        Last non-noise line, or the policy fallback if none survive
    """
    lines = policy.meaningful_lines((stderr or "").split("\n"))
    if not lines:
        return policy.fallback
    return lines[-1]
