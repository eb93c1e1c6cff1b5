# ABOUTME: Display module for Rich terminal output formatting.
# ABOUTME: Exports MatchTable and panel helpers for errors and empty results.

from whisper_core.display.errors import (
    display_error,
    display_no_match,
    display_rate_limit_exceeded,
)
from whisper_core.display.tables import MatchTable

__all__ = [
    "MatchTable",
    "display_error",
    "display_no_match",
    "display_rate_limit_exceeded",
]
