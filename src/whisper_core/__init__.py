# ABOUTME: Main package initialization for the Whisper rate limiting and matchmaking core.
# ABOUTME: Exports version information from pyproject.toml.

from importlib.metadata import version

__version__ = version("whisper-core")
