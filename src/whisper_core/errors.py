# ABOUTME: Base exception class for Whisper core errors.
# ABOUTME: Provides a common base for all custom exceptions in the application.


class WhisperCoreError(Exception):
    """Base exception for all Whisper core errors.

    Callers map subclasses of this exception onto their own responses;
    the core itself never catches them.
    """

    pass
