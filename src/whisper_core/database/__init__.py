# ABOUTME: Database package for Whisper core persistence layer.
# ABOUTME: Provides DatabaseService for SQLite operations using SQLModel.

from whisper_core.database.service import DatabaseService

__all__ = ["DatabaseService"]
