"""Session logging module."""

from .session_logger import SessionLogger

__all__ = ["SessionLogger"]
