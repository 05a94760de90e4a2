"""
Logging helpers for reactive-events.
"""

from .logging import Logger

__all__ = ["Logger"]
