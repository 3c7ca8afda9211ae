"""Calendar navigation handlers."""

from .handler import CalendarHandler

__all__ = ["CalendarHandler"]
