"""Administrator session handling."""

from .admin_session import AdminSession

__all__ = ["AdminSession"]
