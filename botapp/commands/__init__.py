"""Command registration helpers."""

from .handlers import register_core_handlers

__all__ = ['register_core_handlers']
