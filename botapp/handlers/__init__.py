"""
Handlers package for telegram bot
Contains modular handler classes for the calendar, booking and admin dialogs
"""

from .callback_handlers import CallbackHandler

__all__ = ['CallbackHandler']
