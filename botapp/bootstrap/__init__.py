"""Bootstrap helpers for wiring bot infrastructure components."""

from .container import BotDependencies, DependencyContainer

__all__ = [
    'BotDependencies',
    'DependencyContainer',
]
