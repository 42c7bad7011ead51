"""
Testing utilities module.

Provides helpers for testing conventions without a real container.
"""

from .utilities import TestRegistry, create_seeded_registry

__all__ = [
    "TestRegistry",
    "create_seeded_registry",
]
