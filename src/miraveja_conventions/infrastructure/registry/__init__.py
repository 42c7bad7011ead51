"""
Registry module.

Provides an in-memory registration sink.
"""

from .in_memory import ContainerRegistration, InMemoryRegistry

__all__ = [
    "ContainerRegistration",
    "InMemoryRegistry",
]
