"""
Infrastructure layer - Discovery and registration sinks.

This layer turns live Python classes into descriptors and provides sinks
for accepted registrations. It depends only on the Domain layer.
"""

from . import discovery, registry, testing

__all__ = [
    "discovery",
    "registry",
    "testing",
]
