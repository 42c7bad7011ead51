"""
Application layer - Convention evaluation and conflict resolution.

This layer contains the selectors and the use cases that turn candidate
types into registrations. It depends only on the Domain layer.
"""

from . import with_injection_members, with_lifetime, with_mappings, with_name
from .conflict_resolver import ConflictResolver, KnownMappingIndex
from .planner import RegistrationPlanner
from .registrar import ConventionRegistrar, register_types

__all__ = [
    "with_mappings",
    "with_name",
    "with_lifetime",
    "with_injection_members",
    "RegistrationPlanner",
    "KnownMappingIndex",
    "ConflictResolver",
    "ConventionRegistrar",
    "register_types",
]
