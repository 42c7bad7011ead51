"""
miraveja-conventions: Registration by convention for dependency injection containers.

Public API exports for the miraveja-conventions package.
"""

# Application exports
from miraveja_conventions.application import (
    ConflictResolver,
    ConventionRegistrar,
    KnownMappingIndex,
    RegistrationPlanner,
    register_types,
    with_injection_members,
    with_lifetime,
    with_mappings,
    with_name,
)

# Domain exports
from miraveja_conventions.domain import (
    BatchResult,
    Convention,
    ConventionError,
    DuplicateTypeMappingError,
    GenericParameter,
    InterfaceDescriptor,
    IRegistrationSink,
    Lifetime,
    LifetimeTag,
    RegistrationRequest,
    TypeDescriptor,
    TypeDiscoveryError,
)

# Infrastructure exports
from miraveja_conventions.infrastructure.discovery import DiscoveryPolicy, TypeDescriber, all_classes
from miraveja_conventions.infrastructure.registry import InMemoryRegistry

__version__ = "0.1.0"

__all__ = [
    # Registration
    "ConventionRegistrar",
    "register_types",
    "RegistrationPlanner",
    "ConflictResolver",
    "KnownMappingIndex",
    # Selectors
    "with_mappings",
    "with_name",
    "with_lifetime",
    "with_injection_members",
    # Models
    "TypeDescriptor",
    "InterfaceDescriptor",
    "GenericParameter",
    "LifetimeTag",
    "RegistrationRequest",
    "Convention",
    "BatchResult",
    "IRegistrationSink",
    # Enums
    "Lifetime",
    # Exceptions
    "ConventionError",
    "DuplicateTypeMappingError",
    "TypeDiscoveryError",
    # Discovery and sinks
    "TypeDescriber",
    "DiscoveryPolicy",
    "all_classes",
    "InMemoryRegistry",
]
