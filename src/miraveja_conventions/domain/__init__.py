"""
Domain layer - Core convention models and rules.

This layer contains the descriptor graph, registration requests and errors
for registration by convention. It has no dependencies on other layers.
"""

from .enums import Lifetime, Resolution
from .exceptions import ConventionError, DuplicateTypeMappingError, TypeDiscoveryError
from .interfaces import IConflictResolver, IRegistrationPlanner, IRegistrationSink
from .models import (
    BatchResult,
    Convention,
    GenericParameter,
    InjectionSelector,
    InterfaceDescriptor,
    LifetimeSelector,
    LifetimeTag,
    MappingSelector,
    NameSelector,
    RegisteredType,
    RegistrationRequest,
    TypeDescriptor,
    TypeSource,
)

# Rebuild Pydantic models to resolve forward references
TypeDescriptor.model_rebuild()
RegistrationRequest.model_rebuild()

__all__ = [
    # Enums
    "Lifetime",
    "Resolution",
    # Exceptions
    "ConventionError",
    "DuplicateTypeMappingError",
    "TypeDiscoveryError",
    # Interfaces
    "IRegistrationSink",
    "IRegistrationPlanner",
    "IConflictResolver",
    # Models
    "GenericParameter",
    "InterfaceDescriptor",
    "TypeDescriptor",
    "RegisteredType",
    "LifetimeTag",
    "RegistrationRequest",
    "Convention",
    "BatchResult",
    # Selector signatures
    "MappingSelector",
    "NameSelector",
    "LifetimeSelector",
    "InjectionSelector",
    "TypeSource",
]
