from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from miraveja_conventions.domain import IRegistrationSink, LifetimeTag, RegisteredType, TypeDescriptor

RegistrationKey = Tuple[Hashable, Optional[str]]


class ContainerRegistration(BaseModel):
    """Value object representing a mapping stored in the registry.

    Attributes:
        registered_type: The abstraction resolution is requested for.
        mapped_type: The concrete type constructed for it.
        name: Optional registration name.
        lifetime: Requested lifetime; ``None`` for the container default.
        injection_members: Construction directives; empty for the default strategy.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    registered_type: RegisteredType = Field(..., description="The registered abstraction.")
    mapped_type: TypeDescriptor = Field(..., description="The type mapped to the abstraction.")
    name: Optional[str] = Field(default=None, description="The registration name.")
    lifetime: Optional[LifetimeTag] = Field(default=None, description="The requested lifetime.")
    injection_members: Tuple[Any, ...] = Field(default=(), description="Opaque injection directives.")


class InMemoryRegistry(IRegistrationSink):
    """Registration sink keeping mappings in a dictionary.

    Registering a key that is already present replaces its mapping, the way
    a container replaces a registration.

    Attributes:
        _registry: Dictionary mapping ``(registered identity, name)`` to registrations.
    """

    def __init__(self) -> None:
        """Initialize the registry with no registrations."""
        self._registry: Dict[RegistrationKey, ContainerRegistration] = {}

    def register(
        self,
        registered_type: RegisteredType,
        mapped_type: TypeDescriptor,
        name: Optional[str] = None,
        lifetime: Optional[LifetimeTag] = None,
        injection_members: Sequence[Any] = (),
    ) -> None:
        """Store a mapping, replacing any existing one for the same key.

        Args:
            registered_type: The abstraction resolution will be requested for.
            mapped_type: The concrete type to construct.
            name: Optional registration name.
            lifetime: Requested lifetime; ``None`` lets the container decide.
            injection_members: Construction directives; empty for the default strategy.

        Example:
            >>> registry.register(logger_interface, mock_logger_type, name="audit")
        """
        self._registry[(registered_type.identity, name)] = ContainerRegistration(
            registered_type=registered_type,
            mapped_type=mapped_type,
            name=name,
            lifetime=lifetime,
            injection_members=tuple(injection_members),
        )

    def get_mapped_type(self, registered_type: RegisteredType, name: Optional[str]) -> Optional[TypeDescriptor]:
        """Return the type currently mapped for ``(registered_type, name)``, if any."""
        registration = self._registry.get((registered_type.identity, name))
        return registration.mapped_type if registration else None

    def get_registration(
        self, registered_type: RegisteredType, name: Optional[str] = None
    ) -> Optional[ContainerRegistration]:
        """Return the full registration for a key, if any."""
        return self._registry.get((registered_type.identity, name))

    @property
    def registrations(self) -> List[ContainerRegistration]:
        """All registrations, in first-registration order."""
        return list(self._registry.values())

    def get_registry_copy(self) -> Dict[RegistrationKey, ContainerRegistration]:
        """Get a copy of the registry.

        Returns:
            Copy of the current registry.
        """
        return self._registry.copy()

    def clear(self) -> None:
        """Remove every registration."""
        self._registry.clear()

    def __len__(self) -> int:
        return len(self._registry)
