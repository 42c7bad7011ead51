from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Optional, Sequence

from miraveja_conventions.domain.enums import Resolution
from miraveja_conventions.domain.models import (
    InjectionSelector,
    LifetimeSelector,
    LifetimeTag,
    MappingSelector,
    NameSelector,
    RegisteredType,
    RegistrationRequest,
    TypeDescriptor,
)


class IRegistrationSink(ABC):
    """Abstract interface for the container that stores accepted registrations."""

    @abstractmethod
    def register(
        self,
        registered_type: RegisteredType,
        mapped_type: TypeDescriptor,
        name: Optional[str],
        lifetime: Optional[LifetimeTag],
        injection_members: Sequence[Any],
    ) -> None:
        """Store a mapping, replacing any existing one for the same key.

        Args:
            registered_type: The abstraction resolution will be requested for.
            mapped_type: The concrete type to construct.
            name: Optional registration name.
            lifetime: Requested lifetime; ``None`` lets the container decide.
            injection_members: Construction directives; empty for the default strategy.
        """

    @abstractmethod
    def get_mapped_type(self, registered_type: RegisteredType, name: Optional[str]) -> Optional[TypeDescriptor]:
        """Return the type currently mapped for ``(registered_type, name)``, if any.

        Args:
            registered_type: The abstraction to look up.
            name: The registration name to look up.
        """


class IRegistrationPlanner(ABC):
    """Abstract interface for turning candidate types into registration requests."""

    @abstractmethod
    def plan(
        self,
        types: Iterable[TypeDescriptor],
        mapping_selector: Optional[MappingSelector] = None,
        name_selector: Optional[NameSelector] = None,
        lifetime_selector: Optional[LifetimeSelector] = None,
        injection_selector: Optional[InjectionSelector] = None,
    ) -> Iterator[RegistrationRequest]:
        """Yield the registration requests implied by the selectors, in order.

        Args:
            types: Candidate types, already deduplicated.
            mapping_selector: Abstractions each type maps to.
            name_selector: Registration name for each type.
            lifetime_selector: Lifetime for each type.
            injection_selector: Injection directives for each type.
        """


class IConflictResolver(ABC):
    """Abstract interface for validating requests against known mappings."""

    @abstractmethod
    def resolve(self, request: RegistrationRequest) -> Resolution:
        """Decide whether a request is accepted or skipped.

        Args:
            request: The request to check.

        Raises:
            DuplicateTypeMappingError: If the request conflicts with a known mapping.
        """
