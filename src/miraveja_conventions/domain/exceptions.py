from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:
    from miraveja_conventions.domain.models import InterfaceDescriptor, TypeDescriptor


class ConventionError(Exception):
    """Base exception for registration-by-convention errors."""


class DuplicateTypeMappingError(ConventionError):
    """Raised when a convention would replace an existing mapping.

    Only raised when overwriting existing mappings was not allowed for the
    batch. Requests accepted earlier in the same batch are not rolled back.

    Attributes:
        registered_type: The abstraction whose mapping collided.
        name: The registration name of the colliding mapping.
        current_mapped_type: The type the abstraction is currently mapped to.
        new_mapped_type: The type the convention tried to map it to.
    """

    def __init__(
        self,
        registered_type: Union["InterfaceDescriptor", "TypeDescriptor"],
        name: Optional[str],
        current_mapped_type: "TypeDescriptor",
        new_mapped_type: "TypeDescriptor",
    ) -> None:
        self.registered_type = registered_type
        self.name = name
        self.current_mapped_type = current_mapped_type
        self.new_mapped_type = new_mapped_type
        message = (
            f"An attempt to override an existing mapping was detected for type {registered_type.display_name} "
            f'with name "{name or ""}", currently mapped to type {current_mapped_type.display_name}, '
            f"to type {new_mapped_type.display_name}."
        )
        super().__init__(message)


class TypeDiscoveryError(ConventionError):
    """Raised when a type or module cannot be turned into descriptors.

    This occurs when:
    - The object handed to the describer is not a class.
    - A module cannot be imported and errors are not being skipped.

    Attributes:
        target: The object or module name that could not be described.
        reason: Optional reason for the failure.
    """

    def __init__(self, target: Any, reason: Optional[str] = None) -> None:
        self.target = target
        self.reason = reason
        message = f"Cannot discover types from: {target!r}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)
