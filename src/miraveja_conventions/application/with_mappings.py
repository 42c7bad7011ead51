"""Built-in mapping selectors: which abstractions a concrete type maps to."""

from typing import List

from miraveja_conventions.domain import InterfaceDescriptor, TypeDescriptor


def _interfaces_to_map(type_descriptor: TypeDescriptor) -> List[InterfaceDescriptor]:
    """Interfaces a type can be soundly mapped from.

    A closed type maps from every interface it implements. An open type only
    maps from interfaces written with exactly its own parameters, in order;
    those are returned in their unbound form.
    """
    if not type_descriptor.is_open:
        return list(type_descriptor.implemented_interfaces)

    parameters = type_descriptor.generic_parameters
    return [
        interface.open_identity
        for interface in type_descriptor.implemented_interfaces
        if interface.type_arguments == parameters
    ]


def none(type_descriptor: TypeDescriptor) -> List[InterfaceDescriptor]:
    """Map the type from nothing."""
    return []


def from_all_interfaces(type_descriptor: TypeDescriptor) -> List[InterfaceDescriptor]:
    """Map the type from every interface it implements.

    Args:
        type_descriptor: The concrete type.

    Returns:
        The implemented interfaces, unchanged for a closed type, or the unbound
        interfaces matching the type's own parameters for an open type.

    Example:
        >>> from_all_interfaces(describe(MockLogger))
        [InterfaceDescriptor(name='ILogger', ...)]
    """
    return _interfaces_to_map(type_descriptor)


def from_matching_interface(type_descriptor: TypeDescriptor) -> List[InterfaceDescriptor]:
    """Map the type from the interface named ``I<TypeName>``, if it implements one.

    The interface must also have the same generic arity as the type.

    Args:
        type_descriptor: The concrete type.

    Returns:
        A single-element list with the matching interface, or an empty list.
    """
    expected_name = f"I{type_descriptor.name}"
    for interface in _interfaces_to_map(type_descriptor):
        if interface.name == expected_name and interface.generic_arity == type_descriptor.generic_arity:
            return [interface]
    return []


def from_all_interfaces_in_same_module(type_descriptor: TypeDescriptor) -> List[InterfaceDescriptor]:
    """Map the type from every interface declared in the type's own module.

    Args:
        type_descriptor: The concrete type.

    Returns:
        ``from_all_interfaces(type_descriptor)`` restricted to interfaces whose
        declaring module is the type's declaring module.
    """
    return [
        interface
        for interface in _interfaces_to_map(type_descriptor)
        if interface.declaring_module == type_descriptor.declaring_module
    ]
