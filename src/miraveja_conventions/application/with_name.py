"""Built-in name selectors."""

from typing import Optional

from miraveja_conventions.domain import TypeDescriptor


def default(type_descriptor: TypeDescriptor) -> Optional[str]:
    """Register without a name."""
    return None


def type_name(type_descriptor: TypeDescriptor) -> str:
    """Register under the type's simple name.

    Open generic types get an arity suffix, so ``List`` with one parameter is
    named ``List`1``.
    """
    if type_descriptor.is_open:
        return f"{type_descriptor.name}`{type_descriptor.generic_arity}"
    return type_descriptor.name
