"""Built-in injection-directive selectors."""

from typing import Any, Tuple

from miraveja_conventions.domain import InjectionSelector, TypeDescriptor


def none(type_descriptor: TypeDescriptor) -> Tuple[Any, ...]:
    """Use the container's default construction strategy."""
    return ()


def constant(*members: Any) -> InjectionSelector:
    """Build a selector returning the same directives for every type.

    Args:
        *members: Opaque directives understood by the container.
    """

    def selector(type_descriptor: TypeDescriptor) -> Tuple[Any, ...]:
        return members

    return selector
