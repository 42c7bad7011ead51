"""Built-in lifetime selectors."""

from typing import Any, Callable, Optional

from miraveja_conventions.domain import Lifetime, LifetimeSelector, LifetimeTag, TypeDescriptor


def none(type_descriptor: TypeDescriptor) -> Optional[LifetimeTag]:
    """Leave the lifetime unspecified so the container applies its default."""
    return None


def transient(type_descriptor: TypeDescriptor) -> LifetimeTag:
    return LifetimeTag(kind=Lifetime.TRANSIENT)


def container_controlled(type_descriptor: TypeDescriptor) -> LifetimeTag:
    return LifetimeTag(kind=Lifetime.CONTAINER_CONTROLLED)


def hierarchical(type_descriptor: TypeDescriptor) -> LifetimeTag:
    return LifetimeTag(kind=Lifetime.HIERARCHICAL)


def per_resolve(type_descriptor: TypeDescriptor) -> LifetimeTag:
    return LifetimeTag(kind=Lifetime.PER_RESOLVE)


def per_thread(type_descriptor: TypeDescriptor) -> LifetimeTag:
    return LifetimeTag(kind=Lifetime.PER_THREAD)


def externally_controlled(type_descriptor: TypeDescriptor) -> LifetimeTag:
    return LifetimeTag(kind=Lifetime.EXTERNALLY_CONTROLLED)


def custom(factory: Callable[[], Any]) -> LifetimeSelector:
    """Build a selector requesting a caller-defined lifetime.

    Each evaluation calls ``factory`` again, so every type gets its own
    lifetime object.

    Args:
        factory: Zero-argument callable (typically a class) producing the
            lifetime object handed to the container.

    Returns:
        A lifetime selector producing ``Lifetime.CUSTOM`` tags.

    Example:
        >>> selector = custom(PooledLifetimeManager)
        >>> selector(describe(MockLogger)).payload
        <PooledLifetimeManager object at ...>
    """

    def selector(type_descriptor: TypeDescriptor) -> LifetimeTag:
        return LifetimeTag(kind=Lifetime.CUSTOM, payload=factory())

    return selector
