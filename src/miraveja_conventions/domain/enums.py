from enum import Enum


class Lifetime(str, Enum):
    """Defines the lifetime requested for a convention registration.

    The container owns what each kind means at resolution time; the engine
    only carries the tag through to the registration sink.

    Attributes:
        TRANSIENT: New instance created on each resolution.
        CONTAINER_CONTROLLED: Single instance owned by the container.
        HIERARCHICAL: Single instance per child container.
        PER_RESOLVE: Single instance per resolution graph.
        PER_THREAD: Single instance per thread.
        EXTERNALLY_CONTROLLED: Instance owned by the caller, weakly held.
        CUSTOM: Lifetime described by a caller-supplied payload.
    """

    TRANSIENT = "transient"
    CONTAINER_CONTROLLED = "container_controlled"
    HIERARCHICAL = "hierarchical"
    PER_RESOLVE = "per_resolve"
    PER_THREAD = "per_thread"
    EXTERNALLY_CONTROLLED = "externally_controlled"
    CUSTOM = "custom"

    def __str__(self) -> str:
        return self.value


class Resolution(str, Enum):
    """Outcome of checking a registration request against known mappings.

    Attributes:
        ACCEPT: Forward the request to the sink and record it.
        SKIP: The same mapping is already known; nothing to do.
    """

    ACCEPT = "accept"
    SKIP = "skip"

    def __str__(self) -> str:
        return self.value
