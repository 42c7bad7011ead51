import contextlib
from typing import Any, FrozenSet

from pydantic import BaseModel, ConfigDict, Field


class DiscoveryPolicy(BaseModel):
    """Configuration for turning live classes into type descriptors.

    Attributes:
        ignored_interfaces: Interfaces never reported as implemented. Defaults
            to the context-manager ABCs, which describe disposal rather than
            an abstraction worth resolving.
        include_non_public: Whether classes whose name starts with ``_`` are discovered.
        skip_on_error: Whether modules that fail to import and classes that fail to
            describe are skipped instead of raising.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ignored_interfaces: FrozenSet[Any] = Field(
        default=frozenset({contextlib.AbstractContextManager, contextlib.AbstractAsyncContextManager}),
        description="Interfaces excluded from every descriptor.",
    )
    include_non_public: bool = Field(default=False, description="Discover underscore-prefixed classes.")
    skip_on_error: bool = Field(default=True, description="Skip modules and classes that cannot be discovered.")
