import logging
from typing import Dict, Hashable, Optional, Tuple

from miraveja_conventions.domain import (
    DuplicateTypeMappingError,
    IConflictResolver,
    IRegistrationSink,
    RegisteredType,
    RegistrationRequest,
    Resolution,
    TypeDescriptor,
)

logger = logging.getLogger(__name__)

MappingKey = Tuple[Hashable, Optional[str]]


class KnownMappingIndex:
    """Mappings known during one batch, keyed by ``(registered identity, name)``.

    Entries are seeded lazily from the sink the first time a key is looked up
    and overwritten as requests are accepted. Mappings that existed before
    the batch and mappings accepted during it are treated the same.

    Attributes:
        _sink: The sink consulted for mappings that predate the batch.
        _entries: Known mapped type per key; ``None`` records a confirmed miss.
    """

    def __init__(self, sink: Optional[IRegistrationSink] = None) -> None:
        self._sink = sink
        self._entries: Dict[MappingKey, Optional[TypeDescriptor]] = {}

    def get(self, registered_type: RegisteredType, name: Optional[str]) -> Optional[TypeDescriptor]:
        """Return the type currently mapped for the key, if any.

        Args:
            registered_type: The abstraction to look up.
            name: The registration name to look up.
        """
        key = (registered_type.identity, name)
        if key not in self._entries:
            self._entries[key] = self._sink.get_mapped_type(registered_type, name) if self._sink is not None else None
        return self._entries[key]

    def set(self, registered_type: RegisteredType, name: Optional[str], mapped_type: TypeDescriptor) -> None:
        """Record ``mapped_type`` as the mapping for the key."""
        self._entries[(registered_type.identity, name)] = mapped_type

    def __len__(self) -> int:
        return sum(1 for mapped_type in self._entries.values() if mapped_type is not None)


class ConflictResolver(IConflictResolver):
    """Checks registration requests against the mappings known for the batch.

    Attributes:
        _index: The batch's known mappings.
        _overwrite: Whether a differing mapping replaces the known one.
    """

    def __init__(self, index: KnownMappingIndex, overwrite: bool = False) -> None:
        self._index = index
        self._overwrite = overwrite

    def resolve(self, request: RegistrationRequest) -> Resolution:
        """Decide whether a request is accepted or skipped.

        Accepted requests are recorded in the index before returning.

        Args:
            request: The request to check.

        Returns:
            ``Resolution.ACCEPT`` when the key is unknown or overwriting is
            allowed, ``Resolution.SKIP`` when the key already maps to the same type.

        Raises:
            DuplicateTypeMappingError: If the key maps to a different type and
                overwriting is not allowed.
        """
        current = self._index.get(request.registered_type, request.name)

        if current is not None:
            if current.identity == request.mapped_type.identity:
                logger.debug(
                    "Skipping %s: already mapped to %s",
                    request.registered_type.display_name,
                    current.display_name,
                )
                return Resolution.SKIP
            if not self._overwrite:
                logger.debug(
                    "Rejecting %s -> %s: already mapped to %s",
                    request.registered_type.display_name,
                    request.mapped_type.display_name,
                    current.display_name,
                )
                raise DuplicateTypeMappingError(
                    request.registered_type,
                    request.name,
                    current,
                    request.mapped_type,
                )
            logger.debug(
                "Overwriting %s: %s replaces %s",
                request.registered_type.display_name,
                request.mapped_type.display_name,
                current.display_name,
            )

        self._index.set(request.registered_type, request.name, request.mapped_type)
        return Resolution.ACCEPT
