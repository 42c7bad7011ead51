import logging
from typing import Iterable, Optional

from miraveja_conventions.application.conflict_resolver import ConflictResolver, KnownMappingIndex
from miraveja_conventions.application.planner import RegistrationPlanner
from miraveja_conventions.domain import (
    BatchResult,
    Convention,
    InjectionSelector,
    IRegistrationPlanner,
    IRegistrationSink,
    LifetimeSelector,
    MappingSelector,
    NameSelector,
    Resolution,
    TypeDescriptor,
)

logger = logging.getLogger(__name__)


class ConventionRegistrar:
    """Registers batches of types into a sink according to conventions.

    Orchestrates the planner, a per-batch conflict resolver and the sink.
    Each call is one batch with its own known-mapping index.

    Attributes:
        _sink: The container receiving accepted registrations.
        _planner: Component computing registration requests.
    """

    def __init__(self, sink: IRegistrationSink, planner: Optional[IRegistrationPlanner] = None) -> None:
        """Initialize the registrar.

        Args:
            sink: The container receiving accepted registrations.
            planner: Optional planner; defaults to ``RegistrationPlanner``.
        """
        self._sink = sink
        self._planner = planner or RegistrationPlanner()

    def register_types(
        self,
        types: Iterable[TypeDescriptor],
        mapping_selector: Optional[MappingSelector] = None,
        name_selector: Optional[NameSelector] = None,
        lifetime_selector: Optional[LifetimeSelector] = None,
        injection_selector: Optional[InjectionSelector] = None,
        overwrite_existing_mappings: bool = False,
    ) -> BatchResult:
        """Register a batch of types.

        Requests are checked and forwarded one at a time. When a conflict is
        raised, requests forwarded earlier in the batch stay registered.

        Args:
            types: Candidate types, already deduplicated.
            mapping_selector: Abstractions each type maps to.
            name_selector: Registration name for each type.
            lifetime_selector: Lifetime for each type.
            injection_selector: Injection directives for each type.
            overwrite_existing_mappings: Replace differing mappings instead of raising.

        Returns:
            The accepted and skipped requests of the batch.

        Raises:
            DuplicateTypeMappingError: If a request conflicts with a known mapping
                and overwriting is not allowed.

        Example:
            >>> registrar = ConventionRegistrar(InMemoryRegistry())
            >>> registrar.register_types(
            ...     all_classes.from_modules(services),
            ...     with_mappings.from_matching_interface,
            ...     lifetime_selector=with_lifetime.container_controlled,
            ... )
        """
        resolver = ConflictResolver(KnownMappingIndex(self._sink), overwrite=overwrite_existing_mappings)
        result = BatchResult()

        requests = self._planner.plan(
            types,
            mapping_selector=mapping_selector,
            name_selector=name_selector,
            lifetime_selector=lifetime_selector,
            injection_selector=injection_selector,
        )
        for request in requests:
            if resolver.resolve(request) == Resolution.SKIP:
                result.skipped.append(request)
                continue

            self._sink.register(
                request.registered_type,
                request.mapped_type,
                request.name,
                request.lifetime,
                request.injection_members,
            )
            result.accepted.append(request)

        logger.info(
            "Registered %d mapping(s) by convention, %d already present",
            len(result.accepted),
            len(result.skipped),
        )
        return result

    def register_convention(self, convention: Convention, overwrite_existing_mappings: bool = False) -> BatchResult:
        """Register the types of a convention using its selectors.

        Args:
            convention: The convention to apply.
            overwrite_existing_mappings: Replace differing mappings instead of raising.

        Returns:
            The accepted and skipped requests of the batch.
        """
        logger.debug("Applying convention %s", convention.name)
        return self.register_types(
            convention.get_types(),
            mapping_selector=convention.mapping_selector,
            name_selector=convention.name_selector,
            lifetime_selector=convention.lifetime_selector,
            injection_selector=convention.injection_selector,
            overwrite_existing_mappings=overwrite_existing_mappings,
        )


def register_types(
    sink: IRegistrationSink,
    types: Iterable[TypeDescriptor],
    mapping_selector: Optional[MappingSelector] = None,
    name_selector: Optional[NameSelector] = None,
    lifetime_selector: Optional[LifetimeSelector] = None,
    injection_selector: Optional[InjectionSelector] = None,
    overwrite_existing_mappings: bool = False,
) -> BatchResult:
    """Register a batch of types into ``sink``; see ``ConventionRegistrar.register_types``."""
    return ConventionRegistrar(sink).register_types(
        types,
        mapping_selector=mapping_selector,
        name_selector=name_selector,
        lifetime_selector=lifetime_selector,
        injection_selector=injection_selector,
        overwrite_existing_mappings=overwrite_existing_mappings,
    )
