import logging
from typing import Iterable, Iterator, Optional

from miraveja_conventions.application import with_injection_members, with_lifetime, with_mappings, with_name
from miraveja_conventions.domain import (
    InjectionSelector,
    IRegistrationPlanner,
    LifetimeSelector,
    MappingSelector,
    NameSelector,
    RegistrationRequest,
    TypeDescriptor,
)

logger = logging.getLogger(__name__)


class RegistrationPlanner(IRegistrationPlanner):
    """Computes registration requests for candidate types from selectors.

    The planner is stateless; selectors are evaluated lazily, one type at a
    time, in input order.
    """

    def plan(
        self,
        types: Iterable[TypeDescriptor],
        mapping_selector: Optional[MappingSelector] = None,
        name_selector: Optional[NameSelector] = None,
        lifetime_selector: Optional[LifetimeSelector] = None,
        injection_selector: Optional[InjectionSelector] = None,
    ) -> Iterator[RegistrationRequest]:
        """Yield the registration requests implied by the selectors.

        A type the mapping selector maps from nothing is registered under
        itself, but only when a lifetime or injection directives were
        requested for it. Otherwise one request is produced per mapped
        abstraction.

        Args:
            types: Candidate types, in order.
            mapping_selector: Abstractions each type maps to. Defaults to no mapping.
            name_selector: Registration name for each type. Defaults to no name.
            lifetime_selector: Lifetime for each type. Defaults to unspecified.
            injection_selector: Injection directives for each type. Defaults to none.

        Yields:
            Registration requests, grouped by type in input order.

        Example:
            >>> planner = RegistrationPlanner()
            >>> list(planner.plan([logger_type], with_mappings.from_all_interfaces))
            [RegistrationRequest(registered_type=InterfaceDescriptor(name='ILogger', ...), ...)]
        """
        mapping_selector = mapping_selector or with_mappings.none
        name_selector = name_selector or with_name.default
        lifetime_selector = lifetime_selector or with_lifetime.none
        injection_selector = injection_selector or with_injection_members.none

        for type_descriptor in types:
            from_types = list(mapping_selector(type_descriptor) or ())
            name = name_selector(type_descriptor)
            lifetime = lifetime_selector(type_descriptor)
            injection_members = tuple(injection_selector(type_descriptor) or ())

            if not from_types:
                if lifetime is None and not injection_members:
                    logger.debug("Nothing to register for %s", type_descriptor.display_name)
                    continue
                from_types = [type_descriptor]

            for from_type in from_types:
                request = RegistrationRequest(
                    registered_type=from_type,
                    mapped_type=type_descriptor,
                    name=name,
                    lifetime=lifetime,
                    injection_members=injection_members,
                )
                logger.debug(
                    "Planned %s -> %s (name=%r)",
                    from_type.display_name,
                    type_descriptor.display_name,
                    name,
                )
                yield request
