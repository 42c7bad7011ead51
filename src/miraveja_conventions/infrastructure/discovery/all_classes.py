"""Type sources: the concrete classes defined in a set of modules."""

import importlib
import inspect
import logging
import sys
from types import ModuleType
from typing import Dict, Hashable, Iterable, List, Optional

from miraveja_conventions.domain import TypeDescriptor, TypeDiscoveryError
from miraveja_conventions.infrastructure.discovery.describer import TypeDescriber, is_interface, is_runtime_class
from miraveja_conventions.infrastructure.discovery.policy import DiscoveryPolicy

logger = logging.getLogger(__name__)


def _is_candidate(candidate: object, module: ModuleType, policy: DiscoveryPolicy) -> bool:
    if not is_runtime_class(candidate):
        return False
    if candidate.__module__ != module.__name__:
        return False
    if not policy.include_non_public and candidate.__name__.startswith("_"):
        return False
    if issubclass(candidate, type):
        return False
    return not is_interface(candidate) and not inspect.isabstract(candidate)


def from_modules(
    *modules: ModuleType,
    policy: Optional[DiscoveryPolicy] = None,
    describer: Optional[TypeDescriber] = None,
) -> List[TypeDescriptor]:
    """Describe the concrete classes defined in the given modules.

    Classes are returned in module order, then definition order, each once.
    Classes merely imported into a module are left to their own module.

    Args:
        *modules: Modules to scan.
        policy: Discovery configuration. Defaults to ``DiscoveryPolicy()``.
        describer: Describer to reuse; one is created from ``policy`` otherwise.

    Returns:
        Descriptors of the discovered classes.

    Example:
        >>> from myapp import services
        >>> registrar.register_types(from_modules(services), with_mappings.from_matching_interface)
    """
    policy = policy or DiscoveryPolicy()
    describer = describer or TypeDescriber(policy)
    discovered: Dict[Hashable, TypeDescriptor] = {}

    for module in modules:
        for candidate in list(vars(module).values()):
            if not _is_candidate(candidate, module, policy):
                continue
            try:
                descriptor = describer.describe(candidate)
            except Exception as e:
                if not policy.skip_on_error:
                    raise TypeDiscoveryError(candidate, str(e)) from e
                logger.warning("Skipping %s.%s: %s", module.__name__, candidate.__name__, e)
                continue
            discovered.setdefault(descriptor.identity, descriptor)

    return list(discovered.values())


def from_module_names(
    *names: str,
    policy: Optional[DiscoveryPolicy] = None,
    describer: Optional[TypeDescriber] = None,
) -> List[TypeDescriptor]:
    """Import the named modules and describe their concrete classes.

    Args:
        *names: Dotted module names.
        policy: Discovery configuration. Defaults to ``DiscoveryPolicy()``.
        describer: Describer to reuse; one is created from ``policy`` otherwise.

    Returns:
        Descriptors of the discovered classes.

    Raises:
        TypeDiscoveryError: If a module cannot be imported and ``policy.skip_on_error`` is false.
    """
    policy = policy or DiscoveryPolicy()
    return from_modules(*_import_modules(names, policy), policy=policy, describer=describer)


def from_loaded_modules(
    prefix: Optional[str] = None,
    policy: Optional[DiscoveryPolicy] = None,
    describer: Optional[TypeDescriber] = None,
) -> List[TypeDescriptor]:
    """Describe the concrete classes of every module already imported.

    Args:
        prefix: Only scan this package and its submodules.
        policy: Discovery configuration. Defaults to ``DiscoveryPolicy()``.
        describer: Describer to reuse; one is created from ``policy`` otherwise.

    Returns:
        Descriptors of the discovered classes.
    """
    modules = [
        module
        for name, module in sorted(sys.modules.items())
        if isinstance(module, ModuleType)
        and (prefix is None or name == prefix or name.startswith(f"{prefix}."))
    ]
    return from_modules(*modules, policy=policy, describer=describer)


def _import_modules(names: Iterable[str], policy: DiscoveryPolicy) -> List[ModuleType]:
    modules = []
    for name in names:
        try:
            modules.append(importlib.import_module(name))
        except Exception as e:
            if not policy.skip_on_error:
                raise TypeDiscoveryError(name, str(e)) from e
            logger.warning("Skipping module %s: %s", name, e)
    return modules
