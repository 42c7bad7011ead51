import abc
import inspect
import types
from typing import (
    Any,
    Dict,
    Generic,
    List,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

from miraveja_conventions.domain import GenericParameter, InterfaceDescriptor, TypeDescriptor, TypeDiscoveryError
from miraveja_conventions.infrastructure.discovery.policy import DiscoveryPolicy

TypeArgument = Union[GenericParameter, InterfaceDescriptor, TypeDescriptor]
InterfaceReference = Tuple[type, Tuple[Any, ...]]

_SKIPPED_BASES = (object, Generic, Protocol, abc.ABC)


def is_runtime_class(candidate: object) -> bool:
    """Return true when candidate is a class and not a parameterized alias."""
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_interface(cls: type) -> bool:
    """Return true when ``cls`` is an abstraction a concrete type can be registered under.

    Protocols, abstract classes and ABCs listing ``ABC`` as a direct base
    (marker interfaces) qualify.
    """
    if getattr(cls, "_is_protocol", False):
        return True
    if inspect.isabstract(cls):
        return True
    return isinstance(cls, abc.ABCMeta) and abc.ABC in cls.__bases__


def _is_generic(cls: type) -> bool:
    if getattr(cls, "__parameters__", ()):
        return True
    if issubclass(cls, Generic):
        return False
    return hasattr(cls, "__class_getitem__")


def _is_element_generic(cls: type) -> bool:
    # collections.abc generics carry no __parameters__; their single-argument
    # chains (Sequence -> Collection -> Iterable) share one element type
    return cls.__module__ == "collections.abc" and _is_generic(cls) and not getattr(cls, "__parameters__", ())


def _rebuild_alias(origin: Any, arguments: Tuple[Any, ...], fallback: Any) -> Any:
    try:
        if len(arguments) == 1:
            return origin[arguments[0]]
        return origin[arguments]
    except TypeError:
        return fallback


def _substitute(value: Any, substitutions: Mapping[Any, Any]) -> Any:
    if isinstance(value, TypeVar):
        return substitutions.get(value, value)

    origin = get_origin(value)
    arguments = get_args(value)
    if origin is None or not arguments:
        return value

    substituted = tuple(_substitute(argument, substitutions) for argument in arguments)
    return _rebuild_alias(origin, substituted, value)


def _has_foreign_type_variable(value: Any, own_parameters: Sequence[TypeVar]) -> bool:
    if isinstance(value, TypeVar):
        return value not in own_parameters
    if isinstance(value, (list, tuple)):
        return any(_has_foreign_type_variable(item, own_parameters) for item in value)
    return any(_has_foreign_type_variable(argument, own_parameters) for argument in get_args(value))


class TypeDescriber:
    """Builds type descriptors from live Python classes.

    Interfaces are collected by walking each class's declared bases,
    substituting type variables along the way, so a closed subclass of a
    generic class reports closed interfaces. Descriptors are cached per class.

    Attributes:
        _policy: Which interfaces are ignored.
        _cache: Descriptors already built, keyed by class.
    """

    def __init__(self, policy: Optional[DiscoveryPolicy] = None) -> None:
        self._policy = policy or DiscoveryPolicy()
        self._cache: Dict[type, TypeDescriptor] = {}

    def describe(self, cls: Any) -> TypeDescriptor:
        """Describe a class and the interfaces it implements.

        Args:
            cls: The class to describe.

        Returns:
            The descriptor for ``cls``; the same object on every call.

        Raises:
            TypeDiscoveryError: If ``cls`` is not a class.

        Example:
            >>> class Repository(IRepository[T]):
            ...     pass
            >>> TypeDescriber().describe(Repository).generic_arity
            1
        """
        if not is_runtime_class(cls):
            raise TypeDiscoveryError(cls, "Only classes can be described")

        cached = self._cache.get(cls)
        if cached is not None:
            return cached

        own_parameters = tuple(
            parameter for parameter in getattr(cls, "__parameters__", ()) if isinstance(parameter, TypeVar)
        )

        references: List[InterfaceReference] = []
        self._collect_interfaces(cls, {}, references)

        descriptor = TypeDescriptor(
            name=cls.__name__,
            declaring_module=cls.__module__,
            generic_parameters=tuple(
                GenericParameter(name=parameter.__name__, position=position)
                for position, parameter in enumerate(own_parameters)
            ),
            implemented_interfaces=tuple(
                self._describe_reference(origin, arguments, own_parameters)
                for origin, arguments in references
                # An unbound variable from a bare generic base cannot be mapped
                if not _has_foreign_type_variable(arguments, own_parameters)
            ),
            origin=cls,
        )
        self._cache[cls] = descriptor
        return descriptor

    def _collect_interfaces(
        self,
        cls: type,
        substitutions: Mapping[Any, Any],
        references: List[InterfaceReference],
        element_arguments: Tuple[Any, ...] = (),
    ) -> None:
        for base in vars(cls).get("__orig_bases__", cls.__bases__):
            origin = get_origin(base) or base
            if not isinstance(origin, type) or origin in _SKIPPED_BASES:
                continue
            if origin in self._policy.ignored_interfaces:
                continue

            arguments = tuple(_substitute(argument, substitutions) for argument in get_args(base))
            if not arguments and _is_element_generic(origin):
                arguments = element_arguments

            # Generic interfaces reached without arguments cannot be described
            if is_interface(origin) and (arguments or not _is_generic(origin)):
                if (origin, arguments) not in references:
                    references.append((origin, arguments))

            parameters = getattr(origin, "__parameters__", ())
            inherited = dict(zip(parameters, arguments)) if len(parameters) == len(arguments) else {}
            forwarded = arguments if len(arguments) == 1 and _is_element_generic(origin) else ()
            self._collect_interfaces(origin, inherited, references, forwarded)

    def _describe_reference(
        self,
        origin: type,
        arguments: Tuple[Any, ...],
        own_parameters: Sequence[TypeVar],
    ) -> InterfaceDescriptor:
        parameters = getattr(origin, "__parameters__", ())
        return InterfaceDescriptor(
            name=origin.__name__,
            declaring_module=origin.__module__,
            generic_arity=len(parameters) if parameters else len(arguments),
            type_arguments=tuple(self._describe_argument(argument, own_parameters) for argument in arguments),
            origin=origin,
        )

    def _describe_argument(self, argument: Any, own_parameters: Sequence[TypeVar]) -> TypeArgument:
        if isinstance(argument, TypeVar):
            return GenericParameter(name=argument.__name__, position=list(own_parameters).index(argument))

        origin = get_origin(argument)
        if isinstance(origin, type):
            return self._describe_reference(origin, get_args(argument), own_parameters)

        if is_runtime_class(argument):
            cached = self._cache.get(argument)
            if cached is not None:
                return cached
            return TypeDescriptor(name=argument.__name__, declaring_module=argument.__module__, origin=argument)

        if isinstance(argument, list):
            argument = tuple(argument)
        return TypeDescriptor(
            name=repr(argument),
            declaring_module=getattr(argument, "__module__", "typing"),
            origin=argument,
        )
