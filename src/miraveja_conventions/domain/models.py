from typing import Any, Callable, Hashable, Iterable, List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from miraveja_conventions.domain.enums import Lifetime


class GenericParameter(BaseModel):
    """An unbound type parameter of a generic type.

    Attributes:
        name: The parameter name as declared (e.g. ``T``).
        position: Index of the parameter in the owning type's parameter list.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Declared name of the type parameter.")
    position: int = Field(..., description="Index of the parameter in its owner's parameter list.")

    @property
    def identity(self) -> Hashable:
        return self

    @property
    def display_name(self) -> str:
        return self.name


class InterfaceDescriptor(BaseModel):
    """Value object describing a possibly-generic interface reference.

    A reference carries the arguments it was written with. An empty
    ``type_arguments`` tuple means the reference is either non-generic or
    fully open (unbound).

    Attributes:
        name: Simple name of the interface, without arity suffix.
        declaring_module: Dotted name of the module declaring the interface.
        generic_arity: Number of type parameters of the generic definition.
        type_arguments: Arguments of a closed or partially closed reference.
        origin: The live interface class, when described from one.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Simple name of the interface.")
    declaring_module: str = Field(..., description="Module declaring the interface.")
    generic_arity: int = Field(default=0, description="Arity of the generic interface definition.")
    type_arguments: Tuple[Union[GenericParameter, "InterfaceDescriptor", "TypeDescriptor"], ...] = Field(
        default=(),
        description="Type arguments of the reference; empty when open or non-generic.",
    )
    origin: Optional[Any] = Field(default=None, exclude=True, repr=False)

    @property
    def open_key(self) -> Hashable:
        """Identity of the generic definition, ignoring any arguments."""
        if self.origin is not None:
            return self.origin
        return (self.declaring_module, self.name, self.generic_arity)

    @property
    def identity(self) -> Hashable:
        if not self.type_arguments:
            return self.open_key
        return (self.open_key, tuple(argument.identity for argument in self.type_arguments))

    @property
    def open_identity(self) -> "InterfaceDescriptor":
        """The unbound form of this reference."""
        if not self.type_arguments:
            return self
        return self.model_copy(update={"type_arguments": ()})

    @property
    def is_generic(self) -> bool:
        return self.generic_arity > 0

    @property
    def display_name(self) -> str:
        if self.type_arguments:
            arguments = ", ".join(argument.display_name for argument in self.type_arguments)
            return f"{self.name}[{arguments}]"
        if self.is_generic:
            return f"{self.name}`{self.generic_arity}"
        return self.name

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, (InterfaceDescriptor, TypeDescriptor)):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)


class TypeDescriptor(BaseModel):
    """Normalized, read-only view of a candidate type.

    Identity is the underlying type: the live class when ``origin`` is set,
    otherwise the ``(declaring_module, name, generic_arity)`` triple. Two
    descriptors with the same identity compare and hash equal regardless of
    how much of the type they describe.

    Attributes:
        name: Simple name of the type, without arity suffix.
        declaring_module: Dotted name of the module declaring the type.
        generic_parameters: The type's own unbound parameters, in order.
        implemented_interfaces: Interfaces implemented directly or through bases.
        origin: The live class, when described from one.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Simple name of the type.")
    declaring_module: str = Field(..., description="Module declaring the type.")
    generic_parameters: Tuple[GenericParameter, ...] = Field(
        default=(),
        description="Unbound type parameters of the type, in declaration order.",
    )
    implemented_interfaces: Tuple[InterfaceDescriptor, ...] = Field(
        default=(),
        description="Ordered interface closure of the type.",
    )
    origin: Optional[Any] = Field(default=None, exclude=True, repr=False)

    @property
    def generic_arity(self) -> int:
        return len(self.generic_parameters)

    @property
    def is_open(self) -> bool:
        return self.generic_arity > 0

    @property
    def identity(self) -> Hashable:
        if self.origin is not None:
            return self.origin
        return (self.declaring_module, self.name, self.generic_arity)

    @property
    def display_name(self) -> str:
        if self.generic_parameters:
            parameters = ", ".join(parameter.name for parameter in self.generic_parameters)
            return f"{self.name}[{parameters}]"
        return self.name

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, (InterfaceDescriptor, TypeDescriptor)):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)


InterfaceDescriptor.model_rebuild()

RegisteredType = Union[InterfaceDescriptor, TypeDescriptor]


class LifetimeTag(BaseModel):
    """Opaque lifetime requested for a registration.

    Attributes:
        kind: Which lifetime the container should apply.
        payload: Caller-supplied lifetime object for ``Lifetime.CUSTOM``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Lifetime = Field(..., description="The requested lifetime kind.")
    payload: Optional[Any] = Field(default=None, description="Custom lifetime object, if any.")


class RegistrationRequest(BaseModel):
    """Computed intent to bind one abstraction to one concrete type.

    Attributes:
        registered_type: The abstraction resolution will be requested for.
        mapped_type: The concrete type that will be constructed.
        name: Optional registration name.
        lifetime: Requested lifetime, ``None`` to use the container default.
        injection_members: Opaque construction directives, passed through.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    registered_type: RegisteredType = Field(..., description="The abstraction being registered.")
    mapped_type: TypeDescriptor = Field(..., description="The concrete type mapped to the abstraction.")
    name: Optional[str] = Field(default=None, description="The registration name.")
    lifetime: Optional[LifetimeTag] = Field(default=None, description="The requested lifetime.")
    injection_members: Tuple[Any, ...] = Field(default=(), description="Opaque injection directives.")

    @property
    def key(self) -> Tuple[Hashable, Optional[str]]:
        return (self.registered_type.identity, self.name)

    @property
    def is_self_registration(self) -> bool:
        return self.registered_type.identity == self.mapped_type.identity


MappingSelector = Callable[[TypeDescriptor], Optional[Iterable[RegisteredType]]]
NameSelector = Callable[[TypeDescriptor], Optional[str]]
LifetimeSelector = Callable[[TypeDescriptor], Optional[LifetimeTag]]
InjectionSelector = Callable[[TypeDescriptor], Optional[Sequence[Any]]]
TypeSource = Callable[[], Iterable[TypeDescriptor]]


class Convention(BaseModel):
    """Named bundle of a type source and the selectors driving one batch.

    Selectors left unset fall back to the ``none`` built-ins.

    Attributes:
        name: Human-readable name of the convention.
        type_source: Callable returning the candidate types, in order.
        mapping_selector: Which abstractions each type maps to.
        name_selector: Registration name for each type.
        lifetime_selector: Lifetime for each type.
        injection_selector: Injection directives for each type.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Name of the convention.")
    type_source: TypeSource = Field(..., description="Callable producing the candidate types.")
    mapping_selector: Optional[MappingSelector] = Field(default=None)
    name_selector: Optional[NameSelector] = Field(default=None)
    lifetime_selector: Optional[LifetimeSelector] = Field(default=None)
    injection_selector: Optional[InjectionSelector] = Field(default=None)

    def get_types(self) -> List[TypeDescriptor]:
        """Evaluate the type source."""
        return list(self.type_source())


class BatchResult(BaseModel):
    """Tracks what one registration batch did with its requests.

    Attributes:
        accepted: Requests forwarded to the sink, in request order.
        skipped: Requests already satisfied by a known mapping.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    accepted: List[RegistrationRequest] = Field(default_factory=list)
    skipped: List[RegistrationRequest] = Field(default_factory=list)
