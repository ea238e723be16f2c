"""Capability contracts and the protocol decorator that declares them."""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Mapping,
    Protocol,
    TypeAlias,
    TypeVar,
    get_origin,
)

from .exceptions import UnknownOperationError

ContractCheck: TypeAlias = Callable[[Any], bool]
"""Callable receiving a fresh variant and returning True when the contract holds."""

DefaultBody: TypeAlias = Callable[..., Any]
"""Default operation body; receives the wrapped variant as its first argument."""

ProtocolT = TypeVar("ProtocolT", bound=type)

_PROTOCOL_BASES = {object, Protocol, Generic}


@dataclass(frozen=True, slots=True)
class OperationSpec:
    """Name and expected call shape of a single capability operation."""

    name: str
    signature: inspect.Signature | None = None

    def _placeholder_arguments(self) -> tuple[list[None], dict[str, None]]:
        if self.signature is None:
            return [], {}
        args: list[None] = []
        kwargs: dict[str, None] = {}
        for parameter in self.signature.parameters.values():
            if parameter.kind in (
                inspect.Parameter.POSITIONAL_ONLY,
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
            ):
                args.append(None)
            elif parameter.kind is inspect.Parameter.KEYWORD_ONLY:
                kwargs[parameter.name] = None
        return args, kwargs

    def accepts(self, func: Callable[..., Any], *, unbound: bool = False) -> bool:
        """
        Return True when ``func`` can be called the way the operation is declared.

        Parameters:
            func: Candidate implementation taken from a variant.
            unbound: Treat ``func`` as a plain function still expecting ``self``.
        """
        if self.signature is None:
            return True
        try:
            target = inspect.signature(func)
        except (TypeError, ValueError):
            # builtins without introspectable signatures
            return True
        args, kwargs = self._placeholder_arguments()
        if unbound:
            args = [None, *args]
        try:
            target.bind(*args, **kwargs)
        except TypeError:
            return False
        return True


def _operation_signature(func: Callable[..., Any]) -> inspect.Signature | None:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return None
    parameters = list(signature.parameters.values())[1:]
    return signature.replace(parameters=parameters)


def _resolve_attribute(variant: Any, name: str) -> tuple[Any, bool]:
    """Return the attribute and whether it still expects an explicit ``self``."""
    value = getattr(variant, name, None)
    if not isinstance(variant, type):
        return value, False
    static = inspect.getattr_static(variant, name, None)
    if isinstance(static, (staticmethod, classmethod)):
        return value, False
    return value, inspect.isfunction(value)


@dataclass(frozen=True, slots=True)
class Capability:
    """
    Named contract made of one or more operations.

    A variant satisfies a capability when it provides every operation as a
    callable attribute. Operations listed in ``defaults`` may be left out by a
    variant; binding then wraps it so the default body is used. ``contracts``
    hold behavioural checks used by :func:`verify_contract`.
    """

    name: str
    operations: tuple[OperationSpec, ...]
    defaults: Mapping[str, DefaultBody] = field(
        default_factory=dict, compare=False
    )
    contracts: tuple[ContractCheck, ...] = field(default=(), compare=False)
    protocol: type | None = None

    def __post_init__(self) -> None:
        operations = tuple(self.operations)
        if not operations:
            raise ValueError(f"Capability '{self.name}' must declare at least one operation")
        names = [operation.name for operation in operations]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(
                f"Capability '{self.name}' declares duplicate operations: {duplicates}"
            )
        unknown_defaults = sorted(set(self.defaults) - set(names))
        if unknown_defaults:
            raise ValueError(
                f"Capability '{self.name}' has defaults for undeclared operations: "
                f"{unknown_defaults}"
            )
        object.__setattr__(self, "operations", operations)
        object.__setattr__(self, "defaults", MappingProxyType(dict(self.defaults)))
        object.__setattr__(self, "contracts", tuple(self.contracts))

    @classmethod
    def define(
        cls,
        name: str,
        operations: Iterable[str],
        *,
        defaults: Mapping[str, DefaultBody] | None = None,
        contracts: Iterable[ContractCheck] = (),
    ) -> "Capability":
        """Build a capability from bare operation names, without signature information."""
        return cls(
            name=name,
            operations=tuple(OperationSpec(operation) for operation in operations),
            defaults=defaults or {},
            contracts=tuple(contracts),
        )

    @classmethod
    def from_protocol(
        cls,
        protocol: type,
        *,
        name: str | None = None,
        defaults: Mapping[str, DefaultBody] | None = None,
        contracts: Iterable[ContractCheck] = (),
    ) -> "Capability":
        """
        Derive a capability from the public methods declared on a ``Protocol`` class.

        Methods are collected along the protocol's MRO in definition order;
        private names are ignored.
        """
        operations: dict[str, OperationSpec] = {}
        for klass in reversed(protocol.__mro__):
            if klass in _PROTOCOL_BASES:
                continue
            for attr_name, value in vars(klass).items():
                if attr_name.startswith("_") or not callable(value):
                    continue
                operations[attr_name] = OperationSpec(
                    attr_name, _operation_signature(value)
                )
        return cls(
            name=name or protocol.__name__.lower(),
            operations=tuple(operations.values()),
            defaults=defaults or {},
            contracts=tuple(contracts),
            protocol=protocol,
        )

    @property
    def operation_names(self) -> tuple[str, ...]:
        return tuple(operation.name for operation in self.operations)

    def operation(self, name: str) -> OperationSpec:
        for operation in self.operations:
            if operation.name == name:
                return operation
        raise UnknownOperationError(self.name, name)

    def defaulted_operations(self, variant: Any) -> tuple[str, ...]:
        """Operations the variant lacks but the capability can fill from a default."""
        return tuple(
            operation.name
            for operation in self.operations
            if not callable(getattr(variant, operation.name, None))
            and operation.name in self.defaults
        )

    def missing_operations(
        self, variant: Any, *, allow_defaults: bool = True
    ) -> tuple[str, ...]:
        """Operations the variant lacks; defaulted ones only count when ``allow_defaults`` is False."""
        return tuple(
            operation.name
            for operation in self.operations
            if not callable(getattr(variant, operation.name, None))
            and not (allow_defaults and operation.name in self.defaults)
        )

    def incompatible_operations(self, variant: Any) -> tuple[str, ...]:
        """Operations the variant provides with a call shape the contract cannot use."""
        incompatible: list[str] = []
        for operation in self.operations:
            implementation, unbound = _resolve_attribute(variant, operation.name)
            if not callable(implementation):
                continue
            if not operation.accepts(implementation, unbound=unbound):
                incompatible.append(operation.name)
        return tuple(incompatible)

    def satisfied_by(
        self,
        variant: Any,
        *,
        check_signatures: bool = True,
        allow_defaults: bool = False,
    ) -> bool:
        if self.missing_operations(variant, allow_defaults=allow_defaults):
            return False
        if check_signatures and self.incompatible_operations(variant):
            return False
        return True

    def with_default(self, operation: str, body: DefaultBody) -> "Capability":
        """Return a copy of the capability that falls back to ``body`` for ``operation``."""
        self.operation(operation)
        defaults = dict(self.defaults)
        defaults[operation] = body
        return replace(self, defaults=defaults)

    def with_contract(self, check: ContractCheck) -> "Capability":
        return replace(self, contracts=(*self.contracts, check))


CapabilityLike: TypeAlias = "Capability | type"


def capability(
    name: str,
    *,
    defaults: Mapping[str, DefaultBody] | None = None,
    contracts: Iterable[ContractCheck] = (),
) -> Callable[[ProtocolT], ProtocolT]:
    """
    Class decorator declaring a ``Protocol`` as a capability.

    The derived :class:`Capability` is stored on the protocol as
    ``__capability__`` so the protocol itself can be passed wherever a
    capability is expected.
    """

    def decorator(protocol: ProtocolT) -> ProtocolT:
        spec = Capability.from_protocol(
            protocol, name=name, defaults=defaults, contracts=contracts
        )
        setattr(protocol, "__capability__", spec)
        return protocol

    return decorator


def capability_of(value: CapabilityLike) -> Capability:
    """
    Resolve a capability from either a ``Capability`` or a decorated protocol.

    Raises:
        TypeError: If ``value`` does not declare a capability.
    """
    if isinstance(value, Capability):
        return value
    value = get_origin(value) or value
    spec = vars(value).get("__capability__") if isinstance(value, type) else None
    if isinstance(spec, Capability):
        return spec
    raise TypeError(f"{value!r} does not declare a capability")


__all__ = [
    "Capability",
    "CapabilityLike",
    "ContractCheck",
    "DefaultBody",
    "OperationSpec",
    "capability",
    "capability_of",
]
