from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar, overload

from ._bindings import BindingKind
from ._errors import IntrospectionError, UnresolveableClassError
from ._introspection import InspectIntrospector
from ._parameters import ParameterResolver


if TYPE_CHECKING:
    from collections.abc import Mapping

    from ._bindings import Binding, ClassBinding
    from ._introspection import TypeIntrospector
    from ._registry import BindingRegistry

    T = TypeVar("T")


logger = logging.getLogger(__name__)


class Resolver:
    """Turn a requested type into an instance.

    - bound types: constant value, or a class built once and shared
    - unbound classes: constructed on every call, dependencies from bindings
    """

    def __init__(self, registry: BindingRegistry, introspector: TypeIntrospector | None = None) -> None:
        self.registry = registry
        self.introspector = introspector if introspector is not None else InspectIntrospector()
        self._parameters = ParameterResolver(self)

    @overload
    def resolve(self, token: type[T]) -> T: ...

    @overload
    def resolve(self, token: Any) -> object: ...

    def resolve(self, token: Any) -> object:
        binding = self.registry.find_best_match(None, token)
        if binding is not None:
            return self.resolve_binding(binding)

        logger.debug("No binding for %r, constructing it directly", token)
        return self._construct(token, {})

    def resolve_binding(self, binding: Binding) -> object:
        if binding.kind is BindingKind.CONSTANT:
            return binding.value
        if binding.kind is BindingKind.CLASS:
            return binding.lifecycle.get_or_create(lambda: self._build(binding))

        msg = f"Unknown binding kind: {binding.kind!r}"
        raise TypeError(msg)

    def _build(self, binding: ClassBinding) -> object:
        logger.debug(
            "Building shared %s for %s",
            binding.target.__qualname__,
            getattr(binding.parent_type, "__qualname__", binding.parent_type),
        )
        return self._construct(binding.target, binding.constant_args)

    def _construct(self, cls: type[T], constant_args: Mapping[str, Any]) -> T:
        if not self.introspector.is_instantiable(cls):
            msg = "Class must be instantiable"
            raise UnresolveableClassError(cls, msg)

        try:
            params = self.introspector.parameters(cls)
        except IntrospectionError as e:
            raise UnresolveableClassError(cls, str(e)) from e

        args, kwargs = self._parameters.resolve_all(cls, params, constant_args)
        return cls(*args, **kwargs)
