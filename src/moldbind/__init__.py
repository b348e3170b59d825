"""Binding-based dependency injection.

This package resolves requested types to instances, building constructor
dependencies recursively from explicit bindings or, for unbound concrete
classes, from constructor type hints.

Exports:
- `Container`: Base class for process-wide containers assembled from modules.
- `Module`: Base class declaring bindings with a fluent `bind(...)` syntax.
- `ClassBinding` / `ConstantBinding`: Binding records; class bindings build
  their target once and share it.
- `BindingRegistry`, `Resolver`: The resolution engine, usable without a container.
- `InspectIntrospector`: Default constructor introspection.
"""

from ._bindings import Binding, BindingKind, ClassBinding, ConstantBinding, Lifecycle
from ._container import Container
from ._errors import (
    AmbiguousBindingError,
    ContainerError,
    IntrospectionError,
    InvalidModuleError,
    UnresolveableClassError,
)
from ._introspection import Arguments, InspectIntrospector, ParameterInfo, TypeIntrospector
from ._module import BindingBuilder, Module
from ._parameters import ParameterResolver
from ._registry import BindingRegistry
from ._resolver import Resolver


__all__ = [
    "AmbiguousBindingError",
    "Arguments",
    "Binding",
    "BindingBuilder",
    "BindingKind",
    "BindingRegistry",
    "ClassBinding",
    "ConstantBinding",
    "Container",
    "ContainerError",
    "InspectIntrospector",
    "IntrospectionError",
    "InvalidModuleError",
    "Lifecycle",
    "Module",
    "ParameterInfo",
    "ParameterResolver",
    "Resolver",
    "TypeIntrospector",
    "UnresolveableClassError",
]
