from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Union


if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


class BindingKind(Enum):
    CLASS = "class"
    CONSTANT = "constant"


class Lifecycle:
    """One-shot cell holding the shared instance of a class binding.

    The cell starts unresolved. The first `get_or_create` call runs the factory
    under the cell's lock and stores the result; every later call returns that
    same object. A stored `None` still counts as resolved.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._resolved = False
        self._instance: object = None

    @property
    def is_resolved(self) -> bool:
        return self._resolved

    @property
    def instance(self) -> object:
        if not self._resolved:
            msg = "Lifecycle has not been resolved yet"
            raise RuntimeError(msg)
        return self._instance

    def get_or_create(self, factory: Callable[[], object]) -> object:
        if self._resolved:
            return self._instance

        # RLock: a binding that depends on itself recurses instead of deadlocking.
        with self._lock:
            if not self._resolved:
                self._instance = factory()
                self._resolved = True

        return self._instance


@dataclass(frozen=True, eq=False)
class ClassBinding:
    """Bind `parent_type` to a concrete `target` built once and then shared.

    `constraint` restricts the binding to parameters of that requesting class;
    `None` makes it the default for `parent_type`. `constant_args` maps
    constructor parameter names of `target` to literal values.
    """

    parent_type: Any
    target: type
    constraint: type | None = None
    constant_args: Mapping[str, Any] = field(default_factory=dict)
    lifecycle: Lifecycle = field(default_factory=Lifecycle, repr=False)
    kind: BindingKind = field(default=BindingKind.CLASS, init=False)

    @property
    def is_constrained(self) -> bool:
        return self.constraint is not None

    def matches(self, requesting_type: type | None) -> bool:
        return self.constraint is None or self.constraint == requesting_type

    def exactly_matches(self, requesting_type: type | None) -> bool:
        return self.constraint is not None and self.constraint == requesting_type


@dataclass(frozen=True, eq=False)
class ConstantBinding:
    """Bind `parent_type` to a precomputed `value`."""

    parent_type: Any
    value: Any
    constraint: type | None = None
    kind: BindingKind = field(default=BindingKind.CONSTANT, init=False)

    @property
    def is_constrained(self) -> bool:
        return self.constraint is not None

    def matches(self, requesting_type: type | None) -> bool:
        return self.constraint is None or self.constraint == requesting_type

    def exactly_matches(self, requesting_type: type | None) -> bool:
        return self.constraint is not None and self.constraint == requesting_type


Binding = Union[ClassBinding, ConstantBinding]
