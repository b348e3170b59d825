from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar, overload

from ._errors import InvalidModuleError
from ._introspection import InspectIntrospector
from ._module import Module
from ._registry import BindingRegistry
from ._resolver import Resolver


if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._introspection import TypeIntrospector

    T = TypeVar("T")
    C = TypeVar("C", bound="Container")


logger = logging.getLogger(__name__)


class Container:
    """DI container assembled from modules.

    Subclass it and return the modules from `register_modules`:

      class AppContainer(Container):
          def register_modules(self):
              return [LoggingModule(), StorageModule()]

      service = AppContainer.instance().resolve(ReportService)

    `instance()` gives the process-wide container of a subclass; it is created
    on first access and kept until the process exits.
    """

    _instances: ClassVar[dict[type, Container]] = {}
    # Reentrant: register_modules() may reach another container's instance().
    _instances_lock: ClassVar[threading.RLock] = threading.RLock()

    def __init__(self, *, _from_instance: bool = False) -> None:
        if not _from_instance:
            msg = f"{type(self).__name__} must be obtained via {type(self).__name__}.instance()"
            raise RuntimeError(msg)

        modules = self.register_modules()
        try:
            modules = list(modules)
        except TypeError as e:
            msg = f"{type(self).__name__}.register_modules() must return an iterable of modules, got {modules!r}"
            raise InvalidModuleError(msg) from e

        self.registry = BindingRegistry()
        for module in modules:
            if not isinstance(module, Module):
                msg = f"{type(self).__name__} registered {module!r}, which is not a Module instance"
                raise InvalidModuleError(msg)

            for binding in module.get_bindings():
                self.registry.add(binding)

        self._resolver = Resolver(self.registry, self.create_introspector())
        logger.debug("%s initialized with %d bindings", type(self).__name__, len(self.registry))

    @classmethod
    def instance(cls: type[C]) -> C:
        container = cls._instances.get(cls)
        if container is None:
            with cls._instances_lock:
                container = cls._instances.get(cls)
                if container is None:
                    container = cls(_from_instance=True)
                    cls._instances[cls] = container
        return container  # type: ignore[return-value]

    def register_modules(self) -> Iterable[Module]:
        return ()

    def create_introspector(self) -> TypeIntrospector:
        return InspectIntrospector()

    @overload
    def resolve(self, token: type[T]) -> T: ...

    @overload
    def resolve(self, token: Any) -> object: ...

    def resolve(self, token: Any) -> object:
        """Resolve `token` to an instance.

        - If a binding matches: its constant, or its shared class instance.
        - Otherwise, if `token` is a concrete class: construct it, injecting
          constructor parameters from bindings.
        """
        return self._resolver.resolve(token)
