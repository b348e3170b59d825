from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ._bindings import ClassBinding, ConstantBinding
from ._errors import InvalidModuleError


if TYPE_CHECKING:
    from ._bindings import Binding


class BindingBuilder:
    """Fluent declaration of a single binding.

    Example:
      module.bind(Logger).to(ConsoleLogger)
      module.bind(Repo).to(SqlRepo).when_injected_into(ReportService)
      module.bind(Client).with_constant_args(timeout=30)
      module.bind(Settings).to_constant(settings)

    """

    def __init__(self, parent_type: Any) -> None:
        self._parent_type = parent_type
        self._target: type = parent_type
        self._value: Any = None
        self._is_constant = False
        self._constraint: type | None = None
        self._constant_args: dict[str, Any] = {}

    def to(self, target: type) -> BindingBuilder:
        self._target = target
        self._is_constant = False
        return self

    def to_constant(self, value: Any) -> BindingBuilder:
        self._value = value
        self._is_constant = True
        return self

    def when_injected_into(self, owner: type) -> BindingBuilder:
        self._constraint = owner
        return self

    def with_constant_args(self, **args: Any) -> BindingBuilder:
        self._constant_args.update(args)
        return self

    def build(self) -> Binding:
        if not self._is_constant:
            return ClassBinding(
                parent_type=self._parent_type,
                target=self._target,
                constraint=self._constraint,
                constant_args=dict(self._constant_args),
            )

        if self._constant_args:
            msg = f"Constant binding for {self._parent_type!r} cannot take constructor arguments"
            raise InvalidModuleError(msg)

        return ConstantBinding(parent_type=self._parent_type, value=self._value, constraint=self._constraint)


class Module(ABC):
    """A group of binding declarations.

    Subclasses declare their bindings in `configure`:

      class LoggingModule(Module):
          def configure(self) -> None:
              self.bind(Logger).to(ConsoleLogger)

    """

    def __init__(self) -> None:
        self._builders: list[BindingBuilder] = []
        self._bindings: list[Binding] | None = None

    @abstractmethod
    def configure(self) -> None: ...

    def bind(self, parent_type: Any) -> BindingBuilder:
        builder = BindingBuilder(parent_type)
        self._builders.append(builder)
        return builder

    def get_bindings(self) -> list[Binding]:
        """Return the declared bindings in declaration order; `configure` runs once."""
        if self._bindings is None:
            self.configure()
            self._bindings = [builder.build() for builder in self._builders]
        return list(self._bindings)
