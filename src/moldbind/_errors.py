from __future__ import annotations

from typing import Any


class ContainerError(Exception):
    pass


class AmbiguousBindingError(ContainerError):
    """Raised when a second unconstrained binding is added for a parent type."""


class InvalidModuleError(ContainerError, TypeError):
    """Raised when a container registers something that is not a usable module."""


class IntrospectionError(ContainerError):
    """Raised by an introspector that cannot read a constructor."""


class UnresolveableClassError(ContainerError, RuntimeError):
    """Raised when a type, or one of its constructor parameters, cannot be satisfied."""

    def __init__(self, token: Any, reason: str | None = None) -> None:
        self.token = token
        self.reason = reason
        name = getattr(token, "__qualname__", None) or repr(token)
        msg = f"Cannot resolve {name}" if reason is None else f"Cannot resolve {name}: {reason}"
        super().__init__(msg)
