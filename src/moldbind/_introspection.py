from __future__ import annotations

import inspect
import logging
import typing
from dataclasses import dataclass
from typing import Any, NamedTuple, Protocol, cast, get_type_hints

from ._errors import IntrospectionError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParameterInfo:
    """A named constructor parameter as seen by the resolver.

    Attributes:
        name: Parameter name in the constructor signature.
        declared_type: Class the parameter is annotated with, or None when the
            parameter has no usable class annotation (missing, builtin, union...).
        optional: True when the parameter has a default value.
        keyword_only: True when the parameter can only be passed by keyword.
        annotation_error: Why the parameter's annotation could not be turned
            into a type, when it exists but failed to resolve.
    """

    name: str
    declared_type: type | None
    optional: bool = False
    keyword_only: bool = False
    annotation_error: str | None = None


class Arguments(NamedTuple):
    args: list[Any]
    kwargs: dict[str, Any]


class TypeIntrospector(Protocol):
    def is_instantiable(self, token: Any) -> bool: ...

    def parameters(self, cls: type) -> list[ParameterInfo]: ...


class InspectIntrospector:
    """`TypeIntrospector` built on `inspect` and `typing.get_type_hints`."""

    def is_instantiable(self, token: Any) -> bool:
        if not inspect.isclass(token):
            return False
        return not inspect.isabstract(token) and not _is_protocol(token)

    def parameters(self, cls: type) -> list[ParameterInfo]:
        if cls.__init__ is object.__init__:  # type: ignore[misc]
            return []

        try:
            sig = inspect.signature(cls)
        except (TypeError, ValueError) as e:
            msg = f"Unable to read constructor signature of {cls.__qualname__}: {e}"
            raise IntrospectionError(msg) from e

        hints, missing_name = _get_init_type_hints(cls)

        params = []
        for name, p in sig.parameters.items():
            if p.kind in (p.VAR_POSITIONAL, p.VAR_KEYWORD):
                continue

            annotation_error = None
            if name not in hints and missing_name is not None and isinstance(p.annotation, str):
                annotation_error = (
                    f"annotation {p.annotation!r} could not be resolved: name '{missing_name}' is not defined"
                )

            params.append(
                ParameterInfo(
                    name=name,
                    declared_type=_declared_type(hints.get(name, p.annotation)),
                    optional=p.default is not p.empty,
                    keyword_only=p.kind is p.KEYWORD_ONLY,
                    annotation_error=annotation_error,
                )
            )

        return params


def _declared_type(ann: object) -> type | None:
    if ann is inspect.Parameter.empty:
        return None
    # Builtins such as int or str cannot be bound by type, only by constant args.
    if inspect.isclass(ann) and getattr(ann, "__module__", "") != "builtins":
        return ann
    return None


if hasattr(typing, "is_protocol"):
    # https://docs.python.org/3/library/typing.html#typing.is_protocol
    def _is_protocol(tp: type) -> bool:
        return typing.is_protocol(tp)

else:

    def _is_protocol(tp: type) -> bool:
        return issubclass(tp, cast("type", Protocol)) and bool(getattr(tp, "_is_protocol", False))


def _get_init_type_hints(cls: type) -> tuple[dict[str, Any], str | None]:
    """Return the `__init__` type hints and the name that failed to resolve, if any."""
    try:
        init = inspect.getattr_static(cls, "__init__")
        return get_type_hints(init), None
    except TypeError:
        return {}, None
    except NameError as exc:
        logger.warning("'%s' name error retrieving %s (%s) type hints", exc.name, cls.__name__, cls.__qualname__)
        return {}, exc.name
