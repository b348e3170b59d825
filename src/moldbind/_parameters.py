from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ._errors import UnresolveableClassError
from ._introspection import Arguments


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ._introspection import ParameterInfo
    from ._resolver import Resolver


class ParameterResolver:
    def __init__(self, resolver: Resolver) -> None:
        self._resolver = resolver

    def resolve_all(
        self,
        owning_type: type,
        parameters: Iterable[ParameterInfo],
        constant_overrides: Mapping[str, Any],
    ) -> Arguments:
        """Resolve constructor parameters of `owning_type`, in declaration order.

        Resolution precedence:
        1. constant override by parameter name
        2. optional parameter: omitted from the call
        3. binding matched on the declared type, requested by `owning_type`
        4. error.

        Optional parameters without an override are left out entirely, so
        Python applies the constructor's own default only when no later
        positional value follows them.
        """
        args, kwargs = [], {}

        for param in parameters:
            if param.name in constant_overrides:
                value = constant_overrides[param.name]
            elif param.optional:
                continue
            else:
                value = self.resolve_one(owning_type, param)

            if param.keyword_only:
                kwargs[param.name] = value
            else:
                args.append(value)

        return Arguments(args, kwargs)

    def resolve_one(self, owning_type: type, param: ParameterInfo) -> Any:
        if param.declared_type is None:
            if param.annotation_error is not None:
                msg = f"Constructor parameter '{param.name}' has an unresolvable type: {param.annotation_error}"
                raise UnresolveableClassError(owning_type, msg)
            msg = f"There is no defined parameter type or default value for constructor parameter: {param.name}"
            raise UnresolveableClassError(owning_type, msg)

        binding = self._resolver.registry.find_best_match(owning_type, param.declared_type)
        if binding is None:
            msg = (
                f"Could not find a suitable binding for constructor parameter "
                f"'{param.name}' ({param.declared_type.__qualname__})"
            )
            raise UnresolveableClassError(owning_type, msg)

        return self._resolver.resolve_binding(binding)
