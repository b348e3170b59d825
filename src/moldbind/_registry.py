from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ._errors import AmbiguousBindingError


if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ._bindings import Binding


logger = logging.getLogger(__name__)


class BindingRegistry:
    """Ordered store of the bindings owned by one container.

    Bindings are added while the container initializes; afterwards the list is
    only read, so lookups take no lock.
    """

    def __init__(self, bindings: Iterable[Binding] = ()) -> None:
        self._bindings: list[Binding] = []
        for binding in bindings:
            self.add(binding)

    def __iter__(self) -> Iterator[Binding]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def add(self, binding: Binding) -> None:
        """Store `binding` after checking it does not make resolution ambiguous.

        Only one unconstrained binding may exist per parent type. Constrained
        bindings never conflict with anything.
        """
        if not binding.is_constrained:
            for other in self._bindings:
                if other.parent_type == binding.parent_type and not other.is_constrained:
                    msg = f"Multiple unconstrained bindings to type: {_name(binding.parent_type)}"
                    raise AmbiguousBindingError(msg)

        self._bindings.append(binding)
        logger.debug(
            "Registered %s binding for %s (constraint: %s)",
            binding.kind.value,
            _name(binding.parent_type),
            _name(binding.constraint),
        )

    def find_best_match(self, requesting_type: type | None, parent_type: Any) -> Binding | None:
        """Return the binding to use for `parent_type` when requested by `requesting_type`.

        The first binding constrained to `requesting_type` wins outright.
        Otherwise the last registered matching binding is used.
        """
        matched = None
        for binding in self._bindings:
            if binding.parent_type != parent_type:
                continue
            if binding.exactly_matches(requesting_type):
                return binding
            if binding.matches(requesting_type):
                matched = binding

        return matched


def _name(token: Any) -> str:
    return getattr(token, "__qualname__", None) or repr(token)
