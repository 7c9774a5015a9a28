"""
Variable environment for the letcalc evaluator.

An Environment is an explicit object owned by whoever runs statements
(usually a CalcSession), never module-global state, so independent sessions
do not see each other's bindings.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

logger = logging.getLogger(__name__)


class Environment:
    """Mutable mapping of variable name -> numeric value."""

    def __init__(self, bindings: Mapping[str, float] | None = None) -> None:
        self._bindings: dict[str, float] = {}
        if bindings:
            for name, value in bindings.items():
                self.bind(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __repr__(self) -> str:
        return f"Environment({self._bindings!r})"

    def get(self, name: str) -> float | None:
        """Return the value bound to ``name``, or None when unbound."""
        return self._bindings.get(name)

    def bind(self, name: str, value: float) -> None:
        """Bind ``name`` to ``value``, overwriting any previous binding."""
        value = float(value)
        if name in self._bindings:
            logger.debug("Rebinding %s = %r (was %r)", name, value, self._bindings[name])
        else:
            logger.debug("Binding %s = %r", name, value)
        self._bindings[name] = value

    def items(self) -> list[tuple[str, float]]:
        """Bindings sorted by name."""
        return sorted(self._bindings.items())

    def snapshot(self) -> dict[str, float]:
        """A copy of the current bindings."""
        return dict(self._bindings)

    def clear(self) -> None:
        self._bindings.clear()
