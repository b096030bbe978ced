"""
Host bridges.

An action never talks to the host directly. It receives a bridge exposing
two functions: ``transf`` turns a raw field value into its runtime value
(variable interpolation and the like), ``store`` writes a value into a
host-managed variable.
"""

from string import Template
from typing import Any, Callable, Protocol


class Bridge(Protocol):
    """What an action needs from the host."""

    def transf(self, value: Any) -> Any:
        ...

    def store(self, destination: Any, value: Any) -> None:
        ...


class CallableBridge:
    """
    Bridge built from two injected host functions.

    Args:
        transf: Resolves a raw field value.
        store: Persists ``value`` under ``destination``.
    """

    def __init__(
        self,
        transf: Callable[[Any], Any],
        store: Callable[[Any, Any], None],
    ):
        self._transf = transf
        self._store = store

    def transf(self, value: Any) -> Any:
        return self._transf(value)

    def store(self, destination: Any, value: Any) -> None:
        self._store(destination, value)


class MemoryBridge:
    """
    In-process bridge backed by a plain dict of variables.

    ``transf`` substitutes ``${name}`` placeholders in strings; unknown
    placeholders are left untouched and non-strings pass through.
    ``store`` accepts a variable name or a host storage mapping such as
    ``{"type": "temporary", "value": "answer"}``.

    Args:
        variables: Initial variables.
    """

    def __init__(self, variables: dict[str, Any] | None = None):
        self.variables: dict[str, Any] = dict(variables or {})
        self.stored: list[tuple[Any, Any]] = []

    def transf(self, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        return Template(value).safe_substitute(
            {k: str(v) for k, v in self.variables.items()}
        )

    def store(self, destination: Any, value: Any) -> None:
        self.stored.append((destination, value))
        self.variables[self.variable_name(destination)] = value

    @staticmethod
    def variable_name(destination: Any) -> str:
        """Get the variable name a destination points at."""
        if isinstance(destination, dict):
            return str(destination["value"])
        return str(destination)
