"""Field descriptors an action declares for the host to collect."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FieldKind(Enum):
    """How the host captures a field."""
    INPUT = "input"
    SECRET = "secret"
    STORAGE = "storage"


# Host UI element per kind. The host has no secret widget, so secrets
# are collected with a plain input.
_UI_ELEMENTS = {
    FieldKind.INPUT: "input",
    FieldKind.SECRET: "input",
    FieldKind.STORAGE: "storageInput",
}

SEPARATOR = "-"


@dataclass(frozen=True)
class FieldDescriptor:
    """A single configurable field."""

    store_as: str
    name: str
    kind: FieldKind = FieldKind.INPUT

    def to_ui(self) -> dict[str, Any]:
        """Render as a host UI element."""
        return {
            "element": _UI_ELEMENTS[self.kind],
            "storeAs": self.store_as,
            "name": self.name,
        }


@dataclass(frozen=True)
class ActionMetadata:
    """Display data for an action."""

    name: str


def render_ui(fields: tuple[FieldDescriptor, ...]) -> list[Any]:
    """Render fields in order, with a separator between each pair."""
    ui: list[Any] = []
    for index, descriptor in enumerate(fields):
        if index:
            ui.append(SEPARATOR)
        ui.append(descriptor.to_ui())
    return ui
