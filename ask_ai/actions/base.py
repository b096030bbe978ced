"""Base class for host-invokable actions."""

from typing import Any, Mapping

from ask_ai.actions.fields import ActionMetadata, FieldDescriptor, render_ui
from ask_ai.bridge import Bridge
from ask_ai.exceptions import MissingFieldError


class Action:
    """
    An operation the host can configure and invoke.

    Subclasses declare ``data`` and ``fields`` and implement ``run``.
    """

    data: ActionMetadata
    fields: tuple[FieldDescriptor, ...] = ()

    @property
    def name(self) -> str:
        return self.data.name

    @property
    def UI(self) -> list[Any]:
        """Field list in the host's UI format."""
        return render_ui(self.fields)

    def field(self, store_as: str) -> FieldDescriptor:
        """Get a declared field by its storage key."""
        for descriptor in self.fields:
            if descriptor.store_as == store_as:
                return descriptor
        raise KeyError(store_as)

    def raw_value(self, values: Mapping[str, Any], store_as: str) -> Any:
        """
        Get a field's raw value as collected by the host.

        Raises:
            MissingFieldError: If the host did not supply the field.
        """
        try:
            return values[store_as]
        except KeyError:
            raise MissingFieldError(
                f"Missing field: {self.field(store_as).name}",
                action=self.name,
                field=store_as,
            ) from None

    async def run(self, values: Mapping[str, Any], bridge: Bridge) -> None:
        raise NotImplementedError
