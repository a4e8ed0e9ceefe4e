"""Resolve which form container a widget belongs to."""

from __future__ import annotations

from typing import Protocol

CONTAINER_PROPERTY = "containerId"


class ContainerWidget(Protocol):
    def property(self, name: str) -> object: ...

    def parentWidget(self) -> ContainerWidget | None: ...


def nearest_container_id(widget: ContainerWidget | None) -> str | None:
    """Walk up from ``widget`` to the first ancestor tagged with a container id.

    The drop area and every row frame carry ``CONTAINER_PROPERTY``; any
    other widget under the cursor resolves to whichever of those encloses it.
    """
    current = widget
    while current is not None:
        value = current.property(CONTAINER_PROPERTY)
        if value:
            return str(value)
        current = current.parentWidget()
    return None
