"""Applies inventory events to the state store."""

from __future__ import annotations

from .models import Event, EventType
from .store import StateStore


class Processor:
    """Validates events and updates stock, sales and demand state."""

    def __init__(self, state: StateStore) -> None:
        self._state = state

    def process(self, event: Event) -> bool:
        """Apply an event; return False when the event is rejected as invalid."""
        if not event.product_id or event.quantity < 0:
            return False

        if event.type is EventType.STOCK_UPDATE:
            self._state.set_stock(event.product_id, event.quantity)
            return True

        current = self._state.get_stock(event.product_id)
        self._state.set_stock(event.product_id, max(0, current - event.quantity))
        self._state.record_sale(event.product_id, event.quantity)
        self._state.update_demand_model(event.product_id, event.quantity)
        return True