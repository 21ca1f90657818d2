"""In-memory state: stock levels, recent sales and demand models."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import replace

from .models import DemandModel

_DEMAND_ALPHA = 0.35
_STD_DEV_EPSILON = 0.25


class StateStore:
    """Per-product stock, sliding sales window and smoothed demand model."""

    def __init__(self, sales_window: int = 5) -> None:
        self._sales_window = max(1, sales_window)
        self._stock: dict[str, int] = {}
        self._sales: dict[str, deque[int]] = {}
        self._models: dict[str, DemandModel] = {}

    def set_stock(self, product_id: str, stock: int) -> None:
        """Set the stock level, clamped at zero."""
        self._stock[product_id] = max(0, stock)

    def get_stock(self, product_id: str) -> int:
        """Return the stock level, zero for unknown products."""
        return self._stock.get(product_id, 0)

    def record_sale(self, product_id: str, quantity: int) -> None:
        """Append a sale to the product's window, dropping the oldest beyond its size."""
        sales = self._sales.setdefault(product_id, deque(maxlen=self._sales_window))
        sales.append(max(0, quantity))

    def recent_sales(self, product_id: str) -> list[int]:
        """Return recent sales, oldest first."""
        return list(self._sales.get(product_id, ()))

    def get_demand_model(self, product_id: str) -> DemandModel:
        """Return the product's demand model, or a near-zero default."""
        return self._models.get(product_id, DemandModel(0.0, _STD_DEV_EPSILON))

    def update_demand_model(self, product_id: str, sale_quantity: int) -> None:
        """Fold a sale into the exponentially weighted mean and variance."""
        sale = float(max(0, sale_quantity))
        model = self._models.get(product_id)
        if model is None:
            self._models[product_id] = DemandModel(sale, max(_STD_DEV_EPSILON, sale * 0.25))
            return

        delta = sale - model.mean
        mean = _DEMAND_ALPHA * sale + (1.0 - _DEMAND_ALPHA) * model.mean
        variance = (1.0 - _DEMAND_ALPHA) * (model.std_dev ** 2 + _DEMAND_ALPHA * delta * delta)
        std_dev = max(_STD_DEV_EPSILON, math.sqrt(max(0.0, variance)))
        self._models[product_id] = DemandModel(mean, std_dev)

    def set_demand_model(self, product_id: str, model: DemandModel) -> None:
        """Store a demand model, raising its spread to the minimum if needed."""
        self._models[product_id] = replace(model, std_dev=max(_STD_DEV_EPSILON, model.std_dev))