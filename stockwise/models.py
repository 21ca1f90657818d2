"""Core value types: demand models, inventory events and products."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class DemandModel:
    """Normal demand distribution described by its mean and standard deviation."""

    mean: float
    std_dev: float


class EventType(Enum):
    """Kind of inventory event."""

    SALE = "SALE"
    STOCK_UPDATE = "STOCK_UPDATE"


@dataclass(frozen=True)
class Event:
    """A single inventory event for one product."""

    type: EventType
    product_id: str
    quantity: int
    timestamp: str

    @classmethod
    def sale(cls, product_id: str, quantity: int, timestamp: str) -> Event:
        """Build a sale event."""
        return cls(EventType.SALE, product_id, quantity, timestamp)

    @classmethod
    def stock_update(cls, product_id: str, quantity: int, timestamp: str) -> Event:
        """Build an event that sets the absolute stock level."""
        return cls(EventType.STOCK_UPDATE, product_id, quantity, timestamp)


class ProductType(Enum):
    """Shelf-life class of a product."""

    PERISHABLE = "perishable"
    DURABLE = "durable"


@dataclass(frozen=True)
class Product:
    """Static description of a stocked product."""

    product_id: str
    type: ProductType
    expiry_days: int
    lead_time: int
    safety_stock: int

    def is_perishable(self) -> bool:
        """Return True for perishable products."""
        return self.type is ProductType.PERISHABLE