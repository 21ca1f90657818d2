"""Warehouses, distances and selection of a supplying warehouse."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Location:
    """A point on the planar delivery map."""

    x: float
    y: float


@dataclass
class Warehouse:
    """A stocked warehouse and its delivery time in days."""

    id: str
    location: Location
    stock_by_product: dict[str, int] = field(default_factory=dict)
    delivery_time: int = 0


@dataclass(frozen=True)
class WarehouseCandidate:
    """A warehouse paired with its distance from the customer."""

    warehouse: Warehouse
    distance: float


def distance_between(first: Location, second: Location) -> float:
    """Euclidean distance between two locations."""
    return math.hypot(first.x - second.x, first.y - second.y)


def find_nearby_warehouses(
    user_location: Location, warehouses: Iterable[Warehouse], radius: float
) -> list[WarehouseCandidate]:
    """Warehouses within `radius` of the user, in input order."""
    candidates = (
        WarehouseCandidate(warehouse, distance_between(user_location, warehouse.location))
        for warehouse in warehouses
    )
    return [candidate for candidate in candidates if candidate.distance <= radius]


def find_progressively_nearby_warehouses(
    user_location: Location,
    warehouses: Sequence[Warehouse],
    initial_radius: float,
    radius_step: float,
    max_radius: float,
) -> list[WarehouseCandidate]:
    """Widen the search radius step by step until some warehouse is found."""
    if radius_step <= 0:
        raise ValueError(f"radius_step must be positive, got {radius_step}")
    radius = initial_radius
    while radius <= max_radius:
        nearby = find_nearby_warehouses(user_location, warehouses, radius)
        if nearby:
            return nearby
        radius += radius_step
    return []


def has_sufficient_stock(warehouse: Warehouse, product_id: str, required_quantity: int) -> bool:
    """True when the warehouse holds at least `required_quantity` of the product."""
    stock = warehouse.stock_by_product.get(product_id)
    return stock is not None and stock >= required_quantity


def select_optimal_warehouse(
    product_id: str, required_quantity: int, candidates: Iterable[WarehouseCandidate]
) -> WarehouseCandidate | None:
    """Fastest-delivering stocked candidate, nearest on ties; None if none qualify."""
    eligible = [
        candidate
        for candidate in candidates
        if has_sufficient_stock(candidate.warehouse, product_id, required_quantity)
    ]
    if not eligible:
        return None
    return min(eligible, key=lambda c: (c.warehouse.delivery_time, c.distance))


def simulated_warehouses() -> list[Warehouse]:
    """The fixed demonstration network of warehouses."""
    return [
        Warehouse(
            "warehouse_north",
            Location(2.0, 4.0),
            {"milk": 40, "rice": 30, "bread": 25, "detergent": 20},
            1,
        ),
        Warehouse(
            "warehouse_central",
            Location(7.0, 8.0),
            {"milk": 8, "rice": 80, "laptop": 10, "detergent": 50},
            2,
        ),
        Warehouse(
            "warehouse_east",
            Location(16.0, 6.0),
            {"laptop": 20, "phone": 30, "tablet": 18, "rice": 45},
            4,
        ),
        Warehouse(
            "warehouse_far",
            Location(26.0, 22.0),
            {"general item": 50, "tomato": 35, "apple": 30, "headphone": 15},
            7,
        ),
    ]