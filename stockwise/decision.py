"""Restocking decisions driven by Monte Carlo cost estimates."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from .agent import ProductMetadata
from .classifier import ProductProfile
from .models import DemandModel
from .monte_carlo import estimate_stockout_probability, simulate_cost
from .warehouse import Location, Warehouse, distance_between

_SIMULATIONS = 120
_STOCKOUT_COST = 8.0
_HOLDING_COST = 1.0
_DISTANCE_WEIGHT = 0.35
_RESTOCK_OPTIONS = (10, 20, 50)
_SEARCH_RADII = tuple(float(radius) for radius in range(5, 36, 5))


@dataclass(frozen=True)
class Decision:
    """Recommended action for a product and the figures behind it."""

    action: str
    recommended_quantity: int
    reason: str
    demand_mean: float
    demand_std_dev: float
    stockout_probability: float
    expected_cost_hold: float
    expected_cost_restock: float
    selected_warehouse_id: str | None = None
    estimated_delivery_time: int = 0
    warehouse_distance: float = 0.0


@dataclass(frozen=True)
class _WarehouseChoice:
    warehouse: Warehouse
    quantity: int
    distance: float
    cost: float


def _expected_cost(stock: int, model: DemandModel, rng: random.Random | None) -> float:
    return simulate_cost(stock, model, _SIMULATIONS, _STOCKOUT_COST, _HOLDING_COST, rng)


def _best_restock(
    current_stock: int, model: DemandModel, rng: random.Random | None
) -> tuple[int, float]:
    best_quantity, best_cost = 0, _expected_cost(current_stock, model, rng)
    for quantity in _RESTOCK_OPTIONS:
        cost = _expected_cost(current_stock + quantity, model, rng)
        if cost < best_cost:
            best_quantity, best_cost = quantity, cost
    return best_quantity, best_cost


def _select_best_warehouse(
    product_id: str,
    current_stock: int,
    model: DemandModel,
    user_location: Location,
    warehouses: Sequence[Warehouse],
    rng: random.Random | None,
) -> _WarehouseChoice | None:
    best: _WarehouseChoice | None = None
    for radius in _SEARCH_RADII:
        found_in_radius = False
        for warehouse in warehouses:
            distance = distance_between(user_location, warehouse.location)
            if distance > radius:
                continue
            available = warehouse.stock_by_product.get(product_id, 0)
            if available <= 0:
                continue
            for quantity in _RESTOCK_OPTIONS:
                if available < quantity:
                    continue
                cost = (
                    _expected_cost(current_stock + quantity, model, rng)
                    + distance * _DISTANCE_WEIGHT
                )
                if best is None or cost < best.cost:
                    best = _WarehouseChoice(warehouse, quantity, distance, cost)
                    found_in_radius = True
        if found_in_radius:
            return best
    return best


def decide(
    current_stock: int, model: DemandModel, rng: random.Random | None = None
) -> Decision:
    """Choose between holding and restocking by expected simulated cost."""
    hold_cost = _expected_cost(current_stock, model, rng)
    stockout_probability = estimate_stockout_probability(
        current_stock, model, _SIMULATIONS, rng
    )
    quantity, restock_cost = _best_restock(current_stock, model, rng)

    if quantity == 0 or hold_cost <= restock_cost:
        return Decision(
            action="HOLD",
            recommended_quantity=0,
            reason="hold has the lowest expected Monte Carlo cost",
            demand_mean=model.mean,
            demand_std_dev=model.std_dev,
            stockout_probability=stockout_probability,
            expected_cost_hold=hold_cost,
            expected_cost_restock=restock_cost,
        )

    return Decision(
        action="RESTOCK",
        recommended_quantity=quantity,
        reason="restock lowers expected Monte Carlo cost",
        demand_mean=model.mean,
        demand_std_dev=model.std_dev,
        stockout_probability=stockout_probability,
        expected_cost_hold=hold_cost,
        expected_cost_restock=restock_cost,
    )


def decide_with_supply(
    metadata: ProductMetadata,
    profile: ProductProfile,
    stock: int,
    model: DemandModel,
    user_location: Location,
    warehouses: Sequence[Warehouse],
    rng: random.Random | None = None,
) -> Decision:
    """Decide, and when restocking pays off, pick a warehouse to supply it."""
    base = decide(stock, model, rng)
    if base.action == "HOLD":
        return base

    choice = _select_best_warehouse(
        metadata.product_name, stock, model, user_location, warehouses, rng
    )

    if choice is not None and choice.cost <= base.expected_cost_hold:
        reason = "warehouse transfer minimizes expected Monte Carlo cost"
        if profile.perishable and profile.fast_moving:
            reason += "; perishable + high demand increases stockout risk"
        elif profile.high_delay or profile.fragile_supply:
            reason += "; profile benefits from supply buffer"

        return Decision(
            action="RESTOCK_FROM_WAREHOUSE",
            recommended_quantity=choice.quantity,
            reason=reason,
            demand_mean=model.mean,
            demand_std_dev=model.std_dev,
            stockout_probability=base.stockout_probability,
            expected_cost_hold=base.expected_cost_hold,
            expected_cost_restock=choice.cost,
            selected_warehouse_id=choice.warehouse.id,
            estimated_delivery_time=choice.warehouse.delivery_time,
            warehouse_distance=choice.distance,
        )

    return Decision(
        action="OUT_OF_STOCK_ALERT",
        recommended_quantity=base.recommended_quantity,
        reason=(
            "restock would lower expected cost, but no warehouse can satisfy "
            "the selected quantity"
        ),
        demand_mean=model.mean,
        demand_std_dev=model.std_dev,
        stockout_probability=base.stockout_probability,
        expected_cost_hold=base.expected_cost_hold,
        expected_cost_restock=base.expected_cost_restock,
    )