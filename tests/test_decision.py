import random

import pytest

from stockwise.agent import ProductIntelligenceAgent
from stockwise.classifier import classify
from stockwise.decision import decide, decide_with_supply
from stockwise.models import DemandModel
from stockwise.warehouse import Location, Warehouse, distance_between, simulated_warehouses

USER = Location(4.0, 5.0)


def _inputs(name):
    metadata = ProductIntelligenceAgent().get_product_metadata(name)
    return metadata, classify(metadata)


def test_plentiful_stock_holds():
    decision = decide(100, DemandModel(10.0, 0.25), random.Random(1))
    assert decision.action == "HOLD"
    assert decision.recommended_quantity == 0
    assert decision.selected_warehouse_id is None
    assert decision.reason == "hold has the lowest expected Monte Carlo cost"


def test_empty_shelf_restocks_matching_quantity():
    decision = decide(0, DemandModel(20.0, 0.25), random.Random(2))
    assert decision.action == "RESTOCK"
    assert decision.recommended_quantity == 20
    assert decision.expected_cost_restock < decision.expected_cost_hold


def test_large_demand_picks_largest_option():
    decision = decide(0, DemandModel(45.0, 0.25), random.Random(3))
    assert decision.action == "RESTOCK"
    assert decision.recommended_quantity == 50


def test_decision_carries_model_and_valid_probability():
    model = DemandModel(20.0, 14.0)
    decision = decide(22, model, random.Random(4))
    assert decision.demand_mean == model.mean
    assert decision.demand_std_dev == model.std_dev
    assert 0.0 <= decision.stockout_probability <= 1.0
    assert decision.expected_cost_hold >= 0.0


def test_same_seed_same_decision():
    model = DemandModel(20.0, 14.0)
    first = decide(22, model, random.Random(9))
    second = decide(22, model, random.Random(9))
    assert first.action in ("HOLD", "RESTOCK")
    assert second.action == first.action
    assert second.recommended_quantity == first.recommended_quantity
    assert second.stockout_probability == pytest.approx(first.stockout_probability)
    assert second.expected_cost_hold == pytest.approx(first.expected_cost_hold)
    assert second.expected_cost_restock == pytest.approx(first.expected_cost_restock)


def test_hold_passes_through_with_supply():
    metadata, profile = _inputs("milk")
    decision = decide_with_supply(
        metadata, profile, 100, DemandModel(10.0, 0.25), USER, simulated_warehouses(), random.Random(5)
    )
    assert decision.action == "HOLD"
    assert decision.selected_warehouse_id is None


def test_restock_from_nearest_warehouse():
    metadata, profile = _inputs("milk")
    warehouses = simulated_warehouses()
    decision = decide_with_supply(
        metadata, profile, 0, DemandModel(20.0, 0.25), USER, warehouses, random.Random(6)
    )
    assert decision.action == "RESTOCK_FROM_WAREHOUSE"
    assert decision.selected_warehouse_id == "warehouse_north"
    assert decision.recommended_quantity == 20
    assert decision.estimated_delivery_time == warehouses[0].delivery_time
    assert decision.warehouse_distance == pytest.approx(
        distance_between(USER, warehouses[0].location)
    )
    assert decision.reason.endswith("; perishable + high demand increases stockout risk")


def test_far_warehouse_found_by_widening_radius():
    metadata, profile = _inputs("tomato")
    warehouses = simulated_warehouses()
    decision = decide_with_supply(
        metadata, profile, 0, DemandModel(20.0, 0.25), USER, warehouses, random.Random(7)
    )
    assert decision.action == "RESTOCK_FROM_WAREHOUSE"
    assert decision.selected_warehouse_id == "warehouse_far"
    assert decision.warehouse_distance == pytest.approx(
        distance_between(USER, warehouses[3].location)
    )


def test_limited_warehouse_stock_restricts_quantity():
    metadata, profile = _inputs("milk")
    warehouses = [Warehouse("small", Location(4.0, 6.0), {"milk": 15}, 2)]
    decision = decide_with_supply(
        metadata, profile, 0, DemandModel(20.0, 0.25), USER, warehouses, random.Random(8)
    )
    assert decision.action == "RESTOCK_FROM_WAREHOUSE"
    assert decision.recommended_quantity == 10
    assert decision.selected_warehouse_id == "small"


def test_supply_buffer_reason_for_slow_products():
    metadata, profile = _inputs("laptop")
    warehouses = [Warehouse("depot", Location(4.0, 6.0), {"laptop": 100}, 3)]
    decision = decide_with_supply(
        metadata, profile, 0, DemandModel(20.0, 0.25), USER, warehouses, random.Random(10)
    )
    assert decision.action == "RESTOCK_FROM_WAREHOUSE"
    assert decision.reason.endswith("; profile benefits from supply buffer")


@pytest.mark.parametrize(
    "warehouses",
    [
        [],
        [Warehouse("empty", Location(4.0, 6.0), {"milk": 0}, 1)],
        [Warehouse("remote", Location(100.0, 100.0), {"milk": 500}, 1)],
    ],
)
def test_no_usable_warehouse_raises_alert(warehouses):
    metadata, profile = _inputs("milk")
    decision = decide_with_supply(
        metadata, profile, 0, DemandModel(20.0, 0.25), USER, warehouses, random.Random(11)
    )
    assert decision.action == "OUT_OF_STOCK_ALERT"
    assert decision.recommended_quantity == 20
    assert decision.selected_warehouse_id is None
    assert decision.expected_cost_restock < decision.expected_cost_hold