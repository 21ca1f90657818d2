"""Command-line demonstration of the inventory decision pipeline."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from .agent import ProductIntelligenceAgent
from .classifier import classify
from .decision import decide, decide_with_supply
from .events import EventListener
from .models import DemandModel, EventType
from .predictor import Predictor
from .processor import Processor
from .store import StateStore
from .warehouse import Location, simulated_warehouses


def log_info(message: str) -> None:
    """Print an informational message."""
    print(f"[info] {message}")


def _num(value: float) -> str:
    return f"{value:g}"


def run_monte_carlo_demo(rng: random.Random | None = None) -> None:
    """Compare a naive rule with the Monte Carlo decision under volatile demand."""
    model = DemandModel(20.0, 14.0)
    stock = 22
    decision = decide(stock, model, rng)
    naive = "HOLD" if stock >= int(model.mean) else "RESTOCK"

    print()
    print("[demo] high variance demand scenario")
    print(
        f"  stock={stock}"
        f" mean={_num(model.mean)}"
        f" std_dev={_num(model.std_dev)}"
        f" naive_decision={naive}"
        f" monte_carlo_decision={decision.action}"
        f" stockout_probability={_num(decision.stockout_probability)}"
        f" hold_cost={_num(decision.expected_cost_hold)}"
        f" restock_cost={_num(decision.expected_cost_restock)}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulated event stream through the pipeline and print decisions."""
    parser = argparse.ArgumentParser(prog="stockwise", description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for the simulations")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    state = StateStore()
    processor = Processor(state)
    predictor = Predictor()
    agent = ProductIntelligenceAgent()
    user_location = Location(4.0, 5.0)
    warehouses = simulated_warehouses()

    log_info("Inventory Intelligence System v2 started")

    for event in EventListener().simulated_events():
        accepted = processor.process(event)
        print(
            f"event={event.type.value}"
            f" product={event.product_id}"
            f" quantity={event.quantity}"
            f" accepted={'true' if accepted else 'false'}"
        )
        if not accepted or event.type is not EventType.SALE:
            continue

        metadata = agent.get_product_metadata(event.product_id)
        profile = classify(metadata)
        stock = state.get_stock(event.product_id)
        model = state.get_demand_model(event.product_id)
        prediction = predictor.estimate_demand(
            state.recent_sales(event.product_id), metadata, profile
        )
        decision = decide_with_supply(
            metadata, profile, stock, model, user_location, warehouses, rng
        )

        print(
            f"  product_id={metadata.product_name}"
            f" stock={stock}"
            f" category={metadata.category}"
            f" type={metadata.type}"
            f" strategy={prediction.strategy}"
            f" predicted_mean={_num(decision.demand_mean)}"
            f" predicted_std_dev={_num(decision.demand_std_dev)}"
            f" stockout_probability={_num(decision.stockout_probability)}"
            f" hold_cost={_num(decision.expected_cost_hold)}"
            f" restock_cost={_num(decision.expected_cost_restock)}"
            f" action={decision.action}"
            f" reorder_qty={decision.recommended_quantity}"
            f" warehouse={decision.selected_warehouse_id or 'none'}"
            f" eta_days={decision.estimated_delivery_time}"
            f" warehouse_distance={_num(decision.warehouse_distance)}"
            f' reason="{decision.reason}"'
        )

    run_monte_carlo_demo(rng)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())