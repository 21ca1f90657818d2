# stockwise

An inventory intelligence engine. It turns a stream of sale and stock-update
events into per-product state. That state holds the current stock, a sliding
window of recent sales and an exponentially weighted demand model. From that
state it decides what to do for each product:

- hold,
- restock,
- pull stock from a nearby warehouse, or
- raise an out-of-stock alert.

## Modules

- `stockwise.models`: value types.
  - `DemandModel` holds a mean and a standard deviation.
  - `Event` is built with `Event.sale` or `Event.stock_update`, and its kind is an `EventType`.
  - `Product` is described by a `ProductType`.
- `stockwise.agent`: `ProductIntelligenceAgent.get_product_metadata` infers a
  `ProductMetadata` from a product name. Inferred fields include the
  category, perishability, expiry, lead time and storage constraints.
  - The name is first passed through `normalize`, which lower-cases it and
    collapses punctuation into single spaces.
  - Inference is rule based on keywords, and results are cached per
    normalized name.
- `stockwise.classifier`: `classify` turns metadata into a `ProductProfile`.
  - The profile has four flags: fast moving, perishable, high delay and
    fragile supply.
  - It also holds a safety stock, a prediction strategy and a list of signals
    that explain the profile.
- `stockwise.predictor`: `Predictor.estimate_demand` forecasts demand over the
  lead time from recent sales. It returns a `Prediction` that holds the demand
  and the strategy used.
  - Every strategy multiplies the average sale by the lead time.
  - `buffered_forecast` then adds 25%.
  - `simple_trend` then adds half of any rise between the last two sales.
- `stockwise.monte_carlo`: samples normally distributed demand, clamped at
  zero.
  - `sample_demand` draws one value.
  - `simulate_cost` gives the average cost of stockouts and excess holding.
  - `estimate_stockout_probability` gives the share of draws that exceed the
    stock.
  - Each function raises `ValueError` if the simulation count is not positive.
- `stockwise.store`: `StateStore` keeps in-memory state for each product:
  - stock, clamped at zero;
  - a sliding window of recent sales, 5 by default;
  - a demand model with an exponentially weighted mean and variance, using
    alpha 0.35 and a minimum standard deviation of 0.25.
- `stockwise.processor`: `Processor.process` applies an event to a
  `StateStore`. It returns `False` for events with an empty product id or a
  negative quantity.
- `stockwise.warehouse`: the supply-side types and helpers.
  - `Location`, `Warehouse` and `WarehouseCandidate` are the data types.
  - `distance_between` measures the distance between two locations.
  - `find_nearby_warehouses` returns the warehouses within a radius.
  - `find_progressively_nearby_warehouses` widens the radius step by step
    until it finds a warehouse.
  - `has_sufficient_stock` checks a warehouse's stock of a product.
  - `select_optimal_warehouse` returns the fastest-delivering candidate that
    has enough stock, with the nearest winning a tie, or `None`.
  - `simulated_warehouses` returns a fixed demonstration network.
- `stockwise.events`: `EventListener.simulated_events` returns a fixed
  demonstration sequence of events.
- `stockwise.decision`: turns a demand model into a `Decision`, which records
  the action and the figures behind it. Each cost estimate uses 120
  simulations.
  - `decide` compares holding with restocking 10, 20 or 50 units and returns
    either `HOLD` or `RESTOCK`.
  - `decide_with_supply` goes further when restocking pays off. It searches
    warehouses at radii 5, 10, …, 35 around the user and charges each
    candidate 0.35 per unit of distance. It returns `RESTOCK_FROM_WAREHOUSE`
    along with the chosen warehouse, its delivery time and its distance. If
    no warehouse can cover the need, it returns `OUT_OF_STOCK_ALERT`.

## Installation

```
pip install .
```

## Command line

```
stockwise
stockwise --seed 42
```

The command replays the simulated events against the simulated warehouses.

- It prints a line for each event.
- For each accepted sale it also prints a decision line.
- It ends with a high-variance demand scenario that compares a naive
  stock-versus-mean rule with the Monte Carlo decision.

`--seed` makes the simulations repeatable.

## Library use

```python
import random

from stockwise.agent import ProductIntelligenceAgent
from stockwise.classifier import classify
from stockwise.decision import decide, decide_with_supply
from stockwise.models import DemandModel, Event
from stockwise.processor import Processor
from stockwise.store import StateStore
from stockwise.warehouse import Location, simulated_warehouses

rng = random.Random(7)

state = StateStore(5)
processor = Processor(state)
processor.process(Event.stock_update("milk", 35, "2026-04-28T09:00:00+05:30"))
processor.process(Event.sale("milk", 12, "2026-04-28T09:05:00+05:30"))

agent = ProductIntelligenceAgent()
metadata = agent.get_product_metadata("milk")
profile = classify(metadata)

decision = decide_with_supply(
    metadata,
    profile,
    state.get_stock("milk"),
    state.get_demand_model("milk"),
    Location(4.0, 5.0),
    simulated_warehouses(),
    rng,
)
print(decision.action, decision.recommended_quantity, decision.selected_warehouse_id)

print(decide(22, DemandModel(20.0, 14.0), rng).action)
```

Pass your own `random.Random` to get repeatable simulations.

## What it does not do

- **No persistence.** `StateStore` keeps all state in memory only. Nothing is
  saved between runs, and no database or cache server is used.
- **No live event source.** `EventListener` supplies only a fixed
  demonstration sequence.
- **No real warehouse data.** `simulated_warehouses` is a fixed demonstration
  network. Nothing reads warehouse data from a file or a service.
- **No shipping.** Decisions are reported but never acted on: no order or
  transfer is placed.