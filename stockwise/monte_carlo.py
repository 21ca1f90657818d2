"""Monte Carlo estimates of inventory cost and stockout risk."""

from __future__ import annotations

import random

from .models import DemandModel

_default_rng = random.Random()


def sample_demand(model: DemandModel, rng: random.Random | None = None) -> float:
    """Draw one non-negative demand value from the model's normal distribution."""
    generator = rng if rng is not None else _default_rng
    return max(0.0, generator.gauss(model.mean, model.std_dev))


def _check_simulations(simulations: int) -> None:
    if simulations <= 0:
        raise ValueError(f"simulations must be positive, got {simulations}")


def simulate_cost(
    stock: int,
    model: DemandModel,
    simulations: int,
    stockout_cost: float,
    holding_cost: float,
    rng: random.Random | None = None,
) -> float:
    """Average cost of holding `stock` against simulated demand."""
    _check_simulations(simulations)
    total = 0.0
    for _ in range(simulations):
        demand = sample_demand(model, rng)
        shortfall = max(0.0, demand - stock)
        excess = max(0.0, stock - demand)
        total += stockout_cost * shortfall + holding_cost * excess
    return total / simulations


def estimate_stockout_probability(
    stock: int,
    model: DemandModel,
    simulations: int,
    rng: random.Random | None = None,
) -> float:
    """Fraction of simulated demands that exceed `stock`."""
    _check_simulations(simulations)
    stockouts = sum(1 for _ in range(simulations) if sample_demand(model, rng) > stock)
    return stockouts / simulations