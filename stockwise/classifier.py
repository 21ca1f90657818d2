"""Derives a replenishment profile from product metadata."""

from __future__ import annotations

from dataclasses import dataclass, field

from .agent import ProductMetadata

_BASE_SAFETY_STOCK = 5


@dataclass
class ProductProfile:
    """Demand and supply characteristics that drive forecasting."""

    fast_moving: bool = False
    high_delay: bool = False
    perishable: bool = False
    fragile_supply: bool = False
    safety_stock: int = 0
    prediction_strategy: str = ""
    signals: list[str] = field(default_factory=list)


def classify(metadata: ProductMetadata) -> ProductProfile:
    """Build the profile for a product."""
    perishable = metadata.type in ("perishable", "semi-perishable")
    fast_moving = metadata.demand_pattern == "high_frequency"
    high_delay = metadata.lead_time > 3
    fragile_supply = metadata.supply_chain_complexity == "high"

    safety_stock = _BASE_SAFETY_STOCK
    signals: list[str] = []
    if fast_moving:
        safety_stock += 4
        signals.append("fast moving demand")
    if perishable:
        signals.append("expiry-sensitive inventory")
    if high_delay:
        safety_stock += 6
        signals.append("long replenishment delay")
    if fragile_supply:
        safety_stock += 5
        signals.append("fragile supply chain")

    if fast_moving and perishable:
        strategy = "short_term_moving_average"
    elif high_delay:
        strategy = "buffered_forecast"
    else:
        strategy = "simple_trend"

    if not signals:
        signals.append("standard replenishment profile")

    return ProductProfile(
        fast_moving=fast_moving,
        high_delay=high_delay,
        perishable=perishable,
        fragile_supply=fragile_supply,
        safety_stock=safety_stock,
        prediction_strategy=strategy,
        signals=signals,
    )