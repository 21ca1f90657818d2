"""Lead-time demand forecasting from recent sales."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .agent import ProductMetadata
from .classifier import ProductProfile


@dataclass(frozen=True)
class Prediction:
    """Forecast demand over the lead time and the strategy used."""

    demand: float
    strategy: str


class Predictor:
    """Turns recent sales into a lead-time demand forecast."""

    def estimate_demand(
        self,
        recent_sales: Sequence[int],
        metadata: ProductMetadata,
        profile: ProductProfile,
    ) -> Prediction:
        """Forecast demand according to the profile's strategy."""
        strategy = profile.prediction_strategy
        if not recent_sales:
            return Prediction(0.0, strategy)

        average = sum(recent_sales) / len(recent_sales)
        demand = average * metadata.lead_time

        if strategy == "buffered_forecast":
            demand *= 1.25
        elif strategy == "simple_trend" and len(recent_sales) >= 2:
            *_, previous, last = recent_sales
            demand += max(0, last - previous) * 0.5

        return Prediction(demand, strategy)