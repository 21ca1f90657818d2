import dataclasses

from stockwise.agent import ProductIntelligenceAgent
from stockwise.classifier import classify


def _metadata(name):
    return ProductIntelligenceAgent().get_product_metadata(name)


def test_dairy_is_fast_moving_perishable():
    profile = classify(_metadata("milk"))
    assert profile.perishable and profile.fast_moving
    assert not profile.high_delay and not profile.fragile_supply
    assert profile.prediction_strategy == "short_term_moving_average"
    assert profile.signals == ["fast moving demand", "expiry-sensitive inventory"]


def test_electronics_is_buffered():
    profile = classify(_metadata("laptop"))
    assert profile.high_delay and profile.fragile_supply
    assert not profile.perishable
    assert profile.prediction_strategy == "buffered_forecast"
    assert profile.signals == ["long replenishment delay", "fragile supply chain"]


def test_staples_get_standard_profile():
    profile = classify(_metadata("rice"))
    assert profile.prediction_strategy == "simple_trend"
    assert profile.signals == ["standard replenishment profile"]
    assert profile.safety_stock == 5


def test_semi_perishable_counts_as_perishable():
    profile = classify(_metadata("widget"))
    assert profile.perishable
    assert profile.prediction_strategy == "simple_trend"


def test_risk_factors_raise_safety_stock():
    base = classify(_metadata("rice")).safety_stock
    assert classify(_metadata("milk")).safety_stock > base
    assert classify(_metadata("laptop")).safety_stock > classify(_metadata("detergent")).safety_stock > base


def test_lead_time_boundary():
    metadata = _metadata("rice")
    assert not classify(dataclasses.replace(metadata, lead_time=3)).high_delay
    assert classify(dataclasses.replace(metadata, lead_time=4)).high_delay