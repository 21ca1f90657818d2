"""Rule-based inference of product metadata from product names."""

from __future__ import annotations

import string
from dataclasses import dataclass

_ALNUM = frozenset(string.ascii_letters + string.digits)


@dataclass(frozen=True)
class ProductMetadata:
    """Inferred attributes of a product."""

    product_name: str
    category: str
    type: str
    expiry_days: int
    demand_pattern: str
    supply_chain_complexity: str
    lead_time: int
    storage_constraints: tuple[str, ...]
    price_sensitivity: str


def normalize(value: str) -> str:
    """Lower-case ASCII alphanumerics, collapsing every other run into one space."""
    parts: list[str] = []
    for character in value:
        if character in _ALNUM:
            parts.append(character.lower())
        elif parts and parts[-1] != " ":
            parts.append(" ")
    return "".join(parts).rstrip(" ")


# (keywords, category, type, expiry_days, demand_pattern, complexity, lead_time, storage, price)
_RULES: tuple[tuple[tuple[str, ...], str, str, int, str, str, int, tuple[str, ...], str], ...] = (
    (("milk", "yogurt", "curd", "cheese", "paneer"),
     "dairy", "perishable", 3, "high_frequency", "low", 1, ("refrigeration",), "low"),
    (("bread", "bun", "cake", "pastry"),
     "bakery", "perishable", 2, "high_frequency", "low", 1, ("cool_dry_storage",), "medium"),
    (("rice", "wheat", "flour", "lentil", "dal", "pasta"),
     "staples", "durable", 365, "medium", "medium", 3, ("dry_storage",), "medium"),
    (("phone", "laptop", "tablet", "charger", "headphone"),
     "electronics", "durable", 1095, "low_frequency", "high", 7,
     ("shock_protection", "dry_storage"), "high"),
    (("detergent", "soap", "cleaner", "shampoo"),
     "household", "durable", 730, "medium", "medium", 5, ("dry_storage",), "medium"),
    (("tomato", "apple", "banana", "onion", "potato", "vegetable", "fruit"),
     "produce", "perishable", 5, "high_frequency", "medium", 2, ("temperature_control",), "medium"),
)

_FALLBACK = ("general", "semi-perishable", 90, "medium", "medium", 3, ("standard_storage",), "medium")


def _infer_metadata(product_name: str) -> ProductMetadata:
    for keywords, *attributes in _RULES:
        if any(keyword in product_name for keyword in keywords):
            return ProductMetadata(product_name, *attributes)
    return ProductMetadata(product_name, *_FALLBACK)


class ProductIntelligenceAgent:
    """Infers and caches product metadata keyed by normalized name."""

    def __init__(self) -> None:
        self._cache: dict[str, ProductMetadata] = {}

    def get_product_metadata(self, product_name: str) -> ProductMetadata:
        """Return metadata for a product, inferring it on first request."""
        key = normalize(product_name)
        metadata = self._cache.get(key)
        if metadata is None:
            metadata = self._cache[key] = _infer_metadata(key)
        return metadata