"""
Gearbox Pricing Package

Static 2024 gearbox price list with discount-rate rules.
Resolves factory prices using List Price → Discount Rate → Factory Price.
"""

__version__ = "1.0.0"

from .engine.calculations import compute_factory_price
from .engine.pricing_catalog import (
    DEFAULT_CATALOG,
    DEFAULT_RULES,
    PRICE_RECORDS,
    PRICED_CATALOG,
    lookup_base_price,
    resolve_discount_rate,
)

__all__ = [
    'DEFAULT_CATALOG',
    'DEFAULT_RULES',
    'PRICE_RECORDS',
    'PRICED_CATALOG',
    'compute_factory_price',
    'lookup_base_price',
    'resolve_discount_rate',
]
