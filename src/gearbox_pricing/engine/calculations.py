"""
Price calculations - factory, package and market prices.

All functions are pure and never raise: invalid inputs degrade to 0
(or to "no discount" for an invalid discount percentage).
"""
import math
from decimal import Decimal, ROUND_HALF_UP
from numbers import Real
from typing import Optional

from ..config.settings import get_settings, Settings


# 市场加价率：(型号前缀, 型号包含的规格, 加价率)，按顺序匹配
SERIES_MARKUPS = [
    ('HC', ('1000', '1200', '1400'), 1.15),  # 大型HC系列
    ('HC', (), 1.12),
    ('GW', (), 1.15),
    ('DT', (), 1.18),
]

MARKET_FACTORS = ('competition', 'urgency', 'relationship', 'seasonal')


def is_valid_number(value) -> bool:
    """True for finite real numbers; bools and strings are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return False
    return math.isfinite(value)


def round_half_up(value) -> int:
    """Round to the nearest integer, ties away from zero."""
    d = Decimal(str(value))
    return int(d.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_factory_price(base_price, discount_percent) -> int:
    """
    Apply a percentage discount to a list price.

    Args:
        base_price: List price; absent, zero or invalid yields 0
        discount_percent: Discount in percent (16 = 16%); invalid means no discount

    Returns:
        round(base_price × (1 − discount_percent / 100)) as an int
    """
    if not is_valid_number(base_price) or base_price == 0:
        return 0
    if not is_valid_number(discount_percent):
        discount_percent = 0

    return round_half_up(float(base_price) * (1 - float(discount_percent) / 100))


def calculate_package_price(gearbox_price, coupling_price=None, pump_price=None) -> int:
    """Gearbox factory price plus optional coupling and spare pump prices."""
    if not is_valid_number(gearbox_price) or gearbox_price == 0:
        return 0

    package_price = gearbox_price
    for extra in (coupling_price, pump_price):
        if is_valid_number(extra):
            package_price += extra

    return round_half_up(package_price)


def get_series_markup(model: Optional[str], settings: Optional[Settings] = None) -> float:
    """Base market markup for a model's series."""
    settings = settings or get_settings()
    if not model:
        return settings.default_market_markup

    model = str(model)
    for prefix, sizes, markup in SERIES_MARKUPS:
        if not model.startswith(prefix):
            continue
        if sizes and not any(size in model for size in sizes):
            continue
        return markup

    return settings.default_market_markup


def calculate_market_price(
    model: Optional[str],
    package_price,
    market_factors: Optional[dict] = None,
    settings: Optional[Settings] = None
) -> int:
    """
    Market price from a package price and flexible pricing factors.

    The series markup is multiplied by the competition, urgency,
    relationship and seasonal factors (each defaulting to 1.0), then
    clamped to the configured markup floor and ceiling.
    """
    settings = settings or get_settings()
    if not is_valid_number(package_price) or package_price <= 0:
        return 0

    markup = get_series_markup(model, settings)

    market_factors = market_factors or {}
    for name in MARKET_FACTORS:
        factor = market_factors.get(name)
        if is_valid_number(factor) and factor != 0:
            markup *= factor

    safe_markup = max(settings.market_markup_floor, min(settings.market_markup_ceiling, markup))
    return round_half_up(float(package_price) * safe_markup)
