import pytest
import sys
import os
from decimal import Decimal

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from gearbox_pricing import compute_factory_price
from gearbox_pricing.config.settings import Settings
from gearbox_pricing.engine.calculations import (
    calculate_market_price,
    calculate_package_price,
    get_series_markup,
    is_valid_number,
    round_half_up,
)


def test_factory_price_rounds_to_nearest():
    """8560 × 0.84 = 7190.4 → 7190."""
    assert compute_factory_price(8560, 16) == 7190
    assert compute_factory_price(12520, 12) == 11018
    assert compute_factory_price(137200, 8) == 126224


def test_factory_price_returns_int():
    assert isinstance(compute_factory_price(8560, 16), int)


@pytest.mark.parametrize("base_price", [None, 0, 0.0, "1000", float('nan'), float('inf'), True, [1000]])
def test_invalid_base_price_yields_zero(base_price):
    assert compute_factory_price(base_price, 10) == 0


@pytest.mark.parametrize("discount", ["bad", None, float('nan'), False, {}])
def test_invalid_discount_means_no_discount(discount):
    assert compute_factory_price(1000, discount) == 1000


def test_discount_bounds():
    assert compute_factory_price(1000, 0) == 1000
    assert compute_factory_price(1000, 100) == 0
    assert compute_factory_price(1000, 12.5) == 875


def test_ties_round_half_up():
    """5 × 0.5 = 2.5 rounds away from zero."""
    assert compute_factory_price(5, 50) == 3
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -3
    assert round_half_up(2.4999) == 2


def test_decimal_inputs_are_accepted():
    assert compute_factory_price(Decimal("8560"), Decimal("16")) == 7190


def test_is_valid_number():
    assert is_valid_number(1)
    assert is_valid_number(1.5)
    assert is_valid_number(Decimal("2"))
    assert not is_valid_number(True)
    assert not is_valid_number("1")
    assert not is_valid_number(None)
    assert not is_valid_number(float('nan'))


def test_package_price_adds_components():
    assert calculate_package_price(7190, 1200, 800) == 9190
    assert calculate_package_price(7190) == 7190
    assert calculate_package_price(7190, coupling_price=1200) == 8390


def test_package_price_ignores_invalid_components():
    assert calculate_package_price(7190, None, "x") == 7190
    assert calculate_package_price(0, 1200, 800) == 0
    assert calculate_package_price(None, 1200) == 0


@pytest.mark.parametrize("model,expected", [
    ("HC1200", 1.15),
    ("HCT1400/2", 1.15),
    ("HC600A", 1.12),
    ("HCD138", 1.12),
    ("GWC42.45(2-6:1)", 1.15),
    ("DT180", 1.18),
    ("40A", 1.10),
    ("MB170", 1.10),
    (None, 1.10),
    ("", 1.10),
])
def test_series_markup(model, expected):
    assert get_series_markup(model) == expected


def test_market_price_uses_series_markup():
    assert calculate_market_price("DT180", 20700) == 24426
    assert calculate_market_price("40A", 10000) == 11000


def test_market_price_clamps_markup():
    # 1.18 × 1.2 = 1.416 → capped at 1.30
    assert calculate_market_price("DT180", 10000, {"urgency": 1.2}) == 13000
    # 1.10 × 0.9 = 0.99 → raised to 1.05
    assert calculate_market_price("40A", 10000, {"competition": 0.9}) == 10500


def test_market_price_ignores_zero_or_invalid_factors():
    assert calculate_market_price("40A", 10000, {"competition": 0, "seasonal": "high"}) == 11000


def test_market_price_invalid_package_price():
    assert calculate_market_price("HC1200", 0) == 0
    assert calculate_market_price("HC1200", -100) == 0
    assert calculate_market_price("HC1200", None) == 0


def test_market_price_custom_bounds():
    settings = Settings.load(market_markup_ceiling=1.20)
    assert calculate_market_price("DT180", 10000, {"urgency": 1.1}, settings=settings) == 12000
    assert calculate_market_price("DT180", 10000, settings=settings) == 11800
