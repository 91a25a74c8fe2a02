"""Engine subpackage - catalog, discount rules and price calculations."""
from .calculations import calculate_market_price, calculate_package_price, compute_factory_price
from .discount_rules import DiscountRuleSet
from .models import DiscountResolution, PricedRecord, ProductRecord, TraceStep
from .pricing_catalog import PricingCatalog

__all__ = [
    'PricingCatalog',
    'DiscountRuleSet',
    'ProductRecord',
    'PricedRecord',
    'DiscountResolution',
    'TraceStep',
    'compute_factory_price',
    'calculate_package_price',
    'calculate_market_price',
]
