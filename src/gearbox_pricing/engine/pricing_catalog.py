"""
Pricing Catalog - Gearbox price list with discount resolution.

Holds the ordered product records and the discount rule set, and
eagerly derives the priced catalog (every record plus its factory
price) once at construction. Everything is read-only after load.
"""
import logging
from collections import Counter
from typing import Iterable, Optional

from ..config.settings import get_settings, Settings
from ..data.price_list import DISCOUNT_RATE_MAP, PRICE_LIST, SPECIAL_DISCOUNT_RATES
from .calculations import compute_factory_price
from .discount_rules import DiscountRuleSet
from .models import DiscountResolution, PricedRecord, ProductRecord

logger = logging.getLogger(__name__)


class PricingCatalog:
    """
    Read-only gearbox catalog.

    Lookups are exact and case-sensitive. If the same model appears more
    than once, the first record in list order wins.
    """

    def __init__(
        self,
        records: Iterable[ProductRecord],
        rules: DiscountRuleSet,
        settings: Optional[Settings] = None
    ):
        """Load records and compute the priced view."""
        self.settings = settings or get_settings()
        self.records: tuple[ProductRecord, ...] = tuple(records)
        self.rules = rules

        self.priced: tuple[PricedRecord, ...] = tuple(
            PricedRecord.from_record(r, compute_factory_price(r.base_price, r.discount_rate))
            for r in self.records
        )

        # First occurrence wins, matching an in-order linear scan
        self._index: dict[str, int] = {}
        for position, record in enumerate(self.records):
            self._index.setdefault(record.model, position)

        for model in self.duplicate_models():
            logger.warning("Duplicate model %r in catalog; first entry is used for lookups", model)

    @classmethod
    def from_price_list(
        cls,
        price_list: Iterable[dict] = PRICE_LIST,
        prefix_rules: Optional[dict] = None,
        exact_overrides: Optional[dict] = None,
        settings: Optional[Settings] = None
    ) -> 'PricingCatalog':
        """Build a catalog from plain dict literals."""
        settings = settings or get_settings()
        records = [
            ProductRecord(
                model=item['model'],
                base_price=item.get('base_price', 0),
                discount_rate=item.get('discount_rate', 0),
                notes=item.get('notes'),
            )
            for item in price_list
        ]
        rules = DiscountRuleSet(
            prefix_rules=DISCOUNT_RATE_MAP if prefix_rules is None else prefix_rules,
            exact_overrides=SPECIAL_DISCOUNT_RATES if exact_overrides is None else exact_overrides,
            settings=settings,
        )
        return cls(records, rules, settings)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def __contains__(self, model) -> bool:
        return isinstance(model, str) and model in self._index

    def find_record(self, model: Optional[str]) -> Optional[ProductRecord]:
        """Return the first record whose model equals the input exactly."""
        if not model or not isinstance(model, str):
            return None
        position = self._index.get(model)
        return self.records[position] if position is not None else None

    def find_priced(self, model: Optional[str]) -> Optional[PricedRecord]:
        """Priced counterpart of find_record."""
        if not model or not isinstance(model, str):
            return None
        position = self._index.get(model)
        return self.priced[position] if position is not None else None

    def lookup_base_price(self, model: Optional[str]) -> int:
        """List price for a model, or 0 when the model is empty or unknown."""
        record = self.find_record(model)
        if record is None:
            logger.debug("No catalog entry for model %r", model)
            return 0
        return record.base_price

    def resolve_discount_rate(self, model: Optional[str]) -> float:
        """Discount fraction from the rule tables (not the stored record rate)."""
        return self.rules.resolve(model)

    def resolve_discount_with_trace(self, model: Optional[str]) -> DiscountResolution:
        return self.rules.resolve_with_trace(model)

    def search(self, text: Optional[str]) -> tuple[PricedRecord, ...]:
        """Case-insensitive substring search over model names."""
        if not text:
            return self.priced
        needle = str(text).casefold()
        return tuple(p for p in self.priced if needle in p.model.casefold())

    def series(self, prefix: str) -> tuple[PricedRecord, ...]:
        """All priced records whose model starts with the prefix."""
        if not prefix:
            return self.priced
        prefix = str(prefix)
        return tuple(p for p in self.priced if p.model.startswith(prefix))

    def duplicate_models(self) -> list[str]:
        """Models that appear more than once, in first-seen order."""
        counts = Counter(r.model for r in self.records)
        return [model for model, count in counts.items() if count > 1]


# Default catalog built from the 2024 price list
DEFAULT_CATALOG = PricingCatalog.from_price_list()
DEFAULT_RULES = DEFAULT_CATALOG.rules

PRICE_RECORDS: tuple[ProductRecord, ...] = DEFAULT_CATALOG.records
PRICED_CATALOG: tuple[PricedRecord, ...] = DEFAULT_CATALOG.priced


def resolve_discount_rate(model: Optional[str]) -> float:
    """Discount fraction for a model using the default rule tables."""
    return DEFAULT_RULES.resolve(model)


def lookup_base_price(model: Optional[str]) -> int:
    """List price for a model in the default catalog, 0 if unknown."""
    return DEFAULT_CATALOG.lookup_base_price(model)
