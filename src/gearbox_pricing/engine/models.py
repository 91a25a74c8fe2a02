"""
Data models for the pricing catalog.

Uses frozen dataclasses so catalog entries stay read-only after load.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class TraceStep:
    """A single step in the discount resolution trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class ProductRecord:
    """One gearbox model offering from the price list."""
    model: str
    base_price: int
    discount_rate: float  # percentage, 16 = 16%
    notes: Optional[str] = None


@dataclass(frozen=True)
class PricedRecord:
    """A product record enriched with its computed factory price."""
    model: str
    base_price: int
    discount_rate: float
    factory_price: int
    notes: Optional[str] = None

    @classmethod
    def from_record(cls, record: ProductRecord, factory_price: int) -> 'PricedRecord':
        return cls(
            model=record.model,
            base_price=record.base_price,
            discount_rate=record.discount_rate,
            factory_price=factory_price,
            notes=record.notes,
        )

    def to_export_dict(self) -> dict:
        """Convert to the camelCase dict format used by quote documents."""
        return {
            "model": self.model,
            "basePrice": self.base_price,
            "discountRate": self.discount_rate,
            "notes": self.notes,
            "factoryPrice": self.factory_price,
        }


@dataclass
class DiscountResolution:
    """Result of resolving a discount rate for a model, with trace."""
    model: Optional[str]
    rate: float
    source: str  # "override", "prefix" or "default"
    matched_key: Optional[str] = None
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the resolution trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)
