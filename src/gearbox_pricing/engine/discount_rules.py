"""
Discount Rules - Resolves a discount fraction for a gearbox model.

Resolution order:
1. Empty model → 'default' prefix rule
2. Exact override for the full model string
3. Longest matching prefix (6, 5, 4, 3 then 2 characters)
4. Fall back to the 'default' prefix rule
"""
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from ..config.settings import get_settings, Settings
from .models import DiscountResolution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscountRuleSet:
    """
    Read-only prefix rules and exact overrides.

    Rates are fractions in [0, 1]. The prefix table carries a reserved
    'default' key used whenever nothing else matches.
    """
    prefix_rules: Mapping[str, float]
    exact_overrides: Mapping[str, float]
    settings: Settings = field(default_factory=get_settings, compare=False, repr=False)

    def __post_init__(self):
        # Freeze copies so callers can't mutate the tables after load
        object.__setattr__(self, 'prefix_rules', MappingProxyType(dict(self.prefix_rules)))
        object.__setattr__(self, 'exact_overrides', MappingProxyType(dict(self.exact_overrides)))

        if self.settings.default_rule_key not in self.prefix_rules:
            logger.warning(
                "Prefix rules have no '%s' entry; unmatched models resolve to 0.0",
                self.settings.default_rule_key,
            )

    @property
    def default_rate(self) -> float:
        return self.prefix_rules.get(self.settings.default_rule_key, 0.0)

    def resolve(self, model: Optional[str]) -> float:
        """Resolve the discount fraction for a model. Never raises."""
        return self.resolve_with_trace(model).rate

    def resolve_with_trace(self, model: Optional[str]) -> DiscountResolution:
        """
        Resolve the discount fraction with a trace of resolution steps.

        Returns a DiscountResolution with rate, source and matched key.
        """
        if not model:
            resolution = DiscountResolution(
                model=None, rate=self.default_rate, source="default",
                matched_key=self.settings.default_rule_key,
            )
            resolution.add_trace("Model Lookup", "No model given, using default rate", f"{resolution.rate:.2f}")
            return resolution

        model = str(model)
        resolution = DiscountResolution(model=model, rate=self.default_rate, source="default")
        resolution.add_trace("Model Lookup", f"Resolving discount rate for {model}", None)

        # Exact overrides win over any prefix rule
        if model in self.exact_overrides:
            resolution.rate = self.exact_overrides[model]
            resolution.source = "override"
            resolution.matched_key = model
            resolution.add_trace("Exact Override", "Found special rate for model", f"{resolution.rate:.2f}")
            return resolution

        resolution.add_trace("Exact Override", "No special rate for model", None)

        for length in self.settings.prefix_lengths:
            prefix = model[:length]
            if prefix in self.prefix_rules:
                resolution.rate = self.prefix_rules[prefix]
                resolution.source = "prefix"
                resolution.matched_key = prefix
                resolution.add_trace("Prefix Match", f"Matched prefix '{prefix}'", f"{resolution.rate:.2f}")
                return resolution

        logger.debug("No discount rule for model %s, using default %.2f", model, self.default_rate)
        resolution.matched_key = self.settings.default_rule_key
        resolution.add_trace("Fallback", "No prefix matched, using default rate", f"{resolution.rate:.2f}")
        return resolution
