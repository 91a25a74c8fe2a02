"""
Print discount resolution traces and prices for gearbox models.

Usage:
    python scripts/debug_discount.py HC1200 HCT800/1 GWC42.45(2-6:1)
"""
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from gearbox_pricing.config.logging_config import configure_logging
from gearbox_pricing.engine.pricing_catalog import DEFAULT_CATALOG


def debug(models):
    catalog = DEFAULT_CATALOG

    print(f"Loaded {len(catalog)} models")
    print(f"Prefix rules: {len(catalog.rules.prefix_rules)}, "
          f"exact overrides: {len(catalog.rules.exact_overrides)}")

    for model in models:
        print(f"\n--- {model} ---")
        resolution = catalog.resolve_discount_with_trace(model)
        print(resolution.get_trace_text())
        print(f"Resolved rate: {resolution.rate:.2f} ({resolution.source})")

        priced = catalog.find_priced(model)
        if priced is None:
            print("Not in price list")
            continue

        print(f"Base price: {priced.base_price}")
        print(f"Stored rate: {priced.discount_rate}%")
        print(f"Factory price: {priced.factory_price}")
        if priced.notes:
            print(f"Notes: {priced.notes}")


if __name__ == "__main__":
    configure_logging("DEBUG")
    debug(sys.argv[1:] or ["HC1200", "HC1000", "HCT800/1", "ZZZ999"])
