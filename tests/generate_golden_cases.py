"""
Generate golden test cases by running the current catalog on sample models.
This captures current behavior as a regression baseline.
"""
import pandas as pd
import sys
import os

# Add src to path for internal imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src'))

from gearbox_pricing.engine.pricing_catalog import DEFAULT_CATALOG


def generate_golden_cases():
    catalog = DEFAULT_CATALOG

    # Explicit models covering overrides, long prefixes and series fallbacks
    models_to_test = [
        '40A', '120B', '300(1.87-3:1)', 'J300', 'D300A (4-5.5:1)',
        'MB270A (3-5.5:1)', 'HC600A', 'HCT800/1', 'HC1000', 'HCD1000',
        'HCT1100', 'HC1200', 'HC1200/1', 'HCL30', 'GWC49.59A(2-6:1)带PT', 'DT4300',
    ]

    # Remove duplicates while preserving order
    models_to_test = list(dict.fromkeys(models_to_test))

    print(f"Models to test: {models_to_test}")
    print()

    cases = []
    for model in models_to_test:
        priced = catalog.find_priced(model)
        if priced is None:
            print(f"WARNING: {model} not in catalog, skipped")
            continue
        cases.append({
            'model': model,
            'expected_base_price': priced.base_price,
            'expected_factory_price': priced.factory_price,
            'expected_resolved_rate': catalog.resolve_discount_rate(model),
        })

    # Write to CSV
    df = pd.DataFrame(cases)
    output_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'golden_cases.csv')
    df.to_csv(output_path, index=False)
    print(f"Generated {len(cases)} golden test cases")
    print(f"Output: {output_path}")
    print()
    print("Sample cases:")
    print(df.head(10).to_string(index=False))


if __name__ == "__main__":
    generate_golden_cases()
