"""
Catalog Report - Tabular views and data-quality checks for the price list.

Builds on the priced catalog with:
- pandas DataFrame view for analysis and export by callers
- camelCase JSON-ready records for quote documents
- Build report with per-series metrics, duplicates and rate drift
"""
import logging
from datetime import datetime
from typing import Optional

import pandas as pd

from ..engine.pricing_catalog import DEFAULT_CATALOG, PricingCatalog
from .price_list import SPECIAL_APPROVAL

logger = logging.getLogger(__name__)

COLUMNS = ['model', 'base_price', 'discount_rate', 'notes', 'factory_price', 'resolved_rate']

# Rates closer than this are treated as equal when comparing percent vs fraction
RATE_TOLERANCE = 1e-9


def to_dataframe(catalog: Optional[PricingCatalog] = None) -> pd.DataFrame:
    """
    Priced catalog as a DataFrame, one row per record in list order.

    'discount_rate' is the stored percentage; 'resolved_rate' is the
    fraction the rule tables give for the same model.
    """
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    rows = [
        {
            'model': p.model,
            'base_price': p.base_price,
            'discount_rate': p.discount_rate,
            'notes': p.notes,
            'factory_price': p.factory_price,
            'resolved_rate': catalog.resolve_discount_rate(p.model),
        }
        for p in catalog.priced
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def to_json_records(catalog: Optional[PricingCatalog] = None) -> list[dict]:
    """Priced catalog as plain dicts with camelCase keys."""
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    return [p.to_export_dict() for p in catalog.priced]


def series_code(model: str) -> str:
    """Leading letters of a model ('HCT800/1' → 'HCT'); numeric-only models → 'OTHER'."""
    code = ''
    for ch in model:
        if not ('A' <= ch <= 'Z'):
            break
        code += ch
    return code or 'OTHER'


def build_catalog_report(catalog: Optional[PricingCatalog] = None, verbose: bool = False) -> dict:
    """
    Check the catalog and summarize it.

    Args:
        catalog: Optional catalog override (defaults to the 2024 price list)
        verbose: Print progress messages

    Returns:
        Report dictionary with status, metrics, warnings and errors
    """
    catalog = DEFAULT_CATALOG if catalog is None else catalog

    report = {
        "timestamp": datetime.now().isoformat(),
        "status": "pending",
        "metrics": {},
        "warnings": [],
        "errors": []
    }

    df = to_dataframe(catalog)
    report["metrics"]["record_count"] = len(df)

    if df.empty:
        msg = "Catalog has no records"
        report["warnings"].append(msg)
        report["status"] = "warning"
        logger.warning(msg)
        return report

    # Per-series coverage
    df['series'] = df['model'].map(series_code)
    series_stats = {}
    for series, group in df.groupby('series', sort=True):
        series_stats[series] = {
            "records": int(len(group)),
            "min_base_price": int(group['base_price'].min()),
            "max_base_price": int(group['base_price'].max()),
        }
    report["metrics"]["series"] = series_stats

    # Duplicate models (lookups use the first one)
    duplicates = catalog.duplicate_models()
    report["metrics"]["duplicate_models"] = duplicates
    for model in duplicates:
        report["warnings"].append(f"Duplicate model {model}: first entry is used")

    # Stored rates outside [0, 100]
    out_of_range = df[(df['discount_rate'] < 0) | (df['discount_rate'] > 100)]['model'].tolist()
    report["metrics"]["out_of_range_rates"] = out_of_range
    for model in out_of_range:
        report["warnings"].append(f"Discount rate for {model} is outside 0-100%")

    # Negative list prices
    negative = df[df['base_price'] < 0]['model'].tolist()
    report["metrics"]["negative_prices"] = negative
    for model in negative:
        report["warnings"].append(f"Base price for {model} is negative")

    # Stored percentage vs rule-resolved fraction
    drift = df[(df['discount_rate'] / 100 - df['resolved_rate']).abs() > RATE_TOLERANCE]
    report["metrics"]["rate_mismatches"] = [
        {
            "model": row.model,
            "stored_percent": float(row.discount_rate),
            "resolved_percent": round(float(row.resolved_rate) * 100, 2),
        }
        for row in drift.itertuples(index=False)
    ]

    report["metrics"]["total_base_price"] = int(df['base_price'].sum())
    report["metrics"]["total_factory_price"] = int(df['factory_price'].sum())
    report["metrics"]["special_approval_count"] = int((df['notes'] == SPECIAL_APPROVAL).sum())

    report["status"] = "warning" if report["warnings"] else "success"

    for warning in report["warnings"]:
        logger.warning(warning)

    if verbose:
        print(f"Checked {len(df)} catalog records across {len(series_stats)} series")
        print(f"Rate mismatches vs. rule tables: {len(report['metrics']['rate_mismatches'])}")
        for warning in report["warnings"]:
            print(f"WARNING: {warning}")

    return report
