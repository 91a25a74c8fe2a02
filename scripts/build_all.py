#!/usr/bin/env python
"""
Build pipeline - checks catalog data and runs the test suite.

Usage:
    python scripts/build_all.py
"""
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from gearbox_pricing.config.logging_config import configure_logging
from gearbox_pricing.data.catalog_report import build_catalog_report


def main():
    configure_logging()

    print("=" * 60)
    print("GEARBOX PRICING BUILD PIPELINE")
    print("=" * 60)
    print()

    # Check catalog
    print("[1/2] Checking price catalog...")
    report = build_catalog_report(verbose=True)

    if report["errors"]:
        print("\n❌ BUILD FAILED")
        for error in report["errors"]:
            print(f"  ERROR: {error}")
        sys.exit(1)

    print()
    print("[2/2] Running tests...")

    # Run tests
    import subprocess
    test_result = subprocess.run(
        [sys.executable, '-m', 'pytest', 'tests', '-v', '--tb=short'],
        cwd=Path(__file__).parent.parent
    )

    if test_result.returncode != 0:
        print("\n❌ TESTS FAILED")
        sys.exit(1)

    print()
    print("=" * 60)
    print("✅ BUILD COMPLETE")
    print("=" * 60)
    print()
    print("Summary:")
    print(f"  Models: {report['metrics']['record_count']}")
    print(f"  Duplicates: {len(report['metrics'].get('duplicate_models', []))}")
    print(f"  Rate mismatches: {len(report['metrics'].get('rate_mismatches', []))}")
    print()
    print("Series Coverage:")
    for series, stats in report['metrics'].get('series', {}).items():
        print(f"  {series}: {stats['records']} models "
              f"({stats['min_base_price']} - {stats['max_base_price']})")


if __name__ == "__main__":
    main()
