#!/usr/bin/env python3
"""
Generate, sign, verify and export a key for each configured DSA variant.

Usage:
    python scripts/run_selftest.py [--config path/to/algorithms.json] [--variant DSA-1024] [--verbose]
"""

import argparse
import logging
import sys
from typing import Dict, List

from dsakeys.factory import KeyFactory
from dsakeys.selftest import run_all


def print_summary_table(results: List[Dict]):
    """Print formatted summary table with timing information."""
    print("\n" + "=" * 110)
    print("DSA SELF-CHECK SUMMARY")
    print("=" * 110)

    header = f"{'Variant':<16} {'S':<3} {'Keygen(ms)':<12} {'Sign(ms)':<12} {'Verify(ms)':<12} {'PrivPEM(B)':<12} {'PubPEM(B)':<12} {'Sig(B)':<8}"
    print(header)
    print("-" * 110)

    for r in results:
        status_symbol = "✓" if r['status'] == 'success' else "✗"
        sizes = r.get('sizes', {})
        timings = r.get('timings', {})

        keygen_ms = f"{timings['keygen_ms']:.3f}" if 'keygen_ms' in timings else "N/A"
        sign_ms = f"{timings['sign_ms']:.3f}" if 'sign_ms' in timings else "N/A"
        verify_ms = f"{timings['verify_ms']:.3f}" if 'verify_ms' in timings else "N/A"

        row = f"{r['name']:<16} {status_symbol:<3} {keygen_ms:<12} {sign_ms:<12} {verify_ms:<12} {sizes.get('pem_private', 0):<12} {sizes.get('pem_public', 0):<12} {sizes.get('signature', 0):<8}"
        print(row)

    print("=" * 110)

    for r in results:
        if r['status'] != 'success':
            failed_ops = [op for op, status in r['operations'].items() if status != 'OK']
            print(f"  - {r['name']}: {r.get('error') or ', '.join(failed_ops)}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the DSA key self-check")
    parser.add_argument("--config", default=None, help="Path to algorithms JSON configuration")
    parser.add_argument("--variant", action="append", help="Only check this variant (repeatable)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        factory = KeyFactory(config_path=args.config)
    except (OSError, ValueError) as e:
        print(f"Error loading configuration: {e}")
        return 1

    results = run_all(factory, args.variant)
    print_summary_table(results)

    failures = sum(1 for r in results if r['status'] != 'success')
    if failures:
        print(f"\n✗ {failures} variant(s) failed or encountered errors.")
        return 1
    print("\n✓ All variants passed!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
