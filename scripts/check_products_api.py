#!/usr/bin/env python3
"""
Smoke check for a running products API: health and product listing.

Start the API first (in another terminal):
  uvicorn products_api.api.main:app --host 127.0.0.1 --port 8000

Then run this script:
  python scripts/check_products_api.py
  python scripts/check_products_api.py --base-url http://127.0.0.1:8000

If you see "Connection refused", the API is not running; start uvicorn as above.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any


import requests

EXPECTED_PRODUCTS = [{"name": "Default product", "description": "product description", "price": 100}]


def get_json(url: str, timeout: int = 30) -> Any:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return r.json()


def main() -> int:
    parser = argparse.ArgumentParser(description="Smoke check the products API (health, product listing)")
    parser.add_argument("--base-url", default="http://localhost:8000", help="API base URL")
    parser.add_argument("--api-prefix", default="/api/v1", help="Prefix the product routes are mounted under")
    args = parser.parse_args()
    base = args.base_url.rstrip("/")

    print("=== Products API smoke check ===\n")
    print(f"Base URL: {base}\n")

    print("1) GET /health")
    try:
        out = get_json(f"{base}/health")
        print(f"   status: {out.get('status')}\n")
    except requests.RequestException as e:
        print(f"   FAIL: {e}")
        if "Connection refused" in str(e) or "Failed to establish" in str(e):
            print("   → Start the API first: uvicorn products_api.api.main:app --host 127.0.0.1 --port 8000")
        return 1

    print(f"2) GET {args.api_prefix}/products")
    try:
        products = get_json(f"{base}{args.api_prefix}/products")
    except requests.RequestException as e:
        print(f"   FAIL: {e}")
        return 1
    print(f"   products: {products}")
    if products != EXPECTED_PRODUCTS:
        print(f"   FAIL: expected {EXPECTED_PRODUCTS}")
        return 1

    print("\nAll checks passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
