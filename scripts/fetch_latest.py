"""scripts/fetch_latest.py

Small helper to query a running front-desk server from the command line.
Fetches the newest record of a resource (customers or staff), the whole list,
or the totalGuests aggregate, and prints the JSON.

Usage (PowerShell):
    $env:API_BASE_URL = 'http://localhost:5000/api'
    python ./scripts/fetch_latest.py --resource customers --mode all --out customers.csv --format csv

"""
from __future__ import annotations
import os
import json
import argparse
from typing import Optional

import requests
from dotenv import load_dotenv


load_dotenv()


def try_get(url: str, timeout: int = 10) -> Optional[requests.Response]:
    try:
        r = requests.get(url, timeout=timeout)
        return r
    except requests.RequestException as e:
        print(f"Request to {url} failed: {e}")
        return None


def _get_json(url: str):
    r = try_get(url)
    if r is None:
        return None
    if r.status_code != 200:
        print(f"Received {r.status_code} from {url}: {r.text}")
        return None
    try:
        return r.json()
    except ValueError as e:
        print(f"Failed to parse JSON from {url}: {e}")
        return None


def fetch_latest(api_base: str, resource: str):
    """Return the newest record of a list resource, or the object itself.

    List endpoints return records in insertion order, so the newest is last.
    """
    url = f"{api_base.rstrip('/')}/{resource}"
    print(f"Trying {url} ...")
    data = _get_json(url)
    if data is None:
        print("Could not fetch latest record. Check API and resource path.")
        return None

    if isinstance(data, list):
        if not data:
            print("No records returned in list.")
            return None
        latest = data[-1]
        print("Latest record (from list endpoint):")
        print(latest)
        return latest

    # totalGuests and similar endpoints answer with a single object
    print("Latest record (single object):")
    print(data)
    return data


def fetch_all(api_base: str, resource: str):
    """Fetch entire resource (list endpoint) and return as Python list."""
    url = f"{api_base.rstrip('/')}/{resource}"
    data = _get_json(url)
    if data is None:
        return None
    if not isinstance(data, list):
        print("Expected a list from the resource endpoint but got a single object.")
        return None
    return data


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Fetch latest or all records from the front-desk API",
    )
    parser.add_argument(
        "--api-base",
        default=os.environ.get("API_BASE_URL", "http://localhost:5000/api"),
        help="API base URL",
    )
    parser.add_argument(
        "--resource",
        default="customers",
        help="Resource path (customers, staff or totalGuests)",
    )
    parser.add_argument(
        "--mode",
        choices=("latest", "all"),
        default="latest",
        help="Fetch mode: latest or all",
    )
    parser.add_argument(
        "--out",
        help="Optional output file. If provided and format is csv, will write CSV",
    )
    parser.add_argument(
        "--format",
        choices=("json", "csv"),
        default="json",
        help="Output format when --out is provided",
    )

    args = parser.parse_args(argv)

    if args.mode == "latest":
        record = fetch_latest(args.api_base, args.resource)
        if record and args.out:
            with open(args.out, "w", encoding="utf8") as fh:
                json.dump(record, fh, ensure_ascii=False, indent=2)
            print(f"Wrote latest record to {args.out}")
        return record

    rows = fetch_all(args.api_base, args.resource)
    if rows is None:
        return None
    if args.out:
        if args.format == "json":
            with open(args.out, "w", encoding="utf8") as fh:
                json.dump(rows, fh, ensure_ascii=False, indent=2)
            print(f"Wrote {len(rows)} records to {args.out}")
        else:
            # CSV export needs the optional pandas dependency
            try:
                import pandas as pd

                df = pd.DataFrame(rows)
                df.to_csv(args.out, index=False)
                print(f"Wrote {len(rows)} records to {args.out} (CSV)")
            except ImportError as e:
                print("Failed to write CSV. Install pandas or choose json:", e)
    else:
        print(f"Fetched {len(rows)} records")
    return rows


if __name__ == "__main__":
    main()
