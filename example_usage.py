#!/usr/bin/env python3
"""
Basic usage examples for the Mechanical Turk client library.

Reads credentials from MTURK_ACCESS_KEY_ID and MTURK_SECRET_ACCESS_KEY and
talks to the sandbox endpoint unless MTURK_SANDBOX=false.
"""

import logging
import sys

from mturk_client import (
    MechanicalTurkClient,
    ConfigurationError,
    RequestFailure,
    TransportFailure
)


def main():
    """Run basic usage examples."""

    logging.basicConfig(level=logging.INFO)

    print("=== Mechanical Turk Client Basic Usage Examples ===\n")

    print("1. Creating client from environment...")
    try:
        client = MechanicalTurkClient.from_env()
    except ConfigurationError as e:
        print(f"   ✗ {e}")
        sys.exit(1)
    print(f"   Endpoint: {client.base_url}")
    print(f"   Timestamp: {client.timestamp}\n")

    with client:
        # Example 1: raising interface
        print("2. Fetching account balance...")
        try:
            response = client.get("GetAccountBalance")
            print(f"   ✓ Available balance: {response.findtext('FormattedPrice')}")
        except RequestFailure as e:
            print(f"   ✗ Rejected with status {e.status_code}")
            for error in e.errors:
                print(f"     {error.code}: {error.message}")
        except TransportFailure as e:
            print(f"   ✗ Endpoint unreachable: {e}")
            sys.exit(1)
        print()

        # Example 2: result-returning interface with list parameters
        print("3. Searching reviewable HITs...")
        result = client.send("GetReviewableHITs", {
            "PageSize": 10,
            "Status": ["Reviewable", "Reviewing"],
        })
        if isinstance(result, RequestFailure):
            print(f"   ✗ Rejected: {result}")
        elif isinstance(result, TransportFailure):
            print(f"   ✗ Endpoint unreachable: {result}")
        else:
            print(f"   ✓ Total results: {result.findtext('TotalNumResults', '0')}")


if __name__ == "__main__":
    main()
