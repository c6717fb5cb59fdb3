#!/usr/bin/env python3
"""Fetch one page, print the URI of the next one, and resume from a saved URI.

    python examples/horizon_resume_cursor.py
    python examples/horizon_resume_cursor.py "https://horizon.stellar.org/transactions?cursor=...&order=asc&limit=5"
"""

from __future__ import annotations

import argparse
import asyncio

from ledger.query.connectors.horizon import HorizonClient, all_transactions
from ledger.query.core import Order


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Resume a transaction walk from a saved URI")
    p.add_argument("uri", nargs="?", default=None)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with HorizonClient.public() as client:
        if args.uri:
            endpoint = client.decode(args.uri)
        else:
            endpoint = all_transactions().with_order(Order.ASC).with_limit(5)

        page = await client.fetch_page(endpoint)
        for t in page.records:
            print(f"{t.paging_token:>20} | {t.created_at.isoformat()} | {t.hash}")

        if page.is_last:
            print("\nend of data")
            return
        print("\nnext page:")
        print(client.encode(endpoint.with_cursor(page.next_cursor)).uri)


if __name__ == "__main__":
    asyncio.run(main())
