#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from ledger.query.connectors.horizon import HorizonClient, account_transactions
from ledger.query.core import Order
from ledger.query.runtime.paging import Pager


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Walk an account's transactions page by page")
    p.add_argument("account")
    p.add_argument("limit", nargs="?", type=int, default=25)
    p.add_argument("--testnet", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    client = HorizonClient.testnet() if args.testnet else HorizonClient.public()

    pager = Pager(limit=args.limit, page_limit=10)
    endpoint = account_transactions(args.account).with_order(Order.DESC)
    iterator = client.iterate(endpoint)

    print(f"Latest transactions of {args.account}:")
    print(f"{'Created':25} | {'Ledger':>9} | {'Ops':>3} | Hash")
    print("-" * 110)

    def show(t) -> None:
        print(f"{t.created_at.isoformat():25} | {t.ledger:>9} | {t.operation_count:>3} | {t.hash}")

    try:
        count = await pager.paginate(iterator, show)
    finally:
        await client.close()
    print(f"\n{count} transactions over {iterator.pages_fetched} pages")


if __name__ == "__main__":
    asyncio.run(main())
