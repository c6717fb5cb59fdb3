#!/usr/bin/env python3
"""Command-line access to a Horizon-style ledger query service.

Usage:
    ledger-query account details GABC...
    ledger-query account data GABC... config_key
    ledger-query --testnet account transactions GABC... --limit 25 --order desc
    ledger-query transactions --limit 5
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable
from typing import Any

from ledger.query.connectors.horizon import (
    HorizonClient,
    account_data,
    account_details,
    account_effects,
    account_offers,
    account_operations,
    account_payments,
    account_transactions,
    all_assets,
    all_transactions,
)
from ledger.query.core import Endpoint, LedgerQueryError, Network, Order
from ledger.query.models import Account, Asset, Datum, Effect, Offer, Operation, Payment, Transaction
from ledger.query.runtime.paging import Pager

ACCOUNT_COLLECTIONS: dict[str, Callable[[str], Endpoint]] = {
    "transactions": account_transactions,
    "effects": account_effects,
    "operations": account_operations,
    "payments": account_payments,
    "offers": account_offers,
}


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return n


def _add_paging_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--limit", type=_positive_int, default=None, help="Total records to show")
    p.add_argument("--order", choices=[o.value for o in Order], default=Order.DESC.value)
    p.add_argument("--cursor", default=None, help="Resume after this paging token")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ledger-query", description="Query a ledger service")
    p.add_argument("--testnet", action="store_true", help="Use the test network host")
    p.add_argument("--host", default=None, help="Explicit service base URL")
    p.add_argument("-v", "--verbose", action="store_true", help="Log page fetches")
    sub = p.add_subparsers(dest="command", required=True)

    account = sub.add_parser("account", help="Account resources")
    account_sub = account.add_subparsers(dest="resource", required=True)
    details = account_sub.add_parser("details", help="Account details")
    details.add_argument("id")
    data = account_sub.add_parser("data", help="One account data value")
    data.add_argument("id")
    data.add_argument("key")
    for name in ACCOUNT_COLLECTIONS:
        collection = account_sub.add_parser(name, help=f"Account {name}")
        collection.add_argument("id")
        _add_paging_args(collection)

    _add_paging_args(sub.add_parser("transactions", help="All transactions"))
    _add_paging_args(sub.add_parser("assets", help="All assets"))
    return p


def format_record(record: Any) -> str:
    """Render one record as aligned ``label: value`` lines."""
    if isinstance(record, Transaction):
        rows = [
            ("ID", record.id),
            ("source account", record.source_account),
            ("created at", record.created_at.isoformat()),
        ]
    elif isinstance(record, Payment):
        rows = [("ID", record.id), ("type", record.type), ("from", record.from_account or "")]
        rows += [("to", record.to or ""), ("amount", str(record.amount or record.starting_balance))]
    elif isinstance(record, (Effect, Operation)):
        rows = [("ID", record.id), ("type", record.type)]
    elif isinstance(record, Offer):
        rows = [
            ("ID", record.id),
            ("selling", record.selling.code),
            ("buying", record.buying.code),
            ("amount", str(record.amount)),
            ("price", str(record.price)),
        ]
    elif isinstance(record, Asset):
        rows = [
            ("code", record.code),
            ("issuer", record.issuer),
            ("amount", str(record.amount)),
            ("accounts", str(record.num_accounts)),
        ]
    elif isinstance(record, Account):
        rows = [("ID", record.id), ("Sequence", str(record.sequence))]
    elif isinstance(record, Datum):
        rows = [("Value", record.value)]
    else:
        rows = [("record", repr(record))]
    width = max(len(label) for label, _ in rows) + 1
    return "\n".join(f"{label + ':':<{width}} {value}" for label, value in rows)


def collection_endpoint(args: argparse.Namespace) -> Endpoint:
    if args.command == "account":
        endpoint = ACCOUNT_COLLECTIONS[args.resource](args.id)
    elif args.command == "transactions":
        endpoint = all_transactions()
    else:
        endpoint = all_assets()
    endpoint = endpoint.with_order(args.order)
    if args.cursor is not None:
        endpoint = endpoint.with_cursor(args.cursor)
    return endpoint


async def run(args: argparse.Namespace) -> int:
    network = Network.TESTNET if args.testnet else Network.PUBLIC
    async with HorizonClient(network=network, base_url=args.host) as client:
        if args.command == "account" and args.resource == "details":
            print(format_record(await client.request(account_details(args.id))))
            return 0
        if args.command == "account" and args.resource == "data":
            print(format_record(await client.request(account_data(args.id, args.key))))
            return 0

        pager = Pager.from_args(args)
        endpoint = pager.bound(collection_endpoint(args))

        def show(record: Any) -> None:
            print(format_record(record))
            print()

        await pager.paginate(client.iterate(endpoint), show)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return asyncio.run(run(args))
    except LedgerQueryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
