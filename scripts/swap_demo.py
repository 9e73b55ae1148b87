#!/usr/bin/env python3
"""Walk through the swap API: currencies, estimate, range, create, status, history.

Reads SWAPSDK_BASE_URL / SWAPSDK_TIMEOUT / SWAPSDK_AUTH_TOKEN from the
environment (or .env) unless overridden on the command line.

Usage:
    python scripts/swap_demo.py --from zec --to sol --amount 1
    python scripts/swap_demo.py --create --recipient <SOL address> --refund <ZEC address>
"""

import argparse
import asyncio
import logging
import sys

from swapsdk import SwapAPIError, SwapSDK, SwapStatus, get_settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


async def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    logger.info(f"Settings: {settings.get_safe_dict()}")

    if args.base_url:
        settings = settings.model_copy(update={"base_url": args.base_url})

    async with SwapSDK.from_env(settings) as sdk:
        if args.token:
            sdk.set_auth_token(args.token)

        try:
            currencies = await sdk.get_currencies()
            logger.info(f"Available currencies: {[c['symbol'] for c in currencies]}")

            estimate = await sdk.get_exchange_rate(args.from_currency, args.to_currency, args.amount)
            logger.info(f"Estimate: {estimate}")

            exchange_range = await sdk.get_exchange_range(args.from_currency, args.to_currency)
            logger.info(f"Range: {exchange_range}")

            if args.create:
                request = {
                    "fromCurrency": args.from_currency,
                    "toCurrency": args.to_currency,
                    "amount": args.amount,
                    "recipientAddress": args.recipient,
                }
                if args.refund:
                    request["refundAddress"] = args.refund

                created = await sdk.create_exchange(request)
                logger.info(f"Exchange created: {created}")

                if created.get("success"):
                    swap_id = created["swap"]["id"]
                    logger.info(f"Send {created['exchange']['amount']} {args.from_currency} "
                                f"to {created['exchange']['depositAddress']}")
                    await poll_status(sdk, swap_id, args.polls, args.interval)

            history = await sdk.get_swap_history()
            logger.info(f"Swap history: {len(history)} swaps")
            if history:
                details = await sdk.get_swap_details(history[0]["id"])
                logger.info(f"Latest swap: {details}")

        except SwapAPIError as e:
            logger.error(f"API error: {e.message} (code={e.code})")
            return 1

    return 0


async def poll_status(sdk: SwapSDK, swap_id: str, polls: int, interval: float) -> None:
    """Poll a swap's status until it is terminal or polls run out."""
    for _ in range(polls):
        status = await sdk.get_exchange_status(swap_id)
        logger.info(f"Swap {swap_id}: {status['status']}")
        try:
            if SwapStatus(status["status"]).is_terminal:
                return
        except ValueError:
            logger.warning(f"Unrecognised status {status['status']!r}")
        await asyncio.sleep(interval)


def main() -> None:
    parser = argparse.ArgumentParser(description="Swap API walkthrough")
    parser.add_argument("--base-url", type=str, help="Override SWAPSDK_BASE_URL")
    parser.add_argument("--token", type=str, help="Auth token (JWT or base64 Privy token)")
    parser.add_argument("--from", dest="from_currency", type=str, default="zec")
    parser.add_argument("--to", dest="to_currency", type=str, default="sol")
    parser.add_argument("--amount", type=float, default=1.0)
    parser.add_argument("--create", action="store_true", help="Actually create an exchange")
    parser.add_argument("--recipient", type=str, help="Recipient address for --create")
    parser.add_argument("--refund", type=str, help="Optional refund address")
    parser.add_argument("--polls", type=int, default=5, help="Status polls after creating")
    parser.add_argument("--interval", type=float, default=10.0, help="Seconds between polls")

    args = parser.parse_args()
    if args.create and not args.recipient:
        parser.error("--create requires --recipient")

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
