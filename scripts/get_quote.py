#!/usr/bin/env python3
"""Fetch a Jupiter quote from the command line.

Usage:
    python scripts/get_quote.py --input SOL --output JUP --amount 1.5 [--slippage-bps 50]

Options:
    --input         Input token symbol or mint address
    --output        Output token symbol or mint address
    --amount        Human-readable amount of the input token (raw base units with --raw)
    --raw           Treat --amount as raw base units; required for unknown mints
    --slippage-bps  Slippage tolerance in basis points
    --direct        Only allow single-hop routes
    --json          Print the raw quote JSON instead of a summary
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from jupswap import JupiterClient, JupiterClientError, QuoteRequest
from jupswap.tokens import get_token_mint, to_raw_amount

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


async def fetch_quote(args: argparse.Namespace) -> int:
    input_mint = get_token_mint(args.input) or args.input
    output_mint = get_token_mint(args.output) or args.output
    if args.raw:
        amount = int(args.amount)
    else:
        try:
            amount = to_raw_amount(args.amount, args.input)
        except ValueError as e:
            logger.error(str(e))
            return 2

    request = QuoteRequest(input_mint=input_mint, output_mint=output_mint, amount=amount)
    if args.slippage_bps is not None:
        request = request.with_slippage_bps(args.slippage_bps)
    if args.direct:
        request = request.with_only_direct_routes(True)

    async with JupiterClient() as jupiter:
        try:
            quote = await jupiter.get_quote(request)
        except JupiterClientError as e:
            logger.error(f"Quote failed: {e}")
            return 1

    if args.json:
        print(json.dumps(quote.to_wire(), indent=2))
        return 0

    print(f"{quote.in_amount} {args.input} -> {quote.out_amount} {args.output}")
    print(f"  Min received:  {quote.other_amount_threshold}")
    print(f"  Price impact:  {quote.price_impact_pct}%")
    print(f"  Slippage:      {quote.slippage_bps} bps")
    print(f"  Context slot:  {quote.context_slot}")
    for i, step in enumerate(quote.route_plan, 1):
        info = step.swap_info
        print(f"  Hop {i}: {info.label} ({step.percent}%) {info.in_amount} -> {info.out_amount}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Fetch a Jupiter swap quote")
    parser.add_argument("--input", required=True, help="Input token symbol or mint")
    parser.add_argument("--output", required=True, help="Output token symbol or mint")
    parser.add_argument("--amount", required=True, help="Amount of the input token")
    parser.add_argument("--raw", action="store_true", help="--amount is in raw base units")
    parser.add_argument("--slippage-bps", type=int, help="Slippage tolerance in bps")
    parser.add_argument("--direct", action="store_true", help="Single-hop routes only")
    parser.add_argument("--json", action="store_true", help="Print raw quote JSON")

    args = parser.parse_args()
    return asyncio.run(fetch_quote(args))


if __name__ == "__main__":
    sys.exit(main())
