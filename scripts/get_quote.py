#!/usr/bin/env python3
"""Fetch a Jupiter quote and, optionally, the swap instructions for it.

Usage:
    python scripts/get_quote.py --input-mint So11111111111111111111111111111111111111112 \
        --output-mint EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v --amount 1000000
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotenv import load_dotenv

from jupiter_swap_api_client import (
    ClientError,
    JupiterSwapApiClient,
    QuoteRequest,
    SwapRequest,
    get_settings,
)

load_dotenv()

logger = logging.getLogger(__name__)


def print_instruction(name: str, ix) -> None:
    print(f"  {name}: program={ix.program_id} accounts={len(ix.accounts)} data={len(ix.data)} bytes")


async def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    base_url = args.base_url or settings.jupiter_api_url

    quote_request = QuoteRequest(
        input_mint=args.input_mint,
        output_mint=args.output_mint,
        amount=args.amount,
        slippage_bps=args.slippage_bps,
        only_direct_routes=args.direct or None,
    )

    async with JupiterSwapApiClient(
        base_url,
        timeout=settings.jupiter_request_timeout,
        http2=settings.jupiter_http2,
    ) as client:
        try:
            quote = await client.quote(quote_request)
        except ClientError as e:
            logger.error(f"Quote failed: {e}")
            return 1

        print(json.dumps(quote.to_wire(), indent=2))

        if not args.user:
            return 0

        try:
            instructions = await client.swap_instructions(
                SwapRequest(user_public_key=args.user, quote_response=quote)
            )
        except ClientError as e:
            logger.error(f"Swap instructions failed: {e}")
            return 1

        print("\nSwap instructions:")
        for ix in instructions.setup_instructions:
            print_instruction("setup", ix)
        print_instruction("swap", instructions.swap_instruction)
        if instructions.cleanup_instruction is not None:
            print_instruction("cleanup", instructions.cleanup_instruction)
        print(f"  lookup tables: {len(instructions.address_lookup_table_addresses)}")

    return 0


def main():
    parser = argparse.ArgumentParser(description="Jupiter quote utility")
    parser.add_argument("--input-mint", required=True, help="Mint to swap from")
    parser.add_argument("--output-mint", required=True, help="Mint to swap to")
    parser.add_argument("--amount", type=int, required=True, help="Amount in base units")
    parser.add_argument("--slippage-bps", type=int, default=50, help="Slippage tolerance in bps")
    parser.add_argument("--direct", action="store_true", help="Only use direct routes")
    parser.add_argument("--user", help="User public key; also fetch swap instructions")
    parser.add_argument("--base-url", help="Override JUPITER_API_URL")
    args = parser.parse_args()

    log_level = logging.DEBUG if get_settings().debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
