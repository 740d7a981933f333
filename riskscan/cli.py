"""Score a saved GoPlus token_security response.

Usage:
    riskscan goplus.json --address 0x... --chain 1
    riskscan goplus.json --address 0x... --chain 56 --basic
"""

import argparse
import asyncio
import json
import sys

from loguru import logger

from config.settings import settings
from riskscan.chains import chain_name, explorer_token_url
from riskscan.exceptions import InputError, NotFoundError, ScanError
from riskscan.providers.goplus_payload import GoPlusPayloadProvider
from riskscan.scanner import TokenScanner
from riskscan.utils.logger import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="riskscan", description="Token contract risk scan")
    parser.add_argument("payload", help="Path to a GoPlus token_security JSON response")
    parser.add_argument("--address", required=True, help="Token contract address")
    parser.add_argument("--chain", required=True, help="Chain id (1, 56, 137, 8453, 42161)")
    parser.add_argument("--basic", action="store_true", help="Risk score only, skip advanced analysis")
    parser.add_argument("--json-logs", action="store_true", help="Serialize logs as JSON")
    return parser


async def run(args: argparse.Namespace) -> int:
    try:
        provider = GoPlusPayloadProvider.from_file(args.payload)
    except OSError as e:
        logger.error(f"[CLI] Cannot read payload {args.payload}: {e}")
        return 2
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"[CLI] Payload {args.payload} is not valid JSON: {e}")
        return 2

    scanner = TokenScanner(provider)
    try:
        result = await scanner.scan(args.address, args.chain, advanced=not args.basic)
    except (InputError, NotFoundError) as e:
        logger.error(f"[CLI] {e}")
        return 2
    except ScanError as e:
        logger.error(f"[CLI] Scan failed: {e}")
        return 1

    logger.info(
        f"[CLI] {result.security_data.token_symbol} on {chain_name(result.chain_id)}: "
        f"{result.risk_score.overall}/100 {result.risk_score.category}"
    )
    url = explorer_token_url(result.chain_id, result.token_address)
    if url:
        logger.info(f"[CLI] Explorer: {url}")
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(
        json_logs=args.json_logs or settings.json_logs,
        level=settings.log_level,
        log_dir=settings.log_dir,
    )
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
