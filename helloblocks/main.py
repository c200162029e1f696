"""Command-line entry point: produce a short chain and print each block.

Usage:
    hello-blocks                 # five blocks, as configured by CHAIN_LENGTH
    hello-blocks --count 3 --dump
"""
import argparse
from typing import List, Optional

from helloblocks.config import settings
from helloblocks.utils.chain import hash_block, produce_block, serialize_block
from helloblocks.utils.hexdump import hex_dump
from helloblocks.utils.logger import setup_logging

SEPARATOR = "-" * 64


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hello-blocks",
        description="Produce a hash-linked chain of blocks and print them",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=settings.CHAIN_LENGTH,
        help=f"number of blocks to produce (default: {settings.CHAIN_LENGTH})",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        default=settings.DUMP_BYTES,
        help="print the bytes of each block and the hash computed from them",
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="logging level")
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("--count must be non-negative")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger = setup_logging(args.log_level.upper(), settings.LOG_FORMAT)
    logger.info("Producing chain", extra={"height": args.count})

    prev_block = None
    prev_hash = hash_block(None)
    for n in range(1, args.count + 1):
        print(SEPARATOR)
        block = produce_block(prev_hash, prev_block)
        if args.dump:
            print(hex_dump(serialize_block(block)))
        prev_hash = hash_block(block)
        if args.dump:
            print(f"The hash of these bytes is {prev_hash}")
        print(f"Block {n}:  {block}")
        prev_block = block

    logger.info("Chain complete", extra={"height": args.count, "block_hash": prev_hash})
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
