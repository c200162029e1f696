"""Cryptographic block chaining utilities.

Each block stores the SHA-256 digest of its predecessor. The digest covers a
canonical byte layout of the block: the raw bytes of ``prev_hash`` followed by
``height`` as an 8-byte little-endian unsigned integer. Any compatible
implementation must reproduce this layout byte for byte.
"""
import hashlib
from typing import List, Optional, Tuple

from helloblocks.schemas.block import Block
from helloblocks.utils.logger import logger

HEIGHT_SIZE = 8
HEIGHT_BYTE_ORDER = "little"

# Digest of "no previous block": same length as a real SHA-256 hex digest
NULL_HASH = "0" * 64


class DecodeError(ValueError):
    """Raised when a block's prev_hash is not valid hexadecimal text."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Error decoding block.prev_hash: {value!r}")


def serialize_block(block: Block) -> bytes:
    """Return the canonical bytes of ``block`` that get hashed.

    Args:
        block: Block to serialize.

    Returns:
        Decoded prev_hash bytes followed by the 8-byte little-endian height.

    Raises:
        DecodeError: If prev_hash has non-hex characters or an odd length.
    """
    try:
        prev_hash_bytes = bytes.fromhex(block.prev_hash)
    except ValueError as e:
        raise DecodeError(block.prev_hash) from e

    # bytes.fromhex skips whitespace between pairs; the digest text must not have any
    if len(prev_hash_bytes) * 2 != len(block.prev_hash):
        raise DecodeError(block.prev_hash)

    height_bytes = block.height.to_bytes(HEIGHT_SIZE, HEIGHT_BYTE_ORDER, signed=False)
    return prev_hash_bytes + height_bytes


def hash_block(block: Optional[Block]) -> str:
    """Return the SHA-256 hex digest of a block.

    ``hash_block(None)`` is not an error: it returns ``NULL_HASH`` so the first
    block of a chain can be produced the same way as every other block.

    Args:
        block: Block to hash, or None for "no previous block".

    Returns:
        64-character lowercase hex digest.

    Raises:
        DecodeError: If the block's prev_hash is not valid hex.
    """
    if block is None:
        return NULL_HASH

    block_bytes = serialize_block(block)
    block_hash = hashlib.sha256(block_bytes).hexdigest()

    logger.debug(
        "Hashed block",
        extra={"height": block.height, "prev_hash": block.prev_hash, "block_hash": block_hash},
    )
    return block_hash


def produce_block(prev_hash: str, prev_block: Optional[Block]) -> Block:
    """Extend the chain by one block.

    The caller computes ``prev_hash = hash_block(prev_block)`` and passes both.
    The pair is not cross-checked here, and nothing is hashed: hashing stays
    at the call site, and later block fields will follow the same route as
    ``prev_hash``.

    Args:
        prev_hash:  Result of ``hash_block(prev_block)``, copied verbatim.
        prev_block: The most recent block, or None when starting a new chain.

    Returns:
        The new block, at height 1 for a new chain.
    """
    height = 1 if prev_block is None else prev_block.height + 1
    block = Block(prev_hash=prev_hash, height=height)

    logger.debug("Produced block", extra={"height": block.height, "prev_hash": prev_hash})
    return block


def build_chain(count: int) -> List[Tuple[Block, str]]:
    """Produce ``count`` blocks starting from a new chain.

    Returns:
        (block, block_hash) pairs in height order.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    chain: List[Tuple[Block, str]] = []
    prev_block: Optional[Block] = None
    prev_hash = hash_block(None)
    for _ in range(count):
        block = produce_block(prev_hash, prev_block)
        prev_hash = hash_block(block)
        chain.append((block, prev_hash))
        prev_block = block
    return chain
