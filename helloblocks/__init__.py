"""hello-blocks - a minimal hash-linked chain of blocks"""
from helloblocks.schemas.block import Block
from helloblocks.utils.chain import (
    NULL_HASH,
    DecodeError,
    build_chain,
    hash_block,
    produce_block,
    serialize_block,
)

__version__ = "0.1.0"

__all__ = [
    "Block",
    "NULL_HASH",
    "DecodeError",
    "build_chain",
    "hash_block",
    "produce_block",
    "serialize_block",
]
