"""Pytest configuration and fixtures"""
import pytest

from helloblocks.schemas.block import Block
from helloblocks.utils.chain import NULL_HASH

# sha256 over the canonical bytes of blocks 1..5 of a new chain
KNOWN_CHAIN_HASHES = [
    "19ea44be89eece0fd4ec7482049f472a11af19384bffb38a88e77b3b1dd54c19",
    "166337d234a1d4821dc870005449dd9991b19394878ddd4a1e634e851d68d363",
    "f2b319426c4e9b8c4bd2ddd4406417111db6738689c2479a66b7fe41fe263e3f",
    "ab7f53f6a34ec1b64b9530dea29d4d17c47f56b8175549945e324fb8dcd27c02",
    "ade9c0a379703c68a69d2706dbcd55a35df829c8fd2c3ea08175d8ce89bae304",
]


@pytest.fixture
def first_block() -> Block:
    """First block of a new chain"""
    return Block(prev_hash=NULL_HASH, height=1)


@pytest.fixture
def second_block() -> Block:
    """Second block of a new chain"""
    return Block(prev_hash=KNOWN_CHAIN_HASHES[0], height=2)


@pytest.fixture
def known_hashes() -> list:
    """Expected block hashes for a five-block chain"""
    return list(KNOWN_CHAIN_HASHES)
