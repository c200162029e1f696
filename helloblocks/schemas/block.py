"""Block schema"""
from pydantic import BaseModel, Field

# Heights are serialized as unsigned 64-bit integers
MAX_HEIGHT = 2**64 - 1


class Block(BaseModel):
    """One link in the chain: the digest of the previous block plus a height.

    ``prev_hash`` is not checked for hex format here. Blocks built by
    ``produce_block`` carry a digest from ``hash_block``; malformed text in a
    hand-built block surfaces as ``DecodeError`` when the block is hashed.
    """

    prev_hash: str = Field(..., description="Hex digest of the previous block")
    height: int = Field(..., ge=0, le=MAX_HEIGHT, description="Position in the chain, 1 for the first block")

    class Config:
        frozen = True

    def __str__(self) -> str:
        return f"{{PrevHash:{self.prev_hash} Height:{self.height}}}"
