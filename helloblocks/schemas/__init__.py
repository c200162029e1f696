"""Pydantic schemas for chain records"""
from helloblocks.schemas.block import MAX_HEIGHT, Block

__all__ = [
    "Block",
    "MAX_HEIGHT",
]
