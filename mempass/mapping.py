"""
Bit-level helpers: turn raw measurement bits into uniformly spread floats.

Used by the quantum source, which produces bits rather than numbers.
"""

from __future__ import annotations

import hashlib
from typing import List

BITS_PER_FLOAT = 32
# One SHA-256 digest.
BLOCK_BITS = 256


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes, most significant bit first.
    A trailing partial byte is padded with zeros.
    """
    if not bits:
        return b""

    pad_len = (8 - (len(bits) % 8)) % 8
    padded = list(bits) + [0] * pad_len

    out = bytearray()
    for i in range(0, len(padded), 8):
        byte = 0
        for bit in padded[i : i + 8]:
            byte = (byte << 1) | bit
        out.append(byte)
    return bytes(out)


def bytes_to_bits(data: bytes) -> List[int]:
    return [(byte >> (7 - i)) & 1 for byte in data for i in range(8)]


def amplify_entropy(bits: List[int], rounds: int = 1) -> List[int]:
    """
    Hash `bits` with SHA-256 `rounds` times and return the digest as 256 bits.
    Zero rounds returns the input unchanged.
    """
    if rounds <= 0:
        return list(bits)

    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()
    return bytes_to_bits(data)


def amplify_blocks(bits: List[int], rounds: int = 1) -> List[int]:
    """
    Whiten a long bitstream 256 bits at a time so the output is as long as
    the input (the final block is cut back to its original length).
    """
    if rounds <= 0:
        return list(bits)

    out: List[int] = []
    for i in range(0, len(bits), BLOCK_BITS):
        block = bits[i : i + BLOCK_BITS]
        out.extend(amplify_entropy(block, rounds)[: len(block)])
    return out


def xor_streams(streams: List[List[int]]) -> List[int]:
    """Combine equally long bitstreams bit by bit."""
    if not streams:
        return []
    combined = list(streams[0])
    for stream in streams[1:]:
        if len(stream) != len(combined):
            raise ValueError("bitstreams must all be the same length to be combined")
        combined = [a ^ b for a, b in zip(combined, stream)]
    return combined


def bits_to_unit_floats(bits: List[int], bits_per_float: int = BITS_PER_FLOAT) -> List[float]:
    """
    Read consecutive `bits_per_float`-bit groups as unsigned integers and
    scale each into [0, 1). Leftover bits that do not fill a group are dropped.
    """
    scale = 1 << bits_per_float
    floats = []
    for i in range(0, len(bits) - bits_per_float + 1, bits_per_float):
        value = 0
        for bit in bits[i : i + bits_per_float]:
            value = (value << 1) | bit
        floats.append(value / scale)
    return floats
