"""
Fixed-width encoding shared by the host and the bulk evaluator backends.

A code is a 16-bit value made of four 4-bit nibbles, position 0 in the
lowest nibble, each holding the peg's ordinal (0-5). A best-result record
pairs a 16-bit worst-case count with a 16-bit encoded code.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from game.secret_code import ALL_PEGS, Code

NIBBLE_BITS = 4
NIBBLE_MASK = 0x000F
CODE_DTYPE = np.dtype("<u2")
BEST_DTYPE = np.dtype([("count", "<u2"), ("code", "<u2")])


def encode_code(code: Code) -> int:
    """
    Pack a code into 16 bits.

    Args:
        code (Code): The code to encode.
    Returns:
        int: p0 | p1 << 4 | p2 << 8 | p3 << 12
    """
    encoded = 0
    for pos, peg in enumerate(code):
        encoded |= peg.value << (pos * NIBBLE_BITS)
    return encoded


def decode_peg(nibble: int):
    if not 0 <= nibble < len(ALL_PEGS):
        raise ValueError(
            f"Malformed encoded peg value {nibble}; expected 0-{len(ALL_PEGS) - 1}"
        )
    return ALL_PEGS[nibble]


def decode_code(encoded: int) -> Code:
    """
    Unpack a 16-bit value into a code.

    Raises:
        ValueError: If a nibble is not a peg ordinal, which means host and
        backend disagree on the layout.
    """
    encoded = int(encoded)
    if not 0 <= encoded <= 0xFFFF:
        raise ValueError(f"Encoded code {encoded:#x} does not fit in 16 bits")
    return Code(
        *(
            decode_peg((encoded >> (pos * NIBBLE_BITS)) & NIBBLE_MASK)
            for pos in range(4)
        )
    )


def encode_codes(codes: Sequence[Code]) -> np.ndarray:
    """Encode a sequence of codes into a uint16 array."""
    return np.fromiter((encode_code(c) for c in codes), dtype=CODE_DTYPE, count=len(codes))


def code_ordinals(encoded: np.ndarray) -> np.ndarray:
    """
    Vectorized decode: (n,) uint16 codes -> (n, 4) uint8 peg ordinals.

    Raises:
        ValueError: If any nibble is outside 0-5.
    """
    encoded = np.asarray(encoded, dtype=CODE_DTYPE)
    shifts = np.arange(4, dtype=CODE_DTYPE) * NIBBLE_BITS
    ordinals = ((encoded[:, None] >> shifts) & NIBBLE_MASK).astype(np.uint8)
    if ordinals.size and ordinals.max() >= len(ALL_PEGS):
        bad = int(ordinals.max())
        raise ValueError(
            f"Malformed encoded peg value {bad}; expected 0-{len(ALL_PEGS) - 1}"
        )
    return ordinals


def encode_ordinals(ordinals: np.ndarray) -> np.ndarray:
    """Vectorized encode: (n, 4) peg ordinals -> (n,) uint16 codes."""
    shifts = np.arange(4, dtype=CODE_DTYPE) * NIBBLE_BITS
    return (ordinals.astype(CODE_DTYPE) << shifts).sum(axis=1, dtype=CODE_DTYPE)


def decode_best(record) -> tuple[int, Code]:
    """Turn one BEST_DTYPE record into (count, code)."""
    return int(record["count"]), decode_code(record["code"])
