from __future__ import annotations

import random
from enum import Enum
from functools import lru_cache
from itertools import product
from typing import NamedTuple

from .ruleset import DEFAULT_RULES


class Peg(Enum):
    """
    One of the six peg colors. The value is the peg's ordinal, which fixes
    the enumeration order of the code space and the 4-bit interop encoding.
    """

    RED = 0
    GREEN = 1
    BLUE = 2
    YELLOW = 3
    BLACK = 4
    WHITE = 5

    @property
    def symbol(self) -> str:
        return DEFAULT_RULES["colors"][self.value]

    @classmethod
    def from_symbol(cls, symbol: str) -> Peg:
        """
        Look up a peg by its one-letter symbol (case-sensitive, 'B' is blue
        and 'b' is black).

        Args:
            symbol (str): One of the symbols in the ruleset's color list.
        Returns:
            Peg: The matching peg.
        Raises:
            ValueError: If the symbol is not a known color.
        """
        try:
            return cls(DEFAULT_RULES["colors"].index(symbol))
        except ValueError:
            allowed = ", ".join(DEFAULT_RULES["colors"])
            raise ValueError(
                f"Invalid color '{symbol}'. Allowed: {allowed}."
            ) from None

    def __str__(self):
        return self.symbol


ALL_PEGS: tuple[Peg, ...] = tuple(Peg)


class Code(NamedTuple):
    """
    An immutable sequence of four pegs. Equality and hashing are
    position-wise (tuple semantics).
    """

    p0: Peg
    p1: Peg
    p2: Peg
    p3: Peg

    @property
    def pegs(self) -> tuple[Peg, ...]:
        return tuple(self)

    @classmethod
    def parse(cls, text: str) -> Code:
        """
        Parse a code from its symbols, e.g. 'RRGG' or 'R-R-G-G'.

        Args:
            text (str): The code as peg symbols, optionally separated by
            dashes or spaces.
        Returns:
            Code: The parsed code.
        Raises:
            ValueError: On a wrong length or an unknown symbol.
        """
        symbols = [c for c in text if c not in "- "]
        length = DEFAULT_RULES["code_length"]
        if len(symbols) != length:
            raise ValueError(
                f"Code length must be {length}, but got {len(symbols)}."
            )
        return cls(*(Peg.from_symbol(s) for s in symbols))

    def as_string(self) -> str:
        """Compact form, e.g. 'RRGG'."""
        return "".join(p.symbol for p in self)

    def __str__(self):
        return "-".join(p.symbol for p in self)


@lru_cache(maxsize=None)
def all_codes() -> tuple[Code, ...]:
    """
    The full code space, 6**4 = 1296 codes, computed once.

    Enumeration order is significant: position 0 varies slowest and position 3
    fastest, each position running through the pegs in ordinal order. This
    order is the scan order of every guess-selection strategy and therefore
    decides ties.
    """
    return tuple(
        Code(*pegs) for pegs in product(ALL_PEGS, repeat=DEFAULT_RULES["code_length"])
    )


def random_secret(rng: random.Random | None = None) -> Code:
    """
    Pick a secret uniformly at random from the code space.

    Args:
        rng (random.Random, optional): Source of randomness, for reproducible
        games. Defaults to the module-level generator.
    Returns:
        Code: The secret.
    """
    return (rng or random).choice(all_codes())


OPENING_GUESS = Code.parse(DEFAULT_RULES["opening_guess"])
