from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

import numpy as np

from game.secret_code import ALL_PEGS, all_codes
from solver.interop import (
    BEST_DTYPE,
    code_ordinals,
    decode_code,
    encode_code,
    encode_codes,
)
from solver.minimax import worst_case

# score index = blacks * SCORE_STRIDE + whites
SCORE_STRIDE = 5
NUM_SCORE_SLOTS = SCORE_STRIDE * SCORE_STRIDE


class BulkEvaluator(Protocol):
    """
    Offload backend contract: compute the worst case of every code in the
    code space against one candidate set, as one data-parallel batch.
    """

    def evaluate_all(
        self, encoded_untried: np.ndarray, count: np.uint16, out: np.ndarray
    ) -> None:
        """
        Args:
            encoded_untried: uint16 array of encoded candidate codes.
            count: Number of valid entries in encoded_untried.
            out: Pre-allocated BEST_DTYPE array with one record per code in
            the code space, in enumeration order. Every record must be
            written before the call returns.
        """
        ...


def _check_out(out: np.ndarray) -> None:
    if out.dtype != BEST_DTYPE or out.shape != (len(all_codes()),):
        raise ValueError(
            f"Output buffer must be {len(all_codes())} records of {BEST_DTYPE}, "
            f"got shape {out.shape} of {out.dtype}"
        )


class NumpyBulkEvaluator:
    """
    Vectorized backend. Builds the full |code space| x |untried| score-index
    matrix with array operations and histograms each row.
    """

    def __init__(self):
        self.space_encoded = encode_codes(all_codes())
        self.space_ordinals = code_ordinals(self.space_encoded)
        self.space_color_counts = self._color_counts(self.space_ordinals)

    @staticmethod
    def _color_counts(ordinals: np.ndarray) -> np.ndarray:
        # (n, 4) ordinals -> (n, 6) occurrences of each peg
        pegs = np.arange(len(ALL_PEGS), dtype=np.uint8)
        return (ordinals[:, :, None] == pegs).sum(axis=1, dtype=np.uint8)

    def score_indices(self, untried_ordinals: np.ndarray) -> np.ndarray:
        """
        Score index (blacks * 5 + whites) of every code-space member against
        every candidate, shape (|code space|, |untried|).
        """
        blacks = (
            self.space_ordinals[:, None, :] == untried_ordinals[None, :, :]
        ).sum(axis=2, dtype=np.uint8)
        untried_counts = self._color_counts(untried_ordinals)
        sum_of_mins = np.minimum(
            self.space_color_counts[:, None, :], untried_counts[None, :, :]
        ).sum(axis=2, dtype=np.uint8)
        blacks = blacks.astype(np.intp)
        whites = sum_of_mins.astype(np.intp) - blacks
        return blacks * SCORE_STRIDE + whites

    def evaluate_all(
        self, encoded_untried: np.ndarray, count: np.uint16, out: np.ndarray
    ) -> None:
        _check_out(out)
        n = int(count)
        if n > len(encoded_untried):
            raise ValueError(f"count {n} exceeds buffer of {len(encoded_untried)}")

        untried_ordinals = code_ordinals(encoded_untried[:n])
        indices = self.score_indices(untried_ordinals)

        num_codes = len(self.space_encoded)
        offsets = np.arange(num_codes, dtype=np.intp)[:, None] * NUM_SCORE_SLOTS
        hist = np.bincount(
            (indices + offsets).ravel(), minlength=num_codes * NUM_SCORE_SLOTS
        ).reshape(num_codes, NUM_SCORE_SLOTS)

        out["count"] = hist.max(axis=1)
        out["code"] = self.space_encoded


class PythonBulkEvaluator:
    """Reference backend: the sequential worst-case scan, one code at a time."""

    def evaluate_all(
        self, encoded_untried: np.ndarray, count: np.uint16, out: np.ndarray
    ) -> None:
        _check_out(out)
        untried = [decode_code(e) for e in encoded_untried[: int(count)]]
        for i, code in enumerate(all_codes()):
            out[i] = (worst_case(code, untried), encode_code(code))


@dataclass(frozen=True)
class BackendSpec:
    name: str
    factory: Callable[[], BulkEvaluator]
    description: str


BACKENDS: dict[str, BackendSpec] = {
    "numpy": BackendSpec(
        name="numpy",
        factory=NumpyBulkEvaluator,
        description="vectorized numpy batch over the whole code space",
    ),
    "python": BackendSpec(
        name="python",
        factory=PythonBulkEvaluator,
        description="pure Python reference scan",
    ),
}

_instances: dict[str, BulkEvaluator] = {}


def get_backend(name: str) -> BulkEvaluator:
    """
    Return the (shared) bulk evaluator registered under `name`.

    Raises:
        ValueError: If no backend has that name.
    """
    spec = BACKENDS.get(name)
    if spec is None:
        raise ValueError(f"Unknown backend: {name}. Available: {sorted(BACKENDS)}")
    if name not in _instances:
        _instances[name] = spec.factory()
    return _instances[name]
