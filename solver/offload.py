from __future__ import annotations

from typing import Sequence

import numpy as np

from game.secret_code import Code, all_codes
from solver.errors import BackendError
from solver.interop import BEST_DTYPE, decode_best, encode_codes
from solver.minimax import Best
from solver.solver_interface import BulkEvaluator

# never a real count, the largest partition holds at most 1296 codes
UNWRITTEN = 0xFFFF


def choose_offload(untried: Sequence[Code], backend: BulkEvaluator) -> Best:
    """
    Submit the whole minimax search to a bulk evaluator in one call and
    reduce its per-code results on the host.

    Args:
        untried (Sequence[Code]): The current candidate set.
        backend (BulkEvaluator): The compute backend.
    Returns:
        Best: (worst case count, code); the first minimum in code-space
        order, the same as the sequential scan.
    Raises:
        BackendError: If the backend fails or leaves a record unwritten.
        ValueError: If a returned record holds a malformed code.
    """
    encoded_untried = encode_codes(untried)
    count = np.uint16(len(encoded_untried))
    out = np.empty(len(all_codes()), dtype=BEST_DTYPE)
    out["count"] = UNWRITTEN
    out["code"] = UNWRITTEN

    try:
        backend.evaluate_all(encoded_untried, count, out)
    except Exception as exc:
        raise BackendError(f"bulk evaluator failed: {exc}") from exc

    unwritten = np.flatnonzero(out["count"] == UNWRITTEN)
    if unwritten.size:
        raise BackendError(
            f"bulk evaluator left {unwritten.size} of {len(out)} records unwritten"
        )

    # argmin returns the first occurrence of the minimum
    best_idx = int(np.argmin(out["count"]))
    return decode_best(out[best_idx])
