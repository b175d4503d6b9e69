from __future__ import annotations

from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import Callable, Literal, Sequence

from game.secret_code import Code, all_codes
from solver.errors import BackendError
from solver.minimax import Best, best_in_chunk, reduce_bests

ExecutorKind = Literal["thread", "process"]


def choose_sequential(untried: Sequence[Code]) -> Best:
    """Single scan over the whole code space."""
    return best_in_chunk(untried, all_codes())


def chunk_codes(codes: Sequence[Code], num_chunks: int) -> list[Sequence[Code]]:
    """
    Split `codes` into `num_chunks` contiguous slices of equal size, the last
    one possibly shorter. Concatenating the chunks gives back `codes`.

    Args:
        codes (Sequence[Code]): The codes to split, in scan order.
        num_chunks (int): Number of slices wanted (>= 1).
    Returns:
        list[Sequence[Code]]: The non-empty chunks, in order.
    """
    if num_chunks < 1:
        raise ValueError(f"num_chunks must be >= 1, got {num_chunks}")
    size = max(1, -(-len(codes) // num_chunks))
    return [codes[i : i + size] for i in range(0, len(codes), size)]


def _make_executor(kind: ExecutorKind, max_workers: int) -> Executor:
    if kind == "thread":
        return ThreadPoolExecutor(max_workers=max_workers)
    if kind == "process":
        return ProcessPoolExecutor(max_workers=max_workers)
    raise ValueError(f"Unknown executor: {kind}")


def choose_multi_worker(
    untried: Sequence[Code],
    *,
    num_workers: int = 8,
    executor: ExecutorKind = "thread",
    log: Callable[[str], None] | None = None,
) -> Best:
    """
    Fork-join minimax: one task per chunk of the code space, each returning
    its local best; the caller waits for all of them and reduces.

    Args:
        untried (Sequence[Code]): The current candidate set (read only).
        num_workers (int): Number of chunks and pool workers.
        executor (ExecutorKind): "thread" or "process" pool.
        log (Callable[[str], None], optional): Trace output.
    Returns:
        Best: (worst case count, code), identical to choose_sequential().
    Raises:
        BackendError: If any worker task raised.
    """
    snapshot = tuple(untried)
    chunks = chunk_codes(all_codes(), num_workers)

    with _make_executor(executor, num_workers) as pool:
        futures = [pool.submit(best_in_chunk, snapshot, chunk) for chunk in chunks]
        # results are collected in chunk order, not completion order
        bests = []
        for idx, fut in enumerate(futures):
            try:
                bests.append(fut.result())
            except Exception as exc:
                for f in futures:
                    f.cancel()
                raise BackendError(f"worker for chunk {idx} failed: {exc}") from exc

    if log is not None:
        log(f"bests: {[(count, str(code)) for count, code in bests]}")
    best = reduce_bests(bests)
    if log is not None:
        log(f"best: ({best[0]}, {best[1]})")
    return best
