"""Cost matrix construction and backtracking."""
from typing import Any, List, Optional, Sequence, Set, Tuple
import collections
import logging

import numpy as np

from seqalign.operations import (
    MAX_COST, Cell, IndexedOperation, Match, Operation, SeqPair)


EditScript = Tuple[IndexedOperation, ...]


class SeqAlignError(Exception):
    pass


class NoApplicableOperationError(SeqAlignError):
    """A cost matrix cell could not be reached by any operation of the
    measure. The measure needs at least an insert and a delete."""


class BacktrackError(SeqAlignError):
    """Backtracking did not arrive at cell (0, 0). Some operation's `cost`
    and `backtrack` disagree."""


def best_cost(operations: Sequence[Operation], pair: SeqPair,
              matrix: np.ndarray, source_idx: int,
              target_idx: int) -> Optional[int]:
    best = None
    for operation in operations:
        cost = operation.cost(pair, matrix, source_idx, target_idx)
        if cost is not None and (best is None or cost < best):
            best = cost
    return best


def backtracks(operations: Sequence[Operation], pair: SeqPair,
               matrix: np.ndarray, source_idx: int,
               target_idx: int) -> List[Operation]:
    """All operations, in measure order, that produce the value stored at
    (`source_idx`, `target_idx`)."""
    value = matrix[source_idx, target_idx]
    return [operation for operation in operations
            if operation.cost(pair, matrix, source_idx, target_idx) == value]


def _fill_cell(operations, pair, matrix, source_idx, target_idx):
    cost = best_cost(operations, pair, matrix, source_idx, target_idx)
    if cost is None:
        raise NoApplicableOperationError(
            f"No applicable operation at cell ({source_idx}, {target_idx}).")
    if cost > MAX_COST:
        raise SeqAlignError(
            f"Cost {cost} at cell ({source_idx}, {target_idx}) exceeds "
            f"{MAX_COST}.")
    matrix[source_idx, target_idx] = cost


def cost_matrix(operations: Sequence[Operation], pair: SeqPair) -> np.ndarray:
    """Fills the (|source|+1) x (|target|+1) matrix of minimal prefix
    alignment costs. The returned array is read-only."""

    operations = tuple(operations)
    M, N = len(pair.source), len(pair.target)
    logging.debug("Filling %dx%d cost matrix with %d operations.",
                  M + 1, N + 1, len(operations))
    matrix = np.zeros((M + 1, N + 1), dtype=np.int64)
    # cell (0, 0) is the base case and stays 0
    for j in range(1, N + 1):
        _fill_cell(operations, pair, matrix, 0, j)
    for i in range(1, M + 1):
        for j in range(N + 1):
            _fill_cell(operations, pair, matrix, i, j)
    matrix.setflags(write=False)
    return matrix


class Alignment:
    """The result of aligning two sequences under a measure.

    Args:
        measure: The measure the sequences were aligned with.
        pair: The aligned sequences.
        matrix: The filled cost matrix.
    """

    def __init__(self, measure, pair: SeqPair, matrix: np.ndarray) -> None:
        self._measure = measure
        self._pair = pair
        self._matrix = matrix
        self._operations = tuple(measure.operations())

    @property
    def measure(self):
        return self._measure

    def distance(self) -> int:
        return int(self._matrix[-1, -1])

    def cost_matrix(self) -> np.ndarray:
        return self._matrix

    def seq_pair(self) -> SeqPair:
        return self._pair

    def _step(self, operation: Operation, source_idx: int,
              target_idx: int) -> Cell:
        cell = operation.backtrack(self._pair, source_idx, target_idx)
        if cell is None:
            raise BacktrackError(
                f"Cannot backtrack with {operation!r} from cell "
                f"({source_idx}, {target_idx}).")
        from_source_idx, from_target_idx = cell
        if not (0 <= from_source_idx <= source_idx and
                0 <= from_target_idx <= target_idx and
                cell != (source_idx, target_idx)):
            raise BacktrackError(
                f"{operation!r} backtracks from cell ({source_idx}, "
                f"{target_idx}) to {cell}, which does not precede it.")
        return cell

    def edit_script(self) -> EditScript:
        """Computes one optimal edit script.

        Ties are broken by the order of the measure's operations: the first
        operation that reproduces a cell's cost is taken."""

        source_idx, target_idx = self._matrix.shape[0] - 1, self._matrix.shape[1] - 1
        script = []
        while (source_idx, target_idx) != (0, 0):
            operations = backtracks(self._operations, self._pair, self._matrix,
                                    source_idx, target_idx)
            if not operations:
                raise BacktrackError(
                    f"Cannot backtrack to cell (0, 0): no operation "
                    f"reproduces cell ({source_idx}, {target_idx}).")
            operation = operations[0]
            source_idx, target_idx = self._step(operation, source_idx, target_idx)
            script.append(IndexedOperation(operation, source_idx, target_idx))
        return tuple(reversed(script))

    def edit_scripts(self) -> Set[EditScript]:
        """Computes all optimal edit scripts.

        Breadth-first search over partial scripts. The number of scripts, and
        with it the run time, grows exponentially with the number of ties."""

        M, N = self._matrix.shape[0] - 1, self._matrix.shape[1] - 1
        if (M, N) == (0, 0):
            return {()}
        scripts = set()
        queue = collections.deque([(M, N, [])])
        expanded = 0
        while queue:
            source_idx, target_idx, partial = queue.popleft()
            expanded += 1
            operations = backtracks(self._operations, self._pair, self._matrix,
                                    source_idx, target_idx)
            if not operations:
                raise BacktrackError(
                    f"Cannot backtrack to cell (0, 0): no operation "
                    f"reproduces cell ({source_idx}, {target_idx}).")
            for operation in operations:
                cell = self._step(operation, source_idx, target_idx)
                steps = partial + [IndexedOperation(operation, *cell)]
                if cell == (0, 0):
                    scripts.add(tuple(reversed(steps)))
                else:
                    queue.append((*cell, steps))
        logging.debug("Found %d optimal edit scripts (%d states expanded).",
                      len(scripts), expanded)
        return scripts

    def aligned_indices(self) -> List[Tuple[int, int]]:
        """Source and target indices of the elements matched in
        `edit_script`."""
        return [(step.source_idx, step.target_idx) for step in self.edit_script()
                if isinstance(step.operation, Match)]

    def __repr__(self):
        return (f"Alignment(measure={self._measure!r}, "
                f"distance={self.distance()})")


def align(measure, source: Sequence[Any], target: Sequence[Any]) -> Alignment:
    """Aligns `source` with `target` under `measure`."""
    pair = SeqPair(source, target)
    matrix = cost_matrix(measure.operations(), pair)
    return Alignment(measure, pair, matrix)
