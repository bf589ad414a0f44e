"""Edit operations and the archetypes measures are built from."""
from typing import Any, Optional, Sequence, Tuple
import abc
import dataclasses

import numpy as np


Cell = Tuple[int, int]


@dataclasses.dataclass(frozen=True)
class SeqPair:
    """A pairing of a source and a target sequence."""
    source: Sequence[Any]
    target: Sequence[Any]


class Operation(abc.ABC):
    """An edit rule with a cost and a predecessor-cell rule.

    Implementations must be hashable and compare structurally, and must agree
    with themselves: `backtrack` returns a cell exactly when `cost` can return
    a value, and `cost` reads the matrix at that cell."""

    name = "operation"

    @abc.abstractmethod
    def backtrack(self, pair: SeqPair, source_idx: int,
                  target_idx: int) -> Optional[Cell]:
        """Return the cell this operation moves from to reach
        (`source_idx`, `target_idx`), or None if there is no such cell."""
        raise NotImplementedError

    @abc.abstractmethod
    def cost(self, pair: SeqPair, matrix: np.ndarray, source_idx: int,
             target_idx: int) -> Optional[int]:
        """Return the cost of reaching (`source_idx`, `target_idx`) with this
        operation, or None if the operation cannot be applied there."""
        raise NotImplementedError

    def __str__(self):
        return self.name


@dataclasses.dataclass(frozen=True)
class IndexedOperation:
    """An operation together with the cell it was applied from.

    The indices are the matrix cell before the step, so e.g. a match at
    (3, 7) aligns source[3] with target[7]."""
    operation: Operation
    source_idx: int
    target_idx: int

    def __str__(self):
        return f"{self.operation} {self.source_idx} {self.target_idx}"


MAX_COST = int(np.iinfo(np.int64).max)


def _check_weight(operation: Operation, weight: Any) -> int:
    if isinstance(weight, bool) or not isinstance(weight, (int, np.integer)):
        raise ValueError(
            f"{type(operation).__name__}: weight={weight!r} is not an integer")
    weight = int(weight)
    if weight < 0:
        raise ValueError(
            f"{type(operation).__name__}: weight={weight} is negative")
    if weight > MAX_COST:
        raise ValueError(
            f"{type(operation).__name__}: weight={weight} exceeds {MAX_COST}")
    return weight


@dataclasses.dataclass(frozen=True, eq=True)
class Delete(Operation):
    weight: int = 1

    name = "delete"

    def __post_init__(self):
        object.__setattr__(self, "weight", _check_weight(self, self.weight))

    def backtrack(self, pair, source_idx, target_idx):
        if source_idx > 0:
            return source_idx - 1, target_idx
        return None

    def cost(self, pair, matrix, source_idx, target_idx):
        cell = self.backtrack(pair, source_idx, target_idx)
        if cell is None:
            return None
        return int(matrix[cell]) + self.weight


@dataclasses.dataclass(frozen=True, eq=True)
class Insert(Operation):
    weight: int = 1

    name = "insert"

    def __post_init__(self):
        object.__setattr__(self, "weight", _check_weight(self, self.weight))

    def backtrack(self, pair, source_idx, target_idx):
        if target_idx > 0:
            return source_idx, target_idx - 1
        return None

    def cost(self, pair, matrix, source_idx, target_idx):
        cell = self.backtrack(pair, source_idx, target_idx)
        if cell is None:
            return None
        return int(matrix[cell]) + self.weight


@dataclasses.dataclass(frozen=True, eq=True)
class Match(Operation):

    name = "match"

    @property
    def weight(self) -> int:
        return 0

    def backtrack(self, pair, source_idx, target_idx):
        if source_idx > 0 and target_idx > 0:
            return source_idx - 1, target_idx - 1
        return None

    def cost(self, pair, matrix, source_idx, target_idx):
        cell = self.backtrack(pair, source_idx, target_idx)
        if cell is None:
            return None
        from_source_idx, from_target_idx = cell
        if pair.source[from_source_idx] != pair.target[from_target_idx]:
            return None
        return int(matrix[cell])


@dataclasses.dataclass(frozen=True, eq=True)
class Substitute(Operation):
    weight: int = 1

    name = "substitute"

    def __post_init__(self):
        object.__setattr__(self, "weight", _check_weight(self, self.weight))

    def backtrack(self, pair, source_idx, target_idx):
        if source_idx > 0 and target_idx > 0:
            return source_idx - 1, target_idx - 1
        return None

    def cost(self, pair, matrix, source_idx, target_idx):
        cell = self.backtrack(pair, source_idx, target_idx)
        if cell is None:
            return None
        return int(matrix[cell]) + self.weight


@dataclasses.dataclass(frozen=True, eq=True)
class Transpose(Operation):
    """Swap of two adjacent elements (xy -> yx)."""
    weight: int = 1

    name = "transpose"

    def __post_init__(self):
        object.__setattr__(self, "weight", _check_weight(self, self.weight))

    def backtrack(self, pair, source_idx, target_idx):
        if source_idx >= 2 and target_idx >= 2:
            return source_idx - 2, target_idx - 2
        return None

    def cost(self, pair, matrix, source_idx, target_idx):
        cell = self.backtrack(pair, source_idx, target_idx)
        if cell is None:
            return None
        from_source_idx, from_target_idx = cell
        if (pair.source[from_source_idx] == pair.target[from_target_idx + 1] and
                pair.source[from_source_idx + 1] == pair.target[from_target_idx]):
            return int(matrix[cell]) + self.weight
        return None
