"""Sequence distance measures."""
from typing import Any, Dict, Sequence, Tuple, Type
import abc
import inspect

from seqalign import defaults
from seqalign import dynprog
from seqalign.operations import (Delete, Insert, Match, Operation, Substitute,
                                 Transpose)


class Measure(abc.ABC):
    """An edit distance definition: a fixed, ordered set of operations.

    The order of `operations` is part of the contract: when several
    operations reproduce a cost matrix cell, `Alignment.edit_script` takes the
    one that comes first."""

    @abc.abstractmethod
    def operations(self) -> Tuple[Operation, ...]:
        raise NotImplementedError

    def align(self, source: Sequence[Any],
              target: Sequence[Any]) -> dynprog.Alignment:
        return dynprog.align(self, source, target)

    def __repr__(self):
        operations = ", ".join(map(repr, self.operations()))
        return f"{type(self).__name__}({operations})"


class Levenshtein(Measure):
    """Levenshtein distance: insert, delete, match, substitute."""

    def __init__(self, insert_cost: int = defaults.INSERT_COST,
                 delete_cost: int = defaults.DELETE_COST,
                 substitute_cost: int = defaults.SUBSTITUTE_COST) -> None:
        self._operations = (Insert(insert_cost), Delete(delete_cost), Match(),
                            Substitute(substitute_cost))

    def operations(self):
        return self._operations


class LevenshteinDamerau(Measure):
    """Levenshtein distance with transpositions of adjacent elements
    (xy -> yx)."""

    def __init__(self, insert_cost: int = defaults.INSERT_COST,
                 delete_cost: int = defaults.DELETE_COST,
                 substitute_cost: int = defaults.SUBSTITUTE_COST,
                 transpose_cost: int = defaults.TRANSPOSE_COST) -> None:
        self._operations = (Insert(insert_cost), Delete(delete_cost), Match(),
                            Substitute(substitute_cost),
                            Transpose(transpose_cost))

    def operations(self):
        return self._operations


class LCS(Measure):
    """Longest common subsequence alignment: insert, delete, match.

    The matches of an edit script form a longest common subsequence, the
    distance is the cost of the remaining insertions and deletions."""

    def __init__(self, insert_cost: int = defaults.INSERT_COST,
                 delete_cost: int = defaults.DELETE_COST) -> None:
        self._operations = (Insert(insert_cost), Delete(delete_cost), Match())

    def operations(self):
        return self._operations


MEASURE_MAPPING: Dict[str, Type[Measure]] = {
    "levenshtein": Levenshtein,
    "levenshtein-damerau": LevenshteinDamerau,
    "lcs": LCS,
}


def from_name(name: str, **costs: int) -> Measure:
    """Builds a measure from its CLI name. Costs the measure does not use
    (e.g. `substitute_cost` for LCS) are ignored."""
    try:
        measure_class = MEASURE_MAPPING[name]
    except KeyError:
        raise ValueError(
            f"Unknown measure: {name}. "
            f"Choose from {sorted(MEASURE_MAPPING)}.") from None
    accepted = inspect.signature(measure_class).parameters
    return measure_class(**{k: v for k, v in costs.items() if k in accepted})
