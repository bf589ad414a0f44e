"""Edit distances and edit scripts over arbitrary sequences.

A measure is an ordered set of weighted edit operations built from the
archetypes in `seqalign.operations`. Aligning two sequences under a measure
fills a cost matrix, from which the distance and one or all optimal edit
scripts are read.
"""

from seqalign.dynprog import (Alignment, BacktrackError, EditScript,
                              NoApplicableOperationError, SeqAlignError, align)
from seqalign.measures import LCS, Levenshtein, LevenshteinDamerau, Measure
from seqalign.operations import (Delete, IndexedOperation, Insert, Match,
                                 Operation, SeqPair, Substitute, Transpose)

__all__ = [
    "align", "Alignment", "EditScript", "Measure", "SeqPair",
    "Operation", "IndexedOperation",
    "Delete", "Insert", "Match", "Substitute", "Transpose",
    "Levenshtein", "LevenshteinDamerau", "LCS",
    "SeqAlignError", "NoApplicableOperationError", "BacktrackError",
]
