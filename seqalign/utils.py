"""Utility functions and classes."""
from typing import Any, Iterable, Iterator, List, Optional, Sequence, TextIO, Tuple
import logging
import re
import time
import unicodedata

from seqalign import defaults
from seqalign.dynprog import EditScript
from seqalign.operations import Delete, Insert, Match, Substitute, Transpose


class OpenNormalize:

    def __init__(self, filename: str, normalize: bool, mode: str = "rt"):
        self.filename = filename
        self.file: Optional[TextIO] = None
        mode_pattern = re.compile(r"[arw]t?$")
        if not mode_pattern.match(mode):
            raise ValueError(f"Unexpected mode {mode_pattern.pattern}: {mode}.")
        self.mode = mode
        if normalize:
            form = "NFD" if self.mode.startswith("r") else "NFC"
            self.normalize = lambda line: unicodedata.normalize(form, line)
        else:
            self.normalize = lambda line: line

    def __enter__(self):
        self.file = open(self.filename, mode=self.mode, encoding="utf8")
        return self

    def __iter__(self):
        for line in self.file:
            yield self.normalize(line)

    def write(self, line: str):
        if not isinstance(line, str):
            raise ValueError(
                f"Line is not a unicode string ({type(line)}): {line}")
        return self.file.write(self.normalize(line))

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.file.close()


class Timer:

    def __init__(self):
        self.time = None
        self.elapsed = None

    def __enter__(self):
        self.time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.time() - self.time
        logging.info("\t...finished in %.3f sec.", self.elapsed)


def read_pairs(lines: Iterable[str],
               separator: str = defaults.PAIR_SEPARATOR) -> Iterator[Tuple[str, str]]:
    """Yields (source, target) pairs from `source<TAB>target` lines. Empty
    lines are skipped."""
    for line_number, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        if not line:
            continue
        fields = line.split(separator)
        if len(fields) != 2:
            raise ValueError(
                f"Line {line_number}: expected 2 fields, got {len(fields)}: "
                f"{line!r}")
        yield fields[0], fields[1]


def apply_script(source: Sequence[Any], target: Sequence[Any],
                 script: EditScript) -> List[Any]:
    """Replays an edit script on `source`.

    Elements a step introduces (insertions, substitutions) are taken from
    `target` at the step's target index. Returns the edited sequence."""
    output = []
    position = 0
    for step in script:
        operation, i, j = step.operation, step.source_idx, step.target_idx
        if i != position:
            raise ValueError(
                f"Step {step} does not continue at source index {position}.")
        if isinstance(operation, Delete):
            position += 1
        elif isinstance(operation, Insert):
            output.append(target[j])
        elif isinstance(operation, Match):
            output.append(source[i])
            position += 1
        elif isinstance(operation, Substitute):
            output.append(target[j])
            position += 1
        elif isinstance(operation, Transpose):
            output.extend((source[i + 1], source[i]))
            position += 2
        else:
            raise ValueError(f"Unknown operation!: {operation}!")
    if position != len(source):
        raise ValueError(
            f"Script consumed {position} of {len(source)} source elements.")
    return output


def script_cost(script: EditScript) -> int:
    return sum(step.operation.weight for step in script)


def format_script(script: EditScript,
                  separator: str = defaults.SCRIPT_SEPARATOR) -> str:
    return separator.join(str(step.operation) for step in script)
