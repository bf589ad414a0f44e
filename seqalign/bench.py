"""Benchmarks measures on random sequence pairs."""
from typing import Dict, List, Sequence, Tuple

import argparse
import logging

import editdistance
import numpy as np
import progressbar

from seqalign import defaults
from seqalign import measures
from seqalign import utils


def random_pairs(rng: np.random.RandomState, alphabet: Sequence[str],
                 num_pairs: int, max_length: int) -> List[Tuple[str, str]]:
    """Pairs of random strings over `alphabet` with lengths in
    [0, `max_length`)."""
    alphabet = list(alphabet)

    def random_string():
        length = rng.randint(0, max_length)
        return "".join(rng.choice(alphabet, size=length))

    return [(random_string(), random_string()) for _ in range(num_pairs)]


def run_measure(measure: measures.Measure, pairs: Sequence[Tuple[str, str]],
                edit_scripts: bool = False) -> List[int]:
    """Aligns all pairs and returns their distances."""
    widgets = [progressbar.Bar(">"), " ", progressbar.ETA()]
    progress_bar = progressbar.ProgressBar(
        widgets=widgets, max_value=len(pairs)).start()
    distances = []
    for j, (source, target) in enumerate(pairs):
        alignment = measure.align(source, target)
        if edit_scripts:
            alignment.edit_script()
        distances.append(alignment.distance())
        progress_bar.update(j + 1)
    progress_bar.finish()
    return distances


def check_levenshtein(pairs: Sequence[Tuple[str, str]],
                      distances: Sequence[int]) -> None:
    """Compares unit-weight Levenshtein distances with `editdistance`."""
    mismatches = [(source, target, distance)
                  for (source, target), distance in zip(pairs, distances)
                  if editdistance.eval(source, target) != distance]
    if mismatches:
        raise RuntimeError(
            f"{len(mismatches)} Levenshtein distances disagree with "
            f"editdistance, e.g. {mismatches[0]}.")


def main(args: argparse.Namespace) -> Dict[str, float]:

    dargs = args.__dict__
    for key, value in dargs.items():
        logging.info("%s: %s", str(key).ljust(15), value)

    rng = np.random.RandomState(args.seed)
    pairs = random_pairs(rng, args.alphabet, args.pairs, args.max_length)

    timings = dict()
    for name in args.measure:
        measure = measures.from_name(name)
        logging.info("Aligning %d pairs with %r.", len(pairs), measure)
        with utils.Timer() as timer:
            distances = run_measure(measure, pairs, args.edit_scripts)
        timings[name] = timer.elapsed
        if name == "levenshtein":
            check_levenshtein(pairs, distances)
        logging.info("%s: mean distance %.3f, %.1f pairs/sec.", name,
                     np.mean(distances) if distances else 0.,
                     len(pairs) / max(timer.elapsed, 1e-9))
    return timings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Benchmark edit distance measures on random pairs.")

    parser.add_argument("--pairs", type=int, default=defaults.BENCH_PAIRS,
                        help="Number of random pairs.")
    parser.add_argument("--max-length", type=int,
                        default=defaults.BENCH_MAX_LENGTH,
                        help="Exclusive upper bound on sequence length.")
    parser.add_argument("--alphabet", type=str,
                        default=defaults.BENCH_ALPHABET,
                        help="Characters to draw sequences from.")
    parser.add_argument("--seed", type=int, default=defaults.BENCH_SEED,
                        help="Random seed.")
    parser.add_argument("--measure", type=str, nargs="+",
                        default=list(measures.MEASURE_MAPPING),
                        choices=measures.MEASURE_MAPPING.keys(),
                        help="Measures to benchmark.")
    parser.add_argument("--edit-scripts", action="store_true",
                        help="Also backtrack one edit script per pair.")
    return parser


if __name__ == "__main__":

    logging.basicConfig(level="INFO", format="%(levelname)s: %(message)s")

    main(build_parser().parse_args())
