"""Aligns tab-separated source/target pairs and writes edit scripts."""
from typing import List, Sequence

import argparse
import logging

from seqalign import defaults
from seqalign import measures
from seqalign import utils


def _split(line: str, tokenize: bool) -> Sequence[str]:
    return line.split() if tokenize else line


def align_pairs(measure: measures.Measure, pairs, all_scripts: bool = False,
                tokenize: bool = False) -> List[str]:
    """Returns one output line per pair, or per optimal script with
    `all_scripts`: source, target, distance, and the operation names."""
    lines = []
    for source, target in pairs:
        alignment = measure.align(_split(source, tokenize),
                                  _split(target, tokenize))
        distance = alignment.distance()
        if all_scripts:
            scripts = sorted(map(utils.format_script, alignment.edit_scripts()))
        else:
            scripts = [utils.format_script(alignment.edit_script())]
        for script in scripts:
            lines.append(defaults.PAIR_SEPARATOR.join(
                (source, target, str(distance), script)))
    return lines


def main(args: argparse.Namespace):

    dargs = args.__dict__
    for key, value in dargs.items():
        logging.info("%s: %s", str(key).ljust(15), value)

    measure = measures.from_name(
        args.measure, insert_cost=args.insert_cost,
        delete_cost=args.delete_cost, substitute_cost=args.substitute_cost,
        transpose_cost=args.transpose_cost)
    logging.info("Aligning with %r.", measure)

    with utils.OpenNormalize(args.input, args.nfd) as f:
        pairs = list(utils.read_pairs(f))
    logging.info("Read %d pairs from %s.", len(pairs), args.input)

    with utils.Timer():
        lines = align_pairs(measure, pairs, all_scripts=args.all_scripts,
                            tokenize=args.tokenize)

    with utils.OpenNormalize(args.output, args.nfd, mode="w") as w:
        for line in lines:
            w.write(line + "\n")
    logging.info("Wrote %d lines to %s.", len(lines), args.output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Align sequence pairs and write their edit scripts.")

    parser.add_argument("--input", type=str, required=True,
                        help="Path to tab-separated source/target pairs.")
    parser.add_argument("--output", type=str, required=True,
                        help="Path to output file.")
    parser.add_argument("--measure", type=str, default=defaults.MEASURE,
                        choices=measures.MEASURE_MAPPING.keys(),
                        help="Edit distance measure.")
    parser.add_argument("--insert-cost", type=int, default=defaults.INSERT_COST,
                        help="Insertion weight.")
    parser.add_argument("--delete-cost", type=int, default=defaults.DELETE_COST,
                        help="Deletion weight.")
    parser.add_argument("--substitute-cost", type=int,
                        default=defaults.SUBSTITUTE_COST,
                        help="Substitution weight.")
    parser.add_argument("--transpose-cost", type=int,
                        default=defaults.TRANSPOSE_COST,
                        help="Transposition weight.")
    parser.add_argument("--all-scripts", action="store_true",
                        help="Write every optimal edit script, not just one.")
    parser.add_argument("--tokenize", action="store_true",
                        help="Align whitespace-separated tokens instead of "
                             "characters.")
    parser.add_argument("--nfd", action="store_true",
                        help="Align NFD-normalized data. Write out in NFC.")
    return parser


if __name__ == "__main__":

    logging.basicConfig(level="INFO", format="%(levelname)s: %(message)s")

    main(build_parser().parse_args())
