"""
Command line front ends printing the optimal affine-gap alignment cost of two sequences.

``gotoh SEQ1 SEQ2`` fills the full matrices and prints them before the cost,
``gotoh-linear SEQ1 SEQ2`` uses the linear-space aligner and prints only the cost.
"""
from argparse import ArgumentParser, Namespace
import sys
from typing import Sequence

from gotoh.engines.pairwise import QuadraticAligner, LinearAligner
from gotoh.engines.scoring import ScoringModel
from gotoh.io.matrix import format_matrices, format_buffers
from gotoh.utils import AlignConfig


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class UsageError(Exception):
    """Raised when the command line does not contain exactly two sequences."""


# Classes --------------------------------------------------------------------------------------------------------------
class _ArgumentParser(ArgumentParser):
    def error(self, message): raise UsageError(message)


# Functions ------------------------------------------------------------------------------------------------------------
def _parser(prog: str, linear: bool) -> ArgumentParser:
    parser = _ArgumentParser(prog=prog, description=__doc__.strip().splitlines()[0], add_help=False)
    parser.add_argument('sequences', nargs='*', metavar='SEQ', help='the two sequences to align')
    opts = parser.add_argument_group('scoring')
    opts.add_argument('--gap-open', type=float, metavar='G', help='cost charged once per gap (default: 2)')
    opts.add_argument('--gap-extend', type=float, metavar='H', help='cost charged per gap position (default: 0.5)')
    opts.add_argument('--match', type=float, help='cost of a match (default: 0)')
    opts.add_argument('--mismatch', type=float, help='cost of a mismatch (default: 1)')
    if linear:
        parser.add_argument('--buffers', action='store_true', help='print the final CC and DD rows')
    else:
        parser.add_argument('--quiet', action='store_true', help='do not print the C, D and I matrices')
    return parser


def parse_args(argv: Sequence[str], prog: str, linear: bool = False) -> Namespace:
    """
    Parses command line arguments.

    Exactly two arguments are always the two sequences, even when they start with a dash.
    Options are only recognised alongside the sequences.

    Raises:
        UsageError: If an option is malformed or the number of sequences is not two.
    """
    if argv is None: argv = sys.argv[1:]
    parser = _parser(prog, linear)
    if len(argv) == 2:
        args = parser.parse_args([])
        args.sequences = list(argv)
        return args
    args = parser.parse_args(argv)
    if len(args.sequences) != 2:
        raise UsageError(f'expected 2 sequences, got {len(args.sequences)}')
    return args


def run(argv: Sequence[str] = None, prog: str = 'gotoh', linear: bool = False, out=None) -> int:
    """Runs one alignment from command line arguments and returns the exit status."""
    if out is None: out = sys.stdout
    try:
        args = parse_args(argv, prog, linear)
    except UsageError:
        print(f'error: {prog} sequence1 sequence2', file=out)
        return 1

    try:
        model = ScoringModel.from_config(AlignConfig.from_args(args))
        seq_a, seq_b = args.sequences
        if linear:
            aligner = LinearAligner(model)
            if args.buffers: out.write(format_buffers(*aligner.buffers(seq_a, seq_b)))
            cost = aligner.align(seq_a, seq_b)
        else:
            result = QuadraticAligner(model).align(seq_a, seq_b)
            if not args.quiet: out.write(format_matrices(result))
            cost = result.cost
    except ValueError as e:
        print(f'error: {e}', file=out)
        return 1

    out.write(f'Cost is {cost:.2f}')
    out.flush()
    return 0


def main(argv: Sequence[str] = None) -> int:
    """Entry point of ``gotoh``."""
    return run(argv, prog='gotoh')


def main_linear(argv: Sequence[str] = None) -> int:
    """Entry point of ``gotoh-linear``."""
    return run(argv, prog='gotoh-linear', linear=True)
