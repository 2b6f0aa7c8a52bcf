"""
Interactive command-line front end.

Prompts for two time series, prints their discrete Fréchet distance and
the time it took, or a usage message when the input cannot be used.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List, Optional, TextIO

from .curve_frechet import compute_frechet, format_memo_table
from .errors import FrechetInputError
from .loader import read_sequences

logger = logging.getLogger(__name__)


EXAMPLE_P = "64,25;42,55;37,21;34,76;77,2;98,0;9,20;20,10;12,27;32,61;88,49;60,90;99,37;85,53;7,87;67,33;20,62;4,88"
EXAMPLE_Q = "76,92;71,59;65,73;29,52;19,13;81,6;89,36;76,10;38,93;60,44;5,26;58,84;46,16;0,55;56,71"

BANNER = "--------------------\nDiscrete Frechet Distance Calculator\n--------------------\n"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="discrete-frechet",
        description="Compute the discrete Frechet distance between two time series.",
    )
    p.add_argument("--strict", action="store_true", help="Reject non-integer coordinates instead of reading them as 0.")
    p.add_argument("--recursive", action="store_true", help="Use top-down memoized recursion instead of the iterative fill.")
    p.add_argument("--debug", action="store_true", help="Print the memo table after the result.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    return p.parse_args(argv)


def print_usage(out: TextIO) -> None:
    print("ERROR: Invalid format! Please enter time series data like the following:", file=out)
    print(EXAMPLE_P, file=out)
    print(EXAMPLE_Q, file=out)
    print(
        "\nEach sequence is given as pairs of values separated by semicolons "
        "and the values for each pair are separated by a comma.",
        file=out,
    )


def _read_line(prompt: str, stdin: TextIO, out: TextIO) -> str:
    print(prompt, file=out)
    return stdin.readline().rstrip("\r\n")


def main(
    argv: Optional[List[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    print(BANNER, file=out)
    x_series = _read_line("Please enter the first time series: ", stdin, out)
    y_series = _read_line("Please enter the second time series: ", stdin, out)

    start = time.perf_counter()
    try:
        curve_p, curve_q = read_sequences(x_series, y_series, strict=args.strict)
        result = compute_frechet(
            curve_p,
            curve_q,
            method="recursive" if args.recursive else "iterative",
        )
    except FrechetInputError as exc:
        logger.info("Rejected input: %s", exc)
        print_usage(out)
        return 1
    run_ms = (time.perf_counter() - start) * 1000.0

    logger.info("Computed %dx%d grid in %.3f ms", len(curve_p), len(curve_q), run_ms)
    print(
        f"The Discrete Frechet Distance between these two time series is "
        f"{result.distance}. ({run_ms:.0f} ms)",
        file=out,
    )

    if args.debug:
        print("\n" + format_memo_table(result.memo), file=out)

    return 0
