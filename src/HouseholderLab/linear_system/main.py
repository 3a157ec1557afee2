"""CLI runner solving Hilbert systems of growing order with Householder QR."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass

from numpy.typing import NDArray

from HouseholderLab.errors import SingularMatrix
from HouseholderLab.linear_system.report import pretty_print
from HouseholderLab.linear_system.solvers import solve_hilbert

logger = logging.getLogger(__name__)

DEFAULT_SIZES = list(range(2, 21))


@dataclass
class Outcome:
    n: int
    solution: NDArray | None = None
    decomposition_residual: float | None = None
    solution_residual: float | None = None
    failure: str | None = None

    @property
    def singular(self) -> bool:
        return self.failure is not None


def parse_int_list(values: list[str]) -> list[int]:
    result = []
    for item in values:
        for part in item.split(","):
            part = part.strip()
            if part:
                result.append(int(part))
    return result


def run(sizes: list[int], transpose_q: bool = False) -> list[Outcome]:
    outcomes = []
    for n in sizes:
        print(f'N = {n}')
        try:
            x, err1, err2 = solve_hilbert(n, transpose_q=transpose_q)
        except SingularMatrix as err:
            logger.info("n=%d: %s", n, err)
            print(f'singular: {err}')
            print()
            outcomes.append(Outcome(n=n, failure=str(err)))
            continue

        pretty_print(x)
        print(f'err1 = {err1}')
        print(f'err2 = {err2}')
        print()
        outcomes.append(Outcome(
            n=n,
            solution=x,
            decomposition_residual=err1,
            solution_residual=err2,
        ))
    return outcomes


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Solve H x = 1 for Hilbert matrices via Householder QR."
    )
    parser.add_argument(
        "--sizes", nargs="+", default=None,
        help="Matrix orders (comma or space separated), default 2..20.",
    )
    parser.add_argument(
        "--transpose-q", action="store_true",
        help="Use Q^T instead of the computed inverse of Q.",
    )
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    if args.sizes is None:
        sizes = DEFAULT_SIZES
    else:
        try:
            sizes = parse_int_list(args.sizes)
        except ValueError as err:
            parser.error(f"--sizes: {err}")
        if any(n < 1 for n in sizes):
            parser.error("--sizes: matrix orders must be positive")
    run(sizes, transpose_q=args.transpose_q)


if __name__ == "__main__":
    main()
