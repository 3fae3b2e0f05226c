"""Compare the two edit-distance algorithms on sample tree pairs."""

from __future__ import annotations

import argparse
import csv
import sys
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from zsdist.distance import naive_distance, zhang_shasha_distance
from zsdist.parser import ParseError, parse_tree
from zsdist.tree import Tree

INT_SIZE = 4
DEFAULT_REPETITIONS = 1000

CSV_HEADER = [
    "Tree1_Size",
    "Tree2_Size",
    "ZS_Distance",
    "ZS_Time_ms_avg",
    "ZS_Space_bytes",
    "Naive_Distance",
    "Naive_Time_ms_avg",
    "Naive_Space_bytes",
]

DEFAULT_CASES: list[tuple[str, str]] = [
    ("f(d(a,c(b)),e)", "f(c(d(a,b)),e)"),
    ("a(b(c,d),e(f,g(i)))", "a(b(c,d),e(f,g(h)))"),
    ("d", "g(h)"),
    ("a(b,c,d)", "a(c,d,b)"),
    # deep
    ("a(b(c(d(e(f(g(h(i(j))))))))))", "a(b(c(d(e(f(g(h(i(k))))))))))"),
    # wide
    ("a(b,c,d,e,f,g,h,i,j,k)", "a(c,b,e,d,g,f,i,h,k,j)"),
    # best case for keyroots: a tall, narrow comb
    (
        "a(b(c(d(e(f(g(h(i(j(k(l(m(n(o(p(q(r(s(t))))))))))))))))))))",
        "a(b(c(d(e(f(g(h(i(j(k(l(m(n(o(p(q(r(s(z))))))))))))))))))))",
    ),
    # worst case for keyroots: a low, wide bush
    (
        "r(a,b,c,d,e,f,g,h,i,j,k,l,m,n,o,p,q,s,t,u,v,w,x,y,z)",
        "r(z,y,x,w,v,u,t,s,q,p,o,n,m,l,k,j,i,h,g,f,e,d,c,b,a)",
    ),
    # mixed
    (
        "a(b(c,d),e(f,g(h,i(j,k),l(m,n(o(p,q),r),s),t),u),v(w,x,y,z))",
        "a(b(c,d),e(f,g(h,i(j,k),l(m,n(o(p,A),r),s),t),u),v(w,x,y,z))",
    ),
]


@dataclass(frozen=True)
class BenchmarkResult:
    """Distances, mean times and table sizes for one tree pair."""

    tree1_size: int
    tree2_size: int
    zs_distance: int
    zs_time_ms: float
    zs_space_bytes: int
    naive_distance: int
    naive_time_ms: float
    naive_space_bytes: int

    def as_row(self) -> list[str]:
        return [
            str(self.tree1_size),
            str(self.tree2_size),
            str(self.zs_distance),
            f"{self.zs_time_ms:g}",
            str(self.zs_space_bytes),
            str(self.naive_distance),
            f"{self.naive_time_ms:g}",
            str(self.naive_space_bytes),
        ]


def _time(
    algorithm: Callable[[Tree, Tree], int],
    tree1: Tree,
    tree2: Tree,
    repetitions: int,
) -> tuple[int, float]:
    distance = 0
    start = time.perf_counter()
    for _ in range(repetitions):
        distance = algorithm(tree1, tree2)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return distance, elapsed_ms / repetitions


def benchmark_pair(
    first: str, second: str, repetitions: int = DEFAULT_REPETITIONS
) -> BenchmarkResult:
    """Parse both trees and time each algorithm ``repetitions`` times."""
    if repetitions < 1:
        raise ValueError("repetitions must be at least 1")
    tree1 = parse_tree(first)
    tree2 = parse_tree(second)
    size1, size2 = len(tree1), len(tree2)
    space = (size1 + 1) * (size2 + 1) * INT_SIZE

    zs_distance, zs_time = _time(zhang_shasha_distance, tree1, tree2, repetitions)
    naive, naive_time = _time(naive_distance, tree1, tree2, repetitions)
    return BenchmarkResult(
        tree1_size=size1,
        tree2_size=size2,
        zs_distance=zs_distance,
        zs_time_ms=zs_time,
        zs_space_bytes=space,
        naive_distance=naive,
        naive_time_ms=naive_time,
        naive_space_bytes=space,
    )


def run_benchmark(
    cases: Iterable[tuple[str, str]] = DEFAULT_CASES,
    repetitions: int = DEFAULT_REPETITIONS,
) -> list[BenchmarkResult]:
    """Benchmark every pair; pairs that fail to parse are reported and skipped."""
    results = []
    for first, second in cases:
        try:
            results.append(benchmark_pair(first, second, repetitions))
        except ParseError as error:
            print(f"Error processing tree pair: {error}", file=sys.stderr)
    return results


def write_csv(results: Iterable[BenchmarkResult], path: str | Path) -> None:
    """Write the results as CSV with a header line."""
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        writer.writerows(result.as_row() for result in results)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compare Zhang-Shasha with the exhaustive tree edit distance."
    )
    parser.add_argument(
        "-n", "--repetitions", type=int, default=DEFAULT_REPETITIONS,
        help="runs per algorithm and pair (default: %(default)s)",
    )
    parser.add_argument(
        "-o", "--output", default="results.csv",
        help="CSV file to write (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    if args.repetitions < 1:
        parser.error("repetitions must be at least 1")

    separator = "-" * 53
    results = run_benchmark(DEFAULT_CASES, args.repetitions)
    for result in results:
        print(separator)
        print(
            f"Testing T1 of {result.tree1_size} nodes and T2 of "
            f"{result.tree2_size} nodes (repeating {args.repetitions} times)"
        )
        print(
            f"[Zhang-Shasha] Distance: {result.zs_distance}, "
            f"Mean time: {result.zs_time_ms:.6f} ms"
        )
        print(
            f"[Naive]        Distance: {result.naive_distance}, "
            f"Mean time: {result.naive_time_ms:.6f} ms"
        )

    try:
        write_csv(results, args.output)
    except OSError as error:
        print(f"Error: could not write {args.output}: {error}", file=sys.stderr)
        return 1

    print(separator)
    print(f"Experiments finished. Results saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())