"""Benchmark of the hash table strategies over a range of load factors."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time
from dataclasses import dataclass
from typing import Iterator, Mapping, Optional, Sequence

from .hashing import effectiveness, hash1, hash2, random_words
from .hashtables import HashTable, HashType, make_table

DEFAULT_N = 1000003
LOAD_FACTOR_TENTHS = tuple(range(4, 10))
LINE_WIDTH = 113
LABEL_WIDTH = 17
_WIDE_SPLITS = (0, 20, 66, LINE_WIDTH - 1)
_NARROW_SPLITS = (0, 20, 43, 66, 89, LINE_WIDTH - 1)
_HEADER_COLUMNS = (
    "Avg search time (ns)",
    "Avg number of probes",
    "Avg search time (ns)",
    "Avg number of probes",
)


@dataclass
class DataSet:
    """Words for one load factor and the keys searched and removed in the run."""

    load_factor_tenths: int
    words: list[str]
    search_before: list[str]
    deleted: list[str]
    search_after: list[str]

    @property
    def load_factor(self) -> float:
        return self.load_factor_tenths * 0.1


@dataclass
class Measurement:
    """Average search time (ns) and probes per search, before and after deletion."""

    time_before: float
    probes_before: float
    time_after: float
    probes_after: float


def _share(count: int, fraction: float) -> int:
    return int(count * fraction)


def generate_data(n: int, rng: random.Random) -> list[DataSet]:
    """Build one data set per load factor 0.4 .. 0.9 for a table of size n."""
    if n < 1:
        raise ValueError(f"table size must be positive, got {n}")
    datasets: list[DataSet] = []
    for tenths in LOAD_FACTOR_TENTHS:
        n_word = int(n * tenths * 0.1)
        words = random_words(n_word, rng)
        pool = list(words)
        rng.shuffle(pool)
        n_search = _share(n_word, 0.1)
        search_before = pool[:n_search]

        n_delete = _share(n_word, 0.1)
        rng.shuffle(pool)
        deleted = pool[:n_delete]
        deleted_mixed = list(deleted)
        rng.shuffle(deleted_mixed)
        kept = pool[n_delete:]
        rng.shuffle(kept)
        search_after = [
            kept[i // 2] if i % 2 == 0 else deleted_mixed[i // 2] for i in range(n_search)
        ]
        datasets.append(DataSet(tenths, words, search_before, deleted, search_after))
    return datasets


def _average(total: float, count: int) -> float:
    return total / count if count else math.nan


def _timed_searches(table: HashTable, keys: Sequence[str]) -> tuple[float, float]:
    table.reset_probe_count()
    start = time.perf_counter_ns()
    for key in keys:
        table.search(key)
    elapsed = time.perf_counter_ns() - start
    return _average(float(elapsed), len(keys)), _average(float(table.probe_count), len(keys))


def run_benchmark(datasets: Sequence[DataSet], n: int) -> dict[HashType, list[Measurement]]:
    """Fill a table of size n for every strategy and data set and time its searches."""
    results: dict[HashType, list[Measurement]] = {}
    for kind in HashType:
        measurements: list[Measurement] = []
        for dataset in datasets:
            table = make_table(kind, n)
            for value, word in enumerate(dataset.words, start=1):
                table.insert(word, value)
            time_before, probes_before = _timed_searches(table, dataset.search_before)
            for word in dataset.deleted:
                table.remove(word)
            time_after, probes_after = _timed_searches(table, dataset.search_after)
            measurements.append(Measurement(time_before, probes_before, time_after, probes_after))
        results[kind] = measurements
    return results


def _rule(splits: Sequence[int]) -> str:
    return "".join("|" if i in splits else "_" for i in range(LINE_WIDTH))


def _label(kind: HashType) -> str:
    return kind.label[:LABEL_WIDTH].ljust(LABEL_WIDTH)


def _cells(kind: HashType, m: Measurement) -> str:
    def probes(value: float) -> str:
        if kind is HashType.SEPARATE_CHAINING:
            return "%-20s" % "N/A"
        return "%-20g" % value

    return " | ".join(
        ["%-20g" % m.time_before, probes(m.probes_before), "%-20g" % m.time_after, probes(m.probes_after)]
    )


def format_report(results: Mapping[HashType, Sequence[Measurement]], n: int) -> str:
    """Render the results as tables per strategy and then per load factor."""
    out: list[str] = [f"N = {n}\n"]
    for kind in HashType:
        out.append("_" * LINE_WIDTH + "\n")
        out.append("| " + _label(kind) + " | %-43s | %-43s |\n" % ("Before deletion", "After deletion"))
        out.append(_rule(_WIDE_SPLITS) + "\n")
        out.append("| %-17s | %-20s | %-20s | %-20s | %-20s |\n" % ("Load factor", *_HEADER_COLUMNS))
        out.append(_rule(_NARROW_SPLITS) + "\n")
        for tenths, m in zip(LOAD_FACTOR_TENTHS, results[kind]):
            out.append("| " + "%-17g" % (tenths * 0.1) + " | " + _cells(kind, m) + " |\n")
        out.append(_rule(_NARROW_SPLITS) + "\n\n")

    for idx, tenths in enumerate(LOAD_FACTOR_TENTHS):
        out.append("_" * LINE_WIDTH + "\n")
        out.append(
            "| %-12s %-2g  | %-43s | %-43s |\n"
            % ("Load factor:", tenths * 0.1, "Before deletion", "After deletion")
        )
        out.append(_rule(_WIDE_SPLITS) + "\n")
        out.append("| %-17s | %-20s | %-20s | %-20s | %-20s |\n" % ("Method", *_HEADER_COLUMNS))
        out.append(_rule(_NARROW_SPLITS) + "\n")
        for kind in HashType:
            out.append("| " + _label(kind) + " | " + _cells(kind, results[kind][idx]) + " |\n")
        out.append(_rule(_NARROW_SPLITS) + "\n\n")
    return "".join(out)


def primes_up_to(limit: int) -> list[int]:
    """Return all primes not greater than limit, by the sieve of Eratosthenes."""
    if limit < 2:
        return []
    is_prime = [True] * (limit + 1)
    is_prime[0] = is_prime[1] = False
    p = 2
    while p * p <= limit:
        if is_prime[p]:
            is_prime[p * p :: p] = [False] * len(range(p * p, limit + 1, p))
        p += 1
    return [value for value, flag in enumerate(is_prime) if flag]


def sweep_primes(
    limit: int, rng: random.Random
) -> Iterator[tuple[int, dict[HashType, list[Measurement]]]]:
    """Run the benchmark for every prime table size up to limit."""
    for n in primes_up_to(limit):
        yield n, run_benchmark(generate_data(n, rng), n)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark hash table collision strategies.")
    parser.add_argument("n", nargs="?", type=int, default=None, help="table size")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--sweep", type=int, metavar="LIMIT", help="run for every prime table size up to LIMIT"
    )
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    if args.sweep is not None:
        for n, _ in sweep_primes(args.sweep, rng):
            print(n)
        return 0

    n = args.n
    if n is None:
        tokens = sys.stdin.read().split()
        n = int(tokens[0]) if tokens else DEFAULT_N
    if n < 2:
        print("error: table size must be at least 2", file=sys.stderr)
        return 1

    print(f"H1 is {effectiveness(hash1, n, rng)}% effective")
    print(f"H2 is {effectiveness(lambda word: hash2(word, n), n, rng)}% effective")
    datasets = generate_data(n, rng)
    results = run_benchmark(datasets, n)
    sys.stdout.write(format_report(results, n))
    return 0


if __name__ == "__main__":
    sys.exit(main())