#!/usr/bin/env python3
"""Time FileComparator against filecmp on chunk-boundary file sizes.

Each file pair is compared with the comparator at several chunk sizes and
with ``filecmp.cmp(shallow=False)``. Files are identical, so every byte is
read. The per-call median of ``timeit`` repeats is printed as a table.

Usage:
    python bench_file.py
    python bench_file.py --repeat 9 --number 50
"""

from __future__ import annotations

import argparse
import filecmp
import os
import shutil
import statistics
import timeit

from hideglue import FileComparator, TemporaryFixture

FILE_SIZES = [1023, 1024, 1025, 64 * 1024, 1024 * 1024]
CHUNK_SIZES = [256, 1024, 65536]


def make_pair(size: int) -> tuple[TemporaryFixture, TemporaryFixture]:
    a = TemporaryFixture.blank("a.bin")
    b = TemporaryFixture.blank("b.bin")
    with open(a, "wb") as f:
        f.write(os.urandom(size))
    shutil.copyfile(a, b)
    return a, b


def median_us(stmt, repeat: int, number: int) -> float:
    samples = timeit.repeat(stmt, repeat=repeat, number=number)
    return statistics.median(samples) / number * 1_000_000


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--repeat", type=int, default=5)
    parser.add_argument("--number", type=int, default=20)
    args = parser.parse_args()

    header = ["size"] + [f"chunk {c}" for c in CHUNK_SIZES] + ["filecmp"]
    print("| " + " | ".join(header) + " |")
    print("|" + "---|" * len(header))

    for size in FILE_SIZES:
        a, b = make_pair(size)
        row = [str(size)]
        for chunk in CHUNK_SIZES:
            left = FileComparator(a, chunk_size=chunk)
            right = FileComparator(b, chunk_size=chunk)
            assert left == right
            row.append(f"{median_us(lambda: left == right, args.repeat, args.number):.1f}us")
            left.close()
            right.close()

        def run_filecmp() -> bool:
            filecmp.clear_cache()
            return filecmp.cmp(a, b, shallow=False)

        row.append(f"{median_us(run_filecmp, args.repeat, args.number):.1f}us")
        print("| " + " | ".join(row) + " |")


if __name__ == "__main__":
    main()
