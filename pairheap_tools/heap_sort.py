from hack_sys_path import *

import argparse
import logging
import sys

import numpy as np

from pairheap.errors import HeapError
from pairheap.heap import DTYPE, Heap, check_heap

logger = logging.getLogger("heap_sort")

def load_pairs(path):
    """Reads `element priority` lines into two int64 arrays.
    Blank lines and lines starting with # are skipped.
    """
    elements = []
    priorities = []
    with open(path, "r") as f:
        for line_num, line in enumerate(f.readlines(), start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            tokens = line.split()
            if len(tokens) != 2:
                raise RuntimeError(f"{path}:{line_num}: expected 'element priority', got {line!r}")
            try:
                element = int(tokens[0])
                priority = int(tokens[1])
            except ValueError:
                raise RuntimeError(f"{path}:{line_num}: non-integer pair {line!r}")
            elements.append(element)
            priorities.append(priority)

    try:
        return np.array(elements, dtype=DTYPE), np.array(priorities, dtype=DTYPE)
    except OverflowError:
        raise RuntimeError(f"{path}: pair value outside the int64 range")

def heap_sort(elements, priorities, spare_capacity=0, heapify=False, check=False):
    build = Heap.from_unordered if heapify else Heap.from_arrays
    heap = build(priorities, elements, len(elements), spare_capacity)
    logger.info("built %r", heap)
    if check:
        check_heap(heap)
        logger.info("heap property holds for %d pairs", heap.size())

    result = []
    while not heap.empty():
        result.append(heap.extract_min_pair())
    return result

def main():
    parser = argparse.ArgumentParser(description="Print integer pairs in priority order using a binary min-heap")
    parser.add_argument('pairs_file', type=str, help='text file with one "element priority" pair per line')
    parser.add_argument('--spare-capacity', '-c', type=int, default=0, help='extra heap slots beyond the number of pairs (default 0)')
    parser.add_argument('--heapify', action='store_true', default=False, help='bulk build in O(n) instead of inserting pair by pair')
    parser.add_argument('--check', action='store_true', default=False, help='verify the heap property after building')
    parser.add_argument('--verbose', '-v', action='store_true', default=False, help='log progress to stderr')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(name)s - %(levelname)s - %(message)s")

    try:
        elements, priorities = load_pairs(args.pairs_file)
        logger.info("loaded %d pairs from %s", len(elements), args.pairs_file)
        pairs = heap_sort(elements, priorities,
                          spare_capacity=args.spare_capacity,
                          heapify=args.heapify,
                          check=args.check)
    except (OSError, RuntimeError, HeapError) as e:
        print(f"heap_sort: {e}", file=sys.stderr)
        sys.exit(1)

    for element, priority in pairs:
        print(f"{element} {priority}")

if __name__ == "__main__":
    main()
