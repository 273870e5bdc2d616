"""
Sort Module

Three instrumented sorts over component lists, each specialized to one field:
1. Bubble sort by name (ascending, case-insensitive)
2. Insertion sort by category (ascending, case-insensitive)
3. Selection sort by priority (descending)

Each sort works in place and returns a SortMetrics with the number of
comparisons and the elapsed time measured around the algorithm only.
"""

import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from component_module import Component, copy_components

ALGO_BUBBLE = "Bubble Sort"
ALGO_INSERTION = "Insertion Sort"
ALGO_SELECTION = "Selection Sort"

Clock = Callable[[], float]


@dataclass
class SortMetrics:
    """Cost of one sort run."""
    algorithm: str
    comparisons: int = 0
    elapsed: float = 0.0  # seconds
    swaps: int = 0        # exchanges (bubble, selection) or shifts (insertion)
    n: int = 0


def _ascii_lower(ch: str) -> str:
    if 'A' <= ch <= 'Z':
        return chr(ord(ch) + 32)
    return ch


def compare_ci(a: str, b: str) -> int:
    """
    Compare two strings case-insensitively, character by character.

    Only ASCII letters are folded; other characters (including non-ASCII)
    compare by code point, so ordering of non-ASCII text is unspecified.

    Args:
        a: First string
        b: Second string

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    for ca, cb in zip(a, b):
        ca = _ascii_lower(ca)
        cb = _ascii_lower(cb)
        if ca != cb:
            return -1 if ca < cb else 1

    if len(a) == len(b):
        return 0
    # Shorter string is a prefix of the longer one
    return -1 if len(a) < len(b) else 1


def bubble_sort_by_name(components: List[Component], clock: Optional[Clock] = None) -> SortMetrics:
    """
    Sort components by name (ascending) with bubble sort.

    One comparison is charged per adjacent pair examined. A pass with no
    swaps ends the sort early; its comparisons still count.

    Args:
        components: Components to sort in place
        clock: Time source in seconds (defaults to time.perf_counter)

    Returns:
        SortMetrics for this run
    """
    clock = clock or time.perf_counter
    n = len(components)
    metrics = SortMetrics(ALGO_BUBBLE, n=n)

    t0 = clock()
    for pass_no in range(n - 1):
        swapped = False
        for i in range(n - 1 - pass_no):
            metrics.comparisons += 1
            if compare_ci(components[i].name, components[i + 1].name) > 0:
                components[i], components[i + 1] = components[i + 1], components[i]
                metrics.swaps += 1
                swapped = True
        if not swapped:
            break
    t1 = clock()

    metrics.elapsed = t1 - t0
    return metrics


def insertion_sort_by_category(components: List[Component], clock: Optional[Clock] = None) -> SortMetrics:
    """
    Sort components by category (ascending) with insertion sort.

    Every predecessor examined costs one comparison, including the one
    that stops the shift.
    """
    clock = clock or time.perf_counter
    n = len(components)
    metrics = SortMetrics(ALGO_INSERTION, n=n)

    t0 = clock()
    for i in range(1, n):
        key = components[i]
        j = i - 1
        while j >= 0:
            metrics.comparisons += 1
            if compare_ci(components[j].category, key.category) > 0:
                components[j + 1] = components[j]
                metrics.swaps += 1
                j -= 1
            else:
                break
        components[j + 1] = key
    t1 = clock()

    metrics.elapsed = t1 - t0
    return metrics


def selection_sort_by_priority(components: List[Component], clock: Optional[Clock] = None) -> SortMetrics:
    """
    Sort components by priority (highest first) with selection sort.

    Scans every remaining candidate on each step, so a run over n
    components always costs n(n-1)/2 comparisons. Not stable.
    """
    clock = clock or time.perf_counter
    n = len(components)
    metrics = SortMetrics(ALGO_SELECTION, n=n)

    t0 = clock()
    for i in range(n - 1):
        idx_max = i
        for j in range(i + 1, n):
            metrics.comparisons += 1
            if components[j].priority > components[idx_max].priority:
                idx_max = j
        if idx_max != i:
            components[i], components[idx_max] = components[idx_max], components[i]
            metrics.swaps += 1
    t1 = clock()

    metrics.elapsed = t1 - t0
    return metrics


def compare_sorts(components: List[Component], clock: Optional[Clock] = None) -> List[SortMetrics]:
    """
    Run all three sorts, each on its own copy of the components.

    The given list is left untouched.

    Returns:
        Metrics for name, category and priority sorts, in that order
    """
    results = []
    for sort_func in (bubble_sort_by_name, insertion_sort_by_category, selection_sort_by_priority):
        work = copy_components(components)
        results.append(sort_func(work, clock))
    return results
