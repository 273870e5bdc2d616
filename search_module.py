"""
Search Module

Binary search by name over a component list.

The list must already be sorted ascending by name with compare_ci
(for example by bubble_sort_by_name). This is not re-checked here: on an
unsorted list the result is unspecified, but no exception is raised.
"""

import time
from dataclasses import dataclass
from typing import List, Optional

from component_module import Component, MAX_NAME, bound_string
from sort_module import Clock, compare_ci


@dataclass
class SearchResult:
    """Outcome of one binary search."""
    index: int = -1        # position of the match, -1 if not found
    comparisons: int = 0
    elapsed: float = 0.0   # seconds

    @property
    def found(self) -> bool:
        return self.index >= 0


def binary_search_by_name(components: List[Component], key: str,
                          clock: Optional[Clock] = None) -> SearchResult:
    """
    Find a component by name with binary search.

    One comparison is charged per midpoint probe. The key is bounded to the
    visible name length before searching.

    Args:
        components: Components sorted ascending by name
        key: Name to look for (case-insensitive)
        clock: Time source in seconds (defaults to time.perf_counter)

    Returns:
        SearchResult with the index of the match or -1
    """
    clock = clock or time.perf_counter
    key = bound_string(key, MAX_NAME)
    result = SearchResult()

    t0 = clock()
    low, high = 0, len(components) - 1
    while low <= high:
        mid = low + (high - low) // 2
        result.comparisons += 1
        cmp = compare_ci(components[mid].name, key)
        if cmp == 0:
            result.index = mid
            break
        if cmp < 0:
            low = mid + 1
        else:
            high = mid - 1
    t1 = clock()

    result.elapsed = t1 - t0
    return result
