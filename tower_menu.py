#!/usr/bin/env python3
"""
Escape tower assembly menu.

Interactive console front end: registers components, runs the instrumented
sorts and the binary search, and prints their comparison counts and timings.
"""

import sys
from typing import Callable, List, Optional

from component_module import (
    ComponentCollection, Component, make_component, scan_int, trim_newline,
    format_components, bound_string, MAX_COMPONENTS, MAX_NAME, MIN_PRIORITY, MAX_PRIORITY
)
from sort_module import (
    Clock, SortMetrics, ALGO_BUBBLE, ALGO_INSERTION, ALGO_SELECTION,
    bubble_sort_by_name, insertion_sort_by_category, selection_sort_by_priority,
    compare_sorts
)
from search_module import binary_search_by_name

TIME_DECIMALS = 6

MENU_LINES = [
    "",
    "========== ESCAPE TOWER ASSEMBLY ==========",
    "1 - Register components",
    "2 - Sort by NAME (Bubble Sort) and measure (recommended before searching)",
    "3 - Sort by CATEGORY (Insertion Sort) and measure",
    "4 - Sort by PRIORITY (Selection Sort) and measure",
    "5 - Find key component by NAME (Binary Search) [requires NAME order]",
    "6 - Show current components",
    "7 - Compare all sorting algorithms",
    "0 - Exit",
]

SORT_FIELDS = {
    ALGO_BUBBLE: "NAME",
    ALGO_INSERTION: "CATEGORY",
    ALGO_SELECTION: "PRIORITY",
}


def format_metrics(metrics: SortMetrics) -> str:
    """One-line summary of a sort run."""
    field_name = SORT_FIELDS.get(metrics.algorithm, "?")
    return (f"{metrics.algorithm} by {field_name} finished: "
            f"comparisons = {metrics.comparisons}, time = {metrics.elapsed:.{TIME_DECIMALS}f} s")


class TowerMenu:
    """Session controller holding the working collection."""

    def __init__(self, collection: Optional[ComponentCollection] = None,
                 input_func: Optional[Callable[[str], str]] = None,
                 output: Optional[Callable[[str], None]] = None,
                 clock: Optional[Clock] = None):
        self.collection = collection if collection is not None else ComponentCollection()
        self.input_func = input_func or input
        self.output = output or print
        self.clock = clock

    def _read(self, prompt: str) -> str:
        """Read one line; raises EOFError at end of input."""
        return trim_newline(self.input_func(prompt))

    def show_components(self) -> None:
        self.output("")
        for line in format_components(self.collection.components):
            self.output(line)

    def _require_components(self) -> bool:
        if self.collection.is_empty():
            self.output("No components registered.")
            return False
        return True

    # ---------------- registration ----------------

    def _read_priority(self) -> int:
        while True:
            prio = scan_int(self._read(f"Priority ({MIN_PRIORITY}-{MAX_PRIORITY}): "))
            if prio is not None and MIN_PRIORITY <= prio <= MAX_PRIORITY:
                return prio
            self.output("Invalid value. Try again.")

    def register_components(self) -> bool:
        """
        Ask for a count and then each component.

        The previous contents are discarded first, so an aborted
        registration leaves the collection empty.

        Returns:
            True if the registration completed
        """
        self.collection.clear()

        try:
            quantity = scan_int(self._read(f"\nHow many components to register? (1-{MAX_COMPONENTS}): "))
            if quantity is None or quantity < 1:
                self.output("Invalid input. Aborting registration.")
                return False
            quantity = min(quantity, MAX_COMPONENTS)

            registered: List[Component] = []
            for i in range(quantity):
                self.output(f"\n--- Component {i + 1} ---")
                name = self._read("Name: ")
                category = self._read("Category (e.g. control, support, propulsion): ")
                priority = self._read_priority()
                registered.append(make_component(name, category, priority))
        except EOFError:
            self.output("\nInput ended. Aborting registration.")
            return False

        self.collection.replace(registered)
        self.output(f"\nRegistration complete: {len(registered)} components.")
        return True

    # ---------------- sorting ----------------

    def sort_by_name(self) -> SortMetrics:
        metrics = bubble_sort_by_name(self.collection.components, self.clock)
        self.collection.mark_sorted_by_name()
        self.output("\n" + format_metrics(metrics))
        return metrics

    def sort_by_category(self) -> SortMetrics:
        metrics = insertion_sort_by_category(self.collection.components, self.clock)
        self.collection.invalidate_order()
        self.output("\n" + format_metrics(metrics))
        return metrics

    def sort_by_priority(self) -> SortMetrics:
        metrics = selection_sort_by_priority(self.collection.components, self.clock)
        self.collection.invalidate_order()
        self.output("\n" + format_metrics(metrics))
        return metrics

    def compare_algorithms(self) -> List[SortMetrics]:
        """Run every sort on a copy and report the metrics side by side."""
        results = compare_sorts(self.collection.components, self.clock)
        self.output(f"\nAlgorithm comparison over {len(self.collection)} components:")
        for metrics in results:
            self.output("  " + format_metrics(metrics))
        return results

    # ---------------- searching ----------------

    def search_by_name(self) -> None:
        """Binary search, offering a name sort first when the order is unknown."""
        if not self.collection.sorted_by_name:
            self.output("Warning: binary search requires the components to be sorted by NAME.")
            answer = self._read("Run Bubble Sort by NAME now? (y/n): ")
            if answer[:1].lower() in ('y', 's'):
                self.sort_by_name()
            else:
                self.output("Search cancelled. Sort by NAME before using binary search.")
                return

        key = bound_string(self._read("Name of the key component to find: ").strip(), MAX_NAME)
        result = binary_search_by_name(self.collection.components, key, self.clock)

        if result.found:
            comp = self.collection.components[result.index]
            self.output(f"\nComponent found at position {result.index} (ID {result.index + 1}):")
            self.output(f"Name: {comp.name} | Category: {comp.category} | Priority: {comp.priority}")
        else:
            self.output(f"\nComponent '{key}' not found.")
        self.output(f"Binary search: comparisons = {result.comparisons}, "
                    f"time = {result.elapsed:.{TIME_DECIMALS}f} s")

    # ---------------- main loop ----------------

    def handle_option(self, option: int) -> bool:
        """
        Execute one menu option.

        Returns:
            False when the session should end
        """
        if option == 0:
            self.output("Closing the assembly module. Good luck with the escape!")
            return False
        if option == 1:
            self.register_components()
            self.show_components()
        elif option in (2, 3, 4, 7):
            if not self._require_components():
                return True
            if option == 2:
                self.sort_by_name()
                self.show_components()
            elif option == 3:
                self.sort_by_category()
                self.show_components()
            elif option == 4:
                self.sort_by_priority()
                self.show_components()
            else:
                self.compare_algorithms()
        elif option == 5:
            if self._require_components():
                self.search_by_name()
        elif option == 6:
            self.show_components()
        else:
            self.output("Invalid option.")
        return True

    def run(self) -> None:
        """Show the menu until the user exits or input ends."""
        while True:
            for line in MENU_LINES:
                self.output(line)
            try:
                choice = self._read("Choice: ")
            except EOFError:
                break

            option = scan_int(choice)
            if option is None:
                self.output("Invalid input.")
                continue

            try:
                if not self.handle_option(option):
                    break
            except EOFError:
                break


def main():
    """Main function"""
    TowerMenu().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
