"""
Component Module

Record type and working collection for the escape tower assembly.
A component has a bounded name, a bounded category and a priority
from 1 (lowest) to 10 (highest). At most MAX_COMPONENTS are held at once.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

# Constants
MAX_COMPONENTS = 20
MAX_NAME = 30      # buffer size; 29 visible characters
MAX_CATEGORY = 20  # buffer size; 19 visible characters
MIN_PRIORITY = 1
MAX_PRIORITY = 10
DEFAULT_NAME = "SEM_NOME"
DEFAULT_CATEGORY = "GENERIC"

_INT_PREFIX = re.compile(r'\s*([+-]?[0-9]+)')


@dataclass
class Component:
    """One escape tower component."""
    name: str        # max MAX_NAME - 1 chars
    category: str    # max MAX_CATEGORY - 1 chars
    priority: int    # MIN_PRIORITY..MAX_PRIORITY


def trim_newline(text: str) -> str:
    """Remove a single trailing line terminator, if present."""
    if text.endswith('\n'):
        text = text[:-1]
        if text.endswith('\r'):
            text = text[:-1]
    return text


def bound_string(text: str, max_len: int) -> str:
    """
    Truncate text so it fits a buffer of max_len (one slot is reserved,
    as for a terminated string).

    Args:
        text: Text to bound
        max_len: Buffer size including the reserved slot

    Returns:
        Text of at most max_len - 1 characters
    """
    visible = max_len - 1
    if len(text) > visible:
        return text[:visible]
    return text


def scan_int(text: str) -> Optional[int]:
    """
    Parse a leading integer like a "%d" scan.

    Leading whitespace is skipped and anything after the digits is ignored.

    Returns:
        The integer, or None when the text does not start with one
    """
    if text is None:
        return None
    match = _INT_PREFIX.match(text)
    if not match:
        return None
    return int(match.group(1))


def make_component(name: str, category: str, priority: int) -> Component:
    """
    Build a validated component.

    Name and category are trimmed, truncated to their visible maximum and
    replaced by DEFAULT_NAME / DEFAULT_CATEGORY when empty.

    Raises:
        ValueError: If priority is not an integer in [MIN_PRIORITY, MAX_PRIORITY]
    """
    name = bound_string((name or '').strip(), MAX_NAME)
    if not name:
        name = DEFAULT_NAME
    category = bound_string((category or '').strip(), MAX_CATEGORY)
    if not category:
        category = DEFAULT_CATEGORY

    if isinstance(priority, bool) or not isinstance(priority, int):
        raise ValueError(f"Priority must be an integer, got {priority!r}")
    if priority < MIN_PRIORITY or priority > MAX_PRIORITY:
        raise ValueError(f"Priority {priority} outside [{MIN_PRIORITY}, {MAX_PRIORITY}]")

    return Component(name=name, category=category, priority=priority)


def copy_components(components: List[Component]) -> List[Component]:
    """Copy a component list so it can be sorted without touching the original."""
    return list(components)


@dataclass
class ComponentCollection:
    """Working set of components plus its name-order flag."""
    components: List[Component] = field(default_factory=list)
    sorted_by_name: bool = False  # True only right after a name sort

    def __len__(self) -> int:
        return len(self.components)

    def is_empty(self) -> bool:
        return not self.components

    def replace(self, components: List[Component]) -> None:
        """
        Replace all components with a new registration.

        Raises:
            ValueError: If more than MAX_COMPONENTS are given
        """
        if len(components) > MAX_COMPONENTS:
            raise ValueError(f"At most {MAX_COMPONENTS} components allowed, got {len(components)}")
        self.components = list(components)
        self.sorted_by_name = False

    def clear(self) -> None:
        self.components = []
        self.sorted_by_name = False

    def mark_sorted_by_name(self) -> None:
        self.sorted_by_name = True

    def invalidate_order(self) -> None:
        self.sorted_by_name = False


def format_components(components: List[Component]) -> List[str]:
    """
    Render components as a fixed-width table.

    Returns:
        Lines of text, starting with a header that shows the total
    """
    lines = [f"--- Components (total: {len(components)}) ---"]
    if not components:
        lines.append("[empty]")
        return lines

    lines.append(f"{'ID':<3} | {'NAME':<28} | {'CATEGORY':<19} | PRIORITY")
    lines.append("----+" + "-" * 30 + "+" + "-" * 21 + "+----------")
    for i, comp in enumerate(components):
        lines.append(f"{i + 1:<3} | {comp.name:<28} | {comp.category:<19} | {comp.priority:<8}")
    return lines
