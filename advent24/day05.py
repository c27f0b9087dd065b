"""Day 5: page ordering rules for print updates."""

from collections import defaultdict
from graphlib import TopologicalSorter


def _parse(text):
    """Return (rules, updates); each rule is (before, after)."""
    lines = text.splitlines()
    try:
        blank = lines.index("")
    except ValueError:
        blank = len(lines)
    rules = []
    for line in lines[:blank]:
        before, separator, after = line.partition("|")
        if not separator:
            raise ValueError(f"bad rule: {line!r}")
        rules.append((int(before), int(after)))
    updates = [[int(page) for page in line.split(",")] for line in lines[blank + 1:]]
    return rules, updates


def _requirements(rules):
    required = defaultdict(set)
    for before, after in rules:
        required[after].add(before)
    return required


def _is_ordered(update, required):
    present = set(update)
    seen = set()
    for page in update:
        if any(need in present and need not in seen for need in required.get(page, ())):
            return False
        seen.add(page)
    return True


def _sorted_by_rules(update, rules):
    members = set(update)
    sorter = TopologicalSorter(
        {page: () for rule in rules for page in rule if page in members}
    )
    for before, after in rules:
        if before in members and after in members:
            sorter.add(after, before)
    return list(sorter.static_order())


def solve_part1(text):
    """Sum the middle pages of updates already in rule order."""
    rules, updates = _parse(text)
    required = _requirements(rules)
    return sum(
        update[len(update) // 2] for update in updates if _is_ordered(update, required)
    )


def solve_part2(text):
    """Sum the middle pages of misordered updates after reordering them.

    Raises ValueError (graphlib.CycleError) when the relevant rules form a cycle.
    """
    rules, updates = _parse(text)
    required = _requirements(rules)
    total = 0
    for update in updates:
        if _is_ordered(update, required):
            continue
        ordered = _sorted_by_rules(update, rules)
        total += ordered[len(ordered) // 2]
    return total