# drawgraph/model/graph_algorithms.py
"""
Read-only traversals over a drawable tree.

All traversals use an explicit work stack instead of recursion, so arbitrarily
deep trees are not limited by the interpreter recursion limit. Visiting order
is depth-first in child insertion order, the same order ``draw`` uses.
"""

from typing import Iterator

from drawgraph.model.drawable.drawable import Drawable
from drawgraph.model.drawable.group_drawable import Group


def count_elements(group: Group) -> int:
    """
    Count the leaves reachable from `group`. Groups themselves are not counted,
    so an empty group counts 0.

    The tree must be acyclic; on a cycle this never terminates.
    """
    n = 0
    stack = [group]
    while stack:
        current = stack.pop()
        for child in current.get_sub_drawables():
            if child.type() == Group.KIND:
                stack.append(child)
            else:
                n += 1
    return n


def walk(root: Drawable) -> Iterator[tuple[int, Drawable]]:
    """Yield (depth, node) pairs in depth-first pre-order, starting at `root`."""
    stack = [(0, root)]
    while stack:
        depth, node = stack.pop()
        yield depth, node
        # reversed so the first child is popped first
        for child in reversed(node.get_sub_drawables()):
            stack.append((depth + 1, child))


def has_cycle(root: Drawable) -> bool:
    """Return True if some node is reachable from itself. O(number of nodes)."""
    on_path: set[int] = set()
    done: set[int] = set()
    # (node, expanded) entries; expanded marks the exit of a node
    stack: list[tuple[Drawable, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        key = id(node)
        if expanded:
            on_path.discard(key)
            done.add(key)
            continue
        if key in on_path:
            return True
        if key in done:
            continue
        on_path.add(key)
        stack.append((node, True))
        for child in node.get_sub_drawables():
            if id(child) in on_path:
                return True
            stack.append((child, False))
    return False
