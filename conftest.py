# conftest.py
# Shared fixtures; living at the repository root also puts the root on sys.path
# so `drawgraph` imports without an install.

import logging

import pytest

from drawgraph.model.drawable.group_drawable import Group
from drawgraph.model.drawable.line_drawable import Line
from drawgraph.model.drawable.ownership import Ownership
from drawgraph.model.drawable.triangle_drawable import Triangle


@pytest.fixture
def trace(caplog):
    """Returns a callable giving the INFO-level draw/rotate trace so far."""
    caplog.set_level(logging.INFO, logger="drawgraph")

    def messages() -> list[str]:
        return [
            r.getMessage()
            for r in caplog.records
            if r.levelno == logging.INFO and r.name.startswith("drawgraph")
        ]

    return messages


@pytest.fixture
def scene():
    """Group A = [Line L1, Triangle T1, Group B = [Line B1, Triangle B2]]."""
    group_a = Group("A")
    group_a.add(Line("L1"), Ownership.OWNED)
    group_a.add(Triangle("T1"), Ownership.OWNED)

    group_b = Group("B")
    group_b.add_new(Line, "B1")
    group_b.add_new(Triangle, "B2")
    group_a.add(group_b, Ownership.OWNED)
    return group_a, group_b
