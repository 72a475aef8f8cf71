# tests/test_composite_demo.py

import logging

from drawgraph.composite_demo import build_scene, run
from drawgraph.config import CanvasConfig, DrawGraphConfig
from drawgraph.model.drawable.ownership import Ownership
from drawgraph.model.drawable.triangle_drawable import Triangle
from drawgraph.model.graph_algorithms import count_elements


def test_build_scene_counts():
    borrowed = Triangle("triangleB3")
    group_a, group_b = build_scene(borrowed)
    assert count_elements(group_a) == 8
    assert count_elements(group_b) == 5
    assert group_b.slots[-1].ownership is Ownership.BORROWED


def test_clearing_shared_subgroup_keeps_it_alive():
    borrowed = Triangle("triangleB3")
    group_a, group_b = build_scene(borrowed)
    group_b.clear()
    assert count_elements(group_a) == 3
    assert not group_b.disposed
    assert not borrowed.disposed

    group_a.dispose()
    assert not group_b.disposed  # still held by the caller
    group_b.release()
    assert group_b.disposed
    assert not borrowed.disposed


def test_run_writes_image(tmp_path, capsys):
    out = tmp_path / "scene.png"
    log_file = tmp_path / "trace.log"
    config = DrawGraphConfig(
        log_level=logging.INFO,
        log_file=str(log_file),
        canvas=CanvasConfig(width=320, height=240),
    )
    run(config, str(out))
    for handler in logging.getLogger("drawgraph").handlers:
        handler.close()
    logging.getLogger("drawgraph").handlers.clear()

    printed = capsys.readouterr().out
    assert "Total of elements of groupA = 8" in printed
    assert "Total of elements of groupB = 5" in printed
    assert out.exists()
    assert "Rotate triangle - id = triangleB3; angle = 90" in log_file.read_text()
