"""
composite_demo.py
-----------------
Builds two nested groups of shapes, prints element counts, then draws,
rotates and clears them while the trace is logged.

Usage:
    python -m drawgraph.composite_demo [--log-level DEBUG] [--output scene.png]
"""

import argparse
import logging

from drawgraph.config import CanvasConfig, DrawGraphConfig
from drawgraph.model.drawable.group_drawable import Group
from drawgraph.model.drawable.line_drawable import Line
from drawgraph.model.drawable.ownership import Ownership
from drawgraph.model.drawable.triangle_drawable import Triangle
from drawgraph.model.graph_algorithms import count_elements
from drawgraph.render.opencv_canvas import OpenCvCanvas
from drawgraph.util.logging_config import setup_logging


def build_scene(borrowed: Triangle) -> tuple[Group, Group]:
    """
    groupA holds two owned leaves plus a shared GroupB; GroupB mixes owned and
    shared leaves and borrows `borrowed`, whose lifetime stays with the caller.
    """
    group_a = Group("groupA")
    group_a.add(Triangle("triangleA1", [(40, 40), (140, 40), (90, 126)]), Ownership.OWNED)
    group_a.add(Line("lineA1", [(40, 160), (240, 160)]), Ownership.OWNED)
    group_a.add_new(Line, "LineA2", points=[(40, 200), (240, 260)])

    group_b = Group("GroupB")
    group_b.add(Triangle("triangleB1", [(320, 40), (420, 40), (370, 126)]), Ownership.OWNED)
    group_b.add_new(Triangle, "triangleB2", points=[(440, 40), (540, 40), (490, 126)])
    group_b.add_new(Line, "LineB1", points=[(320, 180), (540, 180)])
    group_b.add_new(Line, "LineB2", points=[(320, 220), (540, 300)])
    group_b.add(borrowed, Ownership.BORROWED)
    group_a.add(group_b, Ownership.SHARED)
    return group_a, group_b


def get_arguments():
    parser = argparse.ArgumentParser(
        description="Demonstrate uniform operations over a tree of drawables."
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING"],
        help="Trace verbosity. DEBUG also shows group forwarding and lifecycle.",
    )
    parser.add_argument("--log-file", type=str, default=None, help="Also log here.")
    parser.add_argument(
        "--output", type=str, default=None, help="Save the rendered scene to this image."
    )
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=480)
    return parser.parse_args()


def run(config: DrawGraphConfig, output_path: str | None = None) -> None:
    setup_logging(config.log_level, config.log_file)

    print("=== Objects construction ===")
    triangle_b3 = Triangle("triangleB3", [(440, 340), (540, 340), (490, 426)])
    group_a, group_b = build_scene(triangle_b3)
    print("=== End of object construction ===")

    print(f"Total of elements of groupA = {count_elements(group_a)}")
    print(f"Total of elements of groupB = {count_elements(group_b)}")

    print("\n [*] ==> Draw group B")
    group_b.draw()

    print("\n [*] ==> Rotate group B")
    group_b.rotate(90)

    print("\n [*] ==> Draw group A")
    canvas = OpenCvCanvas(config.canvas)
    canvas.render(group_a)
    if output_path:
        canvas.save(output_path)

    print("\n [*] ==> Rotate group A")
    group_a.rotate(15)

    print("\n [*] ==> Remove objects from group B")
    group_b.clear()
    group_a.draw()

    group_a.dispose()
    group_b.release()
    print("=== End of Program ====")


def main():
    args = get_arguments()
    config = DrawGraphConfig(
        log_level=getattr(logging, args.log_level),
        log_file=args.log_file,
        canvas=CanvasConfig(width=args.width, height=args.height),
    )
    run(config, args.output)


if __name__ == "__main__":
    main()
