# drawgraph/model/drawable/shape_drawable.py
import logging

import numpy as np

from drawgraph.util.utils import normalise_points, rotate_points

from .drawable import Color, Drawable

logger = logging.getLogger(__name__)


class ShapeDrawable(Drawable):
    """Leaf drawable backed by a fixed number of vertices."""

    N_POINTS: int = 0
    PRIMITIVE: str = "polygon"
    DEFAULT_POINTS: tuple = ()

    def __init__(
        self,
        id: str,
        points=None,
        color: Color = (0, 255, 0),
        thickness: int = 2,
    ):
        super().__init__(id)
        if points is None:
            points = self.DEFAULT_POINTS
        self._points = normalise_points(points, self.N_POINTS)
        self._color = color
        self._thickness = thickness

    @property
    def points(self) -> np.ndarray:
        return self._points.copy()

    def draw(self, canvas=None) -> None:
        logger.info(f"Draw {self.KIND.lower()} - id = {self.id}")
        if canvas is not None:
            canvas.paint(self)

    def rotate(self, angle: float) -> None:
        logger.info(f"Rotate {self.KIND.lower()} - id = {self.id}; angle = {angle}")
        self._points = rotate_points(self._points, angle)

    def primitives(self):
        yield (self.PRIMITIVE, [(float(x), float(y)) for x, y in self._points])

    def style(self):
        return {"color": self._color, "thickness": self._thickness}
