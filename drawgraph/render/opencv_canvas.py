# drawgraph/render/opencv_canvas.py
import logging

import cv2
import numpy as np

from drawgraph.config import CanvasConfig
from drawgraph.model.drawable.drawable import Drawable
from drawgraph.util.utils import convert_to_opencv_format

logger = logging.getLogger(__name__)


class OpenCvCanvas:
    """
    Raster target for ``Drawable.draw``. Leaves call ``paint`` on the canvas
    passed down the tree, so shapes land on the frame in traversal order.
    """

    def __init__(self, config: CanvasConfig | None = None):
        self.config = config or CanvasConfig()
        self.current_frame = np.zeros(
            (self.config.height, self.config.width, 3), dtype=np.uint8
        )
        self.clear()

    # ---------- Public API ----------

    def clear(self) -> np.ndarray:
        self.current_frame[:, :, :] = self.config.background
        return self.current_frame

    def render(self, drawable: Drawable) -> np.ndarray:
        """Draw a whole tree onto the current frame and return a copy of it."""
        drawable.draw(self)
        return self.get_current_frame()

    def get_current_frame(self) -> np.ndarray:
        return self.current_frame.copy()

    def save(self, output_path: str) -> None:
        if not cv2.imwrite(output_path, self.current_frame):
            raise ValueError(f"Could not write image to {output_path}")
        logger.info(f"Canvas saved to: {output_path}")

    # ---------- Drawing ----------

    def paint(self, drawable: Drawable) -> None:
        style = drawable.style()
        color = style.get("color", (0, 0, 0))
        thickness = style.get("thickness", self.config.thickness)

        for primitive_type, data in drawable.primitives():
            if primitive_type == "points":
                radius = max(style.get("size", 2) // 2, 1)
                for x, y in data:
                    cv2.circle(
                        self.current_frame, (int(x), int(y)), radius, color, -1
                    )

            elif primitive_type in ("lines", "polygon"):
                if len(data) == 0:
                    continue
                pts = convert_to_opencv_format(np.asarray(data, dtype=float))
                cv2.polylines(
                    self.current_frame,
                    [pts],
                    primitive_type == "polygon",
                    color,
                    thickness,
                )

            elif primitive_type == "text":
                (x, y), text = data
                cv2.putText(
                    self.current_frame,
                    text,
                    (int(x), int(y)),
                    cv2.FONT_HERSHEY_SIMPLEX,
                    self.config.font_scale,
                    color,
                    1,
                )

            else:
                raise ValueError(f"Unknown primitive type: {primitive_type}")
