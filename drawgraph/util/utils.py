import math

import numpy as np


def normalise_points(points, n_points: int | None = None) -> np.ndarray:
    arr = np.asarray(points, dtype=float)

    if arr.ndim == 3 and arr.shape[1] == 1 and arr.shape[2] == 2:
        arr = arr.reshape(-1, 2)

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(
            f"points must be array-like with shape (N, 2) or (N, 1, 2), got {arr.shape}"
        )
    if n_points is not None and arr.shape[0] != n_points:
        raise ValueError(f"expected exactly {n_points} points, got {arr.shape[0]}")

    return arr


def centroid(points: np.ndarray) -> np.ndarray:
    return np.mean(points, axis=0)


def rotate_points(
    points: np.ndarray, angle: float, origin: tuple[float, float] | None = None
) -> np.ndarray:
    """Rotate (N, 2) points by `angle` degrees about `origin` (centroid if None)."""
    pts = normalise_points(points)
    if len(pts) == 0:
        return pts
    centre = centroid(pts) if origin is None else np.asarray(origin, dtype=float)

    theta = math.radians(angle)
    rotation = np.array(
        [
            [math.cos(theta), -math.sin(theta)],
            [math.sin(theta), math.cos(theta)],
        ]
    )
    return (pts - centre) @ rotation.T + centre


def convert_to_opencv_format(points: np.ndarray) -> np.ndarray:
    return np.round(points).astype(np.int32).reshape((-1, 1, 2))
