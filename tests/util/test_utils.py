import numpy as np
import pytest

from drawgraph.util.utils import (
    centroid,
    convert_to_opencv_format,
    normalise_points,
    rotate_points,
)


def test_normalise_points_reshapes_opencv_format():
    arr = normalise_points(np.zeros((4, 1, 2)))
    assert arr.shape == (4, 2)


def test_normalise_points_checks_count():
    with pytest.raises(ValueError):
        normalise_points([(0, 0)], n_points=2)


def test_rotate_about_explicit_origin():
    rotated = rotate_points([(1, 0)], 90, origin=(0, 0))
    np.testing.assert_allclose(rotated, [[0, 1]], atol=1e-9)


def test_rotate_negative_angle():
    rotated = rotate_points([(0, 1)], -90, origin=(0, 0))
    np.testing.assert_allclose(rotated, [[1, 0]], atol=1e-9)


def test_rotate_zero_is_identity():
    pts = np.array([(3.0, 4.0), (5.0, -1.0)])
    np.testing.assert_allclose(rotate_points(pts, 0), pts)


def test_rotate_empty():
    assert rotate_points(np.empty((0, 2)), 45).shape == (0, 2)


def test_centroid():
    np.testing.assert_allclose(centroid(np.array([(0, 0), (2, 0), (1, 3)])), [1, 1])


def test_convert_to_opencv_format_rounds():
    pts = convert_to_opencv_format(np.array([(0.4, 0.6), (2.5, 3.5)]))
    assert pts.dtype == np.int32
    assert pts.shape == (2, 1, 2)
    assert pts[0, 0].tolist() == [0, 1]
