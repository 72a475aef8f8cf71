from .shape_drawable import ShapeDrawable


class Triangle(ShapeDrawable):
    KIND = "Triangle"
    N_POINTS = 3
    PRIMITIVE = "polygon"
    DEFAULT_POINTS = ((0.0, 0.0), (100.0, 0.0), (50.0, 86.6))
