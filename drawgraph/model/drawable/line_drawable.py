from .shape_drawable import ShapeDrawable


class Line(ShapeDrawable):
    KIND = "Line"
    N_POINTS = 2
    PRIMITIVE = "lines"
    DEFAULT_POINTS = ((0.0, 0.0), (100.0, 0.0))
