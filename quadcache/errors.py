class QuadtreeError(Exception):
    """A broken quadtree invariant. Not meant to be caught and retried."""


class PointOutsideAreaError(QuadtreeError):
    pass


class NoQuadrantError(QuadtreeError):
    pass
