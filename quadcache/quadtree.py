from typing import Generic, Optional

from quadcache.area import NodeArea, Quadrant
from quadcache.errors import NoQuadrantError
from quadcache.log import log
from quadcache.node import DataGenerator, QuadtreeNode, T


class Quadtree(Generic[T]):
    """Point quadtree over the whole integer plane.

    The root covers a finite area, but grows (doubling, re-rooted) whenever a
    point outside of it is inserted. Used as a cache: `cache_search` generates
    missing entries on demand.
    """

    # Log every root growth step.
    verbose = False

    root_node: Optional[QuadtreeNode[T]]

    def __init__(self, area: Optional[NodeArea] = None, root: Optional[QuadtreeNode[T]] = None):
        if area is not None and root is not None:
            raise ValueError("Pass either an initial area or a root node, not both")

        self.root_node = root
        if area is not None:
            self.root_node = QuadtreeNode(area)

    @property
    def depth(self) -> int:
        """Number of halvings from the root down to a unit cell."""
        if self.root_node is None:
            return 0
        area = self.root_node.area
        return (max(area.w, area.h) - 1).bit_length()

    def get_root(self) -> Optional[QuadtreeNode[T]]:
        return self.root_node

    def get_child(self, q: Quadrant) -> Optional[QuadtreeNode[T]]:
        if self.root_node is None:
            return None
        return self.root_node.get_child(q)

    def insert(self, x: int, y: int, data: T) -> QuadtreeNode[T]:
        if self.root_node is None:
            self.root_node = QuadtreeNode(NodeArea(x, y, 1, 1))

        self._expand_root(x, y)
        return self.root_node.insert(x, y, data)

    def search(self, x: int, y: int) -> Optional[QuadtreeNode[T]]:
        if self.root_node is None:
            return None
        return self.root_node.search(x, y)

    def cache_search(self, x: int, y: int, generator: DataGenerator) -> QuadtreeNode[T]:
        """Return the leaf at `(x, y)`.

        On a miss the entry is generated by calling `generator(x, y)` and
        stored. Otherwise the previously generated data is returned.
        """
        if self.root_node is None:
            data = generator(x, y)
            self.root_node = QuadtreeNode(NodeArea(x, y, 1, 1))
            return self.root_node.insert(x, y, data)

        self._expand_root(x, y)
        return self.root_node.cache_search(x, y, generator)

    def print_status(self):
        if self.root_node is None:
            log("root node: None")
            return
        self.root_node.print_status()

    def _expand_root(self, x: int, y: int):
        while not self.root_node.area.contains(x, y):
            area = self.root_node.area
            nx, ny = area.x, area.y
            nw = (area.w or 1) * 2
            nh = (area.h or 1) * 2
            # Growing towards negative coordinates moves the origin on both axes.
            if x < area.x or y < area.y:
                nx -= area.w
                ny -= area.h
            new_area = NodeArea(nx, ny, nw, nh)

            q = new_area.classify(area.x, area.y)
            if q == Quadrant.NONE:
                raise NoQuadrantError(f"Could not find the correct quadrant for {area} in {new_area}")

            children: list[Optional[QuadtreeNode[T]]] = [None] * 4
            children[q] = self.root_node
            self.root_node = QuadtreeNode(new_area, children=children)

            if self.verbose:
                log(f"Grew root to {new_area} towards ({x}, {y}), depth {self.depth}")
