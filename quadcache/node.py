import weakref
from typing import Callable, Generic, Iterator, Optional, TypeVar

from quadcache.area import NodeArea, Quadrant
from quadcache.errors import NoQuadrantError, PointOutsideAreaError
from quadcache.log import log

T = TypeVar("T")

DataGenerator = Callable[[int, int], T]


class QuadtreeNode(Generic[T]):
    """A rectangle of the plane, subdivided lazily down to unit cells.

    Only unit cells (1x1) carry data. Larger nodes just route towards them
    through their four child slots, indexed by `Quadrant`.
    """

    area: NodeArea
    data: Optional[T]
    filled: bool

    # 4 slots, indexed by `Quadrant`.
    _children: list[Optional["QuadtreeNode[T]"]]
    # Non-owning, the parent owns us through `_children`.
    _parent: Optional[weakref.ref]

    def __init__(
        self,
        area: NodeArea,
        parent: Optional["QuadtreeNode[T]"] = None,
        children: Optional[list[Optional["QuadtreeNode[T]"]]] = None,
    ):
        self.area = area
        self.data = None
        self.filled = False
        self._parent = None if parent is None else weakref.ref(parent)
        self._children = [None] * 4

        if children is not None and len(children) != 4:
            raise ValueError(f"A node has exactly 4 child slots, got {len(children)}")

        for index, child in enumerate(children or []):
            if child is None:
                continue
            self._children[index] = child
            child._parent = weakref.ref(self)

    def is_leaf(self) -> bool:
        return self.area.is_unit

    def _is_cell(self, x: int, y: int) -> bool:
        return self.area.is_unit and self.area.x == x and self.area.y == y

    def insert(self, x: int, y: int, data: T) -> "QuadtreeNode[T]":
        """Store `data` at `(x, y)`, creating the nodes on the way down.

        Returns the leaf holding the data.
        """
        if not self.area.contains(x, y):
            raise PointOutsideAreaError(f"Requested point ({x}, {y}) not inside the search area {self.area}")

        if self._is_cell(x, y):
            self.data = data
            self.filled = True
            return self

        q = self.area.classify(x, y)
        if q == Quadrant.NONE:
            raise NoQuadrantError(f"Could not find the correct quadrant for ({x}, {y}) in {self.area}")

        child = self._children[q]
        if child is None:
            child = QuadtreeNode(self.area.sub_area(q), self)
            self._children[q] = child

        return child.insert(x, y, data)

    def search(self, x: int, y: int) -> Optional["QuadtreeNode[T]"]:
        """Find the leaf at `(x, y)`, `None` if nothing was stored there."""
        if self._is_cell(x, y):
            return self if self.filled else None

        child = self.get_child(self.area.classify(x, y))
        if child is None:
            return None

        return child.search(x, y)

    def cache_search(self, x: int, y: int, generator: DataGenerator) -> "QuadtreeNode[T]":
        """Find the leaf at `(x, y)`, generating and storing its data on a miss.

        Walks through existing nodes as far as they go and generates the data
        at the first missing step, so `generator` runs at most once per cell.
        """
        if not self.area.contains(x, y):
            raise PointOutsideAreaError(f"Requested point ({x}, {y}) not inside the search area {self.area}")

        if self._is_cell(x, y):
            if not self.filled:
                return self.insert(x, y, generator(x, y))
            return self

        child = self.get_child(self.area.classify(x, y))
        if child is None:
            return self.insert(x, y, generator(x, y))

        return child.cache_search(x, y, generator)

    def get_child(self, q: Quadrant) -> Optional["QuadtreeNode[T]"]:
        if q == Quadrant.NONE:
            return None
        return self._children[q]

    def children(self) -> Iterator[tuple[Quadrant, "QuadtreeNode[T]"]]:
        for index, child in enumerate(self._children):
            if child is not None:
                yield Quadrant(index), child

    def get_data(self) -> Optional[T]:
        return self.data

    def get_area(self) -> NodeArea:
        return self.area

    def get_parent(self) -> Optional["QuadtreeNode[T]"]:
        if self._parent is None:
            return None
        return self._parent()

    def print_status(self):
        area = self.area
        log(f"node: {id(self):#x}")
        log(f"area: x: {area.x}, y: {area.y}, w: {area.w}, h: {area.h}")
        if self.is_leaf():
            log(f"data: {self.data!r}" if self.filled else "data: <empty>")
        for q in (Quadrant.NW, Quadrant.NE, Quadrant.SW, Quadrant.SE):
            child = self._children[q]
            log(f"{q.name}: {'None' if child is None else hex(id(child))}")
