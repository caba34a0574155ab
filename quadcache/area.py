"""Rectangles over the integer plane and their quadrants."""
from dataclasses import dataclass
from enum import IntEnum

from quadcache.errors import NoQuadrantError


#     |
#  NW | NE x
# ----+---->
#  SW | SE
#     |
#     v y
class Quadrant(IntEnum):
    """Child slot of a node. Bit 0 is south, bit 1 is east."""

    NONE = -1
    NW = 0
    SW = 1
    NE = 2
    SE = 3

    @property
    def is_east(self) -> bool:
        return self in (Quadrant.NE, Quadrant.SE)

    @property
    def is_south(self) -> bool:
        return self in (Quadrant.SW, Quadrant.SE)


# Direction bits combined into a quadrant.
NORTH, SOUTH = 0, 1
WEST, EAST = 0, 2


@dataclass(frozen=True)
class NodeArea:
    """The half-open region `[x, x + w) x [y, y + h)`."""

    x: int
    y: int
    w: int
    h: int

    @property
    def center(self) -> tuple[int, int]:
        return self.x + self.w // 2, self.y + self.h // 2

    @property
    def is_unit(self) -> bool:
        return self.w == 1 and self.h == 1

    def contains(self, px: int, py: int) -> bool:
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h

    def contains_area(self, other: "NodeArea") -> bool:
        """Check both opposite corners of `other`."""
        return self.contains(other.x, other.y) and self.contains(other.x + other.w, other.y + other.h)

    def classify(self, px: int, py: int) -> Quadrant:
        if not self.contains(px, py):
            return Quadrant.NONE

        cx, cy = self.center
        return Quadrant((EAST if px >= cx else WEST) | (SOUTH if py >= cy else NORTH))

    def sub_area(self, q: Quadrant) -> "NodeArea":
        if q == Quadrant.NONE:
            raise NoQuadrantError(f"Could not find the correct quadrant in {self}")

        hw = self.w // 2
        hh = self.h // 2
        return NodeArea(
            self.x + (hw if q.is_east else 0),
            self.y + (hh if q.is_south else 0),
            hw,
            hh,
        )
