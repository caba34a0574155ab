"""Interactive view of a terrain plane cached in a `Quadtree`."""
from typing import Iterator

import pygame

from quadcache.area import NodeArea
from quadcache.game2d import Game2D
from quadcache.log import log
from quadcache.node import QuadtreeNode
from quadcache.quadtree import Quadtree
from quadcache.terrain import Terrain, TerrainGenerator


def visible_cells(origin_x: int, origin_y: int, columns: int, rows: int) -> list[tuple[int, int]]:
    """All cells of the `columns` x `rows` window starting at the origin, row-wise."""
    return [(origin_x + c, origin_y + r) for r in range(rows) for c in range(columns)]


def walk(node: QuadtreeNode, max_depth: int) -> Iterator[tuple[int, QuadtreeNode]]:
    """Depth-first `(depth, node)` pairs, not descending below `max_depth`."""
    stack = [(0, node)]
    while stack:
        depth, current = stack.pop()
        yield depth, current
        if depth < max_depth:
            stack.extend((depth + 1, child) for _, child in current.children())


class QuadtreeViewer(Game2D):
    CELL_PIXELS = 8
    # Cells moved per tick while a pan key is held, x10 with shift.
    PAN_CELLS = 1
    OUTLINE_DEPTH = 12

    tree: Quadtree[Terrain]
    generator: TerrainGenerator

    origin_x: int
    origin_y: int
    outlines: bool

    def __init__(self, seed: int = 0):
        super().__init__()
        self.columns = self.WIDTH // self.CELL_PIXELS
        self.rows = self.HEIGHT // self.CELL_PIXELS
        self.generator = TerrainGenerator(seed)
        self.outlines = True
        self.reset()

    def reset(self):
        self.tree = Quadtree()
        self.generator.calls = 0
        # Start centered on (0, 0).
        self.origin_x = -self.columns // 2
        self.origin_y = -self.rows // 2
        log(f"Reset view to ({self.origin_x}, {self.origin_y}), seed {self.generator.seed}")

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN:
            if event.unicode == "o":
                self.outlines = not self.outlines
            elif event.unicode == "r":
                self.reset()
            elif event.unicode == "p":
                self.tree.print_status()

    def update(self):
        pressed = pygame.key.get_pressed()
        step = self.PAN_CELLS * (10 if pressed[pygame.K_LSHIFT] else 1)

        right = int(pressed[pygame.K_d] or pressed[pygame.K_RIGHT]) - int(pressed[pygame.K_a] or pressed[pygame.K_LEFT])
        down = int(pressed[pygame.K_s] or pressed[pygame.K_DOWN]) - int(pressed[pygame.K_w] or pressed[pygame.K_UP])
        self.origin_x += right * step
        self.origin_y += down * step

    def cell_rect(self, area: NodeArea) -> tuple[int, int, int, int]:
        size = self.CELL_PIXELS
        return (
            (area.x - self.origin_x) * size,
            (area.y - self.origin_y) * size,
            area.w * size,
            area.h * size,
        )

    def draw_cells(self):
        for x, y in visible_cells(self.origin_x, self.origin_y, self.columns, self.rows):
            leaf = self.tree.cache_search(x, y, self.generator)
            self.screen.fill(leaf.get_data().color, self.cell_rect(leaf.area))

    def draw_outlines(self):
        root = self.tree.get_root()
        if root is None:
            return

        color = pygame.Color(255, 255, 255, 255)
        for _, node in walk(root, self.OUTLINE_DEPTH):
            if node.is_leaf():
                continue
            rect = self.cell_rect(node.area)
            if not self.is_rect_on_screen(*rect):
                continue
            pygame.draw.rect(self.screen, color, rect, width=1)

    def render(self):
        self.draw_cells()
        if self.outlines:
            self.draw_outlines()

        root = self.tree.get_root()
        white = (255, 255, 255)
        self.render_text(
            [
                (f"view: ({self.origin_x}, {self.origin_y})", white),
                (f"root: {root.area if root else None}", white),
                (f"depth: {self.tree.depth}", white),
                (f"generated: {self.generator.calls}", white),
                (f"fps: {self.clock.get_fps():.0f}", white),
            ],
            (4, 4),
        )
