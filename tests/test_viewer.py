from quadcache.area import NodeArea
from quadcache.game2d import Game2D
from quadcache.quadtree import Quadtree
from quadcache.viewer import QuadtreeViewer, visible_cells, walk


def test_visible_cells_row_wise():
    assert visible_cells(-1, 5, 3, 2) == [(-1, 5), (0, 5), (1, 5), (-1, 6), (0, 6), (1, 6)]
    assert visible_cells(0, 0, 0, 4) == []


def test_walk_respects_max_depth():
    tree = Quadtree(NodeArea(0, 0, 4, 4))
    tree.insert(0, 0, "a")
    tree.insert(3, 3, "b")

    depths = [depth for depth, _ in walk(tree.get_root(), max_depth=10)]
    # Root, two quadrants, two leaves.
    assert sorted(depths) == [0, 1, 1, 2, 2]

    shallow = list(walk(tree.get_root(), max_depth=1))
    assert len(shallow) == 3
    assert all(depth <= 1 for depth, _ in shallow)


def test_rect_on_screen():
    assert Game2D.is_rect_on_screen(0, 0, 10, 10)
    assert Game2D.is_rect_on_screen(-5, -5, 10, 10)
    assert not Game2D.is_rect_on_screen(-10, 0, 10, 10)
    assert not Game2D.is_rect_on_screen(Game2D.WIDTH, 0, 10, 10)
    assert not Game2D.is_rect_on_screen(0, Game2D.HEIGHT, 10, 10)


def test_node_outline_culling():
    # No window needed for the coordinate math.
    viewer = QuadtreeViewer.__new__(QuadtreeViewer)
    viewer.origin_x, viewer.origin_y = 0, 0
    size = QuadtreeViewer.CELL_PIXELS

    near = viewer.cell_rect(NodeArea(-2, -2, 4, 4))
    assert near == (-2 * size, -2 * size, 4 * size, 4 * size)
    assert QuadtreeViewer.is_rect_on_screen(*near)

    far = viewer.cell_rect(NodeArea(-64, 0, 32, 32))
    assert not QuadtreeViewer.is_rect_on_screen(*far)
