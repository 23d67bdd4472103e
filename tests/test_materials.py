import pytest

from pathtracer.materials import Checkerboard, Material, MaterialKind, SolidColor
from pathtracer.rgb import Rgb
from pathtracer.window import Point2D

BLACK = Rgb(0.0, 0.0, 0.0)
WHITE = Rgb(1.0, 1.0, 1.0)
BOARD = Checkerboard(BLACK, WHITE, 1.0, 1.0)


@pytest.mark.parametrize("u,v", [(0.0, 0.0), (3.3, -7.1), (100.0, 2.5)])
def test_solid_color_is_constant(u, v):
    color = Rgb(0.3, 0.2, 0.1)
    assert SolidColor(color).pattern_at(u, v) == color


def test_checkerboard_origin_is_first_color():
    assert BOARD.pattern_at(0.0, 0.0) == BLACK


def test_checkerboard_adjacent_cells_alternate():
    assert BOARD.pattern_at(1.0, 0.0) == WHITE
    assert BOARD.pattern_at(0.0, 1.0) == WHITE
    assert BOARD.pattern_at(1.0, 1.0) == BLACK


def test_checkerboard_negative_odd_cell():
    assert BOARD.pattern_at(-1.0, 0.0) == WHITE


def test_checkerboard_half_rounds_away_from_zero():
    assert BOARD.pattern_at(0.5, 0.0) == WHITE
    assert BOARD.pattern_at(-0.5, 0.0) == WHITE


def test_checkerboard_size_scales_cells():
    coarse = Checkerboard(BLACK, WHITE, 0.1, 0.1)
    assert coarse.pattern_at(1.0, 1.0) == BLACK


def test_material_delegates_to_texture():
    material = Material(MaterialKind.MIRROR, BOARD)
    assert material.uv_pattern_at(Point2D(1.0, 0.0)) == WHITE
    assert material.uv_pattern_at(Point2D(0.0, 0.0)) == BLACK


@pytest.mark.parametrize("kind", list(MaterialKind))
def test_material_kind_does_not_change_pattern(kind):
    color = Rgb(0.2, 0.4, 0.6)
    material = Material(kind, SolidColor(color))
    assert material.uv_pattern_at(Point2D(5.0, -3.0)) == color
    assert Material(kind, BOARD).uv_pattern_at(Point2D(1.0, 1.0)) == BLACK