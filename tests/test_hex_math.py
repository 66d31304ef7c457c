import math

from hexstack.utils.hex_math import (
    AXIAL_DIRECTIONS,
    axial_to_pixel,
    cells_in_radius,
    hex_distance,
    hex_round,
    in_bounds,
    neighbors,
    pixel_to_axial,
)


def test_axial_to_pixel_formula():
    x, y = axial_to_pixel(1, 2, size=10)
    assert math.isclose(x, 10 * (math.sqrt(3) * 1 + math.sqrt(3) / 2 * 2))
    assert math.isclose(y, 10 * 1.5 * 2)
    assert axial_to_pixel(0, 0) == (0.0, 0.0)


def test_hex_round_fixes_component_with_largest_error():
    # q error 0.4 is strictly largest -> q recomputed from r and s
    assert hex_round(1.6, -0.3) == (1, 0)
    # q and s errors tie -> s absorbs the correction
    assert hex_round(-0.625, 1.25) == (-1, 1)
    assert hex_round(0.2, 0.1) == (0, 0)


def test_hex_round_always_lands_on_lattice():
    steps = [i * 0.137 - 3.1 for i in range(46)]
    for fq in steps:
        for fr in steps:
            q, r = hex_round(fq, fr)
            assert isinstance(q, int) and isinstance(r, int)
            s = -q - r
            assert q + r + s == 0


def test_pixel_to_axial_picks_nearest_center():
    size = 35
    samples = [(-120.0 + i * 7.3, -110.0 + j * 6.1) for i in range(34) for j in range(37)]
    for x, y in samples:
        q, r = pixel_to_axial(x, y, size)
        cx, cy = axial_to_pixel(q, r, size)
        best = math.hypot(x - cx, y - cy)
        for nq, nr in neighbors(q, r):
            nx, ny = axial_to_pixel(nq, nr, size)
            assert best <= math.hypot(x - nx, y - ny) + 1e-9, f"{(x, y)} rounded to {(q, r)} but {(nq, nr)} is closer"


def test_pixel_to_axial_recovers_cell_centers():
    for q, r in cells_in_radius(3):
        x, y = axial_to_pixel(q, r)
        assert pixel_to_axial(x, y) == (q, r)


def test_cells_in_radius_canonical_order():
    cells = cells_in_radius(2)
    assert len(cells) == 19
    assert cells[:3] == [(-2, 0), (-2, 1), (-2, 2)]
    assert cells[-1] == (2, 0)
    assert len(set(cells)) == 19
    assert all(in_bounds(q, r, 2) for q, r in cells)
    assert len(cells_in_radius(0)) == 1
    assert len(cells_in_radius(3)) == 37


def test_in_bounds_uses_all_three_cube_axes():
    assert in_bounds(2, 0, 2)
    assert in_bounds(2, -2, 2)
    assert not in_bounds(2, 1, 2)  # s = -3
    assert not in_bounds(3, 0, 2)
    assert not in_bounds(-1, -2, 2)  # s = 3


def test_neighbors_fixed_order():
    assert neighbors(0, 0) == [(1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1)]
    assert neighbors(2, -1)[0] == (3, -1)
    assert len(AXIAL_DIRECTIONS) == 6
    for n in neighbors(1, 1):
        assert hex_distance((1, 1), n) == 1
