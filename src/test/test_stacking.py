from ..stacking import LatticeCell, stack, ratios, partials, edo12, limit5
from ..util import InvalidRatioError
from .testing_tools import compare

import pytest

def test_stack():
    compare(stack(4, 2, 440), [440, 880, 1760, 3520])
    compare(stack(3), [440.0, 660.0, 990.0])
    compare(stack(1), [440.0])

def test_stack_is_geometric():
    base, factor = 261.63, 5/4
    f = stack(8, factor, base)
    compare(f[0], base)
    compare(f, [base * factor ** i for i in range(8)], compare='approx')

def test_stack_invalid():
    with pytest.raises(ValueError):
        stack(0)
    with pytest.raises(InvalidRatioError):
        stack(3, 0)
    with pytest.raises(InvalidRatioError):
        stack(3, 1.5, -440)

def test_ratios_cycle_through_factors():
    compare(ratios(), [1, 2/3, 8/9], compare='approx')
    compare(ratios(1, [2], 3), [1, 2, 4, 8])
    compare(ratios(1, [2, 3], 3), [1, 2, 6, 12])
    compare(ratios(5, [2], 0), [5])
    with pytest.raises(ValueError):
        ratios(1, [])

def test_partials():
    compare(partials((1, 4), 100), [100, 200, 300, 400])
    compare(partials((-3, 3), 440), [440/3, 220.0, 440, 880, 1320], compare='approx')
    compare(partials((0, 0), 440), [])

def test_edo12():
    compare(edo12(12), 2.0)
    compare(edo12(0, 1), 2.0)
    compare(edo12(-12), 0.5)
    compare(edo12(7), 2 ** (7/12))

def test_limit5_unit_grid():
    grid = limit5(1, 0, 1, 0)
    compare(len(grid), 2)
    compare([len(row) for row in grid], [2, 2])

    origin = grid[0][0]
    compare(origin.ratio, 1.0)
    compare((origin.numerator, origin.denominator), (1, 1))
    compare((origin.fifth, origin.third, origin.exp), (0, 0, 0))

    compare(grid[0][1], LatticeCell(fifth=0, third=1, factor=5, exp=-2, ratio=1.25, numerator=5, denominator=4))
    compare(grid[1][0], LatticeCell(fifth=1, third=0, factor=3, exp=-1, ratio=1.5, numerator=3, denominator=2))
    compare(grid[1][1], LatticeCell(fifth=1, third=1, factor=15, exp=-3, ratio=1.875, numerator=15, denominator=8))

def test_limit5_rotated_grid():
    grid = limit5(2, -1, 2, -1)
    compare(len(grid), 3)
    fractions = [[(c.numerator, c.denominator) for c in row] for row in grid]
    compare(fractions, [[(16, 15), (4, 3), (5, 3)],
                        [(8, 5), (1, 1), (5, 4)],
                        [(6, 5), (3, 2), (15, 8)]])
    compare((grid[0][0].fifth, grid[0][0].third), (-1, -1))
    compare(all(1 <= c.ratio < 2 for row in grid for c in row), True)

def test_limit5_large_lattice_is_exact():
    grid = limit5(20, 0, 20, 0)
    corner = grid[20][20]
    compare(corner.numerator, 3**20 * 5**20)
    compare(corner.denominator, 2 ** -corner.exp)
    compare(1 <= corner.ratio < 2, True)
    # float products like 3 * 5**-1 pick up rounding error; the lattice must not:
    compare(limit5(2, -1, 2, -1)[2][0].ratio == 1.2, True)

def test_limit5_rotation_must_be_integer():
    with pytest.raises(ValueError):
        limit5(2, -1.0, 2, -1)
