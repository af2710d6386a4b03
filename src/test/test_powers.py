from ..powers import PowerSpec, powers, limit_n
from ..util import InvalidRatioError
from .testing_tools import compare

import pytest

def test_powers_per_axis():
    compare(powers([(3, 0, 2), (5, 0, 1)]), [[1, 3, 9], [1, 5]])
    compare(powers([PowerSpec(2, -2, 0)]), [[0.25, 0.5, 1]])
    compare(powers([(7, 1, 1)]), [[7]])
    compare(powers([]), [])

def test_transform_replaces_power():
    compare(powers([(2, -1, 1)], transform=lambda base, p: (base, p)), [[(2, -1), (2, 0), (2, 1)]])
    compare(powers([(3, 0, 2)], transform=lambda base, p: base * p), [[0, 3, 6]])

def test_invalid_specs():
    with pytest.raises(ValueError):
        powers([(3, 2, 1)])
    with pytest.raises(ValueError):
        powers([(3, 0.5, 2)])
    with pytest.raises(ValueError):
        powers([(3, 0)])
    with pytest.raises(InvalidRatioError):
        powers([(0, 0, 1)])

def test_cartesian_products():
    compare(limit_n([(3, 0, 2), (5, 0, 1)]), [1, 5, 3, 15, 9, 45])
    compare(limit_n([(3, 0, 2), (5, 0, 1)], 2), [1.0, 1.25, 1.5, 1.875, 1.125, 1.40625], compare='approx')
    # a single axis just gives its own powers:
    compare(limit_n([(3, 0, 3)]), [1, 3, 9, 27])

def test_cartesian_products_with_transform():
    compare(limit_n([(2, 1, 2), (3, 1, 2)], transform=lambda base, p: base + p), [12, 15, 16, 20])
