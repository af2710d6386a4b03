#### enumeration of integer powers along one or more generating axes

from .reduction import reduce_ratio
from .util import log, check_positive

from collections import namedtuple
import itertools
import numbers

# one axis of ratio generation: all powers of 'base' from min_exponent to max_exponent inclusive
PowerSpec = namedtuple('PowerSpec', ['base', 'min_exponent', 'max_exponent'])

def parse_spec(spec):
    """casts a (base, min, max) triple to a PowerSpec and checks it for sanity"""
    if len(spec) != 3:
        raise ValueError(f'Power specs must be (base, min_exponent, max_exponent) triples, but got: {spec!r}')
    spec = PowerSpec(*spec)
    check_positive(spec.base, 'base')
    for exponent in (spec.min_exponent, spec.max_exponent):
        if isinstance(exponent, bool) or not isinstance(exponent, numbers.Integral):
            raise ValueError(f'Exponents must be integers, but got: {exponent!r} in {spec}')
    if spec.min_exponent > spec.max_exponent:
        raise ValueError(f'min_exponent ({spec.min_exponent}) cannot exceed max_exponent ({spec.max_exponent})')
    return spec

def powers(specs, transform=None):
    """generates all powers for a list of (base, min, max) triples,
    one list of values per triple, ordered by exponent.
    example: powers([(3,0,2), (5,0,1)]) yields [[1, 3, 9], [1, 5]]

    if 'transform' is given, it is called as transform(base, exponent)
    in place of computing the power itself."""
    all_powers = []
    for spec in specs:
        base, min_exp, max_exp = parse_spec(spec)
        values = []
        for p in range(min_exp, max_exp + 1):
            if transform is not None:
                values.append(transform(base, p))
            else:
                values.append(base ** p)
        all_powers.append(values)
    return all_powers

def limit_n(specs, equivalence_factor=None, transform=None):
    """generates every product of one power from each axis in 'specs',
    with the first axis varying slowest.
    example: limit_n([(3,0,2), (5,0,1)]) yields [1, 5, 3, 15, 9, 45]

    if an equivalence factor is passed, then each product is reduced by that factor:
    example: limit_n([(3,0,2), (5,0,1)], 2) yields [1, 5/4, 3/2, 15/8, 9/8, 45/32]"""
    axes = powers(specs, transform)
    products = []
    for combination in itertools.product(*axes):
        value = 1
        for p in combination:
            value *= p
        if equivalence_factor is not None:
            value = reduce_ratio(value, equivalence_factor)
        products.append(value)
    log(f'Combined {len(axes)} axes into {len(products)} ratios')
    return products
