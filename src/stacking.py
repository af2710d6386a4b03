#### geometric stacks of intervals, harmonic series, and the 5-limit lattice

from ._settings import A4_PITCH
from .reduction import equivalence_exponent
from .util import log, check_positive, check_count, check_integer

from dataclasses import dataclass
from fractions import Fraction


def stack(n, factor=3/2, base=A4_PITCH):
    """stacks n pitches by a fixed interval (factor) on top of each other,
    starting at base. no reduction is applied, so e.g. stack(3) yields
    [440, 660, 990] for fifths stacked above A4"""
    n = check_count(n)
    if n < 1:
        raise ValueError('stack needs at least one element (the base)')
    check_positive(factor, 'factor')
    check_positive(base, 'base')
    f = [base]
    for i in range(1, n):
        f.append(f[-1] * factor)
    return f

def ratios(start=1, factors=(2/3, 4/3), n=None):
    """multiplies 'start' by each of 'factors' in turn, cycling through them,
    for n steps (one full cycle by default). returns n+1 values, including start."""
    if len(factors) == 0:
        raise ValueError('ratios needs at least one factor to cycle through')
    if n is None:
        n = len(factors)
    n = check_count(n)
    check_positive(start, 'start')
    out = [start]
    for i in range(n):
        out.append(out[-1] * factors[i % len(factors)])
    return out

def partials(harmonic_range, base=A4_PITCH):
    """returns the partials of 'base' for each integer in harmonic_range (inclusive):
    positive integers give harmonics (base*i), integers below -1 give subharmonics (base/-i).
    0 and -1 are skipped, and repeated frequencies are only kept once."""
    low, high = harmonic_range
    check_positive(base, 'base')
    f = []
    for i in range(low, high + 1):
        if i not in (0, -1):
            f.append(base * (-(1 / i) if i < 0 else i))
    return list(dict.fromkeys(f))

def edo12(semitones, octave_offset=0):
    """ratio of an interval in 12-tone equal temperament"""
    return 2 ** (semitones / 12 + octave_offset)


@dataclass(frozen=True)
class LatticeCell:
    fifth: int          # power of 3
    third: int          # power of 5
    factor: float       # 3**fifth * 5**third, unreduced
    exp: int            # power of 2 that reduces factor into the octave
    ratio: float
    numerator: int
    denominator: int = 1

def limit5(fifths, rotate_fifths, thirds, rotate_thirds):
    """builds a (fifths+1) x (thirds+1) grid of 5-limit just intonation ratios,
    where the cell at [f][t] is 3**(f+rotate_fifths) * 5**(t+rotate_thirds)
    reduced into the octave. the rotations shift the lattice, e.g. to centre it on 1/1."""
    fifths, thirds = check_count(fifths, 'fifths'), check_count(thirds, 'thirds')
    rotate_fifths = check_integer(rotate_fifths, 'rotate_fifths')
    rotate_thirds = check_integer(rotate_thirds, 'rotate_thirds')
    grid = []
    for f in range(fifths + 1):
        row = []
        for t in range(thirds + 1):
            fifth = f + rotate_fifths
            third = t + rotate_thirds
            factor = 3 ** fifth * 5 ** third
            exp = equivalence_exponent(factor, 2)
            reduced = Fraction(3) ** fifth * Fraction(5) ** third * Fraction(2) ** exp
            row.append(LatticeCell(fifth=fifth, third=third, factor=factor, exp=exp, ratio=float(reduced),
                                   numerator=reduced.numerator, denominator=reduced.denominator))
        grid.append(row)
    log(f'Built {fifths+1}x{thirds+1} lattice from fifth {rotate_fifths} and third {rotate_thirds}')
    return grid
