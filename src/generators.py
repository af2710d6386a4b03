#### scales built from the powers of a single generator

from ._settings import DEFAULT_EQUIVALENCE
from .reduction import reduce_ratio, equivalence_exponent
from .rational import exact_fraction
from .util import log, check_positive, check_count, check_integer

from dataclasses import dataclass
from fractions import Fraction


@dataclass(frozen=True)
class GeneratorStep:
    ratio: float    # reduced into the equivalence interval
    power: int      # exponent of the generator that produced this ratio
    position: int   # rank of this step in the sorted scale, from 0

    @property
    def fraction(self):
        return exact_fraction(self.ratio)


def generate(generator, pos, n, equivalence=DEFAULT_EQUIVALENCE):
    """takes a generator and position + number of pitches inside an equivalence,
    and returns the resulting scale as a list of GeneratorSteps sorted by ratio.
    example: pythagorean tuning is generate(3, 7, 12, 2), where:
        3 is the number that is powered (generator)
        7 is the end position of the generator sorted scale (pos),
            i.e. the powers used are pos-n up to pos-1, here -5 to 6
        12 is the number of pitches (n)
        2 is the equivalence factor (all ratios will be "powered into it")

    steps whose ratios come out equal keep the order of their powers."""
    check_positive(generator, 'generator')
    pos = check_integer(pos, 'pos')
    n = check_count(n)
    reduced = []
    for power in range(pos - n, pos):
        unreduced = generator ** power
        reduced.append((reduce_ratio(unreduced, equivalence), power))
    log(f'Generated {n} ratios from powers {pos-n} to {pos-1} of {generator}')

    reduced.sort(key=lambda rp: rp[0])
    return [GeneratorStep(ratio=ratio, power=power, position=i) for i, (ratio, power) in enumerate(reduced)]


@dataclass(frozen=True)
class PowerReduction:
    factor: float    # the unreduced power
    exp: int         # power of 2 that brought it into the octave
    value: float     # the reduced ratio
    numerator: int
    denominator: int

def power_n(n, power):
    """raises n to a power and reduces the result into the octave,
    returning it along with its fraction.
    example: power_n(3, 1) has factor 3, exp -1, value 1.5 and fraction 3/2"""
    check_positive(n, 'n')
    power = check_integer(power, 'power')
    factor = n ** power
    exp = equivalence_exponent(factor, 2)
    # reduce in exact arithmetic, so large powers keep their true fraction:
    reduced = Fraction(n) ** power * Fraction(2) ** exp
    return PowerReduction(factor=factor, exp=exp, value=float(reduced),
                          numerator=reduced.numerator, denominator=reduced.denominator)

def pythagorean_comma(power):
    """the pythagorean comma (as a linear fraction of the octave),
    scaled by power/12: i.e. the drift that accumulates over 'power' fifths"""
    return (1 - 524288 / 531441) * (power / 12)
