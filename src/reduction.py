#### folding ratios into an equivalence interval, and logarithmic pitch measures

from ._settings import DEFAULT_EQUIVALENCE
from .util import log, check_positive, check_factor
import math


def equivalence_exponent(ratio, factor=DEFAULT_EQUIVALENCE):
    """returns the integer power k such that ratio * factor**k
    lies in the window [1, factor), e.g. -1 for a ratio of 3 in the octave"""
    ratio = check_positive(ratio)
    factor = check_factor(factor)
    return math.ceil(math.log(1 / ratio) / math.log(factor))

def reduce_ratio(ratio, factor=DEFAULT_EQUIVALENCE):
    """reduces a ratio into the equivalence interval [1, factor) by multiplying
    or dividing it by whole powers of the factor.
    example: reduce_ratio(1/3, 2) yields 4/3, reduce_ratio(5, 2) yields 5/4

    the power is found by rounding a floating-point logarithm upward, so a ratio
    sitting exactly on a power of the factor can land on 'factor' itself instead of 1."""
    k = equivalence_exponent(ratio, factor)
    reduced = float(ratio * factor ** k)
    if reduced >= factor:
        log(f'Ratio {ratio} reduced onto the upper boundary of its window: {reduced} (factor={factor})')
    return reduced

# alias, as this is what the operation is called in most tuning literature:
equivalence = reduce_ratio

def angle(ratio, equivalence=DEFAULT_EQUIVALENCE):
    """position of a ratio in units of the equivalence interval, unreduced:
    e.g. 0.585 for a perfect fifth (3/2) in the octave, or 1.585 for a twelfth (3/1)"""
    ratio = check_positive(ratio)
    equivalence = check_factor(equivalence)
    return math.log(ratio) / math.log(equivalence)

def cents(ratio):
    """size of a ratio in cents, 1200 to the octave regardless of any other equivalence"""
    ratio = check_positive(ratio)
    return math.log(ratio) / math.log(2) * 1200
