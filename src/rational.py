#### exact fraction reconstruction for real-valued ratios

from ._settings import MAX_DENOMINATOR, FRACTION_ULPS
from .util import log, check_positive

from dataclasses import dataclass
from fractions import Fraction
import math


@dataclass(frozen=True)
class ExactFraction:
    """a ratio expressed as a reduced numerator/denominator pair.
    'exact' is False if the fraction is only the closest approximation
    available under the denominator limit, rather than a true match."""
    numerator: int
    denominator: int = 1
    exact: bool = True

    @property
    def value(self):
        return self.numerator / self.denominator

    def as_tuple(self):
        return (self.numerator, self.denominator)

    def __str__(self):
        if self.denominator == 1:
            return str(self.numerator)
        return f'{self.numerator}/{self.denominator}'


def exact_fraction(value, max_denominator=MAX_DENOMINATOR, ulps=FRACTION_ULPS):
    """find the fraction with the smallest denominator that reproduces a float
    to within 'ulps' units in its last place, by walking the continued fraction
    convergents of its exact binary value. e.g. 1.5 gives 3/2 and 3.0 gives 3/1.

    if no convergent with a denominator up to 'max_denominator' is close enough,
    falls back on the nearest bounded approximation and marks it as inexact."""
    value = check_positive(value, 'fraction value')
    tolerance = ulps * math.ulp(value)
    remainder = Fraction(value) # exact, but with a power-of-two denominator

    # convergent recurrence: h(n) = a(n)*h(n-1) + h(n-2), and likewise for k
    h_prev, h = 0, 1
    k_prev, k = 1, 0
    while True:
        a = math.floor(remainder)
        h_prev, h = h, a*h + h_prev
        k_prev, k = k, a*k + k_prev
        if k > max_denominator:
            break
        if abs(h/k - value) <= tolerance:
            return ExactFraction(h, k)
        remainder -= a
        if remainder == 0:
            # the continued fraction terminated, so this convergent is the float itself
            return ExactFraction(h, k)
        remainder = 1 / remainder

    approx = Fraction(value).limit_denominator(max_denominator)
    log(f'No fraction within {ulps} ulp of {value!r} below denominator {max_denominator}, approximating as {approx}')
    return ExactFraction(approx.numerator, approx.denominator, exact=False)

def max_fraction_size(floats):
    """returns the largest numerator and the largest denominator (as a pair)
    across the fractions of all the given ratios.
    used to work out how wide a fraction column needs to be."""
    max_num, max_den = 0, 0
    for f in floats:
        frac = exact_fraction(f)
        max_num = max(frac.numerator, max_num)
        max_den = max(frac.denominator, max_den)
    return max_num, max_den
