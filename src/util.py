from ._settings import VERBOSE

import time
import math
import inspect
import numbers

global_init_time = time.time()

class Log:
    """logging class for detailed info from nested function execution"""
    def __init__(self, verbose=VERBOSE):
        self.verbose=verbose

    def __call__(self, msg, force=False):
        if self.verbose or force:
            cur_frame = inspect.currentframe()
            call_frame = inspect.getouterframes(cur_frame, 2)
            wall_time = time.time() - global_init_time

            context = f'[{wall_time:.06f}]({call_frame[1][3]}) '
            print(context + msg)

log = Log()


class InvalidRatioError(ValueError):
    """raised when a ratio, frequency or factor is not a finite positive number"""
    pass

def check_positive(value, name='ratio'):
    """ensures that 'value' is a finite real number greater than zero,
    and returns it as a float. raises InvalidRatioError otherwise,
    so that NaN or inf never make it into any downstream calculation."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidRatioError(f'{name} must be a real number, but got: {value!r} ({type(value).__name__})')
    try:
        value = float(value)
    except OverflowError as e:
        raise InvalidRatioError(f'{name} is too large to represent as a float: {value!r}') from e
    if not math.isfinite(value):
        raise InvalidRatioError(f'{name} must be finite, but got: {value}')
    if value <= 0:
        raise InvalidRatioError(f'{name} must be greater than 0, but got: {value}')
    return value

def check_factor(factor, name='equivalence factor'):
    """as check_positive, but additionally requires the value to be above 1,
    since ratios can only be folded into [1, factor) if that window exists"""
    factor = check_positive(factor, name)
    if factor <= 1:
        raise InvalidRatioError(f'{name} must be greater than 1, but got: {factor}')
    return factor

def check_integer(n, name='n'):
    """ensures that 'n' is an integer (of any sign), and returns it as an int"""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValueError(f'{name} must be an integer, but got: {n!r} ({type(n).__name__})')
    return int(n)

def check_count(n, name='n'):
    """ensures that 'n' is a non-negative integer"""
    n = check_integer(n, name)
    if n < 0:
        raise ValueError(f'{name} must not be negative, but got: {n}')
    return int(n)
