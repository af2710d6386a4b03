from .rational import ExactFraction, exact_fraction, max_fraction_size
from .reduction import reduce_ratio, equivalence, equivalence_exponent, angle, cents
from .powers import PowerSpec, powers, limit_n
from .generators import GeneratorStep, generate, power_n, pythagorean_comma
from .stacking import LatticeCell, stack, ratios, partials, edo12, limit5
from .pitches import Pitch, chromatic_table
from .perception import nearest_pitch, nearest_interval, frequency_color, lighten, clamp
from .util import log, InvalidRatioError
