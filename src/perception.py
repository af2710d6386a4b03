#### perceptual mappings of frequencies: nearest notated pitch, colour, octave clamping

from ._settings import A4_PITCH, NO_MATCH, COLOR_MAP, LIGHTEN_AMOUNT
from .reduction import cents
from .pitches import chromatic_table
from .util import log, check_positive

import colorsys
import numpy as np
import matplotlib
from matplotlib import colors as mcolors


def nearest_pitch(frequency, table=None):
    """returns the name of the pitch in 'table' whose frequency is closest to the input.
    'table' is any iterable of (name, frequency) pairs, by default the chromatic
    pitch table over _settings.PITCH_RANGE. if two pitches are equally close,
    the one that comes first in the table wins. an empty table gives NO_MATCH."""
    frequency = check_positive(frequency, 'frequency')
    if table is None:
        table = chromatic_table()
    table = list(table)
    if len(table) == 0:
        return NO_MATCH
    names = [name for name, freq in table]
    freqs = np.array([freq for name, freq in table], dtype=float)
    # argmin returns the first occurrence of the minimum:
    best = int(np.argmin(np.abs(freqs - frequency)))
    return names[best]

def nearest_interval(ratio):
    """returns the nearest 12-TET interval to a ratio, as a (semitones, cents_offset) pair,
    where cents_offset is how far the ratio lies above (or below) that interval.
    e.g. 3/2 gives (7, 1.955) and 5/4 gives (4, -13.686)"""
    exact_cents = cents(ratio)
    semitones = round(exact_cents / 100)
    return semitones, exact_cents - (semitones * 100)

def default_color_fn(fraction):
    return matplotlib.colormaps[COLOR_MAP](fraction)

def lighten(color, amount=LIGHTEN_AMOUNT):
    """raises the HSL lightness of a colour by 'amount' percentage points (up to white),
    accepting anything matplotlib understands as a colour and returning an RGB tuple"""
    r, g, b = mcolors.to_rgb(color)
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    l = min(1.0, l + amount / 100)
    return colorsys.hls_to_rgb(h, l, s)

def frequency_color(frequency, color_fn=None, lighten_fn=None, reference=A4_PITCH):
    """maps a frequency to a hex colour string by its position within the octave
    relative to the reference pitch, so that all octaves of a pitch share a colour.
    'color_fn' maps a fraction in [0,1) to a colour (by default through the
    _settings.COLOR_MAP colormap), and 'lighten_fn' adjusts that colour afterward."""
    frequency = check_positive(frequency, 'frequency')
    reference = check_positive(reference, 'reference pitch')
    if color_fn is None:
        color_fn = default_color_fn
    if lighten_fn is None:
        lighten_fn = lighten

    fraction = (cents(frequency / reference) / 1200) % 1
    if fraction >= 1:
        # a tiny negative remainder can round up to exactly 1:
        fraction = 0.0
    color = lighten_fn(color_fn(fraction))
    log(f'Frequency {frequency} sits at {fraction:.4f} of the octave from {reference}')
    return mcolors.to_hex(color)

def clamp(frequency, base=A4_PITCH):
    """halves or doubles a frequency until it is inside one octave above the base,
    i.e. within [base, 2*base]"""
    frequency = check_positive(frequency, 'frequency')
    base = check_positive(base, 'base')
    while True:
        if frequency > base * 2:
            frequency = frequency / 2
        elif frequency < base:
            frequency = frequency * 2
        else:
            return frequency
