#### chromatic pitch tables: note names and their 12-TET frequencies
### notes are indexed by piano key 'value', where A0 is 1, C4 is 40 and A4 is 49.

from ._settings import A4_PITCH, PITCH_RANGE, PREFER_SHARPS
from .util import check_positive

from collections import namedtuple
import math
import re

Pitch = namedtuple('Pitch', ['name', 'frequency'])

# position of each natural note within the octave, counting up from C:
note_positions = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}
accidental_offsets = {'': 0, '#': 1, '##': 2, 'b': -1, 'bb': -2}

sharp_names = ['C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G', 'G#', 'A', 'A#', 'B']
flat_names =  ['C', 'Db', 'D', 'Eb', 'E', 'F', 'Gb', 'G', 'Ab', 'A', 'Bb', 'B']

pitch_name_regex = re.compile(r'^([A-Ga-g])(##|bb|#|b)?(-?\d+)$')

# get octave and position from note value:
def oct_pos(value):
    oct = math.floor((value+8) / 12)
    pos = (value - 4) % 12
    return oct, pos

# get note value from octave and position
def oct_pos_to_value(oct, pos):
    return ((12*oct)-8) + pos

def parse_pitch_name(name):
    """splits a scientific pitch name like 'C#4' into its
    position within the octave (1) and its octave (4)"""
    match = pitch_name_regex.match(name.strip())
    if match is None:
        raise ValueError(f'Could not parse pitch name: {name!r} (expected something like C4, F#3 or Bb5)')
    letter, accidental, oct = match.groups()
    pos = note_positions[letter.upper()] + accidental_offsets[accidental or '']
    return pos, int(oct)

def name_to_value(name):
    pos, oct = parse_pitch_name(name)
    return oct_pos_to_value(oct, pos)

def pitch_name(value, prefer_sharps=PREFER_SHARPS):
    oct, pos = oct_pos(value)
    names = sharp_names if prefer_sharps else flat_names
    return f'{names[pos]}{oct}'

def value_to_pitch(value, reference=A4_PITCH):
    """12-TET frequency of a note value, relative to the reference pitch of A4"""
    return 2 ** ((value-49)/12) * reference

def chromatic_table(start=PITCH_RANGE[0], end=PITCH_RANGE[1], reference=A4_PITCH, prefer_sharps=PREFER_SHARPS):
    """returns a list of Pitches for every semitone from 'start' to 'end' inclusive,
    e.g. chromatic_table('A4', 'C5') gives A4, Bb4, B4 and C5 with their frequencies"""
    reference = check_positive(reference, 'reference pitch')
    start_value, end_value = name_to_value(start), name_to_value(end)
    if start_value > end_value:
        raise ValueError(f'Pitch table must run upward, but {start} is above {end}')
    return [Pitch(pitch_name(v, prefer_sharps), value_to_pitch(v, reference))
            for v in range(start_value, end_value + 1)]
