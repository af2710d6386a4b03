from ..pitches import Pitch, chromatic_table, parse_pitch_name, name_to_value, pitch_name, value_to_pitch
from .testing_tools import compare

import pytest

def test_name_value_conversion():
    compare(name_to_value('A4'), 49)
    compare(name_to_value('C4'), 40)
    compare(name_to_value('A0'), 1)
    compare(name_to_value('C#4'), 41)
    compare(name_to_value('Db4'), 41)
    compare(name_to_value('c4'), 40)

    compare(pitch_name(40), 'C4')
    compare(pitch_name(41), 'Db4')
    compare(pitch_name(41, prefer_sharps=True), 'C#4')
    compare(pitch_name(-8), 'C0')
    compare(pitch_name(88), 'C8')

def test_parse_pitch_name():
    compare(parse_pitch_name('F#3'), (6, 3))
    compare(parse_pitch_name('Bb5'), (10, 5))
    compare(parse_pitch_name('E##2'), (6, 2))
    with pytest.raises(ValueError):
        parse_pitch_name('H4')
    with pytest.raises(ValueError):
        parse_pitch_name('C')

def test_value_to_pitch():
    compare(value_to_pitch(49), 440.0)
    compare(value_to_pitch(61), 880.0)
    compare(value_to_pitch(49, reference=432.0), 432.0)
    compare(abs(value_to_pitch(40) - 261.626) < 1e-3, True)

def test_chromatic_table():
    table = chromatic_table('A4', 'C5')
    compare([p.name for p in table], ['A4', 'Bb4', 'B4', 'C5'])
    compare(table[0], Pitch('A4', 440.0))
    compare([p.name for p in chromatic_table('A4', 'C5', prefer_sharps=True)], ['A4', 'A#4', 'B4', 'C5'])

def test_default_table_range():
    table = chromatic_table()
    compare(len(table), 97)
    compare(table[0].name, 'C0')
    compare(table[-1].name, 'C8')
    freqs = [p.frequency for p in table]
    compare(freqs == sorted(freqs), True)

def test_table_must_run_upward():
    with pytest.raises(ValueError):
        chromatic_table('C5', 'C4')
