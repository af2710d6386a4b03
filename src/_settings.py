############# reference settings:

### A4_PITCH is the frequency in Hz of the reference note A4.
### the default pitch table is tuned relative to it, and frequency colours
### are measured as a distance (in octaves) from it.
A4_PITCH = 440.0

### DEFAULT_EQUIVALENCE is the factor that ratios are reduced into
### when no other is specified. 2 is the octave; 3 would be the tritave
### of e.g. Bohlen-Pierce tuning.
DEFAULT_EQUIVALENCE = 2


############# pitch table settings:

### PITCH_RANGE gives the lowest and highest notes (inclusive) of the chromatic
### pitch table that nearest_pitch searches through by default.
PITCH_RANGE = ('C0', 'C8')

### PREFER_SHARPS controls whether accidental ('black') notes in the default
### pitch table are spelled with sharps (C#4) or with flats (Db4).
PREFER_SHARPS = False

### NO_MATCH is the name returned by a pitch lookup against an empty table.
NO_MATCH = 'no_match'


############# fraction settings:

### MAX_DENOMINATOR bounds the denominators that fraction reconstruction
### will consider before giving up on an exact match, and
### FRACTION_ULPS is how many units in the last place of a float a candidate
### fraction may sit from it and still count as an exact match for it.
### (0 demands that the fraction rounds to exactly that float.)
### ratios built from small primes have tiny denominators, so these limits
### only matter for irrational or otherwise very precise inputs.
MAX_DENOMINATOR = 10_000_000
FRACTION_ULPS = 1


############# colour settings:

### COLOR_MAP names the matplotlib colormap used to turn a position within
### the octave into a hue. it should be cyclic (so that octaves wrap
### around seamlessly), e.g. 'hsv' or 'twilight'.
COLOR_MAP = 'hsv'

### LIGHTEN_AMOUNT is the number of percentage points of HSL lightness
### that frequency colours are raised by after the colormap lookup.
LIGHTEN_AMOUNT = 20


############# debug settings:

### VERBOSE determines whether the library log prints anything by default.
### can be toggled at runtime with: util.log.verbose = True
VERBOSE = False
