### this demo script imports the gentuning namespace and prints a few classic tunings.
### it's intended to be used interactively without the need to install the package properly, e.g.
### e.g.:  $ ipython -i demo.py

import time

# time how long init takes for debugging purposes:
init_start_time = time.time()

from src import util, _settings
from src.rational import *
from src.reduction import *
from src.powers import *
from src.generators import *
from src.stacking import *
from src.pitches import *
from src.perception import *
from src.display import *

init_end_time = time.time()
init_time = init_end_time - init_start_time
print(f'gentuning library initialised in {init_time:.2} seconds')

print('\n12-tone pythagorean tuning, generate(3, 7, 12):')
scale_table(generate(3, 7, 12)).show()

print('\n5-limit lattice around 1/1, limit5(2, -1, 2, -1):')
lattice_table(limit5(2, -1, 2, -1)).show()

print('\nFifths stacked above A4:')
for f in stack(12):
    print(f'{f:10.2f} Hz  clamped: {clamp(f):7.2f} Hz  {nearest_pitch(clamp(f)):>4}  {frequency_color(f)}')
