#!/usr/bin/env python

from setuptools import setup

setup(name='gentuning',
      version='1.0',
      description='Tuning ratios from algebraic generators: octave reduction, exact fractions, lattices and perceptual mappings',
      author='Andrey Barsky',
      author_email='andrey.barsky@gmail.com',
      install_requires=['numpy', 'matplotlib>=3.5'],
      extras_require={
        'dev': [ 'ipdb' ],
        'test': [ 'pytest' ],
      },
      packages=['gentuning', 'gentuning.test'],
      package_dir = {'gentuning': 'src'},
     )
