#!/usr/bin/env python

# Setup file for Eposdrivers

from setuptools import setup, find_packages

from eposdrivers import _version


with open('requirements.txt') as f:
    install_requires = [l.strip() for l in f.readlines() if
                        l.strip() and not l.startswith('#')]

setup(
    name="eposdrivers",
    version=_version,
    author="Eposdrivers developers",
    description="Python drivers for ESC/POS thermal printers on serial ports",
    long_description=("This package drives ESC/POS thermal receipt "
                      "printers connected to a serial or USB virtual serial "
                      "port: raw printing, raster images cut in pages and "
                      "cash drawer pulses."),
    license="GNU GPL 2 or later",
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.7',
)
