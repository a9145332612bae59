#!/usr/bin/env python

"""Set up the Nanakshahi calendar package.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

This package can be installed using pip as follows:

    pip install pynanakshahi

To install with the test requirements:

    pip install 'pynanakshahi[test]'
"""

import os
import re

from setuptools import setup

with open(os.path.join(os.path.dirname(__file__), 'nanakshahi', '__init__.py')) as v:
    m = re.search(r"^ *__version__ *= *'(.*?)'", v.read(), re.M)
    if m is None:
        raise RuntimeError("Cannot detect version in nanakshahi/__init__.py")
    VERSION = m.group(1)

readme = os.path.join(os.path.dirname(__file__), 'README.rst')

setup(
    name='pynanakshahi',
    version=VERSION,
    description='Gregorian to Nanakshahi calendar conversion',
    keywords='nanakshahi sikh calendar gregorian date conversion',
    packages=['nanakshahi'],
    license='BSD License',
    long_description=open(readme).read(),
    python_requires='>=3.6',
    install_requires=['jdcal>=1.4'],
    extras_require=dict(test='pytest>=6'),
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
    ],
)
