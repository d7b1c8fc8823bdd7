# -*- coding: utf-8 -*-
#
# Copyright (c) 2021 Ravindra Shinde (TREX CoE)
#
# This file is part of TREX (http://trex-coe.eu) and is distributed under
# the terms of the BSD 3-Clause License.

"""xyzmonitor: Convert XYZ geometries to Gaussian optimization logs and back.

xyzmonitor is a Python library that recognizes XYZ text (standard,
multi-frame or headerless) and writes it as a Gaussian optimization log
that GaussView displays as an animation. It also decodes the Gaussian
clipboard record into XYZ text. It relies on cclib for element data.
"""

import setuptools


# Chosen from http://www.python.org/pypi?:action=list_classifiers
classifiers = """Development Status :: 5 - Production/Stable
Environment :: Console
Intended Audience :: Science/Research
Intended Audience :: Developers
License :: OSI Approved :: BSD License
Natural Language :: English
Operating System :: OS Independent
Programming Language :: Python
Programming Language :: Python :: 3
Topic :: Scientific/Engineering :: Chemistry
Topic :: Software Development :: Libraries :: Python Modules"""


def setup_xyzmonitor():

    doclines = __doc__.split("\n")

    setuptools.setup(
        name="xyzmonitor",
        version="1.0.0",
        author="Ravindra Shinde",
        author_email="neelravi@gmail.com",
        maintainer="Ravindra Shinde",
        maintainer_email="neelravi@gmail.com",
        license="BSD 3-Clause License",
        description=doclines[0],
        long_description="\n".join(doclines[2:]),
        classifiers=classifiers.split("\n"),
        platforms=["Any."],
        python_requires=">=3.7",
        packages=setuptools.find_packages(exclude=['*test*']),
        entry_points={
            'console_scripts': [
                'xyz2glog=xyzmonitor.scripts.xyz2glog:main',
                'gclip2xyz=xyzmonitor.scripts.gclip2xyz:main',
            ]
        },
        install_requires=[
            "numpy",
            "periodictable",
            "cclib>=1.7.0",
        ],
        extras_require={
            "test": ["pytest"],
        },

    )


if __name__ == '__main__':
    setup_xyzmonitor()
