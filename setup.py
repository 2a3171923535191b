# coding=utf-8
"""Setup package 'repdec'."""

import re

from setuptools import setup

with open('README.md') as file:
    long_description = file.read()

with open('src/repdec/version.py') as file:
    version = '.'.join(
        re.search(r"version_tuple = \(([^)]*)\)", file.read())
        .group(1).replace(' ', '').split(','))

setup(
    name="repdec",
    version=version,
    author="Michael Amrhein",
    author_email="michael@adrhinum.de",
    description="Conversion between repeating decimals and exact fractions",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={'': 'src'},
    packages=['repdec'],
    python_requires=">=3.7",
    extras_require={
        'test': ["pytest", "hypothesis"],
    },
    entry_points={
        'console_scripts': ['repdec = repdec.__main__:main'],
    },
    license='BSD',
    keywords='rational number fraction repeating decimal',
    platforms='all',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules"
        ],
    zip_safe=False,
    )
