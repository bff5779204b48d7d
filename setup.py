#!/usr/bin/env python

from setuptools import setup, find_packages

requires = [
    "click>=7.0",
    "click_log>=0.3.2",
    "tqdm>=4.8.4",
]

extra_requires = {
    "test": ["pytest>=6.0"]
}

__version__ = None
__author__ = None
__email__ = None
exec(open("src/pycpar/version.py").read())

setup(
    name="pycpar",
    author=__author__,
    author_email=__email__,
    version=__version__,
    description="Parser for CSS-like colour specifications",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    install_requires=requires,
    extras_require=extra_requires,
    python_requires=">=3.7",
    entry_points={"console_scripts": ["cpar = pycpar.cli.app:main"]},
)
