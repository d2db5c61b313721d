# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

long_description = "Zero Lag MACD Enhanced: a configurable zero-lag MACD indicator engine for Python 3"

setup(
    name = "zero_lag_macd",
    packages = find_packages(exclude=["tests", "tests.*", "scripts"]),
    version = "0.1.0",
    description=long_description,
    long_description=long_description,
    keywords = ['technical analysis', 'python3', 'pandas', 'macd', 'zlema'],
    license="The MIT License (MIT)",
    python_requires=">=3.9",
    classifiers = [
        'Programming Language :: Python :: 3',
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Intended Audience :: Developers',
        'Intended Audience :: Financial and Insurance Industry',
        'Topic :: Office/Business :: Financial :: Investment',
    ],
    install_requires=['numba', 'numpy', 'pandas>=2.0', 'requests'],

    # List additional groups of dependencies here (e.g. development dependencies).
    # You can install these using the following syntax, for example:
    # $ pip install -e .[dev,test]
    extras_require = {
        'dev': ['jupyterlab', 'pytest'],
        'test': ['pytest'],
    },
    entry_points = {
        'console_scripts': ['zero-lag-macd = zero_lag_macd.cli:main'],
    },
)
