#!/usr/bin/python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
import os

ROOT = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(ROOT, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='pypressuredrop',
    include_package_data=True,
    version='1.0.0',
    packages=find_packages(include=['pypressuredrop', 'pypressuredrop.*']),
    description='pyPressureDrop - Multiphase wellbore pressure traverses and gas lift valve mechanics',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='pyPressureDrop contributors',
    keywords=['pressure traverse', 'multiphase flow', 'gas lift', 'petroleum', 'production'],
    classifiers=[],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'scipy',
        'pandas',
        'tabulate',
        'openpyxl'
    ],
    extras_require={
        'test': ['pytest']
    }
)
