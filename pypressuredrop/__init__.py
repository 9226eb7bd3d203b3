"""
pypressuredrop
===================================

-----------------------------------------------------------------------
Multiphase wellbore pressure traverses and gas lift valve mechanics
-----------------------------------------------------------------------

Pressure and temperature profiles along a wellbore survey, and along the casing for gas lifted wells,
built by marching segment by segment with empirical pressure gradient correlations.

Includes;

- Wellbore surveys and gas lift valve strings, with valve depths inserted into the survey mesh
- Linear and Ramey / Shiu & Beggs flowing temperature profiles
- Beggs & Brill and Hagedorn & Brown multiphase pressure traverses, with swappable PVT and friction correlations
- Tubing and casing traverses sharing one temperature profile
- Gas lift operating point search and valve opening / closing pressures
- Survey and valve file readers

Note: Functions are grouped into modules, requiring seperate imports, e.g. from pypressuredrop.model import WellModel

"""

submodules = [
    'classes',
    'constants',
    'correlations',
    'errors',
    'gaslift',
    'io',
    'model',
    'shared_fns',
    'temperature',
    'traverse',
    'validate',
    'wellbore'
]

__all__ = submodules

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pypressuredrop.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pypressuredrop' has no attribute '{name}'"
            )
