#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyPressureDrop - Multiphase wellbore pressure traverses and gas lift valve mechanics
              Copyright (C) 2026, pyPressureDrop contributors

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.
"""


# Constants
R = 10.731577089016  # Universal gas constant, ft³·psia/°R·lb.mol
psc = 14.696  # Standard conditions pressure (psia)
tsc = 60  # Standard conditions temperature (deg F)
degF2R = 459.67  # Offset to convert degrees F to degrees Rankine
tscr = tsc + degF2R  # Standard conditions temperature (deg R)
MW_AIR = 28.97  # MW of Air
CUFTperBBL = 5.61458
WDEN = 62.367 # Water Density lb/cuft
AIRDEN = 0.0764 # Air density at standard conditions lb/cuft
SEC_PER_DAY = 86400.0
GC = 32.174  # lbm*ft/(lbf*s2)

# Nitrogen, for gas lift valve dome charges
TC_N2 = 227.16  # deg R
PC_N2 = 492.84  # psia
