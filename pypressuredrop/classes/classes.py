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

from enum import Enum

class pressure_method(Enum):  # Segment pressure gradient correlation
    BB = 0
    HB = 1
    GAS = 2

class z_method(Enum):  # Gas Z-Factor calculation model
    HY = 0
    DAK = 1
    KAR = 2

class c_method(Enum):  # Gas critical properties calculation method
    SUT = 0
    PMC = 1
    HWA = 2

class ug_method(Enum):  # Gas viscosity calculation method
    LEE = 0

class pb_method(Enum):  # Bubble point calculation method
    STAN = 0
    VASBG = 1

class rs_method(Enum):  # Oil solution gas calculation method
    STAN = 0
    VASBG = 1

class bo_method(Enum):  # Oil FVF calculation method
    STAN = 0

class bw_method(Enum):  # Water FVF calculation method
    GOULD = 0

class deado_method(Enum):  # Dead oil viscosity calculation method
    GLASO = 0
    BR = 1

class liveo_method(Enum):  # Saturated oil viscosity calculation method
    CC = 0
    BR = 1

class ff_method(Enum):  # Darcy-Weisbach friction factor calculation method
    SERG = 0
    CHEN = 1

class temp_method(Enum):  # Wellbore temperature profile method
    LINEAR = 0
    SHIU = 1

class_dic = {
    "pressurecorrelation": pressure_method,
    "zmethod": z_method,
    "cmethod": c_method,
    "ugmethod": ug_method,
    "pbmethod": pb_method,
    "rsmethod": rs_method,
    "bomethod": bo_method,
    "bwmethod": bw_method,
    "deadomethod": deado_method,
    "liveomethod": liveo_method,
    "ffmethod": ff_method,
    "tempmethod": temp_method,
}
