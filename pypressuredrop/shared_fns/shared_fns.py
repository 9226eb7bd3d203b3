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

import numpy as np
import numpy.typing as npt

def convert_to_numpy(input_data) -> np.ndarray:
    # Convert input data to a float numpy array ensuring it is always sizeable
    if isinstance(input_data, np.ndarray):
        return input_data.astype(float)
    else:
        # Convert list, tuple, scalar, or other types to numpy array
        # Ensuring even scalars become arrays with one element
        return np.atleast_1d(np.asarray(input_data, dtype=float))

def frozen(input_data: npt.ArrayLike) -> np.ndarray:
    """ Returns a read-only float copy of the input, so that stored survey and valve arrays cannot be edited in place """
    arr = np.array(convert_to_numpy(input_data), dtype=float)
    arr.flags.writeable = False
    return arr

def same_lengths(*arrays) -> bool:
    """ True if all inputs have the same length """
    lens = [len(a) for a in arrays]
    return lens.count(lens[0]) == len(lens)
