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

import logging
import os
from typing import Optional

import pandas as pd

from pypressuredrop.errors import WellboreError
from pypressuredrop.wellbore import Wellbore, GasliftValves

logger = logging.getLogger(__name__)

_EXCEL_EXTENSIONS = ('.xlsx', '.xlsm')


def _read_table(path, skiprows: int, sep: str) -> pd.DataFrame:
    if str(path).lower().endswith('.xls'):
        raise WellboreError(f"{os.path.basename(str(path))}: legacy .xls workbooks cannot be read, save as .xlsx")
    if str(path).lower().endswith(_EXCEL_EXTENSIONS):
        return pd.read_excel(path, skiprows=skiprows, header=None, engine="openpyxl")
    return pd.read_csv(path, skiprows=skiprows, sep=sep, header=None, skipinitialspace=True)


def read_survey(path, id: Optional[float] = None, valves: Optional[GasliftValves] = None,
                allow_negatives: bool = False, skiprows: int = 0, sep: str = ',') -> Wellbore:
    """ Reads a wellbore survey from a delimited text or Excel file.

        Columns, in order: md (ft), inclination (deg), tvd (ft) and, unless id is given, inner diameter (in)
        path: File path. .xlsx / .xlsm files are read with openpyxl
        id: Uniform inner diameter (in) overriding any ID column
        valves: GasliftValves to insert into the mesh
        allow_negatives: Passed to Wellbore
        skiprows: Header lines to skip
        sep: Column delimiter for text files
    """
    df = _read_table(path, skiprows, sep)
    needed = 3 if id is not None else 4
    if df.shape[1] < needed:
        raise WellboreError(f"{os.path.basename(str(path))} has {df.shape[1]} columns; expected at least {needed} "
                            "(md, inclination, tvd" + (")" if id is not None else ", id)"))
    df = df.apply(pd.to_numeric, errors="raise")
    ids = id if id is not None else df.iloc[:, 3].to_numpy()
    logger.debug(f"Read {len(df)} survey points from {path}")
    return Wellbore.with_valves(df.iloc[:, 0].to_numpy(), df.iloc[:, 1].to_numpy(), df.iloc[:, 2].to_numpy(), ids,
                                valves=valves, allow_negatives=allow_negatives)


def read_valves(path, skiprows: int = 0, sep: str = ',') -> GasliftValves:
    """ Reads a valve string with columns md (ft), PTRO (psig), R and port (64ths in) """
    df = _read_table(path, skiprows, sep)
    if df.shape[1] < 4:
        raise WellboreError(f"{os.path.basename(str(path))} has {df.shape[1]} columns; expected md, ptro, R, port")
    return GasliftValves(df.iloc[:, 0].to_numpy(dtype=float), df.iloc[:, 1].to_numpy(dtype=float),
                         df.iloc[:, 2].to_numpy(dtype=float), df.iloc[:, 3].to_numpy())
