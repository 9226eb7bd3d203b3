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

import math
import logging
from dataclasses import dataclass, asdict, field
from typing import List, Optional, Tuple

import numpy as np
import numpy.typing as npt
import pandas as pd
from scipy.optimize import brentq
from tabulate import tabulate

from pypressuredrop.constants import psc, degF2R, tsc, TC_N2, PC_N2
from pypressuredrop.correlations import HallYarboroughZ
from pypressuredrop.model import WellModel, pressures_and_temp
from pypressuredrop.shared_fns import convert_to_numpy
from pypressuredrop.wellbore import interpolate_at

logger = logging.getLogger(__name__)

_n2_z = HallYarboroughZ()


@dataclass
class ValveState:
    """Operating conditions of one gas lift valve. Pressures in psig, temperatures in deg F."""
    md: float
    tvd: float
    ptro: float
    R: float
    port: int
    t_tubing: float
    t_casing: float
    p_tubing: float
    p_casing: float
    p_open: float
    p_close: float
    p_surface_open: float
    p_surface_close: float
    ppef: float
    status: str


@dataclass
class OperatingPoint:
    """ Selected injection depth.

        md: Injection depth (ft MD)
        differential: Casing minus tubing pressure at md (psi)
        feasible: False when no candidate reached dp_min and the shallowest candidate was returned instead
        message: Diagnostic for infeasible searches
        candidate_depths, differentials: Every depth tried and its casing minus tubing differential
        tubing_pressures, casing_pressures, temperatures: Profiles (psia, psia, deg F) for the selected depth
    """
    md: float
    differential: float
    feasible: bool
    message: str
    candidate_depths: np.ndarray
    differentials: np.ndarray
    tubing_pressures: np.ndarray
    casing_pressures: np.ndarray
    temperatures: np.ndarray


@dataclass
class GasliftResult:
    md: np.ndarray
    operating_point: OperatingPoint
    valves: List[ValveState] = field(default_factory=list)

    @property
    def tubing_pressures(self) -> np.ndarray:
        return self.operating_point.tubing_pressures

    @property
    def casing_pressures(self) -> np.ndarray:
        return self.operating_point.casing_pressures

    @property
    def temperatures(self) -> np.ndarray:
        return self.operating_point.temperatures


def dome_pressure_at_temperature(p_dome_60: float, degf: float) -> float:
    """ Nitrogen dome charge pressure at valve temperature.

        p_dome_60: Dome pressure at 60 deg F (psig)
        degf: Valve temperature (deg F)

        Holds p / (Z T) constant across the temperature change (fixed dome volume), with
        Hall & Yarborough Z-Factors at nitrogen critical properties. Returns psig
    """
    if p_dome_60 <= 0:
        return p_dome_60
    p1 = p_dome_60 + psc
    t1 = tsc + degF2R
    t2 = degf + degF2R
    target = p1 / (_n2_z(p1 / PC_N2, t1 / TC_N2) * t1)

    def err(p2):
        return p2 / (_n2_z(p2 / PC_N2, t2 / TC_N2) * t2) - target

    hi = p1 * t2 / t1 * 2.0
    while err(hi) < 0:
        hi *= 2.0
    return brentq(err, 1e-3, hi) - psc


def valve_pressures(ptro: float, R: float, p_tubing: float, degf: float) -> Tuple[float, float]:
    """ Opening and closing pressures at depth (psig) of a gas lift valve.

        ptro: Test rack opening pressure at 60 deg F (psig)
        R: Port area / bellows area
        p_tubing: Tubing pressure at the valve (psig)
        degf: Valve temperature (deg F)

        An orifice (ptro = 0 and R = 0) opens and closes at the tubing pressure
    """
    if ptro == 0 and R == 0:
        return p_tubing, p_tubing
    pbt = dome_pressure_at_temperature(ptro * (1.0 - R), degf)
    if R >= 1:
        return math.inf, pbt
    return (pbt - R * p_tubing) / (1.0 - R), pbt


def _candidate_depths(model: WellModel, candidate_depths: Optional[npt.ArrayLike], max_candidates: int) -> np.ndarray:
    path = model.flowpath()
    if candidate_depths is None:
        if model.valves is None or len(model.valves) == 0:
            raise ValueError("No candidate injection depths: supply candidate_depths or valves")
        depths = model.valves.md[(model.valves.md >= path.md[0]) & (model.valves.md <= path.max_md)]
    else:
        depths = convert_to_numpy(candidate_depths)
    depths = np.unique(depths)
    if len(depths) == 0:
        raise ValueError("No candidate injection depths lie within the flow path")
    if len(depths) > max_candidates:
        raise ValueError(f"{len(depths)} candidate depths exceeds max_candidates ({max_candidates})")
    return depths


def find_operating_point(model: WellModel, candidate_depths: Optional[npt.ArrayLike] = None, dp_min: float = 100,
                         max_candidates: int = 100) -> OperatingPoint:
    """ Searches candidate injection depths for the deepest one where casing pressure still exceeds
        tubing pressure by at least dp_min (psi).

        candidate_depths: Depths to try (ft MD). Defaults to the valve depths within the flow path
        max_candidates: Upper bound on the number of depths tried

        If no candidate qualifies, the shallowest candidate is returned with feasible=False
    """
    depths = _candidate_depths(model, candidate_depths, max_candidates)
    md = model.flowpath().md

    differentials, profiles = [], []
    for depth in depths:
        tubing, casing, temps = pressures_and_temp(model, injection_point=depth)
        differentials.append(interpolate_at(md, casing, depth) - interpolate_at(md, tubing, depth))
        profiles.append((tubing, casing, temps))
    differentials = np.array(differentials)

    qualifying = np.nonzero(differentials >= dp_min)[0]
    if len(qualifying) > 0:
        idx, feasible, message = int(qualifying[-1]), True, ""
    else:
        idx, feasible = 0, False
        message = (f"No candidate depth reached the minimum casing-tubing differential of {dp_min} psi "
                   f"(largest was {np.max(differentials):.1f} psi). Returning shallowest candidate at {depths[0]}' MD.")
        logger.warning(message)

    tubing, casing, temps = profiles[idx]
    logger.debug(f"Operating point at {depths[idx]}' MD, differential {differentials[idx]:.1f} psi")
    return OperatingPoint(md=float(depths[idx]), differential=float(differentials[idx]), feasible=feasible,
                          message=message, candidate_depths=depths, differentials=differentials,
                          tubing_pressures=tubing, casing_pressures=casing, temperatures=temps)


def gaslift_model(model: WellModel, find_injectionpoint: bool = False, dp_min: float = 100,
                  candidate_depths: Optional[npt.ArrayLike] = None, max_candidates: int = 100) -> GasliftResult:
    """ Pressure profiles and valve operating conditions for a gas lifted well.

        find_injectionpoint: Search for the operating point with find_operating_point. If False,
                             model.injection_point is used
        dp_min: Minimum casing minus tubing differential for injection (psi)
        candidate_depths, max_candidates: Passed to find_operating_point

        Valve pressures are evaluated at the casing temperature (casing_temp_factor x tubing temperature)
    """
    valves = model.valves
    if valves is None or len(valves) == 0:
        raise ValueError("gaslift_model requires a valve string on the model")
    if model.chp is None:
        raise ValueError("gaslift_model requires a casing head pressure (chp)")

    if find_injectionpoint:
        op = find_operating_point(model, candidate_depths, dp_min, max_candidates)
    else:
        if model.injection_point is None:
            raise ValueError("Set model.injection_point or pass find_injectionpoint=True")
        tubing, casing, temps = pressures_and_temp(model)
        md = model.flowpath().md
        depth = model.injection_point
        diff = interpolate_at(md, casing, depth) - interpolate_at(md, tubing, depth)
        feasible = diff >= dp_min
        message = "" if feasible else f"Casing-tubing differential at the injection point is {diff:.1f} psi, below {dp_min} psi."
        if not feasible:
            logger.warning(message)
        op = OperatingPoint(md=float(depth), differential=diff, feasible=feasible, message=message,
                            candidate_depths=np.array([depth], dtype=float), differentials=np.array([diff]),
                            tubing_pressures=tubing, casing_pressures=casing, temperatures=temps)

    path = model.flowpath()
    chp = model.chp
    states = []
    for md, ptro, R, port in zip(valves.md, valves.ptro, valves.R, valves.port):
        t_tubing = interpolate_at(path.md, op.temperatures, md)
        t_casing = model.casing_temp_factor * t_tubing
        p_tubing = interpolate_at(path.md, op.tubing_pressures, md) - psc
        p_casing = interpolate_at(path.md, op.casing_pressures, md) - psc
        p_open, p_close = valve_pressures(ptro, R, p_tubing, t_casing)
        gas_column = p_casing - chp

        if np.isclose(md, op.md):
            status = "injecting"
        elif p_casing >= p_open:
            status = "open"
        else:
            status = "closed"

        states.append(ValveState(md=float(md), tvd=interpolate_at(path.md, path.tvd, md), ptro=float(ptro),
                                 R=float(R), port=int(port), t_tubing=t_tubing, t_casing=t_casing,
                                 p_tubing=p_tubing, p_casing=p_casing, p_open=p_open, p_close=p_close,
                                 p_surface_open=p_open - gas_column, p_surface_close=p_close - gas_column,
                                 ppef=R / (1.0 - R) if R < 1 else math.inf, status=status))

    return GasliftResult(md=path.md, operating_point=op, valves=states)


_TABLE_COLUMNS = [("md", "MD (ft)"), ("tvd", "TVD (ft)"), ("ptro", "PTRO"), ("R", "R"), ("port", "Port (64ths)"),
                  ("t_tubing", "T tbg (F)"), ("t_casing", "T csg (F)"), ("p_tubing", "P tbg"), ("p_casing", "P csg"),
                  ("p_open", "P open"), ("p_close", "P close"), ("p_surface_open", "PSO"),
                  ("p_surface_close", "PSC"), ("ppef", "PPEF"), ("status", "Status")]


def valve_dataframe(result: GasliftResult) -> pd.DataFrame:
    """ Valve states as a DataFrame, one row per valve """
    return pd.DataFrame([asdict(v) for v in result.valves], columns=[c for c, _ in _TABLE_COLUMNS])


def valve_table(result: GasliftResult, tablefmt: str = "simple") -> str:
    """ Valve states rendered as a text table (pressures psig) """
    headers = [h for _, h in _TABLE_COLUMNS]
    rows = [[getattr(v, c) for c, _ in _TABLE_COLUMNS] for v in result.valves]
    return tabulate(rows, headers, tablefmt=tablefmt, floatfmt=".1f")
