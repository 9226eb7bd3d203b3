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
from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt

from pypressuredrop.constants import psc, tscr, degF2R, CUFTperBBL, WDEN, AIRDEN, SEC_PER_DAY
from pypressuredrop.correlations import (FlowConditions, CorrelationSet, GasColumn, oil_sg, water_viscosity,
                                         gas_oil_ift, gas_water_ift)
from pypressuredrop.errors import ConvergenceError, DimensionMismatchError
from pypressuredrop.shared_fns import convert_to_numpy

logger = logging.getLogger(__name__)


def segment_conditions(p_avg: float, t_avg: float, md_length: float, tvd_length: float, inclination: float,
                       diameter: float, roughness: float, q_o: float, q_w: float, glr: float, api: float,
                       sg_water: float, sg_gas: float, co2: float = 0, h2s: float = 0,
                       correlations: Optional[CorrelationSet] = None, upward: bool = True) -> FlowConditions:
    """ Evaluates fluid properties and superficial velocities at a segment's average conditions.

        p_avg: Average pressure (psia). Floored at standard pressure
        t_avg: Average temperature (deg F)
        md_length, tvd_length: Segment measured length and TVD change, shallower to deeper end (ft)
        inclination: Average inclination (deg from vertical)
        diameter, roughness: Pipe inner diameter and absolute roughness (in)
        q_o, q_w: Oil and water rates (stb/d)
        glr: Gas liquid ratio (scf/stb of liquid)
        api, sg_water, sg_gas: Oil API gravity, water and gas specific gravities
        co2, h2s: Gas impurity mole fractions
        correlations: CorrelationSet. Defaults used if None
        upward: True if flow moves toward the surface
    """
    if correlations is None:
        correlations = CorrelationSet()
    p = max(p_avg, psc)
    degf = t_avg
    sg_o = oil_sg(api)
    area = math.pi * (diameter / 12.0) ** 2 / 4.0  # ft2

    # Gas
    z = correlations.gas_z(p, degf, sg_gas, co2, h2s)
    rho_g = correlations.gas_density(p, degf, sg_gas, co2, h2s, z=z)
    bg = psc / p * z * (degf + degF2R) / tscr  # rcf/scf
    mu_g = correlations.gas_viscosity(sg_gas, p, degf, z)

    # Oil
    rsb = glr * (q_o + q_w) / q_o if q_o > 0 else 0.0
    pb = correlations.bubble_point(api, sg_gas, rsb, degf)
    if p >= pb:
        rs = rsb
    else:
        rs = min(correlations.solution_gor(api, sg_gas, p, degf), rsb)
    bo = correlations.oil_fvf(api, sg_gas, rs, degf)
    rho_o = (WDEN * sg_o * CUFTperBBL + AIRDEN * sg_gas * rs) / (CUFTperBBL * bo)
    mu_o = correlations.live_oil_viscosity(correlations.dead_oil_viscosity(api, degf), rs)

    # Water
    bw = correlations.water_fvf(p, degf)
    rho_w = WDEN * sg_water / bw
    mu_w = water_viscosity(p, degf)

    # In-situ rates
    q_oil_insitu = q_o * bo * CUFTperBBL / SEC_PER_DAY  # ft3/s
    q_water_insitu = q_w * bw * CUFTperBBL / SEC_PER_DAY
    free_gas = max(glr * (q_o + q_w) - rs * q_o, 0.0)  # scf/d
    q_gas_insitu = free_gas * bg / SEC_PER_DAY

    q_liq_insitu = q_oil_insitu + q_water_insitu
    f_w = q_water_insitu / q_liq_insitu if q_liq_insitu > 0 else 0.0

    rho_l = f_w * rho_w + (1 - f_w) * rho_o
    mu_l = f_w * mu_w + (1 - f_w) * mu_o
    sigma_l = f_w * gas_water_ift(p, degf) + (1 - f_w) * gas_oil_ift(api, degf, rs)

    return FlowConditions(md_length=md_length, tvd_length=tvd_length, inclination=inclination,
                          diameter=diameter, roughness=roughness,
                          v_sl=q_liq_insitu / area, v_sg=q_gas_insitu / area,
                          rho_l=rho_l, rho_g=rho_g, sigma_l=sigma_l, mu_l=mu_l, mu_g=mu_g,
                          p_avg=p, upward=upward, frictionfactor=correlations.frictionfactor)


def calculate_pressure_segment(p_known: float, t_avg: float, dp_est: float, md_top: float, md_bottom: float,
                               tvd_length: float, inclination: float, diameter: float, roughness: float,
                               q_o: float, q_w: float, glr: float, api: float, sg_water: float, sg_gas: float,
                               co2: float = 0, h2s: float = 0, correlations: Optional[CorrelationSet] = None,
                               known_at_top: bool = True, upward: bool = True, error_tolerance: float = 0.1,
                               max_iterations: int = 25, gradient=None) -> Tuple[float, int]:
    """ Solves the pressure differential across one segment by fixed point iteration.

        p_known: Pressure at the known end of the segment (psia)
        known_at_top: True if p_known is at the shallower end (marching down), False if at the deeper end
        dp_est: Seed differential (psi)
        gradient: PressureGradientCorrelation overriding correlations.pressurecorrelation

        Returns (dp, iterations) where dp is deeper-end minus shallower-end pressure (psi).
        Raises ConvergenceError if the differential has not settled within error_tolerance after max_iterations
    """
    md_length = md_bottom - md_top
    if md_length <= 0:
        return 0.0, 0
    if max_iterations < 1:
        raise ValueError("max_iterations must be at least 1")
    if correlations is None:
        correlations = CorrelationSet()
    if gradient is None:
        gradient = correlations.pressurecorrelation

    direction = 1.0 if known_at_top else -1.0
    dp = dp_est
    change = float("inf")
    for iteration in range(1, max_iterations + 1):
        p_avg = p_known + direction * dp / 2.0
        flow = segment_conditions(p_avg, t_avg, md_length, tvd_length, inclination, diameter, roughness,
                                  q_o, q_w, glr, api, sg_water, sg_gas, co2, h2s, correlations, upward)
        dp_new = gradient(flow)
        change = abs(dp_new - dp)
        dp = dp_new
        if change <= error_tolerance:
            return dp, iteration

    raise ConvergenceError(md_top, md_bottom, max_iterations, dp, change)


def traverse(wellbore, temperatureprofile: npt.ArrayLike, reference_pressure: float, q_o: float, q_w: float,
             glr: float, api: float, sg_water: float, sg_gas: float, co2: float = 0, h2s: float = 0,
             correlations: Optional[CorrelationSet] = None, roughness: float = 0.0, dp_est: float = 10.0,
             error_tolerance: float = 0.1, max_iterations: int = 25, outlet_referenced: bool = True,
             injection_point: Optional[float] = None, natural_glr: Optional[float] = None,
             upward: bool = True, gradient=None) -> np.ndarray:
    """ Marches a pressure profile along the wellbore mesh, one segment at a time.

        wellbore: Wellbore to traverse
        temperatureprofile: Temperatures (deg F) aligned to wellbore.md
        reference_pressure: Known pressure (psia). At the first point if outlet_referenced, else at the last point
        q_o, q_w: Oil and water rates (stb/d)
        glr: Gas liquid ratio (scf/stb of liquid), including any lift gas
        roughness: Absolute pipe roughness (in)
        dp_est: Seed differential for the first segment (psi). Later segments start from the previous
                converged differential scaled by segment length
        error_tolerance: Convergence tolerance on each segment differential (psi)
        max_iterations: Iteration bound per segment
        injection_point: Measured depth of gas injection (ft). Segments whose deeper end lies below it use natural_glr
        natural_glr: Formation GLR below the injection point. The full glr is used when None
        upward: Flow direction, True for production toward surface
        gradient: Optional PressureGradientCorrelation overriding correlations.pressurecorrelation

        Returns pressures (psia) aligned to wellbore.md
    """
    if correlations is None:
        correlations = CorrelationSet()
    md, tvd, inc, ids = wellbore.md, wellbore.tvd, wellbore.inc, wellbore.id
    n = len(md)
    temps = convert_to_numpy(temperatureprofile)
    if len(temps) != n:
        raise DimensionMismatchError(f"Temperature profile has {len(temps)} points but the wellbore has {n}.")

    pressures = np.zeros(n)
    if outlet_referenced:
        pressures[0] = reference_pressure
        segments = range(0, n - 1)
    else:
        pressures[-1] = reference_pressure
        segments = range(n - 2, -1, -1)

    dp_prev, length_prev = None, None
    total_iterations = 0
    for upper in segments:
        lower = upper + 1
        md_length = md[lower] - md[upper]
        if dp_prev is None:
            seed = dp_est
        else:
            seed = dp_prev * md_length / length_prev

        seg_glr = glr
        if injection_point is not None and natural_glr is not None and md[lower] > injection_point:
            seg_glr = natural_glr

        p_known = pressures[upper] if outlet_referenced else pressures[lower]
        dp, iterations = calculate_pressure_segment(
            p_known, (temps[upper] + temps[lower]) / 2.0, seed, md[upper], md[lower],
            tvd[lower] - tvd[upper], (inc[upper] + inc[lower]) / 2.0, ids[lower], roughness,
            q_o, q_w, seg_glr, api, sg_water, sg_gas, co2, h2s, correlations,
            known_at_top=outlet_referenced, upward=upward, error_tolerance=error_tolerance,
            max_iterations=max_iterations, gradient=gradient)
        total_iterations += iterations

        if outlet_referenced:
            pressures[lower] = pressures[upper] + dp
        else:
            pressures[upper] = pressures[lower] - dp
        if md_length > 0:
            dp_prev, length_prev = dp, md_length

    logger.debug(f"Traverse of {n} points converged in {total_iterations} segment iterations")
    return pressures


def casing_traverse(wellbore, temperatureprofile: npt.ArrayLike, chp: float, sg_gas_inj: float,
                    co2_inj: float = 0, h2s_inj: float = 0, correlations: Optional[CorrelationSet] = None,
                    roughness: float = 0.0, dp_est_inj: float = 1.0, error_tolerance_inj: float = 0.05,
                    max_iterations: int = 25) -> np.ndarray:
    """ Injection gas pressure profile down the casing, from the casing head pressure chp (psia).

        The annulus holds gas only, so the single phase gas column correlation is always used.
        temperatureprofile is the casing temperature (deg F) aligned to wellbore.md
    """
    return traverse(wellbore, temperatureprofile, chp, 0.0, 0.0, 0.0, 35.0, 1.0, sg_gas_inj, co2_inj, h2s_inj,
                    correlations=correlations, roughness=roughness, dp_est=dp_est_inj,
                    error_tolerance=error_tolerance_inj, max_iterations=max_iterations,
                    outlet_referenced=True, upward=False, gradient=GasColumn())
