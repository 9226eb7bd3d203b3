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
from typing import Optional

import numpy as np

from pypressuredrop.classes import temp_method
from pypressuredrop.validate import validate_methods
from pypressuredrop.constants import CUFTperBBL, WDEN, AIRDEN, SEC_PER_DAY
from pypressuredrop.correlations import oil_sg

logger = logging.getLogger(__name__)

# Shiu & Beggs (1980) relaxation distance coefficients
SHIU_COEFFS = (0.0149, 0.5253, 2.9303, -0.2904, 0.2608, 4.4146, 0.7115)


def linear_wellboretemp(wellbore, wht: float, bht: float) -> np.ndarray:
    """ Temperature varying linearly with TVD, from wht (deg F) at the shallowest point to bht (deg F) at the deepest """
    tvd = wellbore.tvd
    span = np.max(tvd) - np.min(tvd)
    if span <= 0:
        return np.full(len(tvd), float(wht))
    return wht + (bht - wht) * (tvd - np.min(tvd)) / span


def shiu_relaxation_distance(q_o: float, q_w: float, glr: float, api: float, sg_water: float, sg_gas: float, id: float, whp: float) -> float:
    """ Shiu & Beggs relaxation distance A (ft) for Ramey's flowing temperature solution.

        q_o, q_w: Oil and water rates (stb/d)
        glr: Gas liquid ratio (scf/stb)
        api: Oil API gravity
        sg_water, sg_gas: Water and gas specific gravities
        id: Tubing inner diameter (in)
        whp: Wellhead pressure (psig)

        Returns 0 when there is no mass flow
    """
    sg_o = oil_sg(api)
    q_l = q_o + q_w
    oil_mass = q_o * CUFTperBBL * WDEN * sg_o
    water_mass = q_w * CUFTperBBL * WDEN * sg_water
    gas_mass = glr * q_l * AIRDEN * sg_gas
    w = (oil_mass + water_mass + gas_mass) / SEC_PER_DAY  # lbm/s
    if w <= 0:
        return 0.0
    rho_l = (q_o * sg_o + q_w * sg_water) / q_l * WDEN if q_l > 0 else sg_o * WDEN
    c0, c1, c2, c3, c4, c5, c6 = SHIU_COEFFS
    return c0 * w ** c1 * rho_l ** c2 * id ** c3 * max(whp, 1.0) ** c4 * sg_o ** c5 * sg_gas ** c6


def shiu_wellboretemp(wellbore, bht: float, geothermal_gradient: float, q_o: float, q_w: float, glr: float,
                      api: float, sg_water: float, sg_gas: float, whp: float) -> np.ndarray:
    """ Ramey flowing temperature profile with the Shiu & Beggs relaxation distance.

        bht: Bottomhole temperature at the deepest TVD (deg F)
        geothermal_gradient: deg F per 100 ft of TVD
        Remaining arguments as for shiu_relaxation_distance. The average wellbore ID is used
    """
    g = geothermal_gradient / 100.0
    L = np.max(wellbore.tvd) - wellbore.tvd
    A = shiu_relaxation_distance(q_o, q_w, glr, api, sg_water, sg_gas, float(np.mean(wellbore.id)), whp)
    if A <= 0:
        return bht - g * L
    logger.debug(f"Shiu relaxation distance {A:.1f} ft")
    return bht - g * L + A * g * (1.0 - np.exp(-L / A))


def temperature_profile(method, wellbore, wht: Optional[float] = None, bht: Optional[float] = None,
                        geothermal_gradient: Optional[float] = None, q_o: float = 0, q_w: float = 0, glr: float = 0,
                        api: float = 35, sg_water: float = 1.0, sg_gas: float = 0.75, whp: float = 0) -> np.ndarray:
    """ Computes a temperature profile (deg F) aligned to wellbore.md.

        method: 'LINEAR' needs wht and bht. 'SHIU' needs geothermal_gradient and bht.
    """
    method = validate_methods(["tempmethod"], [method])
    if bht is None:
        raise ValueError("A bottomhole temperature (bht) is required to compute a temperature profile")
    if method == temp_method.LINEAR:
        if wht is None:
            raise ValueError("Linear temperature profiles require a wellhead temperature (wht)")
        return linear_wellboretemp(wellbore, wht, bht)
    if geothermal_gradient is None:
        raise ValueError("Shiu temperature profiles require a geothermal gradient (deg F / 100 ft)")
    return shiu_wellboretemp(wellbore, bht, geothermal_gradient, q_o, q_w, glr, api, sg_water, sg_gas, whp)
