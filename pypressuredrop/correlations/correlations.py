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
from abc import ABC, abstractmethod
from typing import NamedTuple, Tuple

from scipy.optimize import brentq

from pypressuredrop.classes import pressure_method, z_method, c_method, ug_method, pb_method, rs_method, bo_method, bw_method, deado_method, liveo_method, ff_method, class_dic
from pypressuredrop.validate import validate_methods
from pypressuredrop.constants import R, psc, degF2R, MW_AIR, WDEN, GC

logger = logging.getLogger(__name__)

_LN10 = math.log(10.0)
_SCF_STB_TO_M3M3 = 0.178108
_CP_TO_LBFTS = 6.7197e-4


def _log10(x):
    if isinstance(x, complex) or x <= 0:
        return -30.0
    return math.log(x) / _LN10


def _clamp(val, lo, hi):
    if isinstance(val, complex):
        val = abs(val)
    return max(lo, min(hi, val))


def oil_sg(api: float) -> float:
    """ Returns stock tank oil specific gravity from API gravity """
    return 141.5 / (api + 131.5)


# ============================================================================
#  Segment flow conditions handed to pressure gradient correlations
# ============================================================================

class FlowConditions(NamedTuple):
    """ Fluid and pipe state at the average conditions of one segment.

        md_length: Measured length of the segment (ft)
        tvd_length: Change in TVD from the shallower-MD end to the deeper-MD end (ft). Negative where the hole turns up
        inclination: Average inclination from vertical (degrees)
        diameter: Inner diameter (inches)
        roughness: Absolute pipe roughness (inches)
        v_sl, v_sg: Superficial liquid and gas velocities (ft/s)
        rho_l, rho_g: In-situ liquid and gas densities (lbm/ft3)
        sigma_l: Gas-liquid surface tension (dynes/cm)
        mu_l, mu_g: Liquid and gas viscosities (cP)
        p_avg: Average segment pressure (psia)
        upward: True when flow moves toward the surface (decreasing MD), e.g. production. False for injection
        frictionfactor: FrictionFactorCorrelation used for the segment
    """
    md_length: float
    tvd_length: float
    inclination: float
    diameter: float
    roughness: float
    v_sl: float
    v_sg: float
    rho_l: float
    rho_g: float
    sigma_l: float
    mu_l: float
    mu_g: float
    p_avg: float
    upward: bool
    frictionfactor: "FrictionFactorCorrelation"

    @property
    def uphill(self) -> bool:
        """True if the flowing fluid gains elevation across the segment."""
        return (self.tvd_length >= 0) == self.upward

    @property
    def theta(self) -> float:
        """Angle from horizontal in the direction of flow (radians), positive uphill."""
        if self.md_length <= 0:
            return math.pi / 2.0
        angle = math.asin(_clamp(abs(self.tvd_length) / self.md_length, 0.0, 1.0))
        return angle if self.uphill else -angle

    @property
    def friction_sign(self) -> float:
        """Sign of frictional loss on (deeper MD pressure - shallower MD pressure)."""
        return 1.0 if self.upward else -1.0


# ============================================================================
#  Capability interfaces
# ============================================================================

class PseudoCriticalCorrelation(ABC):
    """ Pseudo-critical properties of a natural gas.
        Returns (tpc deg R, ppc psia) from gas SG, CO2 and H2S mole fractions
    """
    @abstractmethod
    def __call__(self, sg: float, co2: float = 0, h2s: float = 0) -> Tuple[float, float]:
        ...


class ZFactorCorrelation(ABC):
    """Real gas deviation factor from pseudo-reduced pressure and temperature."""
    @abstractmethod
    def __call__(self, ppr: float, tpr: float) -> float:
        ...


class GasViscosityCorrelation(ABC):
    """Gas viscosity (cP) from SG, pressure (psia), temperature (deg F) and Z."""
    @abstractmethod
    def __call__(self, sg: float, p: float, degf: float, z: float) -> float:
        ...


class BubblePointCorrelation(ABC):
    """Bubble point (psia) from API, gas SG, solution GOR at bubble point (scf/stb) and temperature (deg F)."""
    @abstractmethod
    def __call__(self, api: float, sg_gas: float, rsb: float, degf: float) -> float:
        ...


class SolutionGORCorrelation(ABC):
    """Saturated solution GOR (scf/stb) at pressure (psia) and temperature (deg F)."""
    @abstractmethod
    def __call__(self, api: float, sg_gas: float, p: float, degf: float) -> float:
        ...


class OilVolumeFactorCorrelation(ABC):
    """Oil formation volume factor (rb/stb)."""
    @abstractmethod
    def __call__(self, api: float, sg_gas: float, rs: float, degf: float) -> float:
        ...


class WaterVolumeFactorCorrelation(ABC):
    """Water formation volume factor (rb/stb)."""
    @abstractmethod
    def __call__(self, p: float, degf: float) -> float:
        ...


class DeadOilViscosityCorrelation(ABC):
    """Gas free oil viscosity (cP)."""
    @abstractmethod
    def __call__(self, api: float, degf: float) -> float:
        ...


class LiveOilViscosityCorrelation(ABC):
    """Saturated oil viscosity (cP) from dead oil viscosity (cP) and solution GOR (scf/stb)."""
    @abstractmethod
    def __call__(self, dead_oil_viscosity: float, rs: float) -> float:
        ...


class FrictionFactorCorrelation(ABC):
    """Darcy-Weisbach (Moody) friction factor from Reynolds number and relative roughness."""
    @abstractmethod
    def __call__(self, n_re: float, relative_roughness: float) -> float:
        ...


class PressureGradientCorrelation(ABC):
    """ Pressure differential across one segment (psi), as deeper-MD pressure minus shallower-MD pressure """
    @abstractmethod
    def __call__(self, flow: FlowConditions) -> float:
        ...


# ============================================================================
#  Gas critical properties and Z-Factor
# ============================================================================

class SuttonPseudoCritical(PseudoCriticalCorrelation):
    """Sutton (1985) with Wichert & Aziz sour gas corrections."""
    def __call__(self, sg, co2=0, h2s=0):
        sg_hc = (sg - (co2 * 44.01 + h2s * 34.1) / MW_AIR) / (1 - co2 - h2s)  # Eq 3.53
        ppc_hc = 756.8 - 131.0 * sg_hc - 3.6 * sg_hc ** 2  # Eq 3.47b
        tpc_hc = 169.2 + 349.5 * sg_hc - 74.0 * sg_hc ** 2  # Eq 3.47a

        eps = 120 * ((co2 + h2s) ** 0.9 - (co2 + h2s) ** 1.6) + 15 * (h2s ** 0.5 - h2s ** 4)  # Eq 3.52c
        ppc_star = (1 - co2 - h2s) * ppc_hc + co2 * 1071.0 + h2s * 1306.0  # Eq 3.54a
        tpc_star = (1 - co2 - h2s) * tpc_hc + co2 * 547.58 + h2s * 672.35  # Eq 3.54b
        tpc = tpc_star - eps  # Eq 3.52a
        ppc = ppc_star * (tpc_star - eps) / (tpc_star + h2s * (1 - h2s) * eps)  # Eq 3.52b
        return tpc, ppc


class PiperMcCainPseudoCritical(PseudoCriticalCorrelation):
    """Piper, McCain & Corredor (1999), equations 2.4 - 2.6 of McCain et al."""
    _alpha = (0.11582, -0.4582, -0.90348, -0.66026, 0.70729, -0.099397)
    _beta = (3.8216, -0.06534, -0.42113, -0.91249, 17.438, -3.2191)
    _tci = (0, 672.35, 547.58, 239.26)
    _pci = (0, 1306.0, 1071.0, 507.5)

    def __call__(self, sg, co2=0, h2s=0):
        y = (0, h2s, co2, 0)
        alpha, beta = self._alpha, self._beta
        j = alpha[0] + alpha[4] * sg + alpha[5] * sg * sg  # 2.5
        k = beta[0] + beta[4] * sg + beta[5] * sg * sg  # 2.6
        j += sum(alpha[i] * y[i] * self._tci[i] / self._pci[i] for i in range(1, 4))
        k += sum(beta[i] * y[i] * self._tci[i] / math.sqrt(self._pci[i]) for i in range(1, 4))
        tpc = k * k / j  # 2.4
        ppc = tpc / j
        return tpc, ppc


class HankinsonWichertPseudoCritical(PseudoCriticalCorrelation):
    """Hankinson, Thomas & Phillips (1969) hydrocarbon pseudo-criticals with Wichert & Aziz sour gas corrections."""
    def __call__(self, sg, co2=0, h2s=0):
        tpc_hc = 170.491 + 307.344 * sg
        ppc_hc = 709.604 - 58.718 * sg
        eps = 120 * ((co2 + h2s) ** 0.9 - (co2 + h2s) ** 1.6) + 15 * (h2s ** 0.5 - h2s ** 4)
        tpc = tpc_hc - eps
        ppc = ppc_hc * tpc / (tpc_hc + h2s * (1 - h2s) * eps)
        return tpc, ppc


class HallYarboroughZ(ZFactorCorrelation):
    """Hall & Yarborough (1973), Newton solution for reduced density."""
    def __call__(self, ppr, tpr):
        if ppr <= 0:
            return 1.0
        t_inv = 1.0 / tpr
        a = -0.06125 * t_inv * math.exp(-1.2 * (1.0 - t_inv) ** 2)
        b = 14.76 * t_inv - 9.76 * t_inv ** 2 + 4.58 * t_inv ** 3
        c = 90.7 * t_inv - 242.2 * t_inv ** 2 + 42.4 * t_inv ** 3
        d = 2.18 + 2.82 * t_inv

        y = _clamp(0.0125 * ppr * t_inv, 1e-10, 0.9)

        for _ in range(50):
            y2, y3, y4 = y * y, y * y * y, y ** 4
            one_m_y = 1.0 - y
            fy = ((y + y2 + y3 - y4) / (one_m_y ** 3) + a * ppr - b * y2 + c * y ** d)
            dfy = ((1.0 + 4.0 * y + 4.0 * y2 - 4.0 * y3 + y4) / (one_m_y ** 4) -
                   2.0 * b * y + c * d * y ** (d - 1.0))
            if abs(dfy) < 1e-30:
                break
            dy = fy / dfy
            y = _clamp(y - dy, 1e-10, 0.99)
            if abs(dy) < 1e-12:
                break

        return _clamp(-a * ppr / y, 0.1, 5.0)


class DranchukAbouKassemZ(ZFactorCorrelation):
    """DAK (1975), equations 2.7-2.8 of McCain et al., solved for reduced density with brentq."""
    _a = (0, 0.3265, -1.07, -0.5339, 0.01569, -0.05165, 0.5475, -0.7361, 0.1844, 0.1056, 0.6134, 0.7210)

    def __call__(self, ppr, tpr):
        if ppr <= 0:
            return 1.0
        a = self._a
        tr2, tr3 = tpr ** 2, tpr ** 3
        c1 = a[1] + a[2] / tpr + a[3] / tr3 + a[4] / tpr ** 4 + a[5] / tpr ** 5
        c2 = a[6] + a[7] / tpr + a[8] / tr2
        c3 = a[9] * (a[7] / tpr + a[8] / tr2)

        def zee(rhor):
            c4 = a[10] * (1 + a[11] * rhor ** 2) * (rhor ** 2 / tr3) * math.exp(-a[11] * rhor ** 2)
            return 1 + c1 * rhor + c2 * rhor ** 2 - c3 * rhor ** 5 + c4

        def err(rhor):
            return zee(rhor) * rhor * tpr - 0.27 * ppr

        hi = 3.0
        while err(hi) < 0 and hi < 30:
            hi *= 2
        rhor = brentq(err, 1e-12, hi)
        return zee(rhor)


class KareemZ(ZFactorCorrelation):
    """Kareem, Iwalewa & Al-Marhoun (2016), explicit in reduced density."""
    _a = (0, 0.317842, 0.382216, -7.768354, 14.290531, 0.000002, -0.004693, 0.096254, 0.16672, 0.96691,
          0.063069, -1.966847, 21.0581, -27.0246, 16.23, 207.783, -488.161, 176.29, 1.88453, 3.05921)

    def __call__(self, ppr, tpr):
        if ppr <= 0:
            return 1.0
        a = self._a
        t = 1.0 / tpr
        aa = a[1] * t * math.exp(a[2] * (1 - t) ** 2) * ppr
        bb = a[3] * t + a[4] * t ** 2 + a[5] * t ** 6 * ppr ** 6
        cc = a[9] + a[8] * t * ppr + a[7] * t ** 2 * ppr ** 2 + a[6] * t ** 3 * ppr ** 3
        dd = a[10] * t * math.exp(a[11] * (1 - t) ** 2)
        ee = a[12] * t + a[13] * t ** 2 + a[14] * t ** 3
        ff = a[15] * t + a[16] * t ** 2 + a[17] * t ** 3
        gg = a[18] + a[19] * t

        y = dd * ppr / ((1 + aa ** 2) / cc - aa ** 2 * bb / cc ** 3)
        return dd * ppr * (1 + y + y ** 2 - y ** 3) / ((dd * ppr + ee * y ** 2 - ff * y ** gg) * (1 - y) ** 3)


# ============================================================================
#  Gas viscosity
# ============================================================================

class LeeGasViscosity(GasViscosityCorrelation):
    """Lee, Gonzalez & Eakin (1966), equations 2.14-2.17 of McCain et al."""
    def __call__(self, sg, p, degf, z):
        t = degf + degF2R
        m = MW_AIR * sg
        rho = m * p / (t * z * R * 62.37)  # g/cc
        b = 3.448 + (986.4 / t) + (0.01009 * m)  # 2.16
        c = 2.447 - (0.2224 * b)  # 2.17
        a = (9.379 + (0.01607 * m)) * t ** 1.5 / (209.2 + (19.26 * m) + t)  # 2.15
        return a * 0.0001 * math.exp(b * rho ** c)  # 2.14


# ============================================================================
#  Oil and water PVT
# ============================================================================

class StandingBubblePoint(BubblePointCorrelation):
    def __call__(self, api, sg_gas, rsb, degf):
        if rsb <= 0:
            return psc
        pb = 18.2 * ((rsb / sg_gas) ** 0.83 * 10 ** (0.00091 * degf - 0.0125 * api) - 1.4)
        return max(pb, psc)


def _vasquez_beggs_coefficients(api):
    if api <= 30:
        return 0.0362, 1.0937, 25.724
    return 0.0178, 1.187, 23.931


class VasquezBeggsBubblePoint(BubblePointCorrelation):
    def __call__(self, api, sg_gas, rsb, degf):
        if rsb <= 0:
            return psc
        c1, c2, c3 = _vasquez_beggs_coefficients(api)
        pb = (rsb / (c1 * sg_gas * math.exp(c3 * api / (degf + degF2R)))) ** (1 / c2)
        return max(pb, psc)


class StandingSolutionGOR(SolutionGORCorrelation):
    def __call__(self, api, sg_gas, p, degf):
        return sg_gas * ((p / 18.2 + 1.4) * 10 ** (0.0125 * api - 0.00091 * degf)) ** 1.2048


class VasquezBeggsSolutionGOR(SolutionGORCorrelation):
    def __call__(self, api, sg_gas, p, degf):
        c1, c2, c3 = _vasquez_beggs_coefficients(api)
        return c1 * sg_gas * p ** c2 * math.exp(c3 * api / (degf + degF2R))


class StandingOilVolumeFactor(OilVolumeFactorCorrelation):
    def __call__(self, api, sg_gas, rs, degf):
        return 0.9759 + 0.00012 * (rs * (sg_gas / oil_sg(api)) ** 0.5 + 1.25 * degf) ** 1.2


class GouldWaterVolumeFactor(WaterVolumeFactorCorrelation):
    def __call__(self, p, degf):
        dt = degf - 60
        return 1.0 + 1.21e-4 * dt + 1e-6 * dt * dt - 3.33e-6 * p


class GlasoDeadOilViscosity(DeadOilViscosityCorrelation):
    def __call__(self, api, degf):
        return 3.141e10 * degf ** -3.444 * math.log10(api) ** (10.313 * math.log10(degf) - 36.447)


class BeggsRobinsonDeadOilViscosity(DeadOilViscosityCorrelation):
    def __call__(self, api, degf):
        c = 10.0 ** (3.0324 - 0.02023 * api) * degf ** (-1.163)
        return 10.0 ** c - 1.0


class ChewConnallyLiveOilViscosity(LiveOilViscosityCorrelation):
    def __call__(self, dead_oil_viscosity, rs):
        a = 10 ** (rs * (2.2e-7 * rs - 7.4e-4))
        b = 0.68 / 10 ** (8.62e-5 * rs) + 0.25 / 10 ** (1.1e-3 * rs) + 0.062 / 10 ** (3.74e-3 * rs)
        return a * dead_oil_viscosity ** b


class BeggsRobinsonLiveOilViscosity(LiveOilViscosityCorrelation):
    def __call__(self, dead_oil_viscosity, rs):
        a = 10.715 * (rs + 100.0) ** (-0.515)
        b = 5.44 * (rs + 150.0) ** (-0.338)
        return a * dead_oil_viscosity ** b


def water_viscosity(p, degf, salinity=0.0):
    """Simplified water viscosity (cP)."""
    if degf < 32:
        degf = 32.0
    a_coeff = -3.79418 + 604.129 / (139.18 + degf)
    mu_w = 10.0 ** a_coeff
    if salinity > 0:
        mu_w *= (1.0 + 0.02 * salinity)
    mu_w *= (1.0 + 5e-4 * (p - 14.7) / 1000.0)
    return max(mu_w, 0.01)


# ============================================================================
#  Interfacial tension (dynes/cm)
# ============================================================================

def dead_oil_ift(api, degf):
    temp_c = (degf - 32.0) / 1.8
    a = 1.11591 - 0.00305 * temp_c
    return max(a * (38.085 - 0.259 * api), 1.0)


def gas_oil_ift(api, degf, rs):
    sigma_od = dead_oil_ift(api, degf)
    if rs <= 0:
        return sigma_od
    rs_m3m3 = rs * _SCF_STB_TO_M3M3
    if rs_m3m3 < 50.0:
        ratio = 1.0 / (1.0 + 0.02549 * rs_m3m3 ** 1.0157)
    else:
        ratio = 32.0436 * rs_m3m3 ** (-1.1367)
    return max(sigma_od * _clamp(ratio, 0.0, 1.0), 1.0)


def gas_water_ift(p, degf):
    p = max(p, 14.7)
    sw74 = 75.0 - 1.108 * p ** 0.349
    sw280 = 53.0 - 0.1048 * p ** 0.637
    if degf <= 74.0:
        return max(sw74, 1.0)
    elif degf >= 280.0:
        return max(sw280, 1.0)
    return max(sw74 + (sw280 - sw74) * (degf - 74.0) / (280.0 - 74.0), 1.0)


# ============================================================================
#  Friction factors (Darcy-Weisbach)
# ============================================================================

class SerghideFrictionFactor(FrictionFactorCorrelation):
    """Serghide (1984) explicit Colebrook approximation. Laminar 64/Re below Re 2100."""
    def __call__(self, n_re, relative_roughness):
        if n_re < 1:
            return 0.0
        if n_re <= 2100:
            return 64.0 / n_re
        eps_d = relative_roughness
        a = -2.0 * _log10(eps_d / 3.7 + 12.0 / n_re)
        b = -2.0 * _log10(eps_d / 3.7 + 2.51 * a / n_re)
        c = -2.0 * _log10(eps_d / 3.7 + 2.51 * b / n_re)
        diff = c - 2.0 * b + a
        if abs(diff) < 1e-30:
            return 0.02
        return (a - (b - a) ** 2 / diff) ** (-2)


class ChenFrictionFactor(FrictionFactorCorrelation):
    """Chen (1979) explicit friction factor. Laminar 64/Re below Re 2100."""
    def __call__(self, n_re, relative_roughness):
        if n_re < 1:
            return 0.0
        if n_re <= 2100:
            return 64.0 / n_re
        eps_d = relative_roughness
        inner = _log10(eps_d ** 1.1098 / 2.8257 + 5.8506 / n_re ** 0.8981)
        return (-2.0 * _log10(eps_d / 3.7065 - 5.0452 / n_re * inner)) ** (-2)


# ============================================================================
#  Pressure gradient correlations
# ============================================================================

_BB_SEGREGATED = 0
_BB_INTERMITTENT = 1
_BB_DISTRIBUTED = 2
_BB_TRANSITION = 3


def _bb_flow_pattern(froude, lambda_l):
    if lambda_l <= 0 or lambda_l >= 1.0:
        return _BB_DISTRIBUTED, 0.0
    l1 = 316.0 * lambda_l ** 0.302
    l2 = 0.0009252 * lambda_l ** (-2.4684)
    l3 = 0.10 * lambda_l ** (-1.4516)
    l4 = 0.5 * lambda_l ** (-6.738)
    if lambda_l < 0.01 and froude < l1:
        return _BB_SEGREGATED, 0.0
    if lambda_l >= 0.01 and froude < l2:
        return _BB_SEGREGATED, 0.0
    if lambda_l >= 0.01 and l2 <= froude <= l3:
        a = (l3 - froude) / (l3 - l2) if l3 > l2 else 0.5
        return _BB_TRANSITION, _clamp(a, 0.0, 1.0)
    if ((lambda_l >= 0.01 and froude > l3 and froude < l1) or
            (lambda_l < 0.01 and froude >= l1)):
        return _BB_INTERMITTENT, 0.0
    if lambda_l < 0.4 and froude >= l1:
        return _BB_DISTRIBUTED, 0.0
    if lambda_l >= 0.4 and froude > l4:
        return _BB_DISTRIBUTED, 0.0
    return _BB_INTERMITTENT, 0.0


def _bb_horizontal_holdup(lambda_l, froude, pattern):
    if lambda_l <= 0:
        return 0.0
    if lambda_l >= 1.0:
        return 1.0
    if froude <= 0:
        return lambda_l
    if pattern == _BB_SEGREGATED:
        hl0 = 0.98 * lambda_l ** 0.4846 / froude ** 0.0868
    elif pattern == _BB_INTERMITTENT:
        hl0 = 0.845 * lambda_l ** 0.5351 / froude ** 0.0173
    else:
        hl0 = 1.065 * lambda_l ** 0.5824 / froude ** 0.0609
    return max(hl0, lambda_l)


def _bb_inclined_holdup(lambda_l, froude, n_lv, pattern, theta):
    hl0 = _bb_horizontal_holdup(lambda_l, froude, pattern)
    if lambda_l <= 0 or lambda_l >= 1.0:
        return hl0
    if theta < 0:  # downhill, all patterns
        e_p, f_p, g_p, h_p = 4.70, -0.3692, 0.1244, -0.5056
    elif pattern == _BB_SEGREGATED:
        e_p, f_p, g_p, h_p = 0.011, -3.7680, 3.5390, -1.6140
    elif pattern == _BB_INTERMITTENT:
        e_p, f_p, g_p, h_p = 2.960, 0.3050, -0.4473, 0.0978
    else:
        return hl0
    arg = (e_p * lambda_l ** f_p *
           max(n_lv, 1e-10) ** g_p *
           max(froude, 1e-10) ** h_p)
    c_corr = max((1.0 - lambda_l) * math.log(arg) if arg > 0 else 0.0, 0.0)
    sin18 = math.sin(1.8 * theta)
    psi = 1.0 + c_corr * (sin18 - 0.333 * sin18 ** 3)
    return hl0 * psi


def _bb_two_phase_friction(f_ns, lambda_l, hl_theta):
    if hl_theta <= 0:
        return f_ns
    y = lambda_l / (hl_theta ** 2)
    if y <= 0 or y == 1.0:
        s = 0.0
    elif 1.0 < y < 1.2:
        s = math.log(2.2 * y - 1.2)
    else:
        ln_y = math.log(y)
        denom = (-0.0523 + 3.182 * ln_y - 0.8725 * ln_y ** 2 +
                 0.01853 * ln_y ** 4)
        s = ln_y / denom if abs(denom) >= 1e-6 else 0.0
    s = _clamp(s, -5.0, 5.0)
    return f_ns * math.exp(s)


class BeggsAndBrill(PressureGradientCorrelation):
    """ Beggs & Brill (1973) with Payne et al. (1979) holdup corrections
        (0.924 uphill, 0.685 downhill) and the Beggs & Brill acceleration term
    """
    def __call__(self, flow):
        if flow.md_length <= 0:
            return 0.0
        diam_ft = flow.diameter / 12.0
        v_m = flow.v_sl + flow.v_sg
        if v_m < 1e-10:
            rho_static = flow.rho_l if flow.rho_l > 0 else flow.rho_g
            return rho_static * flow.tvd_length / 144.0

        lambda_l = flow.v_sl / v_m
        rho_ns = flow.rho_l * lambda_l + flow.rho_g * (1.0 - lambda_l)
        froude = v_m ** 2 / (GC * diam_ft)
        theta = flow.theta

        n_lv = 1.938 * flow.v_sl * (flow.rho_l / flow.sigma_l) ** 0.25 if flow.sigma_l > 0 else 0.0

        pattern, trans_a = _bb_flow_pattern(froude, lambda_l)
        if pattern == _BB_TRANSITION:
            hl_theta = (trans_a * _bb_inclined_holdup(lambda_l, froude, n_lv, _BB_SEGREGATED, theta) +
                        (1.0 - trans_a) * _bb_inclined_holdup(lambda_l, froude, n_lv, _BB_INTERMITTENT, theta))
        else:
            hl_theta = _bb_inclined_holdup(lambda_l, froude, n_lv, pattern, theta)

        hl_theta *= 0.924 if flow.uphill else 0.685
        hl_theta = _clamp(hl_theta, lambda_l, 1.0)
        rho_s = flow.rho_l * hl_theta + flow.rho_g * (1.0 - hl_theta)

        mu_ns = flow.mu_l * lambda_l + flow.mu_g * (1.0 - lambda_l)
        mu_ns_lbfts = mu_ns * _CP_TO_LBFTS
        n_re = rho_ns * v_m * diam_ft / mu_ns_lbfts if mu_ns_lbfts > 0 else 0.0
        f_ns = flow.frictionfactor(n_re, flow.roughness / flow.diameter)
        f_tp = _bb_two_phase_friction(f_ns, lambda_l, hl_theta)

        dp_elevation = rho_s * flow.tvd_length / 144.0
        dpdz_fric = f_tp * rho_ns * v_m ** 2 / (2.0 * GC * diam_ft * 144.0)
        ek = rho_s * v_m * flow.v_sg / (GC * flow.p_avg * 144.0)
        return (dp_elevation + flow.friction_sign * dpdz_fric * flow.md_length) / max(1.0 - ek, 0.1)


class HagedornAndBrown(PressureGradientCorrelation):
    """ Hagedorn & Brown (1965) holdup charts as curve fits, with the Griffith & Wallis (1961) bubble flow correction """
    def __call__(self, flow):
        if flow.md_length <= 0:
            return 0.0
        diam_ft = flow.diameter / 12.0
        v_m = flow.v_sl + flow.v_sg
        if v_m < 1e-10:
            rho_static = flow.rho_l if flow.rho_l > 0 else flow.rho_g
            return rho_static * flow.tvd_length / 144.0
        if flow.v_sl <= 0:
            return GasColumn()(flow)

        lambda_l = flow.v_sl / v_m
        rho_l, sigma = flow.rho_l, flow.sigma_l
        relative_roughness = flow.roughness / flow.diameter

        # Griffith & Wallis bubble flow limit
        vs = 0.8
        lb = max(1.071 - 0.2218 * v_m * v_m / diam_ft, 0.13)
        if flow.v_sg / v_m < lb:
            disc = max((1.0 + v_m / vs) ** 2 - 4.0 * flow.v_sg / vs, 0.0)
            yl = _clamp(1.0 - 0.5 * (1.0 + v_m / vs - math.sqrt(disc)), lambda_l, 1.0)
            rho_s = yl * rho_l + (1.0 - yl) * flow.rho_g
            v_l = flow.v_sl / yl
            n_re = 1488.0 * rho_l * v_l * diam_ft / flow.mu_l
            f = flow.frictionfactor(n_re, relative_roughness)
            dpdz_fric = f * rho_l * v_l ** 2 / (2.0 * GC * diam_ft * 144.0)
            return rho_s * flow.tvd_length / 144.0 + flow.friction_sign * dpdz_fric * flow.md_length

        nvl = 1.938 * flow.v_sl * (rho_l / sigma) ** 0.25
        nvg = 1.938 * flow.v_sg * (rho_l / sigma) ** 0.25
        nd = 120.872 * diam_ft * (rho_l / sigma) ** 0.5
        nl = max(0.15726 * flow.mu_l * (1.0 / (rho_l * sigma ** 3)) ** 0.25, 1e-8)

        x1 = _log10(nl) + 3.0
        cnl = 10.0 ** (-2.69851 + 0.1584095 * x1 - 0.5509976 * x1 ** 2 +
                       0.5478492 * x1 ** 3 - 0.1219458 * x1 ** 4)

        f1 = nvl * flow.p_avg ** 0.1 * cnl / (max(nvg, 1e-10) ** 0.575 * psc ** 0.1 * nd)
        lf1 = _log10(f1) + 6.0
        ylonsi = max(-0.10306578 + 0.617774 * lf1 - 0.632946 * lf1 ** 2 +
                     0.29598 * lf1 ** 3 - 0.0401 * lf1 ** 4, 0.0)

        f2 = max(nvg * nl ** 0.38 / nd ** 2.14, 0.012)
        si = (0.9116257 - 4.821756 * f2 + 1232.25 * f2 ** 2 -
              22253.58 * f2 ** 3 + 116174.3 * f2 ** 4)

        yl = _clamp(si * ylonsi, lambda_l, 1.0)
        rho_s = yl * rho_l + (1.0 - yl) * flow.rho_g
        rho_ns = lambda_l * rho_l + (1.0 - lambda_l) * flow.rho_g

        mu_s = flow.mu_l ** yl * flow.mu_g ** (1.0 - yl)
        n_re = 1488.0 * rho_ns * v_m * diam_ft / mu_s
        f = flow.frictionfactor(n_re, relative_roughness)
        dpdz_fric = f * (rho_ns * v_m) ** 2 / (2.0 * GC * diam_ft * rho_s * 144.0)
        return rho_s * flow.tvd_length / 144.0 + flow.friction_sign * dpdz_fric * flow.md_length


class GasColumn(PressureGradientCorrelation):
    """Single phase gas: hydrostatic head plus friction at the superficial gas velocity."""
    def __call__(self, flow):
        if flow.md_length <= 0:
            return 0.0
        dp = flow.rho_g * flow.tvd_length / 144.0
        if flow.v_sg > 0:
            diam_ft = flow.diameter / 12.0
            n_re = 1488.0 * flow.rho_g * flow.v_sg * diam_ft / flow.mu_g
            f = flow.frictionfactor(n_re, flow.roughness / flow.diameter)
            dp += flow.friction_sign * f * flow.rho_g * flow.v_sg ** 2 / (2.0 * GC * diam_ft * 144.0) * flow.md_length
        return dp


# ============================================================================
#  Registry & resolution by method tag
# ============================================================================

_BASES = {
    "pressurecorrelation": PressureGradientCorrelation,
    "cmethod": PseudoCriticalCorrelation,
    "zmethod": ZFactorCorrelation,
    "ugmethod": GasViscosityCorrelation,
    "pbmethod": BubblePointCorrelation,
    "rsmethod": SolutionGORCorrelation,
    "bomethod": OilVolumeFactorCorrelation,
    "bwmethod": WaterVolumeFactorCorrelation,
    "deadomethod": DeadOilViscosityCorrelation,
    "liveomethod": LiveOilViscosityCorrelation,
    "ffmethod": FrictionFactorCorrelation,
}

_REGISTRY = {
    pressure_method.BB: BeggsAndBrill,
    pressure_method.HB: HagedornAndBrown,
    pressure_method.GAS: GasColumn,
    c_method.SUT: SuttonPseudoCritical,
    c_method.PMC: PiperMcCainPseudoCritical,
    c_method.HWA: HankinsonWichertPseudoCritical,
    z_method.HY: HallYarboroughZ,
    z_method.DAK: DranchukAbouKassemZ,
    z_method.KAR: KareemZ,
    ug_method.LEE: LeeGasViscosity,
    pb_method.STAN: StandingBubblePoint,
    pb_method.VASBG: VasquezBeggsBubblePoint,
    rs_method.STAN: StandingSolutionGOR,
    rs_method.VASBG: VasquezBeggsSolutionGOR,
    bo_method.STAN: StandingOilVolumeFactor,
    bw_method.GOULD: GouldWaterVolumeFactor,
    deado_method.GLASO: GlasoDeadOilViscosity,
    deado_method.BR: BeggsRobinsonDeadOilViscosity,
    liveo_method.CC: ChewConnallyLiveOilViscosity,
    liveo_method.BR: BeggsRobinsonLiveOilViscosity,
    ff_method.SERG: SerghideFrictionFactor,
    ff_method.CHEN: ChenFrictionFactor,
}


def resolve_correlation(kind: str, value):
    """ Returns a correlation object for the slot named by kind (a class_dic key)
        value: Method tag string ('BB', 'hy'...), enum member, correlation instance or any callable
               with the interface's signature. Instances and callables are returned unchanged
    """
    if isinstance(value, _BASES[kind]):
        return value
    if not isinstance(value, str) and callable(value) and not isinstance(value, type):
        logger.debug(f"Using user supplied {kind} callable {value!r}")
        return value
    method = validate_methods([kind], [value])
    if not isinstance(method, class_dic[kind]):
        raise ValueError(f"{value!r} is not a valid {kind} selection")
    return _REGISTRY[method]()


class CorrelationSet:
    """ The set of correlations used for one calculation. Each argument takes a method tag,
        enum member, correlation instance or compatible callable.

        pressurecorrelation: 'BB' Beggs & Brill with Payne corrections, 'HB' Hagedorn & Brown with Griffith & Wallis. Defaults to 'BB'
        pseudocrit: 'SUT' Sutton with Wichert & Aziz, 'PMC' Piper, McCain & Corredor, or 'HWA' Hankinson, Thomas & Phillips with Wichert & Aziz. Defaults to 'SUT'
        zfactor: 'HY' Hall & Yarborough, 'DAK' Dranchuk & Abou-Kassem, or 'KAR' Kareem, Iwalewa & Al-Marhoun. Defaults to 'HY'
        gas_viscosity: 'LEE' Lee, Gonzalez & Eakin
        bubblepoint: 'STAN' Standing or 'VASBG' Vasquez & Beggs, or a fixed bubble point in psia. Defaults to 'STAN'
        solution_gor: 'STAN' or 'VASBG'. Defaults to 'STAN'
        oil_fvf: 'STAN' Standing
        water_fvf: 'GOULD' Gould
        dead_oil_viscosity: 'GLASO' Glaso or 'BR' Beggs & Robinson. Defaults to 'GLASO'
        live_oil_viscosity: 'CC' Chew & Connally or 'BR' Beggs & Robinson. Defaults to 'CC'
        frictionfactor: 'SERG' Serghide or 'CHEN' Chen. Defaults to 'SERG'
    """
    def __init__(self, pressurecorrelation='BB', pseudocrit='SUT', zfactor='HY', gas_viscosity='LEE',
                 bubblepoint='STAN', solution_gor='STAN', oil_fvf='STAN', water_fvf='GOULD',
                 dead_oil_viscosity='GLASO', live_oil_viscosity='CC', frictionfactor='SERG'):
        self.pressurecorrelation = resolve_correlation("pressurecorrelation", pressurecorrelation)
        self.pseudocrit = resolve_correlation("cmethod", pseudocrit)
        self.zfactor = resolve_correlation("zmethod", zfactor)
        self.gas_viscosity = resolve_correlation("ugmethod", gas_viscosity)
        if isinstance(bubblepoint, (int, float)) and not isinstance(bubblepoint, bool):
            if bubblepoint <= 0:
                raise ValueError("A fixed bubble point must be a positive pressure in psia")
            self.bubblepoint = float(bubblepoint)
        else:
            self.bubblepoint = resolve_correlation("pbmethod", bubblepoint)
        self.solution_gor = resolve_correlation("rsmethod", solution_gor)
        self.oil_fvf = resolve_correlation("bomethod", oil_fvf)
        self.water_fvf = resolve_correlation("bwmethod", water_fvf)
        self.dead_oil_viscosity = resolve_correlation("deadomethod", dead_oil_viscosity)
        self.live_oil_viscosity = resolve_correlation("liveomethod", live_oil_viscosity)
        self.frictionfactor = resolve_correlation("ffmethod", frictionfactor)

    def bubble_point(self, api, sg_gas, rsb, degf) -> float:
        """Fixed bubble point, or the bubble point correlation evaluated at the given conditions (psia)."""
        if isinstance(self.bubblepoint, float):
            return self.bubblepoint
        return self.bubblepoint(api, sg_gas, rsb, degf)

    def gas_z(self, p, degf, sg, co2=0, h2s=0) -> float:
        """Z-Factor at pressure (psia) and temperature (deg F) via the pseudo-critical and Z-Factor correlations."""
        tpc, ppc = self.pseudocrit(sg, co2, h2s)
        return self.zfactor(p / ppc, (degf + degF2R) / tpc)

    def gas_density(self, p, degf, sg, co2=0, h2s=0, z=None) -> float:
        """Gas density (lbm/ft3)."""
        if z is None:
            z = self.gas_z(p, degf, sg, co2, h2s)
        return MW_AIR * sg * p / (z * R * (degf + degF2R))

    def __repr__(self):
        names = {k: (v if isinstance(v, float) else type(v).__name__) for k, v in vars(self).items()}
        return "CorrelationSet(" + ", ".join(f"{k}={v}" for k, v in names.items()) + ")"
