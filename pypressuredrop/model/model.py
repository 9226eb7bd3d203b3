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
from typing import Optional, Tuple

import numpy as np

from pypressuredrop.classes import temp_method
from pypressuredrop.constants import psc
from pypressuredrop.correlations import CorrelationSet
from pypressuredrop.errors import DimensionMismatchError
from pypressuredrop.shared_fns import convert_to_numpy
from pypressuredrop.temperature import temperature_profile
from pypressuredrop.traverse import traverse, casing_traverse
from pypressuredrop.validate import validate_methods
from pypressuredrop.wellbore import augment_with_valves

logger = logging.getLogger(__name__)


class WellModel:
    """ All inputs of a well calculation, held together so that repeated calculations can change one field at a time.

        wellbore: Wellbore survey
        roughness: Absolute tubing roughness (in)
        valves: Optional GasliftValves. When given, calculations run on the valve-augmented mesh
        temperatureprofile: Optional temperatures (deg F) aligned to the flow path. Overrides the computed profile
        temperature_method: 'linear' (needs wht and bht) or 'Shiu' (needs geothermal_gradient and bht). Defaults to 'linear'
        wht: Wellhead temperature (deg F)
        geothermal_gradient: deg F / 100 ft
        bht: Bottomhole temperature (deg F)
        casing_temp_factor: Casing temperature as a fraction of tubing temperature, for valve calculations. Defaults to 0.85
        pressurecorrelation: 'BB' Beggs & Brill or 'HB' Hagedorn & Brown (or a PressureGradientCorrelation). Defaults to 'BB'
        outlet_referenced: True if whp is known at the wellhead and the traverse marches down. When False, whp holds
                           the known bottomhole pressure and the traverse marches up
        whp: Wellhead (or, inlet referenced, bottomhole) pressure (psig)
        chp: Casing head pressure (psig). Needed for casing traverses and gas lift
        dp_est: Seed differential for the first tubing segment (psi)
        dp_est_inj: Seed differential for the first casing segment (psi). Defaults to 0.1 * dp_est
        error_tolerance, error_tolerance_inj: Segment convergence tolerances for tubing and casing (psi). Default 0.1 and 0.05
        max_iterations: Iteration bound per segment. Defaults to 25
        q_o, q_w: Oil and water rates (stb/d)
        glr: Gas liquid ratio including lift gas (scf/stb of liquid)
        injection_point: Gas injection depth (ft MD). None for no injection
        natural_glr: Formation GLR used below the injection point
        api: Oil API gravity
        sg_water, sg_gas: Water and produced gas specific gravities
        sg_gas_inj: Injection gas specific gravity. Defaults to sg_gas
        co2, h2s: Produced gas impurity mole fractions. Default 0
        co2_inj, h2s_inj: Injection gas impurity mole fractions. Default to co2 and h2s
        pseudocrit_correlation: 'SUT', 'PMC' or 'HWA'. Defaults to 'SUT'
        z_correlation: 'HY', 'DAK' or 'KAR'. Defaults to 'HY'
        gas_viscosity_correlation: 'LEE'
        solution_gor_correlation: 'STAN' or 'VASBG'. Defaults to 'STAN'
        bubblepoint: 'STAN', 'VASBG' or a fixed bubble point (psia). Defaults to 'STAN'
        oil_fvf_correlation: 'STAN'
        water_fvf_correlation: 'GOULD'
        dead_oil_viscosity_correlation: 'GLASO' or 'BR'. Defaults to 'GLASO'
        live_oil_viscosity_correlation: 'CC' or 'BR'. Defaults to 'CC'
        frictionfactor: 'SERG' or 'CHEN'. Defaults to 'SERG'
    """
    def __init__(self, wellbore, roughness, whp, dp_est, q_o, q_w, glr, api, sg_water, sg_gas,
                 valves=None, temperatureprofile=None, temperature_method='linear', wht=None,
                 geothermal_gradient=None, bht=None, casing_temp_factor=0.85, pressurecorrelation='BB',
                 outlet_referenced=True, chp=None, dp_est_inj=None, error_tolerance=0.1, error_tolerance_inj=0.05,
                 max_iterations=25, injection_point=None, natural_glr=None, sg_gas_inj=None, co2=0, h2s=0,
                 co2_inj=None, h2s_inj=None, pseudocrit_correlation='SUT', z_correlation='HY',
                 gas_viscosity_correlation='LEE', solution_gor_correlation='STAN', bubblepoint='STAN',
                 oil_fvf_correlation='STAN', water_fvf_correlation='GOULD', dead_oil_viscosity_correlation='GLASO',
                 live_oil_viscosity_correlation='CC', frictionfactor='SERG'):
        self.wellbore = wellbore
        self.roughness = roughness
        self.valves = valves
        self.temperatureprofile = temperatureprofile
        self.temperature_method = temperature_method
        self.wht = wht
        self.geothermal_gradient = geothermal_gradient
        self.bht = bht
        self.casing_temp_factor = casing_temp_factor
        self.pressurecorrelation = pressurecorrelation
        self.outlet_referenced = outlet_referenced
        self.whp = whp
        self.chp = chp
        self.dp_est = dp_est
        self.dp_est_inj = 0.1 * dp_est if dp_est_inj is None else dp_est_inj
        self.error_tolerance = error_tolerance
        self.error_tolerance_inj = error_tolerance_inj
        self.max_iterations = max_iterations
        self.q_o = q_o
        self.q_w = q_w
        self.glr = glr
        self.injection_point = injection_point
        self.natural_glr = natural_glr
        self.api = api
        self.sg_water = sg_water
        self.sg_gas = sg_gas
        self.sg_gas_inj = sg_gas if sg_gas_inj is None else sg_gas_inj
        self.co2 = co2
        self.h2s = h2s
        self.co2_inj = co2 if co2_inj is None else co2_inj
        self.h2s_inj = h2s if h2s_inj is None else h2s_inj
        self.pseudocrit_correlation = pseudocrit_correlation
        self.z_correlation = z_correlation
        self.gas_viscosity_correlation = gas_viscosity_correlation
        self.solution_gor_correlation = solution_gor_correlation
        self.bubblepoint = bubblepoint
        self.oil_fvf_correlation = oil_fvf_correlation
        self.water_fvf_correlation = water_fvf_correlation
        self.dead_oil_viscosity_correlation = dead_oil_viscosity_correlation
        self.live_oil_viscosity_correlation = live_oil_viscosity_correlation
        self.frictionfactor = frictionfactor

        self._flowpath_cache = None
        self._temperature_cache = None

        if self.temperatureprofile is None:
            self._check_temperature_inputs()
        self.correlations()

    def _check_temperature_inputs(self):
        method = validate_methods(["tempmethod"], [self.temperature_method])
        if self.bht is None:
            raise ValueError("bht is required unless a temperatureprofile is supplied")
        if method == temp_method.LINEAR and self.wht is None:
            raise ValueError("temperature_method 'linear' requires wht")
        if method == temp_method.SHIU and self.geothermal_gradient is None:
            raise ValueError("temperature_method 'Shiu' requires geothermal_gradient")

    def correlations(self) -> CorrelationSet:
        """The correlations named by this model's fields, resolved to correlation objects."""
        return CorrelationSet(pressurecorrelation=self.pressurecorrelation,
                              pseudocrit=self.pseudocrit_correlation,
                              zfactor=self.z_correlation,
                              gas_viscosity=self.gas_viscosity_correlation,
                              bubblepoint=self.bubblepoint,
                              solution_gor=self.solution_gor_correlation,
                              oil_fvf=self.oil_fvf_correlation,
                              water_fvf=self.water_fvf_correlation,
                              dead_oil_viscosity=self.dead_oil_viscosity_correlation,
                              live_oil_viscosity=self.live_oil_viscosity_correlation,
                              frictionfactor=self.frictionfactor)

    def flowpath(self):
        """ Wellbore used for calculations: the wellbore, with valve depths inserted when valves are present """
        cached = self._flowpath_cache
        if cached is not None and cached[0] is self.wellbore and cached[1] is self.valves:
            return cached[2]
        if self.valves is None or len(self.valves) == 0:
            path = self.wellbore
        else:
            path = augment_with_valves(self.wellbore, self.valves)
        self._flowpath_cache = (self.wellbore, self.valves, path)
        return path

    def _temperature_params(self):
        method = validate_methods(["tempmethod"], [self.temperature_method])
        if method == temp_method.LINEAR:
            return (method, self.wht, self.bht)
        return (method, self.bht, self.geothermal_gradient, self.q_o, self.q_w, self.glr, self.api,
                self.sg_water, self.sg_gas, self.whp)

    def temperature(self) -> np.ndarray:
        """ Temperature profile (deg F) aligned to flowpath().md.

            Returns a copy of temperatureprofile when one is set. Otherwise the profile is computed once and
            reused until the wellbore, valves or temperature inputs change, or clear_cache() is called
        """
        path = self.flowpath()
        if self.temperatureprofile is not None:
            temps = convert_to_numpy(self.temperatureprofile).copy()
            if len(temps) != len(path):
                raise DimensionMismatchError(f"temperatureprofile has {len(temps)} points but the flow path has {len(path)}.")
            return temps

        params = self._temperature_params()
        cached = self._temperature_cache
        if cached is not None and cached[0] is self.wellbore and cached[1] is self.valves and cached[2] == params:
            return cached[3].copy()

        self._check_temperature_inputs()
        temps = temperature_profile(self.temperature_method, path, wht=self.wht, bht=self.bht,
                                    geothermal_gradient=self.geothermal_gradient, q_o=self.q_o, q_w=self.q_w,
                                    glr=self.glr, api=self.api, sg_water=self.sg_water, sg_gas=self.sg_gas,
                                    whp=self.whp)
        logger.debug("Computed wellbore temperature profile")
        self._temperature_cache = (self.wellbore, self.valves, params, temps)
        return temps.copy()

    def clear_cache(self):
        """Forgets cached flow path and temperature profile."""
        self._flowpath_cache = None
        self._temperature_cache = None

    def __repr__(self):
        lines = []
        for key, value in vars(self).items():
            if key.startswith('_'):
                continue
            if isinstance(value, (np.ndarray, list, tuple)):
                value = f"<{len(value)} values>"
            elif hasattr(value, '__len__') and not isinstance(value, str):
                value = repr(value).split('\n')[0]
            lines.append(f"{key}: {value}")
        return "WellModel\n  " + "\n  ".join(lines)


def pressure_and_temp(model: WellModel, injection_point: Optional[float] = None) -> Tuple[np.ndarray, np.ndarray]:
    """ Tubing pressure (psia) and temperature (deg F) profiles, aligned to model.flowpath().md
        injection_point: Injection depth (ft MD) to use instead of model.injection_point
    """
    if injection_point is None:
        injection_point = model.injection_point
    path = model.flowpath()
    temps = model.temperature()
    pressures = traverse(path, temps, model.whp + psc, model.q_o, model.q_w, model.glr, model.api,
                         model.sg_water, model.sg_gas, model.co2, model.h2s, correlations=model.correlations(),
                         roughness=model.roughness, dp_est=model.dp_est, error_tolerance=model.error_tolerance,
                         max_iterations=model.max_iterations, outlet_referenced=model.outlet_referenced,
                         injection_point=injection_point, natural_glr=model.natural_glr)
    return pressures, temps


def pressures_and_temp(model: WellModel, injection_point: Optional[float] = None) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """ Tubing pressures (psia), casing pressures (psia) and temperatures (deg F), aligned to model.flowpath().md.
        Both traverses use the same temperature profile. Requires model.chp
        injection_point: Injection depth (ft MD) to use instead of model.injection_point
    """
    if model.chp is None:
        raise ValueError("A casing head pressure (chp) is required for casing traverses")
    tubing, temps = pressure_and_temp(model, injection_point)
    casing = casing_traverse(model.flowpath(), temps, model.chp + psc, model.sg_gas_inj, model.co2_inj,
                             model.h2s_inj, correlations=model.correlations(), roughness=model.roughness,
                             dp_est_inj=model.dp_est_inj, error_tolerance_inj=model.error_tolerance_inj,
                             max_iterations=model.max_iterations)
    return tubing, casing, temps
