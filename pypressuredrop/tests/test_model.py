#!/usr/bin/env python3
"""
Tests for pypressuredrop model module (WellModel container, caching and the tubing / casing driver).
"""

import sys
import os

import numpy as np

# Ensure project parent is on path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.dirname(project_root))

from pypressuredrop.wellbore import Wellbore, GasliftValves
from pypressuredrop.model import WellModel, pressure_and_temp, pressures_and_temp
from pypressuredrop.correlations import HagedornAndBrown, DranchukAbouKassemZ
from pypressuredrop.errors import DimensionMismatchError


def _well(depth=6000, step=500):
    md = np.arange(0, depth + 1, step)
    return Wellbore(md, np.zeros(len(md)), md, 2.441)


def _model(**kwargs):
    args = dict(wellbore=_well(), roughness=0.0006, whp=150, dp_est=25, q_o=300, q_w=300, glr=500,
                api=35, sg_water=1.05, sg_gas=0.75, wht=100, bht=180)
    args.update(kwargs)
    return WellModel(**args)


# ============================================================================
#  Construction and defaults
# ============================================================================

def test_defaults():
    model = _model(sg_gas_inj=None, co2=0.02)
    assert model.temperature_method == 'linear'
    assert model.casing_temp_factor == 0.85
    assert abs(model.dp_est_inj - 2.5) < 1e-12
    assert model.error_tolerance == 0.1 and model.error_tolerance_inj == 0.05
    assert model.max_iterations == 25
    assert model.sg_gas_inj == 0.75
    assert model.co2_inj == 0.02 and model.h2s_inj == 0
    assert model.outlet_referenced
    assert model.chp is None and model.valves is None


def test_temperature_inputs_validated():
    try:
        _model(wht=None)
        assert False, "Linear temperature without wht should raise ValueError"
    except ValueError:
        pass
    try:
        _model(temperature_method='Shiu')
        assert False, "Shiu temperature without geothermal_gradient should raise ValueError"
    except ValueError:
        pass
    # A supplied profile waives the check
    model = _model(wht=None, bht=None, temperatureprofile=np.linspace(100, 180, 13))
    assert len(model.temperature()) == 13


def test_bad_correlation_tag():
    try:
        _model(z_correlation='XYZ')
        assert False, "Should have raised ValueError"
    except ValueError:
        pass


def test_correlations_resolved():
    model = _model(pressurecorrelation='hb', z_correlation='DAK')
    corr = model.correlations()
    assert isinstance(corr.pressurecorrelation, HagedornAndBrown)
    assert isinstance(corr.zfactor, DranchukAbouKassemZ)


def test_repr_lists_fields():
    text = repr(_model())
    assert text.startswith("WellModel")
    assert "whp: 150" in text
    assert "wellbore: Wellbore with 13 points." in text


# ============================================================================
#  Flow path and temperature caching
# ============================================================================

def test_flowpath_with_valves():
    valves = GasliftValves([1250, 3000, 4750], [1000, 950, 900], [0.1, 0.1, 0.1], [16, 16, 16])
    model = _model(valves=valves)
    path = model.flowpath()
    assert len(path) == 15  # 13 survey points, 3000 already present
    assert model.flowpath() is path
    assert len(model.wellbore) == 13


def test_temperature_cached():
    model = _model()
    t1 = model.temperature()
    cached = model._temperature_cache
    t2 = model.temperature()
    assert model._temperature_cache is cached, "Profile should not be recomputed"
    assert np.array_equal(t1, t2)
    t1[0] = -999
    assert model.temperature()[0] == 100, "Returned profile must not alias the cache"


def test_temperature_cache_invalidation():
    model = _model()
    t1 = model.temperature()
    model.bht = 220
    t2 = model.temperature()
    assert t2[-1] == 220 and t1[-1] == 180

    model.wellbore = _well(6000, 1000)
    assert len(model.temperature()) == 7

    cached = model._temperature_cache
    model.clear_cache()
    model.temperature()
    assert model._temperature_cache is not cached


def test_supplied_profile_length_checked():
    model = _model(temperatureprofile=[100, 150])
    try:
        model.temperature()
        assert False, "Should have raised DimensionMismatchError"
    except DimensionMismatchError:
        pass


def test_shiu_model_temperature():
    model = _model(temperature_method='Shiu', wht=None, geothermal_gradient=1.3)
    temps = model.temperature()
    assert abs(temps[-1] - 180) < 1e-9
    assert temps[0] > 180 - 1.3 * 60


# ============================================================================
#  Tubing and casing traverses
# ============================================================================

def test_pressure_and_temp():
    model = _model()
    pressures, temps = pressure_and_temp(model)
    assert len(pressures) == len(temps) == 13
    assert abs(pressures[0] - (150 + 14.696)) < 1e-9
    assert np.all(np.diff(pressures) > 0)
    assert temps[0] == 100 and temps[-1] == 180


def test_pressures_and_temp_requires_chp():
    try:
        pressures_and_temp(_model())
        assert False, "Should have raised ValueError"
    except ValueError:
        pass


def test_pressures_and_temp_shares_temperature():
    model = _model(chp=900)
    tubing, casing, temps = pressures_and_temp(model)
    single, temps_single = pressure_and_temp(model)
    assert np.array_equal(tubing, single)
    assert np.array_equal(temps, temps_single)
    assert abs(casing[0] - (900 + 14.696)) < 1e-9
    assert np.all(np.diff(casing) > 0)


def test_inputs_not_mutated():
    model = _model(chp=900)
    md_before = model.wellbore.md.copy()
    pressures_and_temp(model)
    assert np.array_equal(model.wellbore.md, md_before)
    assert model.temperatureprofile is None
